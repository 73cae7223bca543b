"""Display configuration shared by the CLI, diagnostics and result formatting."""
from pydantic import BaseModel, ConfigDict, Field


class CalculatorConfig(BaseModel):
    """Output settings of the calculator."""

    model_config = ConfigDict(frozen=True)

    term_width: int = Field(default=80, ge=20, description="Width of a diagnostic line, in characters")
    min_e_digits: int = Field(
        default=12,
        ge=1,
        le=17,
        description="Fractional digits printed, and the power of ten from which scientific notation is used",
    )


DEFAULT_CONFIG = CalculatorConfig()

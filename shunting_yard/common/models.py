"""Pydantic models for calculation requests and results."""
from typing import Optional

from pydantic import BaseModel, Field

from shunting_yard.common.errors import ErrorKind


class CalculationRequest(BaseModel):
    """A single arithmetic expression to evaluate."""

    expression: str = Field(..., description="Arithmetic expression as a string")


class CalculationResult(BaseModel):
    """
    Outcome of evaluating one expression.

    Exactly one of ``result`` and ``error`` is set.
    """

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result of the expression")
    error: Optional[ErrorKind] = Field(default=None, description="Kind of failure, if evaluation failed")
    column: Optional[int] = Field(default=None, ge=0, description="Zero-based column of the offending character")
    message: Optional[str] = Field(default=None, description="Short human-readable error message")

    @property
    def ok(self) -> bool:
        return self.error is None

"""Test models CalculationRequest and CalculationResult, and function calculate."""
from pydantic import ValidationError
import pytest

from shunting_yard.common.calculator import calculate
from shunting_yard.common.config import CalculatorConfig
from shunting_yard.common.errors import ErrorKind
from shunting_yard.common.models import CalculationRequest, CalculationResult


def test_calculation_request_valid() -> None:
    """Test that a valid CalculationRequest can be created."""
    req = CalculationRequest(expression="2 + 2 * 3")
    assert req.expression == "2 + 2 * 3"


def test_calculation_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        # int instead of str
        CalculationRequest(expression=123)


def test_calculation_result_invalid_result_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        CalculationResult(expression="2 + 2", result="not a float")


def test_calculation_result_negative_column() -> None:
    """Columns start at zero."""
    with pytest.raises(ValidationError):
        CalculationResult(expression="2 + 2", error=ErrorKind.SYNTAX, column=-1)


def test_calculate_success() -> None:
    """calculate returns the value and no error."""
    outcome = calculate("2+3*4")
    assert outcome.ok
    assert outcome.result == 14.0
    assert outcome.error is None
    assert outcome.column is None


def test_calculate_accepts_request() -> None:
    """calculate takes a request model as well as a string."""
    assert calculate(CalculationRequest(expression="(1+2)*3")).result == 9.0


@pytest.mark.parametrize("expr,kind,column", [
    ("2+3)", ErrorKind.RIGHT_PAREN, 3),
    ("(2+3", ErrorKind.LEFT_PAREN, 0),
    ("2..3", ErrorKind.SYNTAX_OPERAND, 0),
    ("2+", ErrorKind.SYNTAX_STACK, None),
    ("", ErrorKind.NO_INPUT, None),
])
def test_calculate_failure(expr: str, kind: ErrorKind, column) -> None:
    """calculate reports the error kind and column instead of raising."""
    outcome = calculate(expr)
    assert not outcome.ok
    assert outcome.result is None
    assert outcome.error == kind
    assert outcome.column == column
    assert outcome.message


def test_calculate_is_repeatable() -> None:
    """Two evaluations of the same string give equal outcomes."""
    assert calculate("-3! + 2^3^2") == calculate("-3! + 2^3^2")
    assert calculate("2#3") == calculate("2#3")


def test_config_is_frozen() -> None:
    """CalculatorConfig cannot be changed once built."""
    config = CalculatorConfig()
    with pytest.raises(ValidationError):
        config.term_width = 100


@pytest.mark.parametrize("kwargs", [{"term_width": 5}, {"min_e_digits": 0}, {"min_e_digits": 40}])
def test_config_bounds(kwargs) -> None:
    """Out-of-range display settings are rejected."""
    with pytest.raises(ValidationError):
        CalculatorConfig(**kwargs)

"""Test function trim_double."""
import math

import pytest

from shunting_yard.common.config import CalculatorConfig
from shunting_yard.common.formatting import trim_double


@pytest.mark.parametrize("value,expected", [
    (14.0, "14"),
    (100.0, "100"),
    (2.25, "2.25"),
    (0.1 + 0.2, "0.3"),
    (-6.0, "-6"),
    (0.0, "0"),
    (1e12, "1e+12"),
    (1.5e20, "1.5e+20"),
    (-2.5e15, "-2.5e+15"),
    (math.inf, "inf"),
    (-math.inf, "-inf"),
    (math.nan, "nan"),
])
def test_trim_double(value: float, expected: str) -> None:
    """Trailing zeros and a dangling point are removed, exponents kept."""
    assert trim_double(value) == expected


@pytest.mark.parametrize("value,expected", [
    (1234.0, "1.234e+03"),
    (999.5, "999.5"),
    (1 / 3, "0.333"),
])
def test_trim_double_with_fewer_digits(value: float, expected: str) -> None:
    """min_e_digits sets both the precision and the scientific threshold."""
    assert trim_double(value, CalculatorConfig(min_e_digits=3)) == expected

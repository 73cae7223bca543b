"""Turn a computed value into the text printed for the user."""
from typing import Optional

from shunting_yard.common.config import DEFAULT_CONFIG, CalculatorConfig


def _trim_zeros(digits: str) -> str:
    """Strip trailing zeros, and a dangling ".", from the fractional part."""
    if "." not in digits:
        return digits
    return digits.rstrip("0").rstrip(".")


def trim_double(value: float, config: Optional[CalculatorConfig] = None) -> str:
    """
    Format a float and remove insignificant trailing zeros.

    Values whose magnitude reaches ``10 ** config.min_e_digits`` use scientific
    notation, smaller ones fixed-point, both with ``min_e_digits`` fractional
    digits before trimming.

    >>> trim_double(2.5)
    '2.5'
    >>> trim_double(14.0)
    '14'
    >>> trim_double(1.5e20)
    '1.5e+20'

    :param float value: Number to format
    :param Optional[CalculatorConfig] config: Display settings, defaults apply if None

    :return: The formatted number
    :rtype: str
    """
    config = config or DEFAULT_CONFIG
    digits = config.min_e_digits

    if abs(value) >= 10 ** digits:
        mantissa, _, exponent = f"{value:.{digits}e}".partition("e")
        if not exponent:
            return mantissa  # inf
        return f"{_trim_zeros(mantissa)}e{exponent}"

    return _trim_zeros(f"{value:.{digits}f}")

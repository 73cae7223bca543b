"""Render evaluation errors for humans."""
from typing import Optional

from shunting_yard.common.config import DEFAULT_CONFIG, CalculatorConfig
from shunting_yard.common.errors import CalculationError, NoInputError


def format_diagnostic(error: CalculationError, config: Optional[CalculatorConfig] = None) -> str:
    """
    Build the message shown to the user for an evaluation error.

    When the error has a column, the message is followed by an excerpt of the
    expression and a second line with a caret under the offending character.
    The excerpt is cut to fit ``config.term_width`` and centred on the column.

    :param CalculationError error: The error raised by the parser
    :param Optional[CalculatorConfig] config: Display settings, defaults apply if None

    :return: One or two lines of text, without a trailing newline
    :rtype: str
    """
    if isinstance(error, NoInputError):
        return error.description

    config = config or DEFAULT_CONFIG
    message = f"Error: {error.description}"
    if error.column is None:
        return message

    message += ": "
    column = error.column + 1  # widths below start at 1
    msg_width = len(message)
    avail_width = max(config.term_width - msg_width, 1)
    start = max(column - avail_width // 2, 0)

    # Newlines end the expression, keep the excerpt on one line
    excerpt = error.expression[start:start + avail_width].split("\n", 1)[0]
    caret = "^".rjust(msg_width + column - start)
    return f"{message}{excerpt}\n{caret}"

"""Error kinds raised while evaluating an expression."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of an evaluation failure."""

    SYNTAX = "syntax"
    SYNTAX_STACK = "syntax_stack"
    SYNTAX_OPERAND = "syntax_operand"
    RIGHT_PAREN = "right_paren"
    LEFT_PAREN = "left_paren"
    UNRECOGNIZED = "unrecognized"
    NO_INPUT = "no_input"


class CalculationError(ValueError):
    """
    Base class of every evaluation failure.

    :param str expression: The expression being evaluated
    :param Optional[int] column: Zero-based column of the offending character,
        or None when the error is not tied to a position (end of input)
    """

    kind: ErrorKind = ErrorKind.SYNTAX
    description: str = "malformed expression"

    def __init__(self, expression: str, column: Optional[int] = None) -> None:
        self.expression = expression
        self.column = column
        if column is None:
            super().__init__(self.description)
        else:
            super().__init__(f"{self.description} (column {column + 1})")


class ExpressionSyntaxError(CalculationError):
    """An operator could not be applied: not enough operands."""

    kind = ErrorKind.SYNTAX


class StackSyntaxError(ExpressionSyntaxError):
    """Operators left over at the end of input could not be applied."""

    kind = ErrorKind.SYNTAX_STACK


class OperandSyntaxError(ExpressionSyntaxError):
    """A numeric literal is malformed (``.``, ``1 2``, ``1.2.3``)."""

    kind = ErrorKind.SYNTAX_OPERAND


class MismatchedRightParenError(CalculationError):
    kind = ErrorKind.RIGHT_PAREN
    description = "mismatched right parenthesis"


class UnclosedLeftParenError(CalculationError):
    kind = ErrorKind.LEFT_PAREN
    description = "mismatched (unclosed) left parenthesis"


class UnrecognizedCharacterError(CalculationError):
    kind = ErrorKind.UNRECOGNIZED
    description = "unrecognized character"


class NoInputError(CalculationError):
    kind = ErrorKind.NO_INPUT
    description = "This is a calculator - provide some math!"

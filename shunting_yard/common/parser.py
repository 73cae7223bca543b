"""Parse and evaluate arithmetic expressions safely."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from shunting_yard.common.errors import (
    ExpressionSyntaxError,
    MismatchedRightParenError,
    NoInputError,
    OperandSyntaxError,
    StackSyntaxError,
    UnclosedLeftParenError,
    UnrecognizedCharacterError,
)
from shunting_yard.common.logger import logger
from shunting_yard.common.stack import Stack


# Type alias for binary operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

OPERAND_CHARS = frozenset("0123456789.")
OPERATOR_CHARS = frozenset("+-*/^!")

# Precedence classes, highest first. "(" ranks lowest so it is never displaced.
# "!" is deliberately absent: see ExpressionParser.should_apply.
PRECEDENCE: Tuple[str, ...] = ("^", "*/", "+-", "(")


def _divide(a: float, b: float) -> float:
    """IEEE division: dividing by zero gives a signed infinity, or NaN for 0/0."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(a: float, b: float) -> float:
    """C ``pow`` semantics: overflow gives infinity, domain errors give NaN."""
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero raised to a negative power is a pole, anything else is a domain error
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


def _factorial(value: float) -> float:
    """Generalised factorial, Γ(value + 1)."""
    x = value + 1
    try:
        return math.gamma(x)
    except OverflowError:
        return math.inf
    except ValueError:
        # Poles at zero and the negative integers, and gamma(-inf)
        if x == 0:
            return math.copysign(math.inf, x)
        return math.nan


# Mapping of binary operator symbols to their function
BINARY_OPERATORS: Dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}

UNARY_OPERATORS: Dict[str, Callable[[float], float]] = {
    "+": lambda value: value,  # operands are never negative when scanned
    "-": operator.neg,
    "!": _factorial,
}


class OperatorEntry(NamedTuple):
    """An operator waiting on the operator stack."""

    symbol: str
    unary: bool = False


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - One left-to-right pass, no state kept between calls

    Algorithm (Shunting-yard, evaluated on the fly):
        1. Operand characters (digits and ".") are collected into a span;
           the span is parsed and pushed on the operand stack when the next
           significant character is reached
        2. Each operator first applies the stacked operators that bind at
           least as tightly, then waits on the operator stack itself
        3. A closing parenthesis applies everything back to its opening one
        4. At the end of input the remaining operators are applied; the
           single operand left is the result

    Examples:
        - ``2 + 3 * 4`` gives 14
        - ``-3!`` gives -6 (factorial binds tighter than unary minus)
        - ``2 ^ 3 ^ 2`` gives 64 (exponentiation is left-associative here)

    """

    @staticmethod
    def is_operand(char: Optional[str]) -> bool:
        """Return True for characters that belong to a numeric literal."""
        return char is not None and char in OPERAND_CHARS

    @staticmethod
    def is_operator(char: Optional[str]) -> bool:
        """Return True for ``+ - * / ^ !``."""
        return char is not None and char in OPERATOR_CHARS

    @staticmethod
    def is_unary(op: str, prev_char: Optional[str]) -> bool:
        """
        Decide whether an operator occurrence is unary.

        :param str op: Operator about to be pushed
        :param Optional[str] prev_char: Previous non-whitespace character, None at the start

        :return: True if the operator takes a single operand
        :rtype: bool
        """
        # A postfix "!" completes a value, so the next operator is binary
        if prev_char == "!" and op != "!":
            return False

        if prev_char is None or ExpressionParser.is_operator(prev_char):
            return True

        # Right paren counts as a completed operand for postfix factorial
        return op == "!" and (ExpressionParser.is_operand(prev_char) or prev_char == ")")

    @staticmethod
    def rank(symbol: str) -> int:
        """
        Return the precedence rank of an operator, 0 being the tightest.

        ``!`` is outside the table and ranks -1, above every class.
        """
        for index, group in enumerate(PRECEDENCE):
            if symbol in group:
                return index
        return -1

    @staticmethod
    def should_apply(top: OperatorEntry, op: str, unary: bool) -> bool:
        """
        Decide whether the stacked operator ``top`` is applied before pushing ``op``.

        :param OperatorEntry top: Operator on top of the stack
        :param str op: Incoming operator
        :param bool unary: Whether the incoming operator is unary

        :return: True if ``top`` must be applied now
        :rtype: bool
        """
        # A binary operator never steals the operand a unary one is waiting for
        if unary and not top.unary:
            return False

        # Postfix factorial binds to the operand just scanned
        if op == "!":
            return False

        top_rank = ExpressionParser.rank(top.symbol)
        op_rank = ExpressionParser.rank(op)
        if unary:
            # Consecutive prefix operators ("--5") resolve right to left
            return top_rank < op_rank
        return top_rank <= op_rank

    @staticmethod
    def apply_operator(symbol: str, unary: bool, operands: Stack[float]) -> bool:
        """
        Apply an operator to the top of the operand stack.

        :param str symbol: Operator symbol
        :param bool unary: Whether the operator takes a single operand
        :param Stack[float] operands: Operand stack, modified in place

        :return: True on success, False on underflow or unknown operator
        :rtype: bool
        """
        # Underflow indicates a syntax error
        if operands.is_empty():
            return False
        b = operands.pop()

        if unary:
            fn = UNARY_OPERATORS.get(symbol)
            if fn is None:
                return False
            operands.push(fn(b))
            return True

        binary_fn = BINARY_OPERATORS.get(symbol)
        if binary_fn is None or operands.is_empty():
            return False
        a = operands.pop()
        operands.push(binary_fn(a, b))
        return True

    @staticmethod
    def _push_operand(expr: str, start: int, end: int, operands: Stack[float]) -> None:
        """
        Validate the operand span ``expr[start:end]`` and push its value.

        :raises OperandSyntaxError: If the literal is ".", holds whitespace or several "."
        """
        text = expr[start:end].rstrip()
        if text == "." or any(c.isspace() for c in text) or text.count(".") > 1:
            raise OperandSyntaxError(expr, start)
        operands.push(float(text))

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression safely.

        :param str expr: Arithmetic expression string; a newline ends it

        :return: Computed result as float
        :rtype: float
        :raises CalculationError: The subclass matching the first problem found
        """
        logger.debug("Evaluating %r", expr)

        operands: Stack[float] = Stack()
        operators: Stack[OperatorEntry] = Stack()

        token_start: Optional[int] = None
        paren_depth = 0
        paren_pos: Optional[int] = None  # only used for error reporting
        prev_char: Optional[str] = None

        # One extra iteration: None stands for the end of the string
        for i in range(len(expr) + 1):
            char = expr[i] if i < len(expr) else None
            if char is not None and char != "\n" and char.isspace():
                continue

            if ExpressionParser.is_operand(char):
                if token_start is None:
                    token_start = i
                prev_char = char
                continue

            if token_start is not None:
                ExpressionParser._push_operand(expr, token_start, i, operands)
                token_start = None

            if ExpressionParser.is_operator(char):
                unary = ExpressionParser.is_unary(char, prev_char)
                while not operators.is_empty() and ExpressionParser.should_apply(operators.peek(), char, unary):
                    top = operators.pop()
                    if not ExpressionParser.apply_operator(top.symbol, top.unary, operands):
                        raise ExpressionSyntaxError(expr, i)
                operators.push(OperatorEntry(char, unary))

            elif char == "(":
                operators.push(OperatorEntry(char))
                paren_depth += 1
                if paren_depth == 1:
                    paren_pos = i

            elif char == ")":
                if not paren_depth:
                    raise MismatchedRightParenError(expr, i)

                # Apply operators back to the matching left paren
                while not operators.is_empty():
                    top = operators.pop()
                    if top.symbol == "(":
                        paren_depth -= 1
                        break
                    if not ExpressionParser.apply_operator(top.symbol, top.unary, operands):
                        raise ExpressionSyntaxError(expr, i)

            elif char is not None and char != "\n":
                raise UnrecognizedCharacterError(expr, i)

            if char == "\n":
                break
            prev_char = char

        if paren_depth:
            raise UnclosedLeftParenError(expr, paren_pos)

        # End of string: apply the remaining operators
        while not operators.is_empty():
            top = operators.pop()
            if not ExpressionParser.apply_operator(top.symbol, top.unary, operands):
                raise StackSyntaxError(expr)

        if operands.is_empty():
            raise NoInputError(expr)
        if len(operands) > 1:
            # Two values with nothing joining them, e.g. "(1)(2)"
            raise StackSyntaxError(expr)

        result = operands.pop()
        logger.debug("Evaluated %r = %r", expr, result)
        return result

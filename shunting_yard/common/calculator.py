"""Evaluate an expression into a result model instead of raising."""
from typing import Union

from shunting_yard.common.errors import CalculationError
from shunting_yard.common.models import CalculationRequest, CalculationResult
from shunting_yard.common.parser import ExpressionParser


def calculate(request: Union[CalculationRequest, str]) -> CalculationResult:
    """
    Evaluate an expression and report success or failure as a value.

    :param request: The expression, as a request model or a plain string

    :return: The result, or the error kind, column and message
    :rtype: CalculationResult
    """
    if isinstance(request, str):
        request = CalculationRequest(expression=request)

    try:
        value = ExpressionParser.evaluate(request.expression)
    except CalculationError as exc:
        return CalculationResult(
            expression=request.expression,
            error=exc.kind,
            column=exc.column,
            message=str(exc),
        )
    return CalculationResult(expression=request.expression, result=value)

"""Binary arithmetic on two numbers: parsing, evaluation and result formatting."""
import math
import operator
from typing import Tuple
from cli_toolkit.domain.errors import CalculationError, ExpressionParseError

OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": operator.pow,
    "%": math.fmod,
}


def _parse_number(token: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise ExpressionParseError(f"Invalid number: {token}") from None
    if math.isnan(value):
        raise ExpressionParseError(f"Invalid number: {token}")
    return value


def parse_expression(text: str) -> Tuple[float, str, float]:
    """Split "<number> <operator> <number>" into its three parts."""
    parts = text.split()
    if len(parts) != 3:
        raise ExpressionParseError("Usage: <number> <operator> <number>")

    left = _parse_number(parts[0])
    right = _parse_number(parts[2])
    return left, parts[1], right


def calculate(left: float, op: str, right: float) -> float:
    """Apply one of + - * / ^ % to two numbers.

    ``%`` keeps the sign of the left operand, like C's fmod.
    """
    func = OPERATORS.get(op)
    if func is None:
        raise CalculationError(
            f"Unknown operator: {op}\nSupported operators: {' '.join(OPERATORS)}"
        )
    if op in ("/", "%") and right == 0:
        raise CalculationError("Division by zero")

    try:
        result = func(left, right)
    except OverflowError:
        raise CalculationError("Result is too large") from None
    except ZeroDivisionError:
        raise CalculationError("Division by zero") from None
    except ValueError:
        # math.fmod on an infinite left operand
        raise CalculationError("Result is not a real number") from None
    if isinstance(result, complex):
        raise CalculationError("Result is not a real number")
    return float(result)


def format_result(value: float) -> str:
    """Render whole numbers without a decimal part."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def evaluate(text: str) -> str:
    """Parse, calculate and format a single expression."""
    left, op, right = parse_expression(text)
    return format_result(calculate(left, op, right))

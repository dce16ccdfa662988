"""Core arithmetic operations with zero-divisor and non-finite protection."""

import math
from typing import Callable

from calcengine.exceptions import DivisionByZeroError, NonFiniteResultError
from calcengine.state import Operator
from calcengine.validators import validate_number


def _finite(result: float, operation: str, a: float, b: float) -> float:
    if not math.isfinite(result):
        raise NonFiniteResultError(operation, a, b)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are NaN or infinite
        NonFiniteResultError: If the sum overflows
    """
    validate_number(a)
    validate_number(b)
    return _finite(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are NaN or infinite
        NonFiniteResultError: If the difference overflows
    """
    validate_number(a)
    validate_number(b)
    return _finite(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are NaN or infinite
        NonFiniteResultError: If the product overflows
    """
    validate_number(a)
    validate_number(b)
    return _finite(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    The zero check runs before dividing, so ``divide(a, 0)`` never
    reaches the floating point unit.

    Raises:
        InvalidInputError: If inputs are NaN or infinite
        DivisionByZeroError: If b is zero
        NonFiniteResultError: If the quotient overflows
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    return _finite(a / b, "division", a, b)


OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def apply_operator(op: Operator, a: float, b: float) -> float:
    """Apply ``op`` to ``a`` and ``b``, left operand first."""
    return OPERATIONS[op](a, b)

"""Input validation functions and named input guards."""

import math
import re

from calcengine.exceptions import InvalidInputError
from calcengine.state import ERROR_ENTRY, MAX_SAFE_INTEGER, Operator

DIGITS = frozenset("0123456789")

# Optional sign, digits, optional point and fraction; "3." is a valid partial entry
_PARTIAL_LITERAL = re.compile(r"^-?[0-9]+(\.[0-9]*)?$")


def validate_number(value: float) -> float:
    """
    Validate that an operand is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_digit(digit: str) -> str:
    """
    Validate a single decimal digit character.

    Raises:
        InvalidInputError: If digit is not one of '0'..'9'
    """
    if not isinstance(digit, str) or digit not in DIGITS:
        raise InvalidInputError(digit, "Expected a single digit 0-9")
    return digit


def validate_operator(op: "Operator | str") -> Operator:
    """
    Resolve an operator from an ``Operator`` or its key symbol.

    Raises:
        InvalidInputError: If op is not one of + - × ÷
    """
    try:
        return Operator(op)
    except ValueError:
        raise InvalidInputError(op, "Unknown operator") from None


def validate_entry(text: str) -> str:
    """
    Validate a partial numeric literal supplied by a programmatic caller.

    The ``"Error"`` sentinel is only ever produced by evaluation and is
    rejected here.

    Raises:
        InvalidInputError: If text is not a partial numeric literal
    """
    if not isinstance(text, str) or text == ERROR_ENTRY or not is_partial_literal(text):
        raise InvalidInputError(text, "Not a numeric literal")
    return text


def is_partial_literal(text: str) -> bool:
    return bool(_PARTIAL_LITERAL.match(text))


def has_decimal_point(entry: str) -> bool:
    return "." in entry


def exceeds_input_cap(entry: str, cap: int) -> bool:
    """True when ``entry`` is already at or beyond the typing cap."""
    return len(entry) >= cap


def exceeds_safe_integer(value: float) -> bool:
    """True when ``value`` is beyond the exactly representable integer range."""
    return not math.isnan(value) and abs(value) > MAX_SAFE_INTEGER

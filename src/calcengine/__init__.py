"""
Calculator engine for a four-function pocket calculator.

The package provides:
- An immediate-execute state machine for digit, decimal and operator keys
- Result formatting and display presentation rules
- Keyboard and button adapters that drive the engine identically
"""

from calcengine.adapters import ButtonPad, Display, Keyboard
from calcengine.config import CalculatorSettings, get_settings
from calcengine.engine import CalculatorEngine
from calcengine.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    NonFiniteResultError,
)
from calcengine.formatting import display_text, format_number, parse_entry
from calcengine.operations import add, apply_operator, divide, multiply, subtract
from calcengine.state import ERROR_ENTRY, MAX_SAFE_INTEGER, CalculatorState, Operator
from calcengine.validators import (
    exceeds_input_cap,
    exceeds_safe_integer,
    has_decimal_point,
    validate_digit,
    validate_entry,
    validate_number,
    validate_operator,
)

__all__ = [
    "ERROR_ENTRY",
    "MAX_SAFE_INTEGER",
    "ButtonPad",
    "CalculatorEngine",
    "CalculatorError",
    "CalculatorSettings",
    "CalculatorState",
    "Display",
    "DivisionByZeroError",
    "InvalidInputError",
    "Keyboard",
    "NonFiniteResultError",
    "Operator",
    "add",
    "apply_operator",
    "display_text",
    "divide",
    "exceeds_input_cap",
    "exceeds_safe_integer",
    "format_number",
    "get_settings",
    "has_decimal_point",
    "multiply",
    "parse_entry",
    "subtract",
    "validate_digit",
    "validate_entry",
    "validate_number",
    "validate_operator",
]

__version__ = "0.1.0"

"""Custom exceptions for the calculator engine."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator engine errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when the divisor of a division is zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class NonFiniteResultError(CalculatorError):
    """Raised when an operation produces NaN or infinity."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Non-finite result in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (NaN operand, bad key, malformed entry)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason

"""State record and operator definitions for the calculator engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

ERROR_ENTRY = "Error"
INITIAL_ENTRY = "0"

# Largest integer magnitude a double represents exactly (2**53 - 1)
MAX_SAFE_INTEGER = 9_007_199_254_740_991


class Operator(str, Enum):
    """Binary operators, valued by the symbol shown on the key."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    def __str__(self) -> str:
        return self.value


@dataclass
class CalculatorState:
    """
    Mutable state of a single calculator.

    ``pending_operand`` and ``pending_operator`` are either both set or
    both ``None``. ``current_entry`` is a (possibly partial) numeric
    literal such as ``"3."`` or the ``"Error"`` sentinel.
    """

    current_entry: str = INITIAL_ENTRY
    pending_operand: float | None = None
    pending_operator: Operator | None = None
    awaiting_fresh_entry: bool = False
    last_result: str | None = None
    is_initial: bool = True

    @property
    def has_pending_operation(self) -> bool:
        return self.pending_operand is not None and self.pending_operator is not None

    @property
    def is_error(self) -> bool:
        return self.current_entry == ERROR_ENTRY

    @property
    def is_entering(self) -> bool:
        """True while the user is actively typing a number."""
        return not self.awaiting_fresh_entry and not self.is_initial

    def clear_pending(self) -> None:
        self.pending_operand = None
        self.pending_operator = None

    def copy(self) -> CalculatorState:
        """Return a detached copy of this state."""
        return replace(self)

    def __str__(self) -> str:
        if self.has_pending_operation:
            return f"{self.pending_operand} {self.pending_operator} [{self.current_entry}]"
        return f"[{self.current_entry}]"

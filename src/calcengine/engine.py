"""Calculator engine: the immediate-execute input state machine."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from calcengine.config import CalculatorSettings, get_settings
from calcengine.exceptions import CalculatorError, InvalidInputError
from calcengine.formatting import display_text, format_number, parse_entry
from calcengine.operations import apply_operator
from calcengine.state import ERROR_ENTRY, INITIAL_ENTRY, CalculatorState, Operator
from calcengine.validators import (
    exceeds_input_cap,
    exceeds_safe_integer,
    has_decimal_point,
    validate_digit,
    validate_entry,
    validate_operator,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    Listener = Callable[["CalculatorEngine"], None]

logger = logging.getLogger(__name__)


class CalculatorEngine:
    """
    A four-function calculator driven one key at a time.

    Operations execute immediately and strictly left to right: pressing an
    operator while another one is pending resolves the pending one first.
    Input methods return ``True`` when the input was accepted and ``False``
    when a guard rejected it, in which case the state is untouched.

    Arithmetic failures never escape the engine. Division by zero and
    non-finite results put ``"Error"`` in the entry and clear the pending
    operation; ``reset`` (or simply typing a new number) recovers.

    Example:
        >>> engine = CalculatorEngine()
        >>> for key in "5+3":
        ...     _ = engine.input_digit(key) if key.isdigit() else engine.input_operator(key)
        >>> engine.evaluate()
        True
        >>> engine.entry
        '8'
    """

    def __init__(self, settings: CalculatorSettings | None = None) -> None:
        self._settings = settings or get_settings()
        self._state = CalculatorState()
        self._listeners: list[Listener] = []
        self.reset()

    @property
    def state(self) -> CalculatorState:
        """The live state record."""
        return self._state

    @property
    def settings(self) -> CalculatorSettings:
        return self._settings

    @property
    def entry(self) -> str:
        """Raw text of the current entry."""
        return self._state.current_entry

    @property
    def display(self) -> str:
        """Text a display surface should show for the current state."""
        return display_text(self._state, self._settings.display_length)

    def snapshot(self) -> CalculatorState:
        """Return a detached copy of the current state."""
        return self._state.copy()

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(engine)`` after every state change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _changed(self) -> None:
        for listener in self._listeners:
            listener(self)

    def _reject(self, reason: str, value: str) -> bool:
        logger.debug("Rejected %r: %s (entry=%r)", value, reason, self._state.current_entry)
        return False

    def _enter_error(self) -> None:
        state = self._state
        state.current_entry = ERROR_ENTRY
        state.clear_pending()
        state.awaiting_fresh_entry = True
        state.last_result = None
        state.is_initial = False

    def input_digit(self, digit: str) -> bool:
        """
        Type a digit.

        Starts a new entry after an operator, an evaluation or a reset;
        otherwise appends to the entry unless it is already at the input cap
        or the result would pass the safe-integer bound.

        Raises:
            InvalidInputError: If digit is not '0'..'9'
        """
        validate_digit(digit)
        state = self._state

        if state.awaiting_fresh_entry or state.is_initial:
            candidate = digit
        elif exceeds_input_cap(state.current_entry, self._settings.input_cap):
            return self._reject("input cap reached", digit)
        else:
            candidate = state.current_entry + digit

        if exceeds_safe_integer(parse_entry(candidate)):
            return self._reject("beyond safe integer range", digit)

        state.current_entry = candidate
        state.awaiting_fresh_entry = False
        state.is_initial = False
        self._changed()
        return True

    def input_decimal(self) -> bool:
        """Type a decimal point; an entry holds at most one."""
        state = self._state

        if has_decimal_point(state.current_entry):
            return self._reject("entry already has a decimal point", ".")
        elif state.awaiting_fresh_entry:
            state.current_entry = "0."
            state.awaiting_fresh_entry = False
        elif exceeds_input_cap(state.current_entry, self._settings.input_cap):
            return self._reject("input cap reached", ".")
        else:
            state.current_entry += "."

        state.is_initial = False
        self._changed()
        return True

    def input_operator(self, op: Operator | str) -> bool:
        """
        Select an operator.

        If an operation is pending and a second operand has been typed, it is
        evaluated first so chains run left to right. Pressing operators back
        to back only replaces the pending operator.

        Raises:
            InvalidInputError: If op is not one of + - × ÷
        """
        operator = validate_operator(op)
        state = self._state

        if state.has_pending_operation and not state.awaiting_fresh_entry:
            self.evaluate()

        state.pending_operand = parse_entry(state.current_entry)
        state.pending_operator = operator
        state.awaiting_fresh_entry = True
        state.is_initial = False
        logger.debug("Pending %s %s", state.pending_operand, operator)
        self._changed()
        return True

    def evaluate(self) -> bool:
        """
        Resolve the pending operation.

        Returns ``False`` without touching the state when nothing is pending.
        With no second operand typed, the displayed entry (the first operand)
        is reused, so ``5 + =`` gives ``10``.
        """
        state = self._state
        if not state.has_pending_operation:
            return False

        left, operator = state.pending_operand, state.pending_operator
        right = parse_entry(state.current_entry)
        try:
            result = apply_operator(operator, left, right)
        except CalculatorError as exc:
            logger.warning("Evaluation of %s %s %r failed: %s", left, operator, state.current_entry, exc)
            self._enter_error()
            self._changed()
            return True

        text = format_number(result)
        state.current_entry = text
        state.last_result = text
        state.clear_pending()
        state.awaiting_fresh_entry = True
        state.is_initial = False
        logger.debug("Evaluated %s %s %s = %s", left, operator, right, text)
        self._changed()
        return True

    def reset(self) -> None:
        """Return to the initial state from any state."""
        state = self._state
        state.current_entry = INITIAL_ENTRY
        state.clear_pending()
        state.awaiting_fresh_entry = False
        state.last_result = None
        state.is_initial = True
        self._changed()

    clear = reset

    def backspace(self) -> None:
        """
        Remove the last character of the entry.

        A single remaining character, the ``"Error"`` sentinel, or a bare
        sign left behind all fall back to the ``"0"`` placeholder. The
        pending operation is never touched.
        """
        state = self._state
        entry = state.current_entry

        if entry == ERROR_ENTRY or len(entry) <= 1:
            candidate = ""
        else:
            candidate = entry[:-1]
            if math.isnan(parse_entry(candidate)):
                # "1.5e+" or a bare "-": drop the dangling exponent marker or sign
                candidate = candidate.rstrip("e+-")

        if not candidate:
            state.current_entry = INITIAL_ENTRY
            state.is_initial = True
        else:
            state.current_entry = candidate
        self._changed()

    def load_entry(self, text: str) -> None:
        """
        Place ``text`` in the entry as if it had been typed.

        Raises:
            InvalidInputError: If text is not a partial numeric literal or is
                longer than the input cap
        """
        validate_entry(text)
        if len(text) > self._settings.input_cap:
            raise InvalidInputError(text, "Entry exceeds input cap")

        state = self._state
        state.current_entry = text
        state.awaiting_fresh_entry = False
        state.is_initial = False
        self._changed()

    def __repr__(self) -> str:
        return f"CalculatorEngine(state={self._state!s})"

"""Input and output adapters between a UI and the calculator engine.

The engine knows nothing about buttons, keys or screens. A UI wires its
buttons to :class:`ButtonPad`, its key events to :class:`Keyboard`, and its
text surface to :class:`Display`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from calcengine.exceptions import InvalidInputError
from calcengine.state import Operator
from calcengine.validators import DIGITS

if TYPE_CHECKING:
    from collections.abc import Callable

    from calcengine.engine import CalculatorEngine

logger = logging.getLogger(__name__)

CLEAR_BUTTON = "clear"
EQUALS_BUTTON = "equals"
DECIMAL_BUTTON = "."
OPERATOR_BUTTONS = frozenset(op.value for op in Operator)


class Display:
    """A text surface showing the engine's display string."""

    def __init__(self) -> None:
        self.text = ""

    def render(self, text: str) -> None:
        self.text = text

    def refresh(self, engine: CalculatorEngine) -> None:
        self.render(engine.display)

    def attach(self, engine: CalculatorEngine) -> Display:
        """Follow ``engine``: render now and after every state change."""
        engine.subscribe(self.refresh)
        self.refresh(engine)
        return self


class ButtonPad:
    """
    Pointer path into the engine.

    Buttons are named by their label: ``"0"``..``"9"``, ``"."``, the operator
    symbols ``+ - × ÷``, and the actions ``"clear"`` and ``"equals"``.
    """

    def __init__(self, engine: CalculatorEngine) -> None:
        self.engine = engine

    def press(self, button: str) -> None:
        """
        Press a button.

        Raises:
            InvalidInputError: If no such button exists
        """
        engine = self.engine
        if button in DIGITS:
            engine.input_digit(button)
        elif button == DECIMAL_BUTTON:
            engine.input_decimal()
        elif button == CLEAR_BUTTON:
            engine.clear()
        elif button == EQUALS_BUTTON:
            engine.evaluate()
        elif button in OPERATOR_BUTTONS:
            engine.input_operator(Operator(button))
        else:
            raise InvalidInputError(button, "Unknown button")


class Keyboard:
    """
    Key path into the engine.

    ``handle`` returns ``True`` for bound keys, telling the caller to
    suppress the key's default action. Unbound keys return ``False`` and
    change nothing.
    """

    def __init__(self, engine: CalculatorEngine) -> None:
        self.engine = engine
        self._bindings: dict[str, Callable[[], object]] = {
            ".": engine.input_decimal,
            ",": engine.input_decimal,
            "+": lambda: engine.input_operator(Operator.ADD),
            "-": lambda: engine.input_operator(Operator.SUBTRACT),
            "*": lambda: engine.input_operator(Operator.MULTIPLY),
            "/": lambda: engine.input_operator(Operator.DIVIDE),
            "Enter": engine.evaluate,
            "=": engine.evaluate,
            "Escape": engine.reset,
            "c": engine.reset,
            "C": engine.reset,
            "Backspace": engine.backspace,
        }

    @property
    def bound_keys(self) -> frozenset[str]:
        return frozenset(self._bindings) | DIGITS

    def handle(self, key: str) -> bool:
        if key in DIGITS:
            self.engine.input_digit(key)
            return True

        action = self._bindings.get(key)
        if action is None:
            logger.debug("Ignoring unbound key %r", key)
            return False

        action()
        return True

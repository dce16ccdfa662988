"""Pytest configuration and shared fixtures."""

import math
import os

import pytest
from hypothesis import Verbosity, settings

from calcengine import ButtonPad, CalculatorEngine, CalculatorSettings, Keyboard

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


def _comparable(state):
    operand = state.pending_operand
    if operand is not None and math.isnan(operand):
        operand = "nan"
    return (
        state.current_entry,
        operand,
        state.pending_operator,
        state.awaiting_fresh_entry,
        state.last_result,
        state.is_initial,
    )


@pytest.fixture
def comparable():
    """State as a tuple where NaN operands compare equal."""
    return _comparable


@pytest.fixture
def engine_settings():
    """Default settings, independent of the process environment."""
    return CalculatorSettings(_env_file=None, input_cap=12, display_length=12)


@pytest.fixture
def engine(engine_settings):
    """Provide a fresh CalculatorEngine."""
    return CalculatorEngine(engine_settings)


@pytest.fixture
def wide_engine():
    """Provide an engine that accepts 20-character entries."""
    return CalculatorEngine(CalculatorSettings(_env_file=None, input_cap=20, display_length=12))


@pytest.fixture
def pad(engine):
    return ButtonPad(engine)


@pytest.fixture
def keyboard(engine):
    return Keyboard(engine)


@pytest.fixture
def press(pad):
    """Press a sequence of buttons: ``press("5", "+", "3", "equals")``."""

    def _press(*buttons):
        for button in buttons:
            pad.press(button)
        return pad.engine

    return _press

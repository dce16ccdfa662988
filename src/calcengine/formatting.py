"""Number parsing, result formatting and display presentation."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import TYPE_CHECKING

from calcengine.state import ERROR_ENTRY, MAX_SAFE_INTEGER

if TYPE_CHECKING:
    from calcengine.state import CalculatorState

# Display limits
MAX_RESULT_LENGTH = 20
DEFAULT_DISPLAY_LENGTH = 12
SCIENTIFIC_DIGITS = 6
ROUNDING_PLACES = 10

LARGE_MAGNITUDE = 1e15
SMALL_MAGNITUDE = 1e-6
DISPLAY_FORMAT_MAGNITUDE = 1e10
DISPLAY_FORMAT_FRACTION_DIGITS = 6

_NUMERIC_LITERAL = re.compile(r"^-?[0-9]+(\.[0-9]*)?(e[+-]?[0-9]+)?$")


def parse_entry(text: str) -> float:
    """
    Parse an entry string into a float.

    Accepts partial literals such as ``"3."`` and the scientific form
    produced by :func:`format_number`. Anything else, the ``"Error"``
    sentinel included, parses to NaN; this function never raises.
    """
    if not isinstance(text, str) or not _NUMERIC_LITERAL.match(text):
        return math.nan
    return float(text)


def to_scientific(x: float, digits: int = SCIENTIFIC_DIGITS) -> str:
    """
    Render ``x`` as ``d.dddddde±N``.

    The exponent carries an explicit sign and no zero padding, so
    ``1.5e15`` renders as ``1.500000e+15`` and ``1e-7`` as ``1.000000e-7``.
    """
    mantissa, exponent = f"{x:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def _positional(x: float) -> str:
    """Shortest round-tripping decimal string without an exponent."""
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_number(x: float) -> str:
    """
    Format a computed result for the entry and the display.

    Rules, in order:
        1. NaN and infinities become ``"Error"``.
        2. Zero (either sign) becomes ``"0"``.
        3. Magnitudes beyond the safe-integer bound, at or above 1e15, or
           below 1e-6 use scientific notation with 6 fractional digits.
        4. Everything else is rounded to 10 decimal places and rendered
           positionally with trailing zeros removed.
        5. A positional rendering longer than 20 characters falls back to
           scientific notation.

    Example:
        >>> format_number(0.1 + 0.2)
        '0.3'
        >>> format_number(1e16)
        '1.000000e+16'
    """
    if not math.isfinite(x):
        return ERROR_ENTRY

    if x == 0:
        return "0"

    magnitude = abs(x)
    if magnitude > MAX_SAFE_INTEGER or magnitude >= LARGE_MAGNITUDE or magnitude < SMALL_MAGNITUDE:
        return to_scientific(x)

    text = _positional(round(x, ROUNDING_PLACES))
    if len(text) > MAX_RESULT_LENGTH:
        return to_scientific(x)

    return text


def _fraction_digits(text: str) -> int:
    mantissa = text.split("e")[0]
    if "." not in mantissa:
        return 0
    return len(mantissa.split(".", 1)[1])


def display_text(state: CalculatorState, max_length: int = DEFAULT_DISPLAY_LENGTH) -> str:
    """
    Decide what the display shows for ``state``.

    While the user is typing the raw entry is shown verbatim so partial
    input like ``"3."`` survives. Results and the initial placeholder are
    re-formatted only when they carry more than 6 fractional digits or
    reach 1e10. Anything still longer than ``max_length`` is re-formatted,
    or truncated when it does not parse.
    """
    text = state.current_entry
    if text == ERROR_ENTRY:
        return text

    if not state.is_entering:
        value = parse_entry(text)
        if not math.isnan(value) and (
            _fraction_digits(text) > DISPLAY_FORMAT_FRACTION_DIGITS
            or abs(value) >= DISPLAY_FORMAT_MAGNITUDE
        ):
            text = format_number(value)

    if len(text) > max_length:
        value = parse_entry(text)
        if math.isnan(value):
            text = text[:max_length]
        else:
            text = format_number(value)

    return text

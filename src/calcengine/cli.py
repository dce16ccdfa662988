"""Command-line front end that types keys into a calculator.

Usage:
    calcengine "5+3="                  # prints 8
    calcengine --trace "12.5*4{Enter}" # prints the display after every key
    calcengine "99{Backspace}{Escape}"
"""

from __future__ import annotations

import logging
import re

import click

from calcengine.adapters import Display, Keyboard
from calcengine.config import get_settings
from calcengine.engine import CalculatorEngine

# "{Enter}" style tokens name a key; every other character is a key itself
_KEY_TOKEN = re.compile(r"\{(\w+)\}|(.)", re.DOTALL)


def split_keys(keys: str) -> list[str]:
    """Split a key string into key names: ``"1{Enter}"`` -> ``["1", "Enter"]``."""
    return [named or char for named, char in _KEY_TOKEN.findall(keys)]


@click.command()
@click.argument("keys")
@click.option("--trace", is_flag=True, default=False, help="Print the display after every key")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override CALCENGINE_LOG_LEVEL",
)
def main(keys: str, trace: bool, log_level: str | None) -> None:
    """Type KEYS into a fresh calculator and print what the display shows."""
    settings = get_settings()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = CalculatorEngine(settings)
    display = Display().attach(engine)
    keyboard = Keyboard(engine)

    for key in split_keys(keys):
        handled = keyboard.handle(key)
        if trace:
            marker = "" if handled else " (ignored)"
            click.echo(f"{key} -> {display.text}{marker}")

    if not trace:
        click.echo(display.text)


if __name__ == "__main__":
    main()

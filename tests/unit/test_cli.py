"""Unit tests for the command-line front end."""

import pytest
from click.testing import CliRunner

from calcengine.cli import main, split_keys


@pytest.fixture
def runner():
    return CliRunner()


class TestSplitKeys:
    """Tests for key string tokenizing."""

    def test_characters(self):
        assert split_keys("5+3=") == ["5", "+", "3", "="]

    def test_named_keys(self):
        assert split_keys("12{Backspace}{Enter}") == ["1", "2", "Backspace", "Enter"]

    def test_unclosed_brace_is_a_key(self):
        assert split_keys("{Enter") == ["{", "E", "n", "t", "e", "r"]


class TestMain:
    """Tests for the calcengine command."""

    def test_prints_result(self, runner):
        result = runner.invoke(main, ["5+3="])
        assert result.exit_code == 0
        assert result.output == "8\n"

    def test_division_by_zero(self, runner):
        result = runner.invoke(main, ["10/0{Enter}"])
        assert result.exit_code == 0
        assert result.output == "Error\n"

    def test_clear_key(self, runner):
        result = runner.invoke(main, ["7*6=C"])
        assert result.output == "0\n"

    def test_trace(self, runner):
        result = runner.invoke(main, ["--trace", "1+x"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1 -> 1", "+ -> 1", "x -> 1 (ignored)"]

    def test_log_level_option(self, runner):
        result = runner.invoke(main, ["--log-level", "debug", "2*3="])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "6"

"""Tests for CLI error formatting and argument parsing helpers."""

import pytest

from pathlang.core.errors import PathlangCliError, parse_line_range


class TestPathlangCliError:
    """Tests for PathlangCliError formatting."""

    def test_message_without_hint(self) -> None:
        error = PathlangCliError("Something failed")
        assert error.format_message() == "Something failed"

    def test_message_with_hint(self) -> None:
        error = PathlangCliError("Unknown language", hint="Run 'pathlang languages'")
        assert error.format_message() == "Unknown language\nHint: Run 'pathlang languages'"

    def test_exit_code(self) -> None:
        assert PathlangCliError("x").exit_code == 1


class TestParseLineRange:
    """Tests for parse_line_range."""

    def test_single_line(self) -> None:
        assert parse_line_range("5") == (4, 4)

    def test_range(self) -> None:
        assert parse_line_range("2-7") == (1, 6)

    @pytest.mark.parametrize("value", ["", "abc", "3-", "-3", "0", "5-2", "1-x"])
    def test_invalid_values(self, value: str) -> None:
        with pytest.raises(PathlangCliError, match="Invalid line range"):
            parse_line_range(value)

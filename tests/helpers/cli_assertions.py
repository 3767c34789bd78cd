"""CLI output assertion helpers for reducing test brittleness.

These helpers prioritize semantic assertions (exit codes, file existence) over
exact string matching. When output validation is necessary, they use regex
patterns to be resilient to cosmetic changes like emoji or wording updates.

Available helpers:
- assert_command_success/failed: Exit code validation
- assert_output_matches/contains: Pattern and substring matching
- assert_error_message/success_indicator: Error and success detection
- assert_files_created: Semantic file existence checks
- assert_has_line_numbers: Line number format detection
"""

import re
from pathlib import Path

from click.testing import Result


def assert_command_success(result: Result, *, context: str = "") -> None:
    """Assert that a CLI command succeeded.

    Args:
        result: Click test runner Result object.
        context: Optional context string for error messages.

    Example:
        result = runner.invoke(cli, ["detect", "a.py"])
        assert_command_success(result, context="pathlang detect")
    """
    ctx = f" ({context})" if context else ""
    assert result.exit_code == 0, (
        f"Command failed{ctx}:\n"
        f"  Exit code: {result.exit_code}\n"
        f"  Output: {result.output[:500]}"
    )


def assert_command_failed(
    result: Result,
    *,
    expected_code: int = 1,
    context: str = "",
) -> None:
    """Assert that a CLI command failed with expected exit code.

    Args:
        result: Click test runner Result object.
        expected_code: Expected non-zero exit code (default: 1).
        context: Optional context string for error messages.
    """
    ctx = f" ({context})" if context else ""
    assert result.exit_code == expected_code, (
        f"Expected command to fail{ctx} with code {expected_code}, "
        f"but got {result.exit_code}:\n"
        f"  Output: {result.output[:500]}"
    )


def assert_output_matches(
    result: Result,
    pattern: str,
    *,
    flags: int = 0,
    context: str = "",
) -> re.Match[str]:
    """Assert that output matches a regex pattern.

    Returns:
        The regex Match object for further inspection if needed.
    """
    ctx = f" ({context})" if context else ""
    match = re.search(pattern, result.output, flags)
    assert match is not None, (
        f"Pattern not found{ctx}:\n"
        f"  Pattern: {pattern}\n"
        f"  Output: {result.output[:500]}"
    )
    return match


def assert_output_contains(
    result: Result,
    *substrings: str,
    case_sensitive: bool = True,
    context: str = "",
) -> None:
    """Assert that output contains all specified substrings.

    Example:
        assert_output_contains(result, "Error", "pathlang languages")
    """
    ctx = f" ({context})" if context else ""
    output = result.output if case_sensitive else result.output.lower()

    for substring in substrings:
        check = substring if case_sensitive else substring.lower()
        assert check in output, (
            f"Substring not found{ctx}:\n"
            f"  Expected: {substring!r}\n"
            f"  Output: {result.output[:500]}"
        )


def assert_error_message(result: Result, *, hint: str | None = None) -> None:
    """Assert that output contains an error indication.

    Args:
        result: Click test runner Result object (should have non-zero exit code).
        hint: Optional substring that should appear as a hint.
    """
    has_error = re.search(r"error", result.output, re.IGNORECASE) is not None
    assert has_error, (
        f"Expected error message in output:\n"
        f"  Output: {result.output[:500]}"
    )

    if hint:
        assert hint in result.output, (
            f"Expected hint '{hint}' in error output:\n"
            f"  Output: {result.output[:500]}"
        )


def assert_success_indicator(result: Result) -> None:
    """Assert that output contains a success indicator (checkmark or wording)."""
    success_patterns = [
        r"[✓✔]",
        r"success",
        r"created",
    ]
    pattern = "|".join(success_patterns)
    has_success = re.search(pattern, result.output, re.IGNORECASE) is not None
    assert has_success, (
        f"Expected success indicator in output:\n"
        f"  Output: {result.output[:500]}"
    )


def assert_files_created(
    base_path: Path,
    *relative_paths: str,
) -> None:
    """Assert that files were created at specified paths.

    Example:
        assert_files_created(tmp_path / ".pathlang", "config.toml")
    """
    for rel_path in relative_paths:
        full_path = base_path / rel_path
        assert full_path.exists(), f"Expected file not created: {full_path}"


def assert_has_line_numbers(result: Result, *, context: str = "") -> None:
    """Assert that output contains padded line numbers at line starts."""
    ctx = f" ({context})" if context else ""

    # Padded number followed by a space, optionally wrapped in ANSI dim codes
    line_number_pattern = r"^(\x1b\[\d+m)?\s*\d+ "

    lines = result.output.split("\n")
    has_line_numbers = any(re.match(line_number_pattern, line) for line in lines)

    assert has_line_numbers, (
        f"Expected line numbers in output{ctx}:\n"
        f"  Pattern: {line_number_pattern!r}\n"
        f"  First 5 lines: {lines[:5]}"
    )

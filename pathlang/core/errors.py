"""CLI error handling with actionable hints.

Provides consistent error formatting for all pathlang CLI commands.
"""

import click


class PathlangCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise PathlangCliError(
            "Unknown language: 'cobol'",
            hint="Run 'pathlang languages' to list registered language ids",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present.

        Returns:
            Formatted error message, with hint on a new line if provided.
        """
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def parse_line_range(value: str) -> tuple[int, int]:
    """Parse a 1-based "A" or "A-B" line range into 0-based inclusive bounds.

    Raises:
        PathlangCliError: If the value is not a valid range.
    """
    start_text, sep, end_text = value.partition("-")
    try:
        start = int(start_text)
        end = int(end_text) if sep else start
    except ValueError:
        raise PathlangCliError(
            f"Invalid line range: {value!r}",
            hint="Use a line number like '5' or a range like '5-12'",
        ) from None
    if start < 1 or end < start:
        raise PathlangCliError(
            f"Invalid line range: {value!r}",
            hint="Line numbers start at 1 and the range end must not precede its start",
        )
    return start - 1, end - 1

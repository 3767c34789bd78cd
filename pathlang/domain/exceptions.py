"""Domain exceptions for pathlang.

These exceptions represent invalid requests against the language registry.
Path lookups never raise; they return a no-match value instead. The errors
below are caught at the application boundary (CLI) and converted to
user-facing messages.
"""


class PathlangDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class UnknownLanguageError(PathlangDomainError):
    """Raised when a language id is not in the registry."""

    def __init__(self, language_id: str) -> None:
        super().__init__(
            f"Unknown language: {language_id!r}",
            hint="Run 'pathlang languages' to list registered language ids",
        )
        self.language_id = language_id


class InvalidLineRangeError(PathlangDomainError):
    """Raised when a line selection falls outside the content."""

    pass

"""Language server ids for resolved languages.

Language servers expect their own ids, which differ from registry ids for a
few languages (bash is "shell", tsx is served as "typescript").
"""

from typing import Final

from pathlang.core.languages import PLAINTEXT_HIGHLIGHTER, PLAINTEXT_LANGUAGE, language_from_path

SUPPORTED_LSP_LANGUAGES: Final = frozenset(
    {
        "typescript",
        "javascript",
        "json",
        "css",
        "scss",
        "less",
        "html",
        "markdown",
        "rust",
        "python",
        "go",
        "yaml",
        "toml",
        "shell",
    }
)

_LSP_ALIASES: Final = {
    "bash": "shell",
    "tsx": "typescript",
    "jsx": "javascript",
    # Registry id for .html files; buffers opened with the "html" highlighter
    # id already resolve directly
    "markup": "html",
}


def lsp_language_id(path: str | None, language: str | None = None) -> str | None:
    """Get the language server id for a file.

    Args:
        path: File path used when no language is given.
        language: Already known language id (e.g., from an open buffer).
            Any non-None value, including "", is used instead of the path.

    Returns:
        Language server id, or None for plain text, unknown files, and
        languages without a supported server.
    """
    raw = language if language is not None else language_from_path(path)
    if not raw:
        return None
    mapped = _LSP_ALIASES.get(raw, raw)
    if mapped in (PLAINTEXT_LANGUAGE, PLAINTEXT_HIGHLIGHTER):
        return None
    return mapped if mapped in SUPPORTED_LSP_LANGUAGES else None

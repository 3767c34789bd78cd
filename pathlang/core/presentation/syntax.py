"""Syntax highlighting and snippet formatting for resolved languages.

Provides HTML highlighting for single editor lines, ANSI highlighting for
terminal output, and fenced reference snippets for line selections. Language
ids come from the registry in pathlang.core.languages; Pygments does the
tokenizing.
"""

import html
from typing import TYPE_CHECKING, Any

from pathlang.core.languages import language_from_path
from pathlang.domain.exceptions import InvalidLineRangeError

if TYPE_CHECKING:
    from pygments.lexer import Lexer
    from pygments.token import _TokenType


class AnsiCodes:
    """ANSI escape codes for terminal coloring.

    Uses standard 16-color palette that adapts to terminal themes.
    """

    RESET = "\x1b[0m"
    DIM = "\x1b[2m"

    # Foreground colors (90-97 are bright variants)
    DARK_GRAY = "\x1b[90m"
    GREEN = "\x1b[92m"
    BLUE = "\x1b[94m"
    MAGENTA = "\x1b[95m"
    CYAN = "\x1b[96m"
    WHITE = "\x1b[97m"


# Language ids whose Pygments lexer goes by a different name
LANGUAGE_TO_LEXER: dict[str, str] = {
    "markup": "html",
    "jsx": "javascript",
    "tsx": "typescript",
    "dockerfile": "docker",
    "text": "text",
}


def lexer_name_for(language: str) -> str:
    """Get the Pygments lexer name for a language id."""
    return LANGUAGE_TO_LEXER.get(language, language)


def _find_lexer(language: str | None, **options: Any) -> "Lexer | None":
    """Look up a Pygments lexer for a language id.

    Args:
        language: Language id (e.g., "python", "tsx"), or None.
        **options: Lexer options passed through to Pygments.

    Returns:
        A lexer instance, or None if Pygments has no lexer for the language.
    """
    from pygments.lexers import get_lexer_by_name
    from pygments.util import ClassNotFound

    if not language:
        return None
    try:
        return get_lexer_by_name(lexer_name_for(language), **options)
    except ClassNotFound:
        return None


def escape_html(text: str) -> str:
    """Escape &, < and > for embedding text in HTML."""
    return html.escape(text, quote=False)


def highlight_line(text: str, language: str | None) -> str:
    """Highlight a single line of code as HTML.

    Args:
        text: Source text to highlight.
        language: Language id. Unknown or missing languages are not
            highlighted.

    Returns:
        HTML markup with Pygments token spans, or the escaped text when no
        lexer is available for the language.
    """
    from pygments import highlight
    from pygments.formatters import HtmlFormatter

    lexer = _find_lexer(language)
    if lexer is None:
        return escape_html(text)

    result = highlight(text, lexer, HtmlFormatter(nowrap=True))
    # Lexers append a newline when the input lacks one
    if not text.endswith("\n") and result.endswith("\n"):
        result = result[:-1]
    return result


def _get_token_color_map() -> dict["_TokenType", str]:
    """Get the mapping from Pygments token types to ANSI color codes."""
    from pygments.token import Token

    return {
        Token.Keyword: AnsiCodes.MAGENTA,
        Token.Name.Function: AnsiCodes.BLUE,
        Token.Name.Class: AnsiCodes.BLUE,
        Token.String: AnsiCodes.GREEN,
        Token.Comment: AnsiCodes.DARK_GRAY,
        Token.Number: AnsiCodes.CYAN,
        Token.Operator: AnsiCodes.WHITE,
    }


def _find_token_color(
    token_type: "_TokenType", color_map: dict["_TokenType", str]
) -> str | None:
    """Find the color for a token, checking parent token types.

    Pygments tokens form a hierarchy (e.g., Token.Keyword.Namespace), so the
    token and each of its ancestors are checked.
    """
    for ttype in [token_type] + list(token_type.split()):
        if ttype in color_map:
            return color_map[ttype]
    return None


def _colorize_text(text: str, color: str | None) -> str:
    if color and text:
        return f"{color}{text}{AnsiCodes.RESET}"
    return text


def _format_line_number(line_num: int) -> str:
    """Format a line number right-aligned to 4 chars and dimmed."""
    return f"{AnsiCodes.DIM}{line_num:>4} {AnsiCodes.RESET}"


def render_syntax_highlighted(
    code: str,
    language: str | None = None,
    path: str | None = None,
    start_line: int = 1,
) -> str:
    """Render code with syntax highlighting using terminal colors.

    Args:
        code: Code content to highlight.
        language: Language id. If None, resolved from path.
        path: Optional file path for language detection.
        start_line: Starting line number for display.

    Returns:
        Highlighted code with line numbers, ready for terminal output.
    """
    from pygments import lex
    from pygments.lexers import TextLexer

    # Leading blank lines must survive so line numbers match the file
    lexer = _find_lexer(language or language_from_path(path), stripnl=False)
    if lexer is None:
        lexer = TextLexer(stripnl=False)
    color_map = _get_token_color_map()

    result_lines: list[str] = []
    current_line: list[str] = []
    line_num = start_line

    for token_type, value in lex(code, lexer):
        color = _find_token_color(token_type, color_map)

        # Tokens may span lines
        parts = value.split("\n")
        for i, part in enumerate(parts):
            if i > 0:
                result_lines.append(f"{_format_line_number(line_num)}{''.join(current_line)}")
                current_line = []
                line_num += 1
            if part:
                current_line.append(_colorize_text(part, color))

    # Always output at least one line
    if current_line or not result_lines:
        result_lines.append(f"{_format_line_number(line_num)}{''.join(current_line)}")

    return "\n".join(result_lines)


def render_plain(code: str, start_line: int = 1) -> str:
    """Render code with plain right-aligned line numbers."""
    lines = code.split("\n")
    if code.endswith("\n"):
        lines.pop()
    return "\n".join(
        f"{num:>4} {line}" for num, line in enumerate(lines or [""], start=start_line)
    )


def format_line_range(start: int, end: int) -> str:
    """Format a 0-based inclusive line range as an "L1" or "L1-L3" label."""
    first, last = start + 1, end + 1
    return f"L{first}" if first == last else f"L{first}-L{last}"


def format_snippet(path: str, content: str, start: int, end: int) -> str:
    """Format a selection of lines as a fenced reference snippet.

    The fence is tagged with the language resolved from the path, or left
    bare for unknown files.

    Args:
        path: Path of the file the lines come from.
        content: Full file content.
        start: First selected line, 0-based.
        end: Last selected line, 0-based and inclusive.

    Returns:
        Snippet such as "src/app.py:L2-L3" followed by a fenced block.

    Raises:
        InvalidLineRangeError: If the range is empty or outside the content.
    """
    lines = content.split("\n")
    if start < 0 or end < start or end >= len(lines):
        raise InvalidLineRangeError(
            f"Invalid line range {start + 1}-{end + 1} for {path} "
            f"({len(lines)} lines)",
            hint="Line numbers are 1-based and the range must be inside the file",
        )

    language = language_from_path(path)
    fence = f"```{language}" if language else "```"
    selected = "\n".join(lines[start : end + 1])
    return f"{path}:{format_line_range(start, end)}\n{fence}\n{selected}\n```"

"""Presentation layer for highlighted and fenced output.

Components:
- highlight_line: HTML highlighting for a single editor line
- render_syntax_highlighted: ANSI highlighting for terminal output
- format_snippet: Fenced reference snippet for a line selection
"""

from pathlang.core.presentation.syntax import (
    format_snippet,
    highlight_line,
    render_plain,
    render_syntax_highlighted,
)

__all__ = [
    "highlight_line",
    "render_syntax_highlighted",
    "render_plain",
    "format_snippet",
]

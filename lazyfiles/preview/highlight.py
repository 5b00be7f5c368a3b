"""Pygments syntax highlighting for text previews shown in a terminal."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}


def available_style_names() -> list[str]:
    return sorted(get_all_styles())


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    if style and style in set(get_all_styles()):
        return style
    return DEFAULT_STYLE


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_text(source: str, file_name: str, style: str = DEFAULT_STYLE) -> str:
    """Highlight ``source`` with a lexer picked from ``file_name``.

    Unknown file types use the plain text lexer.
    """
    try:
        lexer = get_lexer_for_filename(file_name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(source, lexer, _formatter_for_style(normalize_style(style)))


__all__ = [
    "DEFAULT_STYLE",
    "available_style_names",
    "normalize_style",
    "colorize_text",
]

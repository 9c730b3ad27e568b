"""ANSI-aware text measurement and padding utilities.

Escape sequences never count toward display width, and East Asian wide
characters take two columns, so grid columns stay aligned when names are
colored or contain non-ASCII text.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str, start_col: int = 0) -> int:
    """Return the number of terminal columns ``text`` occupies when printed.

    ``start_col`` is the visual column the text starts at; it only matters
    for tabs, which expand to the next tab stop relative to the line start.
    """
    col = start_col
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col - start_col


def pad_ansi(text: str, width: int, start_col: int = 0) -> str:
    """Left-align a styled string in ``width`` display columns.

    Width is measured from ``start_col`` as in :func:`display_width`. Text
    already at or beyond ``width`` is returned unchanged.
    """
    missing = width - display_width(text, start_col)
    if missing <= 0:
        return text
    return text + " " * missing


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "pad_ansi",
]

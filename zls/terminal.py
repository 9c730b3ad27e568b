"""Terminal capability probes: output width and color support."""

from __future__ import annotations

import os
import shutil
import sys
from typing import TextIO

DEFAULT_WIDTH = 80


def terminal_width(fallback: int = DEFAULT_WIDTH) -> int:
    """Return the terminal column count, or ``fallback`` when undetectable."""
    columns = shutil.get_terminal_size((fallback, 24)).columns
    return columns if columns > 0 else fallback


def supports_color(stream: TextIO | None = None) -> bool:
    """Return whether ANSI color should be emitted on ``stream``.

    Honors the ``NO_COLOR`` convention and requires a TTY.
    """
    if os.environ.get("NO_COLOR"):
        return False
    target = stream if stream is not None else sys.stdout
    isatty = getattr(target, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


__all__ = [
    "DEFAULT_WIDTH",
    "terminal_width",
    "supports_color",
]

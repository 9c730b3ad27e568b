"""Text rendering for listed entries.

Detail mode prints one row per entry with type, size, time and name. Compact
mode packs names left-to-right into terminal-width lines. Both renderers are
pure: the same entries, config and width always produce the same text.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .ansi import display_width, pad_ansi
from .config import DisplayMode, ListingConfig
from .formatting import format_size, format_time
from .listing.types import Entry, NameClass, classify_name
from .terminal import terminal_width
from .ui_theme import UITheme, resolve_theme

SIZE_FIELD_WIDTH = 8
COLUMN_GAP = 2


def type_indicator(entry: Entry) -> str:
    return "d" if entry.is_dir else "-"


def grid_label(entry: Entry) -> str:
    """Unstyled grid label; directories carry a trailing ``/``."""
    return f"{entry.name}/" if entry.is_dir else entry.name


def render_detail(entries: Sequence[Entry], config: ListingConfig, theme: UITheme) -> str:
    """Render one ``type size time name`` row per entry."""
    out: list[str] = []
    for entry in entries:
        size = format_size(entry.size, config.human_sizes)
        name = theme.paint(entry.name, classify_name(entry))
        out.append(
            f"{type_indicator(entry)} {size:>{SIZE_FIELD_WIDTH}} {format_time(entry.modified)} {name}\n"
        )
    return "".join(out)


def render_grid(entries: Sequence[Entry], theme: UITheme, width: int) -> str:
    """Pack styled names into lines no wider than ``width`` columns.

    Each name occupies its display width plus a two-column gap, measured at
    the column where it lands so tabs expand to their real tab stop. A line
    always receives at least one name, even one wider than ``width``.
    """
    out: list[str] = []
    current_width = 0
    for entry in entries:
        label = grid_label(entry)
        cell_width = display_width(label, current_width) + COLUMN_GAP
        if current_width > 0 and current_width + cell_width > width:
            out.append("\n")
            current_width = 0
            cell_width = display_width(label) + COLUMN_GAP
        name_class: NameClass = classify_name(entry)
        out.append(pad_ansi(theme.paint(label, name_class), cell_width, current_width))
        current_width += cell_width
    if entries:
        out.append("\n")
    return "".join(out)


def render_entries(
    entries: Sequence[Entry],
    config: ListingConfig,
    *,
    width: int | None = None,
    theme: UITheme | None = None,
) -> str:
    """Render ``entries`` in the display mode selected by ``config``."""
    if theme is None:
        theme = resolve_theme(config.theme, no_color=not config.color)
    if config.display_mode is DisplayMode.DETAIL:
        return render_detail(entries, config, theme)

    if width is None:
        width = config.width if config.width is not None else terminal_width()
    return render_grid(entries, theme, width)


def render(entries: Sequence[Entry], config: ListingConfig, stream: TextIO | None = None) -> None:
    """Write rendered ``entries`` to ``stream`` (stdout by default)."""
    target = stream if stream is not None else sys.stdout
    text = render_entries(entries, config)
    if text:
        target.write(text)
        target.flush()


__all__ = [
    "SIZE_FIELD_WIDTH",
    "COLUMN_GAP",
    "type_indicator",
    "grid_label",
    "render_detail",
    "render_grid",
    "render_entries",
    "render",
]

"""Domain datatypes for one listed directory child."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

SOURCE_SUFFIX = ".py"


@dataclass(frozen=True)
class Entry:
    """Immutable metadata snapshot of one directory child."""

    name: str
    path: Path
    is_dir: bool
    size: int = 0
    modified: datetime | None = None

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


class NameClass(enum.Enum):
    """Presentation category of an entry name, mapped to a theme color."""

    DIRECTORY = "directory"
    SOURCE = "source"
    HIDDEN = "hidden"
    PLAIN = "plain"


def classify_name(entry: Entry) -> NameClass:
    """Return the display category for ``entry``.

    Precedence is directory, then source-file suffix, then hidden, then plain.
    """
    if entry.is_dir:
        return NameClass.DIRECTORY
    if entry.name.endswith(SOURCE_SUFFIX):
        return NameClass.SOURCE
    if entry.is_hidden:
        return NameClass.HIDDEN
    return NameClass.PLAIN


__all__ = [
    "SOURCE_SUFFIX",
    "Entry",
    "NameClass",
    "classify_name",
]

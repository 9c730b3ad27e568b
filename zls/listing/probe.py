"""Per-path metadata lookup producing ``Entry`` records."""

from __future__ import annotations

import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from ..errors import MetadataError
from .types import Entry


def mtime_to_datetime(mtime: float) -> datetime | None:
    """Convert a stat ``st_mtime`` to an aware UTC datetime.

    Returns ``None`` for pre-epoch or unrepresentable values.
    """
    if mtime < 0:
        return None
    try:
        return datetime.fromtimestamp(mtime, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def display_name(path: Path) -> str:
    """Return the final path component as printable text.

    Bytes that are not valid UTF-8 become U+FFFD; ``path`` itself keeps the
    original bytes for stat calls.
    """
    return os.fsencode(path.name).decode("utf-8", "replace")


def probe_entry(path: Path) -> Entry:
    """Stat ``path`` (following symlinks) and build its ``Entry``.

    Raises ``MetadataError`` when the path cannot be stat'ed, e.g. permission
    denied or the file vanished after enumeration.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        raise MetadataError(path, exc) from exc

    return Entry(
        name=display_name(path),
        path=path,
        is_dir=stat.S_ISDIR(st.st_mode),
        size=max(0, int(st.st_size)),
        modified=mtime_to_datetime(st.st_mtime),
    )


__all__ = [
    "display_name",
    "mtime_to_datetime",
    "probe_entry",
]

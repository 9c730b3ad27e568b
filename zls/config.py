"""Listing configuration snapshot and user preference defaults.

``ListingConfig`` is the immutable snapshot every listing/rendering call
receives. Preference defaults come from a JSON file in the user config dir;
all access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "zls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


class DisplayMode(enum.Enum):
    DETAIL = "detail"
    COMPACT = "compact"


@dataclass(frozen=True)
class ListingConfig:
    """Options for one listing invocation, resolved from CLI and preferences."""

    path: Path = Path(".")
    show_hidden: bool = False
    sort_by_time: bool = False
    display_mode: DisplayMode = DisplayMode.DETAIL
    human: bool = True
    raw_bytes: bool = False
    color: bool = False
    theme: str | None = None
    width: int | None = None
    workers: int | None = None

    @property
    def human_sizes(self) -> bool:
        """Human-scaled sizes unless raw bytes were forced."""
        return self.human and not self.raw_bytes


def load_config() -> dict[str, object]:
    """Load the user preferences JSON object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _preferences(data: dict[str, object] | None) -> dict[str, object]:
    """Use an already-loaded preferences dict, reading the file otherwise."""
    return load_config() if data is None else data


def _load_bool(key: str, default: bool, data: dict[str, object] | None) -> bool:
    value = _preferences(data).get(key)
    return value if isinstance(value, bool) else default


def load_show_hidden(data: dict[str, object] | None = None) -> bool:
    """Return the preferred hidden-entry visibility, ``False`` when unset."""
    return _load_bool("show_hidden", False, data)


def load_human_sizes(data: dict[str, object] | None = None) -> bool:
    """Return whether sizes default to human-scaled labels."""
    return _load_bool("human", True, data)


def load_color_preference(data: dict[str, object] | None = None) -> bool | None:
    """Return an explicit color on/off preference, or ``None`` for auto."""
    value = _preferences(data).get("color")
    return value if isinstance(value, bool) else None


def load_display_mode(data: dict[str, object] | None = None) -> DisplayMode:
    """Return the preferred display mode, falling back to detail."""
    value = _preferences(data).get("display_mode")
    if not isinstance(value, str):
        return DisplayMode.DETAIL
    try:
        return DisplayMode(value.strip().lower())
    except ValueError:
        return DisplayMode.DETAIL


def load_theme_name(data: dict[str, object] | None = None) -> str | None:
    """Load the preferred theme name, returning ``None`` when unset/invalid."""
    value = _preferences(data).get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DisplayMode",
    "ListingConfig",
    "load_config",
    "load_show_hidden",
    "load_human_sizes",
    "load_color_preference",
    "load_display_mode",
    "load_theme_name",
]

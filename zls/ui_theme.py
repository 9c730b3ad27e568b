"""Name-coloring theme definitions and selection helpers.

Themes map each entry ``NameClass`` to an ANSI SGR prefix. The plain theme
carries no escape sequences and is used whenever color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing.types import NameClass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    directory: str
    source: str
    hidden: str
    plain: str

    def style_for(self, name_class: NameClass) -> str:
        if name_class is NameClass.DIRECTORY:
            return self.directory
        if name_class is NameClass.SOURCE:
            return self.source
        if name_class is NameClass.HIDDEN:
            return self.hidden
        return self.plain

    def paint(self, text: str, name_class: NameClass) -> str:
        """Wrap ``text`` in the style for ``name_class``; unstyled classes pass through."""
        style = self.style_for(name_class)
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    directory="\033[1;34m",
    source="\033[33m",
    hidden="\033[90m",
    plain="",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    directory="\033[1;38;5;45m",
    source="\033[38;5;117m",
    hidden="\033[2;38;5;110m",
    plain="",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    directory="",
    source="",
    hidden="",
    plain="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

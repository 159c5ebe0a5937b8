"""UI theme definitions and selection helpers.

Themes map semantic listing categories to ANSI SGR prefixes. Layout code
asks the theme for a style and never embeds escape sequences itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleCategory(str, Enum):
    """Semantic categories a renderer can style."""

    PSEUDO_DIR = "pseudo_dir"
    HIDDEN_FOLDER = "hidden_folder"
    FOLDER = "folder"
    HIDDEN_FILE = "hidden_file"
    FILE = "file"
    PERMISSIONS = "permissions"
    COUNT = "count"
    SIZE = "size"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    pseudo_dir: str
    hidden_folder: str
    folder: str
    hidden_file: str
    file: str
    permissions: str
    count: str
    size: str
    timestamp: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    pseudo_dir="\033[1;96m",
    hidden_folder="\033[1;96m",
    folder="\033[1;32m",
    hidden_file="\033[96m",
    file="",
    permissions="\033[2m",
    count="",
    size="\033[38;5;109m",
    timestamp="\033[38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    pseudo_dir="\033[1;38;5;39m",
    hidden_folder="\033[1;38;5;39m",
    folder="\033[1;38;5;45m",
    hidden_file="\033[38;5;110m",
    file="\033[38;5;252m",
    permissions="\033[2;38;5;31m",
    count="\033[38;5;153m",
    size="\033[38;5;73m",
    timestamp="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    pseudo_dir="",
    hidden_folder="",
    folder="",
    hidden_file="",
    file="",
    permissions="",
    count="",
    size="",
    timestamp="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def style_for(theme: UITheme, category: StyleCategory) -> str:
    """Return the SGR prefix ``theme`` assigns to ``category``."""
    return getattr(theme, StyleCategory(category).value)


def styled(theme: UITheme, category: StyleCategory, text: str) -> str:
    """Wrap ``text`` in the style for ``category``.

    Unstyled categories return ``text`` untouched so plain output carries no
    stray reset sequences.
    """
    prefix = style_for(theme, category)
    if not prefix:
        return text
    return f"{prefix}{text}{theme.reset}"


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
    "StyleCategory",
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "style_for",
    "styled",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

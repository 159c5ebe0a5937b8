"""Grid mode: names only, flowed into fixed-width columns.

Columns are placed greedily on a running cursor and wrap before any column
that would not fit, so a name is never split across lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from ..ansi import pad_to_width, text_width
from ..listing_model import CURRENT_DIR_NAME, PARENT_DIR_NAME, DirectorySnapshot, FileEntry, FolderEntry
from ..ui_theme import DEFAULT_THEME, StyleCategory, UITheme, styled
from .output import write_text

GRID_COLUMN_PADDING = 4
FIXED_COLUMN_WIDTH = 25


@dataclass(frozen=True)
class GridCursor:
    """Horizontal position on the line currently being written."""

    offset: int = 0


def grid_column_width(snapshot: DirectorySnapshot) -> int:
    """Return the column width for ``snapshot``."""
    if snapshot.largest_name <= 0:
        return FIXED_COLUMN_WIDTH
    return snapshot.largest_name + GRID_COLUMN_PADDING


def place_column(
    sink: TextIO,
    cursor: GridCursor,
    text: str,
    visible_width: int,
    column_width: int,
    terminal_width: int,
) -> GridCursor:
    """Write one padded column and return the advanced cursor.

    A newline is written first when the current line already holds columns
    and the remaining width is smaller than ``column_width``.
    """
    if cursor.offset > 0 and terminal_width - cursor.offset < column_width:
        write_text(sink, "\n")
        cursor = GridCursor()
    write_text(sink, pad_to_width(text, visible_width, column_width))
    return GridCursor(cursor.offset + column_width)


def _place_name(
    sink: TextIO,
    cursor: GridCursor,
    name: str,
    category: StyleCategory,
    theme: UITheme,
    column_width: int,
    terminal_width: int,
) -> GridCursor:
    return place_column(
        sink,
        cursor,
        styled(theme, category, name),
        text_width(name),
        column_width,
        terminal_width,
    )


def _place_entries(
    sink: TextIO,
    cursor: GridCursor,
    entries: tuple[FolderEntry, ...] | tuple[FileEntry, ...],
    category: StyleCategory,
    theme: UITheme,
    column_width: int,
    terminal_width: int,
) -> GridCursor:
    for entry in entries:
        cursor = _place_name(sink, cursor, entry.name, category, theme, column_width, terminal_width)
    return cursor


def render_grid(
    snapshot: DirectorySnapshot,
    sink: TextIO,
    terminal_width: int,
    show_hidden: bool,
    *,
    theme: UITheme | None = None,
    column_width: int | None = None,
) -> None:
    """Render folder and file blocks of ``snapshot`` as wrapped columns.

    Each non-empty block ends with a newline. ``..`` and ``.`` lead the folder
    block when hidden entries are shown.
    """
    active_theme = theme or DEFAULT_THEME
    width = column_width if column_width is not None else grid_column_width(snapshot)

    if snapshot.folders or (show_hidden and snapshot.hidden_folders):
        cursor = GridCursor()
        if show_hidden:
            for name in (PARENT_DIR_NAME, CURRENT_DIR_NAME):
                cursor = _place_name(sink, cursor, name, StyleCategory.PSEUDO_DIR, active_theme, width, terminal_width)
            cursor = _place_entries(
                sink,
                cursor,
                snapshot.hidden_folders,
                StyleCategory.HIDDEN_FOLDER,
                active_theme,
                width,
                terminal_width,
            )
        cursor = _place_entries(sink, cursor, snapshot.folders, StyleCategory.FOLDER, active_theme, width, terminal_width)
        write_text(sink, "\n")

    if snapshot.files or (show_hidden and snapshot.hidden_files):
        cursor = GridCursor()
        if show_hidden:
            cursor = _place_entries(
                sink,
                cursor,
                snapshot.hidden_files,
                StyleCategory.HIDDEN_FILE,
                active_theme,
                width,
                terminal_width,
            )
        cursor = _place_entries(sink, cursor, snapshot.files, StyleCategory.FILE, active_theme, width, terminal_width)
        write_text(sink, "\n")


__all__ = [
    "GRID_COLUMN_PADDING",
    "FIXED_COLUMN_WIDTH",
    "GridCursor",
    "grid_column_width",
    "place_column",
    "render_grid",
]

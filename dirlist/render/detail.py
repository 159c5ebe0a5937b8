"""Detail mode: one fixed-width row per entry.

Rows read ``permissions  count  size  [time]  name``. Folders show their child
count and ``-`` for size; files show ``1`` and a human-readable size.
"""

from __future__ import annotations

from typing import TextIO

from ..formatting import TIME_FIELDS, TIMESTAMP_WIDTH, formatted_size
from ..listing_model import DirectorySnapshot, FileEntry, FolderEntry
from ..listing_model.types import PLACEHOLDER_FILE_DETAILS, PLACEHOLDER_FOLDER_DETAILS
from ..ui_theme import DEFAULT_THEME, StyleCategory, UITheme, styled
from .output import write_text

PERMISSIONS_WIDTH = 10
COUNT_WIDTH = 4
SIZE_WIDTH = 6
FIELD_SEPARATOR = "  "
FILE_LINK_COUNT = "1"
FOLDER_SIZE_PLACEHOLDER = "-"


def _time_label(created_time: str, modified_time: str, time_field: str) -> str | None:
    if time_field == "none":
        return None
    label = created_time if time_field == "created" else modified_time
    return label.ljust(TIMESTAMP_WIDTH)


def format_detail_row(
    permissions: str,
    count: str,
    size: str,
    time_label: str | None,
    name: str,
    category: StyleCategory,
    theme: UITheme,
) -> str:
    """Compose one styled detail row without a trailing newline."""
    fields = [
        styled(theme, StyleCategory.PERMISSIONS, permissions.ljust(PERMISSIONS_WIDTH)),
        styled(theme, StyleCategory.COUNT, count.rjust(COUNT_WIDTH)),
        styled(theme, StyleCategory.SIZE, size.rjust(SIZE_WIDTH)),
    ]
    if time_label is not None:
        fields.append(styled(theme, StyleCategory.TIMESTAMP, time_label))
    fields.append(styled(theme, category, name))
    return FIELD_SEPARATOR.join(fields)


def folder_row(entry: FolderEntry, category: StyleCategory, theme: UITheme, time_field: str) -> str:
    details = entry.details or PLACEHOLDER_FOLDER_DETAILS
    return format_detail_row(
        details.permissions,
        str(details.children),
        FOLDER_SIZE_PLACEHOLDER,
        _time_label(details.created_time, details.modified_time, time_field),
        entry.name,
        category,
        theme,
    )


def file_row(entry: FileEntry, category: StyleCategory, theme: UITheme, time_field: str) -> str:
    details = entry.details or PLACEHOLDER_FILE_DETAILS
    return format_detail_row(
        details.permissions,
        FILE_LINK_COUNT,
        formatted_size(details.size),
        _time_label(details.created_time, details.modified_time, time_field),
        entry.name,
        category,
        theme,
    )


def render_detail(
    snapshot: DirectorySnapshot,
    sink: TextIO,
    show_hidden: bool,
    *,
    theme: UITheme | None = None,
    time_field: str = "modified",
) -> None:
    """Render every entry of ``snapshot`` as a detail row.

    Order is ``..``, ``.``, hidden folders, folders, hidden files, files. The
    pseudo rows appear only when hidden entries are shown and the listing is
    not empty; ``..`` is left out when it describes the listed directory itself.
    """
    if time_field not in TIME_FIELDS:
        raise ValueError(f"unknown time field: {time_field!r}")
    active_theme = theme or DEFAULT_THEME

    folders: list[tuple[FolderEntry, StyleCategory]] = []
    files: list[tuple[FileEntry, StyleCategory]] = []
    if show_hidden:
        folders.extend((entry, StyleCategory.HIDDEN_FOLDER) for entry in snapshot.hidden_folders)
        files.extend((entry, StyleCategory.HIDDEN_FILE) for entry in snapshot.hidden_files)
    folders.extend((entry, StyleCategory.FOLDER) for entry in snapshot.folders)
    files.extend((entry, StyleCategory.FILE) for entry in snapshot.files)
    if not folders and not files:
        return

    if show_hidden:
        parent = None if snapshot.parent_is_self else snapshot.parent_dir
        pseudo = [entry for entry in (parent, snapshot.cur_dir) if entry is not None]
        folders[:0] = [(entry, StyleCategory.PSEUDO_DIR) for entry in pseudo]

    for folder, category in folders:
        write_text(sink, folder_row(folder, category, active_theme, time_field) + "\n")
    for file, category in files:
        write_text(sink, file_row(file, category, active_theme, time_field) + "\n")


__all__ = [
    "TIME_FIELDS",
    "format_detail_row",
    "folder_row",
    "file_row",
    "render_detail",
]

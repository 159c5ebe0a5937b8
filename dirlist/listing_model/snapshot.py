"""Point-in-time snapshot of one directory level.

Children are partitioned into visible/hidden folders and files, each kept
in name order. ``.``/``..`` pseudo-entries are synthesized for hidden views.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..ansi import text_width
from ..errors import DirectoryReadError
from .metadata import extract_file_details, extract_folder_details
from .types import FileEntry, FolderEntry, is_hidden

logger = logging.getLogger(__name__)

CURRENT_DIR_NAME = "."
PARENT_DIR_NAME = ".."


def _parent_directory(path: Path) -> Path:
    """Return the parent of ``path``; the filesystem root is its own parent."""
    parent = path.parent
    return parent if parent != path else path


def _entry_is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


@dataclass(frozen=True)
class DirectorySnapshot:
    """Partitioned, name-sorted children of one directory."""

    path: Path
    folders: tuple[FolderEntry, ...]
    hidden_folders: tuple[FolderEntry, ...]
    files: tuple[FileEntry, ...]
    hidden_files: tuple[FileEntry, ...]
    cur_dir: FolderEntry | None
    parent_dir: FolderEntry | None
    largest_name: int
    show_hidden: bool
    detailed: bool
    parent_is_self: bool = False

    @property
    def has_folders(self) -> bool:
        return bool(self.folders or self.hidden_folders)

    @property
    def has_files(self) -> bool:
        return bool(self.files or self.hidden_files)

    @property
    def is_empty(self) -> bool:
        return not (self.has_folders or self.has_files)

    @property
    def entry_count(self) -> int:
        return len(self.folders) + len(self.hidden_folders) + len(self.files) + len(self.hidden_files)

    @classmethod
    def build(cls, path: Path, show_hidden: bool, detailed: bool) -> DirectorySnapshot:
        """Scan ``path`` once and return its snapshot.

        ``path`` must be an existing directory; callers validate that first.
        Raises ``DirectoryReadError`` when the directory cannot be enumerated.
        Per-entry metadata failures fall back to placeholder details.
        """
        path = Path(path)
        logger.debug("Scanning %s (show_hidden=%s, detailed=%s)", path, show_hidden, detailed)

        cur_dir: FolderEntry | None = None
        parent_dir: FolderEntry | None = None
        parent_path = _parent_directory(path)
        largest_name = 0
        if show_hidden:
            cur_dir = FolderEntry(CURRENT_DIR_NAME, extract_folder_details(path, detailed))
            parent_dir = FolderEntry(PARENT_DIR_NAME, extract_folder_details(parent_path, detailed))
            largest_name = len(PARENT_DIR_NAME)

        folders: list[FolderEntry] = []
        hidden_folders: list[FolderEntry] = []
        files: list[FileEntry] = []
        hidden_files: list[FileEntry] = []

        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    name = entry.name
                    hidden = is_hidden(name)
                    if hidden and not show_hidden:
                        continue

                    largest_name = max(largest_name, len(name), text_width(name))

                    if _entry_is_dir(entry):
                        folder = FolderEntry(name, extract_folder_details(entry, detailed))
                        (hidden_folders if hidden else folders).append(folder)
                    else:
                        file = FileEntry(name, extract_file_details(entry, detailed))
                        (hidden_files if hidden else files).append(file)
        except OSError as exc:
            raise DirectoryReadError(path, exc) from exc

        snapshot = cls(
            path=path,
            folders=tuple(sorted(folders)),
            hidden_folders=tuple(sorted(hidden_folders)),
            files=tuple(sorted(files)),
            hidden_files=tuple(sorted(hidden_files)),
            cur_dir=cur_dir,
            parent_dir=parent_dir,
            largest_name=largest_name,
            show_hidden=show_hidden,
            detailed=detailed,
            parent_is_self=parent_path == path,
        )
        logger.debug("Scanned %s: %d entries", path, snapshot.entry_count)
        return snapshot


def build_directory_snapshot(path: Path, show_hidden: bool, detailed: bool) -> DirectorySnapshot:
    """Build a fresh snapshot of ``path``."""
    return DirectorySnapshot.build(path, show_hidden, detailed)


__all__ = [
    "CURRENT_DIR_NAME",
    "PARENT_DIR_NAME",
    "DirectorySnapshot",
    "build_directory_snapshot",
]

"""Domain records for one listed directory level."""

from __future__ import annotations

from dataclasses import dataclass, field

PLACEHOLDER_PERMISSIONS = "-" * 10
PLACEHOLDER_TIMESTAMP = "-"


@dataclass(frozen=True)
class FileDetails:
    """Metadata captured for a file in detailed scans."""

    permissions: str
    size: int
    created_time: str
    modified_time: str


@dataclass(frozen=True)
class FolderDetails:
    """Metadata captured for a folder in detailed scans."""

    permissions: str
    children: int
    created_time: str
    modified_time: str


PLACEHOLDER_FILE_DETAILS = FileDetails(
    permissions=PLACEHOLDER_PERMISSIONS,
    size=0,
    created_time=PLACEHOLDER_TIMESTAMP,
    modified_time=PLACEHOLDER_TIMESTAMP,
)

PLACEHOLDER_FOLDER_DETAILS = FolderDetails(
    permissions=PLACEHOLDER_PERMISSIONS,
    children=0,
    created_time=PLACEHOLDER_TIMESTAMP,
    modified_time=PLACEHOLDER_TIMESTAMP,
)


@dataclass(frozen=True, order=True)
class FileEntry:
    """File child ordered by name; ``details`` is ``None`` outside detail mode."""

    name: str
    details: FileDetails | None = field(default=None, compare=False)

    @property
    def permissions(self) -> str:
        return self.details.permissions if self.details is not None else ""

    @property
    def size(self) -> int:
        return self.details.size if self.details is not None else 0


@dataclass(frozen=True, order=True)
class FolderEntry:
    """Folder child ordered by name; ``details`` is ``None`` outside detail mode."""

    name: str
    details: FolderDetails | None = field(default=None, compare=False)

    @property
    def permissions(self) -> str:
        return self.details.permissions if self.details is not None else PLACEHOLDER_PERMISSIONS

    @property
    def children(self) -> int:
        return self.details.children if self.details is not None else 0


def is_hidden(name: str) -> bool:
    """Return whether ``name`` is a dotfile."""
    return name.startswith(".")


__all__ = [
    "PLACEHOLDER_PERMISSIONS",
    "PLACEHOLDER_TIMESTAMP",
    "FileDetails",
    "FolderDetails",
    "PLACEHOLDER_FILE_DETAILS",
    "PLACEHOLDER_FOLDER_DETAILS",
    "FileEntry",
    "FolderEntry",
    "is_hidden",
]

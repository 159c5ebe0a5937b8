"""Directory listing domain model: entries, metadata, and snapshots."""

from .metadata import (
    count_children,
    extract_file_details,
    extract_folder_details,
    permission_string,
    permission_triplet,
)
from .snapshot import CURRENT_DIR_NAME, PARENT_DIR_NAME, DirectorySnapshot, build_directory_snapshot
from .types import (
    PLACEHOLDER_PERMISSIONS,
    FileDetails,
    FileEntry,
    FolderDetails,
    FolderEntry,
    is_hidden,
)

__all__ = [
    "CURRENT_DIR_NAME",
    "PARENT_DIR_NAME",
    "DirectorySnapshot",
    "build_directory_snapshot",
    "PLACEHOLDER_PERMISSIONS",
    "FileDetails",
    "FileEntry",
    "FolderDetails",
    "FolderEntry",
    "is_hidden",
    "count_children",
    "extract_file_details",
    "extract_folder_details",
    "permission_string",
    "permission_triplet",
]

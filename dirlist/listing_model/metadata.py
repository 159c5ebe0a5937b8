"""Per-entry metadata extraction for detailed listings.

Nothing here touches the filesystem unless detail mode asked for it.
Unreadable entries degrade to placeholder details instead of failing the scan.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import MetadataUnavailable
from ..formatting import format_timestamp
from .types import (
    PLACEHOLDER_FILE_DETAILS,
    PLACEHOLDER_FOLDER_DETAILS,
    FileDetails,
    FolderDetails,
)

logger = logging.getLogger(__name__)

# Indexed by the 3-bit rwx value of one permission class.
PERMISSION_TRIPLETS: tuple[str, ...] = (
    "---",
    "--x",
    "-w-",
    "-wx",
    "r--",
    "r-x",
    "rw-",
    "rwx",
)

MetadataSource = Path | os.DirEntry


def permission_triplet(bits: int) -> str:
    """Return the rwx triplet for the low three bits of ``bits``."""
    read = bool(bits & 0o4)
    write = bool(bits & 0o2)
    execute = bool(bits & 0o1)
    return PERMISSION_TRIPLETS[(read << 2) | (write << 1) | execute]


def permission_string(mode: int, is_dir: bool) -> str:
    """Decode ``st_mode`` bits into a ten-character ``ls`` permission string."""
    kind = "d" if is_dir else "-"
    owner = permission_triplet(mode >> 6)
    group = permission_triplet(mode >> 3)
    other = permission_triplet(mode)
    return f"{kind}{owner}{group}{other}"


def count_children(path: Path | str) -> int:
    """Return the number of direct entries in ``path``, or 0 when unreadable."""
    try:
        with os.scandir(path) as entries:
            return sum(1 for _entry in entries)
    except OSError:
        return 0


def _source_path(source: MetadataSource) -> Path:
    if isinstance(source, os.DirEntry):
        return Path(source.path)
    return Path(source)


def read_metadata(source: MetadataSource) -> os.stat_result:
    """Return the stat record for ``source``.

    Directory entries are stat'ed without following symlinks so links are
    described as the OS reports them. Raises ``MetadataUnavailable`` on failure.
    """
    try:
        if isinstance(source, os.DirEntry):
            return source.stat(follow_symlinks=False)
        return os.stat(source)
    except OSError as exc:
        raise MetadataUnavailable(_source_path(source), exc) from exc


def created_timestamp(stat_result: os.stat_result) -> float:
    """Return birth time where the platform reports it, else ``st_ctime``."""
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    return float(stat_result.st_ctime)


def extract_file_details(source: MetadataSource, detailed: bool) -> FileDetails | None:
    """Return file details, ``None`` when not detailed, placeholders on failure."""
    if not detailed:
        return None
    try:
        stat_result = read_metadata(source)
    except MetadataUnavailable as exc:
        logger.debug("Using placeholder metadata: %s", exc)
        return PLACEHOLDER_FILE_DETAILS
    return FileDetails(
        permissions=permission_string(stat_result.st_mode, is_dir=False),
        size=int(stat_result.st_size),
        created_time=format_timestamp(created_timestamp(stat_result)),
        modified_time=format_timestamp(stat_result.st_mtime),
    )


def extract_folder_details(source: MetadataSource, detailed: bool) -> FolderDetails | None:
    """Return folder details, ``None`` when not detailed, placeholders on failure."""
    if not detailed:
        return None
    try:
        stat_result = read_metadata(source)
    except MetadataUnavailable as exc:
        logger.debug("Using placeholder metadata: %s", exc)
        return PLACEHOLDER_FOLDER_DETAILS
    return FolderDetails(
        permissions=permission_string(stat_result.st_mode, is_dir=True),
        children=count_children(_source_path(source)),
        created_time=format_timestamp(created_timestamp(stat_result)),
        modified_time=format_timestamp(stat_result.st_mtime),
    )


__all__ = [
    "PERMISSION_TRIPLETS",
    "permission_triplet",
    "permission_string",
    "count_children",
    "read_metadata",
    "created_timestamp",
    "extract_file_details",
    "extract_folder_details",
]

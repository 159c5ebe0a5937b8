"""Error kinds raised while listing a directory.

Per-entry metadata failures are recovered inside the scan.
Directory, output, and input failures propagate to the CLI.
"""

from __future__ import annotations

from pathlib import Path


class DirlistError(Exception):
    """Base class for listing failures surfaced to the caller."""


class DirectoryReadError(DirlistError):
    """The children of the target directory could not be enumerated."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read directory {path}: {cause.strerror or cause}")


class MetadataUnavailable(DirlistError):
    """Metadata for one entry could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read metadata of {path}: {cause.strerror or cause}")


class OutputError(DirlistError):
    """The output sink refused a write."""

    def __init__(self, cause: OSError | ValueError) -> None:
        self.cause = cause
        detail = cause.strerror if isinstance(cause, OSError) and cause.strerror else cause
        super().__init__(f"Cannot write output: {detail}")


class InvalidInputError(DirlistError):
    """The requested path cannot be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


__all__ = [
    "DirlistError",
    "DirectoryReadError",
    "MetadataUnavailable",
    "OutputError",
    "InvalidInputError",
]

"""Human-readable size and timestamp labels for detail rows."""

from __future__ import annotations

import time

SIZE_UNITS: tuple[str, ...] = ("b", "k", "m", "g", "t", "p")
SIZE_STEP = 1024
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
TIMESTAMP_WIDTH = 16
MISSING_TIMESTAMP = "-".ljust(TIMESTAMP_WIDTH)
TIME_FIELDS: tuple[str, ...] = ("modified", "created", "none")


def formatted_size(size: int) -> str:
    """Return ``size`` bytes as ``"{integer}{unit}"``.

    Divides by 1024 while the value is at least 1024, truncating each time,
    so exactly 1024 bytes is ``"1k"``. Division stops at petabytes.
    """
    value = max(0, int(size))
    unit_index = 0
    while value >= SIZE_STEP and unit_index < len(SIZE_UNITS) - 1:
        value //= SIZE_STEP
        unit_index += 1
    return f"{value}{SIZE_UNITS[unit_index]}"


def format_timestamp(epoch_seconds: float | None) -> str:
    """Format a POSIX timestamp as fixed-width local time."""
    if epoch_seconds is None:
        return MISSING_TIMESTAMP
    try:
        return time.strftime(TIMESTAMP_FORMAT, time.localtime(epoch_seconds))
    except (OverflowError, OSError, ValueError):
        return MISSING_TIMESTAMP


__all__ = [
    "SIZE_UNITS",
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_WIDTH",
    "TIME_FIELDS",
    "MISSING_TIMESTAMP",
    "formatted_size",
    "format_timestamp",
]

"""Sink writes that surface failures as ``OutputError``."""

from __future__ import annotations

from typing import TextIO

from ..errors import OutputError


def write_text(sink: TextIO, text: str) -> None:
    """Write ``text`` to ``sink``; a refused write aborts rendering."""
    try:
        sink.write(text)
    except (OSError, ValueError) as exc:
        raise OutputError(exc) from exc


def flush_sink(sink: TextIO) -> None:
    """Flush ``sink`` when it supports flushing."""
    flush = getattr(sink, "flush", None)
    if flush is None:
        return
    try:
        flush()
    except (OSError, ValueError) as exc:
        raise OutputError(exc) from exc

"""Layout rendering for directory snapshots.

Dispatches to grid or detail mode and writes styled text to a sink.
Write failures surface as ``OutputError``; nothing already written is undone.
"""

from __future__ import annotations

from typing import TextIO

from ..listing_model import DirectorySnapshot
from ..ui_theme import UITheme
from .detail import TIME_FIELDS, render_detail
from .grid import GridCursor, grid_column_width, place_column, render_grid
from .output import flush_sink


def render(
    snapshot: DirectorySnapshot,
    sink: TextIO,
    terminal_width: int,
    show_hidden: bool,
    detailed: bool,
    *,
    theme: UITheme | None = None,
    time_field: str = "modified",
) -> None:
    """Render ``snapshot`` to ``sink`` in detail or grid mode."""
    if detailed:
        render_detail(snapshot, sink, show_hidden, theme=theme, time_field=time_field)
    else:
        render_grid(snapshot, sink, terminal_width, show_hidden, theme=theme)
    flush_sink(sink)


__all__ = [
    "TIME_FIELDS",
    "GridCursor",
    "grid_column_width",
    "place_column",
    "render",
    "render_detail",
    "render_grid",
]

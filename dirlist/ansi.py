"""Terminal column measurement and padding for listing names.

Wide characters occupy two columns and combining marks none. Names are
measured as written, before any style escapes are added around them.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two, everything else consumes one.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def text_width(text: str) -> int:
    """Return the columns of unstyled ``text``, measuring every character as written."""
    return sum(char_display_width(ch) for ch in text)


def pad_to_width(text: str, visible_width: int, width: int) -> str:
    """Right-pad styled ``text`` with spaces up to ``width`` display columns.

    ``visible_width`` is the measured width of ``text`` without escapes; text
    already wider than ``width`` is returned unchanged.
    """
    if visible_width >= width:
        return text
    return text + " " * (width - visible_width)


__all__ = [
    "char_display_width",
    "text_width",
    "pad_to_width",
]

"""Per-codepoint column width and combining-mark detection."""
from __future__ import annotations

from .registry import WidthTable

BACKSPACE = 0x08
FIRST_COMBINING = 0x0300


def char_width(codepoint: int, table: WidthTable) -> int:
    """Return the columns ``codepoint`` occupies.

    Control characters report 0, except BACKSPACE which reports -1 because it
    moves the cursor back one column.
    """

    width = table(codepoint)
    if width < 0:
        return -1 if codepoint == BACKSPACE else 0
    return width


def is_combining(codepoint: int, table: WidthTable) -> bool:
    # nothing below U+0300 combines, so skip the table lookup
    return codepoint >= FIRST_COMBINING and table(codepoint) == 0


__all__ = ["BACKSPACE", "FIRST_COMBINING", "char_width", "is_combining"]

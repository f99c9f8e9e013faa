"""Character- and codepoint-indexed substring extraction.

Both extractors resolve a start offset, then an end offset counted from that
start, and slice the bytes in between. Positions past the end give ``b""`` and
counts past the end are truncated; neither raises.
"""
from __future__ import annotations

from typing import Optional

from .scanner import Scanner, default_scanner
from .utils.text import to_bytes
from .utils.validation import ensure_position

UNBOUNDED = None
"""``count`` value meaning "through the end of the sequence"."""


def character_substring(
    data,
    pos: int = 0,
    count: Optional[int] = UNBOUNDED,
    *,
    scanner: Scanner | None = None,
) -> bytes:
    """Return up to ``count`` characters starting at character ``pos``.

    A character is a base codepoint plus the combining marks that follow it. The
    end position is counted from the substring's own start.
    """

    data = to_bytes(data)
    ensure_position(pos, "pos")
    ensure_position(count, "count")
    runner = scanner or default_scanner()
    start = runner.nth_character_byte_pos(data, pos)
    if start >= len(data):
        return b""
    if count is UNBOUNDED:
        return data[start:]
    end = runner.nth_character_byte_pos(data, count, start_offset=start)
    return data[start:end]


def codepoint_substring(
    data,
    pos: int = 0,
    count: Optional[int] = UNBOUNDED,
    *,
    scanner: Scanner | None = None,
) -> bytes:
    """Return up to ``count`` codepoints starting at codepoint ``pos``.

    Combining marks are ordinary codepoints here, so the result may separate a
    base character from its marks.
    """

    data = to_bytes(data)
    ensure_position(pos, "pos")
    ensure_position(count, "count")
    runner = scanner or default_scanner()
    start = runner.nth_codepoint_byte_pos(data, pos)
    if start >= len(data):
        return b""
    if count is UNBOUNDED:
        return data[start:]
    end = runner.codepoint_end_byte_pos(data, count, start_offset=start)
    return data[start:end]


__all__ = ["UNBOUNDED", "character_substring", "codepoint_substring"]

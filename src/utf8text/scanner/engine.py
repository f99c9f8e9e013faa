"""Sequence scanning over UTF-8 byte sequences."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable

from ..decoder import byte_length_at, decode_at, is_valid_at, iter_valid
from ..utils.text import to_bytes
from ..utils.validation import ensure_position
from ..width import DEFAULT_TABLE, WidthTable, WidthTableRegistry, char_width, is_combining, load_builtin_tables


@dataclass(slots=True)
class ScannerConfig:
    width_table: str = DEFAULT_TABLE


@dataclass(frozen=True, slots=True)
class TextMetrics:
    byte_length: int
    codepoints: int
    characters: int
    width: int
    valid: bool


class Scanner:
    """Derive counts, widths and offsets from UTF-8 byte sequences.

    Invalid bytes never abort a scan. Each one is a single unknown byte that is
    stepped over and left out of every count.
    """

    def __init__(
        self,
        config: ScannerConfig | None = None,
        registry: WidthTableRegistry | None = None,
        *,
        table: WidthTable | None = None,
    ) -> None:
        self.registry = registry or WidthTableRegistry()
        if not self.registry.all():
            load_builtin_tables(self.registry)
        self.config = config or ScannerConfig()
        self.table: WidthTable = table or self.registry.get(self.config.width_table)

    def is_valid_utf8(self, data) -> bool:
        data = to_bytes(data)
        offset = 0
        while offset < len(data):
            if not is_valid_at(data, offset):
                return False
            offset += byte_length_at(data, offset)
        return True

    def count_codepoints(self, data) -> int:
        return sum(1 for _ in iter_valid(to_bytes(data)))

    def count_characters(self, data) -> int:
        data = to_bytes(data)
        return sum(1 for offset, _ in iter_valid(data) if self._starts_character(data, offset))

    def string_width(self, data) -> int:
        """Total terminal columns; a BACKSPACE subtracts one."""
        data = to_bytes(data)
        return sum(char_width(decode_at(data, offset), self.table) for offset, _ in iter_valid(data))

    def nth_character_byte_pos(self, data, n: int, start_offset: int = 0) -> int:
        """Byte offset of character ``n`` (zero-based) counted from ``start_offset``.

        A combining codepoint continues the preceding character, except at byte
        offset 0 where it starts a character of its own. Returns ``len(data)``
        when fewer than ``n + 1`` characters remain.
        """

        data = to_bytes(data)
        ensure_position(n, "n")
        return self._nth_start(data, n, start_offset, lambda offset: self._starts_character(data, offset))

    def nth_codepoint_byte_pos(self, data, n: int, start_offset: int = 0) -> int:
        """Byte offset of codepoint ``n`` (zero-based) counted from ``start_offset``.

        Combining codepoints count like any other. Returns ``len(data)`` when
        fewer than ``n + 1`` codepoints remain.
        """

        data = to_bytes(data)
        ensure_position(n, "n")
        return self._nth_start(data, n, start_offset, lambda _offset: True)

    def codepoint_end_byte_pos(self, data, count: int, start_offset: int = 0) -> int:
        """Byte offset just past the ``count``-th codepoint after ``start_offset``.

        Invalid bytes following that codepoint are not included. Returns
        ``start_offset`` for a zero count and ``len(data)`` when fewer than
        ``count`` codepoints remain.
        """

        data = to_bytes(data)
        ensure_position(count, "count")
        if count == 0:
            return start_offset
        seen = 0
        for offset, length in iter_valid(data, start_offset):
            seen += 1
            if seen == count:
                return offset + length
        return len(data)

    def measure(self, data) -> TextMetrics:
        data = to_bytes(data)
        return TextMetrics(
            byte_length=len(data),
            codepoints=self.count_codepoints(data),
            characters=self.count_characters(data),
            width=self.string_width(data),
            valid=self.is_valid_utf8(data),
        )

    def _starts_character(self, data: bytes, offset: int) -> bool:
        return offset == 0 or not is_combining(decode_at(data, offset), self.table)

    @staticmethod
    def _nth_start(data: bytes, n: int, start_offset: int, counts: Callable[[int], bool]) -> int:
        seen = 0
        for offset, _length in iter_valid(data, start_offset):
            if counts(offset):
                seen += 1
                if seen > n:
                    return offset
        return len(data)


@lru_cache(maxsize=None)
def default_scanner() -> Scanner:
    return Scanner()


def is_valid_utf8(data, *, scanner: Scanner | None = None) -> bool:
    return (scanner or default_scanner()).is_valid_utf8(data)


def count_codepoints(data, *, scanner: Scanner | None = None) -> int:
    return (scanner or default_scanner()).count_codepoints(data)


def count_characters(data, *, scanner: Scanner | None = None) -> int:
    return (scanner or default_scanner()).count_characters(data)


def string_width(data, *, scanner: Scanner | None = None) -> int:
    return (scanner or default_scanner()).string_width(data)


def measure(data, *, scanner: Scanner | None = None) -> TextMetrics:
    return (scanner or default_scanner()).measure(data)


__all__ = [
    "Scanner",
    "ScannerConfig",
    "TextMetrics",
    "default_scanner",
    "is_valid_utf8",
    "count_codepoints",
    "count_characters",
    "string_width",
    "measure",
]

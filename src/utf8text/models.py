"""UTF-8 string value type."""
from __future__ import annotations

from typing import Iterable, List, Optional

from .codec import decode_all, decode_text, encode_all
from .scanner import Scanner, TextMetrics, default_scanner
from .substring import UNBOUNDED, character_substring, codepoint_substring
from .utils.text import to_bytes


class Utf8String:
    """Immutable UTF-8 byte string with codepoint and character aware operations.

    The encoded bytes are held, not inherited, so only the byte operations
    forwarded below are available. Contents are never validated on
    construction; use :meth:`is_valid_utf8`.
    """

    __slots__ = ("_data", "_scanner")

    def __init__(self, value: object = b"", *, scanner: Scanner | None = None) -> None:
        if isinstance(value, Utf8String):
            self._data = value._data
            self._scanner = scanner or value._scanner
        else:
            self._data = to_bytes(value)
            self._scanner = scanner

    @classmethod
    def from_codepoints(cls, codepoints: Iterable[int], *, scanner: Scanner | None = None) -> "Utf8String":
        return cls(encode_all(codepoints), scanner=scanner)

    @property
    def scanner(self) -> Scanner:
        return self._scanner or default_scanner()

    def count_codepoints(self) -> int:
        return self.scanner.count_codepoints(self._data)

    def count_characters(self) -> int:
        """Length in characters: base codepoints with their combining marks."""
        return self.scanner.count_characters(self._data)

    def width(self) -> int:
        return self.scanner.string_width(self._data)

    def is_valid_utf8(self) -> bool:
        return self.scanner.is_valid_utf8(self._data)

    def metrics(self) -> TextMetrics:
        return self.scanner.measure(self._data)

    def to_codepoints(self) -> List[int]:
        return decode_all(self._data)

    def to_text(self) -> str:
        return decode_text(self._data)

    def substring(self, pos: int = 0, count: Optional[int] = UNBOUNDED) -> "Utf8String":
        """Substring by character position."""
        return self._derive(character_substring(self._data, pos, count, scanner=self._scanner))

    def substring_cp(self, pos: int = 0, count: Optional[int] = UNBOUNDED) -> "Utf8String":
        """Substring by codepoint position; may split a character from its marks."""
        return self._derive(codepoint_substring(self._data, pos, count, scanner=self._scanner))

    def startswith(self, prefix: object) -> bool:
        return self._data.startswith(to_bytes(prefix))

    def endswith(self, suffix: object) -> bool:
        return self._data.endswith(to_bytes(suffix))

    def find(self, sub: object, start: int = 0) -> int:
        """Byte offset of ``sub`` or -1."""
        return self._data.find(to_bytes(sub), start)

    def _derive(self, data: bytes) -> "Utf8String":
        return Utf8String(data, scanner=self._scanner)

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __contains__(self, item: object) -> bool:
        return to_bytes(item) in self._data

    def __add__(self, other: object) -> "Utf8String":
        try:
            return self._derive(self._data + to_bytes(other))
        except TypeError:
            return NotImplemented

    def __radd__(self, other: object) -> "Utf8String":
        try:
            return self._derive(to_bytes(other) + self._data)
        except TypeError:
            return NotImplemented

    def __eq__(self, other: object) -> bool:
        # str is excluded so that equal values always share a hash.
        if isinstance(other, (Utf8String, bytes, bytearray, memoryview)):
            return self._data == to_bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        return self._data.decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"Utf8String({self._data!r})"


__all__ = ["Utf8String"]

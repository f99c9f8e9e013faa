"""Structural UTF-8 codepoint decoder.

Every function here inspects a single position of a byte sequence and never
raises for malformed input. Validity is purely structural: the lead byte
announces a length and the following bytes must be continuation bytes.
Overlong forms, UTF-16 surrogates and values above U+10FFFF that satisfy the
byte pattern are accepted. :func:`utf8text.codec.is_conformant_utf8` is the
strict check.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Tuple

REPLACEMENT_CHAR = 0xFFFD


class ByteClass(str, Enum):
    SINGLE = "single"
    LEAD2 = "lead2"
    LEAD3 = "lead3"
    LEAD4 = "lead4"
    CONTINUATION = "continuation"
    INVALID = "invalid"


_LENGTHS: Dict[ByteClass, int] = {
    ByteClass.SINGLE: 1,
    ByteClass.LEAD2: 2,
    ByteClass.LEAD3: 3,
    ByteClass.LEAD4: 4,
}

# payload mask of the lead byte, indexed by encoded length
_LEAD_MASKS = (0x00, 0x7F, 0x1F, 0x0F, 0x07)


def classify(byte: int) -> ByteClass:
    """Classify one byte by its high bits."""

    if byte & 0x80 == 0x00:
        return ByteClass.SINGLE
    if byte & 0xE0 == 0xC0:
        return ByteClass.LEAD2
    if byte & 0xF0 == 0xE0:
        return ByteClass.LEAD3
    if byte & 0xF8 == 0xF0:
        return ByteClass.LEAD4
    if byte & 0xC0 == 0x80:
        return ByteClass.CONTINUATION
    return ByteClass.INVALID


def is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def byte_length_at(data: bytes, offset: int) -> int:
    """Return the length announced by the byte at ``offset``.

    ``0`` means no codepoint can start there: the byte is a continuation byte,
    an invalid pattern, or ``offset`` is past the end. Continuation bytes are
    not inspected.
    """

    if offset < 0 or offset >= len(data):
        return 0
    return _LENGTHS.get(classify(data[offset]), 0)


def is_valid_at(data: bytes, offset: int) -> bool:
    """Return ``True`` if a structurally complete codepoint starts at ``offset``."""

    length = byte_length_at(data, offset)
    if length == 0 or offset + length > len(data):
        return False
    for index in range(offset + 1, offset + length):
        if not is_continuation(data[index]):
            return False
    return True


def decode_at(data: bytes, offset: int) -> int:
    """Decode the codepoint at ``offset``.

    Callers are expected to check :func:`is_valid_at` first; an invalid position
    yields :data:`REPLACEMENT_CHAR`.
    """

    if not is_valid_at(data, offset):
        return REPLACEMENT_CHAR
    length = byte_length_at(data, offset)
    codepoint = data[offset] & _LEAD_MASKS[length]
    for index in range(offset + 1, offset + length):
        codepoint = (codepoint << 6) | (data[index] & 0x3F)
    return codepoint


def iter_valid(data: bytes, start_offset: int = 0) -> Iterator[Tuple[int, int]]:
    """Yield ``(offset, length)`` for each valid codepoint from ``start_offset``.

    Bytes that do not start a valid codepoint are stepped over one at a time.
    """

    offset = max(start_offset, 0)
    size = len(data)
    while offset < size:
        if is_valid_at(data, offset):
            length = byte_length_at(data, offset)
            yield offset, length
            offset += length
        else:
            offset += 1


__all__ = [
    "REPLACEMENT_CHAR",
    "ByteClass",
    "classify",
    "is_continuation",
    "byte_length_at",
    "is_valid_at",
    "decode_at",
    "iter_valid",
]

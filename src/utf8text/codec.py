"""Bulk conversion between UTF-8 bytes and codepoint sequences."""
from __future__ import annotations

import sys
from typing import Iterable, Iterator, List

from .decoder import REPLACEMENT_CHAR, decode_at, iter_valid
from .utils.text import to_bytes
from .utils.validation import MAX_CODEPOINT


def iter_codepoints(data) -> Iterator[int]:
    """Lazily decode ``data``; invalid bytes are dropped."""
    data = to_bytes(data)
    for offset, _length in iter_valid(data):
        yield decode_at(data, offset)


def decode_all(data) -> List[int]:
    return list(iter_codepoints(data))


def encode_all(codepoints: Iterable[int]) -> bytes:
    """Encode ``codepoints`` as UTF-8.

    Values outside ``[0, 0x10FFFF]`` are dropped without emitting any bytes.
    Surrogate values are packed like any other 3-byte codepoint, so the output
    is only conformant UTF-8 when the input holds Unicode scalar values.
    """

    out = bytearray()
    for codepoint in codepoints:
        if codepoint < 0:
            continue
        if codepoint <= 0x7F:
            out.append(codepoint)
        elif codepoint <= 0x7FF:
            out += bytes((0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)))
        elif codepoint <= 0xFFFF:
            out += bytes(
                (
                    0xE0 | (codepoint >> 12),
                    0x80 | ((codepoint >> 6) & 0x3F),
                    0x80 | (codepoint & 0x3F),
                )
            )
        elif codepoint <= MAX_CODEPOINT:
            out += bytes(
                (
                    0xF0 | (codepoint >> 18),
                    0x80 | ((codepoint >> 12) & 0x3F),
                    0x80 | ((codepoint >> 6) & 0x3F),
                    0x80 | (codepoint & 0x3F),
                )
            )
    return bytes(out)


def decode_text(data) -> str:
    """Decode ``data`` into a ``str``.

    Structurally valid sequences that decode past ``sys.maxunicode`` become
    U+FFFD; invalid bytes are dropped as in :func:`decode_all`.
    """

    return "".join(
        chr(codepoint) if codepoint <= sys.maxunicode else chr(REPLACEMENT_CHAR)
        for codepoint in iter_codepoints(data)
    )


def encode_text(text: str) -> bytes:
    return encode_all(ord(char) for char in text)


def is_conformant_utf8(data) -> bool:
    """Strict check rejecting overlong forms, surrogates and values past U+10FFFF."""
    try:
        to_bytes(data).decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True


__all__ = [
    "iter_codepoints",
    "decode_all",
    "encode_all",
    "decode_text",
    "encode_text",
    "is_conformant_utf8",
]

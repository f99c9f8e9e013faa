"""Input coercion helpers shared across modules."""
from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def to_bytes(data: str | BytesLike | object) -> bytes:
    """Return ``data`` as an immutable ``bytes`` object.

    ``str`` input is encoded as UTF-8; lone surrogates are passed through so that
    every Python string has a byte form. Objects implementing ``__bytes__`` (such
    as :class:`~utf8text.models.Utf8String`) are converted with ``bytes()``.
    """

    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogatepass")
    if isinstance(data, (bytearray, memoryview)) or hasattr(data, "__bytes__"):
        return bytes(data)  # type: ignore[arg-type]
    raise TypeError(f"Expected str or bytes-like input, got {type(data).__name__}")


def format_codepoint(codepoint: int) -> str:
    return f"U+{codepoint:04X}"


__all__ = ["BytesLike", "to_bytes", "format_codepoint"]

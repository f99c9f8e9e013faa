"""Utility exports."""
from .text import BytesLike, format_codepoint, to_bytes
from .validation import MAX_CODEPOINT, ensure_position, parse_codepoint

__all__ = [
    "BytesLike",
    "format_codepoint",
    "to_bytes",
    "MAX_CODEPOINT",
    "ensure_position",
    "parse_codepoint",
]

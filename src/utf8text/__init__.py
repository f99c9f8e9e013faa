"""UTF-8 validation, decoding, measurement and substring extraction."""
from .codec import decode_all, decode_text, encode_all, encode_text, is_conformant_utf8, iter_codepoints
from .decoder import REPLACEMENT_CHAR
from .models import Utf8String
from .scanner import (
    Scanner,
    ScannerConfig,
    TextMetrics,
    count_characters,
    count_codepoints,
    is_valid_utf8,
    measure,
    string_width,
)
from .substring import UNBOUNDED, character_substring, codepoint_substring
from .version import __version__

__all__ = [
    "REPLACEMENT_CHAR",
    "UNBOUNDED",
    "Scanner",
    "ScannerConfig",
    "TextMetrics",
    "Utf8String",
    "__version__",
    "character_substring",
    "codepoint_substring",
    "count_characters",
    "count_codepoints",
    "decode_all",
    "decode_text",
    "encode_all",
    "encode_text",
    "is_conformant_utf8",
    "is_valid_utf8",
    "iter_codepoints",
    "measure",
    "string_width",
]

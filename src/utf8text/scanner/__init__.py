"""Scanner package exports."""
from .engine import (
    Scanner,
    ScannerConfig,
    TextMetrics,
    count_characters,
    count_codepoints,
    default_scanner,
    is_valid_utf8,
    measure,
    string_width,
)

__all__ = [
    "Scanner",
    "ScannerConfig",
    "TextMetrics",
    "count_characters",
    "count_codepoints",
    "default_scanner",
    "is_valid_utf8",
    "measure",
    "string_width",
]

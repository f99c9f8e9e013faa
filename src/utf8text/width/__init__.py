"""Width table exports."""
from .columns import BACKSPACE, char_width, is_combining
from .registry import WcwidthTable, WidthTable, WidthTableRegistry
from .tables import CJK_TABLE, DEFAULT_TABLE, default_registry, load_builtin_tables

__all__ = [
    "BACKSPACE",
    "char_width",
    "is_combining",
    "WcwidthTable",
    "WidthTable",
    "WidthTableRegistry",
    "CJK_TABLE",
    "DEFAULT_TABLE",
    "default_registry",
    "load_builtin_tables",
]

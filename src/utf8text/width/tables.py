"""Built-in width tables for utf8text."""
from __future__ import annotations

from .registry import WcwidthTable, WidthTableRegistry

DEFAULT_TABLE = "wcwidth"
CJK_TABLE = "wcwidth.cjk"


def load_builtin_tables(registry: WidthTableRegistry) -> WidthTableRegistry:
    registry.register(DEFAULT_TABLE, WcwidthTable())
    # East Asian Ambiguous characters take two columns in CJK terminals
    registry.register(CJK_TABLE, WcwidthTable(ambiguous_width=2))
    return registry


def default_registry() -> WidthTableRegistry:
    return load_builtin_tables(WidthTableRegistry())


__all__ = ["DEFAULT_TABLE", "CJK_TABLE", "load_builtin_tables", "default_registry"]

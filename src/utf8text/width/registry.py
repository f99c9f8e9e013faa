"""Display-width tables and the registry that names them."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Mapping

from wcwidth import wcwidth

WidthTable = Callable[[int], int]
"""``codepoint -> columns``: 0, 1, 2, or -1 for non-printable codepoints."""


@dataclass(frozen=True, slots=True)
class WcwidthTable:
    """Width table backed by the ``wcwidth`` library."""

    ambiguous_width: int = 1

    def __call__(self, codepoint: int) -> int:
        # structurally decoded values can exceed the Unicode range
        if codepoint < 0 or codepoint > sys.maxunicode:
            return -1
        return wcwidth(chr(codepoint), ambiguous_width=self.ambiguous_width)


class WidthTableRegistry:
    """Runtime registry for built-in and user provided width tables."""

    def __init__(self) -> None:
        self._tables: Dict[str, WidthTable] = {}

    def register(self, name: str, table: WidthTable, override: bool = False) -> None:
        if not override and name in self._tables:
            raise ValueError(f"Width table already registered: {name}")
        self._tables[name] = table

    def unregister(self, name: str) -> None:
        self._tables.pop(name, None)

    def get(self, name: str) -> WidthTable:
        try:
            return self._tables[name]
        except KeyError as exc:
            raise KeyError(f"Unknown width table: {name}") from exc

    def all(self) -> Mapping[str, WidthTable]:
        return dict(self._tables)

    def names(self) -> Iterator[str]:
        yield from sorted(self._tables)


__all__ = ["WidthTable", "WcwidthTable", "WidthTableRegistry"]

"""Validation helpers for caller-supplied arguments."""
from __future__ import annotations

from typing import Optional

MAX_CODEPOINT = 0x10FFFF

_HEX_PREFIXES = ("u+", "0x", "\\u", "\\x")


def ensure_position(value: Optional[int], name: str) -> Optional[int]:
    """Reject negative positions and counts.

    Parameters
    ----------
    value:
        Position or count supplied by a caller. ``None`` is passed through
        unchanged because it means "unbounded".
    name:
        Argument name used in the error message.

    Returns
    -------
    Optional[int]
        The validated value.

    Raises
    ------
    ValueError
        If ``value`` is negative.
    """

    if value is None:
        return None
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    return value


def parse_codepoint(token: str) -> int:
    """Parse ``U+00E9``, ``0xE9``, ``\\u00e9`` or decimal notation into an integer.

    Values outside the Unicode range are returned as-is; the encoder decides
    what to do with them.
    """

    candidate = token.strip()
    if not candidate:
        raise ValueError("Codepoint must not be empty")
    lowered = candidate.lower()
    prefix = next((p for p in _HEX_PREFIXES if lowered.startswith(p)), None)
    try:
        if prefix is not None:
            value = int(candidate[len(prefix):], 16)
        else:
            value = int(candidate, 10)
    except ValueError:
        raise ValueError(f"Invalid codepoint: {token!r}") from None
    if value < 0:
        raise ValueError(f"Codepoint must not be negative: {token!r}")
    return value


__all__ = ["MAX_CODEPOINT", "ensure_position", "parse_codepoint"]

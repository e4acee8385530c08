"""String helpers shared by the codec and the search heuristics."""

from __future__ import annotations

from typing import Iterable, Optional


def split_head(value: str, separator: str) -> tuple[Optional[str], str]:
    """Split ``value`` at the first ``separator``.

    Returns ``(None, value)`` when the separator does not occur. Everything
    after the first occurrence is returned verbatim, further separators
    included.
    """
    head, found, tail = value.partition(separator)
    if not found:
        return None, value
    return head, tail


def split_tail(value: str, separator: str) -> tuple[str, Optional[str]]:
    """Split ``value`` at the last ``separator``.

    Returns ``(value, None)`` when the separator does not occur.
    """
    parts = value.rsplit(separator, 1)
    if len(parts) == 1:
        return value, None
    return parts[0], parts[1]


def strip_any_suffix(value: str, suffixes: Iterable[str]) -> tuple[str, Optional[str]]:
    """Remove the first matching suffix, returning it alongside the result."""
    for suffix in suffixes:
        if suffix and value.endswith(suffix):
            return value[: -len(suffix)], suffix
    return value, None


def strip_trailing_newline(value: str) -> str:
    """Drop a single trailing newline, as printed by line-oriented tools."""
    if value.endswith("\r\n"):
        return value[:-2]
    if value.endswith("\n"):
        return value[:-1]
    return value

"""Flat string encoding for values kept in the harp store.

The store only holds plain strings, so multi-field values are packed with a
single reserved byte, :data:`SENTINEL` (ASCII DEL). Nothing is escaped: the
byte is assumed never to be typed as part of a search pattern or a path.

Two layouts share the sentinel:

* a global search record, ``path + SENTINEL + pattern``, split at the
  *first* sentinel;
* a stored pattern, ``pattern`` or ``pattern + SENTINEL + offset``, split at
  the *last* sentinel.

A pattern that really contains the sentinel and was saved without an offset
therefore reads back with its final segment taken as the offset. Existing
stored values depend on this, so it is kept as is.
"""

from __future__ import annotations

import logging
from typing import Optional

from harpsearch.models import GlobalSearchRecord, StoredPattern
from harpsearch.utils.text import split_head, split_tail

LOGGER = logging.getLogger(__name__)

SENTINEL = "\x7f"


def encode_record(path: str, pattern: str) -> str:
    """Pack a path and a search pattern into one stored value."""
    if SENTINEL in path:
        raise ValueError(f"Path must not contain the DEL separator: {path!r}")
    return f"{path}{SENTINEL}{pattern}"


def decode_record(stored: str) -> GlobalSearchRecord:
    """Unpack a value produced by :func:`encode_record`.

    Values without any sentinel are older single-field entries: the whole
    string is the pattern and the path is empty.
    """
    path, pattern = split_head(stored, SENTINEL)
    if path is None:
        LOGGER.debug("Stored value has no path field, reading it as a bare pattern")
        return GlobalSearchRecord(path="", pattern=stored)
    return GlobalSearchRecord(path=path, pattern=pattern)


def join_offset(pattern: str, offset: Optional[str]) -> str:
    """Append a search offset to a pattern; no separator when there is none."""
    if offset is None:
        return pattern
    return f"{pattern}{SENTINEL}{offset}"


def split_offset(stored: str) -> StoredPattern:
    """Separate a stored pattern from its offset. The last field is the offset."""
    pattern, offset = split_tail(stored, SENTINEL)
    return StoredPattern(pattern=pattern, offset=offset)

"""Turn stored patterns into vi-style search commands."""

from __future__ import annotations

import logging
from typing import Optional

from harpsearch.encoding.codec import split_offset
from harpsearch.models import SearchDirective
from harpsearch.search.heuristic import END_OF_MATCH_OFFSET, maybe_extract_offset

LOGGER = logging.getLogger(__name__)

FORWARD = "/"
BACKWARD = "?"


def direction_marker(backwards: bool) -> str:
    return BACKWARD if backwards else FORWARD


def compile_search(pattern: str, offset: Optional[str], backwards: bool) -> str:
    """Build ``/pattern/offset`` or ``?pattern?offset``.

    The offset is delimited with the same marker as the pattern. Neither part
    is escaped or checked.
    """
    marker = direction_marker(backwards)
    command = f"{marker}{pattern}"
    if offset is not None:
        command += f"{marker}{offset}"
    return command


def resolve_directive(
    stored: str,
    *,
    backwards: bool = False,
    assume_offset: bool = False,
    at_end: bool = False,
) -> SearchDirective:
    """Build the directive for a stored pattern value.

    An offset saved with the pattern always wins. Otherwise a trailing
    ``/e``/``?e`` is read as an offset when ``assume_offset`` is set, and
    ``at_end`` falls back to the end-of-match offset.
    """
    stored_pattern = split_offset(stored)
    pattern, offset = stored_pattern.pattern, stored_pattern.offset

    if offset is None:
        pattern, offset = maybe_extract_offset(pattern, assume_offset)
        if offset is not None:
            LOGGER.debug("Using offset %r inferred from the pattern suffix", offset)

    if offset is None and at_end:
        offset = END_OF_MATCH_OFFSET

    return SearchDirective(pattern=pattern, offset=offset, backwards=backwards)

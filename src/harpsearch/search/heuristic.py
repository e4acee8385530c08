"""Recover search offsets typed straight into a pattern.

The editor's last-search register keeps only the pattern, so a search such
as ``/foo/e`` is saved as ``foo`` and the offset is lost. Users who save a
pattern by hand often write the offset in anyway (``foo/e``); this module
turns that trailing marker back into an offset when asked to.
"""

from __future__ import annotations

from typing import Optional

from harpsearch.utils.text import strip_any_suffix

END_OF_MATCH_OFFSET = "e"

FORWARD_END_MARKER = "/" + END_OF_MATCH_OFFSET
BACKWARD_END_MARKER = "?" + END_OF_MATCH_OFFSET

END_MARKERS = (FORWARD_END_MARKER, BACKWARD_END_MARKER)


def maybe_extract_offset(pattern: str, enabled: bool) -> tuple[str, Optional[str]]:
    """Strip a trailing ``/e`` or ``?e`` and report it as an end-of-match offset.

    With ``enabled`` false the pattern is returned untouched.
    """
    if not enabled:
        return pattern, None
    stripped, marker = strip_any_suffix(pattern, END_MARKERS)
    if marker is None:
        return pattern, None
    return stripped, END_OF_MATCH_OFFSET

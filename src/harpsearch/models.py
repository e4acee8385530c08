"""Core harpsearch data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class GlobalSearchRecord:
    """A search harp bound to a file: where to go, then what to search."""

    path: str
    pattern: str


@dataclass(frozen=True, slots=True)
class StoredPattern:
    """Search pattern paired with the offset it was saved with."""

    pattern: str
    offset: Optional[str] = None

    def serialize(self) -> str:
        from harpsearch.encoding.codec import join_offset

        return join_offset(self.pattern, self.offset)


@dataclass(frozen=True, slots=True)
class SearchDirective:
    """Fully resolved search, ready to hand to the editor."""

    pattern: str
    offset: Optional[str] = None
    backwards: bool = False

    def compile(self) -> str:
        from harpsearch.search.compiler import compile_search

        return compile_search(self.pattern, self.offset, self.backwards)


@dataclass(frozen=True, slots=True)
class SearchTarget:
    """Result of recalling a search harp.

    ``path`` is the file to open before searching, or ``None`` when the search
    runs in the current buffer.
    """

    path: Optional[str]
    directive: SearchDirective


@dataclass(frozen=True, slots=True)
class MarkLocation:
    """Cursor position of a mark, with its file for global marks."""

    line: int
    column: int
    path: Optional[str] = None

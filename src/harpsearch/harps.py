"""Harp registers: saved paths, marks and searches kept in the harp store.

Every kind of harp lives in its own store section. Sections that depend on
where you are (the working directory or the current buffer) get that location
appended to their name, so the same register letter can mean different
things in different places.
"""

from __future__ import annotations

import logging
from typing import Optional

from harpsearch.encoding.codec import decode_record, encode_record
from harpsearch.models import MarkLocation, SearchTarget
from harpsearch.prompt import LineReader, maybe_add_offset
from harpsearch.search.compiler import resolve_directive
from harpsearch.store.client import HarpStore

LOGGER = logging.getLogger(__name__)

DEFAULT_SECTION = "harps"
CD_SECTION = "cd_harps"
POSITIONAL_SECTION = "positional_harps"
GLOBAL_MARKS_SECTION = "global_marks"
GLOBAL_SEARCH_SECTION = "global_search"


def percwd_section(cwd: str) -> str:
    return f"cwd_harps_{cwd}"


def local_marks_section(buffer_path: str) -> str:
    return f"local_marks_{buffer_path}"


def local_search_section(buffer_path: str) -> str:
    return f"local_search_{buffer_path}"


def _parse_location(lines: Optional[list[str]], with_path: bool = False) -> Optional[MarkLocation]:
    if lines is None:
        return None
    expected = 3 if with_path else 2
    if len(lines) < expected:
        LOGGER.debug("Expected %d fields from harp, got %r", expected, lines)
        return None
    values = lines[-2:]
    try:
        line, column = int(values[0]), int(values[1])
    except ValueError:
        LOGGER.debug("Mark fields are not numbers: %r", values)
        return None
    return MarkLocation(line=line, column=column, path=lines[0] if with_path else None)


class Harps:
    """High-level API over the harp store."""

    def __init__(self, store: HarpStore) -> None:
        self.store = store

    # Path harps

    def default_get(self, register: str) -> Optional[str]:
        return self.store.get_path(DEFAULT_SECTION, register)

    def default_set(self, register: str, path: str) -> bool:
        return self.store.update(DEFAULT_SECTION, register, path=path)

    def percwd_get(self, register: str, cwd: str) -> Optional[str]:
        return self.store.get_path(percwd_section(cwd), register)

    def percwd_set(self, register: str, cwd: str, path: str) -> bool:
        return self.store.update(percwd_section(cwd), register, path=path)

    def cd_get(self, register: str) -> Optional[str]:
        return self.store.get_path(CD_SECTION, register)

    def cd_set(self, register: str, directory: str) -> bool:
        return self.store.update(CD_SECTION, register, path=directory)

    def positional_get(self, register: str) -> Optional[str]:
        return self.store.get_path(POSITIONAL_SECTION, register)

    def positional_set(self, register: str, relative_path: str) -> bool:
        return self.store.update(POSITIONAL_SECTION, register, path=relative_path)

    # Marks

    def local_mark_get(self, register: str, buffer_path: str) -> Optional[MarkLocation]:
        lines = self.store.get_fields(local_marks_section(buffer_path), register, ["line", "column"])
        return _parse_location(lines)

    def local_mark_set(self, register: str, buffer_path: str, line: int, column: int) -> bool:
        return self.store.update(local_marks_section(buffer_path), register, line=line, column=column)

    def global_mark_get(self, register: str) -> Optional[MarkLocation]:
        lines = self.store.get_fields(GLOBAL_MARKS_SECTION, register, ["path", "line", "column"])
        return _parse_location(lines, with_path=True)

    def global_mark_set(self, register: str, path: str, line: int, column: int) -> bool:
        return self.store.update(GLOBAL_MARKS_SECTION, register, path=path, line=line, column=column)

    # Search harps

    def set_local_search(
        self,
        register: str,
        buffer_path: str,
        last_search: str,
        *,
        ask_offset: bool = False,
        read_line: Optional[LineReader] = None,
    ) -> Optional[bool]:
        """Save ``last_search`` in a register tied to ``buffer_path``.

        Returns whether harp accepted the value, or ``None`` without writing
        anything if the offset prompt was cancelled.
        """
        value = maybe_add_offset(last_search, ask_offset, read_line)
        if value is None:
            return None
        return self.store.update(local_search_section(buffer_path), register, path=value)

    def get_local_search(
        self,
        register: str,
        buffer_path: str,
        *,
        backwards: bool = False,
        assume_offset: bool = False,
        at_end: bool = False,
    ) -> Optional[SearchTarget]:
        stored = self.store.get_path(local_search_section(buffer_path), register)
        if stored is None:
            return None
        directive = resolve_directive(
            stored, backwards=backwards, assume_offset=assume_offset, at_end=at_end
        )
        return SearchTarget(path=None, directive=directive)

    def set_global_search(
        self,
        register: str,
        path: str,
        last_search: str,
        *,
        ask_offset: bool = False,
        read_line: Optional[LineReader] = None,
    ) -> Optional[bool]:
        """Save ``last_search`` together with the file it should run in."""
        value = maybe_add_offset(last_search, ask_offset, read_line)
        if value is None:
            return None
        return self.store.update(GLOBAL_SEARCH_SECTION, register, path=encode_record(path, value))

    def get_global_search(
        self,
        register: str,
        *,
        backwards: bool = False,
        assume_offset: bool = False,
        at_end: bool = False,
    ) -> Optional[SearchTarget]:
        stored = self.store.get_path(GLOBAL_SEARCH_SECTION, register)
        if stored is None:
            return None
        record = decode_record(stored)
        directive = resolve_directive(
            record.pattern, backwards=backwards, assume_offset=assume_offset, at_end=at_end
        )
        return SearchTarget(path=record.path or None, directive=directive)

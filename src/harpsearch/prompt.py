"""Optional offset prompt used when saving a search harp."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.prompt import Prompt

from harpsearch.encoding.codec import join_offset

LOGGER = logging.getLogger(__name__)

OFFSET_PROMPT = "search offset"

# Returns the submitted line, or None when the user cancelled.
LineReader = Callable[[str], Optional[str]]


def maybe_add_offset(pattern: str, ask: bool, read_line: Optional[LineReader] = None) -> Optional[str]:
    """Ask for an offset and attach it to ``pattern``.

    Returns ``None`` when the user cancels, meaning nothing should be saved.
    An empty answer keeps the pattern as it is.
    """
    if not ask:
        return pattern
    if read_line is None:
        raise ValueError("An offset was requested but no line reader was given")

    answer = read_line(OFFSET_PROMPT)
    if answer is None:
        LOGGER.debug("Offset prompt cancelled")
        return None
    if answer == "":
        return pattern
    return join_offset(pattern, answer)


def console_line_reader(console: Console) -> LineReader:
    """Line reader backed by a rich prompt; Ctrl-C and Ctrl-D cancel."""

    def read_line(prompt: str) -> Optional[str]:
        try:
            return Prompt.ask(prompt, console=console, default="", show_default=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            return None

    return read_line

"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

from harpsearch.store.client import DEFAULT_EXECUTABLE

EXECUTABLE_ENV = "HARPSEARCH_HARP"
ASSUME_OFFSET_ENV = "HARPSEARCH_ASSUME_OFFSET"
ASK_OFFSET_ENV = "HARPSEARCH_ASK_OFFSET"

_TRUTHY = {"1", "true", "yes", "on"}


def _get_default_executable() -> str:
    """Get the harp executable, honouring the environment override."""
    return os.environ.get(EXECUTABLE_ENV) or DEFAULT_EXECUTABLE


def _get_default_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(slots=True)
class AppConfig:
    harp_executable: str | None = None
    assume_offset: bool | None = None
    ask_offset: bool | None = None

    def __post_init__(self) -> None:
        if self.harp_executable is None:
            self.harp_executable = _get_default_executable()
        if self.assume_offset is None:
            self.assume_offset = _get_default_flag(ASSUME_OFFSET_ENV)
        if self.ask_offset is None:
            self.ask_offset = _get_default_flag(ASK_OFFSET_ENV)

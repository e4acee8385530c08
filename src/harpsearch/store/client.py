"""Adapter for the ``harp`` command line key-value store."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable, List, Optional, Sequence

from harpsearch.utils.text import strip_trailing_newline

LOGGER = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "harp"

Runner = Callable[..., subprocess.CompletedProcess]


class HarpStoreError(RuntimeError):
    """Raised when the harp executable cannot be run at all."""


class HarpStore:
    """Reads and writes harp registers by running the ``harp`` binary.

    A non-zero exit from ``harp get`` is treated as an empty register. It
    might be some other failure, but running the same command in a shell is
    the way to find out.
    """

    def __init__(self, executable: str = DEFAULT_EXECUTABLE, *, runner: Runner = subprocess.run) -> None:
        self.executable = executable
        self._runner = runner

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def _run(self, args: Sequence[str]) -> subprocess.CompletedProcess:
        command = [self.executable, *args]
        LOGGER.debug("Running %s", command)
        try:
            return self._runner(command, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise HarpStoreError(f"Could not run {self.executable!r}: {exc}") from exc

    def get_fields(self, section: str, register: str, fields: Sequence[str]) -> Optional[List[str]]:
        """Fetch several fields of a register, one output line per field."""
        result = self._run(["get", section, register, *(f"--{name}" for name in fields)])
        if result.returncode != 0:
            LOGGER.debug("harp get %s %s failed: %s", section, register, (result.stderr or "").strip())
            return None
        return result.stdout.splitlines()

    def get_path(self, section: str, register: str) -> Optional[str]:
        """Fetch the ``path`` field of a register verbatim."""
        result = self._run(["get", section, register, "--path"])
        if result.returncode != 0:
            LOGGER.debug("harp get %s %s failed: %s", section, register, (result.stderr or "").strip())
            return None
        return strip_trailing_newline(result.stdout)

    def update(
        self,
        section: str,
        register: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> bool:
        """Set fields of a register. Returns whether harp reported success."""
        args = ["update", section, register]
        if line is not None:
            args += ["--line", str(line)]
        if column is not None:
            args += ["--column", str(column)]
        if path is not None:
            # `--` keeps values that start with a dash from being read as flags
            args += ["--path", "--", path]
        result = self._run(args)
        if result.returncode != 0:
            LOGGER.warning("harp update %s %s failed: %s", section, register, (result.stderr or "").strip())
            return False
        return True

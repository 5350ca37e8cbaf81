"""Output and error redirection for hostinfo."""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from hostinfo.errors import PathAccessError, RedirectionSetupError

logger = logging.getLogger(__name__)


def check_path_access(path: str) -> None:
    """
    Verify that ``path`` can be written without touching the filesystem.

    Args:
        path: Target file. A bare file name is checked against the current directory.

    Raises:
        PathAccessError: If the parent directory is missing or not writable,
            or the file exists and is not writable.
    """
    target = Path(path)
    parent = target.parent

    if not parent.is_dir():
        raise PathAccessError(f"parent directory '{parent}' does not exist", path)

    if not os.access(parent, os.W_OK):
        raise PathAccessError(f"no write permission on directory '{parent}'", path)

    if target.exists() and not os.access(target, os.W_OK):
        raise PathAccessError(f"no write permission on file '{path}'", path)


def _open(path: str, mode: str) -> TextIO:
    try:
        return open(path, mode, encoding="utf-8")
    except OSError as exc:
        # The access check passed but the open still failed (e.g. a directory).
        raise RedirectionSetupError(exc.strerror or str(exc), path) from exc


def open_error_sink(path: str) -> TextIO:
    """Check ``path`` and open it for appending error output."""
    check_path_access(path)
    logger.debug("Redirecting errors to %s", path)
    return _open(path, "a")


def open_output_sink(path: str) -> TextIO:
    """Check ``path``, then truncate or create it for this run's output."""
    check_path_access(path)
    logger.debug("Redirecting output to %s", path)
    return _open(path, "w")


def open_help_sink(path: str) -> TextIO:
    """Check ``path`` and open it for appending help text."""
    check_path_access(path)
    return _open(path, "a")


@dataclass(slots=True)
class Sinks:
    """
    The active output and error streams for one run.

    Streams opened here are owned by the instance and closed by ``close()``;
    the initial streams passed in are left open.
    """

    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)
    _owned: list[TextIO] = field(default_factory=list)

    def redirect_errors(self, path: str) -> None:
        self.err = open_error_sink(path)
        self._owned.append(self.err)

    def redirect_output(self, path: str) -> None:
        self.out = open_output_sink(path)
        self._owned.append(self.out)

    def close(self) -> None:
        while self._owned:
            self._owned.pop().close()

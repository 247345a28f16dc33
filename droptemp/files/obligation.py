"""Ownership token tying a temp file path to its eventual deletion."""

from __future__ import annotations

import logging
import weakref
from pathlib import Path
from typing import IO

from droptemp.core.cleanup import release_quietly, remove_quietly

logger = logging.getLogger(__name__)


class SpentHandleError(RuntimeError):
    """Raised when a handle is used after its ownership moved elsewhere."""


def _discharge(path: Path, open_files: list[IO]) -> None:
    # Must not reference the obligation itself, or it would never be collected.
    while open_files:
        release_quietly(open_files.pop())
    remove_quietly(path)


class DeletionObligation:
    """Deletes ``path`` exactly once, when discharged or garbage collected.

    Ownership moves with :meth:`transfer`: the new token takes over the
    finalizer and the old one is left spent, so only one live token can
    ever remove the file. Files registered with :meth:`track` are closed
    before the unlink.
    """

    def __init__(self, path: Path, _open_files: list[IO] | None = None) -> None:
        self._path = Path(path)
        self._open_files: list[IO] = [] if _open_files is None else _open_files
        self._spent = False
        self._finalizer = weakref.finalize(self, _discharge, self._path, self._open_files)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def spent(self) -> bool:
        """True once transferred or discharged."""
        return self._spent

    @property
    def alive(self) -> bool:
        return self._finalizer.alive

    def track(self, file: IO) -> None:
        self._open_files.append(file)

    def untrack(self, file: IO) -> None:
        if file in self._open_files:
            self._open_files.remove(file)

    def transfer(self) -> DeletionObligation:
        """Hand the obligation to a fresh token and retire this one."""
        if self._spent:
            raise SpentHandleError(f"Deletion of {self._path} is no longer owned here")
        self._finalizer.detach()
        self._spent = True
        return DeletionObligation(self._path, self._open_files)

    def discharge(self) -> None:
        """Delete the file now. Safe to call any number of times."""
        if self._spent:
            return
        self._spent = True
        self._finalizer()
        logger.debug("Discharged temp file %s", self._path)

    def __repr__(self) -> str:
        state = "spent" if self._spent else "live"
        return f"DeletionObligation({str(self._path)!r}, {state})"

"""Temp file handles: an open state and a closed state.

Closing and reopening are consuming transitions. Each returns a new handle
that owns the deletion of the file, and the handle it was called on becomes
spent. Whichever handle ends up owning the file deletes it when discarded,
either explicitly, at the end of a ``with`` block, or when it is garbage
collected.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from droptemp.core.config import settings
from droptemp.core.naming import generate
from droptemp.files.obligation import DeletionObligation, SpentHandleError

logger = logging.getLogger(__name__)

CREATE_MODE = "x+b"  # Exclusive create, read/write
_CREATING_MODE_CHARS = frozenset("wxa")


class _Handle:
    """Shared plumbing for both handle states."""

    def __init__(self, obligation: DeletionObligation) -> None:
        self._obligation = obligation

    @property
    def path(self) -> Path:
        """Path of the temp file. Fixed for the handle's whole life."""
        return self._obligation.path

    @property
    def spent(self) -> bool:
        return self._obligation.spent

    def discard(self) -> None:
        """Close any open descriptor and delete the file, ignoring errors.

        Does nothing if ownership already moved to another handle.
        """
        if self._obligation.spent:
            return
        self._obligation.discharge()

    def _check_live(self) -> None:
        if self._obligation.spent:
            raise SpentHandleError(
                f"Handle for {self.path} was already closed, reopened or discarded"
            )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.discard()


class TempFile(_Handle):
    """An open temp file."""

    def __init__(self, file: IO, obligation: DeletionObligation) -> None:
        super().__init__(obligation)
        self._file = file
        obligation.track(file)

    @property
    def file(self) -> IO:
        """The live file object, for reading and writing."""
        self._check_live()
        return self._file

    def close(self) -> ClosedTempFile:
        """Release the descriptor and return the closed form of this file.

        Unlike the other transitions this can fail: if flushing buffered
        writes raises, the error propagates and this handle keeps ownership,
        so it can still be discarded.
        """
        self._check_live()
        self._file.close()
        self._obligation.untrack(self._file)
        logger.debug("Closed temp file %s", self.path)
        return ClosedTempFile(self._obligation.transfer())

    def __repr__(self) -> str:
        state = "spent" if self.spent else "open"
        return f"<TempFile {str(self.path)!r} {state}>"


class ClosedTempFile(_Handle):
    """A temp file whose descriptor has been released but which still exists."""

    def reopen(self, mode: str | None = None) -> TempFile:
        """Open the file again, read-only unless ``mode`` says otherwise.

        ``mode`` may never create or truncate. If the file has gone missing
        the error propagates and this handle stays usable.
        """
        self._check_live()
        mode = mode or settings.reopen_mode
        if _CREATING_MODE_CHARS.intersection(mode):
            raise ValueError(f"Reopen mode must not create or truncate: {mode!r}")
        file = open(self.path, mode)
        logger.debug("Reopened temp file %s (mode=%s)", self.path, mode)
        return TempFile(file, self._obligation.transfer())

    def __repr__(self) -> str:
        state = "spent" if self.spent else "closed"
        return f"<ClosedTempFile {str(self.path)!r} {state}>"


def create(path: str | Path) -> TempFile:
    """Create a new temp file at ``path``, failing if anything is already there."""
    path = Path(path)
    file = open(path, CREATE_MODE)
    logger.debug("Created temp file %s", path)
    return TempFile(file, DeletionObligation(path))


def from_directory(directory: str | Path) -> TempFile:
    """Create a uniquely named temp file inside ``directory``."""
    return create(Path(directory) / generate())


def default() -> TempFile:
    """Create a uniquely named temp file in the configured temp directory."""
    return from_directory(settings.temp_dir)

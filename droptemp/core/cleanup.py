"""Best-effort removal of temp files and their descriptors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

logger = logging.getLogger(__name__)


def release_quietly(file: IO) -> None:
    """Close ``file``, ignoring errors from the final flush."""
    try:
        file.close()
    except OSError:
        logger.debug("Ignoring error while closing %r", file, exc_info=True)


def remove_quietly(path: Path) -> bool:
    """Unlink ``path``. Returns True only if a file was actually removed."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError:
        # Best effort, nobody to report to
        logger.debug("Could not remove temp file %s", path, exc_info=True)
        return False
    logger.debug("Removed temp file %s", path)
    return True

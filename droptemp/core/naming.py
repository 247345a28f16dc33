"""Unique file names for temp files."""

from __future__ import annotations

import logging
import uuid

from droptemp.core.config import settings

logger = logging.getLogger(__name__)


def generate(prefix: str | None = None) -> str:
    """Return ``prefix`` followed by a random 128-bit token in plain hex.

    An unavailable entropy source is not a recoverable condition: it is
    logged and re-raised as-is.
    """
    if prefix is None:
        prefix = settings.name_prefix
    try:
        token = uuid.uuid4().hex
    except NotImplementedError:
        logger.critical("No source of randomness available for temp file names")
        raise
    return prefix + token

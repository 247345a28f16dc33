"""Central configuration for droptemp."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path


def _default_temp_dir() -> Path:
    """Directory new temp files land in unless a caller overrides it."""
    override = os.environ.get("DROPTEMP_DIR")
    if override:
        return Path(override)
    return Path(tempfile.gettempdir())


@dataclass
class Settings:
    """Library settings with sensible defaults."""

    # Paths
    temp_dir: Path = field(default_factory=_default_temp_dir)

    # Naming
    name_prefix: str = field(default_factory=lambda: os.environ.get("DROPTEMP_PREFIX", "temp"))

    # Reopen
    reopen_mode: str = "rb"  # Never a mode that creates or truncates

    def ensure_dirs(self) -> None:
        """Create the temp directory if it does not exist yet."""
        self.temp_dir.mkdir(parents=True, exist_ok=True)


# Global singleton, importable everywhere
settings = Settings()

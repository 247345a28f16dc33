"""Fluent construction of temp file paths."""

from __future__ import annotations

from pathlib import Path

from droptemp.core.config import Settings, settings as default_settings
from droptemp.core.naming import generate
from droptemp.files.handle import TempFile, create


class TempFileBuilder:
    """Composes the path of a temp file, then creates it.

    Starts from ``<temp_dir>/<prefix><token>``. Each option overrides one
    part of the path and returns the builder, so calls chain and the last
    one wins.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or default_settings
        self._path = Path(settings.temp_dir) / generate(settings.name_prefix)

    @property
    def path(self) -> Path:
        """The path ``build()`` will create."""
        return self._path

    def file_path(self, path: str | Path) -> TempFileBuilder:
        """Replace the whole path."""
        self._path = Path(path)
        return self

    def with_parent_dir(self, directory: str | Path) -> TempFileBuilder:
        """Move the file into ``directory``, keeping its name."""
        self._path = Path(directory) / self._path.name
        return self

    def with_file_name(self, name: str) -> TempFileBuilder:
        """Replace the file name, keeping the directory.

        On a path with no file name (such as ``/``) the name is appended.
        """
        if self._path.name:
            self._path = self._path.with_name(name)
        else:
            self._path = self._path / name
        return self

    def with_extension(self, ext: str) -> TempFileBuilder:
        """Replace the extension. Empty ``ext`` removes it.

        A path with no file name has no extension to replace and is left as is.
        """
        if not self._path.name:
            return self
        ext = ext.lstrip(".")
        self._path = self._path.with_suffix(f".{ext}" if ext else "")
        return self

    def build(self) -> TempFile:
        """Create the file at the resolved path, failing if it already exists."""
        return create(self._path)

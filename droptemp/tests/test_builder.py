"""Tests for the temp path builder."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from droptemp.core.config import Settings
from droptemp.files.builder import TempFileBuilder


@pytest.fixture
def builder(tmp_path):
    return TempFileBuilder(Settings(temp_dir=tmp_path, name_prefix="temp"))


class TestDefaultPath:
    """Tests for the path a fresh builder starts from."""

    def test_lives_in_temp_dir(self, builder, tmp_path):
        assert builder.path.parent == tmp_path

    def test_generated_name(self, builder):
        assert re.fullmatch(r"temp[0-9a-f]{32}", builder.path.name)

    def test_uses_global_settings_when_none_given(self, monkeypatch, tmp_path):
        from droptemp.core.config import settings

        monkeypatch.setattr(settings, "temp_dir", tmp_path)
        assert TempFileBuilder().path.parent == tmp_path

    def test_two_builders_differ(self, tmp_path):
        s = Settings(temp_dir=tmp_path)
        assert TempFileBuilder(s).path != TempFileBuilder(s).path


class TestComposition:
    """Tests for overriding parts of the path."""

    def test_parent_dir_keeps_name(self, builder, tmp_path):
        name = builder.path.name
        builder.with_parent_dir(tmp_path / "other")
        assert builder.path.parent == tmp_path / "other"
        assert builder.path.name == name

    def test_extension_keeps_dir_and_stem(self, builder, tmp_path):
        stem = builder.path.stem
        builder.with_parent_dir(tmp_path / "other").with_extension("txt")
        assert builder.path.suffix == ".txt"
        assert builder.path.stem == stem
        assert builder.path.parent == tmp_path / "other"

    def test_extension_leading_dot_optional(self, builder):
        assert builder.with_extension(".csv").path.suffix == ".csv"

    def test_empty_extension_removes_it(self, builder):
        builder.with_file_name("data.bin").with_extension("")
        assert builder.path.name == "data"

    def test_file_name_keeps_dir(self, builder, tmp_path):
        builder.with_file_name("report.json")
        assert builder.path == tmp_path / "report.json"

    def test_file_path_replaces_everything(self, builder, tmp_path):
        builder.file_path(tmp_path / "x" / "y.dat")
        assert builder.path == tmp_path / "x" / "y.dat"

    def test_last_write_wins(self, builder, tmp_path):
        builder.with_extension("a").with_extension("b")
        builder.with_parent_dir(tmp_path / "one").with_parent_dir(tmp_path / "two")
        assert builder.path.suffix == ".b"
        assert builder.path.parent == tmp_path / "two"

    def test_extension_on_nameless_path_is_noop(self, builder):
        builder.file_path("/").with_extension("txt")
        assert builder.path == Path("/")

    def test_file_name_on_nameless_path_is_appended(self, builder):
        builder.file_path("/").with_file_name("data.bin")
        assert builder.path == Path("/data.bin")


class TestBuild:
    """Tests for creating the file from a builder."""

    def test_creates_file_at_resolved_path(self, builder):
        tmp = builder.with_extension("txt").build()
        assert tmp.path == builder.path
        assert tmp.path.is_file()
        tmp.discard()

    def test_second_build_of_same_path_fails(self, builder):
        first = builder.build()
        with pytest.raises(FileExistsError):
            builder.build()
        first.discard()

    def test_missing_parent_dir_is_not_created(self, builder, tmp_path):
        with pytest.raises(FileNotFoundError):
            builder.with_parent_dir(tmp_path / "missing").build()
        assert not (tmp_path / "missing").exists()

"""Tests for CodeWriter and the Kotlin file layout helper."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from querent.codegen.paths import OutputDirectorySet
from querent.codegen.writer import CodeWriter, kotlin_file_path


def _writer(tmp_path: Path) -> CodeWriter:
    return CodeWriter(tmp_path / "generated", tmp_path / "intermediates")


class TestCodeWriter:

    def test_prepare_creates_directories(self, tmp_path):
        writer = _writer(tmp_path)
        dirs = OutputDirectorySet.resolve(writer.source_output_dir, "buildProfile", "debug")
        writer.prepare(dirs)
        assert all(p.is_dir() for p in dirs)

    def test_prepare_is_idempotent(self, tmp_path):
        writer = _writer(tmp_path)
        dirs = OutputDirectorySet.resolve(writer.source_output_dir, "buildProfile", "debug")
        writer.prepare(dirs)
        writer.prepare(dirs)
        assert all(p.is_dir() for p in dirs)

    def test_write_text_creates_parents(self, tmp_path):
        writer = _writer(tmp_path)
        target = tmp_path / "generated" / "a" / "b" / "File.kt"
        assert writer.write_text(target, "package a.b\n") == target
        assert target.read_text() == "package a.b\n"

    def test_trailing_newline_added(self, tmp_path):
        writer = _writer(tmp_path)
        target = writer.write_text(tmp_path / "x.properties", "key=value")
        assert target.read_bytes() == b"key=value\n"

    def test_overwrite_replaces_content(self, tmp_path):
        writer = _writer(tmp_path)
        target = tmp_path / "x.txt"
        writer.write_text(target, "one\n")
        writer.write_text(target, "two\n")
        assert target.read_text() == "two\n"
        assert [p.name for p in tmp_path.iterdir()] == ["x.txt"]

    def test_written_files_recorded_once(self, tmp_path):
        writer = _writer(tmp_path)
        first = writer.write_text(tmp_path / "a.txt", "a")
        second = writer.write_text(tmp_path / "b.txt", "b")
        writer.write_text(first, "a again")
        assert writer.written_files == [first, second]

    def test_written_files_is_a_copy(self, tmp_path):
        writer = _writer(tmp_path)
        writer.write_text(tmp_path / "a.txt", "a")
        writer.written_files.clear()
        assert len(writer.written_files) == 1


class TestKotlinFilePath:

    def test_package_becomes_directories(self):
        path = kotlin_file_path(Path("/out/kotlin"), "com.example.app.build", "BuildProfile")
        assert path == Path("/out/kotlin/com/example/app/build/BuildProfile.kt")

    def test_extension_not_doubled(self):
        path = kotlin_file_path("/out", "a.b", "Schema.kt")
        assert path == Path("/out/a/b/Schema.kt")


class TestFileMode:

    @pytest.fixture
    def umask_022(self):
        previous = os.umask(0o022)
        yield
        os.umask(previous)

    def test_new_file_follows_umask(self, tmp_path, umask_022):
        target = _writer(tmp_path).write_text(tmp_path / "BuildProfile.kt", "package a\n")
        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_existing_mode_kept(self, tmp_path, umask_022):
        target = tmp_path / "resources.properties"
        target.write_text("old\n")
        target.chmod(0o664)
        _writer(tmp_path).write_text(target, "new\n")
        assert stat.S_IMODE(target.stat().st_mode) == 0o664

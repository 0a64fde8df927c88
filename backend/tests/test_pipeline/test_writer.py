"""Tests for the .kt file writer."""

from __future__ import annotations

from vectorgen.writer import write_to_file


def test_creates_directories(tmp_path):
    path = write_to_file("content\n", tmp_path / "a" / "b", "Home")
    assert path == tmp_path / "a" / "b" / "Home.kt"
    assert path.read_text(encoding="utf-8") == "content\n"


def test_overwrite_is_idempotent(tmp_path):
    write_to_file("first", tmp_path, "Home")
    path = write_to_file("second", tmp_path, "Home")
    write_to_file("second", tmp_path, "Home")
    assert path.read_text(encoding="utf-8") == "second"
    assert [p.name for p in tmp_path.iterdir()] == ["Home.kt"]

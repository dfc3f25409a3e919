import os
from pathlib import Path

import pytest

from saferm.models.classified_path import PathKind, classify


def test_regular_file(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hello")

    entry = classify(str(target))

    assert entry.kind is PathKind.FILE
    assert entry.source == str(target)


def test_directory(tmp_path: Path) -> None:
    folder = tmp_path / "photos"
    folder.mkdir()

    assert classify(str(folder)).kind is PathKind.DIRECTORY


def test_missing_path_is_absent(tmp_path: Path) -> None:
    entry = classify(str(tmp_path / "nope.txt"))

    assert entry.kind is PathKind.ABSENT


def test_relative_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "local.txt").write_text("x")

    assert classify("local.txt").kind is PathKind.FILE
    assert classify("./").kind is PathKind.DIRECTORY


@pytest.mark.parametrize("source", ["", "\0", "bad\0name", "   ", "ünïcødé ✓ ?*"])
def test_malformed_input_is_absent(
    source: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    assert classify(source).kind is PathKind.ABSENT


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinks_follow_their_target(tmp_path: Path) -> None:
    folder = tmp_path / "real"
    folder.mkdir()
    link_to_dir = tmp_path / "link"
    link_to_dir.symlink_to(folder, target_is_directory=True)
    dangling = tmp_path / "dangling"
    dangling.symlink_to(tmp_path / "gone")

    assert classify(str(link_to_dir)).kind is PathKind.DIRECTORY
    assert classify(str(dangling)).kind is PathKind.ABSENT


def test_classify_has_no_side_effects(tmp_path: Path) -> None:
    classify(str(tmp_path / "a" / "b"))

    assert list(tmp_path.iterdir()) == []

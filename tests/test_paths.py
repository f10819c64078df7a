import os

import pytest

from hshell.paths import path_dirs, which


def _make(directory, name, mode):
    path = directory / name
    path.write_text("#!/bin/sh\n")
    os.chmod(path, mode)
    return path


def test_path_dirs_reversed():
    assert path_dirs("/usr/bin:/bin") == ["/bin", "/usr/bin"]


def test_path_dirs_skips_empty():
    assert path_dirs("::/a::") == ["/a"]


def test_path_dirs_none():
    assert path_dirs(None) == []


def test_which_finds_executable(tmp_path):
    _make(tmp_path, "tool", 0o755)
    assert which("tool", [str(tmp_path)]) == f"{tmp_path}/tool"


def test_which_skips_non_executable(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make(first, "tool", 0o644)
    _make(second, "tool", 0o755)
    assert which("tool", [str(first)]) is None
    assert which("tool", [str(first), str(second)]) == f"{second}/tool"


def test_which_first_directory_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make(first, "tool", 0o755)
    _make(second, "tool", 0o755)
    assert which("tool", [str(first), str(second)]) == f"{first}/tool"


def test_which_missing(tmp_path):
    assert which("absent", [str(tmp_path)]) is None


def test_which_path_given_directly(tmp_path):
    path = _make(tmp_path, "data", 0o644)
    assert which(str(path), []) == str(path)
    assert which(str(tmp_path / "gone"), []) is None


@pytest.mark.parametrize("cmd", ["", None])
def test_which_empty_command(cmd, tmp_path):
    assert which(cmd, [str(tmp_path)]) is None


def test_which_relative_missing():
    assert which("./definitely-not-here", ["/bin"]) is None
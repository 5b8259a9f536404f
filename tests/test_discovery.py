import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from livehash.discovery import discover_files


def test_regular_files_only(tmp_path):
    (tmp_path / "d" / "e").mkdir(parents=True)
    (tmp_path / "top.txt").write_text("x")
    (tmp_path / "d" / "e" / "deep.txt").write_text("y")
    (tmp_path / "empty").mkdir()
    entries = discover_files(tmp_path)
    assert sorted(e.rel_path for e in entries) == ["d/e/deep.txt", "top.txt"]
    deep = [e for e in entries if e.rel_path == "d/e/deep.txt"][0]
    assert deep.filename == "deep.txt"
    assert deep.path == tmp_path / "d" / "e" / "deep.txt"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_dangling_symlink_skipped(tmp_path):
    (tmp_path / "real.txt").write_text("x")
    os.symlink(tmp_path / "missing", tmp_path / "dangling")
    assert [e.rel_path for e in discover_files(tmp_path)] == ["real.txt"]


def test_root_must_be_directory(tmp_path):
    with pytest.raises(NotADirectoryError):
        discover_files(tmp_path / "nope")
    f = tmp_path / "f.txt"
    f.write_text("x")
    with pytest.raises(NotADirectoryError):
        discover_files(f)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_symlink_to_regular_file_skipped(tmp_path):
    (tmp_path / "real.txt").write_text("x")
    os.symlink(tmp_path / "real.txt", tmp_path / "link.txt")
    (tmp_path / "d").mkdir()
    os.symlink(tmp_path / "d", tmp_path / "dirlink")
    (tmp_path / "d" / "inner.txt").write_text("y")
    assert sorted(e.rel_path for e in discover_files(tmp_path)) == ["d/inner.txt", "real.txt"]

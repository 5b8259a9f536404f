import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from livehash.errors import ManifestReadError
from livehash.manifest import basename, iter_manifest, load_manifest, parse_manifest_line


def test_parse_line_tokens():
    e = parse_manifest_line("5d41402abc4b2a76b9719d911017c592  dir/sub/a.txt\n")
    assert e.recorded_hash == "5d41402abc4b2a76b9719d911017c592"
    assert e.recorded_path == "dir/sub/a.txt"
    assert e.filename == "a.txt"


@pytest.mark.parametrize("line", ["", "\n", "   \t ", "onlyonetoken", "  lonely  \n"])
def test_short_lines_are_skipped(line):
    assert parse_manifest_line(line) is None


def test_binary_marker_and_case():
    e = parse_manifest_line("5D41402ABC4B2A76B9719D911017C592 *a.txt")
    assert e.recorded_path == "a.txt"
    assert e.recorded_hash == "5d41402abc4b2a76b9719d911017c592"


def test_windows_separators():
    assert basename("C:\\data\\photos\\img.jpg") == "img.jpg"
    assert basename("./x/y.txt") == "y.txt"
    assert basename("plain") == "plain"


def test_load_keys_by_filename_last_wins(tmp_path):
    m = tmp_path / "ref.md5"
    m.write_text(
        "aaaa  one/a.txt\n"
        "garbage\n"
        "\n"
        "bbbb  b.txt\n"
        "cccc  two/a.txt\n"
    )
    assert load_manifest(m) == {"a.txt": "cccc", "b.txt": "bbbb"}
    assert [e.recorded_path for e in iter_manifest(m)] == ["one/a.txt", "b.txt", "two/a.txt"]


def test_extra_tokens_are_ignored(tmp_path):
    m = tmp_path / "ref.md5"
    m.write_text("aaaa a.txt trailing words\n")
    assert load_manifest(m) == {"a.txt": "aaaa"}


def test_missing_manifest(tmp_path):
    with pytest.raises(ManifestReadError) as ei:
        load_manifest(tmp_path / "nope.md5")
    assert "nope.md5" in str(ei.value)

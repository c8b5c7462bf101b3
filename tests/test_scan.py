import os

import pytest

from rotator import (
    InvalidPatternError,
    InvalidSourceError,
    by_mtime,
    scan,
    translate_posix_classes,
)


def test_scan_sorts_by_full_path(make_files):
    d = make_files("c.log", "a.log", "b.log")

    entries = scan(d)

    assert [e.path.name for e in entries] == ["a.log", "b.log", "c.log"]
    assert all(e.path.is_absolute() for e in entries)


def test_scan_is_top_level_only(make_files):
    d = make_files("a.log")
    sub = d / "nested"
    sub.mkdir()
    (sub / "deep.log").write_text("x")

    entries = scan(d)

    assert [e.path.name for e in entries] == ["a.log"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="no symlink support")
def test_scan_skips_symlinks(make_files):
    d = make_files("a.log")
    try:
        (d / "link.log").symlink_to(d / "a.log")
    except OSError:
        pytest.skip("symlinks not permitted")

    assert [e.path.name for e in scan(d)] == ["a.log"]


def test_scan_pattern_matches_anywhere_in_path(make_files):
    d = make_files("foo_1.zip", "foo_2.zip", "bar_1.zip", "foo_3.txt")

    entries = scan(d, r"foo_.*\.zip")

    assert [e.path.name for e in entries] == ["foo_1.zip", "foo_2.zip"]


def test_scan_pattern_sees_directory_part(make_files, tmp_path):
    d = make_files("a.log", "b.log")

    # The directory name is part of the matched path.
    assert len(scan(d, tmp_path.name)) == 2


def test_scan_posix_classes(make_files):
    d = make_files("foo_bar_20240101.zip", "foo_bar_2024.zip", "foo_bar_abcdefgh.zip")

    entries = scan(d, r"foo_bar_[[:digit:]]{8}\.zip")

    assert [e.path.name for e in entries] == ["foo_bar_20240101.zip"]


def test_translate_posix_classes():
    assert translate_posix_classes("[[:digit:]]+") == "[0-9]+"
    assert translate_posix_classes("[[:upper:][:digit:]]") == "[A-Z0-9]"
    assert translate_posix_classes("[[:nope:]]") == "[[:nope:]]"
    assert translate_posix_classes(r"plain\.log") == r"plain\.log"


def test_scan_missing_source(tmp_path):
    with pytest.raises(InvalidSourceError):
        scan(tmp_path / "missing")


def test_scan_source_is_file(make_files):
    d = make_files("a.log")
    with pytest.raises(InvalidSourceError):
        scan(d / "a.log")


def test_scan_bad_pattern(make_files):
    d = make_files("a.log")
    with pytest.raises(InvalidPatternError):
        scan(d, "(unclosed")


def test_scan_by_mtime(make_files):
    d = make_files("a.log", "b.log", "c.log")
    os.utime(d / "a.log", (300, 300))
    os.utime(d / "b.log", (100, 100))
    os.utime(d / "c.log", (200, 200))

    entries = scan(d, order=by_mtime)

    assert [e.path.name for e in entries] == ["b.log", "c.log", "a.log"]


def test_scan_keeps_symlinked_source_path(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "a.log").write_text("x")
    alias = tmp_path / "alias"
    try:
        os.symlink(real, alias, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not permitted")

    entries = scan(alias, "alias")

    assert [e.path.name for e in entries] == ["a.log"]
    assert entries[0].path.parent.name == "alias"


def test_scan_unlistable_source(make_files, monkeypatch):
    from pathlib import Path

    d = make_files("a.log")

    def denied(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", denied)

    with pytest.raises(InvalidSourceError):
        scan(d)

from pathlib import Path

from rotator import DeletionState, apply, scan


def test_apply_deletes_in_order(make_files):
    d = make_files("a.log", "b.log", "c.log")
    entries = scan(d)
    seen = []

    report = apply(entries[:2], on_outcome=seen.append)

    assert [o.entry.path.name for o in seen] == ["a.log", "b.log"]
    assert report.deleted == 2
    assert report.ok
    assert sorted(p.name for p in d.iterdir()) == ["c.log"]


def test_apply_dry_run_touches_nothing(make_files):
    d = make_files("a.log", "b.log")
    entries = scan(d)

    report = apply(entries, dry_run=True)

    assert report.dry_run is True
    assert report.would_delete == 2
    assert report.deleted == 0
    assert sorted(p.name for p in d.iterdir()) == ["a.log", "b.log"]


def test_apply_skips_vanished_files(make_files):
    d = make_files("a.log", "b.log")
    entries = scan(d)
    (d / "a.log").unlink()

    report = apply(entries)

    assert [o.state for o in report.outcomes] == [
        DeletionState.VANISHED,
        DeletionState.DELETED,
    ]
    assert report.ok


def test_apply_continues_after_failure(make_files, monkeypatch, caplog):
    d = make_files("a.log", "b.log", "c.log")
    entries = scan(d)
    real_unlink = Path.unlink

    def fake_unlink(self, *args, **kwargs):
        if self.name == "a.log":
            raise PermissionError(13, "Permission denied", str(self))
        return real_unlink(self, *args, **kwargs)

    monkeypatch.setattr(Path, "unlink", fake_unlink)

    report = apply(entries[:2])

    assert report.failed == 1
    assert report.deleted == 1
    assert not report.ok
    assert report.outcomes[0].state == DeletionState.FAILED
    assert "Permission denied" in report.outcomes[0].reason
    assert (d / "a.log").exists()
    assert not (d / "b.log").exists()
    assert "Could not delete" in caplog.text


def test_apply_race_during_unlink_is_vanished(make_files, monkeypatch):
    d = make_files("a.log", "b.log")
    entries = scan(d)

    def gone(self, *args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", str(self))

    monkeypatch.setattr(Path, "unlink", gone)

    report = apply(entries)

    assert report.vanished == 2
    assert report.ok

from pathlib import Path

import pytest

from rotator import DirectoryEntry, partition


def _entries(n):
    return [DirectoryEntry(path=Path(f"/d/f{i:02d}.log")) for i in range(n)]


def test_partition_keeps_last_n():
    entries = _entries(5)

    part = partition(entries, 3)

    assert part.to_delete == entries[:2]
    assert part.to_keep == entries[2:]


def test_partition_everything_kept_when_count_not_above_keep():
    entries = _entries(3)

    part = partition(entries, 3)

    assert part.to_delete == []
    assert part.to_keep == entries


@pytest.mark.parametrize("keep", [0, 1, 4, -2])
def test_partition_single_entry_never_deleted(keep):
    entries = _entries(1)

    part = partition(entries, keep)

    assert part.to_delete == []
    assert part.to_keep == entries


def test_partition_empty():
    part = partition([], 0)
    assert part.to_delete == []
    assert part.to_keep == []


def test_partition_keep_zero_deletes_all():
    entries = _entries(3)

    part = partition(entries, 0)

    assert part.to_delete == entries
    assert part.to_keep == []


def test_partition_negative_keep_clamped_to_zero():
    entries = _entries(3)

    assert partition(entries, -5) == partition(entries, 0)


@pytest.mark.parametrize("n,keep", [(2, 1), (5, 2), (7, 7), (10, 0), (6, 9)])
def test_partition_invariants(n, keep):
    entries = _entries(n)

    part = partition(entries, keep)

    assert part.to_delete + part.to_keep == entries
    assert not set(part.to_delete) & set(part.to_keep)
    assert len(part.to_keep) == min(keep, n)

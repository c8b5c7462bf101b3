from __future__ import annotations

from typing import Sequence

from .models import DirectoryEntry, Partition


def partition(entries: Sequence[DirectoryEntry], keep: int) -> Partition:
    """
    Split scan-ordered entries into the oldest ones to delete and the
    newest ``keep`` to retain.

    - At most one entry: nothing is deleted, whatever ``keep`` says.
    - Negative ``keep`` counts as 0.
    """
    items = list(entries)

    if len(items) <= 1:
        return Partition(to_delete=[], to_keep=items)

    keep = max(0, keep)
    if len(items) <= keep:
        return Partition(to_delete=[], to_keep=items)

    cut = len(items) - keep
    return Partition(to_delete=items[:cut], to_keep=items[cut:])

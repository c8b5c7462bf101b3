from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

DEFAULT_KEEP = 4
DEFAULT_PATTERN = ".*"


@dataclass(frozen=True)
class DirectoryEntry:
    path: Path
    mtime: float = 0.0

    def __str__(self) -> str:
        return str(self.path)


OrderKey = Callable[[DirectoryEntry], object]


def by_path(entry: DirectoryEntry) -> object:
    return str(entry.path)


def by_mtime(entry: DirectoryEntry) -> object:
    return (entry.mtime, str(entry.path))


ORDERINGS: dict[str, OrderKey] = {
    "path": by_path,
    "mtime": by_mtime,
}


@dataclass(frozen=True)
class RotateConfig:
    """
    Everything a single rotation pass needs.

    Built once from the command line and passed down; nothing reads
    process-wide state.
    """

    source: Path
    keep: int = DEFAULT_KEEP
    pattern: str = DEFAULT_PATTERN
    dry_run: bool = False
    silent: bool = False
    verbose: bool = False
    strict: bool = False
    order: str = "path"

    @property
    def order_key(self) -> OrderKey:
        return ORDERINGS.get(self.order, by_path)


@dataclass(frozen=True)
class Partition:
    to_delete: list[DirectoryEntry]
    to_keep: list[DirectoryEntry]


class DeletionState(str, Enum):
    DELETED = "deleted"
    WOULD_DELETE = "would_delete"
    VANISHED = "vanished"
    FAILED = "failed"


@dataclass(frozen=True)
class DeletionOutcome:
    entry: DirectoryEntry
    state: DeletionState
    reason: Optional[str] = None


@dataclass
class DeletionReport:
    dry_run: bool
    outcomes: list[DeletionOutcome] = field(default_factory=list)

    def _count(self, state: DeletionState) -> int:
        return sum(1 for o in self.outcomes if o.state == state)

    @property
    def deleted(self) -> int:
        return self._count(DeletionState.DELETED)

    @property
    def would_delete(self) -> int:
        return self._count(DeletionState.WOULD_DELETE)

    @property
    def vanished(self) -> int:
        return self._count(DeletionState.VANISHED)

    @property
    def failed(self) -> int:
        return self._count(DeletionState.FAILED)

    @property
    def ok(self) -> bool:
        return self.failed == 0


@dataclass(frozen=True)
class RotationResult:
    config: RotateConfig
    entries: list[DirectoryEntry]
    partition: Partition
    report: DeletionReport

    @property
    def matched(self) -> int:
        return len(self.entries)

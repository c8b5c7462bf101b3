from __future__ import annotations

from typing import Callable, Iterable, Optional

from logger import get_logger
from .models import DeletionOutcome, DeletionReport, DeletionState, DirectoryEntry

log = get_logger("rotatefile.apply")

OutcomeCallback = Callable[[DeletionOutcome], None]


def _delete_one(entry: DirectoryEntry, dry_run: bool) -> DeletionOutcome:
    path = entry.path

    # Removed by someone else since the scan.
    if not path.exists():
        return DeletionOutcome(entry, DeletionState.VANISHED)

    if dry_run:
        return DeletionOutcome(entry, DeletionState.WOULD_DELETE)

    try:
        path.unlink()
    except FileNotFoundError:
        return DeletionOutcome(entry, DeletionState.VANISHED)
    except OSError as e:
        log.warning(f"Could not delete {path}: {e}")
        return DeletionOutcome(entry, DeletionState.FAILED, reason=str(e))

    log.debug(f"Deleted {path}")
    return DeletionOutcome(entry, DeletionState.DELETED)


def apply(
    to_delete: Iterable[DirectoryEntry],
    dry_run: bool = False,
    on_outcome: Optional[OutcomeCallback] = None,
) -> DeletionReport:
    """
    Delete each entry in order, best effort.

    A failure on one file never stops the rest. In dry-run mode the
    filesystem is not touched.
    """
    report = DeletionReport(dry_run=dry_run)

    for entry in to_delete:
        outcome = _delete_one(entry, dry_run)
        report.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    return report

from __future__ import annotations

from typing import Callable, Optional

from logger import get_logger
from .apply import OutcomeCallback, apply
from .models import DeletionReport, Partition, RotateConfig, RotationResult
from .partition import partition
from .scan import scan

log = get_logger("rotatefile.runner")

PartitionCallback = Callable[[Partition], None]


def rotate(
    config: RotateConfig,
    on_partition: Optional[PartitionCallback] = None,
    on_outcome: Optional[OutcomeCallback] = None,
) -> RotationResult:
    """
    One full pass: scan, partition, apply.

    ``on_partition`` sees the split before anything is deleted;
    ``on_outcome`` sees every apply step as it happens. Neither is called
    when at most one file matched.

    Raises RotateError subclasses for an unusable source or pattern;
    per-file problems end up in the returned report instead.
    """
    entries = scan(config.source, config.pattern, order=config.order_key)

    if len(entries) <= 1:
        log.debug(f"{len(entries)} file(s) matched, nothing to rotate")
        return RotationResult(
            config=config,
            entries=entries,
            partition=Partition(to_delete=[], to_keep=entries),
            report=DeletionReport(dry_run=config.dry_run),
        )

    part = partition(entries, config.keep)
    log.debug(
        f"Partition: {len(part.to_delete)} to delete, {len(part.to_keep)} to keep"
    )
    if on_partition is not None:
        on_partition(part)

    report = apply(part.to_delete, dry_run=config.dry_run, on_outcome=on_outcome)
    log.info(
        f"Rotated {config.source}: matched={len(entries)} "
        f"deleted={report.deleted} would_delete={report.would_delete} "
        f"vanished={report.vanished} failed={report.failed}"
    )

    return RotationResult(
        config=config,
        entries=entries,
        partition=part,
        report=report,
    )

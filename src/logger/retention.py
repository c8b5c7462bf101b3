from __future__ import annotations

from pathlib import Path

LOG_FILE_PATTERN = r"rotatefile-[^/\\]+\.log$"


def enforce_retention(log_dir: Path, keep: int) -> int:
    """
    Prune this tool's own log files, keeping the newest ``keep``.

    Log names embed the run timestamp, so the default path ordering is
    chronological. Returns the number of files removed.
    """
    # Imported here: rotator modules log through this package.
    from rotator import RotateError, apply, partition, scan

    if keep <= 0 or not log_dir.is_dir():
        return 0

    try:
        logs = scan(log_dir, LOG_FILE_PATTERN)
    except RotateError:
        return 0

    part = partition(logs, keep)
    return apply(part.to_delete).deleted

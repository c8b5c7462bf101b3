"""
File rotation: keep the N most recent files in a directory, delete the rest.

Pipeline: scan -> partition -> apply, with report() for presentation.
"""
from __future__ import annotations

from .apply import apply
from .errors import InvalidPatternError, InvalidSourceError, RotateError
from .models import (
    DEFAULT_KEEP,
    DEFAULT_PATTERN,
    ORDERINGS,
    DeletionOutcome,
    DeletionReport,
    DeletionState,
    DirectoryEntry,
    Partition,
    RotateConfig,
    RotationResult,
    by_mtime,
    by_path,
)
from .partition import partition
from .report import report
from .runner import PartitionCallback, rotate
from .scan import compile_pattern, scan, translate_posix_classes

__all__ = [
    "DEFAULT_KEEP",
    "DEFAULT_PATTERN",
    "ORDERINGS",
    "DeletionOutcome",
    "DeletionReport",
    "DeletionState",
    "DirectoryEntry",
    "InvalidPatternError",
    "InvalidSourceError",
    "Partition",
    "PartitionCallback",
    "RotateConfig",
    "RotateError",
    "RotationResult",
    "apply",
    "by_mtime",
    "by_path",
    "compile_pattern",
    "partition",
    "report",
    "rotate",
    "scan",
    "translate_posix_classes",
]

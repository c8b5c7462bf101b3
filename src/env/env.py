from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------


def _as_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(v: str, default: int) -> int:
    try:
        return int(v)
    except Exception:
        return default


def _as_dir(v: Optional[str]) -> Optional[Path]:
    if not v or not v.strip():
        return None
    return Path(v.strip()).expanduser().resolve()


# ------------------------------------------------------------
# Logging environment (SAFE ANYWHERE)
# ------------------------------------------------------------


@dataclass(frozen=True)
class LoggingEnvironment:
    log_level: str
    log_retention: int
    logs_dir: Optional[Path]
    verbose: bool
    quiet: bool

    def as_dict(self) -> dict:
        return {
            "log_level": self.log_level,
            "log_retention": self.log_retention,
            "logs_dir": str(self.logs_dir) if self.logs_dir else None,
            "verbose": self.verbose,
            "quiet": self.quiet,
        }


def get_logging_env() -> LoggingEnvironment:
    """
    Snapshot of the logging-related environment.

    Read fresh on every call; bootstrap stamps these variables after the
    command line is parsed.
    """
    return LoggingEnvironment(
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_retention=_as_int(os.environ.get("ROTATEFILE_LOG_RETENTION", "30"), 30),
        logs_dir=_as_dir(os.environ.get("ROTATEFILE_LOGS_DIR")),
        verbose=_as_bool(os.environ.get("ROTATEFILE_VERBOSE", "0")),
        quiet=_as_bool(os.environ.get("ROTATEFILE_QUIET", "0")),
    )

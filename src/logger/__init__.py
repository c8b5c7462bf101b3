from __future__ import annotations

import logging
import os
from datetime import datetime

from env import get_logging_env
from .console import build_console_handler, log_file_only
from .file import build_file_handler, log_file_path
from .retention import enforce_retention


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _level_to_int(level: str | int) -> int:
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def _ensure_run_id() -> str:
    run_id = os.environ.get("ROTATEFILE_RUN_ID")
    if not run_id:
        run_id = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        os.environ["ROTATEFILE_RUN_ID"] = run_id
    return run_id


def _close_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()


def init_logging() -> None:
    """
    Initialize logging for the entire process.

    - Handlers are attached ONLY to the root logger.
    - Named loggers inherit via propagation.
    - Safe to call multiple times; handlers are rebuilt, not stacked.
    """
    env = get_logging_env()
    root = logging.getLogger()

    _close_handlers(root)

    # Root passes everything; each handler applies its own threshold.
    root.setLevel(logging.DEBUG)

    run_id = _ensure_run_id()

    if env.logs_dir is not None:
        env.logs_dir.mkdir(parents=True, exist_ok=True)
        logfile = log_file_path(env.logs_dir, run_id)
        root.addHandler(build_file_handler(logfile, _level_to_int(env.log_level)))

    # Console handler (Rich) only when not quiet.
    if not env.quiet:
        console_level = logging.DEBUG if env.verbose else logging.WARNING
        root.addHandler(build_console_handler(console_level))

    # Silent with no log dir: keep logging's last-resort stderr handler out.
    if not root.handlers:
        root.addHandler(logging.NullHandler())

    # Prune after the current file exists so it counts toward the limit.
    if env.logs_dir is not None:
        enforce_retention(env.logs_dir, int(env.log_retention))


__all__ = [
    "enforce_retention",
    "get_logger",
    "init_logging",
    "log_file_only",
]

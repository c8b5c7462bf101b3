from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

from env import get_logging_env


@dataclass(frozen=True)
class ConsoleGateFilter(logging.Filter):
    """
    Gate console output.

    - Nothing reaches the console in quiet (silent) mode.
    - Records logged with extra={"file_only": True} are kept off the console.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if get_logging_env().quiet:
            return False

        if getattr(record, "file_only", False):
            return False

        return True


def build_console_handler(level: int) -> logging.Handler:
    # Console(file=None) resolves sys.stdout at write time.
    handler = RichHandler(
        console=Console(soft_wrap=True, highlight=False),
        level=level,
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
    )

    # RichHandler renders the level column; the formatter must not repeat it.
    handler.setFormatter(logging.Formatter("%(message)s"))

    handler.addFilter(ConsoleGateFilter())
    return handler


def log_file_only(level: int, msg: str) -> None:
    logging.getLogger("rotatefile").log(level, msg, extra={"file_only": True})

from __future__ import annotations

import logging
from pathlib import Path


def build_file_handler(logfile: Path, level: int = logging.NOTSET) -> logging.FileHandler:
    logfile.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(logfile, encoding="utf-8")
    handler.setLevel(level)

    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | [%(levelname)s] | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def log_file_path(log_dir: Path, run_id: str) -> Path:
    return log_dir / f"rotatefile-{run_id}.log"

from __future__ import annotations

import argparse
import logging

from branding import run_footer, run_header
from cli.args import MissingSourceError, config_from_args
from cli.render import RENDER
from env import get_logging_env
from logger import get_logger, log_file_only
from rotator import (
    DeletionOutcome,
    Partition,
    RotateConfig,
    RotateError,
    report,
    rotate,
)
from rotator.report import nothing_to_rotate, outcome_line, settings_lines

log = get_logger("rotatefile.cli")


def _fatal(msg: str) -> int:
    # Fatal messages print even in silent mode.
    RENDER.print(msg)
    log_file_only(logging.ERROR, msg)
    return 1


def _print_partition(part: Partition) -> None:
    RENDER.print(report(part))
    RENDER.print()


def _print_outcome(outcome: DeletionOutcome) -> None:
    line = outcome_line(outcome)
    if line:
        RENDER.print(line)


def run_rotation(config: RotateConfig) -> int:
    show = not config.silent

    if show:
        RENDER.print(run_header())
        for line in settings_lines(config):
            RENDER.print(line)
        RENDER.print()

    try:
        result = rotate(
            config,
            on_partition=_print_partition if show else None,
            on_outcome=_print_outcome if show else None,
        )
    except RotateError as e:
        return _fatal(str(e))

    if show:
        if result.matched <= 1:
            RENDER.print(nothing_to_rotate(config, result.matched))
        RENDER.print(run_footer())

    if config.strict and not result.report.ok:
        log_file_only(
            logging.ERROR, f"{result.report.failed} deletion(s) failed (strict mode)"
        )
        return 1
    return 0


def handle_rotate(args: argparse.Namespace) -> int:
    try:
        config = config_from_args(args)
    except MissingSourceError as e:
        return _fatal(str(e))

    log.debug(f"Config: {config}")
    log.debug(f"Logging: {get_logging_env().as_dict()}")
    return run_rotation(config)

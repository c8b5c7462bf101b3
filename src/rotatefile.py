#!/usr/bin/env python3
from __future__ import annotations

import sys
from typing import Optional, Sequence

from bootstrap import bootstrap_run_context
from cli.args import build_parser, parse_args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else list(argv))

    # Help wins over everything else, including a missing --source.
    if args.help:
        build_parser().print_help(sys.stdout)
        return 0

    # Stamp run context before logging reads it.
    bootstrap_run_context(verbose=bool(args.verbose), quiet=bool(args.silent))

    from logger import init_logging

    init_logging()

    from cli.commands import handle_rotate

    return handle_rotate(args)


if __name__ == "__main__":
    raise SystemExit(main())

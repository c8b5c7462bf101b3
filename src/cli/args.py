from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from rotator import DEFAULT_KEEP, DEFAULT_PATTERN, ORDERINGS, RotateConfig

PROG = "rotatefile"

_INT_RE = re.compile(r"^-?[0-9]+$")

DESCRIPTION = "Rotate files in a directory, keeping the N most recent files and deleting the rest."

EPILOG = f"""\
Example:
  {PROG} \\
    --source /mnt/my-data/ \\
    --pattern "foo_bar_[[:digit:]]{{8}}\\.zip" \\
    --keep 2
"""


VALUE_FLAGS = ("--source", "--keep", "--pattern", "--order")
SWITCHES = ("--dry-run", "--silent", "--strict", "--verbose", "--help", "-h", "-?")


class MissingSourceError(ValueError):
    pass


class ArgumentsError(ValueError):
    pass


class LenientArgumentParser(argparse.ArgumentParser):
    """Raises instead of printing usage and exiting with status 2."""

    def error(self, message: str):
        raise ArgumentsError(message)


def build_parser() -> LenientArgumentParser:
    p = LenientArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    req = p.add_argument_group("Required Arguments")
    # Checked by hand so a missing source exits 1 with our own message.
    req.add_argument("--source", nargs="?", help="Specify the path of source directory.")

    opt = p.add_argument_group("Optional Arguments")
    opt.add_argument(
        "--keep",
        nargs="?",
        default=None,
        help=f"Keep the N most recent files. Default {DEFAULT_KEEP}.",
    )
    opt.add_argument(
        "--pattern",
        nargs="?",
        default=DEFAULT_PATTERN,
        help="Filter files by using extended regular expressions. "
        "Default is '.*' (matches all files).",
    )
    opt.add_argument(
        "--dry-run",
        action="store_true",
        help="Perform a run with no changes made.",
    )
    opt.add_argument(
        "--silent",
        action="store_true",
        help="Suppress all output except fatal errors.",
    )
    opt.add_argument(
        "--order",
        nargs="?",
        default="path",
        help="Recency ordering: 'path' (lexicographic, default) or 'mtime'.",
    )
    opt.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any file could not be deleted.",
    )
    opt.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug diagnostics.",
    )
    opt.add_argument(
        "--help",
        "-h",
        "-?",
        dest="help",
        action="store_true",
        help="Display this help.",
    )
    return p


def parse_keep(raw: Optional[str]) -> int:
    """Integer-looking values win; anything else means the default."""
    if raw is not None and _INT_RE.match(raw.strip()):
        return int(raw.strip())
    return DEFAULT_KEEP


def parse_order(raw: Optional[str]) -> str:
    value = (raw or "").strip().lower()
    return value if value in ORDERINGS else "path"


def normalize_argv(argv: Sequence[str]) -> list[str]:
    """
    Glue each value flag to the token after it (``--pattern=<next>``) so
    values starting with '-' are taken as values, and drop switches given
    an explicit value (``--dry-run=yes``), which count as unknown flags.
    """
    out: list[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok in VALUE_FLAGS and i + 1 < len(argv):
            out.append(f"{tok}={argv[i + 1]}")
            i += 2
            continue
        if "=" in tok and tok.split("=", 1)[0] in SWITCHES:
            i += 1
            continue
        out.append(tok)
        i += 1
    return out


def parse_args(
    argv: Optional[Sequence[str]] = None,
) -> argparse.Namespace:
    # Unknown flags are ignored, not rejected.
    tokens = normalize_argv(sys.argv[1:] if argv is None else list(argv))
    try:
        args, _unknown = build_parser().parse_known_args(tokens)
    except ArgumentsError:
        # Nothing usable: fall back to defaults, which ends in "source required".
        args, _unknown = build_parser().parse_known_args([])
    return args


def config_from_args(args: argparse.Namespace) -> RotateConfig:
    if not args.source:
        raise MissingSourceError("Source path is required.")

    return RotateConfig(
        source=Path(args.source).expanduser(),
        keep=parse_keep(args.keep),
        pattern=args.pattern if args.pattern is not None else DEFAULT_PATTERN,
        dry_run=bool(args.dry_run),
        silent=bool(args.silent),
        verbose=bool(args.verbose),
        strict=bool(args.strict),
        order=parse_order(args.order),
    )

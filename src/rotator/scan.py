from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from logger import get_logger
from .errors import InvalidPatternError, InvalidSourceError
from .models import DirectoryEntry, OrderKey, by_path

log = get_logger("rotatefile.scan")

# grep -E bracket classes -> Python re ranges (used inside [...])
_POSIX_CLASSES: dict[str, str] = {
    "alnum": "a-zA-Z0-9",
    "alpha": "a-zA-Z",
    "blank": r" \t",
    "digit": "0-9",
    "lower": "a-z",
    "punct": r"!-/:-@\[-`{-~",
    "space": r" \t\n\r\f\v",
    "upper": "A-Z",
    "xdigit": "0-9A-Fa-f",
}

_POSIX_CLASS_RE = re.compile(r"\[:([a-z]+):\]")


def translate_posix_classes(pattern: str) -> str:
    """
    Rewrite POSIX bracket classes such as ``[[:digit:]]`` into ranges
    Python's ``re`` understands. Unknown class names are left untouched.
    """

    def _sub(m: re.Match[str]) -> str:
        return _POSIX_CLASSES.get(m.group(1), m.group(0))

    return _POSIX_CLASS_RE.sub(_sub, pattern)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(translate_posix_classes(pattern))
    except re.error as e:
        raise InvalidPatternError(f"Invalid pattern {pattern!r}: {e}") from e


def _is_regular_file(path: Path) -> bool:
    return path.is_file() and not path.is_symlink()


def _mtime(path: Path) -> float:
    try:
        return path.stat().st_mtime
    except OSError:
        return 0.0


def scan(
    source_dir: Path,
    pattern: str = ".*",
    order: Optional[OrderKey] = None,
) -> list[DirectoryEntry]:
    """
    List regular files directly inside ``source_dir`` whose full path
    matches ``pattern``, sorted ascending by ``order`` (full path by default).
    """
    source = Path(source_dir).expanduser()
    if not source.is_dir():
        raise InvalidSourceError(
            f"Source path {source} does not exist or is not a directory."
        )

    # Absolute, not resolved: the pattern sees the path as given,
    # even when the source is a symlink.
    source = source.absolute()
    regex = compile_pattern(pattern)
    key = order or by_path

    try:
        children = list(source.iterdir())
    except OSError as e:
        raise InvalidSourceError(f"Source path {source} cannot be listed: {e}") from e

    entries: list[DirectoryEntry] = []
    for p in children:
        if not _is_regular_file(p):
            continue
        if not regex.search(str(p)):
            continue
        entries.append(DirectoryEntry(path=p, mtime=_mtime(p)))

    entries.sort(key=key)
    log.debug(f"Scanned {source}: {len(entries)} file(s) match {pattern!r}")
    return entries

from __future__ import annotations


class RotateError(RuntimeError):
    """Base error for a rotation run that cannot proceed."""


class InvalidSourceError(RotateError):
    """Source path is missing or is not a directory."""


class InvalidPatternError(RotateError):
    """Filter expression does not compile."""

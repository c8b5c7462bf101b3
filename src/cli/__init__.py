"""
rotatefile CLI package.

- args: argparse parser and lenient value parsing
- render: console used for the human-readable report
- commands: run one rotation pass from parsed arguments

No side effects should occur at package import time.
"""
from __future__ import annotations

__all__ = [
    "args",
    "commands",
    "render",
]

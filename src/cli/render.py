from __future__ import annotations

from rich.console import Console

# Report output (stdout). Markup is off so paths print verbatim;
# soft_wrap keeps long paths on one line.
RENDER = Console(
    soft_wrap=True,
    highlight=False,
    markup=False,
    emoji=False,
)

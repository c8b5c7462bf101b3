from __future__ import annotations

from datetime import datetime
from typing import Optional

# --------------------------------------------------
# Layout constants
# --------------------------------------------------

RULE_WIDTH = 20
RULE_CHAR = "_"


def _stamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime("%a %b %d %H:%M:%S %Y")


# --------------------------------------------------
# Run framing
# --------------------------------------------------


def run_header(now: Optional[datetime] = None) -> str:
    rule = RULE_CHAR * RULE_WIDTH
    return f"\n{rule} START {rule} {_stamp(now)}\n"


def run_footer(now: Optional[datetime] = None) -> str:
    rule = RULE_CHAR * (RULE_WIDTH + 1)
    return f"\n{rule} END {rule} {_stamp(now)}\n"

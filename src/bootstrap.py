"""bootstrap.py

Process bootstrap for rotatefile.

Rules:
1) Only bootstrap is allowed to *mutate* os.environ for shared run context.
2) Call bootstrap_run_context() after argparse parsing, before init_logging().

Everything else treats environment variables as the source of truth.
"""
from __future__ import annotations

import os
from datetime import datetime


def bootstrap_run_context(
    *,
    verbose: bool | None = None,
    quiet: bool | None = None,
) -> str:
    """Establish run-scoped context used by logging. Returns the run id."""

    run_id = os.environ.setdefault(
        "ROTATEFILE_RUN_ID",
        datetime.now().strftime("%Y-%m-%d_%H-%M-%S"),
    )

    if verbose is not None:
        os.environ["ROTATEFILE_VERBOSE"] = "1" if verbose else "0"
    if quiet is not None:
        os.environ["ROTATEFILE_QUIET"] = "1" if quiet else "0"

    return run_id

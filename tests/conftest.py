import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env_and_logging(monkeypatch):
    """
    Ensure tests don't leak env or logger state.
    """

    keys = [
        "LOG_LEVEL",
        "ROTATEFILE_LOGS_DIR",
        "ROTATEFILE_LOG_RETENTION",
        "ROTATEFILE_RUN_ID",
        "ROTATEFILE_VERBOSE",
        "ROTATEFILE_QUIET",
    ]
    for k in keys:
        monkeypatch.delenv(k, raising=False)

    yield

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    # main() stamps run context directly into os.environ
    for k in keys:
        os.environ.pop(k, None)


@pytest.fixture
def make_files(tmp_path):
    """Create empty files by name under tmp_path and return the directory."""

    def _make(*names: str, content: str = "x"):
        for name in names:
            (tmp_path / name).write_text(content)
        return tmp_path

    return _make

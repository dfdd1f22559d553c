# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbug.cli.bootstrap import create_initial_state
from taskbug.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap helpers.

    A SimpleNamespace rather than the real config keeps tests independent of
    the process environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="taskbug",
        log_level="WARNING",
        prompt="> ",
        autosave=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState loaded from a fresh (missing) task file under tmp_path."""
    return create_initial_state(settings=settings)

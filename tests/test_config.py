# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbug.config import Settings

_VARS = (
    "TASKBUG_APP_NAME",
    "TASKBUG_LOG_LEVEL",
    "TASKBUG_PROMPT",
    "TASKBUG_AUTOSAVE",
    "TASKBUG_DATA_DIR",
    "TASKBUG_TASKS_PATH",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "taskbug"
    assert s.log_level == "WARNING"
    assert s.autosave is False
    assert s.data_dir == Path(".local/taskbug")
    assert s.tasks_path == Path(".local/taskbug/tasks.txt")


def test_tasks_path_follows_data_dir(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKBUG_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKBUG_AUTOSAVE", "yes")

    s = Settings.from_env()
    assert s.data_dir == tmp_path
    assert s.tasks_path == tmp_path / "tasks.txt"
    assert s.autosave is True


def test_explicit_tasks_path_wins(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKBUG_DATA_DIR", str(tmp_path / "data"))
    clean_env.setenv("TASKBUG_TASKS_PATH", str(tmp_path / "elsewhere.txt"))
    clean_env.setenv("TASKBUG_AUTOSAVE", "off")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "elsewhere.txt"
    assert s.autosave is False

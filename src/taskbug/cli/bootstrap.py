# src/taskbug/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- loads the task file into AppState,
- writes the task list back on shutdown when asked to.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import StorageError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    CorruptDataError / StorageError from the load are left to the caller.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    loaded = store.load()

    return AppState(
        settings=settings,
        tasks=loaded.tasks,
        store=store,
        load_warnings=list(loaded.warnings),
    )


def save_on_exit(state: AppState) -> bool:
    """Write the task list if autosave is enabled. Returns True when a write happened."""
    if not getattr(state.settings, "autosave", False):
        return False
    try:
        state.store.write(state.tasks)
    except StorageError:
        logger.exception("Autosave to %s failed.", state.store.path)
        return False
    logger.info("Autosaved %d tasks to %s", state.tasks.size(), state.store.path)
    return True

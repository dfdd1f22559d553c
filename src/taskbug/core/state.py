# src/taskbug/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: Any

    tasks: TaskList
    store: TaskStore

    # Set by the "bye" command; the front end decides what to do with it.
    exit_requested: bool = False
    load_warnings: list[str] = field(default_factory=list)

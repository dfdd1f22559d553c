# src/taskbug/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date

from ..errors import IndexOutOfRangeError, InputFormatError, LogicalOrderError
from .task_models import Deadline, Event, Task, Todo

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "No tasks yet. Lazy, huh?"
NO_MATCHES_TEXT = "Nothing matches that. Try harder."


class TaskList:
    """
    Ordered, in-memory list of tasks.

    Every index taken or shown by this class is 1-based and contiguous:
    deleting task i shifts every later task down by one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    # ---- low-level helpers ----

    def _check_index(self, index: int) -> None:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))

    @staticmethod
    def _render_numbered(rows: Iterable[tuple[int, Task]]) -> list[str]:
        return [f"{i}.{task.render()}" for i, task in rows]

    # ---- mutation ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def add_todo(self, description: str) -> Todo:
        if not description:
            raise InputFormatError("A todo needs a non-empty description.")
        task = Todo(description)
        self._tasks.append(task)
        logger.debug("Todo added #%d description=%r", len(self._tasks), description)
        return task

    def add_deadline(self, description: str, due_date: date) -> Deadline:
        task = Deadline(description, due_date)
        self._tasks.append(task)
        logger.debug("Deadline added #%d due=%s", len(self._tasks), due_date)
        return task

    def add_event(self, description: str, start_date: date, due_date: date) -> Event:
        if due_date < start_date:
            raise LogicalOrderError(
                f"Event ends ({due_date.isoformat()}) before it starts ({start_date.isoformat()})."
            )
        task = Event(description, start_date, due_date)
        self._tasks.append(task)
        logger.debug(
            "Event added #%d start=%s due=%s", len(self._tasks), start_date, due_date
        )
        return task

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.is_done = True
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.is_done = False
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index - 1)
        logger.debug("Task #%d deleted, %d left", index, len(self._tasks))
        return task

    # ---- queries ----

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index - 1]

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring search; keeps each task's position in the full list."""
        return [
            (i, task)
            for i, task in enumerate(self._tasks, start=1)
            if keyword in task.description
        ]

    def get_tasks(self) -> str:
        if not self._tasks:
            return EMPTY_LIST_TEXT
        return "\n".join(self._render_numbered(enumerate(self._tasks, start=1)))

    def find_matches(self, keyword: str) -> str:
        matches = self.find(keyword)
        if not matches:
            return NO_MATCHES_TEXT
        return "\n".join(self._render_numbered(matches))

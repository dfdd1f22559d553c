# src/taskbug/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import ClassVar, TypeAlias


class TaskType(StrEnum):
    """
    One-letter tag of a task variant.

    The value doubles as the first line of a record in the data file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_tag(cls, raw: str) -> TaskType | None:
        try:
            return cls(raw)
        except ValueError:
            return None


def _done_mark(is_done: bool) -> str:
    return "X" if is_done else " "


@dataclass(slots=True)
class Todo:
    description: str
    is_done: bool = False

    TYPE: ClassVar[TaskType] = TaskType.TODO

    def render(self) -> str:
        return f"[{self.TYPE}][{_done_mark(self.is_done)}] {self.description}"


@dataclass(slots=True)
class Deadline:
    description: str
    due_date: date
    is_done: bool = False

    TYPE: ClassVar[TaskType] = TaskType.DEADLINE

    def render(self) -> str:
        return (
            f"[{self.TYPE}][{_done_mark(self.is_done)}] {self.description}"
            f" (by: {self.due_date.isoformat()})"
        )


@dataclass(slots=True)
class Event:
    # start_date <= due_date is checked by whoever builds the event, not here.
    description: str
    start_date: date
    due_date: date
    is_done: bool = False

    TYPE: ClassVar[TaskType] = TaskType.EVENT

    def render(self) -> str:
        return (
            f"[{self.TYPE}][{_done_mark(self.is_done)}] {self.description}"
            f" (from: {self.start_date.isoformat()} to: {self.due_date.isoformat()})"
        )


Task: TypeAlias = Todo | Deadline | Event

# src/taskbug/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from ..errors import CorruptDataError, DateFormatError, StorageError
from .dates import format_date, parse_date
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskType, Todo

logger = logging.getLogger(__name__)

_FLAG_TO_BOOL = {"true": True, "false": False}


@dataclass(slots=True)
class LoadResult:
    tasks: TaskList
    warnings: list[str] = field(default_factory=list)


class _LineReader:
    """Hands out the lines of a record one by one, tracking 1-based line numbers."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._pos = 0

    @property
    def line_no(self) -> int:
        return self._pos

    def has_more(self) -> bool:
        return self._pos < len(self._lines)

    def next(self, what: str) -> str:
        if self._pos >= len(self._lines):
            raise CorruptDataError(
                f"record truncated, expected {what}", line_no=len(self._lines) + 1
            )
        line = self._lines[self._pos]
        self._pos += 1
        return line


class TaskStore:
    """
    Flat text file task store.

    Each task is one record, one field per line:
      tag (T/D/E), completion flag (true/false), description,
      then the due date for D, or start and due dates for E.

    Loading never writes the file (beyond creating it when missing);
    writing replaces the whole file through a temp file.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _ensure_file(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._path.touch()
            logger.info("Created empty data file %s", self._path)

    def _read_lines(self) -> list[str]:
        raw = self._path.read_bytes()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptDataError(
                f"not valid UTF-8 text ({e.reason})",
                line_no=raw.count(b"\n", 0, e.start) + 1,
            ) from e
        lines = text.split("\n")
        while lines and lines[-1] == "":
            lines.pop()
        return lines

    @staticmethod
    def _parse_flag(raw: str, line_no: int) -> bool:
        try:
            return _FLAG_TO_BOOL[raw]
        except KeyError:
            raise CorruptDataError(
                f"completion flag must be true/false, got {raw!r}", line_no=line_no
            ) from None

    @staticmethod
    def _parse_record_date(raw: str, line_no: int) -> date:
        try:
            return parse_date(raw)
        except DateFormatError as e:
            raise CorruptDataError(str(e), line_no=line_no) from e

    def _read_record(self, reader: _LineReader, warnings: list[str]) -> Task | None:
        raw_tag = reader.next("task type")
        tag_line = reader.line_no
        raw_flag = reader.next("completion flag")
        flag_line = reader.line_no
        description = reader.next("description")

        task_type = TaskType.from_tag(raw_tag)
        if task_type is None:
            msg = f"line {tag_line}: unknown task type {raw_tag!r}, record skipped"
            logger.warning("Bad formatting in %s: %s", self._path, msg)
            warnings.append(msg)
            return None

        is_done = self._parse_flag(raw_flag, flag_line)
        if not description:
            raise CorruptDataError("empty task description", line_no=flag_line + 1)

        if task_type is TaskType.TODO:
            return Todo(description, is_done=is_done)

        if task_type is TaskType.DEADLINE:
            due = self._parse_record_date(reader.next("due date"), reader.line_no)
            return Deadline(description, due, is_done=is_done)

        start = self._parse_record_date(reader.next("start date"), reader.line_no)
        due = self._parse_record_date(reader.next("due date"), reader.line_no)
        return Event(description, start, due, is_done=is_done)

    @staticmethod
    def _task_to_lines(task: Task) -> list[str]:
        lines = [task.TYPE.value, "true" if task.is_done else "false", task.description]
        if isinstance(task, Deadline):
            lines.append(format_date(task.due_date))
        elif isinstance(task, Event):
            lines.append(format_date(task.start_date))
            lines.append(format_date(task.due_date))
        return lines

    # ---- public API ----

    def load(self) -> LoadResult:
        """
        Read every record from disk.

        Missing file -> created empty, empty list.
        Unknown type tag -> record skipped, warning collected.
        Malformed flag/date, empty description, truncated record
        or undecodable bytes -> CorruptDataError.
        """
        try:
            self._ensure_file()
            lines = self._read_lines()
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        tasks = TaskList()
        warnings: list[str] = []
        reader = _LineReader(lines)
        while reader.has_more():
            task = self._read_record(reader, warnings)
            if task is not None:
                tasks.add(task)

        logger.info(
            "TaskStore loaded path=%s tasks=%d skipped=%d",
            self._path,
            tasks.size(),
            len(warnings),
        )
        return LoadResult(tasks=tasks, warnings=warnings)

    def write(self, tasks: TaskList) -> None:
        """Serialize all tasks in order and atomically replace the data file."""
        out: list[str] = []
        for task in tasks:
            out.extend(self._task_to_lines(task))
        payload = "".join(line + "\n" for line in out)

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Cannot write {self._path}: {e}") from e

        logger.info("TaskStore saved path=%s tasks=%d", self._path, tasks.size())

# tests/test_task_store.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from taskbug.errors import CorruptDataError, StorageError
from taskbug.tasks import task_store as task_store_module
from taskbug.tasks.task_list import TaskList
from taskbug.tasks.task_models import Deadline, Event, Todo
from taskbug.tasks.task_store import TaskStore


def _sample() -> TaskList:
    return TaskList(
        [
            Todo("buy milk", is_done=True),
            Deadline("report", date(2024, 5, 1)),
            Event("camp trip", date(2024, 6, 1), date(2024, 6, 3), is_done=True),
            Todo("call mom"),
        ]
    )


def test_missing_file_is_created_empty(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.txt"
    result = TaskStore(path).load()

    assert path.exists()
    assert path.read_text("utf-8") == ""
    assert result.tasks.size() == 0
    assert result.warnings == []


def test_write_uses_line_per_field_layout(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    TaskStore(path).write(_sample())

    assert path.read_text("utf-8") == (
        "T\ntrue\nbuy milk\n"
        "D\nfalse\nreport\n2024-05-01\n"
        "E\ntrue\ncamp trip\n2024-06-01\n2024-06-03\n"
        "T\nfalse\ncall mom\n"
    )
    assert not (tmp_path / "tasks.txt.tmp").exists()


def test_write_then_load_round_trips(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.txt")
    original = _sample()
    store.write(original)

    loaded = store.load()
    assert list(loaded.tasks) == list(original)
    assert loaded.warnings == []


def test_unknown_tag_is_skipped_with_warning(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "T\nfalse\nfirst\n"
        "X\ntrue\nmystery\n"
        "D\ntrue\nsecond\n2024-01-31\n",
        "utf-8",
    )

    result = TaskStore(path).load()

    assert list(result.tasks) == [
        Todo("first"),
        Deadline("second", date(2024, 1, 31), is_done=True),
    ]
    assert None not in list(result.tasks)
    assert len(result.warnings) == 1
    assert "line 4" in result.warnings[0]
    assert "'X'" in result.warnings[0]


def test_malformed_date_fails_the_load_without_touching_the_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    content = "T\nfalse\nok\nE\nfalse\nparty\n2024-01-01\n2024-13-01\n"
    path.write_text(content, "utf-8")

    with pytest.raises(CorruptDataError) as exc:
        TaskStore(path).load()

    assert exc.value.line_no == 8
    assert path.read_text("utf-8") == content


def test_bad_completion_flag_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T\nyes\nsomething\n", "utf-8")

    with pytest.raises(CorruptDataError) as exc:
        TaskStore(path).load()
    assert exc.value.line_no == 2


def test_truncated_record_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("D\nfalse\nreport\n", "utf-8")

    with pytest.raises(CorruptDataError) as exc:
        TaskStore(path).load()
    assert exc.value.line_no == 4


def test_empty_description_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    content = "T\nfalse\n\nT\nfalse\nkeep\n"
    path.write_text(content, "utf-8")

    with pytest.raises(CorruptDataError) as exc:
        TaskStore(path).load()
    assert exc.value.line_no == 3
    assert path.read_text("utf-8") == content


def test_invalid_utf8_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T\nfalse\n\xff\n")

    with pytest.raises(CorruptDataError) as exc:
        TaskStore(path).load()
    assert exc.value.line_no == 3
    assert path.read_bytes() == b"T\nfalse\n\xff\n"


def test_trailing_blank_lines_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T\nfalse\nbuy milk\n\n\n", "utf-8")

    assert list(TaskStore(path).load().tasks) == [Todo("buy milk")]


def test_descriptions_keep_inner_spaces(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.txt")
    store.write(TaskList([Todo("  padded   text ")]))

    assert store.load().tasks.get(1).description == "  padded   text "


def test_failed_write_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskStore(path)
    store.write(TaskList([Todo("keep me")]))
    before = path.read_text("utf-8")

    def broken_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(task_store_module.os, "replace", broken_replace)

    with pytest.raises(StorageError):
        store.write(_sample())

    assert path.read_text("utf-8") == before
    assert not (tmp_path / "tasks.txt.tmp").exists()

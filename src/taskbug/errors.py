# src/taskbug/errors.py

"""
Error taxonomy.

The message of a TaskbugError is meant to be shown to the user as-is;
command handlers raise these and the command registry turns them into replies.
"""

from __future__ import annotations


class TaskbugError(Exception):
    """Base class for every error the assistant knows how to report."""


class InputFormatError(TaskbugError):
    """Wrong argument count, empty required field or non-numeric index."""


class IndexOutOfRangeError(TaskbugError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Task index {index} is out of range 1..{size}.")
        self.index = index
        self.size = size


class DateFormatError(TaskbugError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Not a yyyy-MM-dd date: {text!r}")
        self.text = text


class LogicalOrderError(TaskbugError):
    """An event would end before it starts."""


class CorruptDataError(TaskbugError):
    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class StorageError(TaskbugError):
    """The data file could not be read or written."""

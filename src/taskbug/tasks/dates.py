# src/taskbug/tasks/dates.py

from __future__ import annotations

import re
from datetime import date

from ..errors import DateFormatError

DATE_FORMAT = "yyyy-MM-dd"

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_date(text: str) -> date:
    """
    Parse a strict yyyy-MM-dd date.

    Unpadded fields ("2024-1-5") and surrounding whitespace are rejected.
    """
    m = _DATE_RE.fullmatch(text)
    if not m:
        raise DateFormatError(text)
    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateFormatError(text) from e


def format_date(value: date) -> str:
    return value.isoformat()

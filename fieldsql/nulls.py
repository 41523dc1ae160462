"""Helpers mapping "zero" values to SQL NULL when building argument lists.

Request payloads usually carry ``0``, ``""`` or an unset time where the
database column should be NULL::

    args = [none_if_empty(payload.nickname), none_if_zero(payload.manager_id)]
"""
from __future__ import annotations

from datetime import datetime, time
from typing import TypeVar

Number = TypeVar("Number", int, float)

#: Format accepted by :func:`parse_time_of_day`.
TIME_OF_DAY_FORMAT = "%H:%M:%S"


def none_if_zero(number: Number | None) -> Number | None:
    """Return ``None`` for zero or negative numbers, else ``number``."""
    if number is None or number <= 0:
        return None
    return number


def none_if_empty(text: str | None) -> str | None:
    """Return ``None`` for an empty string."""
    return text or None


def none_if_zero_time(value: datetime | None) -> datetime | None:
    """Return ``None`` for ``datetime.min`` (the "zero" timestamp)."""
    if value is None or value.replace(tzinfo=None) == datetime.min:
        return None
    return value


def parse_time_of_day(text: str) -> time | None:
    """Parse ``HH:MM:SS``; unparsable input is NULL."""
    try:
        return datetime.strptime(text, TIME_OF_DAY_FORMAT).time()
    except ValueError:
        return None

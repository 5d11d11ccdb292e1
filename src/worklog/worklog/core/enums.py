from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Attendance event kinds (state transition signals)."""

    WORK_START = "work_start"
    WORK_END = "work_end"
    BREAK_START = "break_start"
    BREAK_END = "break_end"

    @property
    def opens_interval(self) -> bool:
        return self in (EventKind.WORK_START, EventKind.BREAK_END)

    @property
    def closes_interval(self) -> bool:
        return self in (EventKind.WORK_END, EventKind.BREAK_START)


class Status(str, Enum):
    """Current status. Always derived from the log, never stored."""

    UNREGISTERED = "unregistered"
    WORKING = "working"
    ON_BREAK = "on_break"


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Weekday(int, Enum):
    """Same numbering as ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value) -> "Weekday":
        if isinstance(value, Weekday):
            return value
        if isinstance(value, int):
            return cls(value)
        text = str(value).strip()
        if text.isdigit():
            return cls(int(text))
        return cls[text.upper()]

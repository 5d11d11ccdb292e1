from __future__ import annotations

from typing import Iterable

from ..core.enums import EventKind, Status
from ..core.exceptions import ValidationError
from .model import AttendanceEvent, checked_kind, sorted_events

_STATUS_AFTER = {
    EventKind.WORK_START: Status.WORKING,
    EventKind.BREAK_END: Status.WORKING,
    EventKind.BREAK_START: Status.ON_BREAK,
    EventKind.WORK_END: Status.UNREGISTERED,
}

_NEXT_STAMP = {
    Status.UNREGISTERED: EventKind.WORK_START,
    Status.WORKING: EventKind.BREAK_START,
    Status.ON_BREAK: EventKind.BREAK_END,
}


def derive_status(events: Iterable[AttendanceEvent]) -> Status:
    """Status implied by the most recent event; empty log means unregistered.

    Every kind in the log is checked, not only the last one.
    """
    kinds = [checked_kind(e) for e in sorted_events(events)]
    if not kinds:
        return Status.UNREGISTERED
    return _STATUS_AFTER[kinds[-1]]


def next_stamp_kind(status: Status) -> EventKind:
    """The single "stamp" button toggles start -> break -> resume."""
    return _NEXT_STAMP[status]


def clock_out_kind(status: Status) -> EventKind:
    if status == Status.UNREGISTERED:
        raise ValidationError("Not clocked in")
    return EventKind.WORK_END

from datetime import datetime

import pytest

from src.worklog.worklog.activity.model import AttendanceEvent
from src.worklog.worklog.activity.status import clock_out_kind, derive_status, next_stamp_kind
from src.worklog.worklog.core.enums import EventKind, Status
from src.worklog.worklog.core.exceptions import UnknownEventKindError, ValidationError


def test_empty_log_is_unregistered():
    assert derive_status([]) == Status.UNREGISTERED


@pytest.mark.parametrize(
    "kind, expected",
    [
        (EventKind.WORK_START, Status.WORKING),
        (EventKind.BREAK_END, Status.WORKING),
        (EventKind.BREAK_START, Status.ON_BREAK),
        (EventKind.WORK_END, Status.UNREGISTERED),
    ],
)
def test_status_follows_last_event(kind, expected):
    events = [
        AttendanceEvent(EventKind.WORK_START, datetime(2026, 1, 5, 9, 0)),
        AttendanceEvent(kind, datetime(2026, 1, 5, 10, 0)),
    ]
    assert derive_status(events) == expected


def test_unsorted_log_uses_latest_timestamp_without_mutating_input():
    events = [
        AttendanceEvent(EventKind.BREAK_START, datetime(2026, 1, 5, 12, 0)),
        AttendanceEvent(EventKind.WORK_START, datetime(2026, 1, 5, 9, 0)),
    ]
    original = list(events)

    assert derive_status(events) == Status.ON_BREAK
    assert events == original


def test_unmatched_end_alone_is_unregistered():
    assert derive_status([AttendanceEvent(EventKind.WORK_END, datetime(2026, 1, 5, 9, 0))]) == Status.UNREGISTERED


def test_unknown_kind_is_rejected():
    with pytest.raises(UnknownEventKindError):
        derive_status([AttendanceEvent("lunch", datetime(2026, 1, 5, 9, 0))])


def test_stamp_cycles_through_work_and_break():
    assert next_stamp_kind(Status.UNREGISTERED) == EventKind.WORK_START
    assert next_stamp_kind(Status.WORKING) == EventKind.BREAK_START
    assert next_stamp_kind(Status.ON_BREAK) == EventKind.BREAK_END


def test_clock_out_requires_being_clocked_in():
    assert clock_out_kind(Status.WORKING) == EventKind.WORK_END
    assert clock_out_kind(Status.ON_BREAK) == EventKind.WORK_END
    with pytest.raises(ValidationError):
        clock_out_kind(Status.UNREGISTERED)


def test_unknown_kind_anywhere_in_log_is_rejected():
    events = [
        AttendanceEvent("lunch", datetime(2026, 1, 5, 9, 0)),
        AttendanceEvent(EventKind.WORK_START, datetime(2026, 1, 5, 10, 0)),
    ]
    with pytest.raises(UnknownEventKindError):
        derive_status(events)

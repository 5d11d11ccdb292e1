from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.worklog.worklog.activity.memory_event_log_repository import InMemoryEventLogRepository
from src.worklog.worklog.activity.model import AttendanceEvent
from src.worklog.worklog.activity.service import ActivityService
from src.worklog.worklog.core.enums import EventKind, Status
from src.worklog.worklog.core.exceptions import UnknownEventKindError, ValidationError
from src.worklog.worklog.summary.service import SummaryService

UTC = timezone.utc


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock(fixed_now):
    return FakeClock(fixed_now)


@pytest.fixture
def repo():
    return InMemoryEventLogRepository()


@pytest.fixture
def svc(repo, rule, clock):
    return ActivityService(repo, SummaryService(rule), clock=clock)


def test_new_subject_is_unregistered_with_empty_log(svc):
    snapshot = svc.get_status("alice")

    assert snapshot.current_status == Status.UNREGISTERED
    assert list(snapshot.attendance_log) == []


def test_stamp_cycle_and_clock_out(svc, clock):
    kinds = []
    for _ in range(3):
        kinds.append(svc.stamp("alice").kind)
        clock.advance(hours=1)
    kinds.append(svc.clock_out("alice").kind)

    assert kinds == [EventKind.WORK_START, EventKind.BREAK_START, EventKind.BREAK_END, EventKind.WORK_END]
    assert svc.get_status("alice").current_status == Status.UNREGISTERED


def test_clock_out_without_clock_in_is_rejected(svc, repo):
    with pytest.raises(ValidationError):
        svc.clock_out("alice")
    assert list(repo.list_events("alice")) == []


def test_summary_uses_derived_status_and_clock(svc, clock):
    svc.stamp("alice")
    clock.advance(hours=2)
    svc.stamp("alice")  # break
    clock.advance(minutes=30)
    svc.stamp("alice")  # back
    clock.advance(minutes=45)

    report = svc.get_summary("alice")

    assert report.total_ms == (2 * 60 + 45) * 60 * 1000


def test_subjects_are_isolated(svc):
    svc.stamp("alice")
    assert svc.get_status("bob").current_status == Status.UNREGISTERED


def test_status_log_is_limited_to_most_recent(repo, rule):
    for hour in range(9, 15):
        repo.append("alice", AttendanceEvent(EventKind.WORK_START if hour % 2 else EventKind.WORK_END, datetime(2026, 1, 5, hour, tzinfo=UTC)))
    svc = ActivityService(repo, SummaryService(rule), status_log_limit=2)

    snapshot = svc.get_status("alice")

    assert [e.timestamp.hour for e in snapshot.attendance_log] == [13, 14]
    assert snapshot.current_status == Status.UNREGISTERED
    assert len(svc.get_status("alice", limit=0).attendance_log) == 0


@pytest.mark.parametrize("subject_id", ["", "   ", None])
def test_subject_id_is_required(svc, subject_id):
    with pytest.raises(ValidationError):
        svc.get_status(subject_id)


def test_repository_returns_sorted_snapshot(repo):
    late = AttendanceEvent(EventKind.WORK_END, datetime(2026, 1, 5, 17, tzinfo=UTC))
    early = AttendanceEvent(EventKind.WORK_START, datetime(2026, 1, 5, 9, tzinfo=UTC))
    repo.append("alice", late)
    repo.append("alice", early)

    snapshot = repo.list_events("alice")
    repo.append("alice", AttendanceEvent(EventKind.WORK_START, datetime(2026, 1, 6, 9, tzinfo=UTC)))

    assert list(snapshot) == [early, late]


def test_unknown_kind_fails_status_and_summary_alike(repo, svc):
    repo.append("alice", AttendanceEvent("lunch", datetime(2026, 1, 5, 9, tzinfo=UTC)))
    repo.append("alice", AttendanceEvent(EventKind.WORK_START, datetime(2026, 1, 5, 10, tzinfo=UTC)))

    with pytest.raises(UnknownEventKindError):
        svc.get_status("alice")
    with pytest.raises(UnknownEventKindError):
        svc.get_summary("alice")

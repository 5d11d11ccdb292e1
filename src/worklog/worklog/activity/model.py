from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Sequence

from ..common.datetime_utils import elapsed_ms, to_utc
from ..core.enums import EventKind, Granularity, Status
from ..core.exceptions import UnknownEventKindError


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one timestamped transition in a subject's log."""

    kind: EventKind
    timestamp: datetime

    def __post_init__(self):
        object.__setattr__(self, "timestamp", to_utc(self.timestamp))


@dataclass(frozen=True)
class ActiveInterval:
    """A contiguous span counted as active time, ``[start, end)``."""

    start: datetime
    end: datetime

    def __post_init__(self):
        object.__setattr__(self, "start", to_utc(self.start))
        object.__setattr__(self, "end", to_utc(self.end))

    @property
    def duration_ms(self) -> int:
        return elapsed_ms(self.start, self.end)


@dataclass(frozen=True)
class BucketTotal:
    granularity: Granularity
    bucket_start: date
    total_ms: int

    @property
    def label(self) -> str:
        if self.granularity == Granularity.MONTH:
            return self.bucket_start.strftime("%Y-%m")
        return self.bucket_start.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class SummaryReport:
    daily: list[BucketTotal] = field(default_factory=list)
    weekly: list[BucketTotal] = field(default_factory=list)
    monthly: list[BucketTotal] = field(default_factory=list)
    total_ms: int = 0


@dataclass(frozen=True)
class StatusSnapshot:
    current_status: Status
    attendance_log: Sequence[AttendanceEvent]


def sorted_events(events: Iterable[AttendanceEvent]) -> tuple[AttendanceEvent, ...]:
    """Stable ascending copy by timestamp; the caller's sequence is untouched."""
    return tuple(sorted(events, key=lambda e: e.timestamp))


def checked_kind(event: AttendanceEvent) -> EventKind:
    """The event's kind as an ``EventKind``; anything else rejects the call."""
    try:
        return EventKind(event.kind)
    except ValueError:
        raise UnknownEventKindError(f"unknown event kind: {event.kind!r}") from None

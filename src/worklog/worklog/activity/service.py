from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc, to_utc
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_STATUS_LOG_LIMIT
from ..summary.service import SummaryService
from .model import AttendanceEvent, StatusSnapshot, SummaryReport, sorted_events
from .repository import EventLogRepository
from .status import clock_out_kind, derive_status, next_stamp_kind

logger = logging.getLogger(__name__)


class ActivityService:
    def __init__(
        self,
        events: EventLogRepository,
        summary: SummaryService,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        status_log_limit: int = DEFAULT_STATUS_LOG_LIMIT,
    ):
        self._events = events
        self._summary = summary
        self._clock = clock or now_utc
        self._status_log_limit = int(status_log_limit)

    def _now(self, now: Optional[datetime]) -> datetime:
        return to_utc(now or self._clock())

    def get_status(self, subject_id: str, *, limit: Optional[int] = None) -> StatusSnapshot:
        """Current status plus the most recent log entries (oldest first)."""
        subject_id = require_non_empty(subject_id, "subject_id")
        events = sorted_events(self._events.list_events(subject_id))
        limit = self._status_log_limit if limit is None else int(limit)
        recent = tuple(events[-limit:]) if limit > 0 else ()
        return StatusSnapshot(current_status=derive_status(events), attendance_log=recent)

    def get_summary(self, subject_id: str, *, now: Optional[datetime] = None) -> SummaryReport:
        subject_id = require_non_empty(subject_id, "subject_id")
        events = self._events.list_events(subject_id)
        return self._summary.build_report(events, status=derive_status(events), now=self._now(now))

    def stamp(self, subject_id: str, *, now: Optional[datetime] = None) -> AttendanceEvent:
        """Start work, start a break or end a break depending on the current status."""
        subject_id = require_non_empty(subject_id, "subject_id")
        status = derive_status(self._events.list_events(subject_id))
        return self._record(subject_id, AttendanceEvent(kind=next_stamp_kind(status), timestamp=self._now(now)))

    def clock_out(self, subject_id: str, *, now: Optional[datetime] = None) -> AttendanceEvent:
        subject_id = require_non_empty(subject_id, "subject_id")
        status = derive_status(self._events.list_events(subject_id))
        return self._record(subject_id, AttendanceEvent(kind=clock_out_kind(status), timestamp=self._now(now)))

    def _record(self, subject_id: str, event: AttendanceEvent) -> AttendanceEvent:
        self._events.append(subject_id, event)
        logger.info("subject=%s recorded %s at %s", subject_id, event.kind.value, event.timestamp.isoformat())
        return event

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..activity.model import AttendanceEvent, SummaryReport
from ..aggregation.aggregator import bucket_totals
from ..aggregation.buckets import BoundaryRule
from ..aggregation.factory import IntervalPolicy
from ..aggregation.intervals import build_intervals
from ..core.enums import Granularity, Status


class SummaryService:
    """Daily / weekly / monthly totals for one subject's log.

    Stateless: every call recomputes from the events it is given, so one
    instance can serve concurrent requests.
    """

    def __init__(self, rule: Optional[BoundaryRule] = None, *, policy: Optional[IntervalPolicy] = None):
        self._rule = rule or BoundaryRule()
        self._policy = policy or IntervalPolicy()

    def build_report(self, events: Iterable[AttendanceEvent], *, status: Status, now: datetime) -> SummaryReport:
        intervals = build_intervals(events, now=now, status=status, policy=self._policy)

        daily = bucket_totals(intervals, Granularity.DAY, self._rule)
        weekly = bucket_totals(intervals, Granularity.WEEK, self._rule)
        monthly = bucket_totals(intervals, Granularity.MONTH, self._rule)

        return SummaryReport(
            daily=daily,
            weekly=weekly,
            monthly=monthly,
            total_ms=sum(i.duration_ms for i in intervals),
        )

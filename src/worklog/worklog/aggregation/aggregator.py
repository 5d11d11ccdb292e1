from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..activity.model import ActiveInterval, AttendanceEvent, BucketTotal
from ..common.datetime_utils import elapsed_ms
from ..core.enums import Granularity, Status
from .buckets import BoundaryRule, iter_buckets
from .factory import IntervalPolicy
from .intervals import build_intervals


def bucket_totals(
    intervals: Iterable[ActiveInterval],
    granularity: Granularity,
    rule: BoundaryRule,
) -> list[BucketTotal]:
    """Clip each interval to the buckets it overlaps and sum per bucket.

    Only buckets with a positive overlap are listed, so zero-length
    intervals (clock skew, start and end at the same instant) add no rows.
    """
    totals: dict[date, int] = {}

    for interval in intervals:
        for label, bucket_start, bucket_end in iter_buckets(interval.start, interval.end, granularity, rule):
            overlap = elapsed_ms(max(interval.start, bucket_start), min(interval.end, bucket_end))
            if overlap > 0:
                totals[label] = totals.get(label, 0) + overlap

    return [BucketTotal(granularity=granularity, bucket_start=k, total_ms=v) for k, v in sorted(totals.items())]


def aggregate_durations(
    events: Iterable[AttendanceEvent],
    *,
    now: datetime,
    status: Status,
    granularity: Granularity,
    rule: Optional[BoundaryRule] = None,
    policy: Optional[IntervalPolicy] = None,
) -> list[BucketTotal]:
    intervals = build_intervals(events, now=now, status=status, policy=policy)
    return bucket_totals(intervals, granularity, rule or BoundaryRule())

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator

from ..common.datetime_utils import to_utc
from ..core.constants import DEFAULT_DAY_RESET_HOUR, DEFAULT_WEEK_START_DAY
from ..core.enums import Granularity, Weekday
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class BoundaryRule:
    """Where logical days and weeks begin.

    A logical day runs from ``day_reset_hour`` to the same hour the next
    calendar day (UTC). Weeks start on ``week_start_day``; months start on
    the first logical day of each calendar month.
    """

    day_reset_hour: int = DEFAULT_DAY_RESET_HOUR
    week_start_day: Weekday = DEFAULT_WEEK_START_DAY

    def __post_init__(self):
        if not isinstance(self.day_reset_hour, int) or not 0 <= self.day_reset_hour <= 23:
            raise ConfigurationError(f"day_reset_hour must be within 0..23, got {self.day_reset_hour!r}")
        try:
            object.__setattr__(self, "week_start_day", Weekday.parse(self.week_start_day))
        except (KeyError, ValueError) as e:
            raise ConfigurationError(f"invalid week_start_day: {self.week_start_day!r}") from e

    def logical_date(self, instant: datetime) -> date:
        return (to_utc(instant) - timedelta(hours=self.day_reset_hour)).date()

    def start_of(self, day: date) -> datetime:
        return datetime.combine(day, time(self.day_reset_hour), tzinfo=timezone.utc)


def _first_day(day: date, granularity: Granularity, rule: BoundaryRule) -> date:
    if granularity == Granularity.DAY:
        return day
    if granularity == Granularity.WEEK:
        return day - timedelta(days=(day.weekday() - rule.week_start_day) % 7)
    if granularity == Granularity.MONTH:
        return day.replace(day=1)
    raise ConfigurationError(f"unsupported granularity: {granularity!r}")


def _following_day(first: date, granularity: Granularity) -> date:
    if granularity == Granularity.DAY:
        return first + timedelta(days=1)
    if granularity == Granularity.WEEK:
        return first + timedelta(days=7)
    if first.month == 12:
        return date(first.year + 1, 1, 1)
    return date(first.year, first.month + 1, 1)


def bucket_bounds(instant: datetime, granularity: Granularity, rule: BoundaryRule) -> tuple[date, datetime, datetime]:
    """Bucket containing ``instant``: (label date, start, end)."""
    first = _first_day(rule.logical_date(instant), granularity, rule)
    return first, rule.start_of(first), rule.start_of(_following_day(first, granularity))


def iter_buckets(
    start: datetime, end: datetime, granularity: Granularity, rule: BoundaryRule
) -> Iterator[tuple[date, datetime, datetime]]:
    """Every bucket touched by ``[start, end]``, in ascending order.

    A zero-length span still yields the bucket holding its instant.
    """
    start, end = to_utc(start), to_utc(end)
    label, bucket_start, bucket_end = bucket_bounds(start, granularity, rule)
    yield label, bucket_start, bucket_end
    while bucket_end < end:
        label = _following_day(label, granularity)
        bucket_start, bucket_end = bucket_end, rule.start_of(_following_day(label, granularity))
        yield label, bucket_start, bucket_end

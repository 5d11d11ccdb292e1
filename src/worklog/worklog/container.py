from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .activity.memory_event_log_repository import InMemoryEventLogRepository
from .activity.repository import EventLogRepository
from .activity.service import ActivityService
from .aggregation.buckets import BoundaryRule
from .aggregation.factory import IntervalPolicyFactory
from .core.constants import (
    DEFAULT_DANGLING_START_POLICY,
    DEFAULT_DAY_RESET_HOUR,
    DEFAULT_REPEATED_START_POLICY,
    DEFAULT_STATUS_LOG_LIMIT,
    DEFAULT_WEEK_START_DAY,
)
from .summary.service import SummaryService


@dataclass(frozen=True)
class Container:
    events_repo: EventLogRepository

    summary_service: SummaryService
    activity_service: ActivityService


def build_container(
    *,
    settings: dict,
    events_repo: Optional[EventLogRepository] = None,
    clock: Optional[Callable] = None,
) -> Container:
    rule = BoundaryRule(
        day_reset_hour=int(settings.get("day_reset_hour", DEFAULT_DAY_RESET_HOUR)),
        week_start_day=settings.get("week_start_day", DEFAULT_WEEK_START_DAY),
    )
    policy = IntervalPolicyFactory().from_names(
        repeated=settings.get("repeated_start_policy", DEFAULT_REPEATED_START_POLICY),
        dangling=settings.get("dangling_start_policy", DEFAULT_DANGLING_START_POLICY),
    )

    events_repo = events_repo or InMemoryEventLogRepository()
    summary_service = SummaryService(rule, policy=policy)
    activity_service = ActivityService(
        events_repo,
        summary_service,
        clock=clock,
        status_log_limit=int(settings.get("status_log_limit", DEFAULT_STATUS_LOG_LIMIT)),
    )

    return Container(
        events_repo=events_repo,
        summary_service=summary_service,
        activity_service=activity_service,
    )

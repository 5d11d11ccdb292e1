from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.worklog.worklog.aggregation.buckets import BoundaryRule
from src.worklog.worklog.core.enums import Weekday


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 7, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def rule() -> BoundaryRule:
    return BoundaryRule(day_reset_hour=5, week_start_day=Weekday.MONDAY)

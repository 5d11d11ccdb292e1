from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...activity.model import ActiveInterval
from ...core.enums import Status
from .base import DanglingStartStrategy


class StatusAuthoritativeStrategy(DanglingStartStrategy):
    """Extend to ``now`` only while the subject is reported as working.

    The supplied status wins over the last raw event, so aborted sessions
    do not keep accruing time.
    """

    name = "status"

    def close(self, *, open_start: datetime, now: datetime, status: Status) -> Optional[ActiveInterval]:
        if status != Status.WORKING:
            return None
        return ActiveInterval(start=open_start, end=max(now, open_start))


class AlwaysCloseStrategy(DanglingStartStrategy):
    name = "always"

    def close(self, *, open_start: datetime, now: datetime, status: Status) -> Optional[ActiveInterval]:
        return ActiveInterval(start=open_start, end=max(now, open_start))


class DiscardDanglingStrategy(DanglingStartStrategy):
    name = "discard"

    def close(self, *, open_start: datetime, now: datetime, status: Status) -> Optional[ActiveInterval]:
        return None

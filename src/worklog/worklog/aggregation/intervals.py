from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..activity.model import ActiveInterval, AttendanceEvent, checked_kind, sorted_events
from ..common.datetime_utils import to_utc
from ..core.enums import Status
from .factory import IntervalPolicy

logger = logging.getLogger(__name__)


def build_intervals(
    events: Iterable[AttendanceEvent],
    *,
    now: datetime,
    status: Status,
    policy: Optional[IntervalPolicy] = None,
) -> list[ActiveInterval]:
    """Pair start-like with end-like events in one forward pass.

    Ends without an open start are ignored. A start still open after the
    last event is handed to ``policy.dangling_start`` together with ``now``
    and ``status``.
    """
    policy = policy or IntervalPolicy()
    ordered = sorted_events(events)
    kinds = [checked_kind(e) for e in ordered]

    intervals: list[ActiveInterval] = []
    open_start: Optional[datetime] = None

    for event, kind in zip(ordered, kinds):
        if kind.opens_interval:
            if open_start is None:
                open_start = event.timestamp
            else:
                logger.debug("repeated start at %s while open since %s", event.timestamp, open_start)
                open_start = policy.repeated_start.resolve(open_start=open_start, incoming=event.timestamp)
        elif open_start is not None:
            intervals.append(ActiveInterval(start=open_start, end=event.timestamp))
            open_start = None
        else:
            logger.debug("ignoring %s at %s with no open start", kind.value, event.timestamp)

    if open_start is not None:
        final = policy.dangling_start.close(open_start=open_start, now=to_utc(now), status=Status(status))
        if final is None:
            logger.debug("discarding dangling start at %s (status=%s)", open_start, Status(status).value)
        else:
            intervals.append(final)

    return intervals

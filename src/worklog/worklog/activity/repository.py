from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEvent


class EventLogRepository(Protocol):
    """Read/append access to one subject's event log.

    Implementations must hand out a consistent snapshot per call.
    """

    def list_events(self, subject_id: str) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def append(self, subject_id: str, event: AttendanceEvent) -> None:
        raise NotImplementedError

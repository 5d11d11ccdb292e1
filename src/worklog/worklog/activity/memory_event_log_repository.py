from __future__ import annotations

import threading
from typing import Optional, Sequence

from .model import AttendanceEvent, sorted_events


class InMemoryEventLogRepository:
    """Process-local event log store.

    ``list_events`` returns an immutable sorted snapshot, so one aggregation
    call always sees a consistent log even while other requests append.
    """

    def __init__(self, initial: Optional[dict[str, Sequence[AttendanceEvent]]] = None):
        self._lock = threading.Lock()
        self._logs: dict[str, list[AttendanceEvent]] = {k: list(v) for k, v in (initial or {}).items()}

    def list_events(self, subject_id: str) -> Sequence[AttendanceEvent]:
        with self._lock:
            return sorted_events(self._logs.get(subject_id, ()))

    def append(self, subject_id: str, event: AttendanceEvent) -> None:
        with self._lock:
            self._logs.setdefault(subject_id, []).append(event)

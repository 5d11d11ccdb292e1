from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...activity.model import ActiveInterval
from ...core.enums import Status


class RepeatedStartStrategy(ABC):
    """Strategy Pattern: resolve a start-like event arriving while one is already open."""

    name: str = ""

    @abstractmethod
    def resolve(self, *, open_start: datetime, incoming: datetime) -> datetime:
        raise NotImplementedError


class DanglingStartStrategy(ABC):
    """Strategy Pattern: decide what an open start left at the end of the log is worth."""

    name: str = ""

    @abstractmethod
    def close(self, *, open_start: datetime, now: datetime, status: Status) -> Optional[ActiveInterval]:
        raise NotImplementedError

from __future__ import annotations

from datetime import datetime

from .base import RepeatedStartStrategy


class LastStartWinsStrategy(RepeatedStartStrategy):
    """Second start with no end in between discards the earlier one."""

    name = "last_wins"

    def resolve(self, *, open_start: datetime, incoming: datetime) -> datetime:
        return incoming


class FirstStartWinsStrategy(RepeatedStartStrategy):
    """Keep the earliest start; later duplicates are ignored."""

    name = "first_wins"

    def resolve(self, *, open_start: datetime, incoming: datetime) -> datetime:
        return open_start

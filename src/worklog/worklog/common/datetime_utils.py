from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ..core.exceptions import ValidationError

_ONE_MS = timedelta(milliseconds=1)


def now_utc() -> datetime:
    """Current instant in UTC.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Normalize an instant to aware UTC with millisecond precision.

    Naive datetimes are taken to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def parse_iso_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant such as ``2026-01-31T09:00:00.000Z``."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("timestamp is required")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(f"invalid timestamp: {value!r}") from e
    return to_utc(parsed)


def format_iso_instant(value: datetime) -> str:
    value = to_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def elapsed_ms(start: datetime, end: datetime) -> int:
    """Milliseconds from start to end, never negative."""
    return max((end - start) // _ONE_MS, 0)

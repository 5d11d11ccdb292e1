"""Conversion between domain objects and the JSON shapes exchanged with clients.

Event payloads carry the kind under ``kind``; ``type`` is accepted (and
emitted) as well because the web client reads log entries by that key.
"""
from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import format_iso_instant, parse_iso_instant, to_utc
from ..core.enums import EventKind
from ..core.exceptions import UnknownEventKindError, ValidationError
from .model import AttendanceEvent, BucketTotal, StatusSnapshot, SummaryReport


def event_from_payload(payload: dict) -> AttendanceEvent:
    if not isinstance(payload, dict):
        raise ValidationError("event must be an object")

    raw_kind = payload.get("kind", payload.get("type"))
    try:
        kind = EventKind(raw_kind)
    except ValueError:
        raise UnknownEventKindError(f"unknown event kind: {raw_kind!r}") from None

    raw_ts = payload.get("timestamp")
    if isinstance(raw_ts, datetime):
        timestamp = to_utc(raw_ts)
    else:
        timestamp = parse_iso_instant(raw_ts)
    return AttendanceEvent(kind=kind, timestamp=timestamp)


def event_to_payload(event: AttendanceEvent) -> dict:
    kind = EventKind(event.kind).value
    return {"kind": kind, "type": kind, "timestamp": format_iso_instant(event.timestamp)}


def status_to_payload(snapshot: StatusSnapshot) -> dict:
    return {
        "currentStatus": snapshot.current_status.value,
        "attendanceLog": [event_to_payload(e) for e in snapshot.attendance_log],
    }


def _bucket_rows(rows: list[BucketTotal], key: str) -> list[dict]:
    return [{key: r.label, "totalMs": int(r.total_ms)} for r in rows]


def summary_to_payload(report: SummaryReport) -> dict:
    return {
        "daily": _bucket_rows(report.daily, "date"),
        "weekly": _bucket_rows(report.weekly, "weekStart"),
        "monthly": _bucket_rows(report.monthly, "month"),
        "total": int(report.total_ms),
    }

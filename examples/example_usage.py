"""Example: use the service layer directly (no Flask).

Controllers stay thin; the status and summary logic lives in services.
"""

import importlib
from datetime import datetime, timedelta, timezone

from config import get_settings_module

from src.worklog.worklog.container import build_container
from src.worklog.worklog.main import settings_from_module


def main():
    settings = importlib.import_module(get_settings_module())
    start = datetime(2026, 1, 5, 22, 0, tzinfo=timezone.utc)
    container = build_container(settings=settings_from_module(settings))
    svc = container.activity_service

    svc.stamp("demo", now=start)
    svc.stamp("demo", now=start + timedelta(hours=3))
    svc.stamp("demo", now=start + timedelta(hours=3, minutes=20))
    svc.clock_out("demo", now=start + timedelta(hours=9))

    print(svc.get_status("demo"))
    print(svc.get_summary("demo", now=start + timedelta(days=1)))


if __name__ == "__main__":
    main()

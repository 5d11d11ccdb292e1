from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .activity.controller import register as register_activity
from .container import build_container


def settings_from_module(settings) -> dict:
    return {
        "day_reset_hour": getattr(settings, "DAY_RESET_HOUR"),
        "week_start_day": getattr(settings, "WEEK_START_DAY"),
        "repeated_start_policy": getattr(settings, "REPEATED_START_POLICY"),
        "dangling_start_policy": getattr(settings, "DANGLING_START_POLICY"),
        "status_log_limit": getattr(settings, "STATUS_LOG_LIMIT"),
    }


def create_app(*, container=None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger = logging.getLogger("worklog")

    worklog_settings = settings_from_module(settings)
    if app.config["DEBUG"]:
        logger.info("settings=%s boundaries=%s", settings_module, worklog_settings)

    container = container or build_container(settings=worklog_settings)
    register_activity(app, container)

    return app

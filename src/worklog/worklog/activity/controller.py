from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request

from ..common.validators import require_int_in_range
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from .schema import event_to_payload, status_to_payload, summary_to_payload

logger = logging.getLogger(__name__)

SUBJECT_HEADER = "X-Subject-Id"


def register(app: Flask, container: Container) -> None:
    def subject_required(view):
        """Identity comes from the login collaborator in front of this API."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            subject_id = (request.headers.get(SUBJECT_HEADER) or request.args.get("subject_id") or "").strip()
            if not subject_id:
                return jsonify({"message": "Missing subject id"}), 401
            g.subject_id = subject_id
            return view(*args, **kwargs)

        return wrapper

    def domain_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"message": str(e)}), 400
            except DomainError:
                logger.exception("domain error in %s", request.path)
                return jsonify({"message": "Internal error"}), 500

        return wrapper

    @app.route("/status", methods=["GET"], endpoint="status")
    @subject_required
    @domain_errors
    def status():
        limit = request.args.get("limit")
        if limit is not None:
            limit = require_int_in_range(limit, "limit", 0, 10_000)
        snapshot = container.activity_service.get_status(g.subject_id, limit=limit)
        return jsonify(status_to_payload(snapshot))

    @app.route("/summary", methods=["GET"], endpoint="summary")
    @subject_required
    @domain_errors
    def summary():
        report = container.activity_service.get_summary(g.subject_id)
        return jsonify(summary_to_payload(report))

    @app.route("/stamp", methods=["POST"], endpoint="stamp")
    @subject_required
    @domain_errors
    def stamp():
        event = container.activity_service.stamp(g.subject_id)
        return jsonify({"success": True, "event": event_to_payload(event)}), 201

    @app.route("/clock_out", methods=["POST"], endpoint="clock_out")
    @subject_required
    @domain_errors
    def clock_out():
        event = container.activity_service.clock_out(g.subject_id)
        return jsonify({"success": True, "event": event_to_payload(event)}), 201

from __future__ import annotations

import logging

from flask import Flask, request

from ..container import Container
from ..core.constants import USAGE_BANNER
from ..core.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)


def _text(body: str, status: int = 200):
    return body, status, {"Content-Type": "text/plain; charset=utf-8"}


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return _text(USAGE_BANNER)

    @app.route("/attendance", methods=["POST"], endpoint="add_attendance")
    def add_attendance():
        payload = request.get_json(silent=True)
        if payload is None:
            return _text("Error: request body must be JSON", 400)

        try:
            container.attendance_service.record(payload)
        except ValidationError as e:
            return _text(f"Error: {e}", 400)
        except StoreError as e:
            logger.exception("insert failed")
            return _text(f"Error: {e}", 500)

        return _text("Attendance recorded")

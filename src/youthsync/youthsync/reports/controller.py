from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import CSV_FILENAME
from ..core.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)


def _error(message: str, status: int):
    return f"Error: {message}", status, {"Content-Type": "text/plain; charset=utf-8"}


def register(app: Flask, container: Container) -> None:
    @app.route("/report", methods=["GET"], endpoint="get_report")
    def get_report():
        try:
            data = container.report_service.build_report(request.args.get("period"))
        except ValidationError as e:
            return _error(str(e), 400)
        except StoreError as e:
            logger.exception("report failed")
            return _error(str(e), 500)
        return jsonify(data.as_json())

    @app.route("/export", methods=["GET"], endpoint="export_csv")
    def export_csv():
        try:
            body = container.export_service.export_csv()
        except StoreError as e:
            logger.exception("export failed")
            return _error(str(e), 500)

        return app.response_class(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={CSV_FILENAME}"},
        )

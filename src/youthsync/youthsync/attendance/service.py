from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_int, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_STATUSES = {s.value for s in AttendanceStatus}


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record(self, payload: Any) -> AttendanceRecord:
        """Validate a JSON body and store it as a new attendance record."""

        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")

        student_id = require_int(payload.get("student_id"), "student_id")
        # Stored in canonical zero-padded form, e.g. "2024-1-5" -> "2024-01-05".
        date_s = parse_iso_date(require_non_empty(payload.get("date"), "date")).isoformat()
        status = require_choice(require_non_empty(payload.get("status"), "status"), "status", _STATUSES)

        record = AttendanceRecord(student_id=student_id, date=date_s, status=status)
        self._attendance.insert(record)
        logger.debug("recorded student_id=%s date=%s status=%s", student_id, date_s, status)
        return record

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.fetch_all()

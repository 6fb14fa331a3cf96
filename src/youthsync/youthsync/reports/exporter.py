from __future__ import annotations

import csv
import io
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..core.constants import CSV_HEADER


class CsvExporter:
    """Write raw attendance records as CSV text (header + one row each)."""

    def export(self, records: Iterable[AttendanceRecord]) -> str:
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for r in records:
            writer.writerow([r.student_id, r.date, r.status])
        return out.getvalue()

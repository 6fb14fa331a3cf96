from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Statuses accepted on insert and counted in reports."""

    PRESENT = "Present"
    ABSENT = "Absent"


class ReportPeriod(str, Enum):
    """Grouping mode of an attendance report."""

    DAY = "day"
    WEEK = "week"

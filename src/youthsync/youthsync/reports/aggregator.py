"""Attendance aggregation.

Collapses attendance records into per-period summaries. Pure: the input is
only read, and the same input in the same order always gives the same output.

Malformed dates are skipped (with a warning) rather than failing the report,
so one bad stored row never hides every other period. Unknown statuses still
open their period but increment neither counter.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import DateParseError
from .grouping.base import GroupingStrategy
from .model import PeriodSummary

logger = logging.getLogger(__name__)


def aggregate(records: Iterable[AttendanceRecord], grouping: GroupingStrategy) -> list[PeriodSummary]:
    # dict keeps insertion order, which is the first-seen order of the keys.
    by_key: dict[str, PeriodSummary] = {}

    for r in records:
        try:
            day = parse_iso_date(r.date)
        except DateParseError:
            logger.warning("skipping record with malformed date: student_id=%s date=%r", r.student_id, r.date)
            continue

        key = grouping.period_key(day)
        summary = by_key.get(key)
        if summary is None:
            summary = PeriodSummary(period_key=key)
            by_key[key] = summary

        if r.status == AttendanceStatus.PRESENT.value:
            summary.present_count += 1
        elif r.status == AttendanceStatus.ABSENT.value:
            summary.absent_count += 1

    return list(by_key.values())

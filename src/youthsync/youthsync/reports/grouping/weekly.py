from __future__ import annotations

from datetime import date

from .base import GroupingStrategy


class WeeklyGrouping(GroupingStrategy):
    """One period per ISO week, keyed ``YYYY-Www``.

    The ISO week-year is used, so 2024-12-30 lands in ``2025-W01``.
    """

    key_field = "week"

    def period_key(self, day: date) -> str:
        iso_year, iso_week, _ = day.isocalendar()
        return f"{iso_year}-W{iso_week:02d}"

from __future__ import annotations

from datetime import date

from ...core.constants import DAILY_KEY_FORMAT
from .base import GroupingStrategy


class DailyGrouping(GroupingStrategy):
    """One period per calendar day, keyed ``MM-DD-YYYY``."""

    key_field = "date"

    def period_key(self, day: date) -> str:
        return day.strftime(DAILY_KEY_FORMAT)

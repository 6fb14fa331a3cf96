from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import ReportPeriod
from ..core.exceptions import ValidationError
from .grouping.base import GroupingStrategy
from .grouping.daily import DailyGrouping
from .grouping.weekly import WeeklyGrouping


@dataclass
class GroupingFactory:
    """Factory Pattern: choose the grouping strategy for a report period."""

    default_period: ReportPeriod = ReportPeriod.DAY

    def resolve_period(self, value: Optional[Union[str, ReportPeriod]]) -> ReportPeriod:
        if value is None or value == "":
            return self.default_period
        if isinstance(value, ReportPeriod):
            return value
        try:
            return ReportPeriod(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in ReportPeriod)
            raise ValidationError(f"period must be one of: {allowed}") from None

    def for_period(self, value: Optional[Union[str, ReportPeriod]] = None) -> GroupingStrategy:
        period = self.resolve_period(value)
        if period == ReportPeriod.WEEK:
            return WeeklyGrouping()
        return DailyGrouping()

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..attendance.repository import AttendanceRepository
from ..core.enums import ReportPeriod
from .aggregator import aggregate
from .exporter import CsvExporter
from .factory import GroupingFactory
from .model import PeriodSummary


@dataclass(frozen=True)
class ReportData:
    key_field: str
    summaries: list[PeriodSummary]

    def as_json(self) -> list[dict]:
        return [s.to_dict(key_field=self.key_field) for s in self.summaries]


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        grouping_factory: Optional[GroupingFactory] = None,
    ):
        self._attendance = attendance
        self._factory = grouping_factory or GroupingFactory()

    def build_report(self, period: Optional[Union[str, ReportPeriod]] = None) -> ReportData:
        # Resolve first so a bad period fails before hitting the store.
        grouping = self._factory.for_period(period)
        records = self._attendance.fetch_all()
        return ReportData(key_field=grouping.key_field, summaries=aggregate(records, grouping))


class ExportService:
    def __init__(self, attendance: AttendanceRepository, *, exporter: Optional[CsvExporter] = None):
        self._attendance = attendance
        self._exporter = exporter or CsvExporter()

    def export_csv(self) -> str:
        return self._exporter.export(self._attendance.fetch_all())

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_REPORT_PERIOD
from .database.connection import DBConfig, DatabaseConnection
from .reports.factory import GroupingFactory
from .reports.service import ExportService, ReportService


@dataclass(frozen=True)
class Container:
    """Explicit wiring handed to every controller.

    ``conn`` is ``None`` when the repository is not MySQL-backed (tests).
    """

    conn: Optional[DatabaseConnection]

    attendance_service: AttendanceService
    report_service: ReportService
    export_service: ExportService


def wire(
    attendance_repo: AttendanceRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    report_period: str = DEFAULT_REPORT_PERIOD,
) -> Container:
    factory = GroupingFactory(default_period=GroupingFactory().resolve_period(report_period))

    return Container(
        conn=conn,
        attendance_service=AttendanceService(attendance_repo),
        report_service=ReportService(attendance_repo, grouping_factory=factory),
        export_service=ExportService(attendance_repo),
    )


def build_container(
    *,
    db_config: dict,
    pool_size: int = DEFAULT_POOL_SIZE,
    report_period: str = DEFAULT_REPORT_PERIOD,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config, pool_size=pool_size))
    return wire(MySQLAttendanceRepository(conn), conn=conn, report_period=report_period)

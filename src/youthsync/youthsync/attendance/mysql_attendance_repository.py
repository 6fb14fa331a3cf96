from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, date, status)
                VALUES(%s,%s,%s)
                """,
                (int(record.student_id), record.date, record.status),
            )

    def fetch_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT student_id, date, status FROM attendance")
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    student_id=int(r["student_id"]),
                    date=str(r["date"]),
                    status=str(r["status"]),
                )
                for r in rows
            ]

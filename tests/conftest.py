from __future__ import annotations

import os

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.youthsync.youthsync.attendance.model import AttendanceRecord
from src.youthsync.youthsync.container import wire
from src.youthsync.youthsync.core.exceptions import StoreError
from src.youthsync.youthsync.main import create_app


class InMemoryAttendance:
    def __init__(self, records=None):
        self._rows: list[AttendanceRecord] = list(records or [])

    def insert(self, record: AttendanceRecord) -> None:
        self._rows.append(record)

    def fetch_all(self):
        return list(self._rows)


class BrokenAttendance:
    def insert(self, record: AttendanceRecord) -> None:
        raise StoreError("database is locked")

    def fetch_all(self):
        raise StoreError("database is locked")


@pytest.fixture
def demo_records():
    return [
        AttendanceRecord(student_id=1, date="2024-01-10", status="Present"),
        AttendanceRecord(student_id=2, date="2024-01-10", status="Absent"),
        AttendanceRecord(student_id=1, date="2024-01-17", status="Present"),
    ]


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def app(attendance_repo):
    return create_app(container=wire(attendance_repo))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def broken_client():
    return create_app(container=wire(BrokenAttendance())).test_client()

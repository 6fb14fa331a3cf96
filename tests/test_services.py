from __future__ import annotations

import pytest

from src.youthsync.youthsync.attendance.model import AttendanceRecord
from src.youthsync.youthsync.attendance.service import AttendanceService
from src.youthsync.youthsync.core.exceptions import DateParseError, ValidationError


def test_record_inserts_and_fetch_returns_equal_record(attendance_repo):
    svc = AttendanceService(attendance_repo)

    created = svc.record({"student_id": 1, "date": "2024-01-10", "status": "Present"})

    assert created == AttendanceRecord(student_id=1, date="2024-01-10", status="Present")
    assert list(svc.list_all()) == [created]


def test_duplicates_are_kept(attendance_repo):
    svc = AttendanceService(attendance_repo)
    payload = {"student_id": 3, "date": "2024-02-01", "status": "Absent"}

    svc.record(payload)
    svc.record(payload)

    assert len(svc.list_all()) == 2


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {"date": "2024-01-10", "status": "Present"},
        {"student_id": "1", "date": "2024-01-10", "status": "Present"},
        {"student_id": True, "date": "2024-01-10", "status": "Present"},
        {"student_id": 1, "status": "Present"},
        {"student_id": 1, "date": "2024-01-10"},
        {"student_id": 1, "date": "2024-01-10", "status": "Late"},
    ],
)
def test_record_rejects_invalid_payload(attendance_repo, payload):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(ValidationError):
        svc.record(payload)
    assert attendance_repo.fetch_all() == []


def test_record_rejects_impossible_date(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(DateParseError):
        svc.record({"student_id": 1, "date": "2024-13-40", "status": "Present"})


def test_record_stores_zero_padded_date(attendance_repo):
    svc = AttendanceService(attendance_repo)

    created = svc.record({"student_id": 5, "date": "2024-1-5", "status": "Absent"})

    assert created.date == "2024-01-05"
    assert attendance_repo.fetch_all()[0].date == "2024-01-05"

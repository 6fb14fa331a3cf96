from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's presence/absence entry for one calendar date.

    ``date`` stays the raw ``YYYY-MM-DD`` string and ``status`` the raw stored
    string; reports decide how to treat values that don't parse or match.
    """

    student_id: int
    date: str
    status: str

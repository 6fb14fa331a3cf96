from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def insert(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def fetch_all(self) -> Sequence[AttendanceRecord]:
        """All stored records, in the order the store returns them."""

        raise NotImplementedError

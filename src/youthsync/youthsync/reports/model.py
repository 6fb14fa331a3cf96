from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PeriodSummary:
    """Per-period attendance counts.

    Mutable while a report is being built; never persisted.
    """

    period_key: str
    present_count: int = 0
    absent_count: int = 0

    def to_dict(self, *, key_field: str) -> dict:
        return {
            key_field: self.period_key,
            "present_count": self.present_count,
            "absent_count": self.absent_count,
        }

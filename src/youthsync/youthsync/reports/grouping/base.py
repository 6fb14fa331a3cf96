from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class GroupingStrategy(ABC):
    """Strategy Pattern: map a calendar date to its report period key."""

    #: Name of the period key field in serialized summaries.
    key_field: str = "period"

    @abstractmethod
    def period_key(self, day: date) -> str:
        raise NotImplementedError

from __future__ import annotations

from typing import Sequence

from ..model import StudentRecord
from .base import RosterSortStrategy


class AttendanceDescendingStrategy(RosterSortStrategy):
    """Highest attendance first; ties keep their pre-sort order."""

    def sort(self, records: Sequence[StudentRecord], *, days_in_month: int) -> list[StudentRecord]:
        return sorted(records, key=lambda r: r.attendance_percentage(days_in_month), reverse=True)

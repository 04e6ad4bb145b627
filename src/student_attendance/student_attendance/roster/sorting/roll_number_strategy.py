from __future__ import annotations

from typing import Sequence

from ..model import StudentRecord
from .base import RosterSortStrategy


class RollNumberAscendingStrategy(RosterSortStrategy):
    def sort(self, records: Sequence[StudentRecord], *, days_in_month: int) -> list[StudentRecord]:
        return sorted(records, key=lambda r: r.roll_number)

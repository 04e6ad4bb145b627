from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import SortOrder
from .sorting.attendance_strategy import AttendanceDescendingStrategy
from .sorting.base import RosterSortStrategy
from .sorting.name_strategy import NameAscendingStrategy
from .sorting.roll_number_strategy import RollNumberAscendingStrategy


@dataclass
class RosterSortStrategyFactory:
    """Factory Pattern: choose the sort strategy for a requested order."""

    def for_order(self, order: SortOrder) -> RosterSortStrategy:
        if order == SortOrder.ATTENDANCE_DESC:
            return AttendanceDescendingStrategy()
        if order == SortOrder.NAME_ASC:
            return NameAscendingStrategy()
        if order == SortOrder.ROLL_NUMBER_ASC:
            return RollNumberAscendingStrategy()
        raise ValueError(f"Unsupported sort order: {order!r}")

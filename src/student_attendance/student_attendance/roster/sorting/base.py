from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..model import StudentRecord


class RosterSortStrategy(ABC):
    """Strategy Pattern: encapsulate how the roster is ordered.

    Implementations must be stable: records that compare equal keep their
    current relative order.
    """

    @abstractmethod
    def sort(self, records: Sequence[StudentRecord], *, days_in_month: int) -> list[StudentRecord]:
        raise NotImplementedError

from __future__ import annotations

import copy
from typing import Optional

import pytest

from student_attendance.core.exceptions import PersistenceUnavailableError
from student_attendance.roster.model import RosterSnapshot
from student_attendance.roster.service import RosterService


class InMemoryRosterRepository:
    def __init__(self, snapshot: Optional[RosterSnapshot] = None):
        self._snapshot = snapshot
        self.saves = 0

    def load(self) -> RosterSnapshot:
        if self._snapshot is None:
            raise PersistenceUnavailableError("nothing stored")
        return copy.deepcopy(self._snapshot)

    def save(self, snapshot: RosterSnapshot) -> None:
        self._snapshot = copy.deepcopy(snapshot)
        self.saves += 1

    @property
    def stored(self) -> Optional[RosterSnapshot]:
        return self._snapshot


@pytest.fixture()
def repo() -> InMemoryRosterRepository:
    return InMemoryRosterRepository()


@pytest.fixture()
def roster(repo) -> RosterService:
    return RosterService(repo)


@pytest.fixture()
def class_roster(roster) -> RosterService:
    """Amit 27/30, Bina 21/30, Chen 0/30 in April."""
    roster.set_month(4)
    for roll_number, name, present in [(1, "Amit", 27), (2, "Bina", 21), (3, "Chen", 0)]:
        roster.add_record(roll_number, name)
        for day in range(1, present + 1):
            roster.mark_attendance(roll_number, day, True)
    return roster

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_DATA_FILE, MAX_STUDENTS
from .reports.service import RosterReportService
from .roster.binary_repository import BinaryFileRosterRepository
from .roster.factory import RosterSortStrategyFactory
from .roster.service import RosterService


@dataclass(frozen=True)
class Container:
    repository: BinaryFileRosterRepository

    roster: RosterService
    report_service: RosterReportService


def build_container(*, settings: object) -> Container:
    data_file = str(getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE))
    raw_capacity = getattr(settings, "MAX_STUDENTS", MAX_STUDENTS)
    capacity: Optional[int] = int(raw_capacity) if raw_capacity is not None else None

    repository = BinaryFileRosterRepository(data_file)
    roster = RosterService(
        repository,
        capacity=capacity,
        sort_factory=RosterSortStrategyFactory(),
    )
    report_service = RosterReportService(roster)

    return Container(
        repository=repository,
        roster=roster,
        report_service=report_service,
    )

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import MAX_DAYS
from ..core.enums import Remark


def _empty_attendance() -> list[bool]:
    return [False] * MAX_DAYS


@dataclass
class StudentRecord:
    """Domain entity: one student and their attendance for the month.

    Note: Mutable on purpose, the roster updates records in place. Do not build
    these outside ``RosterService`` (or its repository) so uniqueness holds.
    """

    roll_number: int
    name: str
    attendance: list[bool] = field(default_factory=_empty_attendance)
    remark: Remark = Remark.NONE

    def is_present(self, index: int) -> bool:
        if 0 <= index < MAX_DAYS:
            return self.attendance[index]
        return False

    def set_attendance(self, index: int, present: bool) -> None:
        # Out-of-range indices are ignored, not rejected.
        if 0 <= index < MAX_DAYS:
            self.attendance[index] = bool(present)

    def present_days(self, total_days: int) -> int:
        return sum(1 for present in self.attendance[: max(min(total_days, MAX_DAYS), 0)] if present)

    def attendance_percentage(self, total_days: int) -> float:
        if total_days <= 0:
            return 0.0
        return self.present_days(total_days) / total_days * 100.0


@dataclass(frozen=True)
class DayAttendanceRow:
    roll_number: int
    name: str
    present: bool


@dataclass(frozen=True)
class DayAttendanceReport:
    """Read-model: every student's status on one day plus totals."""

    day: int
    rows: list[DayAttendanceRow]
    present_count: int
    absent_count: int
    present_percentage: float
    absent_percentage: float


@dataclass(frozen=True)
class DayStatus:
    day: int
    present: bool


@dataclass(frozen=True)
class StudentAttendanceView:
    """Read-model: one student's status for each day of the current month."""

    roll_number: int
    name: str
    days: list[DayStatus]
    present_days: int
    percentage: float


@dataclass(frozen=True)
class ExtremeAttendance:
    highest: StudentRecord
    highest_percentage: float
    lowest: StudentRecord
    lowest_percentage: float


@dataclass(frozen=True)
class RosterSnapshot:
    """Everything the repository persists."""

    records: list[StudentRecord]
    current_month: int
    days_in_month: int

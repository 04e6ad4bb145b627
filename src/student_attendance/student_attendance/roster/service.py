from __future__ import annotations

import logging
from typing import Optional, Union

from ..common.datetime_utils import days_in_month
from ..common.validators import (
    require_day,
    require_month,
    require_positive_roll_number,
    require_valid_name,
)
from ..core.constants import DEFAULT_DAYS_IN_MONTH, DEFAULT_MONTH, MAX_STUDENTS
from ..core.enums import Remark, SortOrder, ThresholdMode
from ..core.exceptions import (
    CapacityExceededError,
    DuplicateKeyError,
    EmptyStoreError,
    InvalidNameError,
    InvalidRemarkError,
    NotFoundError,
    PersistenceUnavailableError,
    ValidationError,
)
from .factory import RosterSortStrategyFactory
from .model import (
    DayAttendanceReport,
    DayAttendanceRow,
    DayStatus,
    ExtremeAttendance,
    RosterSnapshot,
    StudentAttendanceView,
    StudentRecord,
)
from .repository import RosterRepository

logger = logging.getLogger(__name__)

RemarkInput = Union[int, str, Remark]


class RosterService:
    """The roster store: one month of attendance for a bounded set of students.

    Every operation checks all of its preconditions before touching state, so a
    failed call never leaves a partial change behind. Nothing here prompts or
    prints; failures are raised as ``DomainError`` subclasses.
    """

    def __init__(
        self,
        repository: RosterRepository,
        *,
        capacity: Optional[int] = MAX_STUDENTS,
        sort_factory: RosterSortStrategyFactory | None = None,
    ):
        self._repository = repository
        self._capacity = capacity
        self._sort_factory = sort_factory or RosterSortStrategyFactory()
        self._records: list[StudentRecord] = []
        self._current_month = DEFAULT_MONTH
        self._days_in_month = DEFAULT_DAYS_IN_MONTH

    # ----- state -------------------------------------------------------

    @property
    def current_month(self) -> int:
        return self._current_month

    @property
    def days_in_month(self) -> int:
        return self._days_in_month

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def __len__(self) -> int:
        return len(self._records)

    def total_students(self) -> int:
        return len(self._records)

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._records) >= self._capacity

    def _index_of(self, roll_number: int) -> Optional[int]:
        for i, r in enumerate(self._records):
            if r.roll_number == roll_number:
                return i
        return None

    def _require(self, roll_number: int) -> StudentRecord:
        i = self._index_of(roll_number)
        if i is None:
            raise NotFoundError(f"Student with roll number {roll_number} not found")
        return self._records[i]

    def _percentage(self, record: StudentRecord) -> float:
        return record.attendance_percentage(self._days_in_month)

    # ----- mutation ----------------------------------------------------

    def add_record(self, roll_number: int, name: str) -> StudentRecord:
        if self.is_full():
            raise CapacityExceededError(f"Maximum number of students ({self._capacity}) reached")
        require_positive_roll_number(roll_number)
        if self._index_of(roll_number) is not None:
            raise DuplicateKeyError(f"Roll number {roll_number} already exists")
        name = require_valid_name(name)

        record = StudentRecord(roll_number=roll_number, name=name)
        self._records.append(record)
        logger.debug("Added student %s (%s)", roll_number, name)
        return record

    def mark_attendance(self, roll_number: int, day: int, present: bool) -> StudentRecord:
        require_day(day, self._days_in_month)
        record = self._require(roll_number)
        record.set_attendance(day - 1, present)
        logger.debug("Marked %s day %s as %s", roll_number, day, "present" if present else "absent")
        return record

    def update_name(self, roll_number: int, new_name: str) -> StudentRecord:
        record = self._require(roll_number)
        record.name = require_valid_name(new_name)
        return record

    def update_roll_number(self, roll_number: int, new_roll_number: int) -> StudentRecord:
        record = self._require(roll_number)
        require_positive_roll_number(new_roll_number)
        other = self._index_of(new_roll_number)
        if other is not None and self._records[other] is not record:
            raise DuplicateKeyError(f"Roll number {new_roll_number} already exists")
        record.roll_number = new_roll_number
        logger.debug("Roll number %s changed to %s", roll_number, new_roll_number)
        return record

    def update_remark(self, roll_number: int, remark: RemarkInput) -> StudentRecord:
        record = self._require(roll_number)
        record.remark = self._to_remark(remark)
        return record

    @staticmethod
    def _to_remark(value: RemarkInput) -> Remark:
        if isinstance(value, bool):
            raise InvalidRemarkError(f"Invalid remark {value!r}")
        if isinstance(value, int):
            try:
                return Remark.from_selector(value)
            except KeyError:
                raise InvalidRemarkError(f"Invalid remark choice {value}: pick 1-4") from None
        try:
            remark = Remark(value)
        except ValueError:
            raise InvalidRemarkError(f"Invalid remark {value!r}") from None
        if remark == Remark.NONE:
            raise InvalidRemarkError("Remark must be Poor, Average, Good or Excellent")
        return remark

    def delete_record(self, roll_number: int) -> StudentRecord:
        i = self._index_of(roll_number)
        if i is None:
            raise NotFoundError(f"Student with roll number {roll_number} not found")
        # list.pop shifts the tail left; survivors keep their order.
        record = self._records.pop(i)
        logger.debug("Deleted student %s", roll_number)
        return record

    def set_month(self, month: int) -> int:
        """Switch the month; attendance flags are kept, only the visible day range changes."""
        require_month(month)
        self._current_month = month
        self._days_in_month = days_in_month(month)
        return self._days_in_month

    # ----- queries -----------------------------------------------------

    def find_by_roll_number(self, roll_number: int) -> StudentRecord:
        return self._require(roll_number)

    def list_all(self) -> list[StudentRecord]:
        return list(self._records)

    def student_attendance(self, roll_number: int) -> StudentAttendanceView:
        record = self._require(roll_number)
        days = [DayStatus(day=d + 1, present=record.is_present(d)) for d in range(self._days_in_month)]
        return StudentAttendanceView(
            roll_number=record.roll_number,
            name=record.name,
            days=days,
            present_days=record.present_days(self._days_in_month),
            percentage=self._percentage(record),
        )

    def attendance_for_day(self, day: int) -> DayAttendanceReport:
        require_day(day, self._days_in_month)
        rows = [DayAttendanceRow(r.roll_number, r.name, r.is_present(day - 1)) for r in self._records]
        total = len(rows)
        present = sum(1 for row in rows if row.present)

        if total == 0:
            present_pct = absent_pct = 0.0
        else:
            present_pct = present / total * 100.0
            absent_pct = 100.0 - present_pct

        return DayAttendanceReport(
            day=day,
            rows=rows,
            present_count=present,
            absent_count=total - present,
            present_percentage=present_pct,
            absent_percentage=absent_pct,
        )

    def average_attendance(self) -> float:
        if not self._records:
            raise EmptyStoreError("No students to calculate average attendance")
        return sum(self._percentage(r) for r in self._records) / len(self._records)

    def extreme_attendance(self) -> ExtremeAttendance:
        if not self._records:
            raise EmptyStoreError("No students to evaluate")

        highest = lowest = self._records[0]
        highest_pct = lowest_pct = self._percentage(highest)
        for r in self._records[1:]:
            pct = self._percentage(r)
            # Strict comparisons: the first record reaching an extreme keeps it.
            if pct > highest_pct:
                highest, highest_pct = r, pct
            if pct < lowest_pct:
                lowest, lowest_pct = r, pct

        return ExtremeAttendance(
            highest=highest,
            highest_percentage=highest_pct,
            lowest=lowest,
            lowest_percentage=lowest_pct,
        )

    def filter_by_threshold(self, threshold: float, mode: ThresholdMode) -> list[StudentRecord]:
        try:
            mode = ThresholdMode(mode)
        except ValueError:
            raise ValidationError(f"Invalid threshold mode {mode!r}: use ABOVE or BELOW") from None
        if mode == ThresholdMode.ABOVE:
            return [r for r in self._records if self._percentage(r) > threshold]
        return [r for r in self._records if self._percentage(r) < threshold]

    def filter_by_range(self, minimum: float, maximum: float) -> list[StudentRecord]:
        return [r for r in self._records if minimum <= self._percentage(r) <= maximum]

    # ----- ordering ----------------------------------------------------

    def sort(self, order: SortOrder) -> list[StudentRecord]:
        """Reorder the roster in place; later queries see the new order."""
        strategy = self._sort_factory.for_order(SortOrder(order))
        self._records = strategy.sort(self._records, days_in_month=self._days_in_month)
        return self.list_all()

    def sort_by_attendance_descending(self) -> list[StudentRecord]:
        return self.sort(SortOrder.ATTENDANCE_DESC)

    def sort_by_name_ascending(self) -> list[StudentRecord]:
        return self.sort(SortOrder.NAME_ASC)

    def sort_by_roll_number_ascending(self) -> list[StudentRecord]:
        return self.sort(SortOrder.ROLL_NUMBER_ASC)

    # ----- persistence -------------------------------------------------

    def snapshot(self) -> RosterSnapshot:
        return RosterSnapshot(
            records=list(self._records),
            current_month=self._current_month,
            days_in_month=self._days_in_month,
        )

    def load(self) -> bool:
        """Replace state with the stored roster.

        Returns False (and starts empty with default month settings) when
        nothing usable is stored; this is never fatal.
        """
        try:
            snapshot = self._repository.load()
            self._check_snapshot(snapshot)
        except PersistenceUnavailableError as e:
            logger.warning("Starting with an empty roster: %s", e)
            self._reset()
            return False

        self._records = list(snapshot.records)
        self._current_month = snapshot.current_month
        self._days_in_month = snapshot.days_in_month
        return True

    def _check_snapshot(self, snapshot: RosterSnapshot) -> None:
        if self._capacity is not None and len(snapshot.records) > self._capacity:
            raise PersistenceUnavailableError(
                f"Stored roster has {len(snapshot.records)} students, capacity is {self._capacity}"
            )
        seen: set[int] = set()
        for r in snapshot.records:
            if r.roll_number <= 0 or r.roll_number in seen:
                raise PersistenceUnavailableError(f"Stored roster has an invalid roll number {r.roll_number}")
            seen.add(r.roll_number)
            try:
                require_valid_name(r.name)
            except InvalidNameError as e:
                raise PersistenceUnavailableError(f"Stored roster has an invalid name {r.name!r}") from e

    def _reset(self) -> None:
        self._records = []
        self._current_month = DEFAULT_MONTH
        self._days_in_month = DEFAULT_DAYS_IN_MONTH

    def save(self) -> None:
        self._repository.save(self.snapshot())

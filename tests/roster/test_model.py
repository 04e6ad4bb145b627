import pytest

from student_attendance.core.constants import MAX_DAYS
from student_attendance.core.enums import Remark
from student_attendance.roster.model import StudentRecord


def test_new_record_is_absent_everywhere():
    r = StudentRecord(roll_number=1, name="Amit")
    assert len(r.attendance) == MAX_DAYS
    assert not any(r.attendance)
    assert r.remark == Remark.NONE


@pytest.mark.parametrize("days", [28, 30, 31])
def test_percentage_for_every_present_count(days):
    for k in range(days + 1):
        r = StudentRecord(roll_number=1, name="Amit")
        for i in range(k):
            r.set_attendance(i, True)
        assert r.attendance_percentage(days) == pytest.approx(k / days * 100, abs=1e-9)


def test_percentage_is_zero_without_days():
    r = StudentRecord(roll_number=1, name="Amit")
    r.set_attendance(0, True)
    assert r.attendance_percentage(0) == 0.0
    assert r.attendance_percentage(-5) == 0.0


def test_out_of_range_writes_are_ignored():
    r = StudentRecord(roll_number=1, name="Amit")
    r.set_attendance(MAX_DAYS, True)
    r.set_attendance(-1, True)
    assert not any(r.attendance)
    assert r.is_present(MAX_DAYS) is False


def test_days_beyond_total_are_not_counted():
    r = StudentRecord(roll_number=1, name="Amit")
    r.set_attendance(29, True)
    assert r.present_days(28) == 0
    assert r.present_days(30) == 1

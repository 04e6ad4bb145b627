from __future__ import annotations

from ..core.constants import MAX_ROLL_NUMBER
from ..core.exceptions import (
    InvalidDayError,
    InvalidMonthError,
    InvalidNameError,
    InvalidRollNumberError,
)


def require_valid_name(value: str) -> str:
    """Letters and spaces only; surrounding whitespace is stripped."""
    if not value or not value.strip():
        raise InvalidNameError("Name must not be empty")
    name = value.strip()
    if not all(c.isalpha() or c == " " for c in name):
        raise InvalidNameError(f"Invalid name {value!r}: use letters and spaces only")
    return name


def require_positive_roll_number(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= MAX_ROLL_NUMBER:
        raise InvalidRollNumberError(
            f"Invalid roll number {value!r}: must be between 1 and {MAX_ROLL_NUMBER}"
        )
    return value


def require_day(day: int, days_in_month: int) -> int:
    if isinstance(day, bool) or not isinstance(day, int) or day < 1 or day > days_in_month:
        raise InvalidDayError(f"Invalid day {day!r}: enter a day between 1 and {days_in_month}")
    return day


def require_month(month: int) -> int:
    if isinstance(month, bool) or not isinstance(month, int) or month < 1 or month > 12:
        raise InvalidMonthError(f"Invalid month {month!r}: enter a number between 1 and 12")
    return month

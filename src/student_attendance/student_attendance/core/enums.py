from __future__ import annotations

from enum import Enum


class Remark(str, Enum):
    """Qualitative remark attached to a student."""

    NONE = ""
    POOR = "Poor"
    AVERAGE = "Average"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @classmethod
    def from_selector(cls, selector: int) -> "Remark":
        """Map the 1..4 menu selector to a remark; raises KeyError otherwise."""
        return _REMARK_SELECTORS[selector]


_REMARK_SELECTORS = {
    1: Remark.POOR,
    2: Remark.AVERAGE,
    3: Remark.GOOD,
    4: Remark.EXCELLENT,
}


class ThresholdMode(str, Enum):
    ABOVE = "ABOVE"
    BELOW = "BELOW"


class SortOrder(str, Enum):
    ATTENDANCE_DESC = "ATTENDANCE_DESC"
    NAME_ASC = "NAME_ASC"
    ROLL_NUMBER_ASC = "ROLL_NUMBER_ASC"


class AttendanceBand(str, Enum):
    """Band used to colour the roster listing."""

    GOOD = "GOOD"
    WARNING = "WARNING"
    POOR = "POOR"

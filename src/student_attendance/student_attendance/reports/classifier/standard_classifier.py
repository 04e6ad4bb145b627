from __future__ import annotations

from ...core.constants import GOOD_ATTENDANCE_PERCENT, WARNING_ATTENDANCE_PERCENT
from ...core.enums import AttendanceBand
from .base import AttendanceBandClassifier


class StandardBandClassifier(AttendanceBandClassifier):
    """Standard rule: >= 85 good, >= 75 warning, anything lower poor."""

    def __init__(self, *, good: float = GOOD_ATTENDANCE_PERCENT, warning: float = WARNING_ATTENDANCE_PERCENT):
        self._good = float(good)
        self._warning = float(warning)

    def classify(self, percentage: float) -> AttendanceBand:
        if percentage >= self._good:
            return AttendanceBand.GOOD
        if percentage >= self._warning:
            return AttendanceBand.WARNING
        return AttendanceBand.POOR

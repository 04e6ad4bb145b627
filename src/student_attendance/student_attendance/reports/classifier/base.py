from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import AttendanceBand


class AttendanceBandClassifier(ABC):
    """Classifier interface (Strategy Pattern for report bands)."""

    @abstractmethod
    def classify(self, percentage: float) -> AttendanceBand:
        raise NotImplementedError

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import IO, Optional, Union

import pandas as pd

from ..roster.service import RosterService
from .classifier.base import AttendanceBandClassifier
from .classifier.standard_classifier import StandardBandClassifier

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["roll_number", "name", "attendance_percent", "remark", "band"]

ExportTarget = Union[str, os.PathLike, IO[bytes]]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


class RosterReportService:
    """Roster listing (percentage + colour band per student) and its file exports."""

    def __init__(self, roster: RosterService, *, classifier: Optional[AttendanceBandClassifier] = None):
        self._roster = roster
        self._classifier = classifier or StandardBandClassifier()

    def build_roster_report(self) -> ReportData:
        days = self._roster.days_in_month
        out_rows: list[dict] = []

        for r in self._roster.list_all():
            pct = r.attendance_percentage(days)
            out_rows.append(
                {
                    "roll_number": r.roll_number,
                    "name": r.name,
                    "attendance_percent": round(pct, 2),
                    "remark": r.remark.value,
                    "band": self._classifier.classify(pct).value,
                }
            )

        average = self._roster.average_attendance() if out_rows else None
        summary = {
            "month": self._roster.current_month,
            "days_in_month": days,
            "total_students": len(out_rows),
            "average_percent": round(average, 2) if average is not None else None,
        }
        return ReportData(rows=out_rows, summary=summary)

    def to_dataframe(self, data: ReportData | None = None) -> pd.DataFrame:
        data = data or self.build_roster_report()
        return pd.DataFrame(data.rows, columns=REPORT_COLUMNS)

    def export_csv(self, target: ExportTarget) -> ReportData:
        data = self.build_roster_report()
        self.to_dataframe(data).to_csv(target, index=False, encoding="utf-8-sig")
        logger.info("Exported %d roster rows to CSV", len(data.rows))
        return data

    def export_excel(self, target: ExportTarget) -> ReportData:
        data = self.build_roster_report()
        with pd.ExcelWriter(target, engine="openpyxl") as writer:
            self.to_dataframe(data).to_excel(writer, index=False, sheet_name="Roster")
            pd.DataFrame([data.summary]).to_excel(writer, index=False, sheet_name="Summary")
        logger.info("Exported %d roster rows to Excel", len(data.rows))
        return data

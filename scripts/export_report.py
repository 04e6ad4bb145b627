"""Export the roster listing as CSV and Excel into REPORT_DIR."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "student_attendance"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from student_attendance.common.datetime_utils import timestamp_slug
from student_attendance.main import create_roster, load_settings


def main() -> None:
    settings = load_settings()
    container = create_roster()

    out_dir = Path(settings.REPORT_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)
    stem = f"attendance_month{container.roster.current_month:02d}_{timestamp_slug()}"

    report = container.report_service
    data = report.export_csv(out_dir / f"{stem}.csv")
    report.export_excel(out_dir / f"{stem}.xlsx")

    print(f"OK: Exported {len(data.rows)} students -> {out_dir / stem}.csv/.xlsx")


if __name__ == "__main__":
    main()

"""Seed a small demo roster (overwrites the current data file)."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "student_attendance"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from student_attendance.core.exceptions import DuplicateKeyError
from student_attendance.main import create_roster

# roll number, name, days present (1..n), remark selector
DEMO_STUDENTS = [
    (1, "Amit", 27, 4),
    (2, "Bina", 21, 2),
    (3, "Chen", 0, 1),
]


def main() -> None:
    container = create_roster()
    roster = container.roster
    roster.set_month(4)

    for roll_number, name, present_days, remark in DEMO_STUDENTS:
        try:
            roster.add_record(roll_number, name)
        except DuplicateKeyError:
            roster.update_name(roll_number, name)
        for day in range(1, roster.days_in_month + 1):
            roster.mark_attendance(roll_number, day, day <= present_days)
        roster.update_remark(roll_number, remark)

    roster.save()
    print(f"OK: Seeded {len(DEMO_STUDENTS)} students -> {container.repository.path}")


if __name__ == "__main__":
    main()

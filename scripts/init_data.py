"""Create an empty roster data file (month 5, no students) if none exists."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "student_attendance"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from student_attendance.main import create_roster


def main() -> None:
    container = create_roster()
    path = container.repository.path
    if path.exists():
        print(f"OK: Data file already present -> {path} (students={len(container.roster)})")
        return

    container.roster.save()
    print(f"OK: Created empty data file -> {path}")


if __name__ == "__main__":
    main()

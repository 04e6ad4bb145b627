"""Back up the roster data file.

Note: Copies the current data file into BACKUP_DIR with a timestamp suffix.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "student_attendance"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from student_attendance.common.datetime_utils import timestamp_slug
from student_attendance.main import load_settings


def main() -> None:
    settings = load_settings()
    data_file = Path(settings.DATA_FILE)
    if not data_file.exists():
        raise SystemExit(f"No data file at {data_file}; nothing to back up.")

    out_dir = Path(settings.BACKUP_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"{data_file.stem}_{timestamp_slug()}{data_file.suffix}"

    shutil.copy2(data_file, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()

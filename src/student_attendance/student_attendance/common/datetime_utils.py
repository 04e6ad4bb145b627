from __future__ import annotations

from datetime import datetime

from .validators import require_month

_THIRTY_DAY_MONTHS = {4, 6, 9, 11}


def days_in_month(month: int) -> int:
    """Month length ignoring leap years (February is always 28)."""
    require_month(month)
    if month == 2:
        return 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def timestamp_slug(now: datetime | None = None) -> str:
    return (now or now_local()).strftime("%Y%m%d_%H%M%S")

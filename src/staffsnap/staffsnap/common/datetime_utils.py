from __future__ import annotations

import calendar
from datetime import datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_name(month: int) -> str:
    return calendar.month_name[month]

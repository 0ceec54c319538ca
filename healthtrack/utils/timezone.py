from datetime import date, datetime, timedelta, timezone as dt_timezone
from typing import List


def utc_now() -> datetime:
    """Current time as UTC-naive, the form stored in DateTime columns."""
    return datetime.now(dt_timezone.utc).replace(tzinfo=None)


def window_start(end_date: date, days: int) -> date:
    """First date of the ``days``-long window ending at ``end_date``, never before ``date.min``."""
    span = min(days - 1, (end_date - date.min).days)
    return end_date - timedelta(days=span)


def date_window(end_date: date, days: int) -> List[date]:
    """The calendar dates of the window ending at ``end_date``, oldest first.

    Windows that would reach past ``date.min`` are cut short there.
    """
    start = window_start(end_date, days)
    return [start + timedelta(days=offset) for offset in range((end_date - start).days + 1)]

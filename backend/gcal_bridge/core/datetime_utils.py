"""
Datetime utilities for timezone-aware operations
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_rfc3339(dt: datetime) -> str:
    """Format a datetime for the Calendar API, treating naive values as UTC"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()


def default_window(
    time_min: Optional[datetime],
    time_max: Optional[datetime],
    days: int,
    now: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """Fill in missing bounds: now for the lower one, now + days for the upper one"""
    now = now or utc_now()
    return (
        time_min if time_min is not None else now,
        time_max if time_max is not None else now + timedelta(days=days),
    )

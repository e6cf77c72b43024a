"""Timezone helpers.

"Today" is decided in the configured local timezone; stored timestamps are
UTC.
"""

from datetime import datetime, time, timezone
from zoneinfo import ZoneInfo

from fitness_tracker.config.settings import settings


def get_timezone(name: str | None = None) -> ZoneInfo:
    """Get the configured timezone, or the named one.

    Returns:
        ZoneInfo object, defaults to UTC if the name is invalid
    """
    try:
        return ZoneInfo(name or settings.timezone)
    except Exception:
        return ZoneInfo("UTC")


def now_local(tz: ZoneInfo | None = None) -> datetime:
    """Current datetime in the local timezone."""
    return datetime.now(tz or get_timezone())


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC, treating naive values as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def start_of_day(moment: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Local midnight of the day containing `moment`, as an aware datetime."""
    local = to_utc(moment).astimezone(tz or get_timezone())
    return datetime.combine(local.date(), time.min, tzinfo=local.tzinfo)

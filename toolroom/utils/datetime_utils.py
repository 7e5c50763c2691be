"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in toolroom.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- now_iso(): Returns ISO 8601 string
- parse_iso(): Safely parse ISO 8601 string to datetime
- to_iso(): Convert datetime object to ISO 8601 string
- to_utc(): Convert to UTC, reading naive values as application time
- as_aware(): Attach a timezone to datetimes read back from MongoDB
- format_relative(): Short "5m ago" style label used by history lists
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional

from toolroom.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    settings = get_settings()
    tz_str = settings.timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def now_iso() -> str:
    """
    Get current datetime as ISO 8601 string with application-configured timezone.

    Returns:
        ISO 8601 formatted string (e.g., "2025-10-24T10:30:00+02:00" or "2025-10-24T10:30:00Z")
    """
    return to_iso(now())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-10-24T10:30:00Z")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str:
        return None

    try:
        dt = datetime.fromisoformat(dt_str.replace("Z", "+00:00"))
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    return dt


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())

    # Format with timezone offset, or 'Z' if UTC
    if dt.utcoffset() is not None and dt.utcoffset().total_seconds() == 0:
        return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a datetime to UTC.
    If datetime is naive, assumes application timezone (as parse_iso and to_iso do).
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    return dt.astimezone(dt_timezone.utc)


def as_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime read from the database.

    MongoDB hands back naive datetimes that are really UTC; those are tagged
    as UTC and converted to the application timezone.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(_get_app_timezone())


def format_relative(dt: datetime, reference: Optional[datetime] = None) -> str:
    """
    Render a timestamp the way history lists show it.

    Under a minute is "Just now", then minutes, hours and days ("3d ago")
    up to a week; anything older is shown as day/month/year.
    """
    dt = as_aware(dt)
    reference = as_aware(reference) if reference else now()
    delta = reference - dt
    seconds = delta.total_seconds()

    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{int(seconds // 60)}m ago"
    if delta.days < 1:
        return f"{int(seconds // 3600)}h ago"
    if delta.days < 7:
        return f"{delta.days}d ago"
    return f"{dt.day}/{dt.month}/{dt.year}"

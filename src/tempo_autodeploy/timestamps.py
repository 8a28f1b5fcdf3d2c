"""Timestamp helpers for tempo-autodeploy."""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_utc(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Datetime to format (defaults to now); naive values are taken as UTC

    Returns:
        String such as "2025-01-31T12:00:00.000Z"
    """
    if moment is None:
        moment = utc_now()
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")

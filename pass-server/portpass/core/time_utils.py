from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Server-side 'now' in UTC (aware)."""
    return datetime.now(timezone.utc)


def to_storage(dt: datetime) -> datetime:
    """
    Normalize a datetime for the database: UTC, tzinfo stripped.

    SQLite keeps no offset, so every column holds UTC-naive values and
    comparisons stay consistent. Naive input is interpreted as UTC.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage(dt: Optional[datetime]) -> Optional[datetime]:
    """Re-attach UTC to a value read back from the database."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def advance(previous: Optional[datetime]) -> datetime:
    """Current time, nudged forward so it is strictly after ``previous``."""
    now = utcnow()
    if previous is None:
        return now
    previous = from_storage(previous)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """
    Zone for report day boundaries. ``None`` means the host's local rules,
    which are applied per date by :func:`day_bounds`.
    """
    if name:
        return ZoneInfo(name)
    return None


def _local_midnight(day: date, tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        # naive astimezone() consults the system rules for that date
        return datetime.combine(day, time.min).astimezone()
    return datetime.combine(day, time.min, tzinfo=tz)


def day_bounds(day: date, tz: Optional[tzinfo] = None) -> tuple[datetime, datetime]:
    """
    UTC bounds ``[start, end)`` of the calendar day ``day`` in ``tz``.

    The end is the next local midnight, so the window is exactly one
    local day even across DST changes. Without ``tz`` the host's local
    zone is used.
    """
    start = _local_midnight(day, tz)
    end = _local_midnight(day + timedelta(days=1), tz)
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)

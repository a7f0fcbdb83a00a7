from __future__ import annotations

from datetime import date, datetime, timezone


def ensure_aware(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return dt


def to_iso(dt: datetime) -> str:
    ensure_aware(dt)
    # store as ISO 8601 with offset
    return dt.isoformat()


def from_iso(s: str) -> datetime:
    dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    # naive values in the store are UTC
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def date_only(value: date | datetime) -> date:
    """Strip the time part; comparisons are done on calendar days."""
    if isinstance(value, datetime):
        return value.date()
    return value


def from_epoch_ms(ms: float) -> datetime:
    return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)

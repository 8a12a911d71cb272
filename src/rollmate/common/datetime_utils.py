from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse a date or an ISO 8601 timestamp as sent by the JS client.

    A bare ``YYYY-MM-DD`` becomes local midnight. A trailing ``Z`` is accepted.
    """
    value = value.strip()
    if len(value) == 10:
        return datetime.combine(parse_iso_date(value), datetime.min.time())
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def local_day(value: datetime | date) -> date:
    """Calendar day of ``value`` on the local wall clock."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def same_calendar_day(a: datetime | date, b: datetime | date) -> bool:
    return local_day(a) == local_day(b)


def week_days(day: date) -> list[date]:
    """Sunday through Saturday of the week containing ``day``."""
    start = day - timedelta(days=(day.weekday() + 1) % 7)
    return [start + timedelta(days=i) for i in range(7)]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_local_naive(value: datetime | date) -> datetime:
    """Store timestamps as naive local time so they stay comparable."""
    if not isinstance(value, datetime):
        return datetime.combine(value, datetime.min.time())
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value

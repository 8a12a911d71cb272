from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from src.rollmate.common.datetime_utils import (
    local_day,
    parse_iso_datetime,
    same_calendar_day,
    to_local_naive,
    week_days,
)


def test_parse_iso_datetime_accepts_date_and_z_suffix():
    assert parse_iso_datetime("2024-01-10") == datetime(2024, 1, 10)

    parsed = parse_iso_datetime("2024-01-10T12:00:00.000Z")
    assert parsed.tzinfo is not None
    assert parsed.utcoffset() == timedelta(0)


def test_aware_values_move_to_local_wall_clock():
    stamp = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
    expected = stamp.astimezone().replace(tzinfo=None)

    assert to_local_naive(stamp) == expected
    assert to_local_naive(stamp).tzinfo is None
    assert local_day(stamp) == expected.date()
    assert same_calendar_day(stamp, expected)


def test_naive_values_are_kept():
    naive = datetime(2024, 1, 10, 23, 59)

    assert to_local_naive(naive) is naive
    assert to_local_naive(date(2024, 1, 10)) == datetime(2024, 1, 10)
    assert local_day(naive) == date(2024, 1, 10)


def test_offset_timestamps_compare_after_normalising():
    aware = to_local_naive(parse_iso_datetime("2024-01-20T23:59:00Z"))
    naive = to_local_naive(parse_iso_datetime("2024-01-25T10:00:00"))

    assert sorted([naive, aware]) == [aware, naive]


def test_week_runs_sunday_to_saturday():
    days = week_days(date(2024, 1, 7))

    assert days[0] == date(2024, 1, 7)
    assert days[-1] == date(2024, 1, 13)
    assert week_days(date(2024, 1, 13)) == days

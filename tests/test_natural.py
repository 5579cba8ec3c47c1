"""Tests for the human-friendly relative rendering."""

from __future__ import annotations

from datetime import UTC, datetime

from nldate.display.natural import to_natural_string


def _at(month: int, day: int, hour: int, minute: int = 0, year: int = 2025) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=UTC)


def test_same_day_past_shows_time_only(now: datetime) -> None:
    assert to_natural_string(_at(1, 15, 9), now=now) == "09:00"


def test_same_day_future_is_prefixed_with_today(now: datetime) -> None:
    assert to_natural_string(_at(1, 15, 13, 37), now=now) == "Today, 13:37"
    assert to_natural_string(_at(1, 15, 13, 37), include_time=False, now=now) == "Today"


def test_yesterday_and_tomorrow(now: datetime) -> None:
    assert to_natural_string(_at(1, 14, 18), now=now) == "Yesterday, 18:00"
    assert to_natural_string(_at(1, 16, 8), now=now) == "Tomorrow, 08:00"
    assert to_natural_string(_at(1, 16, 8), include_time=False, now=now) == "Tomorrow"


def test_within_a_week_shows_weekday(now: datetime) -> None:
    assert to_natural_string(_at(1, 20, 14, 30), now=now) == "Mon, 14:30"
    assert to_natural_string(_at(1, 8, 7), include_time=False, now=now) == "Wed"


def test_same_year_shows_month_and_day(now: datetime) -> None:
    assert to_natural_string(_at(3, 5, 10), now=now) == "Mar 05, 10:00"
    assert to_natural_string(_at(3, 5, 10), include_time=False, now=now) == "Mar 05"


def test_other_year_shows_iso_date(now: datetime) -> None:
    assert to_natural_string(_at(1, 5, 10, year=2024), now=now) == "2024-01-05, 10:00"
    assert to_natural_string(_at(1, 5, 10, year=2024), include_time=False, now=now) == "2024-01-05"


def test_offset_shifts_both_value_and_now(now: datetime) -> None:
    assert to_natural_string(_at(1, 15, 23, 30), 2, now=now) == "Tomorrow, 01:30"
    assert to_natural_string(_at(1, 15, 23, 30), -1, now=now) == "Today, 22:30"


def test_shift_past_max_year_falls_back_to_own_offset(now: datetime) -> None:
    value = datetime(9999, 12, 31, 23, 0, tzinfo=UTC)
    assert to_natural_string(value, 2, now=now) == "9999-12-31, 23:00"
    assert to_natural_string(value, 2, include_time=False, now=now) == "9999-12-31"

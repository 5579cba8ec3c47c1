"""Tests for the validated Timestamp model."""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from nldate.parsing.schema import Timestamp


def _fields(**overrides: int) -> dict[str, int]:
    base = {"year": 2025, "month": 1, "day": 15, "hour": 10, "minute": 0, "second": 0}
    base.update(overrides)
    return base


def test_valid_timestamp_to_datetime() -> None:
    value = Timestamp(**_fields(utc_offset_hours=-5)).to_datetime()
    assert value.isoformat() == "2025-01-15T10:00:00-05:00"
    assert value.utcoffset() == timedelta(hours=-5)


def test_offset_defaults_to_utc() -> None:
    assert Timestamp(**_fields()).to_datetime().utcoffset() == timedelta(0)


def test_leap_day_is_accepted() -> None:
    assert Timestamp(**_fields(year=2024, month=2, day=29)).day == 29


@pytest.mark.parametrize(
    "overrides",
    [
        {"month": 13},
        {"month": 0},
        {"day": 0},
        {"year": 2025, "month": 2, "day": 29},
        {"month": 4, "day": 31},
        {"hour": 24},
        {"minute": 60},
        {"second": -1},
        {"utc_offset_hours": 15},
        {"utc_offset_hours": -15},
        {"year": 0},
    ],
)
def test_out_of_range_fields_are_rejected(overrides: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        Timestamp(**_fields(**overrides))


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Timestamp(**_fields(), tz=1)  # type: ignore[call-arg]

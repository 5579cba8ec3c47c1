"""Validated timestamp model (Pydantic).

The rules parser accumulates loose integer fields; this model is the contract they must satisfy
before a `datetime` is produced. Anything that fails validation is treated as unparseable input.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nldate.parsing.rollover import days_in_month


class Timestamp(BaseModel):
    """A calendar date, a time of day and a fixed whole-hour UTC offset."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)
    utc_offset_hours: int = Field(default=0, ge=-14, le=14)

    @model_validator(mode="after")
    def validate_day_in_month(self) -> Timestamp:
        """Validate that `day` exists in the given month (e.g. no Feb 30)."""

        if self.day > days_in_month(self.year, self.month):
            raise ValueError(f"day {self.day} is out of range for {self.year}-{self.month:02d}")
        return self

    def to_datetime(self) -> datetime:
        """Return a timezone-aware `datetime` with a fixed offset."""

        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=timezone(timedelta(hours=self.utc_offset_hours)),
        )

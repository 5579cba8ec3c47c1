"""Rules-based date/time extraction (ordered cascade).

This parser is intentionally loose and deterministic:
    - every rule reads the same translated text and matches plain substrings or fixed regexes,
    - a matching rule unconditionally overwrites the fields it owns,
    - there is no arbitration: the order of `RULES` is the precedence (last match wins).

Substring matching produces known false positives ("at" inside "chat", " pm" anywhere in the text).
They are accepted behavior, not errors.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import ValidationError

from nldate.parsing.dictionaries import (
    MONTH_NAMES,
    ORDINAL_DAYS,
    RELATIVE_DAYS,
    TIME_OF_DAY,
    TIMEZONE_ABBREVIATIONS,
    find_weekday,
)
from nldate.parsing.rollover import roll_calendar
from nldate.parsing.schema import Timestamp


class DateParseError(ValueError):
    """Raised when text cannot be turned into a valid timestamp."""


@dataclass
class DateTimeFields:
    """Mutable accumulator filled in by the extraction rules.

    Fields may be out of calendar range while rules run; rollover and validation happen once at
    the end.
    """

    now: datetime
    year: int
    month: int
    day: int
    hour: int
    minute: int = 0
    second: int = 0
    utc_offset_hours: int = 0

    @classmethod
    def from_now(cls, now: datetime) -> DateTimeFields:
        """Start from the reference instant: today's date at the current UTC hour."""

        return cls(now=now, year=now.year, month=now.month, day=now.day, hour=now.hour)


Rule = Callable[[DateTimeFields, str], None]

_YEAR_RE = re.compile(r"\b\d{4}\b")
_DAY_RE = re.compile(r"\b\d{1,2}\b")
_NUMBER_RE = re.compile(r"(?<!\d)\d{1,2}(?!\d)")
_NTH_DAY_RE = re.compile(r"\b(?P<day>\d{1,2})(?:st|nd|rd|th)\b")
_TIME_RE = re.compile(r"\b(?P<h>\d{1,2}):(?P<m>\d{1,2})(?::(?P<s>\d{1,2}))?\b")
_GMT_RE = re.compile(r"gmt(?P<offset>[+-]\d{1,2})")
_UTC_RE = re.compile(r"utc(?P<offset>[+-]\d{1,2})")

_SLASH_DATE_RE = re.compile(r"\b(?P<m>\d{1,2})/(?P<d>\d{1,2})/(?P<y>\d{4})\b")
_SHORT_DOT_DATE_RE = re.compile(r"\b(?P<d>\d{1,2})\.(?P<m>\d{1,2})\b")
_DOT_DATE_RE = re.compile(r"\b(?P<d>\d{1,2})\.(?P<m>\d{1,2})\.(?P<y>\d{4})\b")
_REVERSE_DOT_DATE_RE = re.compile(r"\b(?P<y>\d{4})\.(?P<m>\d{1,2})\.(?P<d>\d{1,2})\b")
_HYPHENATED_DATE_RE = re.compile(r"\b(?P<y>\d{4})-(?P<m>\d{1,2})-(?P<d>\d{1,2})\b")
_REVERSE_HYPHENATED_DATE_RE = re.compile(r"\b(?P<d>\d{1,2})-(?P<m>\d{1,2})-(?P<y>\d{4})\b")

# Fixed precedence: a later pattern overwrites an earlier one (`D.M` is a prefix of `D.M.YYYY`).
STRUCTURED_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    _SLASH_DATE_RE,
    _SHORT_DOT_DATE_RE,
    _DOT_DATE_RE,
    _REVERSE_DOT_DATE_RE,
    _HYPHENATED_DATE_RE,
    _REVERSE_HYPHENATED_DATE_RE,
)


def _split_at(text: str) -> tuple[str, str | None]:
    """Split at the first raw "at" substring: `(before, after)`; `after` is None if absent."""

    idx = text.find("at")
    if idx == -1:
        return text, None
    return text[:idx], text[idx + 2:]


def _apply_year(fields: DateTimeFields, text: str) -> None:
    match = _YEAR_RE.search(text)
    if match:
        fields.year = int(match.group())


def _apply_at_clause(fields: DateTimeFields, text: str) -> None:
    """Read up to three numbers after "at" as hour, minute and second."""

    _, after = _split_at(text)
    if after is None:
        return

    numbers = [int(n) for n in _NUMBER_RE.findall(after)[:3]]
    if len(numbers) > 0:
        fields.hour = numbers[0]
    if len(numbers) > 1:
        fields.minute = numbers[1]
    if len(numbers) > 2:
        fields.second = numbers[2]


def _apply_day(fields: DateTimeFields, text: str) -> None:
    before, _ = _split_at(text)
    match = _DAY_RE.search(before)
    if match:
        fields.day = int(match.group())


def _apply_weekday(fields: DateTimeFields, text: str) -> None:
    target = find_weekday(text)
    if target is None:
        return

    day = fields.now.day + (target - fields.now.weekday())
    if "last" in text:
        day -= 7
    elif "next" in text:
        day += 7
    fields.day = day


def _apply_structured_dates(fields: DateTimeFields, text: str) -> None:
    for pattern in STRUCTURED_DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        parts = match.groupdict()
        fields.day = int(parts["d"])
        fields.month = int(parts["m"])
        if "y" in parts:
            fields.year = int(parts["y"])


def _apply_month_names(fields: DateTimeFields, text: str) -> None:
    for number, (name, abbreviation) in enumerate(MONTH_NAMES, start=1):
        if name in text or abbreviation in text:
            fields.month = number


def _apply_ordinal_day(fields: DateTimeFields, text: str) -> None:
    for literal, day in ORDINAL_DAYS.items():
        if literal in text:
            fields.day = day

    match = _NTH_DAY_RE.search(text)
    if match:
        fields.day = int(match.group("day"))


def _apply_relative_day(fields: DateTimeFields, text: str) -> None:
    for word, delta in RELATIVE_DAYS.items():
        if word in text:
            fields.day = fields.now.day + delta


def _apply_time_of_day(fields: DateTimeFields, text: str) -> None:
    for word, clock in TIME_OF_DAY.items():
        if word in text:
            fields.hour = clock.hour
            fields.minute = clock.minute
            fields.second = clock.second


def _apply_clock_time(fields: DateTimeFields, text: str) -> None:
    match = _TIME_RE.search(text)
    if not match:
        return

    fields.hour = int(match.group("h"))
    fields.minute = int(match.group("m"))
    if match.group("s") is not None:
        fields.second = int(match.group("s"))


def _apply_meridiem(fields: DateTimeFields, text: str) -> None:
    # Free substring search over the whole text, not tied to the extracted time.
    padded = f" {text} "
    if " am" in padded and fields.hour == 12:
        fields.hour = 0
    if " pm" in padded and fields.hour < 12:
        fields.hour += 12


def _apply_timezone(fields: DateTimeFields, text: str) -> None:
    padded = f" {text} "
    for abbreviation, offset in TIMEZONE_ABBREVIATIONS.items():
        if f" {abbreviation}" in padded:
            fields.utc_offset_hours = offset

    # Explicit numeric offsets win over abbreviations; "utc+2" also contains " utc".
    for pattern in (_GMT_RE, _UTC_RE):
        match = pattern.search(text)
        if match:
            fields.utc_offset_hours = int(match.group("offset"))


RULES: tuple[Rule, ...] = (
    _apply_year,
    _apply_at_clause,
    _apply_day,
    _apply_weekday,
    _apply_structured_dates,
    _apply_month_names,
    _apply_ordinal_day,
    _apply_relative_day,
    _apply_time_of_day,
    _apply_clock_time,
    _apply_meridiem,
    _apply_timezone,
)


def extract_fields(text: str, *, now: datetime) -> DateTimeFields:
    """Run every rule in `RULES` order over translated text and return the raw fields."""

    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    fields = DateTimeFields.from_now(now.astimezone(UTC))
    for rule in RULES:
        rule(fields, text)
    return fields


def parse_rules(text: str, *, now: datetime) -> datetime:
    """Parse translated text into an aware `datetime` using the rule cascade.

    Raises:
        DateParseError: If the accumulated fields do not form a valid timestamp after rollover.
    """

    fields = extract_fields(text, now=now)

    try:
        year, month, day = roll_calendar(fields.year, fields.month, fields.day)
        timestamp = Timestamp(
            year=year,
            month=month,
            day=day,
            hour=fields.hour,
            minute=fields.minute,
            second=fields.second,
            utc_offset_hours=fields.utc_offset_hours,
        )
    except (ValidationError, ValueError) as exc:
        raise DateParseError(f"invalid date/time in {text!r}: {exc}") from exc

    return timestamp.to_datetime()

"""Keyword dictionaries for the rules-based date parser.

These mappings are used by the translator and the extraction rules and should remain small and
deterministic. Declaration order is significant everywhere: it is the evaluation order of the
matching rule.
"""

from __future__ import annotations

from dataclasses import dataclass

# Polish (already transliterated) -> canonical English. Keys are matched as whole words.
KEYWORD_TABLE: dict[str, str] = {
    "styczen": "january",
    "luty": "february",
    "marzec": "march",
    "kwiecien": "april",
    "maj": "may",
    "czerwiec": "june",
    "lipiec": "july",
    "sierpien": "august",
    "wrzesien": "september",
    "pazdziernik": "october",
    "listopad": "november",
    "grudzien": "december",
    "poniedzialek": "monday",
    "wtorek": "tuesday",
    "sroda": "wednesday",
    "srode": "wednesday",
    "czwartek": "thursday",
    "piatek": "friday",
    "sobota": "saturday",
    "sobote": "saturday",
    "niedziela": "sunday",
    "niedziele": "sunday",
    "wczoraj": "yesterday",
    "dzisiaj": "today",
    "dzis": "today",
    "jutro": "tomorrow",
    "rano": "morning",
    "poludnie": "noon",
    "poludnia": "noon",
    "poludniu": "noon",
    "wieczor": "evening",
    "noc": "night",
    "polnoc": "midnight",
    "kolo": "at",
    "okolo": "at",
    "w okolicy": "at",
    "przed": " at ",
    "o": " at ",
    "po": " at",
    "teraz": "now",
    "ostatni": "last",
    "ostatnia": "last",
    "poprzedni": "last",
    "poprzednia": "last",
    "nastepny": "next",
    "nastepna": "next",
    "przyszly": "next",
    "przyszla": "next",
}

WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
    "weekend": 5,
}

# (full name, abbreviation) in calendar order; index + 1 is the month number.
MONTH_NAMES: tuple[tuple[str, str], ...] = (
    ("january", "jan"),
    ("february", "feb"),
    ("march", "mar"),
    ("april", "apr"),
    ("may", "may"),
    ("june", "jun"),
    ("july", "jul"),
    ("august", "aug"),
    ("september", "sep"),
    ("october", "oct"),
    ("november", "nov"),
    ("december", "dec"),
)

ORDINAL_DAYS: dict[str, int] = {
    "1st": 1,
    "2nd": 2,
    "3rd": 3,
}

# Offset in days from the reference day.
RELATIVE_DAYS: dict[str, int] = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
}


@dataclass(frozen=True)
class TimeOfDay:
    """Default clock time implied by a time-of-day keyword."""

    hour: int
    minute: int = 0
    second: int = 0


# "afternoon" contains "noon" and "midnight" contains "night": the longer word must come later.
TIME_OF_DAY: dict[str, TimeOfDay] = {
    "morning": TimeOfDay(8),
    "noon": TimeOfDay(12),
    "afternoon": TimeOfDay(14),
    "evening": TimeOfDay(18),
    "night": TimeOfDay(22),
    "midnight": TimeOfDay(0),
}

# Fixed whole-hour offsets; no DST handling.
TIMEZONE_ABBREVIATIONS: dict[str, int] = {
    "utc": 0,
    "gmt": 0,
    "bst": 1,
    "cet": 1,
    "cest": 2,
    "eet": 2,
    "eest": 3,
    "msk": 3,
    "pst": -8,
    "pdt": -7,
    "mst": -7,
    "mdt": -6,
    "cst": -6,
    "cdt": -5,
    "est": -5,
    "edt": -4,
    "akst": -9,
    "akdt": -8,
    "hst": -10,
    "jst": 9,
    "kst": 9,
    "aest": 10,
    "aedt": 11,
    "nzst": 12,
    "nzdt": 13,
}


def find_weekday(text: str) -> int | None:
    """Return the ordinal of the first weekday name (in table order) contained in the text."""

    for name, ordinal in WEEKDAYS.items():
        if name in text:
            return ordinal
    return None

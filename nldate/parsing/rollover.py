"""Calendar rollover for day-of-month values produced by relative arithmetic.

Relative rules ("tomorrow", "next friday") add days to the reference day-of-month without touching
the month, so the accumulated day can exceed the month length or drop below 1. Rollover moves the
excess into the following (or preceding) months.
"""

from __future__ import annotations

import calendar


def days_in_month(year: int, month: int) -> int:
    """Number of days in `month` of `year` (Gregorian, leap years included)."""

    return calendar.monthrange(year, month)[1]


def roll_calendar(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Roll an out-of-range day into a valid `(year, month, day)` triple.

    Examples:
        `(2025, 1, 45)` -> `(2025, 2, 14)`
        `(2025, 12, 32)` -> `(2026, 1, 1)`
        `(2025, 3, 0)` -> `(2025, 2, 28)`

    Raises:
        ValueError: If `month` is not within 1..12 (rollover only fixes days).
    """

    if not 1 <= month <= 12:
        raise ValueError(f"month must be within 1..12, got {month}")

    while day > days_in_month(year, month):
        day -= days_in_month(year, month)
        month += 1
        if month > 12:
            month = 1
            year += 1

    while day < 1:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day += days_in_month(year, month)

    return year, month, day

"""Human-friendly, relative rendering of timestamps ("Today, 13:37", "Yesterday", "Mon, 09:00").

Output is always English with 24-hour time. The `offset` is a whole number of hours from UTC used
for both the value and the reference "now"; daylight saving time is not modelled.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

_WEEKDAY_ABBR: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_ABBR: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def _clock(value: datetime) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def to_natural_string(
        value: datetime,
        offset: int = 0,
        include_time: bool = True,
        *,
        now: datetime | None = None,
) -> str:
    """Format `value` relative to `now` (defaults to the current UTC time).

    Rules (first match wins):
        - same day: `HH:MM` (`Today, HH:MM` if still in the future), or `Today` without time;
        - previous/next day: `Yesterday[, HH:MM]` / `Tomorrow[, HH:MM]`;
        - within 7 days either way: `Mon[, HH:MM]`;
        - same year: `Jan 05[, HH:MM]`;
        - otherwise: `2024-01-05[, HH:MM]`.
    """

    zone = timezone(timedelta(hours=offset))
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)

    try:
        target = value.astimezone(zone)
    except OverflowError:
        # Shifted past year 1..9999: render the value in its own offset.
        label = value.date().isoformat()
        return f"{label}, {_clock(value)}" if include_time else label
    current = now.astimezone(zone)
    days = (target.date() - current.date()).days

    if days == 0:
        if not include_time:
            return "Today"
        return f"Today, {_clock(target)}" if target > current else _clock(target)

    if days == -1:
        label = "Yesterday"
    elif days == 1:
        label = "Tomorrow"
    elif -7 <= days <= 7:
        label = _WEEKDAY_ABBR[target.weekday()]
    elif target.year == current.year:
        label = f"{_MONTH_ABBR[target.month - 1]} {target.day:02d}"
    else:
        label = target.date().isoformat()

    return f"{label}, {_clock(target)}" if include_time else label

"""Date parser orchestration (fast paths first; rules-based cascade as the general case)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal

from nldate.parsing.rules import DateParseError, parse_rules
from nldate.parsing.translate import translate

logger = logging.getLogger(__name__)

ParseSource = Literal["iso", "now", "rules"]


@dataclass(frozen=True)
class ParseResult:
    """Parsed timestamp plus information about which path produced it."""

    value: datetime
    source: ParseSource


def _parse_iso_timestamp(text: str) -> datetime | None:
    """Parse a complete ISO-8601 / RFC-3339 timestamp carrying an explicit offset."""

    try:
        # Translated text is lower-cased; restore the "T" separator and the "Z" suffix.
        dt = datetime.fromisoformat(text.upper())
    except ValueError:
        return None
    if dt.tzinfo is None:
        return None
    return dt


def parse_with_source(text: str, *, now: datetime | None = None) -> ParseResult:
    """Parse text into an aware `datetime`.

    Strategy:
        1) Translate the text into the canonical English vocabulary.
        2) If the whole text is an offset-aware ISO timestamp, return it as is.
        3) If the text is exactly "now", return the reference instant unchanged.
        4) Otherwise run the rules cascade on top of the reference instant.

    `now` defaults to the current UTC time; a naive `now` is treated as UTC.

    Raises:
        DateParseError: On empty input or when the extracted fields are not a valid timestamp.
    """

    if not (text or "").strip():
        raise DateParseError("empty input")

    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    translated = translate(text)

    iso_value = _parse_iso_timestamp(translated)
    if iso_value is not None:
        result = ParseResult(value=iso_value, source="iso")
    elif translated == "now":
        result = ParseResult(value=now, source="now")
    else:
        result = ParseResult(value=parse_rules(translated, now=now), source="rules")

    logger.debug("parsed source=%s text=%r value=%s", result.source, translated, result.value.isoformat())
    return result


def parse(text: str, *, now: datetime | None = None) -> datetime:
    """Parse text into an aware `datetime` (convenience wrapper)."""

    return parse_with_source(text, now=now).value

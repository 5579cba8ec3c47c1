"""Parse natural-language date/time expressions into timezone-aware datetimes."""

from nldate.display.natural import to_natural_string
from nldate.parsing.parser import ParseResult, parse, parse_with_source
from nldate.parsing.rules import DateParseError

__all__ = [
    "DateParseError",
    "ParseResult",
    "parse",
    "parse_with_source",
    "to_natural_string",
]

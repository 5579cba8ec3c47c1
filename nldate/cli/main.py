"""Command line entry point: `nldate "next monday at 14:30"`."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from nldate.app import create_app
from nldate.config.logging import configure_logging
from nldate.config.settings import load_settings
from nldate.display.natural import to_natural_string
from nldate.parsing.parser import parse_with_source
from nldate.parsing.rules import DateParseError

logger = logging.getLogger(__name__)

EXIT_PARSE_ERROR = 2


def _offset_hours(value: str) -> int:
    """Parse a whole-hour UTC offset within -14..14 (same bounds as NLDATE_DISPLAY_OFFSET)."""

    try:
        hours = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid offset: {value!r}") from exc
    if not -14 <= hours <= 14:
        raise argparse.ArgumentTypeError(f"offset must be within -14..14, got {hours}")
    return hours


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nldate",
        description="Parse a natural-language date/time expression into an ISO-8601 timestamp.",
    )
    parser.add_argument("text", nargs="+", help="expression to parse, e.g. 'jutro o 9 wieczor'")
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="reference instant (ISO-8601); overrides NLDATE_NOW",
    )
    parser.add_argument(
        "--natural",
        action="store_true",
        help="also print a human-friendly relative rendering",
    )
    parser.add_argument(
        "--offset",
        type=_offset_hours,
        default=None,
        help="whole-hour UTC offset for --natural; overrides NLDATE_DISPLAY_OFFSET",
    )
    parser.add_argument(
        "--date-only",
        action="store_true",
        help="omit the time of day from the --natural rendering",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse the expression given on the command line and print the result."""

    args = _build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)

    text = " ".join(args.text)
    now = args.now or app.reference_now()

    try:
        result = parse_with_source(text, now=now)
    except DateParseError as exc:
        logger.info("unsupported reason=%s", exc)
        print(f"nldate: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    print(result.value.isoformat())
    if args.natural:
        offset = settings.display_offset_hours if args.offset is None else args.offset
        print(to_natural_string(result.value, offset, not args.date_only, now=now))
    return 0


if __name__ == "__main__":
    sys.exit(main())

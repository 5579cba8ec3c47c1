"""Keyword translation into the canonical English vocabulary."""

from __future__ import annotations

import re

from nldate.parsing.dictionaries import KEYWORD_TABLE
from nldate.parsing.normalize import normalize_text


def _build_keyword_pattern(keys: list[str]) -> re.Pattern[str]:
    # Declaration order is kept: at a given position the first listed key wins, not the longest.
    return re.compile(r"\b(" + "|".join(re.escape(k) for k in keys) + r")\b")


_KEYWORD_RE = _build_keyword_pattern(list(KEYWORD_TABLE))


def translate(raw: str) -> str:
    """Normalize raw text and rewrite known foreign keywords to canonical English.

    Keys are replaced as whole words in a single pass, so a replacement is never translated again.
    Replacement values may carry padding spaces (`"o"` -> `" at "`).
    """

    value = normalize_text(raw)
    return _KEYWORD_RE.sub(lambda m: KEYWORD_TABLE[m.group(1)], value)

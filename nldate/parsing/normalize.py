"""Text normalization for deterministic date parsing."""

from __future__ import annotations

# Latin letters with diacritics mapped to their closest ASCII letter. Upper-case entries are kept
# so `to_latin` is usable on raw (not yet lower-cased) text.
_TRANSLITERATION: dict[str, str] = {
    "À": "A", "Á": "A", "Â": "A", "Ä": "A", "Å": "A", "Æ": "A", "Ā": "A", "Ă": "A", "Ą": "A",
    "à": "a", "á": "a", "â": "a", "ä": "a", "å": "a", "æ": "a", "ā": "a", "ă": "a", "ą": "a",
    "Ç": "C", "Ć": "C", "Č": "C",
    "ç": "c", "ć": "c", "č": "c",
    "Ď": "D", "Đ": "D",
    "ď": "d", "đ": "d",
    "È": "E", "É": "E", "Ê": "E", "Ë": "E", "Ē": "E", "Ė": "E", "Ę": "E", "Ě": "E",
    "è": "e", "é": "e", "ê": "e", "ë": "e", "ē": "e", "ė": "e", "ę": "e", "ě": "e",
    "Ğ": "G", "Ģ": "G",
    "ğ": "g", "ģ": "g",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I", "Ī": "I", "Į": "I",
    "ì": "i", "í": "i", "î": "i", "ï": "i", "ī": "i", "į": "i", "ı": "i",
    "Ķ": "K",
    "ķ": "k",
    "Ĺ": "L", "Ļ": "L", "Ľ": "L", "Ł": "L",
    "ĺ": "l", "ļ": "l", "ľ": "l", "ł": "l",
    "Ñ": "N", "Ń": "N", "Ņ": "N", "Ň": "N",
    "ñ": "n", "ń": "n", "ņ": "n", "ň": "n",
    "Ò": "O", "Ó": "O", "Ô": "O", "Ö": "O", "Ø": "O", "Ő": "O",
    "ò": "o", "ó": "o", "ô": "o", "ö": "o", "ø": "o", "ő": "o",
    "Ŕ": "R", "Ř": "R",
    "ŕ": "r", "ř": "r",
    "Ś": "S", "Ş": "S", "Š": "S", "Ș": "S",
    "ś": "s", "ş": "s", "š": "s", "ș": "s", "ß": "s",
    "Ť": "T", "Ț": "T",
    "ť": "t", "ț": "t",
    "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U", "Ū": "U", "Ů": "U", "Ű": "U", "Ų": "U",
    "ù": "u", "ú": "u", "û": "u", "ü": "u", "ū": "u", "ů": "u", "ű": "u", "ų": "u",
    "Ź": "Z", "Ż": "Z", "Ž": "Z",
    "ź": "z", "ż": "z", "ž": "z",
}


def to_latin(char: str) -> str:
    """Map a single diacritic letter to ASCII; any other character is returned unchanged."""

    return _TRANSLITERATION.get(char, char)


def normalize_text(text: str) -> str:
    """Normalize user text for rules-based date parsing.

    Normalization is intentionally conservative:
        - Strip surrounding whitespace.
        - Lowercase.
        - Transliterate diacritics character by character (`ż` -> `z`, `ó` -> `o`).

    Punctuation is preserved: dates (`31.01.2025`) and times (`14:30`) depend on it.
    """

    value = (text or "").strip().lower()
    return "".join(to_latin(char) for char in value)

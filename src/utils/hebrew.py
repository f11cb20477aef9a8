"""Hebrew character classes and text normalization.

All functions are total: they accept any string (``None`` is treated as
empty) and return a new string without raising.
"""

from __future__ import annotations

import re

# Cantillation marks (te'amim)
CANTILLATION = "\u0591-\u05AF"

# Vowel points, dagesh/mappiq, meteg, rafe, shin/sin dots, upper/lower dots, qamats qatan
VOWEL_POINTS = "\u05B0-\u05BD\u05BF-\u05C2\u05C4\u05C5\u05C7"

DAGESH = "\u05BC"

HEBREW_BLOCK = "\u0590-\u05FF"

FINAL_FORMS: dict[str, str] = {
    "ך": "כ",
    "ם": "מ",
    "ן": "נ",
    "ף": "פ",
    "ץ": "צ",
}

# Search normalization strips every mark in this class
DIACRITICALS = re.compile(f"[{CANTILLATION}{VOWEL_POINTS}]")

# Only marks left over from a removed prefix letter
LEADING_DIACRITICALS = re.compile(f"^[{CANTILLATION}{VOWEL_POINTS}]+")

_HEBREW_CHAR = re.compile(f"[{HEBREW_BLOCK}]")

_FINAL_FORMS_TABLE = str.maketrans(FINAL_FORMS)


def strip_diacriticals(text: str | None, keep_dagesh: bool = False) -> str:
    """Remove cantillation marks and vowel points.

    Args:
        text: Vocalized Hebrew (any other characters pass through).
        keep_dagesh: Keep U+05BC and strip everything else in the class.

    Returns:
        The consonantal text with letter order preserved.
    """
    if not text:
        return ""
    if keep_dagesh:
        return DIACRITICALS.sub(lambda m: m.group() if m.group() == DAGESH else "", text)
    return DIACRITICALS.sub("", text)


def strip_leading_diacriticals(text: str | None) -> str:
    """Remove the run of marks at the very start of *text*.

    Marks attached to later letters are kept.
    """
    if not text:
        return ""
    return LEADING_DIACRITICALS.sub("", text, count=1)


def fold_final_forms(text: str | None) -> str:
    """Replace the five final letters with their regular counterparts."""
    if not text:
        return ""
    return text.translate(_FINAL_FORMS_TABLE)


def normalize_hebrew(text: str | None) -> str:
    """Normalize for search: strip all diacriticals, then fold final forms.

    ``אֶ֫רֶץ`` and ``ארצ`` normalize to the same string.
    """
    if not text or not text.strip():
        return ""
    return fold_final_forms(strip_diacriticals(text))


def contains_hebrew(text: str | None) -> bool:
    """Whether any character falls in the Hebrew Unicode block."""
    if not text:
        return False
    return _HEBREW_CHAR.search(text) is not None

"""Hebrew alphabetical collation: consonant order with vowel tie-breaking."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from utils.logging_config import get_logger

logger = get_logger("core.sort_key")

T = TypeVar("T")

# Final forms keep their own rank, right after the base letter
HEBREW_ALPHABET: tuple[str, ...] = (
    "א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט", "י",
    "כ", "ך", "ל", "מ", "ם", "נ", "ן", "ס", "ע", "פ",
    "ף", "צ", "ץ", "ק", "ר", "ש", "ת",
)

_CONSONANT_RANK: dict[str, int] = {ch: i for i, ch in enumerate(HEBREW_ALPHABET)}

# Vowel marks ranked a < e < i < o < u, then shin dot, sin dot, dagesh
HEBREW_VOWELS: dict[str, int] = {
    "\u05B7": 1,   # patach
    "\u05B8": 2,   # qamats
    "\u05B6": 3,   # segol
    "\u05B5": 4,   # tsere
    "\u05B4": 5,   # hireq
    "\u05B9": 6,   # holam
    "\u05BB": 7,   # qubuts
    "\u05C1": 8,   # shin dot
    "\u05C2": 9,   # sin dot
    "\u05BC": 10,  # dagesh
}

BLANK_KEY: list[Any] = [math.inf]
NON_HEBREW_KEY: list[Any] = [(math.inf, 0)]


def hebrew_sort_key(text: str | None) -> list[Any]:
    """Build the collation key for *text*.

    Each consonant contributes ``(consonant_rank, vowel_rank)``; a ranked
    mark overwrites the vowel slot of the latest consonant. Other
    characters are ignored.

    Returns:
        ``[inf]`` for blank input, ``[(inf, 0)]`` when no consonant was
        found, otherwise the list of pairs.
    """
    if text is None or not text.strip():
        return list(BLANK_KEY)

    result: list[list[int]] = []
    for ch in text:
        rank = _CONSONANT_RANK.get(ch)
        if rank is not None:
            result.append([rank, 0])
        elif ch in HEBREW_VOWELS:
            if result:
                result[-1][1] = HEBREW_VOWELS[ch]

    if not result:
        return list(NON_HEBREW_KEY)
    return [(consonant, vowel) for consonant, vowel in result]


def comparable_sort_key(text: str | None) -> tuple[tuple[float, ...], ...]:
    """Lift :func:`hebrew_sort_key` so every element is a tuple.

    The blank sentinel ``inf`` compares as ``(inf,)``, which keeps it after
    every Hebrew key.
    """
    return tuple(
        element if isinstance(element, tuple) else (element,)
        for element in hebrew_sort_key(text)
    )


def sorted_alphabetically(
    items: Iterable[T],
    key: Callable[[T], str | None] | None = None,
) -> list[T]:
    """Sort *items* in Hebrew alphabetical order.

    The sort is stable, so items with equal keys keep their relative order.

    Args:
        items: Entries (or plain strings when *key* is omitted and the items
            have no ``representation``).
        key: Extracts the text to collate. Defaults to the item's
            ``representation`` attribute, or the item itself.

    Returns:
        A new sorted list.
    """
    if key is None:
        key = _default_text
    result = sorted(items, key=lambda item: comparable_sort_key(key(item)))
    logger.debug("Sorted %d items alphabetically", len(result))
    return result


def _default_text(item: Any) -> str | None:
    if isinstance(item, str):
        return item
    return getattr(item, "representation", None)

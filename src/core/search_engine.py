"""Filtering of lexicon entries for the dictionary listing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from core.sort_key import sorted_alphabetically
from models.lexeme import LexicalEntry
from utils.hebrew import normalize_hebrew
from utils.logging_config import get_logger

logger = get_logger("core.search_engine")


@dataclass(slots=True)
class SearchCriteria:
    """Filters for the dictionary listing.

    Attributes:
        query: Hebrew text (matched without diacriticals or final letters)
            or gloss text (case-insensitive substring).
        pos_name: Part-of-speech category name (None for any).
        binyan: Required ``binyan`` attribute.
        number: Required ``number`` attribute.
        lesson: Lesson number the word was introduced in.
        lesson_or_less: Match lessons up to and including ``lesson``.
        show_all: If False, keep dictionary entries only.
    """

    query: str = ""
    pos_name: str | None = None
    binyan: str = ""
    number: str = ""
    lesson: str = ""
    lesson_or_less: bool = False
    show_all: bool = True


class SearchEngine:
    """Filter entries and return them in Hebrew alphabetical order."""

    def search(
        self, entries: Iterable[LexicalEntry], criteria: SearchCriteria
    ) -> list[LexicalEntry]:
        """Apply *criteria* to *entries*.

        Args:
            entries: Snapshot of the lexicon to filter.
            criteria: Filter criteria.

        Returns:
            Matching entries, alphabetically sorted.
        """
        matches = list(entries)
        total = len(matches)

        if criteria.query.strip():
            matches = self._filter_by_query(matches, criteria.query)

        if criteria.pos_name:
            matches = [e for e in matches if e.pos_name == criteria.pos_name]

        if criteria.binyan:
            matches = [e for e in matches if e.attributes.get("binyan") == criteria.binyan]

        if criteria.number:
            matches = [e for e in matches if e.attributes.get("number") == criteria.number]

        if criteria.lesson:
            matches = self._filter_by_lesson(matches, criteria.lesson, criteria.lesson_or_less)

        if not criteria.show_all:
            matches = [e for e in matches if e.is_dictionary_entry]

        result = sorted_alphabetically(matches)
        logger.debug("Search returned %d/%d entries", len(result), total)
        return result

    @staticmethod
    def _filter_by_query(entries: list[LexicalEntry], query: str) -> list[LexicalEntry]:
        """Match the normalized representation or any gloss."""
        query = query.strip()
        normalized_query = normalize_hebrew(query)
        query_lower = query.lower()

        def matches(entry: LexicalEntry) -> bool:
            if normalized_query and normalized_query in normalize_hebrew(entry.representation):
                return True
            return any(query_lower in gloss.lower() for gloss in entry.glosses)

        return [e for e in entries if matches(e)]

    @staticmethod
    def _filter_by_lesson(
        entries: list[LexicalEntry], lesson: str, or_less: bool
    ) -> list[LexicalEntry]:
        """Exact lesson match, or numeric ``<=`` when *or_less* is set."""
        if not or_less:
            return [e for e in entries if e.attributes.get("lesson_introduced") == lesson]

        try:
            limit = int(lesson)
        except ValueError:
            logger.warning("Invalid lesson number: %s", lesson)
            return []

        result = []
        for entry in entries:
            try:
                introduced = int(entry.attributes.get("lesson_introduced", ""))
            except ValueError:
                continue
            if introduced <= limit:
                result.append(entry)
        return result

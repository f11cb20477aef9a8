"""Tiered resolution of a vocalized Hebrew query to a single stored entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from data.repository import WordRepository
from models.lexeme import LexicalEntry
from utils.hebrew import fold_final_forms, strip_leading_diacriticals
from utils.logging_config import get_logger

logger = get_logger("core.lookup_resolver")

# One-letter prefixes: the, and, in, like, to, from, that
PREFIXES: tuple[str, ...] = ("ה", "ו", "ב", "כ", "ל", "מ", "ש")

# Two rows are enough to tell a unique match from an ambiguous one
_MATCH_PROBE_LIMIT = 2


@dataclass(frozen=True, slots=True)
class Found:
    """A query resolved to exactly one entry.

    Attributes:
        entry: The matched entry.
        matched_representation: The query variant that matched.
        original_query: The query as received.
    """

    entry: LexicalEntry
    matched_representation: str
    original_query: str

    found = True

    @property
    def gloss(self) -> str:
        return ", ".join(self.entry.glosses)

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": True,
            "original": self.original_query,
            "hebrew": self.entry.representation,
            "gloss": self.gloss,
            "transliteration": "",
            "pos": self.entry.pos_name,
        }


@dataclass(frozen=True, slots=True)
class NotFound:
    """No tier produced an unambiguous match."""

    original_query: str

    found = False

    def to_dict(self) -> dict[str, Any]:
        return {"found": False, "word": self.original_query}


LookupResult = Found | NotFound


class LookupResolver:
    """Resolve raw queries against a :class:`WordRepository`.

    Tiers, stopping at the first that yields exactly one entry:

    1. exact representation match;
    2. the same after folding final letters;
    3. after removing one prefix letter and the marks that belonged to it,
       exact and then folded.

    Several matches at a tier count as no match. Only one prefix letter is
    ever removed.
    """

    def __init__(self, repository: WordRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> WordRepository:
        return self._repository

    def lookup(self, query: str) -> LookupResult:
        """Resolve *query* to at most one entry.

        Args:
            query: Vocalized Hebrew, possibly prefixed or with final letters.

        Returns:
            :class:`Found` or :class:`NotFound`; never raises on bad input.
        """
        query = query or ""

        match = self._find_unique(query)
        if match is not None:
            logger.debug("Exact match for %r", query)
            return Found(match, query, query)

        folded = fold_final_forms(query)
        if folded != query:
            match = self._find_unique(folded)
            if match is not None:
                logger.debug("Final-form match for %r -> %r", query, folded)
                return Found(match, folded, query)

        result = self._try_prefix_removal(query)
        if result is not None:
            match, remainder = result
            logger.debug("Prefix match for %r -> %r", query, remainder)
            return Found(match, remainder, query)

        logger.info("No dictionary match for %r", query)
        return NotFound(query)

    def lookup_payload(self, query: str) -> dict[str, Any]:
        """Lookup result as the JSON object exposed to API clients."""
        return self.lookup(query).to_dict()

    # --- Internal ---

    def _find_unique(self, text: str) -> LexicalEntry | None:
        if not text:
            return None
        matches = self._repository.find_by_exact_representation(
            text, limit=_MATCH_PROBE_LIMIT
        )
        if len(matches) > 1:
            logger.debug("Ambiguous match for %r, rejecting", text)
            return None
        return matches[0] if matches else None

    def _try_prefix_removal(self, query: str) -> tuple[LexicalEntry, str] | None:
        for prefix in PREFIXES:
            if not query.startswith(prefix):
                continue

            remainder = strip_leading_diacriticals(query[len(prefix):])

            match = self._find_unique(remainder)
            if match is not None:
                return match, remainder

            folded = fold_final_forms(remainder)
            if folded != remainder:
                match = self._find_unique(folded)
                if match is not None:
                    return match, folded
        return None

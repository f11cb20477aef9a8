"""Parser for dictionary import content (JSON or ``---``-separated text)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from utils.constants import IMPORT_SECTION_SEPARATOR
from utils.exceptions import ImportParseError
from utils.hebrew import contains_hebrew
from utils.logging_config import get_logger

logger = get_logger("core.import_parser")

# Top-level JSON fields copied into the attributes when present
_METADATA_FIELDS = ("pos_type", "lesson_introduced", "function")


@dataclass(slots=True)
class ImportRecord:
    """One parsed word ready to be turned into a lexicon entry.

    Attributes:
        representation: Vocalized Hebrew word.
        glosses: Gloss strings, at least one.
        pos: Part-of-speech category name (JSON format only).
        attributes: Grammatical metadata merged from ``pos_detail`` and
            the top-level metadata fields.
        lexeme_of_hint: Representation of the entry this word is a form of.
    """

    representation: str
    glosses: list[str]
    pos: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    lexeme_of_hint: str | None = None


class ImportParser:
    """Parse import content in either supported format.

    JSON content (starting with ``[`` or ``{``) holds one object or a list of
    objects with ``word``, ``glosses`` and ``pos``. Text content holds
    sections separated by ``---``: the first line is the word, the remaining
    lines are its glosses.
    """

    def parse(self, content: str | None) -> list[ImportRecord]:
        """Parse *content* into import records.

        Args:
            content: Raw file content.

        Returns:
            Parsed records; empty for blank content.

        Raises:
            ImportParseError: On malformed JSON or a section/entry missing
                required data.
        """
        if not content or not content.strip():
            return []

        if self._is_json(content):
            records = self._parse_json(content)
        else:
            records = self._parse_text(content)
        logger.info("Parsed %d import records", len(records))
        return records

    @staticmethod
    def _is_json(content: str) -> bool:
        return content.strip().startswith(("[", "{"))

    # --- JSON ---

    def _parse_json(self, content: str) -> list[ImportRecord]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ImportParseError(f"Invalid JSON format: {exc}") from exc

        if not isinstance(data, list):
            data = [data]
        return [self._parse_json_entry(entry) for entry in data]

    def _parse_json_entry(self, entry: Any) -> ImportRecord:
        if not isinstance(entry, dict):
            raise ImportParseError("Each JSON entry must be an object")
        self._validate_json_entry(entry)

        pos_detail = entry.get("pos_detail") or {}
        if not isinstance(pos_detail, dict):
            raise ImportParseError("'pos_detail' must be an object")
        attributes = {str(k): str(v) for k, v in pos_detail.items() if v is not None}
        for name in _METADATA_FIELDS:
            if _present(entry.get(name)):
                attributes[name] = str(entry[name])

        hint = entry.get("lexeme_of_hint")
        return ImportRecord(
            representation=str(entry["word"]).strip(),
            glosses=[str(g) for g in entry["glosses"]],
            pos=str(entry["pos"]).strip(),
            attributes=attributes,
            lexeme_of_hint=str(hint).strip() if _present(hint) else None,
        )

    @staticmethod
    def _validate_json_entry(entry: dict[str, Any]) -> None:
        if not _present(entry.get("word")):
            raise ImportParseError("Each entry must have a 'word' field")

        glosses = entry.get("glosses")
        if not isinstance(glosses, list) or not glosses:
            raise ImportParseError("Each entry must have a non-empty 'glosses' array")

        if not _present(entry.get("pos")):
            raise ImportParseError("Each entry must have a 'pos' (part of speech) field")

    # --- Text ---

    def _parse_text(self, content: str) -> list[ImportRecord]:
        sections = [s.strip() for s in content.split(IMPORT_SECTION_SEPARATOR)]
        return [self._parse_section(s) for s in sections if s]

    @staticmethod
    def _parse_section(section: str) -> ImportRecord:
        lines = [line.strip() for line in section.splitlines() if line.strip()]
        word, glosses = lines[0], lines[1:]

        if not contains_hebrew(word):
            raise ImportParseError("Each section must start with a Hebrew word")
        if not glosses:
            raise ImportParseError(f"Word '{word}' must have at least one gloss")

        return ImportRecord(representation=word, glosses=glosses)


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True

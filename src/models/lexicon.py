"""Lexicon aggregate root holding metadata and an arena of entries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from data.repository import WordRepository
from models.lexeme import LexicalEntry


@dataclass(slots=True)
class LexiconMetadata:
    """Metadata for a persisted lexicon.

    Attributes:
        created: ISO-8601 creation timestamp.
        modified: ISO-8601 last-modified timestamp.
        total_entries: Number of entries (cached count).
        source_files: Import files the entries came from.
    """

    created: str = ""
    modified: str = ""
    total_entries: int = 0
    source_files: list[str] = field(default_factory=list)

    def touch(self) -> None:
        """Update the modified timestamp to now."""
        self.modified = datetime.now(UTC).isoformat()

    def to_dict(self) -> dict[str, Any]:
        return {
            "created": self.created,
            "modified": self.modified,
            "total_entries": self.total_entries,
            "source_files": list(self.source_files),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LexiconMetadata:
        return cls(
            created=data.get("created", ""),
            modified=data.get("modified", ""),
            total_entries=data.get("total_entries", 0),
            source_files=data.get("source_files", []),
        )


@dataclass
class Lexicon(WordRepository):
    """In-memory arena of :class:`LexicalEntry` objects keyed by integer id.

    Inflected forms point at their dictionary entry through ``parent_id``;
    the back-reference is resolved by id lookup only.

    Attributes:
        metadata: Lexicon-level metadata.
        _entries: Internal dict keyed by entry id, in insertion order.
    """

    metadata: LexiconMetadata = field(default_factory=LexiconMetadata)
    _entries: dict[int, LexicalEntry] = field(default_factory=dict)
    _next_id: int = 1

    # --- CRUD operations ---

    def add_entry(self, entry: LexicalEntry) -> LexicalEntry:
        """Store *entry*, assigning an id when it has none."""
        if entry.id is None:
            entry.id = self._next_id
        self._next_id = max(self._next_id, entry.id + 1)
        self._entries[entry.id] = entry
        self._sync_count()
        return entry

    def update_entry(self, entry: LexicalEntry) -> None:
        """Replace an existing entry wholesale."""
        if entry.id is None:
            raise ValueError("Cannot update an entry without an id")
        self._entries[entry.id] = entry
        self._sync_count()

    def remove_entry(self, entry_id: int) -> LexicalEntry | None:
        """Remove and return an entry, or ``None`` if not found.

        Forms of the removed entry keep existing but lose their parent link.
        """
        entry = self._entries.pop(entry_id, None)
        if entry is not None:
            for form in self._entries.values():
                if form.parent_id == entry_id:
                    form.parent_id = None
            self._sync_count()
        return entry

    def has_entry(self, entry_id: int) -> bool:
        return entry_id in self._entries

    # --- WordRepository ---

    def get(self, entry_id: int) -> LexicalEntry | None:
        return self._entries.get(entry_id)

    def find_by_exact_representation(
        self, text: str, limit: int | None = None
    ) -> list[LexicalEntry]:
        matches: list[LexicalEntry] = []
        for entry in self._entries.values():
            if entry.representation == text:
                matches.append(entry)
                if limit is not None and len(matches) >= limit:
                    break
        return matches

    def all_entries(self) -> Iterator[LexicalEntry]:
        return iter(list(self._entries.values()))

    # --- Lexeme / form relationship ---

    def forms_of(self, entry: LexicalEntry) -> list[LexicalEntry]:
        """Entries linked to *entry* as its inflected forms."""
        return [e for e in self._entries.values() if e.parent_id == entry.id]

    def parent_word(self, entry: LexicalEntry) -> LexicalEntry:
        """The dictionary entry *entry* is a form of, or *entry* itself."""
        if entry.parent_id is not None:
            parent = self._entries.get(entry.parent_id)
            if parent is not None:
                return parent
        return entry

    def unresolved_forms(self) -> list[LexicalEntry]:
        """Entries whose ``parent_id`` names no entry in the arena."""
        return [
            e for e in self._entries.values()
            if e.parent_id is not None and e.parent_id not in self._entries
        ]

    def dictionary_entries(self) -> list[LexicalEntry]:
        return [e for e in self._entries.values() if e.is_dictionary_entry]

    def word_forms(self) -> list[LexicalEntry]:
        return [e for e in self._entries.values() if e.parent_id is not None]

    # --- Iteration / bulk ---

    @property
    def entries(self) -> list[LexicalEntry]:
        """All entries in insertion order."""
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LexicalEntry]:
        return self.all_entries()

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()
        self._next_id = 1
        self._sync_count()

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        self._sync_count()
        return {
            "metadata": self.metadata.to_dict(),
            "entries": [e.to_dict() for e in self._entries.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Lexicon:
        meta = LexiconMetadata.from_dict(data.get("metadata", {}))
        lexicon = cls(metadata=meta)
        for entry_data in data.get("entries", []):
            lexicon.add_entry(LexicalEntry.from_dict(entry_data))
        return lexicon

    # --- Internal ---

    def _sync_count(self) -> None:
        self.metadata.total_entries = len(self._entries)

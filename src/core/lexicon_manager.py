"""Lexicon manager: CRUD with classification refresh, import, persistence."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from core.entry_classifier import refresh_entry
from core.import_parser import ImportParser, ImportRecord
from core.lookup_resolver import LookupResolver, LookupResult
from core.search_engine import SearchCriteria, SearchEngine
from core.sort_key import sorted_alphabetically
from data.repository import LexiconStorage
from models.lexeme import LexicalEntry, PartOfSpeechCategory
from models.lexicon import Lexicon, LexiconMetadata
from utils.exceptions import EntryNotFoundError, ImportParseError
from utils.logging_config import get_logger

logger = get_logger("core.lexicon_manager")

UNKNOWN_CATEGORY = PartOfSpeechCategory("Unknown", "?")

DEFAULT_CATEGORIES: tuple[PartOfSpeechCategory, ...] = (
    PartOfSpeechCategory("Verb", "v"),
    PartOfSpeechCategory("Noun", "n"),
    PartOfSpeechCategory("Proper Noun", "pn"),
    PartOfSpeechCategory("Adjective", "adj"),
    PartOfSpeechCategory("Participle", "ptc"),
    PartOfSpeechCategory("Pronoun", "pron"),
    PartOfSpeechCategory("Interrogative Pronoun", "interr"),
    PartOfSpeechCategory("Preposition", "prep"),
    PartOfSpeechCategory("Conjunction", "conj"),
    PartOfSpeechCategory("Article", "art"),
    PartOfSpeechCategory("Particle", "part"),
    PartOfSpeechCategory("Adverb/Particle", "adv"),
    PartOfSpeechCategory("Consonant", "cons"),
    UNKNOWN_CATEGORY,
)


class LexiconManager:
    """Owns a :class:`Lexicon` and keeps derived entry fields current.

    Every add/update recomputes the dictionary-entry flag and the
    part-of-speech label before the entry is stored.
    """

    def __init__(
        self,
        storage: LexiconStorage | None = None,
        categories: tuple[PartOfSpeechCategory, ...] = DEFAULT_CATEGORIES,
    ) -> None:
        self._lexicon = self._empty_lexicon()
        self._storage = storage
        self._categories: dict[str, PartOfSpeechCategory] = {c.name: c for c in categories}
        self._parser = ImportParser()
        self._search_engine = SearchEngine()
        self._current_path: Path | None = None
        self._dirty = False

    # --- Properties ---

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    @property
    def storage(self) -> LexiconStorage | None:
        return self._storage

    @storage.setter
    def storage(self, storage: LexiconStorage) -> None:
        self._storage = storage

    @property
    def current_path(self) -> Path | None:
        return self._current_path

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def categories(self) -> list[PartOfSpeechCategory]:
        return sorted(self._categories.values(), key=lambda c: c.name)

    # --- CRUD ---

    def add_entry(self, entry: LexicalEntry) -> LexicalEntry:
        """Classify and store a new entry.

        Raises:
            EntryNotFoundError: If ``parent_id`` names no entry.
        """
        self._check_parent(entry)
        refresh_entry(entry)
        self._lexicon.add_entry(entry)
        self._dirty = True
        logger.info("Added entry: %s (id=%s)", entry.representation, entry.id)
        return entry

    def update_entry(self, entry: LexicalEntry) -> None:
        """Reclassify and replace an existing entry.

        Raises:
            EntryNotFoundError: If the entry or its ``parent_id`` is unknown.
        """
        if entry.id is None or not self._lexicon.has_entry(entry.id):
            raise EntryNotFoundError(entry.id if entry.id is not None else -1)
        self._check_parent(entry)
        refresh_entry(entry)
        self._lexicon.update_entry(entry)
        self._dirty = True
        logger.info("Updated entry: %s (id=%s)", entry.representation, entry.id)

    def remove_entry(self, entry_id: int) -> LexicalEntry:
        """Remove an entry; its forms are unlinked and reclassified."""
        entry = self._lexicon.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        orphans = self._lexicon.forms_of(entry)
        self._lexicon.remove_entry(entry_id)
        for form in orphans:
            refresh_entry(form)
        self._dirty = True
        logger.info("Removed entry: %s (id=%s)", entry.representation, entry_id)
        return entry

    def get_entry(self, entry_id: int) -> LexicalEntry | None:
        return self._lexicon.get(entry_id)

    def _check_parent(self, entry: LexicalEntry) -> None:
        parent_id = entry.parent_id
        if parent_id is None:
            return
        if parent_id == entry.id or not self._lexicon.has_entry(parent_id):
            raise EntryNotFoundError(parent_id)

    # --- Taxonomy ---

    def category(self, name: str | None) -> PartOfSpeechCategory | None:
        """Known category called *name*, or ``None``."""
        if not name:
            return None
        return self._categories.get(name)

    def add_category(self, category: PartOfSpeechCategory) -> PartOfSpeechCategory:
        """Register *category*, keeping an existing one of the same name."""
        return self._categories.setdefault(category.name, category)

    # --- Import ---

    def import_content(self, content: str, source: str | None = None) -> list[LexicalEntry]:
        """Parse import content and merge every record into the lexicon.

        Raises:
            ImportParseError: If the content is malformed or names an unknown
                part of speech; nothing is imported.
        """
        records = self._parser.parse(content)
        entries = self.import_records(records)
        if source:
            self._lexicon.metadata.source_files.append(source)
        return entries

    def import_records(self, records: list[ImportRecord]) -> list[LexicalEntry]:
        """Create or update entries from parsed records.

        A record whose representation already exists updates that entry:
        glosses are replaced, and for records carrying a part of speech the
        category, attributes and form link are replaced as well. Other
        records create new entries; those without a part of speech get
        the ``Unknown`` category.

        Raises:
            ImportParseError: If a record names an unknown part of speech.
                Checked before any entry is touched.
        """
        for record in records:
            if record.pos is not None and self.category(record.pos) is None:
                raise ImportParseError(f"Part of speech '{record.pos}' not found")

        imported = []
        for record in records:
            matches = self._lexicon.find_by_exact_representation(record.representation, limit=2)
            if len(matches) > 1:
                logger.warning(
                    "Several entries spell %r, updating id=%s",
                    record.representation, matches[0].id,
                )
            if matches:
                imported.append(self._merge_record(matches[0], record))
            else:
                imported.append(self.add_entry(self._new_entry(record)))
        logger.info("Imported %d entries", len(imported))
        return imported

    def _new_entry(self, record: ImportRecord) -> LexicalEntry:
        if record.pos is None:
            return LexicalEntry(
                representation=record.representation,
                pos=self.add_category(UNKNOWN_CATEGORY),
                glosses=list(record.glosses),
            )
        return LexicalEntry(
            representation=record.representation,
            pos=self.category(record.pos),
            attributes=dict(record.attributes),
            glosses=list(record.glosses),
            parent_id=self._resolve_parent(record.lexeme_of_hint),
        )

    def _merge_record(self, entry: LexicalEntry, record: ImportRecord) -> LexicalEntry:
        entry.glosses = list(record.glosses)
        if record.pos is not None:
            entry.pos = self.category(record.pos)
            entry.attributes = dict(record.attributes)
            parent_id = self._resolve_parent(record.lexeme_of_hint)
            entry.parent_id = parent_id if parent_id != entry.id else None
        self.update_entry(entry)
        return entry

    def _resolve_parent(self, hint: str | None) -> int | None:
        if not hint:
            return None
        matches = self._lexicon.find_by_exact_representation(hint, limit=2)
        if len(matches) != 1:
            logger.warning(
                "Cannot link form to %r: %d candidate entries", hint, len(matches)
            )
            return None
        return matches[0].id

    # --- Queries ---

    def lookup(self, query: str) -> LookupResult:
        return LookupResolver(self._lexicon).lookup(query)

    def sorted_entries(self) -> list[LexicalEntry]:
        """All entries in Hebrew alphabetical order."""
        return sorted_alphabetically(self._lexicon.all_entries())

    def search(self, criteria: SearchCriteria) -> list[LexicalEntry]:
        return self._search_engine.search(self._lexicon.all_entries(), criteria)

    # --- Persistence ---

    def save(self, path: Path | None = None) -> None:
        """Save the lexicon to disk."""
        if self._storage is None:
            raise RuntimeError("No storage configured")
        save_path = path or self._current_path
        if save_path is None:
            raise RuntimeError("No save path specified")

        self._lexicon.metadata.touch()
        self._storage.save(self._lexicon, save_path)
        self._current_path = save_path
        self._dirty = False
        logger.info("Lexicon saved to %s", save_path)

    def load(self, path: Path) -> None:
        """Load the lexicon from disk."""
        if self._storage is None:
            raise RuntimeError("No storage configured")

        self._lexicon = self._storage.load(path)
        for entry in self._lexicon.entries:
            if entry.pos is not None:
                self.add_category(entry.pos)
        self._current_path = path
        self._dirty = False
        logger.info("Lexicon loaded from %s", path)

    def new_lexicon(self) -> None:
        """Start a new empty lexicon."""
        self._lexicon = self._empty_lexicon()
        self._current_path = None
        self._dirty = False
        logger.info("New empty lexicon created")

    @staticmethod
    def _empty_lexicon() -> Lexicon:
        return Lexicon(metadata=LexiconMetadata(created=datetime.now(UTC).isoformat()))

"""SQLite persistence adapter and query-backed word repository."""

from __future__ import annotations

import json
import sqlite3
from collections.abc import Iterator
from contextlib import closing
from pathlib import Path

from data.repository import LexiconStorage, WordRepository
from models.lexeme import LexicalEntry, PartOfSpeechCategory
from models.lexicon import Lexicon, LexiconMetadata
from utils.exceptions import SerializationError, StorageError
from utils.logging_config import get_logger

logger = get_logger("data.sqlite")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS metadata (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS part_of_speech_categories (
    name   TEXT PRIMARY KEY,
    abbrev TEXT NOT NULL DEFAULT ''
);

CREATE TABLE IF NOT EXISTS entries (
    id                  INTEGER PRIMARY KEY,
    representation      TEXT NOT NULL,
    pos_name            TEXT REFERENCES part_of_speech_categories(name),
    parent_id           INTEGER REFERENCES entries(id)
                            ON DELETE SET NULL DEFERRABLE INITIALLY DEFERRED,
    attributes          TEXT NOT NULL DEFAULT '{}',
    is_dictionary_entry INTEGER NOT NULL DEFAULT 1,
    pos_display         TEXT NOT NULL DEFAULT ''
);

CREATE TABLE IF NOT EXISTS glosses (
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    entry_id INTEGER NOT NULL REFERENCES entries(id) ON DELETE CASCADE,
    position INTEGER NOT NULL,
    text     TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_entries_representation ON entries(representation);
CREATE INDEX IF NOT EXISTS idx_entries_parent ON entries(parent_id);
CREATE INDEX IF NOT EXISTS idx_glosses_entry ON glosses(entry_id);
"""

_ENTRY_COLUMNS = (
    "e.id, e.representation, e.pos_name, c.abbrev, e.parent_id, "
    "e.attributes, e.is_dictionary_entry, e.pos_display"
)

_ENTRY_SELECT = (
    f"SELECT {_ENTRY_COLUMNS} FROM entries e "
    "LEFT JOIN part_of_speech_categories c ON c.name = e.pos_name"
)


def _row_to_entry(conn: sqlite3.Connection, row: sqlite3.Row) -> LexicalEntry:
    glosses = [
        g["text"]
        for g in conn.execute(
            "SELECT text FROM glosses WHERE entry_id = ? ORDER BY position",
            (row["id"],),
        ).fetchall()
    ]
    pos = None
    if row["pos_name"] is not None:
        pos = PartOfSpeechCategory(name=row["pos_name"], abbrev=row["abbrev"] or "")
    return LexicalEntry(
        id=row["id"],
        representation=row["representation"],
        pos=pos,
        attributes=json.loads(row["attributes"]),
        parent_id=row["parent_id"],
        glosses=glosses,
        is_dictionary_entry=bool(row["is_dictionary_entry"]),
        pos_display=row["pos_display"],
    )


class SQLiteAdapter(LexiconStorage):
    """Persist a :class:`Lexicon` in an SQLite database."""

    def save(self, lexicon: Lexicon, path: Path) -> None:
        """Write lexicon to an SQLite database at *path*.

        The database is built in a sibling temporary file and moved over
        *path* only after it commits, so a failed save leaves the previous
        database untouched.

        Args:
            lexicon: Lexicon to persist.
            path: Target ``.db`` file.

        Raises:
            StorageError: On database write failures, including forms whose
                ``parent_id`` names no entry.
        """
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.unlink(missing_ok=True)
            with closing(sqlite3.connect(str(tmp_path))) as conn:
                conn.execute("PRAGMA foreign_keys=ON")
                conn.executescript(_SCHEMA)
                with conn:
                    self._insert_lexicon(conn, lexicon)
            tmp_path.replace(path)
            logger.info("Lexicon saved to SQLite %s (%d entries)", path, len(lexicon))
        except (sqlite3.Error, OSError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"SQLite write error for {path}: {exc}") from exc

    @staticmethod
    def _insert_lexicon(conn: sqlite3.Connection, lexicon: Lexicon) -> None:
        for key, value in lexicon.metadata.to_dict().items():
            conn.execute(
                "INSERT INTO metadata (key, value) VALUES (?, ?)",
                (key, json.dumps(value) if isinstance(value, (list, dict)) else str(value)),
            )

        categories = {e.pos.name: e.pos for e in lexicon.entries if e.pos is not None}
        for category in categories.values():
            conn.execute(
                "INSERT INTO part_of_speech_categories (name, abbrev) VALUES (?, ?)",
                (category.name, category.abbrev),
            )

        for entry in lexicon.entries:
            conn.execute(
                "INSERT INTO entries (id, representation, pos_name, parent_id, "
                "attributes, is_dictionary_entry, pos_display) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (entry.id, entry.representation,
                 entry.pos.name if entry.pos is not None else None,
                 entry.parent_id, json.dumps(entry.attributes, ensure_ascii=False),
                 int(entry.is_dictionary_entry), entry.pos_display),
            )
            conn.executemany(
                "INSERT INTO glosses (entry_id, position, text) VALUES (?, ?, ?)",
                [(entry.id, i, text) for i, text in enumerate(entry.glosses)],
            )

    def load(self, path: Path) -> Lexicon:
        """Load lexicon from an SQLite database.

        Args:
            path: Source ``.db`` file.

        Returns:
            Loaded :class:`Lexicon`.

        Raises:
            StorageError: If the file does not exist or cannot be read.
            SerializationError: On data format errors.
        """
        if not path.exists():
            raise StorageError(f"Database not found: {path}")
        try:
            with closing(sqlite3.connect(str(path))) as conn:
                conn.row_factory = sqlite3.Row

                meta_dict: dict = {}
                for row in conn.execute("SELECT key, value FROM metadata").fetchall():
                    key, val = row["key"], row["value"]
                    if key == "source_files":
                        meta_dict[key] = json.loads(val)
                    elif key == "total_entries":
                        meta_dict[key] = int(val)
                    else:
                        meta_dict[key] = val

                lexicon = Lexicon(metadata=LexiconMetadata.from_dict(meta_dict))
                for row in conn.execute(f"{_ENTRY_SELECT} ORDER BY e.id").fetchall():
                    lexicon.add_entry(_row_to_entry(conn, row))

            logger.info("Lexicon loaded from SQLite %s (%d entries)", path, len(lexicon))
            return lexicon
        except sqlite3.Error as exc:
            raise StorageError(f"SQLite read error for {path}: {exc}") from exc
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Data format error in {path}: {exc}") from exc

    def exists(self, path: Path) -> bool:
        return path.is_file()


class SQLiteWordRepository(WordRepository):
    """Answer word lookups straight from a database written by :class:`SQLiteAdapter`.

    Usable as a context manager; the connection is closed on exit.
    """

    def __init__(self, path: Path) -> None:
        if not path.exists():
            raise StorageError(f"Database not found: {path}")
        try:
            self._conn = sqlite3.connect(str(path))
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open {path}: {exc}") from exc
        self._conn.row_factory = sqlite3.Row
        self._path = path

    def find_by_exact_representation(
        self, text: str, limit: int | None = None
    ) -> list[LexicalEntry]:
        rows = self._query(
            f"{_ENTRY_SELECT} WHERE e.representation = ? ORDER BY e.id LIMIT ?",
            (text, -1 if limit is None else limit),
        )
        return [_row_to_entry(self._conn, row) for row in rows]

    def all_entries(self) -> Iterator[LexicalEntry]:
        for row in self._query(f"{_ENTRY_SELECT} ORDER BY e.id", ()):
            yield _row_to_entry(self._conn, row)

    def get(self, entry_id: int) -> LexicalEntry | None:
        rows = self._query(f"{_ENTRY_SELECT} WHERE e.id = ?", (entry_id,))
        return _row_to_entry(self._conn, rows[0]) if rows else None

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> SQLiteWordRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _query(self, sql: str, params: tuple) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"SQLite read error for {self._path}: {exc}") from exc

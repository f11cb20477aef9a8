"""Abstract interfaces for word lookup and lexicon persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.lexeme import LexicalEntry
    from models.lexicon import Lexicon


class WordRepository(ABC):
    """Read contract the lookup resolver and sort service depend on."""

    @abstractmethod
    def find_by_exact_representation(
        self, text: str, limit: int | None = None
    ) -> list[LexicalEntry]:
        """Return entries whose representation equals *text* exactly.

        Args:
            text: Vocalized form, compared with full Unicode equality.
            limit: Maximum number of entries to return (``None`` for all).

        Returns:
            Matching entries in storage order.
        """

    @abstractmethod
    def all_entries(self) -> Iterator[LexicalEntry]:
        """Iterate over every stored entry."""

    @abstractmethod
    def get(self, entry_id: int) -> LexicalEntry | None:
        """Return the entry with *entry_id*, or ``None``."""


class LexiconStorage(ABC):
    """Abstract base for lexicon storage backends.

    Implementations must provide save/load semantics for the
    :class:`~models.lexicon.Lexicon` aggregate.
    """

    @abstractmethod
    def save(self, lexicon: Lexicon, path: Path) -> None:
        """Persist a lexicon to the given path.

        Args:
            lexicon: The lexicon to save.
            path: File/database path to write to.

        Raises:
            StorageError: On I/O failures.
        """

    @abstractmethod
    def load(self, path: Path) -> Lexicon:
        """Load a lexicon from the given path.

        Args:
            path: File/database path to read from.

        Returns:
            The loaded lexicon.

        Raises:
            StorageError: On I/O failures or missing file.
            SerializationError: On data format errors.
        """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether a persisted lexicon exists at *path*."""

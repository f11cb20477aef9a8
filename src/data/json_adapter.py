"""JSON file persistence adapter for Lexicon."""

from __future__ import annotations

import json
from pathlib import Path

from data.repository import LexiconStorage
from models.lexicon import Lexicon
from utils.exceptions import SerializationError, StorageError
from utils.logging_config import get_logger

logger = get_logger("data.json")


class JSONAdapter(LexiconStorage):
    """Persist a :class:`Lexicon` as a pretty-printed JSON file."""

    def save(self, lexicon: Lexicon, path: Path) -> None:
        """Write lexicon to *path* as JSON.

        Args:
            lexicon: Lexicon to persist.
            path: Target ``.json`` file.

        Raises:
            StorageError: On file write failures.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            data = lexicon.to_dict()
            with open(path, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            logger.info("Lexicon saved to %s (%d entries)", path, len(lexicon))
        except OSError as exc:
            raise StorageError(f"Failed to write JSON to {path}: {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Serialization error: {exc}") from exc

    def load(self, path: Path) -> Lexicon:
        """Read lexicon from a JSON file.

        Args:
            path: Source ``.json`` file.

        Returns:
            Loaded :class:`Lexicon`.

        Raises:
            StorageError: If the file does not exist or cannot be read.
            SerializationError: If the JSON is malformed, two entries share
                an id, or a form points at a missing entry.
        """
        if not path.exists():
            raise StorageError(f"File not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
            lexicon = Lexicon.from_dict(data)
            self._check_entries(lexicon, data, path)
            logger.info("Lexicon loaded from %s (%d entries)", path, len(lexicon))
            return lexicon
        except OSError as exc:
            raise StorageError(f"Failed to read {path}: {exc}") from exc
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as exc:
            raise SerializationError(f"Invalid lexicon JSON in {path}: {exc}") from exc

    def exists(self, path: Path) -> bool:
        return path.is_file()

    @staticmethod
    def _check_entries(lexicon: Lexicon, data: dict, path: Path) -> None:
        if len(lexicon) != len(data.get("entries", [])):
            raise SerializationError(f"Duplicate entry ids in {path}")
        unresolved = lexicon.unresolved_forms()
        if unresolved:
            first = unresolved[0]
            raise SerializationError(
                f"Entry {first.id} ({first.representation}) in {path} "
                f"points at missing entry {first.parent_id}"
            )

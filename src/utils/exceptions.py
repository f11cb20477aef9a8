"""Application exception hierarchy."""


class HeblexError(Exception):
    """Base exception for all heblex errors."""


# Lexicon errors

class LexiconError(HeblexError):
    """Base class for lexicon management errors."""


class EntryNotFoundError(LexiconError):
    """Raised when a lexicon entry does not exist."""

    def __init__(self, entry_id: int) -> None:
        self.entry_id = entry_id
        super().__init__(f"Entry not found: {entry_id}")


# Import errors

class ImportParseError(HeblexError):
    """Raised when dictionary import content cannot be parsed."""


# Persistence errors

class PersistenceError(HeblexError):
    """Base class for persistence errors."""


class SerializationError(PersistenceError):
    """Raised on serialization/deserialization failures."""


class StorageError(PersistenceError):
    """Raised on file or database I/O errors."""


# Configuration errors

class ConfigurationError(HeblexError):
    """Raised when configuration cannot be loaded or saved."""

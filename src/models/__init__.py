"""Domain models of the Hebrew lexicon."""

from models.enums import PartOfSpeech
from models.lexeme import LexicalEntry, PartOfSpeechCategory
from models.lexicon import Lexicon, LexiconMetadata

__all__ = [
    "PartOfSpeech",
    "LexicalEntry",
    "PartOfSpeechCategory",
    "Lexicon",
    "LexiconMetadata",
]

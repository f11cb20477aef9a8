"""Enumerations for part-of-speech and grammatical attribute values."""

from __future__ import annotations

from enum import StrEnum


class PartOfSpeech(StrEnum):
    """Part-of-speech categories known to the entry classifier.

    Values are the category names used by the part-of-speech taxonomy.
    Anything else maps to ``OTHER``.
    """

    VERB = "Verb"
    NOUN = "Noun"
    PROPER_NOUN = "Proper Noun"
    ADJECTIVE = "Adjective"
    PARTICIPLE = "Participle"
    PRONOUN = "Pronoun"
    INTERROGATIVE_PRONOUN = "Interrogative Pronoun"
    PREPOSITION = "Preposition"
    CONJUNCTION = "Conjunction"
    ARTICLE = "Article"
    PARTICLE = "Particle"
    ADVERB_PARTICLE = "Adverb/Particle"
    CONSONANT = "Consonant"
    OTHER = "Other"

    @classmethod
    def from_name(cls, name: str | None) -> PartOfSpeech:
        """Convert a taxonomy category name to our enum.

        Args:
            name: Category name (e.g. ``Verb``, ``Proper Noun``) or ``None``.

        Returns:
            Corresponding ``PartOfSpeech`` member, ``OTHER`` when unknown.
        """
        if not name:
            return cls.OTHER
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER


class Number(StrEnum):
    """Grammatical number."""

    SINGULAR = "singular"
    PLURAL = "plural"
    DUAL = "dual"


class Gender(StrEnum):
    """Grammatical gender."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    COMMON = "common"


class Status(StrEnum):
    """Noun state."""

    ABSOLUTE = "absolute"
    CONSTRUCT = "construct"
    DETERMINED = "determined"


class Binyan(StrEnum):
    """Verb stem patterns."""

    QAL = "qal"
    NIPHAL = "niphal"
    PIEL = "piel"
    PUAL = "pual"
    HIPHIL = "hiphil"
    HOPHAL = "hophal"
    HITPAEL = "hitpael"


# Third person masculine singular, the citation form of a verb
CITATION_CONJUGATION = "3MS"

ACTIVE_ASPECT = "active"

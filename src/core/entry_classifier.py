"""Dictionary-entry classification and the display labels derived from it."""

from __future__ import annotations

from collections.abc import Mapping

from models.enums import (
    ACTIVE_ASPECT,
    CITATION_CONJUGATION,
    Gender,
    Number,
    PartOfSpeech,
    Status,
)
from models.lexeme import LexicalEntry
from utils.logging_config import get_logger

logger = get_logger("core.entry_classifier")

DICTIONARY_ENTRY_LABEL = "Dictionary entry"


def classify(
    part_of_speech: PartOfSpeech | str | None,
    attributes: Mapping[str, str],
    has_parent: bool,
) -> bool:
    """Decide whether a word is a canonical dictionary entry.

    Linked forms are never entries. Otherwise each part of speech has its
    citation-form rule; unknown categories default to ``True``.

    Args:
        part_of_speech: Enum member or taxonomy category name.
        attributes: Grammatical metadata of the word.
        has_parent: Whether the word is linked as a form of another entry.

    Returns:
        ``True`` for a dictionary entry, ``False`` for an inflected form.
    """
    if has_parent:
        return False

    if not isinstance(part_of_speech, PartOfSpeech):
        part_of_speech = PartOfSpeech.from_name(part_of_speech)

    conjugation = attributes.get("conjugation")
    number = attributes.get("number")
    gender = attributes.get("gender")

    match part_of_speech:
        case PartOfSpeech.VERB:
            return conjugation == CITATION_CONJUGATION
        case PartOfSpeech.NOUN | PartOfSpeech.PROPER_NOUN:
            return number == Number.SINGULAR and attributes.get("status") != Status.CONSTRUCT
        case PartOfSpeech.ADJECTIVE:
            return gender == Gender.MASCULINE and number == Number.SINGULAR
        case PartOfSpeech.PARTICIPLE:
            return (
                gender == Gender.MASCULINE
                and number == Number.SINGULAR
                and attributes.get("aspect") == ACTIVE_ASPECT
            )
        case PartOfSpeech.PRONOUN | PartOfSpeech.INTERROGATIVE_PRONOUN:
            return True
        case (
            PartOfSpeech.PREPOSITION
            | PartOfSpeech.CONJUNCTION
            | PartOfSpeech.ARTICLE
            | PartOfSpeech.PARTICLE
            | PartOfSpeech.ADVERB_PARTICLE
        ):
            return True
        case PartOfSpeech.CONSONANT:
            return True
        case PartOfSpeech.OTHER:
            return True


def is_dictionary_entry(entry: LexicalEntry) -> bool:
    """Classify a stored entry from its category, attributes and parent link."""
    return classify(entry.pos_name or None, entry.attributes, entry.has_parent)


def formatted_pos(entry: LexicalEntry) -> str:
    """Short part-of-speech label such as ``n.mas`` or ``v.qal``."""
    if entry.pos is None:
        return ""
    parts = [entry.pos.abbrev]
    gender = entry.attribute("gender")
    if gender:
        parts.append(gender[:3])
    binyan = entry.attribute("binyan")
    if binyan:
        parts.append(binyan)
    return ".".join(parts)


def form_description(entry: LexicalEntry) -> str:
    """Describe the grammatical form of a word that is not a dictionary entry."""
    if is_dictionary_entry(entry):
        return DICTIONARY_ENTRY_LABEL

    if entry.attribute("conjugation"):
        parts = [
            entry.attribute("binyan"),
            entry.attribute("aspect"),
            entry.attribute("conjugation"),
        ]
        return " ".join(p for p in parts if p)
    if entry.attributes.get("number") == Number.PLURAL:
        return f"plural {entry.attribute('status') or 'form'}"
    if entry.attributes.get("status") == Status.CONSTRUCT:
        return f"construct {entry.attribute('number') or 'form'}"
    return "variant"


def full_display_name(entry: LexicalEntry) -> str:
    """Representation, followed by the form description for non-entries.

    Example: ``לָמַדְתִּי (qal perfective 1CS)``.
    """
    if is_dictionary_entry(entry):
        return entry.representation
    return f"{entry.representation} ({form_description(entry)})"


def formatted_glosses(entry: LexicalEntry) -> str:
    """Numbered gloss list: ``1) peace, 2) hello``."""
    return ", ".join(f"{i}) {gloss}" for i, gloss in enumerate(entry.glosses, start=1))


def refresh_entry(entry: LexicalEntry) -> LexicalEntry:
    """Recompute the cached classification flag and display label."""
    entry.is_dictionary_entry = is_dictionary_entry(entry)
    entry.pos_display = formatted_pos(entry)
    logger.debug(
        "Classified %s as %s",
        entry.representation,
        "dictionary entry" if entry.is_dictionary_entry else "form",
    )
    return entry

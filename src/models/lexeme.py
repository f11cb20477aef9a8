"""Domain models: PartOfSpeechCategory, LexicalEntry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class PartOfSpeechCategory:
    """One row of the part-of-speech taxonomy.

    Attributes:
        name: Category name (e.g. ``Verb``, ``Proper Noun``).
        abbrev: Short display label (e.g. ``v``, ``n``).
    """

    name: str
    abbrev: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "abbrev": self.abbrev}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PartOfSpeechCategory:
        return cls(name=data["name"], abbrev=data.get("abbrev", ""))


@dataclass(slots=True)
class LexicalEntry:
    """A stored word record.

    Attributes:
        representation: Exact vocalized form (not guaranteed unique).
        pos: Part-of-speech category, if known.
        attributes: Grammatical metadata (conjugation, number, gender,
            status, aspect, binyan, lesson_introduced, ...).
        parent_id: Id of the entry this one is an inflected form of.
        glosses: Ordered gloss strings.
        id: Arena id, assigned by the lexicon on insert.
        is_dictionary_entry: Cached classification flag.
        pos_display: Cached short part-of-speech label.
    """

    representation: str
    pos: PartOfSpeechCategory | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    parent_id: int | None = None
    glosses: list[str] = field(default_factory=list)
    id: int | None = None
    is_dictionary_entry: bool = True
    pos_display: str = ""

    @property
    def has_parent(self) -> bool:
        return self.parent_id is not None

    @property
    def pos_name(self) -> str:
        """Category name or an empty string."""
        return self.pos.name if self.pos is not None else ""

    def attribute(self, name: str) -> str | None:
        """Return a non-blank attribute value or ``None``."""
        value = self.attributes.get(name)
        if value is None or str(value).strip() == "":
            return None
        return str(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "representation": self.representation,
            "pos": self.pos.to_dict() if self.pos is not None else None,
            "attributes": dict(self.attributes),
            "parent_id": self.parent_id,
            "glosses": list(self.glosses),
            "is_dictionary_entry": self.is_dictionary_entry,
            "pos_display": self.pos_display,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LexicalEntry:
        pos_data = data.get("pos")
        return cls(
            representation=data["representation"],
            pos=PartOfSpeechCategory.from_dict(pos_data) if pos_data else None,
            attributes={k: str(v) for k, v in (data.get("attributes") or {}).items()},
            parent_id=data.get("parent_id"),
            glosses=list(data.get("glosses", [])),
            id=data.get("id"),
            is_dictionary_entry=data.get("is_dictionary_entry", True),
            pos_display=data.get("pos_display", ""),
        )

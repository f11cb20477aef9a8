"""Shared fixtures for the heblex test suite."""

from __future__ import annotations

import pytest

from config.settings import SettingsManager
from models.lexeme import LexicalEntry, PartOfSpeechCategory
from models.lexicon import Lexicon

VERB = PartOfSpeechCategory("Verb", "v")
NOUN = PartOfSpeechCategory("Noun", "n")
ADJECTIVE = PartOfSpeechCategory("Adjective", "adj")


def make_entry(
    representation: str,
    pos: PartOfSpeechCategory | None = None,
    glosses: list[str] | None = None,
    parent_id: int | None = None,
    **attributes: str,
) -> LexicalEntry:
    return LexicalEntry(
        representation=representation,
        pos=pos,
        attributes=dict(attributes),
        parent_id=parent_id,
        glosses=list(glosses or []),
    )


@pytest.fixture
def lexicon():
    return Lexicon()


@pytest.fixture(autouse=True)
def isolated_user_dir(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    user_dir = tmp_path / "home" / ".heblex"
    monkeypatch.setattr("config.settings.USER_DATA_DIR", user_dir)
    monkeypatch.setattr("utils.logging_config.USER_DATA_DIR", user_dir)
    SettingsManager.reset_instance()
    yield user_dir
    SettingsManager.reset_instance()

"""Tests for the command-line entry point."""

import json
import logging

import pytest

import main
from utils.constants import APP_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(
        json.dumps(
            [
                {"word": "מלכ", "glosses": ["king"], "pos": "Noun",
                 "pos_detail": {"number": "singular"}},
                {"word": "מלכים", "glosses": ["kings"], "pos": "Noun",
                 "pos_detail": {"number": "plural"}, "lexeme_of_hint": "מלכ"},
            ],
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path


@pytest.mark.parametrize("name", ["lexicon.json", "lexicon.db"])
def test_import_then_lookup(tmp_path, word_file, capsys, name):
    storage = tmp_path / name

    assert main.main(["--storage", str(storage), "import", str(word_file)]) == 0
    assert storage.exists()
    capsys.readouterr()

    assert main.main(["--storage", str(storage), "lookup", "המלך"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["found"] is True
    assert payload["hebrew"] == "מלכ"
    assert payload["pos"] == "Noun"


def test_list_entries_only(tmp_path, word_file, capsys):
    storage = tmp_path / "lexicon.json"
    main.main(["--storage", str(storage), "import", str(word_file)])
    capsys.readouterr()

    assert main.main(["--storage", str(storage), "list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["מלכ\tn\tking", "מלכים (plural form)\tn\tkings"]

    main.main(["--storage", str(storage), "list", "--entries-only"])
    assert capsys.readouterr().out.splitlines() == ["מלכ\tn\tking"]


def test_lookup_not_found(tmp_path, capsys):
    assert main.main(["--storage", str(tmp_path / "empty.json"), "lookup", "שלום"]) == 0
    assert json.loads(capsys.readouterr().out) == {"found": False, "word": "שלום"}


def test_blank_lookup_is_rejected(tmp_path, capsys):
    assert main.main(["--storage", str(tmp_path / "empty.json"), "lookup", "  "]) == 2
    assert "word parameter required" in capsys.readouterr().err


def test_bad_import_file_reports_error(tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("peace\nשלום", encoding="utf-8")
    assert main.main(["--storage", str(tmp_path / "lex.json"), "import", str(bad)]) == 1
    assert "Hebrew word" in capsys.readouterr().err


def test_repeated_import_keeps_lookup_working(tmp_path, word_file, capsys):
    storage = tmp_path / "lexicon.json"
    for _ in range(2):
        assert main.main(["--storage", str(storage), "import", str(word_file)]) == 0
    capsys.readouterr()

    assert main.main(["--storage", str(storage), "lookup", "מלכים"]) == 0
    assert json.loads(capsys.readouterr().out)["found"] is True

    main.main(["--storage", str(storage), "list"])
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_unknown_part_of_speech_fails_import(tmp_path, capsys):
    words = tmp_path / "words.json"
    words.write_text('[{"word": "ספר", "glosses": ["book"], "pos": "Nuon"}]', encoding="utf-8")
    storage = tmp_path / "lexicon.json"

    assert main.main(["--storage", str(storage), "import", str(words)]) == 1
    assert "'Nuon' not found" in capsys.readouterr().err
    assert not storage.exists()

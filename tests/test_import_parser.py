"""Tests for the dictionary import parser."""

import pytest

from core.import_parser import ImportParser, ImportRecord
from utils.exceptions import ImportParseError


@pytest.fixture
def parser():
    return ImportParser()


@pytest.mark.parametrize("content", ["", "   \n", None])
def test_blank_content(parser, content):
    assert parser.parse(content) == []


class TestJSONFormat:

    def test_single_object(self, parser):
        records = parser.parse('{"word": "שלום", "glosses": ["peace"], "pos": "Noun"}')
        assert records == [ImportRecord(representation="שלום", glosses=["peace"], pos="Noun")]

    def test_metadata_is_merged(self, parser):
        content = """[{
            "word": "למד", "glosses": ["he learned"], "pos": "Verb",
            "pos_type": "Lexical Category", "lesson_introduced": 3,
            "pos_detail": {"binyan": "qal", "conjugation": "3MS", "root": null},
            "lexeme_of_hint": " "
        }]"""
        (record,) = parser.parse(content)
        assert record.attributes == {
            "binyan": "qal",
            "conjugation": "3MS",
            "pos_type": "Lexical Category",
            "lesson_introduced": "3",
        }
        assert record.lexeme_of_hint is None

    def test_invalid_json(self, parser):
        with pytest.raises(ImportParseError, match="Invalid JSON"):
            parser.parse("[{not json}")

    @pytest.mark.parametrize(
        "content, message",
        [
            ('{"glosses": ["x"], "pos": "Noun"}', "'word'"),
            ('{"word": "שלום", "glosses": [], "pos": "Noun"}', "'glosses'"),
            ('{"word": "שלום", "glosses": "peace", "pos": "Noun"}', "'glosses'"),
            ('{"word": "שלום", "glosses": ["peace"]}', "'pos'"),
            ('["שלום"]', "object"),
        ],
    )
    def test_missing_required_fields(self, parser, content, message):
        with pytest.raises(ImportParseError, match=message):
            parser.parse(content)


class TestTextFormat:

    def test_sections(self, parser):
        content = "שלום\npeace\nhello\n---\n\nאב\nfather\n---\n"
        records = parser.parse(content)
        assert [r.representation for r in records] == ["שלום", "אב"]
        assert records[0].glosses == ["peace", "hello"]
        assert records[0].pos is None

    def test_section_must_start_with_hebrew(self, parser):
        with pytest.raises(ImportParseError, match="Hebrew word"):
            parser.parse("peace\nשלום")

    def test_section_needs_gloss(self, parser):
        with pytest.raises(ImportParseError, match="at least one gloss"):
            parser.parse("שלום\n---\nאב\nfather")

"""Tests for Hebrew character classes and normalization."""

import pytest

from utils.hebrew import (
    contains_hebrew,
    fold_final_forms,
    normalize_hebrew,
    strip_diacriticals,
    strip_leading_diacriticals,
)

SHALOM = "\u05E9\u05C1\u05B8\u05DC\u05D5\u05B9\u05DD"
ERETZ_ACCENTED = "\u05D0\u05B6\u05AB\u05E8\u05B6\u05E5"
MELEKH_FINAL = "\u05DE\u05B6\u05DC\u05B6\u05DA"
MELEKH_PLAIN = "\u05DE\u05B6\u05DC\u05B6\u05DB"
BAT = "\u05D1\u05BC\u05B7\u05EA"

SAMPLES = ["", "abc", SHALOM, ERETZ_ACCENTED, MELEKH_FINAL, BAT, "ךםןףץ", "שלום, world!"]


class TestStripDiacriticals:

    def test_strips_vowels_and_shin_dot(self):
        assert strip_diacriticals(SHALOM) == "שלום"

    def test_strips_cantillation(self):
        assert strip_diacriticals(ERETZ_ACCENTED) == "ארץ"

    def test_full_strip_removes_dagesh(self):
        assert strip_diacriticals(BAT) == "בת"

    def test_keep_dagesh_variant(self):
        assert strip_diacriticals(BAT, keep_dagesh=True) == "\u05D1\u05BC\u05EA"

    def test_non_hebrew_passes_through(self):
        assert strip_diacriticals("abc, \u05D0\u05B8!") == "abc, א!"

    def test_empty_and_none(self):
        assert strip_diacriticals("") == ""
        assert strip_diacriticals(None) == ""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = strip_diacriticals(text)
        assert strip_diacriticals(once) == once


class TestFoldFinalForms:

    def test_folds_all_five_finals(self):
        assert fold_final_forms("ךםןףץ") == "כמנפצ"

    def test_preserves_marks(self):
        assert fold_final_forms(MELEKH_FINAL) == MELEKH_PLAIN

    def test_regular_letters_unchanged(self):
        assert fold_final_forms(MELEKH_PLAIN) == MELEKH_PLAIN

    def test_empty_and_none(self):
        assert fold_final_forms("") == ""
        assert fold_final_forms(None) == ""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = fold_final_forms(text)
        assert fold_final_forms(once) == once


class TestStripLeadingDiacriticals:

    def test_removes_marks_left_by_prefix(self):
        # sheva and dagesh of a removed bet, then bet with patach
        assert strip_leading_diacriticals("\u05BC\u05B0\u05D1\u05B7") == "\u05D1\u05B7"

    def test_keeps_marks_of_later_letters(self):
        assert strip_leading_diacriticals(SHALOM) == SHALOM

    def test_only_the_leading_run(self):
        assert strip_leading_diacriticals("\u05B7\u05D0\u05B7") == "\u05D0\u05B7"

    def test_empty(self):
        assert strip_leading_diacriticals("") == ""
        assert strip_leading_diacriticals(None) == ""


def test_normalize_hebrew_matches_accented_and_final_forms():
    assert normalize_hebrew(ERETZ_ACCENTED) == "ארצ"
    assert normalize_hebrew(MELEKH_FINAL) == normalize_hebrew("מלכ")


def test_normalize_hebrew_blank():
    assert normalize_hebrew("   ") == ""
    assert normalize_hebrew(None) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc", False),
        ("", False),
        (None, False),
        ("שלום", True),
        ("\u05B0", True),
        ("word אב", True),
    ],
)
def test_contains_hebrew(text, expected):
    assert contains_hebrew(text) is expected

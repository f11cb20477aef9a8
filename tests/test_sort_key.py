"""Tests for Hebrew alphabetical collation."""

import math

from conftest import NOUN, make_entry
from core.entry_classifier import is_dictionary_entry
from core.sort_key import (
    HEBREW_ALPHABET,
    comparable_sort_key,
    hebrew_sort_key,
    sorted_alphabetically,
)

PATACH = "\u05B7"
HIREQ = "\u05B4"
QAMATS = "\u05B8"
DAGESH = "\u05BC"
SHEVA = "\u05B0"


def test_alphabet_has_27_letters_with_finals_after_base():
    assert len(HEBREW_ALPHABET) == 27
    assert HEBREW_ALPHABET[0] == "א"
    assert HEBREW_ALPHABET[-1] == "ת"
    assert HEBREW_ALPHABET.index("ך") == HEBREW_ALPHABET.index("כ") + 1
    assert HEBREW_ALPHABET.index("ץ") == HEBREW_ALPHABET.index("צ") + 1


def test_consonant_order():
    assert hebrew_sort_key("א") < hebrew_sort_key("ב") < hebrew_sort_key("ג")


def test_patach_before_hireq_on_same_consonant():
    assert hebrew_sort_key("א" + PATACH) < hebrew_sort_key("א" + HIREQ)


def test_key_pairs():
    assert hebrew_sort_key("א" + QAMATS + "ב") == [(0, 2), (1, 0)]


def test_final_forms_rank_separately():
    assert hebrew_sort_key("כ") == [(10, 0)]
    assert hebrew_sort_key("ך") == [(11, 0)]
    assert hebrew_sort_key("ך") < hebrew_sort_key("ל")


def test_last_mark_wins_vowel_slot():
    assert hebrew_sort_key("ב" + DAGESH + PATACH) == [(1, 1)]
    assert hebrew_sort_key("ב" + PATACH + DAGESH) == [(1, 10)]


def test_mark_before_any_consonant_is_dropped():
    assert hebrew_sort_key(PATACH + "א") == [(0, 0)]


def test_unranked_marks_and_punctuation_ignored():
    assert hebrew_sort_key("א" + SHEVA + "-ב!") == hebrew_sort_key("אב")


def test_blank_input_gets_scalar_sentinel():
    assert hebrew_sort_key("") == [math.inf]
    assert hebrew_sort_key("   ") == [math.inf]
    assert hebrew_sort_key(None) == [math.inf]


def test_non_hebrew_input_gets_pair_sentinel():
    assert hebrew_sort_key("hello") == [(math.inf, 0)]


def test_prefix_sorts_first():
    assert hebrew_sort_key("אב") < hebrew_sort_key("אבג")


def test_comparable_key_orders_sentinels_last():
    hebrew = comparable_sort_key("ת")
    assert hebrew < comparable_sort_key("")
    assert hebrew < comparable_sort_key("latin")


def test_sorted_alphabetically_strings():
    words = ["", "ג", "latin", "א" + HIREQ, "ב", "א" + PATACH]
    result = sorted_alphabetically(words)
    assert result[:4] == ["א" + PATACH, "א" + HIREQ, "ב", "ג"]
    assert set(result[4:]) == {"", "latin"}


def test_sorted_alphabetically_is_stable():
    first = make_entry("שלום", glosses=["peace"])
    second = make_entry("שלום", glosses=["hello"])
    before = make_entry("אב", glosses=["father"])
    assert sorted_alphabetically([first, second, before]) == [before, first, second]


def test_sorted_alphabetically_with_key():
    pairs = [("ב", 1), ("א", 2)]
    assert sorted_alphabetically(pairs, key=lambda p: p[0]) == [("א", 2), ("ב", 1)]


def test_sort_ignores_dictionary_entry_status(lexicon):
    lexeme = lexicon.add_entry(make_entry("ספר", NOUN, number="singular"))
    plural = lexicon.add_entry(
        make_entry("ספרים", NOUN, parent_id=lexeme.id, number="plural")
    )
    other = lexicon.add_entry(make_entry("אב", NOUN, number="singular"))

    assert is_dictionary_entry(lexeme) is True
    assert is_dictionary_entry(plural) is False
    assert sorted_alphabetically(lexicon.all_entries()) == [other, lexeme, plural]

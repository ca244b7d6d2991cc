from __future__ import annotations

import pytest

from logomark.features import (
    FALLBACK_STRATEGY,
    LETTER_ANATOMY,
    LetterAnatomy,
    analyze_word_rhythm,
    count_syllables,
    letter_anatomy,
    letters_of,
    select_letter_strategy,
    select_rhythm_strategy,
)


def test_anatomy_table_covers_alphabet_and_falls_back():
    assert set(LETTER_ANATOMY) == set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    assert letter_anatomy("b") == LETTER_ANATOMY["B"]
    assert letter_anatomy("7") == LETTER_ANATOMY["A"]


@pytest.mark.parametrize(
    "letter,strategy",
    [
        ("S", "ribbon"),
        ("U", "ribbon"),
        ("A", "peaks"),
        ("M", "peaks"),
        ("W", "peaks"),
        ("B", "bubbles"),
        ("P", "bubbles"),
        ("R", "bubbles"),
        ("O", "orbital"),
        ("X", "abstract"),
        ("E", "abstract"),
    ],
)
def test_deconstruction_rules_first_match_wins(letter, strategy):
    assert select_letter_strategy(letter_anatomy(letter)) == strategy


def test_tent_row_matches_crossbarred_diagonals():
    anatomy = LetterAnatomy(0, 0, 1, 2, "pointed", True, False, True, 0.3, "none", "angular")
    assert select_letter_strategy(anatomy) == "tent"
    plain = LetterAnatomy(0, 0, 0, 0, "flat", False, False, False, 0.5, "none", "angular")
    assert select_letter_strategy(plain) == FALLBACK_STRATEGY


@pytest.mark.parametrize("word,syllables", [("cake", 1), ("banana", 3), ("rhythm", 1), ("", 1), ("audio", 2)])
def test_count_syllables(word, syllables):
    assert count_syllables(word) == syllables


def test_short_consonant_heavy_word_is_staccato_high_energy():
    profile = analyze_word_rhythm("Brk")
    assert profile.rhythm_type == "staccato"
    assert profile.energy == "high"
    assert profile.flow == "angular"
    assert profile.pattern == "CCC"


def test_long_vowel_rich_word_is_legato_low_energy():
    profile = analyze_word_rhythm("Aeolianova")
    assert profile.length == 10
    assert profile.rhythm_type == "legato"
    assert profile.energy == "low"
    assert profile.flow == "curved"


def test_alternating_word_is_syncopated():
    profile = analyze_word_rhythm("Banana")
    assert profile.has_alternation
    assert profile.rhythm_type == "syncopated"
    assert profile.emphasis_points == (0, 1, 3, 5)


def test_doubles_and_non_letters():
    profile = analyze_word_rhythm("Coffee & Co.")
    assert profile.has_doubles
    assert profile.length == len("coffeeco")


def test_rhythm_strategy_rotates_with_variant():
    profile = analyze_word_rhythm("Coffee")
    assert select_rhythm_strategy(profile, 0) == "double"
    assert select_rhythm_strategy(profile, 1) == "staccato"
    assert select_rhythm_strategy(profile, 2) == "legato"
    assert select_rhythm_strategy(profile, 3) == "syncopated"
    assert select_rhythm_strategy(profile, 4) == "steady"


def test_letters_of_keeps_ascii_letters_only():
    assert letters_of("7-Eleven") == list("ELEVEN")
    assert letters_of("") == []

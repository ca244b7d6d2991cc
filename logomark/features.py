"""
Letter and word features that drive the letter-family generators.

Decisions are data: ``DECONSTRUCTION_RULES`` and ``RHYTHM_STRATEGIES`` are
ordered tables of (predicate, strategy) rows, and the first matching row wins.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from .geometry.letters import normalize_letter


@dataclass(frozen=True)
class LetterAnatomy:
    stems: int
    bowls: int
    crossbars: int
    diagonals: int
    terminals: str  # "flat" | "round" | "pointed" | "hooked"
    has_ascender: bool
    has_descender: bool
    has_counter: bool
    openness: float
    symmetry: str  # "none" | "vertical" | "horizontal" | "both"
    flow: str  # "angular" | "curved" | "mixed"


def _a(stems, bowls, crossbars, diagonals, terminals, asc, desc, counter, openness, symmetry, flow) -> LetterAnatomy:
    return LetterAnatomy(stems, bowls, crossbars, diagonals, terminals, asc, desc, counter, openness, symmetry, flow)


LETTER_ANATOMY: Dict[str, LetterAnatomy] = {
    "A": _a(2, 0, 1, 2, "pointed", True, False, True, 0.3, "vertical", "angular"),
    "B": _a(1, 2, 0, 0, "round", False, False, True, 0.2, "none", "curved"),
    "C": _a(0, 1, 0, 0, "round", False, False, False, 0.7, "horizontal", "curved"),
    "D": _a(1, 1, 0, 0, "flat", False, False, True, 0.2, "horizontal", "mixed"),
    "E": _a(1, 0, 3, 0, "flat", False, False, False, 0.6, "horizontal", "angular"),
    "F": _a(1, 0, 2, 0, "flat", True, False, False, 0.7, "none", "angular"),
    "G": _a(0, 1, 1, 0, "flat", False, False, False, 0.5, "none", "curved"),
    "H": _a(2, 0, 1, 0, "flat", True, False, True, 0.4, "both", "angular"),
    "I": _a(1, 0, 0, 0, "flat", True, False, False, 0.9, "both", "angular"),
    "J": _a(1, 0, 0, 0, "hooked", False, True, False, 0.8, "none", "mixed"),
    "K": _a(1, 0, 0, 2, "pointed", True, False, False, 0.6, "none", "angular"),
    "L": _a(1, 0, 1, 0, "flat", True, False, False, 0.8, "none", "angular"),
    "M": _a(2, 0, 0, 2, "pointed", True, False, True, 0.3, "vertical", "angular"),
    "N": _a(2, 0, 0, 1, "pointed", True, False, True, 0.4, "none", "angular"),
    "O": _a(0, 1, 0, 0, "round", False, False, True, 0.1, "both", "curved"),
    "P": _a(1, 1, 0, 0, "round", True, False, True, 0.4, "none", "mixed"),
    "Q": _a(0, 1, 0, 1, "pointed", False, True, True, 0.2, "none", "curved"),
    "R": _a(1, 1, 0, 1, "pointed", True, False, True, 0.4, "none", "mixed"),
    "S": _a(0, 0, 0, 0, "round", False, False, False, 0.5, "none", "curved"),
    "T": _a(1, 0, 1, 0, "flat", True, False, False, 0.7, "vertical", "angular"),
    "U": _a(2, 0, 0, 0, "round", False, False, False, 0.5, "vertical", "curved"),
    "V": _a(0, 0, 0, 2, "pointed", True, False, False, 0.6, "vertical", "angular"),
    "W": _a(0, 0, 0, 4, "pointed", True, False, True, 0.4, "vertical", "angular"),
    "X": _a(0, 0, 0, 2, "pointed", False, False, True, 0.6, "both", "angular"),
    "Y": _a(1, 0, 0, 2, "pointed", True, True, False, 0.6, "vertical", "angular"),
    "Z": _a(0, 0, 2, 1, "flat", False, False, False, 0.5, "none", "angular"),
}

DEFAULT_ANATOMY_LETTER = "A"


def letter_anatomy(char: str) -> LetterAnatomy:
    """Anatomy record for ``char``; unknown characters read as ``A``."""
    return LETTER_ANATOMY.get(normalize_letter(char), LETTER_ANATOMY[DEFAULT_ANATOMY_LETTER])


AnatomyRule = Tuple[Callable[[LetterAnatomy], bool], str]

# Ordered; first match wins, "abstract" catches everything else.
DECONSTRUCTION_RULES: Tuple[AnatomyRule, ...] = (
    (lambda a: a.flow == "curved" and a.bowls == 0, "ribbon"),
    (lambda a: a.diagonals >= 2 and a.symmetry == "vertical", "peaks"),
    (lambda a: a.bowls >= 1 and a.stems >= 1, "bubbles"),
    (lambda a: a.bowls == 1 and a.stems == 0 and a.symmetry == "both", "orbital"),
    (lambda a: a.diagonals >= 2 and a.crossbars >= 1, "tent"),
)
FALLBACK_STRATEGY = "abstract"


def select_letter_strategy(anatomy: LetterAnatomy) -> str:
    for predicate, strategy in DECONSTRUCTION_RULES:
        if predicate(anatomy):
            return strategy
    return FALLBACK_STRATEGY


# Word rhythm ---------------------------------------------------------------

VOWELS = frozenset("aeiouy")
_DOUBLE_RE = re.compile(r"(.)\1")


@dataclass(frozen=True)
class RhythmProfile:
    length: int
    syllables: int
    vowel_count: int
    consonant_count: int
    pattern: str  # e.g. "CVCCV"
    emphasis_points: Tuple[int, ...]
    has_doubles: bool
    has_alternation: bool
    rhythm_type: str  # staccato | legato | syncopated | steady
    energy: str  # high | medium | low
    flow: str  # angular | curved | mixed

    @property
    def vowel_ratio(self) -> float:
        return self.vowel_count / self.length if self.length else 0.0


def count_syllables(word: str) -> int:
    text = re.sub(r"[^a-z]", "", (word or "").lower())
    if not text:
        return 1
    groups = 0
    prev_vowel = False
    for ch in text:
        is_vowel = ch in VOWELS
        if is_vowel and not prev_vowel:
            groups += 1
        prev_vowel = is_vowel
    if text.endswith("e") and groups > 1:
        groups -= 1
    return max(1, groups)


def analyze_word_rhythm(word: str) -> RhythmProfile:
    """Rhythm profile of the letters in ``word`` (non-letters ignored)."""
    letters = re.sub(r"[^a-z]", "", (word or "").lower())
    pattern = "".join("V" if ch in VOWELS else "C" for ch in letters)
    length = len(letters)
    vowels = pattern.count("V")
    consonants = length - vowels

    emphasis: List[int] = [0] if length else []
    for i in range(1, length):
        if pattern[i] == "V" and pattern[i - 1] == "C":
            emphasis.append(i)

    alternations = sum(1 for i in range(1, length) if pattern[i] != pattern[i - 1])
    has_alternation = length > 1 and alternations >= 0.7 * length
    vowel_ratio = vowels / length if length else 0.0

    if length <= 4 and consonants > vowels:
        rhythm = "staccato"
    elif length >= 8 and vowel_ratio > 0.4:
        rhythm = "legato"
    elif has_alternation:
        rhythm = "syncopated"
    else:
        rhythm = "steady"

    if length <= 4 or rhythm == "staccato":
        energy = "high"
    elif length >= 8:
        energy = "low"
    else:
        energy = "medium"

    if consonants > vowels * 1.5:
        flow = "angular"
    elif vowels > consonants:
        flow = "curved"
    else:
        flow = "mixed"

    return RhythmProfile(
        length=length,
        syllables=count_syllables(letters),
        vowel_count=vowels,
        consonant_count=consonants,
        pattern=pattern,
        emphasis_points=tuple(emphasis),
        has_doubles=bool(_DOUBLE_RE.search(letters)),
        has_alternation=has_alternation,
        rhythm_type=rhythm,
        energy=energy,
        flow=flow,
    )


RhythmRule = Tuple[Callable[[RhythmProfile, int], bool], str]

# ``style`` rotates variations through the strategies so a batch is varied even
# when the word's own rhythm would always pick the same row.
RHYTHM_STRATEGIES: Tuple[RhythmRule, ...] = (
    (lambda p, style: p.has_doubles and style == 0, "double"),
    (lambda p, style: p.rhythm_type == "staccato" or style == 1, "staccato"),
    (lambda p, style: p.rhythm_type == "legato" or style == 2, "legato"),
    (lambda p, style: p.rhythm_type == "syncopated" or style == 3, "syncopated"),
)
RHYTHM_FALLBACK = "steady"
RHYTHM_STYLE_COUNT = 5


def select_rhythm_strategy(profile: RhythmProfile, variant: int = 0) -> str:
    style = variant % RHYTHM_STYLE_COUNT
    for predicate, strategy in RHYTHM_STRATEGIES:
        if predicate(profile, style):
            return strategy
    return RHYTHM_FALLBACK


def letters_of(text: str) -> Sequence[str]:
    """Alphabetic characters of ``text``, upper-cased, in order."""
    return [ch.upper() for ch in (text or "") if ch.isalpha() and ch.isascii()]


__all__ = [
    "LetterAnatomy",
    "LETTER_ANATOMY",
    "DECONSTRUCTION_RULES",
    "FALLBACK_STRATEGY",
    "letter_anatomy",
    "select_letter_strategy",
    "VOWELS",
    "RhythmProfile",
    "count_syllables",
    "analyze_word_rhythm",
    "RHYTHM_STRATEGIES",
    "RHYTHM_FALLBACK",
    "select_rhythm_strategy",
    "letters_of",
]

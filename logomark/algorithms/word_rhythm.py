"""Marks drawn from the rhythm of the brand name rather than its letters."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..base_params import extend_base
from ..colors import lighten
from ..controller import entry_points
from ..features import analyze_word_rhythm, select_rhythm_strategy
from ..geometry import PathData, bezier_circle, clamp, cubic_path, rotated_rounded_rect, rounded_polygon, thick_segment
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint
from .registry import register_algorithm

MARK_SIZE = 75.0


@dataclass(frozen=True)
class WordRhythmParams(StyleParams):
    strategy: str
    rhythm_type: str
    energy: str
    length: int
    syllables: int
    pattern: str
    emphasis: Tuple[int, ...]
    vowel_ratio: float
    burst_reach: float


def staccato(p, size: float, rng) -> PathData:
    """Jagged polygon with one vertex per letter, emphasis points pushed out."""
    n = max(3, p.length)
    base = size * 0.35
    pts = []
    for i in range(n):
        angle = -math.pi / 2 + i * 2 * math.pi / n
        r = base * (1.3 if i in p.emphasis else 0.8 + rng() * 0.4)
        pts.append((CX + math.cos(angle) * r, CY + math.sin(angle) * r))
    path = rounded_polygon(pts, 0.06)
    bursts = min(n, 5)
    outer = base * (1.2 + p.burst_reach * 0.3)
    for i in range(bursts):
        angle = i / bursts * 2 * math.pi - math.pi / 2
        start = (CX + math.cos(angle) * base * 0.3, CY + math.sin(angle) * base * 0.3)
        end = (CX + math.cos(angle) * outer, CY + math.sin(angle) * outer)
        path.extend(rounded_polygon(thick_segment(start, end, size * 0.06), 0.2))
    return path


def legato(p, size: float, rng) -> PathData:
    """Ribbon riding one sine period per syllable; vowels lift the wave."""
    count = max(2, p.length * 2)
    amp = size * 0.15 * (1 + p.vowel_ratio)
    stroke = size * 0.08
    pts = []
    for i in range(count + 1):
        t = i / count
        y = CY + math.sin(t * math.pi * p.syllables) * amp
        letter = p.pattern[min(len(p.pattern) - 1, int(t * len(p.pattern)))] if p.pattern else "C"
        y += amp * 0.2 if letter == "V" else -amp * 0.1
        pts.append((CX - size * 0.4 + t * size * 0.8, y))
    segments = []
    for prev, cur in zip(pts, pts[1:]):
        mid = prev[0] + (cur[0] - prev[0]) * 0.5
        segments.append(((mid, prev[1] - stroke / 2), (mid, cur[1] - stroke / 2), (cur[0], cur[1] - stroke / 2)))
    end = pts[-1]
    segments.append(((end[0] + stroke * 0.6, end[1] - stroke / 2), (end[0] + stroke * 0.6, end[1] + stroke / 2), (end[0], end[1] + stroke / 2)))
    for prev, cur in zip(pts[::-1], pts[-2::-1]):
        mid = prev[0] + (cur[0] - prev[0]) * 0.5
        segments.append(((mid, prev[1] + stroke / 2), (mid, cur[1] + stroke / 2), (cur[0], cur[1] + stroke / 2)))
    start = pts[0]
    segments.append(((start[0] - stroke * 0.6, start[1] + stroke / 2), (start[0] - stroke * 0.6, start[1] - stroke / 2), (start[0], start[1] - stroke / 2)))
    return cubic_path((start[0], start[1] - stroke / 2), segments)


def syncopated(p, size: float, rng) -> PathData:
    """Vowels as circles, consonants as bars, over a baseline."""
    pattern = p.pattern or "C"
    spacing = size * 0.8 / len(pattern)
    path = PathData()
    for i, kind in enumerate(pattern):
        x = CX - size * 0.35 + i * spacing
        if kind == "V":
            path.extend(bezier_circle(x, CY - spacing * 0.2, spacing * 0.35))
        else:
            path.extend(rotated_rounded_rect(x, CY + spacing * 0.1, spacing * 0.5, spacing * 0.7, spacing * 0.08))
    line_y = CY + size * 0.25
    path.extend(rotated_rounded_rect(CX, line_y, size * 0.76, size * 0.04, size * 0.02))
    return path


def steady(p, size: float, rng) -> PathData:
    """Equalizer bars, one more than the syllable count."""
    count = p.syllables + 1
    width = size * 0.06
    spacing = size * 0.7 / count
    path = PathData()
    for i in range(count):
        x = CX - size * 0.35 + (i + 0.5) * spacing
        hit = any(int(e / max(1, p.length) * count) == i for e in p.emphasis)
        height = size * 0.6 * (1.0 if hit else 0.5 + rng() * 0.3)
        path.extend(rotated_rounded_rect(x, CY, width, height, width / 2))
    return path


def double(p, size: float, rng) -> PathData:
    """Two overlapping circles for a doubled letter, linked by short ticks."""
    r = size * 0.25
    offset = r * 0.6
    path = bezier_circle(CX - offset, CY, r)
    path.extend(bezier_circle(CX + offset, CY, r))
    ticks = clamp(p.length - 2, 0, 4)
    for i in range(int(ticks)):
        angle = i / ticks * math.pi - math.pi / 2
        reach = r * 1.3
        a = (CX + math.cos(angle) * (reach - 2), CY + math.sin(angle) * (reach - 2))
        b = (CX + math.cos(angle) * (reach + 2), CY + math.sin(angle) * (reach + 2))
        path.extend(rounded_polygon(thick_segment(a, b, size * 0.04), 0.2))
    return path


MARKS = {
    "double": double,
    "staccato": staccato,
    "legato": legato,
    "syncopated": syncopated,
    "steady": steady,
}


class WordRhythm(Algorithm):
    name = "word_rhythm"
    family = "letter"
    archetype = "wordmark"
    default_category = "creative"
    min_quality = 80
    description = "Abstract marks from syllables, vowel patterns and emphasis"

    def derive_params(self, derived, base, request, variant=0):
        profile = analyze_word_rhythm(request.brand_name)
        return extend_base(
            WordRhythmParams,
            base,
            strategy=select_rhythm_strategy(profile, variant),
            rhythm_type=profile.rhythm_type,
            energy=profile.energy,
            length=profile.length,
            syllables=profile.syllables,
            pattern=profile.pattern,
            emphasis=profile.emphasis_points,
            vowel_ratio=profile.vowel_ratio,
            burst_reach=derived.scale_factor,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        # Long names squeeze the per-letter marks
        size = MARK_SIZE if p.length <= 12 else MARK_SIZE * 0.9
        mark = MARKS.get(p.strategy, steady)(p, size, rng)
        doc.add_path(mark, fill=paint(doc, palette, p, "rhythm"))
        if p.energy == "high" and p.strategy != "double":
            doc.add_path(bezier_circle(CX, CY, size * 0.07), fill=lighten(palette.accent, 0.1))
        return {"strategy": p.strategy, "rhythm": p.rhythm_type, "energy": p.energy, "syllables": p.syllables}


ALGORITHM = register_algorithm(WordRhythm())
generate_word_rhythm, generate_single_word_rhythm_preview = entry_points(ALGORITHM)

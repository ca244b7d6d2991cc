"""
Letter DNA: rebuild a letter from its anatomy.

The first letter's anatomy record is run through ``DECONSTRUCTION_RULES`` and
the winning strategy draws it: curved letters without bowls become a ribbon,
vertically symmetric diagonals become peaks, stem-and-bowl letters become
bubbles, a symmetric bowl becomes an orbital ring, a crossbarred diagonal
letter becomes a tent. Everything else is reassembled from its stems,
crossbars and diagonals.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..base_params import extend_base
from ..colors import lighten
from ..constants import RIBBON_MAX_SAMPLES
from ..controller import entry_points
from ..features import LetterAnatomy, letter_anatomy, letters_of, select_letter_strategy
from ..geometry import (
    PathData,
    bezier_circle,
    bezier_circle_reversed,
    cubic_path,
    ellipse_ring,
    rounded_polygon,
    tapered_ribbon,
    thick_segment,
)
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint
from .registry import register_algorithm

LETTER_SIZE = 70.0
PAIR_SCALE = 0.7
PAIR_OFFSET = 15.0


@dataclass(frozen=True)
class LetterDnaParams(StyleParams):
    letters: Tuple[str, ...]
    strategies: Tuple[str, ...]
    ribbon_width: float
    amplitude: float
    curve_count: int
    peak_lift: float
    bubble_reach: float
    inner_ratio: float
    tilt: float
    stem_curve: float


def ribbon(p, cx: float, cy: float, size: float) -> PathData:
    """S-curve ribbon, ``curve_count`` half-waves top to bottom."""
    n = p.curve_count * 10
    amp = size * 0.3 * (0.8 + p.amplitude * 0.01)
    line = []
    for i in range(n + 1):
        t = i / n
        line.append((cx + math.sin(t * math.pi * p.curve_count) * amp * 0.6, cy - size * 0.4 + t * size * 0.8))
    half = size * 0.075 + p.ribbon_width * 0.25
    return tapered_ribbon(line, half, half * 0.7, tension=0.5, samples=RIBBON_MAX_SAMPLES)


def peaks(p, cx: float, cy: float, size: float, count: int) -> PathData:
    base = cy + size * 0.35
    height = size * 0.7
    width = size * 0.8 / count
    left = cx - size * 0.4
    path = PathData().move(left, base)
    for i in range(count):
        px = left + width * (i + 0.5)
        py = base - height * (0.7 + (0.3 * p.peak_lift if i == 0 else 0.0))
        path.quad(px - width * 0.2, base - height * 0.3, px, py)
        if i < count - 1:
            path.quad(px + width * 0.2, base - height * 0.3, left + width * (i + 1), base - height * 0.1)
        else:
            path.quad(px + width * 0.3, base - height * 0.2, left + size * 0.8, base)
    return path.close()


def bubbles(p, cx: float, cy: float, size: float, count: int) -> PathData:
    """A stem with ``count`` bowls hanging off its right side."""
    count = max(1, count)
    stem_x, top, bottom = cx - size * 0.25, cy - size * 0.35, cy + size * 0.35
    stem_w = size * 0.08
    path = rounded_polygon(
        [(stem_x - stem_w / 2, top), (stem_x + stem_w / 2, top), (stem_x + stem_w / 2, bottom), (stem_x - stem_w / 2, bottom)],
        0.2,
    )
    bubble = size * 0.35 / math.sqrt(count)
    for i in range(count):
        by = top + (bottom - top) * ((i + 0.5) / count)
        bx = stem_x + bubble * (0.8 + p.bubble_reach * 0.3)
        r = bubble * (1 - i * 0.15)
        x0 = stem_x + stem_w / 2
        path.extend(
            cubic_path(
                (x0, by - r * 0.7),
                [
                    ((stem_x + r * 1.2, by - r * 0.9), (bx + r, by - r * 0.3), (bx + r, by)),
                    ((bx + r, by + r * 0.3), (stem_x + r * 1.2, by + r * 0.9), (x0, by + r * 0.7)),
                ],
            )
        )
    return path


def orbital(p, cx: float, cy: float, size: float) -> PathData:
    outer = size * 0.4
    inner = outer * (0.5 + p.inner_ratio * 0.3)
    squash = 0.7 + min(p.tilt, 90.0) * 0.003
    path = ellipse_ring(cx, cy, (outer + inner) / 2, (outer + inner) / 2 * squash, outer - inner)
    # Satellite riding the ring
    angle = math.radians(p.tilt)
    reach = outer * 1.05
    path.extend(bezier_circle(cx + math.cos(angle) * reach, cy + math.sin(angle) * reach * squash, size * 0.06))
    return path


def tent(p, cx: float, cy: float, size: float) -> PathData:
    apex = (cx, cy - size * 0.4)
    stroke = size * 0.09
    path = PathData()
    for foot in ((cx - size * 0.35, cy + size * 0.35), (cx + size * 0.35, cy + size * 0.35)):
        path.extend(rounded_polygon(thick_segment(apex, foot, stroke), 0.1))
    bar_y, inset = cy + size * 0.1, size * 0.16
    path.extend(rounded_polygon(thick_segment((cx - inset, bar_y), (cx + inset, bar_y), stroke * 0.8), 0.1))
    return path


def abstract(p, anatomy: LetterAnatomy, cx: float, cy: float, size: float) -> PathData:
    """Stems, crossbars and diagonals as separate energy strokes."""
    path = PathData()
    width = size * 0.06
    if anatomy.stems:
        spacing = size * 0.4 / anatomy.stems
        height = size * (0.7 if anatomy.has_ascender else 0.5)
        bend = p.stem_curve * 10
        for i in range(anatomy.stems):
            x = cx - size * 0.2 + i * spacing
            path.move(x - width / 2, cy - height / 2)
            path.quad(x - width / 2 + bend, cy, x - width / 2, cy + height / 2)
            path.line(x + width / 2, cy + height / 2)
            path.quad(x + width / 2 + bend, cy, x + width / 2, cy - height / 2)
            path.close()
    if anatomy.crossbars:
        spacing = size * 0.3 / anatomy.crossbars
        for i in range(anatomy.crossbars):
            y = cy - size * 0.15 + i * spacing
            path.extend(rounded_polygon(thick_segment((cx - size * 0.25, y), (cx + size * 0.25, y), size * 0.05), 0.15))
    for i in range(anatomy.diagonals):
        sign = 1 if i % 2 == 0 else -1
        path.extend(rounded_polygon(thick_segment((cx + sign * size * 0.1, cy - size * 0.3), (cx + sign * size * 0.3, cy + size * 0.3), width), 0.15))
    if anatomy.has_counter:
        r = size * 0.1 * (1 + anatomy.openness)
        # Counter ring: outer contour plus a hole
        path.extend(bezier_circle(cx, cy, r)).extend(bezier_circle_reversed(cx, cy, r * 0.55))
    if not path:
        path.extend(bezier_circle(cx, cy, size * 0.3))
    return path


def deconstruct(p, letter: str, strategy: str, cx: float, cy: float, size: float) -> PathData:
    anatomy = letter_anatomy(letter)
    if strategy == "ribbon":
        return ribbon(p, cx, cy, size)
    if strategy == "peaks":
        return peaks(p, cx, cy, size, 3 if anatomy.diagonals == 4 else 2)
    if strategy == "bubbles":
        return bubbles(p, cx, cy, size, anatomy.bowls)
    if strategy == "orbital":
        return orbital(p, cx, cy, size)
    if strategy == "tent":
        return tent(p, cx, cy, size)
    return abstract(p, anatomy, cx, cy, size)


class LetterDna(Algorithm):
    name = "letter_dna"
    family = "letter"
    archetype = "wordmark"
    default_category = "creative"
    min_quality = 80
    description = "Letters rebuilt from their anatomy: ribbons, peaks, bubbles, orbits"

    def derive_params(self, derived, base, request, variant=0):
        chars = letters_of(request.brand_name)
        letters = tuple(chars[:2]) if variant % 3 == 0 and len(chars) > 1 else tuple(chars[:1]) or ("A",)
        return extend_base(
            LetterDnaParams,
            base,
            letters=letters,
            strategies=tuple(select_letter_strategy(letter_anatomy(ch)) for ch in letters),
            ribbon_width=derived.stroke_width,
            amplitude=derived.curve_amplitude,
            curve_count=2 + derived.element_count % 3,
            peak_lift=derived.scale_factor,
            bubble_reach=derived.overlap_amount,
            inner_ratio=derived.inner_radius,
            tilt=derived.rotation_offset,
            stem_curve=derived.curve_tension,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        fill = paint(doc, palette, p, "dna")
        if len(p.letters) == 2:
            size = LETTER_SIZE * PAIR_SCALE
            doc.add_path(deconstruct(p, p.letters[0], p.strategies[0], CX - PAIR_OFFSET, CY, size), fill=fill)
            second = palette.accent if palette.explicit_accent else lighten(palette.primary, 0.15)
            doc.add_path(deconstruct(p, p.letters[1], p.strategies[1], CX + PAIR_OFFSET, CY, size), fill=second, opacity=0.9)
        else:
            doc.add_path(deconstruct(p, p.letters[0], p.strategies[0], CX, CY, LETTER_SIZE), fill=fill)
        return {"letters": "".join(p.letters), "strategies": list(p.strategies)}


ALGORITHM = register_algorithm(LetterDna())
generate_letter_dna, generate_single_letter_dna_preview = entry_points(ALGORITHM)

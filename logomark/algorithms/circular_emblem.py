from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..controller import entry_points
from ..geometry import (
    PathData,
    arc_band,
    bezier_circle,
    clamp,
    first_letter,
    is_known_letter,
    letterform_path,
    polar,
    rounded_polygon,
    star_path,
    stroke_for_weight,
)
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint, pick
from .registry import register_algorithm

INNER_SYMBOLS = ("star", "letter", "circle", "chevron")
SEALS = ("smooth", "scalloped", "dotted")
OUTER_RADIUS = 42.0


@dataclass(frozen=True)
class CircularEmblemParams(StyleParams):
    ring_count: int
    ring_thickness: float
    ring_gap: float
    inner_symbol: str
    seal_style: str
    star_count: int
    letter: str
    letter_fallback: bool
    letter_weight: int


class CircularEmblem(Algorithm):
    name = "circular_emblem"
    family = "radial"
    archetype = "wordmark"
    default_category = "creative"
    min_quality = 85
    description = "Seal-style circular emblem with rings and a central symbol"

    def derive_params(self, derived, base, request, variant=0):
        head = (request.brand_name or "").strip()[:1]
        return extend_base(
            CircularEmblemParams,
            base,
            ring_count=int(clamp(math.floor(derived.layer_count * 0.5 + 1), 1, 3)),
            ring_thickness=clamp(derived.ring_thickness * 0.25, 1.2, 4.0),
            ring_gap=clamp(derived.segment_spacing * 0.25, 2.5, 6.0),
            inner_symbol=pick(INNER_SYMBOLS, derived.style_variant),
            seal_style=pick(SEALS, derived.color_placement),
            star_count=int(clamp(math.floor(derived.element_count * 0.5 + 3), 5, 15)),
            letter=first_letter(head),
            letter_fallback=not is_known_letter(head),
            letter_weight=derived.letter_weight,
            **style_fields(derived, variant),
        )

    def _seal(self, p):
        if p.seal_style == "scalloped":
            return star_path(CX, CY, OUTER_RADIUS + 3.0, OUTER_RADIUS, p.star_count * 2, corner=0.5)
        if p.seal_style == "dotted":
            dots = PathData()
            for i in range(p.star_count * 2):
                x, y = polar(CX, CY, OUTER_RADIUS + 2.5, 2 * math.pi * i / (p.star_count * 2) - math.pi / 2)
                dots.extend(bezier_circle(x, y, 1.2))
            return dots
        return arc_band(CX, CY, OUTER_RADIUS, OUTER_RADIUS, -90, 270, p.ring_thickness * 1.4)

    def _symbol(self, p, radius):
        if p.inner_symbol == "star":
            return star_path(CX, CY, radius, radius * 0.45, 5, corner=0.12)
        if p.inner_symbol == "letter":
            return letterform_path(p.letter, CX, CY, radius, stroke_for_weight(p.letter_weight, radius * 2))
        if p.inner_symbol == "circle":
            return bezier_circle(CX, CY, radius * 0.75)
        chevron = [
            (CX - radius, CY - radius * 0.2),
            (CX, CY + radius * 0.5),
            (CX + radius, CY - radius * 0.2),
            (CX + radius, CY + radius * 0.25),
            (CX, CY + radius * 0.95),
            (CX - radius, CY + radius * 0.25),
        ]
        return rounded_polygon(chevron, 0.15)

    def build_geometry(self, p, doc, palette, rng):
        fill = paint(doc, palette, p, "emblem")
        doc.add_path(self._seal(p), fill=fill)
        radius = OUTER_RADIUS - 4.0
        for _ in range(p.ring_count):
            doc.add_path(arc_band(CX, CY, radius, radius, -90, 270, p.ring_thickness), fill=fill)
            radius -= p.ring_gap + p.ring_thickness
        symbol_radius = clamp(radius * 0.7, 8.0, 22.0)
        doc.add_path(self._symbol(p, symbol_radius), fill=paint(doc, palette, p, "symbol", invert=True), fill_rule="nonzero")
        meta = {"rings": p.ring_count, "symbol": p.inner_symbol, "seal": p.seal_style}
        if p.inner_symbol == "letter":
            meta.update(letter=p.letter, letter_fallback=p.letter_fallback)
        return meta


ALGORITHM = register_algorithm(CircularEmblem())
generate_circular_emblem, generate_single_circular_emblem_preview = entry_points(ALGORITHM)

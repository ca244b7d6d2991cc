"""Nested hexagons with optional circuit-style spokes."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import (
    PathData,
    Point,
    bezier_circle,
    clamp,
    first_letter,
    letterform_path,
    polar,
    stroke_for_weight,
)
from ..svg import url
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, pick
from .registry import register_algorithm

INNER_SHAPES = ("none", "hexagon", "circle", "letter")
CONNECTIONS = ("none", "lines", "nodes")
TECH_PATTERNS = ("solid", "circuit", "grid")
OUTER_RADIUS = 38.0
NEST_SCALES = (0.7, 0.45)
CURVE_FACTOR = 0.1


@dataclass(frozen=True)
class HexagonTechParams(StyleParams):
    inner_shape: str
    border_thickness: float
    cell_count: int
    connection_style: str
    tech_pattern: str
    glow: bool
    rotation: float
    nesting_level: int
    letter: str
    letter_weight: int


def hexagon_points(cx: float, cy: float, radius: float, rotation: float = 0.0):
    return [polar(cx, cy, radius, math.pi / 3 * i + rotation - math.pi / 6) for i in range(6)]


def curved_polygon(points: Sequence[Point], curve_factor: float = CURVE_FACTOR) -> PathData:
    """Closed polygon whose edges bow slightly toward the following vertex."""
    n = len(points)
    path = PathData().move(*points[0])
    for i in range(n):
        cur, nxt, after = points[i], points[(i + 1) % n], points[(i + 2) % n]
        path.cubic(
            cur[0] + (nxt[0] - cur[0]) * (1 - curve_factor),
            cur[1] + (nxt[1] - cur[1]) * (1 - curve_factor),
            nxt[0] - (after[0] - cur[0]) * curve_factor * 0.5,
            nxt[1] - (after[1] - cur[1]) * curve_factor * 0.5,
            *nxt,
        )
    return path.close()


class HexagonTech(Algorithm):
    name = "hexagon_tech"
    family = "nested"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 85
    description = "Hexagonal patterns with circuit-like connections"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            HexagonTechParams,
            base,
            inner_shape=pick(INNER_SHAPES, derived.style_variant),
            border_thickness=derived.stroke_width * 0.5 + 2,
            cell_count=int(clamp(round(derived.element_count * 0.3), 1, 7)),
            connection_style=pick(CONNECTIONS, derived.color_placement),
            tech_pattern=pick(TECH_PATTERNS, derived.style_variant),
            glow=derived.organic_amount > 0.6,
            rotation=math.radians(derived.rotation_offset * 0.1),
            nesting_level=int(clamp(math.floor(derived.layer_count * 0.6), 0, len(NEST_SCALES))),
            letter=first_letter(request.brand_name),
            letter_weight=derived.letter_weight,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        main = gradient_between(doc, "hex", lighten(palette.primary, 0.2), darken(palette.primary, 0.2), 135.0)
        if p.glow:
            glow = doc.add_radial_gradient("glow", [(0.0, palette.accent, 0.5), (1.0, palette.accent, 0.0)], r=50.0)
            doc.add_path(bezier_circle(CX, CY, OUTER_RADIUS + 8.0), fill=url(glow))
        doc.add_path(curved_polygon(hexagon_points(CX, CY, OUTER_RADIUS, p.rotation)), fill=main)

        fills = (darken(palette.primary, 0.15), palette.accent)
        for level in range(p.nesting_level):
            r = OUTER_RADIUS * NEST_SCALES[level]
            doc.add_path(curved_polygon(hexagon_points(CX, CY, r, p.rotation)), fill=fills[level])

        spokes = 0
        if p.connection_style != "none" and p.tech_pattern == "circuit":
            reach = OUTER_RADIUS * 0.9 * 0.7
            lines = PathData()
            nodes = PathData()
            for i in range(6):
                angle = math.pi / 3 * i - math.pi / 6 + p.rotation
                end = polar(CX, CY, reach, angle)
                mid = polar(CX, CY, reach * 0.5, angle)
                lines.move(CX, CY).cubic(*mid, *mid, *end)
                if p.connection_style == "nodes":
                    nodes.extend(bezier_circle(end[0], end[1], 2.0))
                spokes += 1
            doc.add_path(lines, stroke=lighten(palette.accent, 0.1), stroke_width=clamp(p.border_thickness * 0.3, 0.8, 2.5), linecap="round")
            doc.add_path(nodes, fill=palette.accent)

        inner_r = OUTER_RADIUS * 0.3
        if p.inner_shape == "hexagon":
            doc.add_path(curved_polygon(hexagon_points(CX, CY, inner_r, p.rotation + math.pi / 6)), fill=lighten(palette.accent, 0.15))
        elif p.inner_shape == "circle":
            doc.add_path(bezier_circle(CX, CY, inner_r * 0.8), fill=lighten(palette.accent, 0.15))
        elif p.inner_shape == "letter":
            doc.add_path(
                letterform_path(p.letter, CX, CY, inner_r, stroke_for_weight(p.letter_weight, inner_r * 2)),
                fill="#ffffff",
                fill_rule="nonzero",
            )
        return {"nesting": p.nesting_level, "spokes": spokes, "inner": p.inner_shape}


ALGORITHM = register_algorithm(HexagonTech())
generate_hexagon_tech, generate_single_hexagon_tech_preview = entry_points(ALGORITHM)

from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import lighten
from ..controller import entry_points
from ..geometry import PHI_INVERSE, PathData, clamp, regular_polygon, regular_polygon_points, rounded_polygon, thick_segment
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint, pick
from .registry import register_algorithm

ORIENTATIONS = ("up", "down", "right", "left")
_ROTATION = {"up": 0.0, "down": math.pi, "right": math.pi / 2, "left": -math.pi / 2}


@dataclass(frozen=True)
class PerfectTriangleParams(StyleParams):
    orientation: str
    radius: float
    corner: float
    nest_count: int
    split: bool
    spokes: bool


class PerfectTriangle(Algorithm):
    name = "perfect_triangle"
    family = "nested"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 80
    description = "Single precise triangle with golden-ratio nesting"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            PerfectTriangleParams,
            base,
            orientation=pick(ORIENTATIONS, derived.style_variant),
            radius=40.0 * derived.outer_radius + 4.0,
            corner=0.04 + derived.roundness * 0.16,
            nest_count=int(clamp(derived.nesting_level - 1, 0, 3)),
            split=derived.fill_stroke_ratio > 0.6,
            spokes=derived.branch_count > 3,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        rotation = _ROTATION[p.orientation]
        # Triangle centroid sits on the canvas center, so the circumradius is the reach
        doc.add_path(regular_polygon(CX, CY, p.radius, 3, rotation, p.corner), fill=paint(doc, palette, p, "triangle"))
        verts = regular_polygon_points(CX, CY, p.radius, 3, rotation)
        if p.split:
            mid = ((verts[1][0] + verts[2][0]) / 2, (verts[1][1] + verts[2][1]) / 2)
            half = rounded_polygon([verts[0], verts[1], mid], p.corner * 0.5)
            doc.add_path(half, fill=lighten(palette.accent, 0.08), opacity=0.55)

        radius = p.radius
        for level in range(p.nest_count):
            radius *= PHI_INVERSE
            flip = math.pi if level % 2 == 0 else 0.0
            fill = paint(doc, palette, p, "triangle-nest", invert=level % 2 == 0)
            doc.add_path(regular_polygon(CX, CY, radius, 3, rotation + flip, p.corner), fill=fill)

        if p.spokes:
            spokes = PathData()
            for v in verts:
                spokes.extend(rounded_polygon(thick_segment((CX, CY), v, 1.2), 0.0))
            doc.add_path(spokes, fill="#ffffff", opacity=0.4, fill_rule="nonzero")
        return {"orientation": p.orientation, "nested": p.nest_count, "split": p.split}


ALGORITHM = register_algorithm(PerfectTriangle())
generate_perfect_triangle, generate_single_perfect_triangle_preview = entry_points(ALGORITHM)

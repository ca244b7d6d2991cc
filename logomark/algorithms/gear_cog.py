from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken
from ..controller import entry_points
from ..geometry import PathData, arc_band, bezier_circle, bezier_circle_reversed, clamp, polar, rounded_polygon, thick_segment
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint, pick
from .registry import register_algorithm

SPOKES = ("none", "lines", "curved", "holes")


@dataclass(frozen=True)
class GearCogParams(StyleParams):
    tooth_count: int
    tooth_depth: float
    tooth_width: float
    rounded_teeth: bool
    outer_radius: float
    hub_radius: float
    spoke_style: str
    spoke_count: int
    inner_ring: bool
    bevel: bool


def gear_outline(p: GearCogParams, cx: float, cy: float) -> PathData:
    """Tooth profile per step: inner arc, rise, top arc, fall."""
    outer = p.outer_radius
    inner = outer - p.tooth_depth
    step = 2 * math.pi / p.tooth_count
    tooth = step * p.tooth_width
    gap = step - tooth
    path = PathData()
    for i in range(p.tooth_count):
        start = i * step - math.pi / 2
        rise = start + gap * 0.5
        fall = rise + tooth
        if i == 0:
            path.move(*polar(cx, cy, inner, start))
        mid = polar(cx, cy, inner, (start + rise) / 2)
        rise_in = polar(cx, cy, inner, rise)
        path.cubic(*mid, *rise_in, *rise_in)
        rise_out = polar(cx, cy, outer, rise)
        fall_out = polar(cx, cy, outer, fall)
        fall_in = polar(cx, cy, inner, fall)
        if p.rounded_teeth:
            path.cubic(
                rise_in[0] + (rise_out[0] - rise_in[0]) * 0.3,
                rise_in[1] + (rise_out[1] - rise_in[1]) * 0.3,
                *rise_out,
                *rise_out,
            )
        else:
            path.line(*rise_out)
        path.cubic(*polar(cx, cy, outer, (rise + fall) / 2), *fall_out, *fall_out)
        if p.rounded_teeth:
            path.cubic(
                fall_out[0] + (fall_in[0] - fall_out[0]) * 0.7,
                fall_out[1] + (fall_in[1] - fall_out[1]) * 0.7,
                *fall_in,
                *fall_in,
            )
        else:
            path.line(*fall_in)
        end = polar(cx, cy, inner, start + step)
        path.cubic(*polar(cx, cy, inner, (fall + start + step) / 2), *end, *end)
    return path.close()


class GearCog(Algorithm):
    name = "gear_cog"
    family = "nested"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 85
    description = "Mechanical gear with tooth profile, hub and spokes"

    def derive_params(self, derived, base, request, variant=0):
        outer = derived.scale_factor * 8 + 32
        return extend_base(
            GearCogParams,
            base,
            tooth_count=int(clamp(math.floor(derived.element_count * 1.2 + 8), 8, 20)),
            tooth_depth=derived.curve_tension * 6 + 4,
            tooth_width=clamp(derived.stroke_width * 0.03 + 0.35, 0.3, 0.6),
            rounded_teeth=derived.taper_ratio > 0.5,
            outer_radius=min(outer, 45.0),
            hub_radius=clamp(derived.center_radius * 0.3 + 5.0, 5.0, 12.0),
            spoke_style=pick(SPOKES, derived.style_variant),
            spoke_count=int(clamp(derived.color_placement % 6 + 3, 3, 8)),
            inner_ring=derived.layer_count > 2,
            bevel=derived.perspective_strength > 0.5,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        body = gear_outline(p, CX, CY)
        hub_hole = p.hub_radius * 0.45
        body.extend(bezier_circle_reversed(CX, CY, hub_hole))
        if p.spoke_style == "holes":
            ring_r = (p.outer_radius - p.tooth_depth + p.hub_radius) / 2
            hole_r = clamp((ring_r - p.hub_radius) * 0.6, 1.5, 6.0)
            for i in range(p.spoke_count):
                x, y = polar(CX, CY, ring_r, 2 * math.pi * i / p.spoke_count - math.pi / 2)
                body.extend(bezier_circle_reversed(x, y, hole_r))
        if p.bevel:
            doc.add_path(gear_outline(p, CX + 1.2, CY + 1.2), fill=darken(palette.primary, 0.25), opacity=0.5)
        doc.add_path(body, fill=paint(doc, palette, p, "gear"), fill_rule="nonzero")

        inner = p.outer_radius - p.tooth_depth
        if p.inner_ring:
            doc.add_path(arc_band(CX, CY, inner * 0.78, inner * 0.78, -90, 270, 1.6), fill=palette.accent, opacity=0.8)
        if p.spoke_style in ("lines", "curved"):
            spokes = PathData()
            for i in range(p.spoke_count):
                angle = 2 * math.pi * i / p.spoke_count - math.pi / 2
                a = polar(CX, CY, p.hub_radius, angle)
                b = polar(CX, CY, inner * 0.78, angle + (0.25 if p.spoke_style == "curved" else 0.0))
                spokes.extend(rounded_polygon(thick_segment(a, b, 2.0), 0.2))
            doc.add_path(spokes, fill=palette.accent, fill_rule="nonzero")
        doc.add_path(bezier_circle(CX, CY, p.hub_radius), fill=palette.accent)
        doc.add_path(bezier_circle_reversed(CX, CY, hub_hole), fill=darken(palette.accent, 0.3))
        return {"teeth": p.tooth_count, "spokes": p.spoke_style, "inner_ring": p.inner_ring}


ALGORITHM = register_algorithm(GearCog())
generate_gear_cog, generate_single_gear_cog_preview = entry_points(ALGORITHM)

from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import PathData, bezier_circle, bezier_ellipse, clamp, polar, rounded_polygon, star_path
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint, pick
from .registry import register_algorithm

CUTS = ("brilliant", "princess", "emerald", "oval")
GEM_WIDTH = 72.0


@dataclass(frozen=True)
class DiamondGemParams(StyleParams):
    cut: str
    facet_count: int
    table_size: float
    crown_height: float
    pavilion_depth: float
    sparkle_count: int
    light_direction: float


class DiamondGem(Algorithm):
    name = "diamond_gem"
    family = "nested"
    archetype = "symbol"
    default_category = "creative"
    min_quality = 85
    description = "Faceted gem cuts with table, crown and pavilion"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            DiamondGemParams,
            base,
            cut=pick(CUTS, derived.style_variant),
            facet_count=int(clamp(math.floor(derived.element_count * 0.6 + 6), 6, 12)),
            table_size=derived.taper_ratio * 0.3 + 0.3,
            crown_height=(derived.perspective_strength * 0.2 + 0.15) * 60.0,
            pavilion_depth=clamp(derived.curve_tension * 20 + 35, 35.0, 52.0),
            sparkle_count=derived.color_placement % 4,
            light_direction=derived.rotation_offset,
            **style_fields(derived, variant),
        )

    def _brilliant(self, p, doc, palette, fill):
        half = GEM_WIDTH / 2
        table = half * p.table_size
        top = CY - p.crown_height - 6.0
        girdle = top + p.crown_height
        bottom = min(95.0, girdle + p.pavilion_depth)
        outline = [(CX - table, top), (CX + table, top), (CX + half, girdle), (CX, bottom), (CX - half, girdle)]
        doc.add_path(rounded_polygon(outline, 0.04), fill=fill)
        facets = PathData()
        steps = p.facet_count // 2
        for i in range(steps + 1):
            gx = CX - half + GEM_WIDTH * i / steps
            tx = CX - table + 2 * table * i / steps
            facets.move(tx, top).line(gx, girdle).line(CX, bottom)
        facets.move(CX - half, girdle).line(CX + half, girdle)
        doc.add_path(facets, stroke=lighten(palette.primary, 0.35), stroke_width=0.8, opacity=0.7, linecap="round")

    def _princess(self, p, doc, palette, fill):
        r = GEM_WIDTH / 2
        outer = [(CX, CY - r), (CX + r, CY), (CX, CY + r), (CX - r, CY)]
        inner_r = r * p.table_size * 1.4
        inner = [(CX, CY - inner_r), (CX + inner_r, CY), (CX, CY + inner_r), (CX - inner_r, CY)]
        doc.add_path(rounded_polygon(outer, 0.06), fill=fill)
        facets = PathData()
        for a, b in zip(outer, inner):
            facets.move(*a).line(*b)
        doc.add_path(facets, stroke=lighten(palette.primary, 0.35), stroke_width=0.8, opacity=0.7)
        doc.add_path(rounded_polygon(inner, 0.06), fill=lighten(palette.accent, 0.1), opacity=0.85)

    def _emerald(self, p, doc, palette, fill):
        w, h = GEM_WIDTH * 0.8, GEM_WIDTH
        for k, scale in enumerate((1.0, 0.72, 0.45)):
            hw, hh = w * scale / 2, h * scale / 2
            cut = min(hw, hh) * 0.35
            octagon = [
                (CX - hw + cut, CY - hh), (CX + hw - cut, CY - hh), (CX + hw, CY - hh + cut), (CX + hw, CY + hh - cut),
                (CX + hw - cut, CY + hh), (CX - hw + cut, CY + hh), (CX - hw, CY + hh - cut), (CX - hw, CY - hh + cut),
            ]
            color = fill if k == 0 else (lighten(palette.primary, 0.12 * k) if k == 1 else palette.accent)
            doc.add_path(rounded_polygon(octagon, 0.08), fill=color)

    def _oval(self, p, doc, palette, fill):
        rx, ry = GEM_WIDTH * 0.4, GEM_WIDTH / 2
        doc.add_path(bezier_ellipse(CX, CY, rx, ry), fill=fill)
        inner = star_path(CX, CY, ry * 0.8, ry * 0.8 * p.table_size * 1.2, p.facet_count, corner=0.05)
        doc.add_path(inner, fill=lighten(palette.accent, 0.1), opacity=0.6)
        doc.add_path(bezier_ellipse(CX, CY, rx * p.table_size, ry * p.table_size), fill=lighten(palette.primary, 0.25), opacity=0.8)

    def build_geometry(self, p, doc, palette, rng):
        fill = paint(doc, palette, p, "gem")
        {"brilliant": self._brilliant, "princess": self._princess, "emerald": self._emerald, "oval": self._oval}[p.cut](p, doc, palette, fill)
        sparkles = PathData()
        for i in range(p.sparkle_count):
            x, y = polar(CX, CY, 30.0 - i * 4, math.radians(p.light_direction + i * 50))
            sparkles.extend(star_path(x, y, 3.2, 0.8, 4, corner=0.1))
        doc.add_path(sparkles, fill="#ffffff", opacity=0.9)
        if not sparkles:
            doc.add_path(bezier_circle(CX - 8.0, CY - 10.0, 1.6), fill=darken("#ffffff", 0.02), opacity=0.7)
        return {"cut": p.cut, "facets": p.facet_count, "sparkles": p.sparkle_count}


ALGORITHM = register_algorithm(DiamondGem())
generate_diamond_gem, generate_single_diamond_gem_preview = entry_points(ALGORITHM)

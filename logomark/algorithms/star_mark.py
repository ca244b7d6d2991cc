from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import PathData, bezier_circle, clamp, rounded_polygon, star_path, star_points
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint, pick
from .registry import register_algorithm

RAYS = ("pointed", "rounded", "beveled", "split")
_RAY_CORNER = {"pointed": 0.0, "rounded": 0.25, "beveled": 0.1, "split": 0.04}


@dataclass(frozen=True)
class StarMarkParams(StyleParams):
    point_count: int
    outer_radius: float
    inner_ratio: float
    ray_style: str
    inner_star: bool
    inner_scale: float
    glow_rays: bool
    dimensional: bool


class StarMark(Algorithm):
    name = "star_mark"
    family = "nested"
    archetype = "symbol"
    default_category = "creative"
    min_quality = 85
    description = "Star polygon with alternating radii and a nested inner star"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            StarMarkParams,
            base,
            rotation_offset=derived.rotation_offset if not derived.is_rotationally_symmetric else 0.0,
            point_count=int(clamp(math.floor(derived.element_count * 0.4 + 4), 4, 8)),
            outer_radius=min(derived.scale_factor * 8 + 32, 44.0),
            inner_ratio=clamp(0.3 + derived.center_radius / 25.0 * 0.3, 0.3, 0.6),
            ray_style=pick(RAYS, derived.style_variant),
            inner_star=derived.layer_count > 2,
            inner_scale=derived.taper_ratio * 0.3 + 0.3,
            glow_rays=derived.organic_amount > 0.6,
            dimensional=derived.perspective_strength > 0.5,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        rotation = math.radians(p.rotation_offset)
        inner = p.outer_radius * p.inner_ratio
        corner = _RAY_CORNER[p.ray_style]
        if p.glow_rays:
            glow = star_path(CX, CY, min(p.outer_radius * 1.12, 47.0), inner * 1.1, p.point_count, rotation + math.pi / p.point_count, corner=0.3)
            doc.add_path(glow, fill=lighten(palette.accent, 0.2), opacity=0.35)
        doc.add_path(star_path(CX, CY, p.outer_radius, inner, p.point_count, rotation, corner), fill=paint(doc, palette, p, "star"))

        if p.ray_style == "split" or p.dimensional:
            # One shaded facet per ray: center, tip, following valley
            pts = star_points(CX, CY, p.outer_radius, inner, p.point_count, rotation)
            facets = PathData()
            for i in range(0, len(pts), 2):
                facets.extend(rounded_polygon([(CX, CY), pts[i], pts[(i + 1) % len(pts)]], 0.0))
            doc.add_path(facets, fill=darken(palette.primary, 0.2), opacity=0.35)

        if p.inner_star:
            r = p.outer_radius * p.inner_scale
            doc.add_path(
                star_path(CX, CY, r, r * p.inner_ratio, p.point_count, rotation, corner + 0.1),
                fill=paint(doc, palette, p, "star-inner", invert=True),
            )
        else:
            doc.add_path(bezier_circle(CX, CY, inner * 0.45), fill=palette.accent)
        return {"points": p.point_count, "rays": p.ray_style, "inner_star": p.inner_star}


ALGORITHM = register_algorithm(StarMark())
generate_star_mark, generate_single_star_mark_preview = entry_points(ALGORITHM)

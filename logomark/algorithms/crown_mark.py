from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import PathData, bezier_circle, bezier_rounded_rect, clamp, rounded_polygon, thick_segment
from .base import Algorithm, StyleParams, style_fields
from .common import CX, paint, pick
from .registry import register_algorithm

JEWELS = ("none", "circles", "diamonds", "mixed")
BASE_Y = 70.0


@dataclass(frozen=True)
class CrownMarkParams(StyleParams):
    point_count: int
    jewel_style: str
    crown_width: float
    arch_height: float
    point_height: float
    rim_thickness: float
    base_decoration: bool
    center_cross: bool
    velvet: bool


class CrownMark(Algorithm):
    name = "crown_mark"
    family = "nested"
    archetype = "symbol"
    default_category = "creative"
    min_quality = 85
    description = "Regal crown shapes with jewel details"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            CrownMarkParams,
            base,
            point_count=int(clamp(math.floor(derived.element_count * 0.4 + 3), 3, 7)),
            jewel_style=pick(JEWELS, derived.style_variant),
            crown_width=(derived.taper_ratio * 0.3 + 0.7) * 64.0,
            arch_height=derived.curve_tension * 20 + 10,
            point_height=clamp(derived.arm_length * 0.5 + 15, 20.0, 44.0),
            rim_thickness=clamp(derived.stroke_width * 0.3 + 3, 4.0, 9.0),
            base_decoration=derived.layer_count > 2,
            center_cross=derived.organic_amount > 0.6,
            velvet=derived.perspective_strength > 0.5,
            **style_fields(derived, variant),
        )

    def _tips(self, p):
        x0 = CX - p.crown_width / 2
        n = p.point_count
        tips = []
        for i in range(n):
            t = i / (n - 1)
            lift = 1.1 if n % 2 and i == n // 2 else 1.0
            tips.append((x0 + p.crown_width * t, BASE_Y - p.point_height * lift))
        return tips

    def build_geometry(self, p, doc, palette, rng):
        tips = self._tips(p)
        x0, x1 = tips[0][0], tips[-1][0]
        valley_y = BASE_Y - min(p.arch_height, p.point_height * 0.7)
        outline = [(x0, BASE_Y)]
        for i, tip in enumerate(tips):
            outline.append(tip)
            if i < len(tips) - 1:
                outline.append(((tip[0] + tips[i + 1][0]) / 2, valley_y))
        outline.append((x1, BASE_Y))
        if p.velvet:
            doc.add_path(rounded_polygon(outline, 0.08), fill=darken(palette.primary, 0.3), opacity=0.4)
        doc.add_path(rounded_polygon(outline, 0.12), fill=paint(doc, palette, p, "crown"))

        rim = bezier_rounded_rect(x0 - 2, BASE_Y - 1, p.crown_width + 4, p.rim_thickness, p.rim_thickness / 2)
        doc.add_path(rim, fill=paint(doc, palette, p, "rim", invert=True))
        if p.base_decoration:
            band_y = BASE_Y + p.rim_thickness + 3
            doc.add_path(bezier_rounded_rect(x0 + 4, band_y, p.crown_width - 8, 2.5, 1.2), fill=palette.accent, opacity=0.8)

        jewels = PathData()
        for i, (x, y) in enumerate(tips):
            use_circle = p.jewel_style == "circles" or (p.jewel_style == "mixed" and i % 2 == 0)
            if use_circle:
                jewels.extend(bezier_circle(x, y, 2.6))
            elif p.jewel_style != "none":
                jewels.extend(rounded_polygon([(x, y - 3.2), (x + 2.4, y), (x, y + 3.2), (x - 2.4, y)], 0.1))
        doc.add_path(jewels, fill=lighten(palette.accent, 0.15))

        if p.center_cross:
            top = min(y for _, y in tips) - 9.0
            cross = PathData()
            cross.extend(rounded_polygon(thick_segment((CX, max(3.0, top)), (CX, top + 8.0), 2.0), 0.2))
            cross.extend(rounded_polygon(thick_segment((CX - 3.0, top + 3.0), (CX + 3.0, top + 3.0), 2.0), 0.2))
            doc.add_path(cross, fill=palette.accent, fill_rule="nonzero")
        return {"points": p.point_count, "jewels": p.jewel_style, "cross": p.center_cross}


ALGORITHM = register_algorithm(CrownMark())
generate_crown_mark, generate_single_crown_mark_preview = entry_points(ALGORITHM)

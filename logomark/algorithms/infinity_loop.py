from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import lighten, mix
from ..constants import RIBBON_MAX_SAMPLES
from ..controller import entry_points
from ..geometry import bezier_circle, infinity_points, rotate_point, tapered_ribbon
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, fit_groups, gradient_between, paint
from .registry import register_algorithm

SAMPLES = 32


@dataclass(frozen=True)
class InfinityLoopParams(StyleParams):
    loop_width: float
    loop_height: float
    crossover_angle: float
    stroke_taper: float
    thickness: float
    twist_amount: float
    gradient_flow: bool
    inner_gap: float
    smoothness: float
    ribbon_style: bool


class InfinityLoop(Algorithm):
    name = "infinity_loop"
    family = "overlap"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 80
    description = "Figure-eight loop built from two crossing ribbon strands"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            InfinityLoopParams,
            base,
            loop_width=derived.arm_length * 0.8 + 30,
            loop_height=derived.arm_width * 1.5 + 20,
            crossover_angle=derived.rotation_offset * 0.15 + 20,
            stroke_taper=derived.taper_ratio,
            thickness=derived.stroke_width * 0.8 + 3,
            twist_amount=derived.organic_amount,
            gradient_flow=derived.style_variant % 2 == 0,
            inner_gap=derived.center_radius * 0.4 + 2,
            smoothness=derived.curve_tension * 0.5 + 0.5,
            ribbon_style=derived.style_variant > 4,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        tilt = math.radians((p.crossover_angle - 47.0) * 0.3)
        loop = [rotate_point(pt, (CX, CY), tilt) for pt in infinity_points(CX, CY, p.loop_width, p.loop_height, SAMPLES)]
        half = SAMPLES // 2
        # Each strand runs lobe tip to lobe tip through the crossing
        strands = fit_groups([loop[:half + 1], loop[half:]], margin=8.0 + p.thickness / 2)
        end_ratio = p.stroke_taper if p.ribbon_style else 1.0
        fills = [paint(doc, palette, p, "strand")]
        if p.gradient_flow:
            fills.append(gradient_between(doc, "strand", palette.accent, palette.primary, p.gradient_angle + 180))
        else:
            fills.append(paint(doc, palette, p, "strand", invert=True))
        for strand, fill in zip(strands, fills):
            ribbon = tapered_ribbon(
                strand,
                p.thickness / 2,
                p.thickness / 2 * max(0.35, end_ratio),
                tension=p.smoothness,
                bulge=p.twist_amount * 0.3,
                samples=RIBBON_MAX_SAMPLES,
            )
            doc.add_path(ribbon, fill=fill)
        if p.twist_amount > 0.5:
            # Accent eyes in each lobe
            for strand in strands:
                x, y = strand[len(strand) // 4]
                ex, ey = (x + CX) / 2, (y + CY) / 2
                doc.add_path(bezier_circle(ex, ey, min(p.inner_gap, 4.0)), fill=lighten(mix(palette.primary, palette.accent, 0.5), 0.2), opacity=0.7)
        return {"ribbon": p.ribbon_style, "thickness": round(p.thickness, 2), "gradient_flow": p.gradient_flow}


ALGORITHM = register_algorithm(InfinityLoop())
generate_infinity_loop, generate_single_infinity_loop_preview = entry_points(ALGORITHM)

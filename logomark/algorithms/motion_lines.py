"""Stacked horizontal speed lines, tapered and gently waved."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..controller import entry_points
from ..geometry import clamp, tapered_ribbon
from ..seed import add_noise
from .base import Algorithm, StyleParams, style_fields
from .common import CY, layer_colors, paint, pick
from .registry import register_algorithm

TAPERS = ("right", "left", "both", "none")


@dataclass(frozen=True)
class MotionLinesParams(StyleParams):
    line_count: int
    line_thickness: float
    line_spacing: float
    line_length: float
    stagger_offset: float
    velocity_effect: float
    wave_amplitude: float
    taper_direction: str


class MotionLines(Algorithm):
    name = "motion_lines"
    family = "radial"
    archetype = "wordmark"
    default_category = "technology"
    min_quality = 80
    description = "Stacked horizontal lines with motion feel and wave effects"

    def derive_params(self, derived, base, request, variant=0):
        count = int(clamp(derived.layer_count + 2, 3, 7))
        thickness = clamp(derived.stroke_width * 0.6, 2.0, 7.0)
        spacing = clamp(thickness * 2.0 * derived.spacing_factor, thickness * 1.6, 70.0 / count)
        return extend_base(
            MotionLinesParams,
            base,
            curve_tension=derived.curve_tension,
            line_count=count,
            line_thickness=thickness,
            line_spacing=spacing,
            line_length=clamp(derived.arm_length + 20.0, 40.0, 76.0),
            stagger_offset=derived.offset_x,
            velocity_effect=derived.flow_intensity,
            wave_amplitude=derived.wave_amplitude * 0.25,
            taper_direction=pick(TAPERS, derived.style_variant),
            **style_fields(derived, variant),
        )

    def _widths(self, p):
        """(start, end, bulge) half-widths for the taper direction."""
        half = p.line_thickness / 2
        tip = half * max(0.2, 1.0 - 0.8 * p.velocity_effect)
        return {
            "right": (half, tip, 0.0),
            "left": (tip, half, 0.0),
            "both": (tip, tip, half / tip - 1.0),
            "none": (half, half, 0.0),
        }[p.taper_direction]

    def build_geometry(self, p, doc, palette, rng):
        colors = layer_colors(palette, p.line_count, p.color_placement)
        main = paint(doc, palette, p, "line")
        start_w, end_w, bulge = self._widths(p)
        total = p.line_spacing * (p.line_count - 1)
        for i in range(p.line_count):
            y = CY - total / 2 + i * p.line_spacing
            t = i / max(1, p.line_count - 1)
            stagger = p.stagger_offset * (1 if i % 2 == 0 else -1) * t
            length = p.line_length * (1.0 - 0.25 * abs(t - 0.5))
            if not p.symmetric:
                length += add_noise(0.0, p.noise_amount, rng, 6.0)
            x0 = clamp(50.0 - length / 2 + stagger, 6.0, 60.0)
            x1 = clamp(x0 + max(10.0, length), x0 + 10.0, 94.0)
            pts = []
            for k in range(7):
                u = k / 6
                wave = math.sin(u * math.pi * 2 + i * 0.7) * p.wave_amplitude * (1.0 - u * 0.5)
                pts.append((x0 + (x1 - x0) * u, y + wave))
            ribbon = tapered_ribbon(pts, start_w, end_w, tension=p.curve_tension, bulge=bulge, samples=5)
            fill = main if (p.color_placement % 2 == 0 or i % 2 == 0) else colors[i]
            doc.add_path(ribbon, fill=fill, opacity=clamp(p.base_opacity - p.opacity_falloff * t * 0.5, 0.4, 1.0))
        return {"line_count": p.line_count, "taper": p.taper_direction}


ALGORITHM = register_algorithm(MotionLines())
generate_motion_lines, generate_single_motion_lines_preview = entry_points(ALGORITHM)

from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..controller import entry_points
from ..geometry import clamp, rotate_point, rotated_rounded_rect
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint
from .registry import register_algorithm

BAR_HEIGHT = 75.0
MAX_REACH = 45.0


@dataclass(frozen=True)
class GradientBarsParams(StyleParams):
    bar_count: int
    bar_width: float
    bar_angle: float
    bar_gap: float
    bar_roundness: float
    gradient_intensity: float
    stagger_amount: float


class GradientBars(Algorithm):
    name = "gradient_bars"
    family = "overlap"
    archetype = "symbol"
    default_category = "finance"
    min_quality = 80
    description = "Parallel rounded bars with per-bar gradients"

    def derive_params(self, derived, base, request, variant=0):
        rot = derived.rotation_offset
        return extend_base(
            GradientBarsParams,
            base,
            bar_count=int(clamp(round(derived.element_count / 3), 2, 6)),
            bar_width=clamp(derived.stroke_width * 2, 8.0, 25.0),
            bar_angle=-(rot - 180) / 4 if rot > 180 else rot / 4 - 22.5,
            bar_gap=clamp(derived.spacing_factor * 5, 3.0, 15.0),
            bar_roundness=derived.curve_tension,
            gradient_intensity=derived.organic_amount,
            stagger_amount=derived.jitter_amount * 3,
            **style_fields(derived, variant),
        )

    def bars(self, p):
        """(cx, cy, width, height) per bar, scaled to fit once rotated."""
        group = p.bar_count * p.bar_width + (p.bar_count - 1) * p.bar_gap
        start = CX - group / 2
        out = []
        for i in range(p.bar_count):
            stagger = p.stagger_amount * (1 if i % 2 == 0 else -1) * 0.1
            out.append((start + i * (p.bar_width + p.bar_gap) + p.bar_width / 2, CY + stagger, p.bar_width, BAR_HEIGHT))
        angle = math.radians(p.bar_angle)
        reach = 0.0
        for x, y, w, h in out:
            for sx, sy in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
                px, py = rotate_point((x + sx * w / 2, y + sy * h / 2), (x, y), angle)
                reach = max(reach, abs(px - CX), abs(py - CY))
        k = MAX_REACH / reach if reach > MAX_REACH else 1.0
        return [(CX + (x - CX) * k, CY + (y - CY) * k, w * k, h * k) for x, y, w, h in out]

    def build_geometry(self, p, doc, palette, rng):
        angle = math.radians(p.bar_angle)
        last = max(1, p.bar_count - 1)
        bars = self.bars(p)
        for i, (x, y, w, h) in enumerate(bars):
            t = i / last
            if i == 0:
                fill = paint(doc, palette, p, "bar", angle_offset=90.0)
            else:
                end = palette.accent if palette.explicit_accent else darken(palette.primary, 0.15)
                fill = gradient_between(
                    doc,
                    "bar",
                    mix(lighten(palette.primary, 0.2 * (0.5 + p.gradient_intensity)), palette.accent, t),
                    mix(palette.primary, end, t),
                    p.bar_angle + 90,
                )
            doc.add_path(rotated_rounded_rect(x, y, w, h, w * p.bar_roundness * 0.5, angle), fill=fill)
        return {"bars": p.bar_count, "angle": round(p.bar_angle, 2), "scaled": bars[0][2] < p.bar_width}


ALGORITHM = register_algorithm(GradientBars())
generate_gradient_bars, generate_single_gradient_bars_preview = entry_points(ALGORITHM)

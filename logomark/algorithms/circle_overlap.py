"""Translucent overlapping circles with per-circle radial gradients."""
from __future__ import annotations

from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..controller import entry_points
from ..geometry import bezier_circle, clamp
from ..svg import url
from .base import Algorithm, StyleParams, style_fields
from .common import ARRANGEMENTS, CX, CY, arrange, paint, pick
from .registry import register_algorithm

MAX_REACH = 44.0


@dataclass(frozen=True)
class CircleOverlapParams(StyleParams):
    circle_count: int
    circle_size: float
    overlap_amount: float
    arrangement: str
    opacity_variation: float
    size_variation: float


class CircleOverlap(Algorithm):
    name = "circle_overlap"
    family = "overlap"
    archetype = "symbol"
    default_category = "creative"
    min_quality = 80
    description = "Overlapping translucent circles (Mastercard-style)"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            CircleOverlapParams,
            base,
            circle_count=int(clamp(round(derived.element_count / 4) + 1, 2, 5)),
            circle_size=clamp(30 + derived.scale_factor * 5, 20.0, 40.0),
            overlap_amount=clamp(derived.overlap_amount, 0.2, 0.6),
            arrangement=pick(ARRANGEMENTS, derived.style_variant),
            opacity_variation=derived.organic_amount * 0.5,
            size_variation=derived.jitter_amount / 30,
            **style_fields(derived, variant),
        )

    def circles(self, p):
        """(cx, cy, r) per circle, scaled down together when they overflow."""
        r = p.circle_size / 2
        if p.arrangement == "cluster":
            spacing = r * (1 - p.overlap_amount) * 1.2
        else:
            spacing = r * 2 * (1 - p.overlap_amount)
        centers = arrange(p.circle_count, spacing, p.arrangement)
        radii = [r * (1 + (p.size_variation if i % 2 == 0 else -p.size_variation)) for i in range(p.circle_count)]
        reach = max(max(abs(x - CX), abs(y - CY)) + rr for (x, y), rr in zip(centers, radii))
        k = MAX_REACH / reach if reach > MAX_REACH else 1.0
        return [(CX + (x - CX) * k, CY + (y - CY) * k, rr * k) for (x, y), rr in zip(centers, radii)]

    def build_geometry(self, p, doc, palette, rng):
        colors = [
            palette.primary,
            palette.accent if palette.explicit_accent else mix(palette.primary, "#ffffff", 0.3),
            mix(palette.primary, palette.accent, 0.5),
            darken(palette.primary, 0.1),
            lighten(palette.primary, 0.2),
        ]
        circles = self.circles(p)
        for i, (x, y, r) in enumerate(circles):
            opacity = 0.7 - p.opacity_variation * (i / len(circles))
            if i == 0:
                fill = paint(doc, palette, p, "circle")
            else:
                color = colors[i % len(colors)]
                fill = url(doc.add_radial_gradient(
                    "circle",
                    [(0.0, lighten(color, 0.15), opacity + 0.1), (0.7, color, opacity), (1.0, darken(color, 0.1), opacity - 0.1)],
                ))
            doc.add_path(bezier_circle(x, y, r), fill=fill, opacity=max(0.3, opacity) + 0.2)
        return {"circles": p.circle_count, "arrangement": p.arrangement, "overlap": round(p.overlap_amount, 3)}


ALGORITHM = register_algorithm(CircleOverlap())
generate_circle_overlap, generate_single_circle_overlap_preview = entry_points(ALGORITHM)

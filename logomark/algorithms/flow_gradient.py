from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import lighten
from ..controller import entry_points
from ..geometry import clamp, polar, smooth_curve
from ..seed import add_noise
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint, pick
from .registry import register_algorithm

DIRECTIONS = ("diagonal", "horizontal", "vertical", "radial")
_DIRECTION_ANGLE = {"diagonal": 45.0, "horizontal": 0.0, "vertical": 90.0, "radial": 135.0}


@dataclass(frozen=True)
class FlowGradientParams(StyleParams):
    point_count: int
    wave_count: int
    wave_amplitude: float
    base_radius: float
    blob_factor: float
    distortion: float
    flow_direction: str
    inner_layers: int


class FlowGradient(Algorithm):
    name = "flow_gradient"
    family = "radial"
    archetype = "symbol"
    default_category = "creative"
    min_quality = 80
    description = "Flowing gradient organic shape with smooth curves"

    def derive_params(self, derived, base, request, variant=0):
        waves = 2 + int(derived.wave_frequency)
        return extend_base(
            FlowGradientParams,
            base,
            curve_tension=clamp(derived.curve_tension, 0.4, 1.0),
            point_count=int(clamp(8 + waves * 2, 8, 16)),
            wave_count=waves,
            wave_amplitude=4.0 + derived.wave_amplitude * 0.6,
            base_radius=clamp(26.0 + derived.scale_factor * 6.0, 26.0, 36.0),
            blob_factor=derived.bulge_amount,
            distortion=derived.organic_amount,
            flow_direction=pick(DIRECTIONS, derived.style_variant),
            inner_layers=int(clamp(derived.layer_count // 2, 1, 3)),
            **style_fields(derived, variant),
        )

    def _outline(self, p, rng, radius, phase):
        pts = []
        for i in range(p.point_count):
            a = 2 * math.pi * i / p.point_count - math.pi / 2
            r = radius + math.sin(a * p.wave_count + phase) * p.wave_amplitude * 0.3
            r += math.sin(a * 2) * p.blob_factor * radius * 0.15
            if p.distortion > 0.2:
                r = add_noise(r, p.distortion, rng, 2.5)
            pts.append(polar(CX, CY, clamp(r, 6.0, 44.0), a))
        return pts

    def build_geometry(self, p, doc, palette, rng):
        angle = _DIRECTION_ANGLE[p.flow_direction]
        outer = smooth_curve(self._outline(p, rng, p.base_radius, 0.0), tension=p.curve_tension, closed=True)
        doc.add_path(outer, fill=paint(doc, palette, p, "flow", angle_offset=angle))
        for layer in range(p.inner_layers):
            scale = 0.7 - layer * 0.18
            inner_pts = self._outline(p, rng, p.base_radius * scale, (layer + 1) * 0.9)
            fill = gradient_between(doc, "flow-inner", lighten(palette.accent, 0.1 * layer), palette.primary, angle + 90)
            doc.add_path(smooth_curve(inner_pts, tension=p.curve_tension, closed=True), fill=fill, opacity=0.55)
        return {"direction": p.flow_direction, "points": p.point_count, "layers": 1 + p.inner_layers}


ALGORITHM = register_algorithm(FlowGradient())
generate_flow_gradient, generate_single_flow_gradient_preview = entry_points(ALGORITHM)

"""Curved tapered arms radiating from a center, 6-16 spokes."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..controller import entry_points
from ..geometry import bezier_circle, clamp, radial_centerline, safe_div, tapered_ribbon
from ..seed import add_noise
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint
from .registry import register_algorithm

MAX_REACH = 44.0


@dataclass(frozen=True)
class StarburstParams(StyleParams):
    arm_count: int
    arm_length: float
    arm_width: float
    arm_curvature: float
    arm_taper: float
    center_radius: float
    spiral_amount: float
    arm_bulge: float


class Starburst(Algorithm):
    name = "starburst"
    family = "radial"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 80
    description = "Curved organic arms with rotational symmetry, 6-16 spokes"

    def derive_params(self, derived, base, request, variant=0):
        center = min(derived.center_radius, 12.0)
        length = derived.arm_length
        width = derived.arm_width * 0.5
        # Shrink uniformly when the arm would leave the canvas
        k = min(1.0, safe_div(MAX_REACH, center + length + width, 1.0))
        return extend_base(
            StarburstParams,
            base,
            rotation_offset=derived.rotation_offset,
            curve_tension=derived.curve_tension,
            arm_count=int(clamp(derived.element_count, 6, 16)),
            arm_length=length * k,
            arm_width=max(1.2, width * k),
            arm_curvature=derived.curve_tension,
            arm_taper=derived.taper_ratio,
            center_radius=center * k,
            spiral_amount=derived.spiral_amount,
            arm_bulge=derived.bulge_amount,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        fill = paint(doc, palette, p, "arm")
        alt = paint(doc, palette, p, "arm-alt", invert=True) if p.color_placement % 3 == 1 else fill
        step = 2 * math.pi / p.arm_count
        rotation = math.radians(p.rotation_offset)
        samples = 6 if p.arm_count <= 8 else 4
        for i in range(p.arm_count):
            angle = rotation + i * step
            length = p.arm_length
            if not p.symmetric:
                angle += add_noise(0.0, p.organic, rng, 0.15)
                length = max(4.0, length + add_noise(0.0, p.size_variance, rng, 5.0))
            direction = 1 if (p.symmetric or i % 2 == 0) else -1
            bend = length * (p.arm_curvature * 0.3 * direction + p.spiral_amount * 0.4)
            centerline = radial_centerline(CX, CY, angle, p.center_radius, length, curve_offset=bend, steps=7)
            ribbon = tapered_ribbon(
                centerline,
                p.arm_width,
                p.arm_width * (1.0 - p.arm_taper),
                tension=p.curve_tension,
                bulge=p.arm_bulge,
                samples=samples,
            )
            doc.add_path(ribbon, fill=alt if i % 2 else fill, opacity=p.base_opacity)
        if p.center_radius > 4.0:
            doc.add_path(bezier_circle(CX, CY, p.center_radius * 0.8), fill=palette.accent)
        return {"arm_count": p.arm_count, "symmetric": p.symmetric}


ALGORITHM = register_algorithm(Starburst())
generate_starburst, generate_single_starburst_preview = entry_points(ALGORITHM)

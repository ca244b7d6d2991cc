from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..controller import entry_points
from ..geometry import arc_band, clamp, lerp, rounded_polygon, tapered_ribbon
from ..seed import add_noise
from .base import Algorithm, StyleParams, style_fields
from .common import CX, paint
from .registry import register_algorithm


@dataclass(frozen=True)
class LightningBoltParams(StyleParams):
    zig_count: int
    zig_amplitude: float
    bolt_width: float
    tip_ratio: float
    tilt: float
    corner: float
    branch_count: int
    branch_angle: float
    branch_length: float
    energy_arcs: int


class LightningBolt(Algorithm):
    name = "lightning_bolt"
    family = "radial"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 85
    description = "Dynamic lightning shapes with electric energy"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            LightningBoltParams,
            base,
            zig_count=int(clamp(derived.segment_count // 4 + 2, 2, 5)),
            zig_amplitude=8.0 + derived.curve_amplitude * 0.15,
            bolt_width=clamp(5.0 + derived.arm_width * 0.4, 5.0, 12.0),
            tip_ratio=clamp(derived.taper_ratio * 0.3, 0.05, 0.25),
            tilt=derived.skew_x * 30.0,
            corner=0.05 + derived.roundness * 0.2,
            branch_count=int(clamp(math.floor(derived.element_count * 0.3), 0, 3)) if derived.branch_count else 0,
            branch_angle=derived.branch_angle,
            branch_length=derived.branch_length * 18.0,
            energy_arcs=derived.color_placement % 3,
            **style_fields(derived, variant),
        )

    def _spine(self, p, rng):
        top, bottom = 10.0, 90.0
        pts = []
        for k in range(p.zig_count + 1):
            t = k / p.zig_count
            side = -1 if k % 2 == 0 else 1
            amp = p.zig_amplitude * (1.0 - 0.3 * t)
            if not p.symmetric and 0 < k < p.zig_count:
                amp = max(2.0, add_noise(amp, p.organic, rng, 3.0))
            x = CX + side * amp * 0.5 + p.tilt * (t - 0.5)
            pts.append((x, lerp(top, bottom, t)))
        return pts

    def build_geometry(self, p, doc, palette, rng):
        spine = self._spine(p, rng)
        n = len(spine)
        left, right = [], []
        for k, (x, y) in enumerate(spine):
            w = lerp(p.bolt_width, p.bolt_width * p.tip_ratio, k / (n - 1))
            left.append((clamp(x - w, 4.0, 96.0), y))
            right.append((clamp(x + w, 4.0, 96.0), y))
        tip = (spine[-1][0], min(96.0, spine[-1][1] + 4.0))
        outline = left + [tip] + list(reversed(right))
        doc.add_path(rounded_polygon(outline, p.corner), fill=paint(doc, palette, p, "bolt"))

        branches = 0
        for b in range(p.branch_count):
            k = 1 + b % max(1, n - 2)
            sx, sy = spine[k]
            side = 1 if k % 2 else -1
            ang = math.radians(90 - side * p.branch_angle)
            end = (clamp(sx + math.cos(ang) * p.branch_length * side, 6.0, 94.0), clamp(sy + math.sin(ang) * p.branch_length, 6.0, 94.0))
            mid = ((sx + end[0]) / 2, (sy + end[1]) / 2)
            ribbon = tapered_ribbon([(sx, sy), mid, end], p.bolt_width * 0.35, 0.3, tension=0.2, samples=3)
            if doc.add_path(ribbon, fill=palette.accent, opacity=0.85):
                branches += 1

        for a in range(p.energy_arcs):
            r = 30.0 + a * 7.0
            doc.add_path(arc_band(CX, 50.0, r, r, 200 + a * 10, 240 + a * 10, 1.6), fill=palette.accent, opacity=0.6)
            doc.add_path(arc_band(CX, 50.0, r, r, 20 + a * 10, 60 + a * 10, 1.6), fill=palette.accent, opacity=0.6)
        return {"zigs": p.zig_count, "branches": branches, "energy_arcs": p.energy_arcs}


ALGORITHM = register_algorithm(LightningBolt())
generate_lightning_bolt, generate_single_lightning_bolt_preview = entry_points(ALGORITHM)

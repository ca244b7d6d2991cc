"""Layered wave bands, back to front, with optional foam and droplets."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from ..base_params import extend_base
from ..colors import lighten
from ..controller import entry_points
from ..geometry import PathData, Point, clamp, rotate_point, smooth_curve
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, centered, fit_groups, gradient_between, paint, pick
from .registry import register_algorithm

DIRECTIONS = ("horizontal", "vertical", "diagonal")
_DIRECTION_ANGLE = {"horizontal": 0.0, "vertical": math.pi / 2, "diagonal": -math.pi / 4}
WAVE_WIDTH = 80.0
BAND_DEPTH = 15.0
SAMPLES = 9
DROPLET_SPOTS = ((-20, -20), (15, -25), (25, -15), (-10, -28))


@dataclass(frozen=True)
class WaveFlowParams(StyleParams):
    wave_count: int
    amplitude: float
    flow_direction: str
    foam_amount: float
    wavelength: float
    phase_shift: float
    layer_opacity: float
    crest_style: str
    droplets: int
    layered_gradient: bool


def droplet(cx: float, cy: float, size: float) -> PathData:
    return (
        PathData()
        .move(cx, cy - size * 1.5)
        .cubic(cx + size * 0.6, cy - size * 0.5, cx + size * 0.6, cy + size * 0.3, cx, cy + size)
        .cubic(cx - size * 0.6, cy + size * 0.3, cx - size * 0.6, cy - size * 0.5, cx, cy - size * 1.5)
        .close()
    )


class WaveFlow(Algorithm):
    name = "wave_flow"
    family = "overlap"
    archetype = "symbol"
    default_category = "sustainability"
    min_quality = 80
    description = "Flowing layered waves with foam highlights"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            WaveFlowParams,
            base,
            wave_count=int(clamp(math.floor(derived.element_count * 0.3 + 2), 2, 5)),
            amplitude=derived.curve_tension * 12 + 6,
            flow_direction=pick(DIRECTIONS, derived.style_variant),
            foam_amount=derived.organic_amount * 0.5,
            wavelength=derived.scale_factor * 20 + 30,
            phase_shift=derived.rotation_offset * 0.02,
            layer_opacity=derived.taper_ratio * 0.3 + 0.5,
            crest_style="sharp" if derived.perspective_strength > 0.5 else "smooth",
            droplets=derived.color_placement % 5,
            layered_gradient=derived.layer_count > 2,
            **style_fields(derived, variant),
        )

    def crest(self, p, index: int) -> List[Point]:
        """Sampled crest line of wave ``index`` before orientation."""
        amp = p.amplitude * (1 - index * 0.15)
        base_y = CY + (index - p.wave_count / 2) * 12
        phase = p.phase_shift * index * math.pi
        cycles = WAVE_WIDTH / p.wavelength
        left = CX - WAVE_WIDTH / 2
        pts = []
        for i in range(SAMPLES):
            t = i / (SAMPLES - 1)
            peak = 1.2 if p.crest_style == "sharp" and i % 2 else 1.0
            pts.append((left + WAVE_WIDTH * t, base_y + math.sin(phase + t * cycles * 2 * math.pi) * amp * peak))
        return pts

    def build_geometry(self, p, doc, palette, rng):
        angle = _DIRECTION_ANGLE[p.flow_direction]
        bands = []
        for i in range(p.wave_count):
            top = self.crest(p, i)
            bottom = [(top[-1][0], max(y for _, y in top) + BAND_DEPTH), (top[0][0], max(y for _, y in top) + BAND_DEPTH)]
            bands.append([rotate_point(pt, (CX, CY), angle) for pt in top + bottom])
        bands = fit_groups(centered(bands))

        for i in range(p.wave_count - 1, -1, -1):
            pts = bands[i]
            shape = smooth_curve(pts[:SAMPLES], tension=0.6).line(*pts[SAMPLES]).line(*pts[SAMPLES + 1]).close()
            opacity = p.layer_opacity + (1 - p.layer_opacity) * ((p.wave_count - i) / p.wave_count)
            if i == 0:
                fill = paint(doc, palette, p, "wave", angle_offset=90.0)
            else:
                light = 0.2 - i * 0.08 if p.layered_gradient else 0.05
                fill = gradient_between(doc, "wave", lighten(palette.primary, light + 0.1), lighten(palette.primary, max(0.0, light - 0.05)), 180)
            doc.add_path(shape, fill=fill, opacity=opacity)

        if p.foam_amount > 0.2:
            doc.add_path(smooth_curve(bands[0][:SAMPLES], tension=0.6), stroke=lighten(palette.primary, 0.4), stroke_width=1.5, opacity=p.foam_amount * 0.8, linecap="round")

        drops = PathData()
        for i in range(min(p.droplets, len(DROPLET_SPOTS))):
            dx, dy = DROPLET_SPOTS[i]
            drops.extend(droplet(CX + dx, CY + dy, 2.5 - i * 0.3))
        doc.add_path(drops, fill=palette.accent if palette.explicit_accent else lighten(palette.primary, 0.35))
        return {"waves": p.wave_count, "direction": p.flow_direction, "droplets": p.droplets}


ALGORITHM = register_algorithm(WaveFlow())
generate_wave_flow, generate_single_wave_flow_preview = entry_points(ALGORITHM)

from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..controller import entry_points
from ..geometry import PathData, clamp, cubic_path, polar
from ..seed import add_noise
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint, pick
from .registry import register_algorithm

WAVE_STYLES = ("sine", "sawtooth", "square", "organic")
SYMMETRIES = ("bilateral", "radial", "none")
MAX_HEIGHT = 80.0


@dataclass(frozen=True)
class SoundWavesParams(StyleParams):
    wave_count: int
    amplitude: float
    frequency: float
    decay: float
    spacing: float
    stroke_taper: float
    phase_offset: float
    wave_style: str
    symmetry: str
    peak_rounding: float


def sound_bar(x: float, cy: float, height: float, bottom_width: float, top_width: float, rounding: float, angle: float = 0.0) -> PathData:
    """Capsule-like bar, narrower at the top, centred on (x, cy) and turned by ``angle``."""
    top, bottom = cy - height / 2, cy + height / 2
    hb, ht, r = bottom_width / 2, top_width / 2, rounding
    segments = [
        ((x - hb, bottom - r), (x - ht, top + r * 2), (x - ht, top + r)),
        ((x - ht, top), (x - r / 2, top - r / 2), (x, top - r / 2)),
        ((x + r / 2, top - r / 2), (x + ht, top), (x + ht, top + r)),
        ((x + ht, top + r * 2), (x + hb, bottom - r), (x + hb, bottom)),
        ((x + hb, bottom + r / 2), (x + r / 2, bottom + r / 2), (x, bottom + r / 2)),
        ((x - r / 2, bottom + r / 2), (x - hb, bottom + r / 2), (x - hb, bottom)),
    ]
    return cubic_path((x - hb, bottom), segments, center=(x, cy), angle=angle)


class SoundWaves(Algorithm):
    name = "sound_waves"
    family = "overlap"
    archetype = "symbol"
    default_category = "creative"
    min_quality = 80
    description = "Audio waveform bars with decaying heights"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            SoundWavesParams,
            base,
            wave_count=int(clamp(round(derived.element_count * 0.4 + 3), 3, 8)),
            amplitude=derived.curve_amplitude * 0.6 + 10,
            frequency=derived.scale_factor * 1.5 + 0.5,
            decay=0.7 + derived.taper_ratio * 0.3,
            spacing=derived.spacing_factor * 8 + 8,
            stroke_taper=derived.taper_ratio,
            phase_offset=derived.rotation_offset,
            wave_style=pick(WAVE_STYLES, derived.style_variant),
            symmetry=pick(SYMMETRIES, derived.style_variant),
            peak_rounding=derived.curve_tension,
            **style_fields(derived, variant),
        )

    def heights(self, p, rng):
        mid = (p.wave_count - 1) / 2
        out = []
        for i in range(p.wave_count):
            dist = abs(i - mid)
            if p.symmetry == "none":
                # Off-centre profile driven by the phase offset
                dist = abs(i - mid + math.sin(math.radians(p.phase_offset)) * mid * 0.5)
            h = p.amplitude * math.pow(p.decay, dist)
            if p.wave_style == "sine":
                h *= 0.8 + 0.2 * math.cos(i * p.frequency + math.radians(p.phase_offset))
            elif p.wave_style == "sawtooth":
                h *= 0.6 + 0.4 * ((i + 1) % 3) / 2
            elif p.wave_style == "square":
                h *= 1.0 if i % 2 == 0 else 0.7
            elif p.wave_style == "organic":
                h += add_noise(0.0, 0.15, rng, h * 0.2)
            out.append(clamp(h, 6.0, MAX_HEIGHT))
        return out

    def build_geometry(self, p, doc, palette, rng):
        heights = self.heights(p, rng)
        bar_width = 4 + (1 - p.stroke_taper) * 4
        top_width = bar_width * (0.5 + p.stroke_taper * 0.5)
        rounding = min(p.peak_rounding * 2, top_width / 2)
        spacing = min(p.spacing, (84.0 - bar_width) / max(1, p.wave_count - 1))
        last = max(1, p.wave_count - 1)
        for i, h in enumerate(heights):
            if i == 0:
                fill = paint(doc, palette, p, "bar", angle_offset=90.0)
            else:
                end = palette.accent if palette.explicit_accent else darken(palette.primary, 0.2)
                fill = gradient_between(doc, "bar", lighten(palette.primary, 0.2), mix(palette.primary, end, i / last), 180)
            if p.symmetry == "radial":
                angle = 2 * math.pi * i / p.wave_count
                x, y = polar(CX, CY, 22.0, angle - math.pi / 2)
                doc.add_path(sound_bar(x, y, min(h * 0.5, 22.0), bar_width, top_width, rounding, angle), fill=fill)
            else:
                x = CX + (i - (p.wave_count - 1) / 2) * spacing
                doc.add_path(sound_bar(x, CY, h, bar_width, top_width, rounding), fill=fill)
        return {"bars": p.wave_count, "style": p.wave_style, "symmetry": p.symmetry}


ALGORITHM = register_algorithm(SoundWaves())
generate_sound_waves, generate_single_sound_waves_preview = entry_points(ALGORITHM)

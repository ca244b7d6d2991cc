from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import PathData, cubic_path
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint, pick
from .registry import register_algorithm

HEART_STYLES = ("classic", "modern", "geometric", "organic")
HEART_HEIGHT = 38.0


@dataclass(frozen=True)
class HeartLoveParams(StyleParams):
    heart_style: str
    curve_depth: float
    split_amount: float
    pulse_effect: bool
    heart_rotation: float
    inner_heart: bool
    inner_scale: float
    stroke_only: bool
    heart_width: float
    tip_sharpness: float


def heart_segments(p, cx: float, cy: float, scale: float = 1.0):
    """Notch point and five cubic segments: left lobe, tip, right lobe."""
    width = 40 * scale * p.heart_width
    height = HEART_HEIGHT * scale
    top, bottom = cy - height * 0.35, cy + height * 0.65
    left, right = cx - width / 2, cx + width / 2
    lobe_h, lobe_w, tip = height * p.curve_depth, width * 0.3, p.tip_sharpness * 5 * scale
    if p.heart_style == "geometric":
        lobe_h, lobe_w, tip = lobe_h * 0.7, lobe_w * 0.8, 0.0
    elif p.heart_style == "organic":
        lobe_h, lobe_w = lobe_h * 1.1, lobe_w * 1.1
    notch = (cx, top + lobe_h * 0.3)
    tip_pt = (cx, bottom - tip)
    segments = [
        ((cx - lobe_w * 0.5, top - lobe_h * 0.3), (left - lobe_w * 0.3, top - lobe_h * 0.2), (left, top + lobe_h * 0.4)),
        ((left - lobe_w * 0.2, top + lobe_h), (left + width * 0.1, cy + height * 0.15), tip_pt),
        ((cx, bottom), (cx, bottom), tip_pt),
        ((right - width * 0.1, cy + height * 0.15), (right + lobe_w * 0.2, top + lobe_h), (right, top + lobe_h * 0.4)),
        ((right + lobe_w * 0.3, top - lobe_h * 0.2), (cx + lobe_w * 0.5, top - lobe_h * 0.3), notch),
    ]
    return notch, segments


def heart_path(p, cx: float, cy: float, scale: float = 1.0) -> PathData:
    start, segments = heart_segments(p, cx, cy, scale)
    return cubic_path(start, segments, center=(cx, cy), angle=math.radians(p.heart_rotation))


def right_half(p, cx: float, cy: float, scale: float = 1.0) -> PathData:
    _, segments = heart_segments(p, cx, cy, scale)
    tip = segments[2][2]
    half = cubic_path(tip, segments[3:], closed=False, center=(cx, cy), angle=math.radians(p.heart_rotation))
    return half.close()


class HeartLove(Algorithm):
    name = "heart_love"
    family = "overlap"
    archetype = "symbol"
    default_category = "healthcare"
    min_quality = 80
    description = "Stylized hearts with inner layers and pulse rings"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            HeartLoveParams,
            base,
            heart_style=pick(HEART_STYLES, derived.style_variant),
            curve_depth=derived.curve_tension * 0.5 + 0.3,
            split_amount=derived.center_radius * 0.02,
            pulse_effect=derived.organic_amount > 0.6,
            heart_rotation=(derived.rotation_offset - 180) * 0.1,
            inner_heart=derived.layer_count > 2,
            inner_scale=derived.taper_ratio * 0.4 + 0.3,
            stroke_only=derived.style_variant > 6 and derived.style_variant % 4 == 1,
            heart_width=derived.scale_factor * 0.4 + 0.8,
            tip_sharpness=derived.perspective_strength,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        # Optical centre sits a little above the geometric one
        cy = CY - 4.0
        if p.pulse_effect:
            for k, scale in enumerate((1.22, 1.1)):
                doc.add_path(heart_path(p, CX, cy, scale), fill=lighten(palette.accent, 0.2 + 0.1 * k), opacity=0.18 + 0.1 * k)

        fill = paint(doc, palette, p, "heart")
        if p.stroke_only:
            doc.add_path(heart_path(p, CX, cy), stroke=fill, stroke_width=3.0, linecap="round")
            doc.add_path(heart_path(p, CX, cy, 0.35), fill=palette.accent)
        else:
            doc.add_path(heart_path(p, CX, cy), fill=fill)
            if p.split_amount > 0.25:
                doc.add_path(right_half(p, CX, cy), fill=darken(palette.primary, 0.15), opacity=0.35)
            if p.inner_heart:
                inner = palette.accent if palette.explicit_accent else lighten(palette.primary, 0.3)
                doc.add_path(heart_path(p, CX, cy, p.inner_scale), fill=inner)
        return {"style": p.heart_style, "inner": p.inner_heart, "stroke_only": p.stroke_only, "pulse": p.pulse_effect}


ALGORITHM = register_algorithm(HeartLove())
generate_heart_love, generate_single_heart_love_preview = entry_points(ALGORITHM)

from __future__ import annotations

from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..controller import entry_points
from ..geometry import PathData, Point, clamp, first_letter, is_known_letter, letterform_path, stroke_for_weight
from ..svg import url
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, pick
from .registry import register_algorithm

PLACEMENTS = ("under", "through", "around")
SWOOSH_SPAN = 90.0


@dataclass(frozen=True)
class LetterSwooshParams(StyleParams):
    swoosh_count: int
    swoosh_width: float
    swoosh_curvature: float
    swoosh_placement: str
    letter_weight: float
    letter_scale: float
    dynamic_taper: bool
    letter: str
    letter_fallback: bool


def _offset(pt: Point, dy: float) -> Point:
    return pt[0], pt[1] + dy


def tapered_swoosh(start: Point, c1: Point, c2: Point, end: Point, w_start: float, w_mid: float, w_end: float) -> PathData:
    """Cubic band whose edges are the centre curve shifted up and down."""
    path = PathData().move(*_offset(start, -w_start / 2))
    path.cubic(*_offset(c1, -w_mid / 2), *_offset(c2, -w_mid / 2), *_offset(end, -w_end / 2))
    path.quad(*end, *_offset(end, w_end / 2))
    path.cubic(*_offset(c2, w_mid / 2), *_offset(c1, w_mid / 2), *_offset(start, w_start / 2))
    path.quad(*start, *_offset(start, -w_start / 2))
    return path.close()


def swoosh(p, index: int) -> PathData:
    size = SWOOSH_SPAN
    left, right = CX - size * 0.5, CX + size * 0.5
    if p.swoosh_placement == "under":
        base_y = CY + size * 0.18 + index * p.swoosh_width * 1.2
    elif p.swoosh_placement == "through":
        base_y = CY + index * p.swoosh_width * 1.2
    else:
        base_y = CY - size * 0.2 + index * size * 0.2
    lift = size * p.swoosh_curvature * 0.4
    w = p.swoosh_width
    return tapered_swoosh(
        (left, base_y),
        (left + size * 0.25, base_y - lift),
        (right - size * 0.25, base_y - lift * 0.5),
        (right, base_y + lift * 0.3),
        w * 0.3 if p.dynamic_taper else w,
        w,
        w * 0.5 if p.dynamic_taper else w,
    )


class LetterSwoosh(Algorithm):
    name = "letter_swoosh"
    family = "letter"
    archetype = "wordmark"
    default_category = "creative"
    min_quality = 80
    description = "Initial with dynamic swoosh strokes under, through or around it"

    def derive_params(self, derived, base, request, variant=0):
        head = (request.brand_name or "").strip()[:1]
        placement = pick(PLACEMENTS, derived.style_variant)
        # Stacked swooshes below the letter would leave the canvas
        limit = 2 if placement == "under" else 3
        return extend_base(
            LetterSwooshParams,
            base,
            swoosh_count=int(clamp(round(derived.element_count / 6), 1, limit)),
            swoosh_width=clamp(derived.stroke_width + 2, 3.0, 12.0),
            swoosh_curvature=clamp(derived.curve_tension, 0.3, 0.9),
            swoosh_placement=placement,
            letter_weight=clamp(derived.letter_weight * 0.8, 400, 700),
            letter_scale=clamp(0.6 + derived.scale_factor * 0.1, 0.5, 0.8),
            dynamic_taper=derived.taper_ratio > 0.5,
            letter=first_letter(head),
            letter_fallback=not is_known_letter(head),
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        letter_fill = gradient_between(doc, "letter", lighten(palette.primary, 0.1), palette.primary, 180)
        if palette.explicit_accent:
            stops = [(0.0, palette.accent), (0.5, palette.accent), (1.0, darken(palette.accent, 0.1))]
        else:
            stops = [(0.0, mix(palette.primary, "#ffffff", 0.2)), (0.5, palette.primary), (1.0, darken(palette.primary, 0.15))]
        swoosh_fill = url(doc.add_linear_gradient("swoosh", stops, angle=0))

        for i in range(p.swoosh_count):
            doc.add_path(swoosh(p, i), fill=swoosh_fill)

        # Letter size is its full height; half-size drives the letterform
        half = 100.0 * p.letter_scale / 2 * 0.75
        letter_y = CY - 10.0 if p.swoosh_placement == "under" else CY
        doc.add_path(letterform_path(p.letter, CX, letter_y, half, stroke_for_weight(p.letter_weight, half * 2)), fill=letter_fill)
        return {
            "placement": p.swoosh_placement,
            "swooshes": p.swoosh_count,
            "letter": p.letter,
            "letter_fallback": p.letter_fallback,
        }


ALGORITHM = register_algorithm(LetterSwoosh())
generate_letter_swoosh, generate_single_letter_swoosh_preview = entry_points(ALGORITHM)

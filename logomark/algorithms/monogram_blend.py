"""Two-letter monograms: overlapping, interlocked, merged or stacked initials."""
from __future__ import annotations

from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..controller import entry_points
from ..features import letters_of
from ..geometry import clamp, letterform_path, resolve_letter, rotated_rounded_rect, stroke_for_weight
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint, pick
from .registry import register_algorithm

BLEND_STYLES = ("overlap", "interlock", "merge", "stack")
PAIR_HALF = 26.0
STACK_HALF = 18.0


@dataclass(frozen=True)
class MonogramBlendParams(StyleParams):
    blend_style: str
    letter_spacing: float
    share_strokes: bool
    stroke_modulation: float
    first_weight: float
    second_weight: float
    vertical_offset: float
    first: str
    second: str
    letter_fallback: bool


def placements(p):
    """Centres and half-size for both letters."""
    if p.blend_style == "stack":
        return (CX, CY - 16.0), (CX, CY + 16.0), STACK_HALF
    gap = 15.0 + p.letter_spacing / 2
    if p.blend_style == "merge":
        gap *= 0.7
    return (CX - gap, CY + p.vertical_offset / 2), (CX + gap, CY - p.vertical_offset / 2), PAIR_HALF


class MonogramBlend(Algorithm):
    name = "monogram_blend"
    family = "letter"
    archetype = "wordmark"
    default_category = "finance"
    min_quality = 80
    description = "Two initials blended by overlap, interlock, merge or stack"

    def derive_params(self, derived, base, request, variant=0):
        chars = letters_of(request.brand_name)
        first = chars[0] if chars else "A"
        second = chars[1] if len(chars) > 1 else first
        return extend_base(
            MonogramBlendParams,
            base,
            blend_style=pick(BLEND_STYLES, derived.style_variant),
            letter_spacing=clamp((derived.spacing_factor - 1) * 20, -10.0, 12.0),
            share_strokes=derived.organic_amount > 0.5,
            stroke_modulation=derived.taper_ratio,
            first_weight=clamp(400 + derived.letter_weight * 0.3, 300, 700),
            second_weight=clamp(400 + derived.letter_weight * 0.4, 300, 700),
            vertical_offset=clamp((derived.jitter_amount - 5) * 2, -8.0, 8.0),
            first=resolve_letter(first),
            second=resolve_letter(second),
            letter_fallback=not chars,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        (x1, y1), (x2, y2), half = placements(p)
        stroke1 = stroke_for_weight(p.first_weight, half * 2)
        stroke2 = stroke_for_weight(p.second_weight, half * 2) * (0.8 + p.stroke_modulation * 0.4)
        first = letterform_path(p.first, x1, y1, half, stroke1)
        second = letterform_path(p.second, x2, y2, half, stroke2)

        fill1 = paint(doc, palette, p, "first")
        if palette.explicit_accent:
            fill2 = gradient_between(doc, "second", palette.accent, darken(palette.accent, 0.1), 135)
        else:
            fill2 = gradient_between(doc, "second", mix(palette.primary, "#000000", 0.2), darken(palette.primary, 0.2), 135)

        if p.blend_style == "overlap":
            doc.add_path(first, fill=fill1)
            doc.add_path(second, fill=fill2, opacity=0.85)
        elif p.blend_style == "interlock":
            doc.add_path(second, fill=fill2)
            # Light outline reads as a gap where the front letter crosses
            doc.add_path(first, fill=fill1, stroke=lighten(palette.primary, 0.85), stroke_width=1.6)
        elif p.blend_style == "merge":
            doc.add_path(second, fill=fill1)
            doc.add_path(first, fill=fill1)
        else:
            doc.add_path(second, fill=fill2)
            doc.add_path(first, fill=fill1)

        if p.share_strokes and p.blend_style != "stack":
            # Shared crossbar tying the pair together
            bar_y = (y1 + y2) / 2
            doc.add_path(rotated_rounded_rect(CX, bar_y, abs(x2 - x1), max(stroke1, stroke2) * 0.7, 1.0), fill=fill1, opacity=0.9)
        return {
            "style": p.blend_style,
            "letters": p.first + p.second,
            "shared": p.share_strokes,
            "letter_fallback": p.letter_fallback,
        }


ALGORITHM = register_algorithm(MonogramBlend())
generate_monogram_blend, generate_single_monogram_blend_preview = entry_points(ALGORITHM)

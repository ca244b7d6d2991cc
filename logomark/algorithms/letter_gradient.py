from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, rotate_hue, saturate
from ..controller import entry_points
from ..geometry import clamp, first_letter, is_known_letter, letterform_path, stroke_for_weight
from ..svg import url
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, pick
from .registry import register_algorithm

LETTER_STYLES = ("bold", "light", "rounded", "geometric")
STYLE_WEIGHTS = {"bold": 820, "light": 380, "rounded": 620, "geometric": 560}
LETTER_HALF = 30.0


@dataclass(frozen=True)
class LetterGradientParams(StyleParams):
    letter_spacing: float
    color_stops: int
    font_weight: str
    letter_style: str
    hue_step: float
    saturation: float
    shadow_effect: bool
    outline_only: bool
    multi_color: bool
    letter: str
    letter_fallback: bool


def stop_colors(p, palette):
    if p.multi_color:
        base = saturate(palette.primary, p.saturation - 0.7)
        return [base] + [rotate_hue(base, p.hue_step * i) for i in range(1, p.color_stops)]
    return [palette.primary, palette.accent if palette.explicit_accent else lighten(palette.primary, 0.25)]


class LetterGradient(Algorithm):
    name = "letter_gradient"
    family = "letter"
    archetype = "wordmark"
    default_category = "creative"
    min_quality = 80
    description = "Single initial carrying a multi-stop hue gradient"

    def derive_params(self, derived, base, request, variant=0):
        head = (request.brand_name or "").strip()[:1]
        return extend_base(
            LetterGradientParams,
            base,
            letter_spacing=derived.spacing_factor * 5 + 2,
            color_stops=int(clamp(math.floor(derived.element_count * 0.3 + 2), 2, 4)),
            font_weight="bold" if derived.stroke_width > 9 else "normal",
            letter_style=pick(LETTER_STYLES, derived.style_variant),
            hue_step=derived.curve_tension * 60 + 30,
            saturation=derived.organic_amount * 0.3 + 0.7,
            shadow_effect=derived.perspective_strength > 0.5,
            outline_only=derived.taper_ratio < 0.3,
            multi_color=derived.layer_count > 2,
            letter=first_letter(head),
            letter_fallback=not is_known_letter(head),
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        colors = stop_colors(p, palette)
        last = len(colors) - 1
        grad = doc.add_linear_gradient("letter", [(i / last, c) for i, c in enumerate(colors)], angle=p.gradient_angle)

        weight = STYLE_WEIGHTS[p.letter_style] + (60 if p.font_weight == "bold" else 0)
        stroke = stroke_for_weight(weight, LETTER_HALF * 2)
        if p.shadow_effect:
            shift = p.letter_spacing * 0.25
            shadow = letterform_path(p.letter, CX + shift, CY + shift, LETTER_HALF, stroke)
            doc.add_path(shadow, fill=darken(palette.primary, 0.4), opacity=0.3)

        letter = letterform_path(p.letter, CX, CY, LETTER_HALF, stroke)
        if p.outline_only:
            doc.add_path(letter, stroke=url(grad), stroke_width=2.4, linecap="round")
        elif p.letter_style == "rounded":
            # Matching stroke softens the letter's corners
            doc.add_path(letter, fill=url(grad), stroke=url(grad), stroke_width=1.6, linecap="round")
        else:
            doc.add_path(letter, fill=url(grad))
        return {
            "style": p.letter_style,
            "stops": len(colors),
            "outline": p.outline_only,
            "letter": p.letter,
            "letter_fallback": p.letter_fallback,
        }


ALGORITHM = register_algorithm(LetterGradient())
generate_letter_gradient, generate_single_letter_gradient_preview = entry_points(ALGORITHM)

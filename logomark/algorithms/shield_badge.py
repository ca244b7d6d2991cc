from __future__ import annotations

from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import PathData, clamp, rounded_polygon, star_path, thick_segment
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, paint, pick
from .registry import register_algorithm

SHAPES = ("classic", "modern", "rounded", "pointed")
PATTERNS = ("none", "cross", "star", "chevron")
CRESTS = ("flat", "curved", "pointed")
DIVISIONS = ("none", "quarters", "horizontal", "vertical")
SHIELD_SCALE = 1.5
NEST_SCALES = (0.82, 0.64)


@dataclass(frozen=True)
class ShieldBadgeParams(StyleParams):
    shield_shape: str
    inner_pattern: str
    crest_style: str
    division_style: str
    border_width: float
    nesting: int
    accent_band: bool
    band_position: float
    emboss: float


def shield_path(shape: str, crest: str, cx: float, cy: float, scale: float = 1.0) -> PathData:
    """Six-segment cubic shield outline, 36 x 44 units at scale 1."""
    width, height = 36 * scale, 44 * scale
    left, right = cx - width / 2, cx + width / 2
    top, bottom = cy - height / 2, cy + height / 2
    top_curve = {"curved": -4.0, "pointed": -8.0}.get(crest, 0.0) * scale
    point_y = bottom + (6 * scale if shape == "pointed" else 0.0)
    bottom_curve = {"rounded": 8.0, "modern": 4.0}.get(shape, 2.0) * scale
    side = {"classic": 4.0, "rounded": 8.0}.get(shape, 2.0) * scale
    return (
        PathData()
        .move(cx, top + top_curve)
        .cubic(cx - width * 0.3, top, left, top, left, top + height * 0.1)
        .cubic(left - side, cy - height * 0.1, left - side * 0.5, cy + height * 0.2, left + width * 0.1, bottom - bottom_curve)
        .cubic(left + width * 0.2, bottom, cx - width * 0.1, point_y, cx, point_y + bottom_curve * 0.5)
        .cubic(cx + width * 0.1, point_y, right - width * 0.2, bottom, right - width * 0.1, bottom - bottom_curve)
        .cubic(right + side * 0.5, cy + height * 0.2, right + side, cy - height * 0.1, right, top + height * 0.1)
        .cubic(right, top, cx + width * 0.3, top, cx, top + top_curve)
        .close()
    )


def _pattern(kind: str, cx: float, cy: float, size: float) -> PathData:
    half = size / 2
    if kind == "cross":
        arm = size * 0.14
        cross = [
            (cx - arm, cy - half), (cx + arm, cy - half), (cx + arm, cy - arm), (cx + half, cy - arm),
            (cx + half, cy + arm), (cx + arm, cy + arm), (cx + arm, cy + half), (cx - arm, cy + half),
            (cx - arm, cy + arm), (cx - half, cy + arm), (cx - half, cy - arm), (cx - arm, cy - arm),
        ]
        return rounded_polygon(cross, 0.12)
    if kind == "chevron":
        return rounded_polygon([(cx, cy - half), (cx + half, cy), (cx, cy + half), (cx - half, cy)], 0.1)
    if kind == "star":
        return star_path(cx, cy, half, half * 0.4, 5, corner=0.1)
    return PathData()


class ShieldBadge(Algorithm):
    name = "shield_badge"
    family = "nested"
    archetype = "symbol"
    default_category = "finance"
    min_quality = 85
    description = "Protective shield with inner patterns and crests"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            ShieldBadgeParams,
            base,
            shield_shape=pick(SHAPES, derived.style_variant),
            inner_pattern=pick(PATTERNS, derived.style_variant + derived.element_count),
            crest_style=pick(CRESTS, derived.color_placement),
            division_style=pick(DIVISIONS, derived.layer_count),
            border_width=derived.stroke_width * 0.5 + 2,
            nesting=int(clamp(derived.nesting_level - 1, 1, len(NEST_SCALES))),
            accent_band=derived.organic_amount > 0.5,
            band_position=derived.taper_ratio * 0.4 + 0.3,
            emboss=derived.perspective_strength,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        cy = CY - 2.0
        if p.emboss > 0.5:
            doc.add_path(shield_path(p.shield_shape, p.crest_style, CX + 1.5, cy + 1.5, SHIELD_SCALE), fill=darken(palette.primary, 0.3), opacity=0.4)
        doc.add_path(shield_path(p.shield_shape, p.crest_style, CX, cy, SHIELD_SCALE), fill=paint(doc, palette, p, "shield"))
        inner_fills = (paint(doc, palette, p, "shield-inner", invert=True), lighten(palette.primary, 0.1))
        for level in range(p.nesting):
            scale = SHIELD_SCALE * NEST_SCALES[level]
            doc.add_path(shield_path(p.shield_shape, p.crest_style, CX, cy, scale), fill=inner_fills[level])

        inner_w = 36 * SHIELD_SCALE * NEST_SCALES[0]
        inner_h = 44 * SHIELD_SCALE * NEST_SCALES[0]
        bands = PathData()
        band = clamp(p.border_width * 0.4, 1.0, 3.0)
        if p.division_style in ("quarters", "horizontal"):
            y = cy - inner_h / 2 + inner_h * p.band_position
            bands.extend(rounded_polygon(thick_segment((CX - inner_w * 0.42, y), (CX + inner_w * 0.42, y), band), 0.3))
        if p.division_style in ("quarters", "vertical"):
            bands.extend(rounded_polygon(thick_segment((CX, cy - inner_h * 0.42), (CX, cy + inner_h * 0.4), band), 0.3))
        if p.accent_band and not bands:
            y = cy - inner_h * 0.2
            bands.extend(rounded_polygon(thick_segment((CX - inner_w * 0.4, y), (CX + inner_w * 0.4, y), band * 1.6), 0.3))
        doc.add_path(bands, fill=palette.accent, opacity=0.85, fill_rule="nonzero")
        doc.add_path(_pattern(p.inner_pattern, CX, cy, 12 * SHIELD_SCALE), fill="#ffffff", opacity=0.92)
        return {"shape": p.shield_shape, "pattern": p.inner_pattern, "division": p.division_style}


ALGORITHM = register_algorithm(ShieldBadge())
generate_shield_badge, generate_single_shield_badge_preview = entry_points(ALGORITHM)

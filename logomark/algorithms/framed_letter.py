"""Brand initial set inside a geometric frame."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import (
    PathData,
    bezier_ellipse,
    clamp,
    first_letter,
    is_known_letter,
    letterform_path,
    regular_polygon_points,
    rounded_polygon,
    stroke_for_weight,
)
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint, pick
from .registry import register_algorithm

FRAME_SHAPES = ("square", "circle", "rounded", "hexagon", "octagon")
CUTOUT_STYLES = ("none", "partial", "full")
# sides, base rotation and corner rounding per polygonal frame
_POLYGONS = {
    "square": (4, math.pi / 4, 0.04),
    "rounded": (4, math.pi / 4, 0.22),
    "hexagon": (6, 0.0, 0.08),
    "octagon": (8, math.pi / 8, 0.08),
}
FRAME_RADIUS = 40.0


@dataclass(frozen=True)
class FramedLetterParams(StyleParams):
    frame_shape: str
    frame_thickness: float
    letter_scale: float
    letter_weight: int
    cutout_style: str
    cutout_depth: float
    inner_padding: float
    frame_rotation: float
    letter: str
    letter_fallback: bool


def frame_contour(shape: str, radius: float, rotation: float, reverse: bool = False) -> PathData:
    """One closed frame contour; ``reverse`` winds it as a hole."""
    if shape == "circle":
        return bezier_ellipse(CX, CY, radius, radius, reverse=reverse)
    sides, base, corner = _POLYGONS[shape]
    if shape in ("square", "rounded"):
        # Corner radius of the square sits on its diagonal
        radius *= math.sqrt(2) * 0.92
    pts = regular_polygon_points(CX, CY, radius, sides, base + rotation)
    if reverse:
        pts = pts[::-1]
    return rounded_polygon(pts, corner)


def frame_ring(p) -> PathData:
    inner = max(4.0, FRAME_RADIUS - p.frame_thickness)
    rotation = math.radians(p.frame_rotation)
    return frame_contour(p.frame_shape, FRAME_RADIUS, rotation).extend(frame_contour(p.frame_shape, inner, rotation, reverse=True))


class FramedLetter(Algorithm):
    name = "framed_letter"
    family = "letter"
    archetype = "wordmark"
    default_category = "technology"
    min_quality = 80
    description = "Brand initial inside a square, circle or polygon frame"

    def derive_params(self, derived, base, request, variant=0):
        head = (request.brand_name or "").strip()[:1]
        return extend_base(
            FramedLetterParams,
            base,
            frame_shape=pick(FRAME_SHAPES, derived.style_variant),
            frame_thickness=clamp(derived.stroke_width + 2, 2.0, 15.0),
            letter_scale=clamp(0.5 + derived.scale_factor * 0.2, 0.4, 0.9),
            letter_weight=int(clamp(derived.letter_weight, 300, 800)),
            cutout_style=CUTOUT_STYLES[int(derived.cut_depth * 3) % 3],
            cutout_depth=derived.cut_depth,
            inner_padding=clamp(15 + derived.spacing_factor * 5, 5.0, 25.0),
            frame_rotation=derived.rotation_offset if derived.rotation_offset < 45 else 0.0,
            letter=first_letter(head),
            letter_fallback=not is_known_letter(head),
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        fill = paint(doc, palette, p, "frame", angle_offset=45.0)
        doc.add_path(frame_ring(p), fill=fill)

        inner = max(4.0, FRAME_RADIUS - p.frame_thickness)
        if p.cutout_style == "full":
            plate = gradient_between(doc, "plate", lighten(palette.primary, 0.1), darken(palette.primary, 0.15), p.gradient_angle)
            doc.add_path(frame_contour(p.frame_shape, inner - 1.5, math.radians(p.frame_rotation)), fill=plate)
        elif p.cutout_style == "partial":
            doc.add_path(frame_contour(p.frame_shape, inner - 1.5, math.radians(p.frame_rotation)), fill=palette.primary, opacity=0.12 + p.cutout_depth * 0.1)

        # Letter keeps its padding from the frame's inner edge
        half = min(inner - p.inner_padding * 0.5, FRAME_RADIUS * p.letter_scale * 0.75)
        half = max(6.0, half)
        stroke = stroke_for_weight(p.letter_weight, half * 2)
        if p.cutout_style == "full":
            color = palette.accent if palette.explicit_accent else lighten(palette.primary, 0.75)
        else:
            color = fill
        doc.add_path(letterform_path(p.letter, CX, CY, half, stroke), fill=color)
        return {
            "frame": p.frame_shape,
            "cutout": p.cutout_style,
            "letter": p.letter,
            "letter_fallback": p.letter_fallback,
        }


ALGORITHM = register_algorithm(FramedLetter())
generate_framed_letter, generate_single_framed_letter_preview = entry_points(ALGORITHM)

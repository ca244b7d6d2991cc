"""Isometric box with optional letter on one of its faces."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import PathData, Point, clamp, first_letter, is_known_letter, letterform_path, rounded_polygon, stroke_for_weight
from .base import Algorithm, StyleParams, style_fields
from .common import bounds, centered, fit_groups, gradient_between, paint, pick
from .registry import register_algorithm

CUBE_STYLES = ("solid", "wireframe", "partial")
PLACEMENTS = ("front", "side", "integrated")
CUBE_SIZE = 36.0


@dataclass(frozen=True)
class IsometricCubeParams(StyleParams):
    cube_style: str
    cube_angle: float
    show_top: bool
    show_left: bool
    show_right: bool
    letter_placement: str
    extrusion_depth: float
    letter_scale: float
    letter: str
    letter_fallback: bool
    letter_weight: int


def project(x: float, y: float, z: float, angle_deg: float) -> Point:
    """Isometric projection; +x runs down-right, +z down-left, -y up."""
    a = math.radians(angle_deg)
    return (x - z) * math.cos(a), y + (x + z) * math.sin(a)


def cube_faces(size: float, depth: float, angle_deg: float) -> Dict[str, List[Point]]:
    """Top, left and right faces of a box, centred on the canvas."""
    s, d = size, depth
    corners = {
        "t00": (0, -s, 0), "t10": (s, -s, 0), "t11": (s, -s, d), "t01": (0, -s, d),
        "b10": (s, 0, 0), "b11": (s, 0, d), "b01": (0, 0, d),
    }
    flat = {k: project(*v, angle_deg) for k, v in corners.items()}
    faces = {
        "top": [flat["t00"], flat["t10"], flat["t11"], flat["t01"]],
        "left": [flat["t01"], flat["t11"], flat["b11"], flat["b01"]],
        "right": [flat["t10"], flat["b10"], flat["b11"], flat["t11"]],
    }
    names = ("top", "left", "right")
    fitted = fit_groups(centered([faces[name] for name in names]))
    return dict(zip(names, fitted))


def centroid(points: List[Point]) -> Tuple[float, float]:
    return sum(x for x, _ in points) / len(points), sum(y for _, y in points) / len(points)


class IsometricCube(Algorithm):
    name = "isometric_cube"
    family = "nested"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 85
    description = "Isometric 3D box with letter placement"

    def derive_params(self, derived, base, request, variant=0):
        head = (request.brand_name or "").strip()[:1]
        return extend_base(
            IsometricCubeParams,
            base,
            cube_style=pick(CUBE_STYLES, derived.style_variant),
            cube_angle=clamp(30 + (derived.rotation_offset - 180) / 36, 25.0, 35.0),
            show_top=True,
            show_left=derived.layer_count > 2,
            show_right=derived.layer_count > 1,
            letter_placement=pick(PLACEMENTS, derived.color_placement // 3),
            extrusion_depth=clamp(derived.extrusion_depth, 10.0, 30.0),
            letter_scale=clamp(0.5 + derived.scale_factor * 0.1, 0.4, 0.7),
            letter=first_letter(head),
            letter_fallback=not is_known_letter(head),
            letter_weight=derived.letter_weight,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        faces = cube_faces(CUBE_SIZE, p.extrusion_depth * 1.2, p.cube_angle)
        fills = {
            "top": gradient_between(doc, "top", lighten(palette.primary, 0.2), lighten(palette.primary, 0.1), 0),
            "left": gradient_between(doc, "left", darken(palette.primary, 0.15), darken(palette.primary, 0.25), 90),
            "right": paint(doc, palette, p, "right"),
        }
        visible = {"top": p.show_top, "left": p.show_left, "right": p.show_right}
        edges = PathData()
        for name in ("left", "right", "top"):
            outline = rounded_polygon(faces[name], 0.03)
            edges.extend(outline)
            if not visible[name]:
                continue
            if p.cube_style == "wireframe":
                doc.add_path(outline, fill=fills[name], opacity=0.25)
            elif p.cube_style == "partial" and name == "left":
                doc.add_path(outline, fill=fills[name], opacity=0.55)
            else:
                doc.add_path(outline, fill=fills[name])
        if p.cube_style != "solid":
            doc.add_path(edges, stroke=darken(palette.primary, 0.2), stroke_width=1.4, linecap="round")

        face = {"front": "right", "side": "left", "integrated": "top"}[p.letter_placement]
        x0, y0, x1, y1 = bounds(faces[face])
        half = min(x1 - x0, y1 - y0) / 2 * p.letter_scale
        lx, ly = centroid(faces[face])
        letter_color = palette.accent if palette.explicit_accent else darken(palette.primary, 0.3)
        doc.add_path(letterform_path(p.letter, lx, ly, half, stroke_for_weight(p.letter_weight, half * 2)), fill=letter_color)
        return {
            "style": p.cube_style,
            "placement": p.letter_placement,
            "letter": p.letter,
            "letter_fallback": p.letter_fallback,
        }


ALGORITHM = register_algorithm(IsometricCube())
generate_isometric_cube, generate_single_isometric_cube_preview = entry_points(ALGORITHM)

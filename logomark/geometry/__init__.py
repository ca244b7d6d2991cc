from __future__ import annotations

from .path import PathData, Point, clamp, cubic_path, fmt, join_paths, lerp, lerp_point, polar, rotate_point, safe_div
from .shapes import (
    arc_band,
    arc_point,
    arc_segments,
    bezier_circle,
    bezier_circle_reversed,
    bezier_ellipse,
    ellipse_ring,
    infinity_points,
    bezier_rounded_rect,
    rotated_rounded_rect,
    organic_blob,
    regular_polygon,
    regular_polygon_points,
    rounded_polygon,
    smooth_curve,
    star_path,
    star_points,
    signed_area,
    thick_segment,
)
from .ribbon import radial_centerline, resample, tapered_ribbon
from .letters import LETTERFORMS, first_letter, is_known_letter, letterform_path, resolve_letter, stroke_for_weight
from .golden import PHI, PHI_INVERSE, fibonacci, golden_sections, golden_spiral_radii, golden_split

__all__ = [
    "PathData",
    "Point",
    "clamp",
    "cubic_path",
    "fmt",
    "join_paths",
    "lerp",
    "lerp_point",
    "polar",
    "rotate_point",
    "safe_div",
    "arc_band",
    "arc_point",
    "arc_segments",
    "bezier_circle",
    "bezier_circle_reversed",
    "bezier_ellipse",
    "ellipse_ring",
    "infinity_points",
    "bezier_rounded_rect",
    "rotated_rounded_rect",
    "organic_blob",
    "regular_polygon",
    "regular_polygon_points",
    "rounded_polygon",
    "smooth_curve",
    "star_path",
    "star_points",
    "signed_area",
    "thick_segment",
    "radial_centerline",
    "resample",
    "tapered_ribbon",
    "LETTERFORMS",
    "first_letter",
    "is_known_letter",
    "letterform_path",
    "resolve_letter",
    "stroke_for_weight",
    "PHI",
    "PHI_INVERSE",
    "fibonacci",
    "golden_sections",
    "golden_spiral_radii",
    "golden_split",
]

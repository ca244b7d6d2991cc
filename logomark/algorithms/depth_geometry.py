"""Stacked extrusion layers behind a front face, lit from one direction."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import Point, bezier_ellipse, clamp, rounded_polygon
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, centered, fit_groups, gradient_between, paint, pick, shade
from .registry import register_algorithm

SHAPES = ("cube", "prism", "pyramid", "abstract")
FRONT_SIZE = 44.0


@dataclass(frozen=True)
class DepthGeometryParams(StyleParams):
    shape_type: str
    depth_layers: int
    depth_offset: float
    perspective_angle: float
    shadow_intensity: float
    light_direction: float


def front_face(shape: str, size: float) -> List[Point]:
    h = size / 2
    if shape == "cube":
        return [(CX - h, CY - h), (CX + h, CY - h), (CX + h, CY + h), (CX - h, CY + h)]
    if shape in ("prism", "pyramid"):
        return [(CX, CY - h), (CX + h * 0.9, CY + h * 0.7), (CX - h * 0.9, CY + h * 0.7)]
    pts = []
    for j in range(6):
        angle = j / 6 * 2 * math.pi - math.pi / 2
        r = h * (0.8 + math.sin(angle * 2) * 0.2)
        pts.append((CX + math.cos(angle) * r, CY + math.sin(angle) * r))
    return pts


class DepthGeometry(Algorithm):
    name = "depth_geometry"
    family = "overlap"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 85
    description = "Pseudo-3D extruded shapes with layered depth"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            DepthGeometryParams,
            base,
            shape_type=pick(SHAPES, derived.style_variant),
            depth_layers=int(clamp(derived.layer_count + 1, 2, 5)),
            depth_offset=clamp(derived.depth_offset, 3.0, 15.0),
            perspective_angle=(derived.rotation_offset - 180) / 6,
            shadow_intensity=derived.organic_amount,
            light_direction=derived.gradient_angle,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        front = front_face(p.shape_type, FRONT_SIZE)
        # Depth recedes up and to the side of the perspective angle
        a = math.radians(p.perspective_angle - 45)
        dx, dy = math.cos(a) * p.depth_offset, math.sin(a) * p.depth_offset
        layers = []
        for k in range(p.depth_layers - 1, 0, -1):
            t = k / (p.depth_layers - 1)
            layers.append([(x + dx * t, y + dy * t) for x, y in front])
        groups = fit_groups(centered(layers + [front]))
        back, face = groups[:-1], groups[-1]

        corner = 0.04 if p.shape_type != "abstract" else 0.3
        light = math.cos(math.radians(p.light_direction))
        for k, layer in enumerate(back):
            depth = -0.35 + 0.25 * k / max(1, len(back)) + 0.1 * light
            tone = shade(palette.primary, depth)
            fill = gradient_between(doc, "layer", tone, darken(tone, 0.08), p.light_direction)
            doc.add_path(rounded_polygon(layer, corner), fill=fill)

        if p.shadow_intensity > 0.3:
            xs = [x for x, _ in face]
            bottom = max(y for _, y in face)
            doc.add_path(
                bezier_ellipse(sum(xs) / len(xs), min(bottom + 3.0, 92.0), (max(xs) - min(xs)) * 0.4, 2.5),
                fill=darken(palette.primary, 0.4),
                opacity=p.shadow_intensity * 0.3,
            )

        doc.add_path(rounded_polygon(face, corner), fill=paint(doc, palette, p, "face"))
        if p.shape_type == "pyramid":
            apex, right, left = face
            mid = ((right[0] + left[0]) / 2, (right[1] + left[1]) / 2)
            doc.add_path(rounded_polygon([apex, right, mid], 0.02), fill=darken(palette.accent, 0.1), opacity=0.45)
        elif p.shape_type == "cube":
            x0, y0 = face[0]
            x1, y1 = face[2]
            inset = (x1 - x0) * 0.18
            inner = [(x0 + inset, y0 + inset), (x1 - inset, y0 + inset), (x1 - inset, y1 - inset), (x0 + inset, y1 - inset)]
            doc.add_path(rounded_polygon(inner, 0.1), fill=lighten(palette.accent, 0.1), opacity=0.35)
        return {"shape": p.shape_type, "layers": p.depth_layers, "offset": round(p.depth_offset, 2)}


ALGORITHM = register_algorithm(DepthGeometry())
generate_depth_geometry, generate_single_depth_geometry_preview = entry_points(ALGORITHM)

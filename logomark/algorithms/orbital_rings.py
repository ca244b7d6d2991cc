"""Intersecting tilted elliptical rings with perspective ordering."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..controller import entry_points
from ..geometry import bezier_circle, bezier_ellipse, clamp, ellipse_ring
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint, pick
from .registry import register_algorithm

INTERSECTIONS = ("weave", "overlap", "break")
BASE_RADIUS = 35.0


@dataclass(frozen=True)
class OrbitalRingsParams(StyleParams):
    ring_count: int
    ring_thickness: float
    orbit_angle: float
    orbit_eccentricity: float
    intersection_style: str


class OrbitalRings(Algorithm):
    name = "orbital_rings"
    family = "nested"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 80
    description = "Intersecting orbital rings with 3D perspective"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            OrbitalRingsParams,
            base,
            rotation_offset=derived.rotation_offset / 3,
            ring_count=int(clamp(round(derived.element_count / 5) + 1, 2, 4)),
            ring_thickness=clamp(derived.ring_thickness, 2.0, 8.0),
            orbit_angle=derived.angle_spread * 0.67,
            orbit_eccentricity=clamp(derived.scale_factor - 0.7, 0.0, 0.5),
            intersection_style=pick(INTERSECTIONS, derived.style_variant),
            **style_fields(derived, variant),
        )

    def _rings(self, p):
        """(index, tilt, depth) per ring, sorted back to front."""
        step = math.pi / (p.ring_count + 1)
        rings = []
        for i in range(p.ring_count):
            tilt = (i + 1) * step + math.radians(p.rotation_offset) + math.radians(p.orbit_angle)
            rings.append((i, tilt, math.sin(tilt)))
        return sorted(rings, key=lambda ring: ring[2])

    def build_geometry(self, p, doc, palette, rng):
        rx = BASE_RADIUS
        ry = BASE_RADIUS * (0.4 + p.orbit_eccentricity)
        # Outer edge of the band must stay inside the canvas
        rx = min(rx, 46.0 - p.ring_thickness / 2)
        ordered = self._rings(p)
        last = max(1, p.ring_count - 1)
        for index, tilt, _ in ordered:
            t = index / last
            if index == 0:
                fill = paint(doc, palette, p, "ring")
            else:
                fill = gradient_between(
                    doc,
                    "ring",
                    mix(lighten(palette.primary, 0.15), palette.accent, t * 0.5),
                    mix(palette.primary, palette.accent if palette.explicit_accent else darken(palette.primary, 0.15), t),
                    45 + index * 30,
                )
            opacity = 0.85 if p.intersection_style == "overlap" else 1.0
            doc.add_path(ellipse_ring(CX, CY, rx, ry, p.ring_thickness, tilt), fill=fill, opacity=opacity)

        if p.intersection_style == "weave":
            # Bring the rearmost ring back over the front one at half strength
            index, tilt, _ = ordered[0]
            doc.add_path(ellipse_ring(CX, CY, rx, ry, p.ring_thickness * 0.6, tilt), fill=lighten(palette.primary, 0.2), opacity=0.5)
        elif p.intersection_style == "break":
            for index, tilt, _ in ordered:
                doc.add_path(bezier_ellipse(CX, CY, rx, ry, tilt), stroke="#ffffff", stroke_width=0.6, opacity=0.45)

        doc.add_path(bezier_circle(CX, CY, max(2.0, p.ring_thickness * 0.9)), fill=palette.accent)
        return {"rings": p.ring_count, "intersection": p.intersection_style, "eccentricity": round(p.orbit_eccentricity, 3)}


ALGORITHM = register_algorithm(OrbitalRings())
generate_orbital_rings, generate_single_orbital_rings_preview = entry_points(ALGORITHM)

"""Leaves fanned from a shared stem, with vein patterns."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten
from ..controller import entry_points
from ..geometry import PathData, clamp, cubic_path, rotate_point, star_path
from ..seed import add_noise
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint, pick
from .registry import register_algorithm

LEAF_SHAPES = ("oval", "pointed", "heart", "maple")
VEINS = ("none", "central", "branching", "parallel")
_TIP_CURVE = {"pointed": 0.2, "heart": 0.4}
LEAF_WIDTH = 28.0
LEAF_HEIGHT = 40.0
FAN_STEP = math.radians(32)


@dataclass(frozen=True)
class LeafOrganicParams(StyleParams):
    leaf_shape: str
    vein_pattern: str
    stem_curve: float
    serration_count: int
    leaf_curl: float
    stem_length: float
    vein_depth: float
    asymmetry: float
    leaf_count: int
    drop_shadow: bool


def leaf_outline(p, cx: float, cy: float, scale: float, angle: float, pivot, rng) -> PathData:
    """Closed leaf from tip round to base and back, turned about ``pivot``."""
    w, h = LEAF_WIDTH * scale, LEAF_HEIGHT * scale
    if p.leaf_shape == "maple":
        lobes = int(clamp(p.serration_count // 2 + 3, 3, 7))
        x, y = rotate_point((cx, cy), pivot, angle)
        return star_path(x, y, h * 0.5, h * 0.3, lobes, rotation=angle, corner=0.3)
    half = w / 2
    lb, rb = 1 - p.asymmetry, 1 + p.asymmetry
    tip, base = cy - h / 2, cy + h / 2
    upper, lower = cy - h * 0.2, cy + h * 0.15
    tc = _TIP_CURVE.get(p.leaf_shape, 0.3)
    wl = add_noise(0.0, p.leaf_curl, rng, 3.0) if p.leaf_curl > 0 else 0.0
    wr = add_noise(0.0, p.leaf_curl, rng, 3.0) if p.leaf_curl > 0 else 0.0
    segments = [
        ((cx - half * tc * lb, tip + h * 0.1), (cx - half * lb + wl, upper - h * 0.1), (cx - half * lb + wl, upper)),
        ((cx - half * 0.95 * lb + wl, cy - h * 0.05), (cx - half * 0.9 * lb, lower - h * 0.05), (cx - half * 0.7 * lb, lower)),
        ((cx - half * 0.4 * lb, lower + h * 0.15), (cx - half * 0.15, base - h * 0.05), (cx, base)),
        ((cx + half * 0.15, base - h * 0.05), (cx + half * 0.4 * rb, lower + h * 0.15), (cx + half * 0.7 * rb, lower)),
        ((cx + half * 0.9 * rb, lower - h * 0.05), (cx + half * 0.95 * rb + wr, cy - h * 0.05), (cx + half * rb + wr, upper)),
        ((cx + half * rb + wr, upper - h * 0.1), (cx + half * tc * rb, tip + h * 0.1), (cx, tip)),
    ]
    return cubic_path((cx, tip), segments, center=pivot, angle=angle)


def veins(p, cx: float, cy: float, scale: float, angle: float, pivot) -> PathData:
    out = PathData()
    if p.vein_pattern == "none" or p.vein_depth < 0.2:
        return out
    h = LEAF_HEIGHT * scale
    tip, base = cy - h / 2, cy + h / 2
    out.extend(cubic_path((cx, tip + 3 * scale), [((cx, tip + h * 0.3), (cx, cy + h * 0.1), (cx, base - 5 * scale))], closed=False, center=pivot, angle=angle))
    if p.vein_pattern in ("branching", "parallel"):
        count = 4 if p.vein_pattern == "branching" else 6
        step = (h - 15 * scale) / count
        for i in range(count):
            y = tip + 8 * scale + i * step
            spread = (6 + i * 1.2) * scale
            x = cx - spread if i % 2 == 0 else cx + spread
            branch = [(((cx + x) / 2, y + 2 * scale), (x, y + 4 * scale), (x, y + 5 * scale))]
            out.extend(cubic_path((cx, y), branch, closed=False, center=pivot, angle=angle))
    return out


class LeafOrganic(Algorithm):
    name = "leaf_organic"
    family = "overlap"
    archetype = "symbol"
    default_category = "sustainability"
    min_quality = 80
    description = "Organic leaf shapes with veins and a curved stem"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            LeafOrganicParams,
            base,
            leaf_shape=pick(LEAF_SHAPES, derived.style_variant),
            vein_pattern=pick(VEINS, derived.style_variant + 1),
            stem_curve=derived.curve_tension,
            serration_count=int(math.floor(derived.element_count * 0.5)),
            leaf_curl=derived.organic_amount * 0.5,
            stem_length=derived.arm_length * 0.4 + 10,
            vein_depth=derived.perspective_strength,
            asymmetry=derived.jitter_amount * 0.02,
            leaf_count=int(clamp(math.floor(derived.layer_count * 0.6), 1, 3)),
            drop_shadow=derived.depth_offset > 10,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        stem_len = min(p.stem_length, 20.0)
        scale = 1.0 if p.leaf_count == 1 else 0.8
        leaf_cy = CY - stem_len / 2 + (0 if p.leaf_count == 1 else 4)
        pivot = (CX, leaf_cy + LEAF_HEIGHT * scale / 2)
        curve = p.stem_curve * 8
        sx, sy = pivot
        stem = cubic_path(
            (sx, sy),
            [((sx - curve * 0.3, sy + stem_len * 0.3), (sx - curve, sy + stem_len * 0.7), (sx - curve * 0.8, sy + stem_len))],
            closed=False,
        )
        doc.add_path(stem, stroke=darken(palette.primary, 0.2), stroke_width=2.2, linecap="round")

        angles = [(i - (p.leaf_count - 1) / 2) * FAN_STEP for i in range(p.leaf_count)]
        for i, angle in enumerate(angles):
            if p.drop_shadow:
                doc.add_path(leaf_outline(p, CX + 1.5, leaf_cy + 2.0, scale, angle, pivot, rng), fill=darken(palette.primary, 0.35), opacity=0.25)
            if i == len(angles) // 2:
                fill = paint(doc, palette, p, "leaf")
            else:
                fill = gradient_between(doc, "leaf", lighten(palette.primary, 0.15), palette.accent, p.gradient_angle + 30 * i)
            doc.add_path(leaf_outline(p, CX, leaf_cy, scale, angle, pivot, rng), fill=fill)
            if p.leaf_shape != "maple":
                doc.add_path(
                    veins(p, CX, leaf_cy, scale, angle, pivot),
                    stroke=lighten(palette.primary, 0.3),
                    stroke_width=0.9 + p.vein_depth * 0.6,
                    opacity=0.5 + p.vein_depth * 0.4,
                    linecap="round",
                )
        return {"shape": p.leaf_shape, "veins": p.vein_pattern, "leaves": p.leaf_count}


ALGORITHM = register_algorithm(LeafOrganic())
generate_leaf_organic, generate_single_leaf_organic_preview = entry_points(ALGORITHM)

"""Stacked horizontal bars, skewed into parallelograms, each with its own gradient."""
from __future__ import annotations

import math
from dataclasses import dataclass

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..constants import CANVAS_SIZE
from ..controller import entry_points
from ..geometry import PathData, Point, clamp
from ..seed import add_noise
from ..svg import url
from .base import Algorithm, StyleParams, style_fields
from .registry import register_algorithm

MARGIN = 4.0
MAX_GAP_SHARE = 0.4


@dataclass(frozen=True)
class ParallelBarsParams(StyleParams):
    bar_count: int
    bar_width_ratio: float
    bar_skew: float
    bar_gap: float
    bar_roundness: float
    gradient_spread: float
    stagger_offset: float
    taper_amount: float


def parallelogram(tl: Point, tr: Point, br: Point, bl: Point, radius: float, tension: float) -> PathData:
    """Closed parallelogram whose corners are cubic arcs of ``radius``."""
    r = min(radius, abs(tr[0] - tl[0]) / 4, abs(bl[1] - tl[1]) / 4)
    path = PathData()
    if r < 1:
        return path.polyline([tl, tr, br, bl])
    k = r * (1 - tension)
    path.move(tl[0] + r, tl[1])
    path.line(tr[0] - r, tr[1])
    path.cubic(tr[0] - k, tr[1], tr[0], tr[1] + k, tr[0], tr[1] + r)
    path.line(br[0], br[1] - r)
    path.cubic(br[0], br[1] - k, br[0] - k, br[1], br[0] - r, br[1])
    path.line(bl[0] + r, bl[1])
    path.cubic(bl[0] + k, bl[1], bl[0], bl[1] - k, bl[0], bl[1] - r)
    path.line(tl[0], tl[1] + r)
    path.cubic(tl[0], tl[1] + k, tl[0] + k, tl[1], tl[0] + r, tl[1])
    return path.close()


class ParallelBars(Algorithm):
    name = "parallel_bars"
    family = "overlap"
    archetype = "symbol"
    default_category = "finance"
    min_quality = 80
    description = "Stacked skewed bars with staggered offsets and per-bar gradients"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            ParallelBarsParams,
            base,
            bar_count=int(clamp(round(derived.element_count / 4) + 1, 3, 6)),
            bar_width_ratio=0.5 + derived.taper_ratio * 0.4,
            bar_skew=derived.skew_x / 0.3 * 20.0,
            bar_gap=3.0 + derived.spacing_factor / 3.0 * 10.0,
            bar_roundness=0.3 + derived.roundness * 0.7,
            gradient_spread=0.3 + derived.flow_intensity * 0.7,
            stagger_offset=abs(derived.offset_x) * 2.0,
            taper_amount=derived.weight_distribution * 0.5,
            **style_fields(derived, variant),
        )

    def rows(self, p, rng):
        """(top, bottom, x_start, x_end, skew_offset) per bar, kept on the canvas."""
        n = p.bar_count
        padding = CANVAS_SIZE * p.padding_ratio
        available = CANVAS_SIZE - padding * 2
        gap = min(p.bar_gap, available * MAX_GAP_SHARE / (n - 1))
        height = (available - (n - 1) * gap) / n
        skew = math.tan(math.radians(p.bar_skew)) * height

        out = []
        for i in range(n):
            stagger = (1 if i % 2 == 0 else -1) * p.stagger_offset
            top = padding + i * (height + gap) + add_noise(0.0, p.noise_amount, rng, 3.0)
            taper = 1 - p.taper_amount * (i / (n - 1))
            width = add_noise((CANVAS_SIZE - padding * 2) * p.bar_width_ratio * taper, p.size_variance, rng, 10.0)
            x0 = (CANVAS_SIZE - width) / 2 + stagger
            lo, hi = x0 + min(0.0, skew), x0 + width + max(0.0, skew)
            if lo < MARGIN:
                x0 += MARGIN - lo
            elif hi > CANVAS_SIZE - MARGIN:
                x0 -= hi - (CANVAS_SIZE - MARGIN)
            out.append((top, top + height, x0, x0 + width, skew))
        return out

    def build_geometry(self, p, doc, palette, rng):
        rows = self.rows(p, rng)
        last = len(rows) - 1
        for i, (top, bottom, x0, x1, skew) in enumerate(rows):
            t = i / last
            spread = p.gradient_spread
            end = mix(palette.primary, palette.accent, t * spread) if palette.explicit_accent else darken(palette.primary, 0.2 * t * spread)
            grad = doc.add_linear_gradient(
                "bar",
                [(0.0, lighten(palette.primary, 0.25 * (1 - t) * spread)), (0.5, palette.primary), (1.0, end)],
                angle=p.gradient_angle + i * 5,
            )
            radius = (bottom - top) / 2 * p.bar_roundness
            bar = parallelogram((x0 + skew, top), (x1 + skew, top), (x1, bottom), (x0, bottom), radius, p.curve_tension)
            opacity = clamp(add_noise(p.base_opacity, p.opacity_falloff * 0.1, rng, 0.1), 0.5, 1.0)
            doc.add_path(bar, fill=url(grad), opacity=opacity)
        return {"bars": p.bar_count, "skew": round(p.bar_skew, 2), "stagger": round(p.stagger_offset, 2)}


ALGORITHM = register_algorithm(ParallelBars())
generate_parallel_bars, generate_single_parallel_bars_preview = entry_points(ALGORITHM)

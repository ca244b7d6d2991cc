from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from ..base_params import extend_base
from ..colors import darken, lighten, mix
from ..constants import BEZIER_CIRCLE_K
from ..controller import entry_points
from ..geometry import PathData, bezier_circle, clamp, cubic_path
from .base import Algorithm, StyleParams, style_fields
from .common import CX, CY, gradient_between, paint
from .registry import register_algorithm

CLOUD_WIDTH = 48.0
CLOUD_HEIGHT = 28.0
WIDTH_SCALE = 1.45


@dataclass(frozen=True)
class CloudSoftParams(StyleParams):
    puff_count: int
    base_width: float
    shadow_depth: float
    cloud_layers: int
    fluffiness: float
    puff_variation: float
    base_height: float
    softness: float
    rain_drops: int
    sun_peek: bool


def puffs(p, cx: float, cy: float, scale: float) -> List[Tuple[float, float, float]]:
    width = CLOUD_WIDTH * WIDTH_SCALE * scale * p.base_width
    height = CLOUD_HEIGHT * scale
    left, top = cx - width / 2, cy - height * 0.4
    step = width / (p.puff_count + 1)
    out = []
    for i in range(p.puff_count):
        center = i == p.puff_count // 2
        lift = 1.2 if center else 1 - abs(i - p.puff_count / 2) * p.puff_variation * 0.2
        r = (height * 0.35 + (4 * scale if center else 0)) * p.fluffiness
        out.append((left + step * (i + 1), top + (1 - lift) * height * 0.3, r))
    return out


def cloud_path(p, cx: float, cy: float, scale: float = 1.0) -> PathData:
    """Flat-bottomed cloud: left flank, puff tops joined through valleys, right flank, base."""
    width = CLOUD_WIDTH * WIDTH_SCALE * scale * p.base_width
    height = CLOUD_HEIGHT * scale
    left, right = cx - width / 2, cx + width / 2
    base = cy + height * (0.15 + p.base_height)
    k = p.softness * BEZIER_CIRCLE_K
    tops = puffs(p, cx, cy, scale)
    x, y, r = tops[0]
    segments = [((left - 2, base - height * 0.2), (x - r, y + r * 0.5), (x - r, y))]
    for i, (x, y, r) in enumerate(tops):
        segments.append(((x - r * k, y - r), (x + r * k, y - r), (x + r, y)))
        if i + 1 < len(tops):
            nx, ny, nr = tops[i + 1]
            vx, vy = (x + nx) / 2, max(y, ny) + height * 0.05
            segments.append(((x + r, y + r * 0.3), (vx, vy), (vx, vy)))
            segments.append(((vx, vy), (nx - nr, ny + nr * 0.3), (nx - nr, ny)))
    x, y, r = tops[-1]
    segments.append(((x + r, y + r * 0.5), (right + 2, base - height * 0.2), (right, base)))
    segments.append(((right - width * 0.1, base + 2 * scale), (left + width * 0.1, base + 2 * scale), (left, base)))
    return cubic_path((left, base), segments)


def rain_drop(cx: float, cy: float, size: float) -> PathData:
    return cubic_path(
        (cx, cy - size),
        [
            ((cx + size * 0.5, cy - size * 0.3), (cx + size * 0.5, cy + size * 0.5), (cx, cy + size)),
            ((cx - size * 0.5, cy + size * 0.5), (cx - size * 0.5, cy - size * 0.3), (cx, cy - size)),
        ],
    )


class CloudSoft(Algorithm):
    name = "cloud_soft"
    family = "overlap"
    archetype = "symbol"
    default_category = "technology"
    min_quality = 80
    description = "Soft layered clouds with optional sun and rain"

    def derive_params(self, derived, base, request, variant=0):
        return extend_base(
            CloudSoftParams,
            base,
            puff_count=int(clamp(math.floor(derived.element_count * 0.4 + 3), 3, 6)),
            base_width=derived.scale_factor * 0.3 + 0.7,
            shadow_depth=derived.perspective_strength * 5 + 2,
            cloud_layers=int(clamp(math.floor(derived.layer_count * 0.5 + 1), 1, 3)),
            fluffiness=derived.organic_amount * 0.4 + 0.6,
            puff_variation=derived.curve_tension * 0.4 + 0.3,
            base_height=derived.taper_ratio * 0.2 + 0.15,
            softness=derived.bulge_amount * 0.3 + 0.7,
            rain_drops=derived.color_placement % 4,
            sun_peek=derived.style_variant > 6,
            **style_fields(derived, variant),
        )

    def build_geometry(self, p, doc, palette, rng):
        # Widest cloud must fit: base width peaks at 1.24
        scale = min(1.0, 80.0 / (CLOUD_WIDTH * WIDTH_SCALE * p.base_width + 4))
        cy = CY - (6.0 if p.rain_drops else 0.0)
        if p.sun_peek:
            sun_x, sun_y = CX + 18 * scale, cy - 14 * scale
            doc.add_path(bezier_circle(sun_x, sun_y, 12 * scale), fill=gradient_between(doc, "sun", "#fbbf24", "#f59e0b", 45))

        doc.add_path(cloud_path(p, CX + p.shadow_depth * 0.4, cy + p.shadow_depth, scale), fill=darken(palette.primary, 0.3), opacity=0.2)
        for layer in range(p.cloud_layers - 1, 0, -1):
            back = 1 - layer * 0.12
            tone = mix(palette.primary, palette.accent, 0.3 * layer)
            doc.add_path(cloud_path(p, CX - 6 * layer * scale, cy - 5 * layer * scale, scale * back), fill=lighten(tone, 0.1 * layer), opacity=0.6)
        doc.add_path(cloud_path(p, CX, cy, scale), fill=paint(doc, palette, p, "cloud", angle_offset=90.0))

        drops = PathData()
        base = cy + CLOUD_HEIGHT * scale * (0.15 + p.base_height) + 8
        for i in range(p.rain_drops):
            offset = (i - (p.rain_drops - 1) / 2) * 10 * scale
            drops.extend(rain_drop(CX + offset, base + (i % 2) * 4, 3.2))
        doc.add_path(drops, fill=palette.accent if palette.explicit_accent else lighten(palette.primary, 0.2))
        return {"puffs": p.puff_count, "layers": p.cloud_layers, "rain": p.rain_drops, "sun": p.sun_peek}


ALGORITHM = register_algorithm(CloudSoft())
generate_cloud_soft, generate_single_cloud_soft_preview = entry_points(ALGORITHM)

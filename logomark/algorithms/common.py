"""Paint and placement helpers shared by the generator modules."""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..colors import Palette, darken, lighten
from ..constants import CANVAS_CENTER
from ..geometry import Point, clamp
from ..svg import DocumentBuilder, url
from .base import StyleParams

CX = CY = CANVAS_CENTER


def paint(
    doc: DocumentBuilder,
    palette: Palette,
    p: StyleParams,
    name: str = "fill",
    *,
    invert: bool = False,
    angle_offset: float = 0.0,
) -> str:
    """Gradient paint for the request's fill mode; every mode emits a gradient."""
    a, b = (palette.accent, palette.primary) if invert else (palette.primary, palette.accent)
    angle = p.gradient_angle + angle_offset
    if p.fill_mode == "solid":
        return url(doc.add_linear_gradient(name, [(0.0, a), (1.0, lighten(a, 0.06))], angle=angle))
    if p.fill_mode == "split":
        return url(doc.add_linear_gradient(name, [(0.0, a), (0.5, a), (0.5, b), (1.0, b)], angle=angle))
    if p.gradient_type == "radial":
        return url(doc.add_radial_gradient(name, [(0.0, lighten(a, 0.1)), (1.0, b)], r=65.0))
    return url(doc.add_linear_gradient(name, [(0.0, a), (1.0, b)], angle=angle))


def gradient_between(doc: DocumentBuilder, name: str, a: str, b: str, angle: float) -> str:
    return url(doc.add_linear_gradient(name, [(0.0, a), (1.0, b)], angle=angle))


def layer_colors(palette: Palette, count: int, placement: int = 0) -> List[str]:
    """``count`` colors from primary to accent, rotated by ``placement``."""
    ramp = palette.ramp(max(1, count))
    shift = placement % len(ramp)
    return ramp[shift:] + ramp[:shift]


def shade(color: str, depth: float) -> str:
    """Face tone for pseudo-3D: positive depth lightens, negative darkens."""
    if depth >= 0:
        return lighten(color, clamp(depth, 0.0, 1.0))
    return darken(color, clamp(-depth, 0.0, 1.0))


def radians(deg: float) -> float:
    return math.radians(deg % 360.0)


def pick(options: Sequence[str], index: int) -> str:
    return options[int(index) % len(options)]


def fit_points(points: Sequence[Point], margin: float = 8.0) -> List[Point]:
    """Scale ``points`` about the canvas center so they stay within the margin."""
    if not points:
        return []
    limit = CANVAS_CENTER - margin
    reach = max(max(abs(x - CX), abs(y - CY)) for x, y in points)
    if reach <= limit:
        return list(points)
    k = limit / reach
    return [(CX + (x - CX) * k, CY + (y - CY) * k) for x, y in points]


def fit_groups(groups: Sequence[Sequence[Point]], margin: float = 8.0) -> List[List[Point]]:
    """``fit_points`` applied with one shared scale across several point lists."""
    flat = fit_points([pt for group in groups for pt in group], margin)
    out, i = [], 0
    for group in groups:
        out.append(flat[i:i + len(group)])
        i += len(group)
    return out


def centered(groups: Sequence[Sequence[Point]]) -> List[List[Point]]:
    """Translate point lists together so their joint bounding box is centred."""
    x0, y0, x1, y1 = bounds([pt for group in groups for pt in group])
    dx, dy = CX - (x0 + x1) / 2, CY - (y0 + y1) / 2
    return [[(x + dx, y + dy) for x, y in group] for group in groups]


ARRANGEMENTS = ("horizontal", "vertical", "diagonal", "cluster")


def arrange(count: int, spacing: float, arrangement: str) -> List[Point]:
    """Centers for ``count`` overlapping primitives, balanced on the canvas.

    Line arrangements step by ``spacing``; ``cluster`` puts them on a ring of
    that radius starting at the top.
    """
    count = max(1, int(count))
    if arrangement == "cluster":
        if count == 1:
            return [(CX, CY)]
        return [
            (CX + math.cos(2 * math.pi * i / count - math.pi / 2) * spacing, CY + math.sin(2 * math.pi * i / count - math.pi / 2) * spacing)
            for i in range(count)
        ]
    step = spacing * (0.7 if arrangement == "diagonal" else 1.0)
    start = -step * (count - 1) / 2
    dx, dy = {"horizontal": (1.0, 0.0), "vertical": (0.0, 1.0)}.get(arrangement, (1.0, 1.0))
    return [(CX + (start + i * step) * dx, CY + (start + i * step) * dy) for i in range(count)]


def bounds(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return min(xs), min(ys), max(xs), max(ys)


__all__ = [
    "CX",
    "CY",
    "paint",
    "gradient_between",
    "layer_colors",
    "shade",
    "radians",
    "pick",
    "fit_points",
    "fit_groups",
    "centered",
    "bounds",
    "ARRANGEMENTS",
    "arrange",
]

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..constants import RIBBON_MAX_SAMPLES, RIBBON_SAMPLES
from .path import PathData, Point, clamp, lerp, safe_div
from .shapes import bezier_circle


def resample(points: Sequence[Point], count: int) -> List[Point]:
    """Evenly re-space ``points`` by arc length into ``count`` samples."""
    count = max(2, int(count))
    if len(points) < 2:
        return [tuple(points[0])] * count if points else []
    seg = [math.dist(points[i], points[i + 1]) for i in range(len(points) - 1)]
    total = sum(seg)
    if total <= 1e-9:
        return [tuple(points[0])] * count
    out: List[Point] = []
    idx, acc = 0, 0.0
    for i in range(count):
        target = total * i / (count - 1)
        while idx < len(seg) - 1 and acc + seg[idx] < target:
            acc += seg[idx]
            idx += 1
        t = clamp(safe_div(target - acc, seg[idx], 0.0), 0.0, 1.0)
        a, b = points[idx], points[idx + 1]
        out.append((a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t))
    return out


def _tangents(pts: Sequence[Point]) -> List[Tuple[float, float]]:
    n = len(pts)
    out = []
    for i in range(n):
        a = pts[max(0, i - 1)]
        b = pts[min(n - 1, i + 1)]
        dx, dy = b[0] - a[0], b[1] - a[1]
        length = math.hypot(dx, dy)
        if length <= 1e-9:
            out.append((1.0, 0.0))
        else:
            out.append((dx / length, dy / length))
    return out


def _append_spline(path: PathData, pts: Sequence[Point], tension: float) -> None:
    """Cubic Catmull-Rom through ``pts``; the pen must already sit on pts[0]."""
    n = len(pts)
    t = tension / 3.0
    for i in range(n - 1):
        p0 = pts[max(0, i - 1)]
        p1, p2 = pts[i], pts[i + 1]
        p3 = pts[min(n - 1, i + 2)]
        path.cubic(
            p1[0] + (p2[0] - p0[0]) * t,
            p1[1] + (p2[1] - p0[1]) * t,
            p2[0] - (p3[0] - p1[0]) * t,
            p2[1] - (p3[1] - p1[1]) * t,
            p2[0],
            p2[1],
        )


def ribbon_half_width(t: float, start: float, end: float, bulge: float = 0.0) -> float:
    return max(0.05, lerp(start, end, t) * (1.0 + bulge * math.sin(math.pi * t)))


def tapered_ribbon(
    centerline: Sequence[Point],
    start_half_width: float,
    end_half_width: float,
    tension: float = 0.5,
    bulge: float = 0.0,
    cap: str = "round",
    samples: int = RIBBON_SAMPLES,
) -> PathData:
    """Closed ribbon around ``centerline`` whose half-width tapers start to end.

    Traces the left offset forward, caps the far end with a quadratic, returns
    along the right offset and caps the start. Sample count is clamped to
    ``RIBBON_MAX_SAMPLES`` so path size stays bounded.
    """
    samples = int(clamp(samples, 2, RIBBON_MAX_SAMPLES))
    pts = resample(centerline, samples)
    if not pts:
        return PathData()
    if math.dist(pts[0], pts[-1]) <= 1e-6:
        return bezier_circle(pts[0][0], pts[0][1], max(start_half_width, end_half_width, 0.1))
    tension = clamp(tension, 0.0, 1.0)
    tans = _tangents(pts)
    left: List[Point] = []
    right: List[Point] = []
    widths: List[float] = []
    n = len(pts)
    for i, (p, (tx, ty)) in enumerate(zip(pts, tans)):
        w = ribbon_half_width(i / (n - 1), max(0.0, start_half_width), max(0.0, end_half_width), bulge)
        widths.append(w)
        nx, ny = -ty, tx
        left.append((p[0] + nx * w, p[1] + ny * w))
        right.append((p[0] - nx * w, p[1] - ny * w))

    path = PathData().move(*left[0])
    _append_spline(path, left, tension)
    ex, ey = tans[-1]
    end = pts[-1]
    if cap == "round":
        path.quad(end[0] + ex * widths[-1] * 2, end[1] + ey * widths[-1] * 2, *right[-1])
    else:
        path.line(*right[-1])
    _append_spline(path, list(reversed(right)), tension)
    sx, sy = tans[0]
    start = pts[0]
    if cap == "round":
        path.quad(start[0] - sx * widths[0] * 2, start[1] - sy * widths[0] * 2, *left[0])
    return path.close()


def radial_centerline(
    cx: float,
    cy: float,
    angle: float,
    inner: float,
    length: float,
    curve_offset: float = 0.0,
    steps: int = 5,
) -> List[Point]:
    """Straight or bowed spoke from radius ``inner`` out to ``inner + length``."""
    steps = max(2, steps)
    ca, sa = math.cos(angle), math.sin(angle)
    out: List[Point] = []
    for i in range(steps):
        t = i / (steps - 1)
        r = inner + length * t
        bow = curve_offset * math.sin(math.pi * t)
        out.append((cx + ca * r - sa * bow, cy + sa * r + ca * bow))
    return out


__all__ = ["resample", "tapered_ribbon", "ribbon_half_width", "radial_centerline"]

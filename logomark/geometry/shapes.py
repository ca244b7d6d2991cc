"""
Closed-form bezier primitives.

All constructors return PathData on the 0-100 canvas. Degenerate sizes are
clamped to zero rather than raising.
"""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..constants import BEZIER_CIRCLE_K
from ..seed import fbm
from .path import PathData, Point, clamp, lerp_point, polar, rotate_point

K = BEZIER_CIRCLE_K


def bezier_ellipse(cx: float, cy: float, rx: float, ry: float, rotation: float = 0.0, reverse: bool = False) -> PathData:
    """Four-segment cubic ellipse starting at the top, clockwise.

    With the standard constant the radial error stays under 0.03% of the radius.
    ``reverse`` walks the same curve counter-clockwise (a hole under nonzero).
    """
    rx, ry = max(0.0, rx), max(0.0, ry)
    kx, ky = rx * K, ry * K
    pts = [
        (cx, cy - ry),
        (cx + kx, cy - ry), (cx + rx, cy - ky), (cx + rx, cy),
        (cx + rx, cy + ky), (cx + kx, cy + ry), (cx, cy + ry),
        (cx - kx, cy + ry), (cx - rx, cy + ky), (cx - rx, cy),
        (cx - rx, cy - ky), (cx - kx, cy - ry), (cx, cy - ry),
    ]
    if rotation:
        pts = [rotate_point(p, (cx, cy), rotation) for p in pts]
    if reverse:
        pts.reverse()
    path = PathData().move(*pts[0])
    for i in range(1, 13, 3):
        path.cubic(*pts[i], *pts[i + 1], *pts[i + 2])
    return path.close()


def ellipse_ring(cx: float, cy: float, rx: float, ry: float, thickness: float, rotation: float = 0.0) -> PathData:
    """Closed elliptical band: outer ellipse plus reversed inner ellipse."""
    half = max(0.0, thickness) / 2
    ring = bezier_ellipse(cx, cy, rx + half, ry + half, rotation)
    return ring.extend(bezier_ellipse(cx, cy, max(0.0, rx - half), max(0.0, ry - half), rotation, reverse=True))


def bezier_circle(cx: float, cy: float, r: float) -> PathData:
    return bezier_ellipse(cx, cy, r, r)


def bezier_circle_reversed(cx: float, cy: float, r: float) -> PathData:
    """Counter-clockwise circle, for punching holes under the nonzero rule."""
    r = max(0.0, r)
    k = r * K
    return (
        PathData()
        .move(cx, cy - r)
        .cubic(cx - k, cy - r, cx - r, cy - k, cx - r, cy)
        .cubic(cx - r, cy + k, cx - k, cy + r, cx, cy + r)
        .cubic(cx + k, cy + r, cx + r, cy + k, cx + r, cy)
        .cubic(cx + r, cy - k, cx + k, cy - r, cx, cy - r)
        .close()
    )


def bezier_rounded_rect(x: float, y: float, w: float, h: float, r: float) -> PathData:
    """Rectangle with cubic corner arcs; radius clamped to min(w, h) / 2."""
    w, h = max(0.0, w), max(0.0, h)
    r = clamp(r, 0.0, min(w, h) / 2)
    path = PathData()
    if r <= 0:
        return path.move(x, y).line(x + w, y).line(x + w, y + h).line(x, y + h).close()
    k = r * K
    path.move(x + r, y)
    path.line(x + w - r, y)
    path.cubic(x + w - r + k, y, x + w, y + r - k, x + w, y + r)
    path.line(x + w, y + h - r)
    path.cubic(x + w, y + h - r + k, x + w - r + k, y + h, x + w - r, y + h)
    path.line(x + r, y + h)
    path.cubic(x + r - k, y + h, x, y + h - r + k, x, y + h - r)
    path.line(x, y + r)
    path.cubic(x, y + r - k, x + r - k, y, x + r, y)
    return path.close()


def rotated_rounded_rect(cx: float, cy: float, w: float, h: float, r: float, angle: float = 0.0) -> PathData:
    """Rounded rectangle centred on (cx, cy), rotated by ``angle`` radians."""
    hw, hh = max(0.0, w) / 2, max(0.0, h) / 2
    r = clamp(r, 0.0, min(hw, hh))
    k = r * K
    x0, y0, x1, y1 = cx - hw, cy - hh, cx + hw, cy + hh

    def rot(x: float, y: float) -> Point:
        return rotate_point((x, y), (cx, cy), angle) if angle else (x, y)

    path = PathData().move(*rot(x0 + r, y0))
    path.line(*rot(x1 - r, y0))
    if r > 0:
        path.cubic(*rot(x1 - r + k, y0), *rot(x1, y0 + r - k), *rot(x1, y0 + r))
    path.line(*rot(x1, y1 - r))
    if r > 0:
        path.cubic(*rot(x1, y1 - r + k), *rot(x1 - r + k, y1), *rot(x1 - r, y1))
    path.line(*rot(x0 + r, y1))
    if r > 0:
        path.cubic(*rot(x0 + r - k, y1), *rot(x0, y1 - r + k), *rot(x0, y1 - r))
    path.line(*rot(x0, y0 + r))
    if r > 0:
        path.cubic(*rot(x0, y0 + r - k), *rot(x0 + r - k, y0), *rot(x0 + r, y0))
    return path.close()


def regular_polygon_points(cx: float, cy: float, radius: float, sides: int, rotation: float = 0.0) -> List[Point]:
    """Vertices at angle ``2*pi*i/n + rotation - pi/2`` (first vertex on top)."""
    sides = max(3, int(sides))
    radius = max(0.0, radius)
    return [polar(cx, cy, radius, 2 * math.pi * i / sides + rotation - math.pi / 2) for i in range(sides)]


def star_points(cx: float, cy: float, outer: float, inner: float, points: int, rotation: float = 0.0) -> List[Point]:
    points = max(3, int(points))
    outer = max(0.0, outer)
    inner = clamp(inner, 0.0, outer)
    out: List[Point] = []
    for i in range(points * 2):
        r = outer if i % 2 == 0 else inner
        out.append(polar(cx, cy, r, math.pi * i / points + rotation - math.pi / 2))
    return out


def rounded_polygon(points: Sequence[Point], corner: float = 0.0) -> PathData:
    """Closed polygon whose corners are cut at ``corner`` (0-0.5 of each edge) and
    rounded with a quadratic through the original vertex."""
    n = len(points)
    path = PathData()
    if n < 3:
        return path.polyline(points, closed=True)
    corner = clamp(corner, 0.0, 0.5)
    if corner <= 0:
        return path.polyline(points, closed=True)
    entries = []
    for i in range(n):
        prev_p, p, next_p = points[i - 1], points[i], points[(i + 1) % n]
        entries.append((lerp_point(p, prev_p, corner), p, lerp_point(p, next_p, corner)))
    path.move(*entries[0][2])
    for i in range(1, n + 1):
        start, vertex, end = entries[i % n]
        path.line(*start)
        path.quad(*vertex, *end)
    return path.close()


def regular_polygon(cx: float, cy: float, radius: float, sides: int, rotation: float = 0.0, corner: float = 0.0) -> PathData:
    return rounded_polygon(regular_polygon_points(cx, cy, radius, sides, rotation), corner)


def star_path(cx: float, cy: float, outer: float, inner: float, points: int, rotation: float = 0.0, corner: float = 0.0) -> PathData:
    return rounded_polygon(star_points(cx, cy, outer, inner, points, rotation), corner)


def smooth_curve(points: Sequence[Point], tension: float = 0.5, closed: bool = False) -> PathData:
    """Catmull-Rom spline through ``points`` emitted as cubic segments.

    ``tension`` scales the tangent length (0 gives straight segments).
    """
    path = PathData()
    n = len(points)
    if n == 0:
        return path
    if n < 3:
        path.polyline(points, closed=closed)
        return path
    t = clamp(tension, 0.0, 1.0) / 3.0
    path.move(*points[0])
    seg_count = n if closed else n - 1
    for i in range(seg_count):
        p0 = points[(i - 1) % n] if (closed or i > 0) else points[0]
        p1 = points[i]
        p2 = points[(i + 1) % n]
        p3 = points[(i + 2) % n] if (closed or i + 2 < n) else points[-1]
        c1 = (p1[0] + (p2[0] - p0[0]) * t, p1[1] + (p2[1] - p0[1]) * t)
        c2 = (p2[0] - (p3[0] - p1[0]) * t, p2[1] - (p3[1] - p1[1]) * t)
        path.cubic(*c1, *c2, *p2)
    if closed:
        path.close()
    return path


def organic_blob(cx: float, cy: float, radius: float, wobble: float, lobes: int = 8, seed: int = 0, tension: float = 0.6) -> PathData:
    """Closed blob: radius modulated by fbm noise around the circle."""
    lobes = max(4, int(lobes))
    wobble = clamp(wobble, 0.0, 0.6)
    pts: List[Point] = []
    for i in range(lobes):
        a = 2 * math.pi * i / lobes - math.pi / 2
        n = fbm(math.cos(a) * 1.5 + 10, math.sin(a) * 1.5 + 10, octaves=3, seed=seed)
        pts.append(polar(cx, cy, max(0.0, radius * (1 + wobble * n)), a))
    return smooth_curve(pts, tension=tension, closed=True)


def infinity_points(cx: float, cy: float, width: float, height: float, samples: int = 32) -> List[Point]:
    """Lemniscate of Gerono sampled along t; used as a ribbon centerline."""
    out: List[Point] = []
    for i in range(samples + 1):
        t = 2 * math.pi * i / samples
        out.append((cx + width / 2 * math.cos(t), cy + height / 2 * math.sin(2 * t)))
    return out


def arc_segments(cx: float, cy: float, rx: float, ry: float, start_deg: float, end_deg: float) -> List[Tuple[Point, Point, Point]]:
    """Cubic pieces (<= 90 degrees each) approximating an elliptical arc.

    Angles are degrees in SVG space: 0 points right, 90 points down.
    """
    sweep = end_deg - start_deg
    pieces = max(1, math.ceil(abs(sweep) / 90.0 - 1e-9))
    step = math.radians(sweep / pieces)
    k = 4.0 / 3.0 * math.tan(step / 4.0)
    a = math.radians(start_deg)
    out = []
    for _ in range(pieces):
        b = a + step
        ca, sa, cb, sb = math.cos(a), math.sin(a), math.cos(b), math.sin(b)
        out.append((
            (cx + rx * (ca - k * sa), cy + ry * (sa + k * ca)),
            (cx + rx * (cb + k * sb), cy + ry * (sb - k * cb)),
            (cx + rx * cb, cy + ry * sb),
        ))
        a = b
    return out


def arc_point(cx: float, cy: float, rx: float, ry: float, deg: float) -> Point:
    a = math.radians(deg)
    return cx + rx * math.cos(a), cy + ry * math.sin(a)


def arc_band(cx: float, cy: float, rx: float, ry: float, start_deg: float, end_deg: float, thickness: float) -> PathData:
    """Closed band of ``thickness`` centred on an elliptical arc.

    Always wound in the positive (clockwise on screen) sense so bands union
    cleanly with other positively wound shapes under the nonzero rule.
    """
    if end_deg < start_deg:
        start_deg, end_deg = end_deg, start_deg
    half = max(0.0, thickness) / 2
    orx, ory = rx + half, ry + half
    irx, iry = max(0.01, rx - half), max(0.01, ry - half)
    path = PathData().move(*arc_point(cx, cy, orx, ory, start_deg))
    for c1, c2, p in arc_segments(cx, cy, orx, ory, start_deg, end_deg):
        path.cubic(*c1, *c2, *p)
    path.line(*arc_point(cx, cy, irx, iry, end_deg))
    for c1, c2, p in arc_segments(cx, cy, irx, iry, end_deg, start_deg):
        path.cubic(*c1, *c2, *p)
    return path.close()


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace area; positive for clockwise-on-screen winding."""
    total = 0.0
    n = len(points)
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def thick_segment(a: Point, b: Point, thickness: float) -> List[Point]:
    """Rectangle of ``thickness`` around segment a-b, positively wound."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    length = math.hypot(dx, dy)
    if length <= 1e-9:
        dx, dy, length = 1.0, 0.0, 1.0
    nx, ny = -dy / length * thickness / 2, dx / length * thickness / 2
    quad = [(a[0] + nx, a[1] + ny), (b[0] + nx, b[1] + ny), (b[0] - nx, b[1] - ny), (a[0] - nx, a[1] - ny)]
    if signed_area(quad) < 0:
        quad.reverse()
    return quad


__all__ = [
    "bezier_ellipse",
    "ellipse_ring",
    "bezier_circle",
    "bezier_circle_reversed",
    "bezier_rounded_rect",
    "rotated_rounded_rect",
    "regular_polygon_points",
    "star_points",
    "rounded_polygon",
    "regular_polygon",
    "star_path",
    "smooth_curve",
    "organic_blob",
    "infinity_points",
    "arc_segments",
    "arc_point",
    "arc_band",
    "signed_area",
    "thick_segment",
]

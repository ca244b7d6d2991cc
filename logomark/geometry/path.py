from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

Point = Tuple[float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def safe_div(num: float, den: float, default: float = 0.0) -> float:
    if abs(den) < 1e-9:
        return default
    return num / den


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_point(a: Point, b: Point, t: float) -> Point:
    return a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t


def polar(cx: float, cy: float, radius: float, angle: float) -> Point:
    """Point at ``angle`` radians, measured clockwise from +x in SVG space."""
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def rotate_point(p: Point, center: Point, angle: float) -> Point:
    s, c = math.sin(angle), math.cos(angle)
    dx, dy = p[0] - center[0], p[1] - center[1]
    return center[0] + dx * c - dy * s, center[1] + dx * s + dy * c


def fmt(value: float) -> str:
    """Two-decimal SVG number; non-finite values collapse to 0."""
    if not math.isfinite(value):
        value = 0.0
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


class PathData:
    """Fluent builder for SVG path data (absolute M/L/C/Q/Z only)."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._count = 0

    def _emit(self, cmd: str, *coords: float) -> "PathData":
        if coords:
            self._parts.append(cmd + " " + " ".join(fmt(v) for v in coords))
        else:
            self._parts.append(cmd)
        self._count += 1
        return self

    def move(self, x: float, y: float) -> "PathData":
        return self._emit("M", x, y)

    def line(self, x: float, y: float) -> "PathData":
        return self._emit("L", x, y)

    def cubic(self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> "PathData":
        return self._emit("C", c1x, c1y, c2x, c2y, x, y)

    def quad(self, cx: float, cy: float, x: float, y: float) -> "PathData":
        return self._emit("Q", cx, cy, x, y)

    def close(self) -> "PathData":
        return self._emit("Z")

    def polyline(self, points: Sequence[Point], closed: bool = True) -> "PathData":
        if not points:
            return self
        self.move(*points[0])
        for p in points[1:]:
            self.line(*p)
        if closed:
            self.close()
        return self

    def extend(self, other: "PathData | str") -> "PathData":
        if isinstance(other, PathData):
            self._parts.extend(other._parts)
            self._count += other._count
        elif other:
            self._parts.append(str(other))
            self._count += sum(1 for ch in str(other) if ch.isalpha())
        return self

    @property
    def command_count(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __str__(self) -> str:
        return " ".join(self._parts)


def cubic_path(
    start: Point,
    segments: Sequence[Tuple[Point, Point, Point]],
    closed: bool = True,
    center: Optional[Point] = None,
    angle: float = 0.0,
) -> PathData:
    """Chain of cubic segments from ``start``, optionally turned about ``center``."""
    if angle and center is not None:
        start = rotate_point(start, center, angle)
        segments = [tuple(rotate_point(pt, center, angle) for pt in seg) for seg in segments]
    path = PathData().move(*start)
    for c1, c2, end in segments:
        path.cubic(*c1, *c2, *end)
    return path.close() if closed else path


def join_paths(parts: Iterable["PathData | str"]) -> str:
    return " ".join(str(p) for p in parts if p)


__all__ = [
    "Point",
    "PathData",
    "clamp",
    "safe_div",
    "lerp",
    "lerp_point",
    "polar",
    "rotate_point",
    "fmt",
    "join_paths",
    "cubic_path",
]

from __future__ import annotations

import math
import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import svgwrite

from .constants import VIEWBOX
from .geometry.path import PathData, fmt

# (offset 0-1, color) or (offset 0-1, color, opacity 0-1)
Stop = Union[Tuple[float, str], Tuple[float, str, float]]

_SLUG_RE = re.compile(r"[^a-zA-Z0-9_-]+")


def _slug(text: str) -> str:
    cleaned = _SLUG_RE.sub("-", text or "").strip("-")
    if not cleaned or not cleaned[0].isalpha():
        cleaned = f"lm-{cleaned}" if cleaned else "lm"
    return cleaned


def url(gradient_id: str) -> str:
    return f"url(#{gradient_id})"


def gradient_vector(angle_deg: float) -> Tuple[float, float, float, float]:
    """Percent endpoints (x1, y1, x2, y2) for a linear gradient at ``angle_deg``."""
    rad = math.radians(angle_deg)
    dx, dy = math.cos(rad) * 50, math.sin(rad) * 50
    return 50 - dx, 50 - dy, 50 + dx, 50 + dy


class DocumentBuilder:
    """Call-scoped SVG document on the fixed 0-100 canvas.

    Every id handed out is ``{namespace}-{name}-{n}`` with ``n`` counted per
    builder, so two documents built with different namespaces never collide and
    a document rebuilt with the same namespace is byte-identical.
    """

    def __init__(self, namespace: str):
        self.namespace = _slug(namespace)
        self._dwg = svgwrite.Drawing(size=("100%", "100%"), viewBox=VIEWBOX, debug=False)
        self._counter = 0
        self._ids: List[str] = []
        self.path_count = 0
        self.command_count = 0

    # ids -----------------------------------------------------------------
    def next_id(self, name: str) -> str:
        self._counter += 1
        gid = f"{self.namespace}-{_slug(name)}-{self._counter}"
        self._ids.append(gid)
        return gid

    @property
    def ids(self) -> List[str]:
        return list(self._ids)

    # gradients -----------------------------------------------------------
    def _add_stops(self, grad, stops: Sequence[Stop]) -> None:
        for stop in stops:
            offset, color = float(stop[0]), stop[1]
            opacity = stop[2] if len(stop) > 2 else None
            offset = min(1.0, max(0.0, offset))
            grad.add_stop_color(
                offset=f"{fmt(offset * 100)}%",
                color=color,
                opacity=fmt(min(1.0, max(0.0, opacity))) if opacity is not None else None,
            )

    def add_linear_gradient(self, name: str, stops: Sequence[Stop], angle: float = 90.0) -> str:
        gid = self.next_id(name)
        x1, y1, x2, y2 = gradient_vector(angle)
        grad = self._dwg.linearGradient(
            start=(f"{fmt(x1)}%", f"{fmt(y1)}%"),
            end=(f"{fmt(x2)}%", f"{fmt(y2)}%"),
            id=gid,
        )
        self._add_stops(grad, stops)
        self._dwg.defs.add(grad)
        return gid

    def add_radial_gradient(
        self,
        name: str,
        stops: Sequence[Stop],
        center: Tuple[float, float] = (50.0, 50.0),
        r: float = 50.0,
        focal: Optional[Tuple[float, float]] = None,
    ) -> str:
        gid = self.next_id(name)
        grad = self._dwg.radialGradient(
            center=(f"{fmt(center[0])}%", f"{fmt(center[1])}%"),
            r=f"{fmt(max(0.0, r))}%",
            focal=(f"{fmt(focal[0])}%", f"{fmt(focal[1])}%") if focal else None,
            id=gid,
        )
        self._add_stops(grad, stops)
        self._dwg.defs.add(grad)
        return gid

    # paths ---------------------------------------------------------------
    def add_path(
        self,
        d: Union[PathData, str],
        *,
        fill: str = "none",
        stroke: Optional[str] = None,
        stroke_width: Optional[float] = None,
        opacity: Optional[float] = None,
        fill_rule: Optional[str] = None,
        linecap: Optional[str] = None,
    ) -> bool:
        """Append a path; empty path data is skipped and reported as False."""
        data = str(d).strip()
        if not data:
            return False
        attrs = {"fill": fill}
        if stroke is not None:
            attrs["stroke"] = stroke
        if stroke_width is not None:
            attrs["stroke_width"] = fmt(max(0.0, stroke_width))
        if opacity is not None:
            attrs["opacity"] = fmt(min(1.0, max(0.0, opacity)))
        if fill_rule is not None:
            attrs["fill_rule"] = fill_rule
        if linecap is not None:
            attrs["stroke_linecap"] = linecap
        self._dwg.add(self._dwg.path(d=data, **attrs))
        self.path_count += 1
        self.command_count += d.command_count if isinstance(d, PathData) else sum(1 for ch in data if ch.isalpha())
        return True

    def add_paths(self, paths: Iterable[Union[PathData, str]], **style) -> int:
        return sum(1 for p in paths if self.add_path(p, **style))

    def tostring(self) -> str:
        return self._dwg.tostring()


__all__ = ["DocumentBuilder", "Stop", "url", "gradient_vector"]

"""
Hand-built letterforms.

Each letter is a tuple of primitives in half-size units (x in about [-0.65,
0.65], y in [-0.8, 0.8], y down):

    ("bar", (x1, y1), (x2, y2))          straight stroke
    ("arc", (cx, cy), rx, ry, a0, a1)    elliptical stroke from a0 to a1 degrees

Rendering scales by the half-size, thickens strokes by the stroke width and
winds every contour positively, so letters must be filled with the nonzero rule.
"""
from __future__ import annotations

from typing import Dict, Tuple

from .path import PathData
from .shapes import arc_band, rounded_polygon, thick_segment

Primitive = Tuple
Letterform = Tuple[Primitive, ...]

DEFAULT_LETTER = "O"

LETTERFORMS: Dict[str, Letterform] = {
    "A": (
        ("bar", (-0.6, 0.8), (0.0, -0.8)),
        ("bar", (0.0, -0.8), (0.6, 0.8)),
        ("bar", (-0.32, 0.25), (0.32, 0.25)),
    ),
    "B": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, -0.8), (-0.1, -0.8)),
        ("bar", (-0.5, 0.0), (-0.1, 0.0)),
        ("bar", (-0.5, 0.8), (-0.05, 0.8)),
        ("arc", (-0.1, -0.4), 0.5, 0.4, -90, 90),
        ("arc", (-0.05, 0.4), 0.55, 0.4, -90, 90),
    ),
    "C": (("arc", (0.0, 0.0), 0.6, 0.8, 40, 320),),
    "D": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, -0.8), (-0.1, -0.8)),
        ("bar", (-0.5, 0.8), (-0.1, 0.8)),
        ("arc", (-0.1, 0.0), 0.6, 0.8, -90, 90),
    ),
    "E": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, -0.8), (0.5, -0.8)),
        ("bar", (-0.5, 0.0), (0.3, 0.0)),
        ("bar", (-0.5, 0.8), (0.5, 0.8)),
    ),
    "F": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, -0.8), (0.5, -0.8)),
        ("bar", (-0.5, 0.0), (0.3, 0.0)),
    ),
    "G": (
        ("arc", (0.0, 0.0), 0.6, 0.8, 30, 320),
        ("bar", (0.52, 0.4), (0.52, 0.05)),
        ("bar", (0.1, 0.05), (0.52, 0.05)),
    ),
    "H": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (0.5, -0.8), (0.5, 0.8)),
        ("bar", (-0.5, 0.0), (0.5, 0.0)),
    ),
    "I": (
        ("bar", (0.0, -0.8), (0.0, 0.8)),
        ("bar", (-0.3, -0.8), (0.3, -0.8)),
        ("bar", (-0.3, 0.8), (0.3, 0.8)),
    ),
    "J": (
        ("bar", (0.35, -0.8), (0.35, 0.3)),
        ("bar", (0.0, -0.8), (0.55, -0.8)),
        ("arc", (0.0, 0.3), 0.35, 0.5, 0, 180),
    ),
    "K": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.45, 0.1), (0.55, -0.8)),
        ("bar", (-0.15, -0.15), (0.55, 0.8)),
    ),
    "L": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, 0.8), (0.5, 0.8)),
    ),
    "M": (
        ("bar", (-0.6, -0.8), (-0.6, 0.8)),
        ("bar", (0.6, -0.8), (0.6, 0.8)),
        ("bar", (-0.6, -0.8), (0.0, 0.3)),
        ("bar", (0.0, 0.3), (0.6, -0.8)),
    ),
    "N": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (0.5, -0.8), (0.5, 0.8)),
        ("bar", (-0.5, -0.8), (0.5, 0.8)),
    ),
    "O": (("arc", (0.0, 0.0), 0.6, 0.8, -90, 270),),
    "P": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, -0.8), (-0.1, -0.8)),
        ("bar", (-0.5, 0.1), (-0.1, 0.1)),
        ("arc", (-0.1, -0.35), 0.6, 0.45, -90, 90),
    ),
    "Q": (
        ("arc", (0.0, 0.0), 0.6, 0.8, -90, 270),
        ("bar", (0.15, 0.35), (0.65, 0.85)),
    ),
    "R": (
        ("bar", (-0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, -0.8), (-0.1, -0.8)),
        ("bar", (-0.5, 0.1), (-0.1, 0.1)),
        ("arc", (-0.1, -0.35), 0.6, 0.45, -90, 90),
        ("bar", (-0.05, 0.1), (0.55, 0.8)),
    ),
    "S": (
        ("arc", (0.0, -0.4), 0.5, 0.4, 90, 330),
        ("arc", (0.0, 0.4), 0.5, 0.4, -90, 150),
    ),
    "T": (
        ("bar", (-0.6, -0.8), (0.6, -0.8)),
        ("bar", (0.0, -0.8), (0.0, 0.8)),
    ),
    "U": (
        ("bar", (-0.5, -0.8), (-0.5, 0.3)),
        ("bar", (0.5, -0.8), (0.5, 0.3)),
        ("arc", (0.0, 0.3), 0.5, 0.5, 0, 180),
    ),
    "V": (
        ("bar", (-0.6, -0.8), (0.0, 0.8)),
        ("bar", (0.0, 0.8), (0.6, -0.8)),
    ),
    "W": (
        ("bar", (-0.65, -0.8), (-0.32, 0.8)),
        ("bar", (-0.32, 0.8), (0.0, -0.2)),
        ("bar", (0.0, -0.2), (0.32, 0.8)),
        ("bar", (0.32, 0.8), (0.65, -0.8)),
    ),
    "X": (
        ("bar", (-0.55, -0.8), (0.55, 0.8)),
        ("bar", (0.55, -0.8), (-0.55, 0.8)),
    ),
    "Y": (
        ("bar", (-0.55, -0.8), (0.0, 0.0)),
        ("bar", (0.55, -0.8), (0.0, 0.0)),
        ("bar", (0.0, 0.0), (0.0, 0.8)),
    ),
    "Z": (
        ("bar", (-0.5, -0.8), (0.5, -0.8)),
        ("bar", (0.5, -0.8), (-0.5, 0.8)),
        ("bar", (-0.5, 0.8), (0.5, 0.8)),
    ),
}


def normalize_letter(char: str) -> str:
    return (char or "")[:1].upper()


def is_known_letter(char: str) -> bool:
    return normalize_letter(char) in LETTERFORMS


def resolve_letter(char: str) -> str:
    """Letter actually drawn for ``char``; anything unknown maps to the default."""
    letter = normalize_letter(char)
    return letter if letter in LETTERFORMS else DEFAULT_LETTER


def first_letter(text: str) -> str:
    """First character of ``text`` as drawn (digits and symbols fall back)."""
    stripped = (text or "").strip()
    return resolve_letter(stripped[:1])


def letterform_path(char: str, cx: float, cy: float, half_size: float, stroke: float) -> PathData:
    """Render ``char`` centred on (cx, cy). Never raises for any input."""
    form = LETTERFORMS[resolve_letter(char)]
    h = max(0.0, half_size)
    s = max(0.1, stroke)
    path = PathData()
    for prim in form:
        if prim[0] == "bar":
            (x1, y1), (x2, y2) = prim[1], prim[2]
            quad = thick_segment((cx + x1 * h, cy + y1 * h), (cx + x2 * h, cy + y2 * h), s)
            path.extend(rounded_polygon(quad, 0.0))
        elif prim[0] == "arc":
            (ax, ay), rx, ry, a0, a1 = prim[1], prim[2], prim[3], prim[4], prim[5]
            path.extend(arc_band(cx + ax * h, cy + ay * h, rx * h, ry * h, a0, a1, s))
    return path


def stroke_for_weight(weight: float, size: float) -> float:
    """Stroke width for a 100-900 font weight at ``size``."""
    w = min(900.0, max(100.0, float(weight)))
    return w / 900.0 * size * 0.15


__all__ = [
    "LETTERFORMS",
    "DEFAULT_LETTER",
    "normalize_letter",
    "is_known_letter",
    "resolve_letter",
    "first_letter",
    "letterform_path",
    "stroke_for_weight",
]

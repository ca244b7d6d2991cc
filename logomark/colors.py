from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import InputError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def clamp01(value: float) -> float:
    return 0.0 if value < 0.0 else 1.0 if value > 1.0 else float(value)


def is_hex_color(token: object) -> bool:
    return isinstance(token, str) and bool(_HEX_RE.match(token.strip()))


def normalize_hex(token: str) -> str:
    """Return ``#rrggbb`` (lowercase) or raise InputError."""
    if not is_hex_color(token):
        raise InputError(f"Invalid color token: {token!r}", field="color")
    body = _HEX_RE.match(token.strip()).group(1).lower()
    if len(body) == 3:
        body = "".join(ch * 2 for ch in body)
    return f"#{body}"


def hex_to_rgb(token: str) -> Tuple[int, int, int]:
    body = normalize_hex(token)[1:]
    return int(body[0:2], 16), int(body[2:4], 16), int(body[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    def _c(v: float) -> int:
        return max(0, min(255, int(round(v))))

    return "#{:02x}{:02x}{:02x}".format(_c(r), _c(g), _c(b))


def _to_hls(token: str) -> Tuple[float, float, float]:
    r, g, b = hex_to_rgb(token)
    return colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)


def _from_hls(h: float, l: float, s: float) -> str:
    r, g, b = colorsys.hls_to_rgb(h % 1.0, clamp01(l), clamp01(s))
    return rgb_to_hex(r * 255, g * 255, b * 255)


def lighten(token: str, amount: float) -> str:
    """Raise HSL lightness by ``amount`` (0-1, clamped) of full scale."""
    h, l, s = _to_hls(token)
    return _from_hls(h, l + clamp01(amount), s)


def darken(token: str, amount: float) -> str:
    h, l, s = _to_hls(token)
    return _from_hls(h, l - clamp01(amount), s)


def saturate(token: str, amount: float) -> str:
    h, l, s = _to_hls(token)
    return _from_hls(h, l, s + clamp01(amount))


def rotate_hue(token: str, degrees: float) -> str:
    h, l, s = _to_hls(token)
    return _from_hls(h + degrees / 360.0, l, s)


def mix(a: str, b: str, weight: float = 0.5) -> str:
    """Blend ``a`` toward ``b``; weight 0 keeps ``a``, 1 gives ``b``."""
    w = clamp01(weight)
    ra, ga, ba = hex_to_rgb(a)
    rb, gb, bb = hex_to_rgb(b)
    return rgb_to_hex(ra + (rb - ra) * w, ga + (gb - ga) * w, ba + (bb - ba) * w)


def relative_luminance(token: str) -> float:
    def _lin(c: int) -> float:
        v = c / 255.0
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(token)
    return 0.2126 * _lin(r) + 0.7152 * _lin(g) + 0.0722 * _lin(b)


def contrast_ratio(a: str, b: str) -> float:
    la, lb = relative_luminance(a), relative_luminance(b)
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)


def is_light(token: str) -> bool:
    return relative_luminance(token) > 0.179


def contrast_color(token: str) -> str:
    return "#000000" if is_light(token) else "#ffffff"


@dataclass(frozen=True)
class Palette:
    """Resolved colors for one candidate."""

    primary: str
    accent: str
    explicit_accent: bool = False

    @classmethod
    def from_request(cls, primary: str, accent: Optional[str] = None, hue_shift: float = 0.0) -> "Palette":
        p = normalize_hex(primary)
        if accent:
            return cls(primary=p, accent=normalize_hex(accent), explicit_accent=True)
        # No accent supplied: an analogous shade of the primary.
        return cls(primary=p, accent=lighten(rotate_hue(p, 24.0 + hue_shift), 0.12))

    def light(self, amount: float = 0.2) -> str:
        return lighten(self.primary, amount)

    def dark(self, amount: float = 0.2) -> str:
        return darken(self.primary, amount)

    def blend(self, weight: float) -> str:
        return mix(self.primary, self.accent, weight)

    def ramp(self, n: int) -> List[str]:
        """``n`` colors stepping from primary to accent."""
        if n <= 1:
            return [self.primary]
        return [self.blend(i / (n - 1)) for i in range(n)]


__all__ = [
    "Palette",
    "clamp01",
    "is_hex_color",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "lighten",
    "darken",
    "saturate",
    "rotate_hue",
    "mix",
    "relative_luminance",
    "contrast_ratio",
    "is_light",
    "contrast_color",
]

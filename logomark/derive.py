from __future__ import annotations

import string
from dataclasses import dataclass, fields
from typing import Dict, Tuple, Union

from .errors import InputError

SYMMETRY_TYPES: Tuple[str, ...] = (
    "none",
    "horizontal",
    "vertical",
    "radial",
    "bilateral",
    "rotational",
    "rotational-4",
    "rotational-6",
    "rotational-8",
)
FILL_MODES: Tuple[str, ...] = ("solid", "gradient", "split")
GRADIENT_TYPES: Tuple[str, ...] = ("linear", "radial")

WINDOW_BITS = 16
WINDOW_STRIDE = 37  # coprime with 256 so every window start is distinct
_WINDOW_SPAN = 1 << WINDOW_BITS


@dataclass(frozen=True)
class FieldSpec:
    """How one derived field maps its bit window into a value."""

    kind: str  # "float" | "int" | "choice"
    lo: float = 0.0
    hi: float = 0.0
    choices: Tuple[str, ...] = ()


def _f(lo: float, hi: float) -> FieldSpec:
    return FieldSpec("float", lo, hi)


def _i(lo: int, hi: int) -> FieldSpec:
    return FieldSpec("int", lo, hi)


def _c(choices: Tuple[str, ...]) -> FieldSpec:
    return FieldSpec("choice", choices=choices)


# Field order fixes each field's bit window; append only.
DERIVED_FIELDS: Dict[str, FieldSpec] = {
    # core
    "element_count": _i(4, 24),
    "layer_count": _i(1, 7),
    "rotation_offset": _f(0.0, 360.0),
    "angle_spread": _f(15.0, 180.0),
    "curve_tension": _f(0.1, 1.0),
    "curve_amplitude": _f(5.0, 80.0),
    "taper_ratio": _f(0.1, 0.95),
    "stroke_width": _f(0.5, 18.0),
    "spacing_factor": _f(0.3, 3.0),
    "scale_factor": _f(0.5, 1.8),
    "symmetry_type": _c(SYMMETRY_TYPES),
    "style_variant": _i(0, 15),
    "color_placement": _i(0, 11),
    "gradient_angle": _f(0.0, 360.0),
    "organic_amount": _f(0.0, 1.0),
    "jitter_amount": _f(0.0, 15.0),
    # arms / elements
    "arm_width": _f(1.5, 22.0),
    "arm_length": _f(15.0, 65.0),
    "center_radius": _f(0.0, 25.0),
    "spiral_amount": _f(0.0, 0.8),
    "bulge_amount": _f(0.0, 0.7),
    "corner_radius": _f(0.0, 40.0),
    "depth_offset": _f(1.0, 30.0),
    "perspective_strength": _f(0.0, 1.0),
    "letter_weight": _i(100, 900),
    "cut_depth": _f(0.0, 1.0),
    "overlap_amount": _f(0.1, 0.9),
    "ring_thickness": _f(1.0, 18.0),
    "flow_intensity": _f(0.0, 1.0),
    "extrusion_depth": _f(3.0, 35.0),
    # specialized
    "segment_count": _i(3, 16),
    "segment_spacing": _f(2.0, 30.0),
    "segment_curve": _f(0.0, 1.0),
    "inner_radius": _f(0.0, 0.6),
    "outer_radius": _f(0.7, 1.0),
    "pointiness": _f(0.0, 1.0),
    "roundness": _f(0.0, 1.0),
    "skew_x": _f(-0.3, 0.3),
    "skew_y": _f(-0.3, 0.3),
    "subdivisions": _i(1, 6),
    "nesting_level": _i(1, 4),
    "branch_count": _i(0, 5),
    "branch_angle": _f(15.0, 90.0),
    "branch_length": _f(0.3, 0.8),
    "fill_stroke_ratio": _f(0.0, 1.0),
    "stroke_dash_ratio": _f(0.0, 1.0),
    "wave_frequency": _f(0.0, 5.0),
    "wave_amplitude": _f(0.0, 20.0),
    "noise_scale": _f(0.01, 0.5),
    "turbulence": _f(0.0, 1.0),
    "offset_x": _f(-10.0, 10.0),
    "offset_y": _f(-10.0, 10.0),
    "anchor_point": _f(0.0, 1.0),
    "weight_distribution": _f(0.0, 1.0),
    "density_center": _f(0.2, 0.8),
    "density_edge": _f(0.2, 0.8),
    "fill_mode": _c(FILL_MODES),
    "gradient_type": _c(GRADIENT_TYPES),
    "hue_shift": _f(-30.0, 30.0),
}


@dataclass(frozen=True)
class HashDerivedParams:
    element_count: int
    layer_count: int
    rotation_offset: float
    angle_spread: float
    curve_tension: float
    curve_amplitude: float
    taper_ratio: float
    stroke_width: float
    spacing_factor: float
    scale_factor: float
    symmetry_type: str
    style_variant: int
    color_placement: int
    gradient_angle: float
    organic_amount: float
    jitter_amount: float
    arm_width: float
    arm_length: float
    center_radius: float
    spiral_amount: float
    bulge_amount: float
    corner_radius: float
    depth_offset: float
    perspective_strength: float
    letter_weight: int
    cut_depth: float
    overlap_amount: float
    ring_thickness: float
    flow_intensity: float
    extrusion_depth: float
    segment_count: int
    segment_spacing: float
    segment_curve: float
    inner_radius: float
    outer_radius: float
    pointiness: float
    roundness: float
    skew_x: float
    skew_y: float
    subdivisions: int
    nesting_level: int
    branch_count: int
    branch_angle: float
    branch_length: float
    fill_stroke_ratio: float
    stroke_dash_ratio: float
    wave_frequency: float
    wave_amplitude: float
    noise_scale: float
    turbulence: float
    offset_x: float
    offset_y: float
    anchor_point: float
    weight_distribution: float
    density_center: float
    density_edge: float
    fill_mode: str
    gradient_type: str
    hue_shift: float

    @property
    def is_rotationally_symmetric(self) -> bool:
        return self.symmetry_type == "radial" or self.symmetry_type.startswith("rotational")

    def as_dict(self) -> Dict[str, Union[int, float, str]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_HEX = frozenset(string.hexdigits)


def _window(value: int, bitlen: int, start: int) -> int:
    """Read WINDOW_BITS bits starting at ``start`` (MSB-first), wrapping."""
    start %= bitlen
    end = start + WINDOW_BITS
    if end <= bitlen:
        return (value >> (bitlen - end)) & (_WINDOW_SPAN - 1)
    # wrap: tail of the digest followed by its head
    rotated = ((value << start) | (value >> (bitlen - start))) & ((1 << bitlen) - 1)
    return (rotated >> (bitlen - WINDOW_BITS)) & (_WINDOW_SPAN - 1)


def _scale(spec: FieldSpec, v: int) -> Union[int, float, str]:
    if spec.kind == "choice":
        return spec.choices[v % len(spec.choices)]
    if spec.kind == "int":
        lo, hi = int(spec.lo), int(spec.hi)
        return lo + v % (hi - lo + 1)
    return spec.lo + (v / _WINDOW_SPAN) * (spec.hi - spec.lo)


def derive_params_from_hash(hash_hex: str) -> HashDerivedParams:
    """Slice the digest's bits into the full derived-parameter set.

    Pure and total over non-empty hex input: every field lands in its range.
    """
    text = (hash_hex or "").strip()
    if not text or any(ch not in _HEX for ch in text):
        raise InputError("hash_hex must be a non-empty hexadecimal string", field="hash_hex")
    value = int(text, 16)
    bitlen = len(text) * 4
    if bitlen < WINDOW_BITS:
        # Repeat short digests so every window has real bits to read.
        reps = -(-WINDOW_BITS // bitlen)
        text = text * reps
        value = int(text, 16)
        bitlen = len(text) * 4
    out = {}
    for idx, (name, spec) in enumerate(DERIVED_FIELDS.items()):
        out[name] = _scale(spec, _window(value, bitlen, idx * WINDOW_STRIDE))
    return HashDerivedParams(**out)


__all__ = [
    "DERIVED_FIELDS",
    "FieldSpec",
    "HashDerivedParams",
    "SYMMETRY_TYPES",
    "FILL_MODES",
    "GRADIENT_TYPES",
    "derive_params_from_hash",
]

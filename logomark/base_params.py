from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Type, TypeVar

from .seed import Rng


@dataclass(frozen=True)
class BaseParameters:
    """Algorithm-agnostic shape bundle shared by every generator.

    Field order below is the draw order; one rng() call per field.
    """

    stroke_width: float
    stroke_width_variance: float
    base_angle: float
    angle_variance: float
    rotation_offset: float
    curve_tension: float
    curve_amplitude: float
    curve_frequency: float
    segment_count: int
    segment_spacing: float
    segment_length_ratio: float
    horizontal_spacing: float
    vertical_spacing: float
    padding_ratio: float
    scale_x: float
    scale_y: float
    size_variance: float
    corner_radius: float
    corner_radius_variance: float
    base_opacity: float
    opacity_falloff: float
    layer_count: int
    noise_amount: float
    noise_frequency: float
    jitter_amount: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def generate_base_params(rng: Rng) -> BaseParameters:
    """Draw the shared bundle from ``rng`` in the documented order.

    Callers must invoke this once per candidate, before any other draw.
    """
    return BaseParameters(
        stroke_width=2 + rng() * 4,
        stroke_width_variance=rng() * 0.3,
        base_angle=rng() * 360,
        angle_variance=rng() * 30,
        rotation_offset=rng() * 360,
        curve_tension=0.3 + rng() * 0.5,
        curve_amplitude=5 + rng() * 25,
        curve_frequency=1 + rng() * 4,
        segment_count=3 + math.floor(rng() * 8),
        segment_spacing=5 + rng() * 20,
        segment_length_ratio=0.5 + rng() * 0.5,
        horizontal_spacing=5 + rng() * 20,
        vertical_spacing=5 + rng() * 20,
        padding_ratio=0.1 + rng() * 0.15,
        scale_x=0.8 + rng() * 0.4,
        scale_y=0.8 + rng() * 0.4,
        size_variance=rng() * 0.3,
        corner_radius=rng() * 20,
        corner_radius_variance=rng() * 0.5,
        base_opacity=0.7 + rng() * 0.3,
        opacity_falloff=rng() * 0.5,
        layer_count=1 + math.floor(rng() * 5),
        noise_amount=rng() * 0.3,
        noise_frequency=0.5 + rng() * 2,
        jitter_amount=rng() * 5,
    )


P = TypeVar("P", bound=BaseParameters)


def extend_base(cls: Type[P], base: BaseParameters, **extra: Any) -> P:
    """Build an algorithm parameter struct from the shared bundle plus its own fields."""
    values = {f.name: getattr(base, f.name) for f in fields(BaseParameters)}
    values.update(extra)
    return cls(**values)


__all__ = ["BaseParameters", "generate_base_params", "extend_base"]

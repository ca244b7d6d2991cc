"""Canonical Pydantic schemas for requests and generated output."""

from .generation_params import GenerationParams, MAX_QUALITY_FLOOR
from .generated_logo import GeneratedLogo, LogoMeta, QualityMetrics, QualityRejection

__all__ = [
    "GenerationParams",
    "MAX_QUALITY_FLOOR",
    "GeneratedLogo",
    "LogoMeta",
    "QualityMetrics",
    "QualityRejection",
]

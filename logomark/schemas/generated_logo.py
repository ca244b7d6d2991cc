from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..constants import VIEWBOX


class QualityRejection(BaseModel):
    """One missed sub-threshold: what was measured against what was required."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    reason: str
    value: float
    threshold: float


class QualityMetrics(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    score: int = Field(..., ge=0, le=100)
    path_smoothness: float = Field(..., ge=0.0, le=100.0)
    visual_balance: float = Field(..., ge=0.0, le=100.0)
    complexity: float = Field(..., ge=0.0, le=100.0)
    golden_ratio_adherence: float = Field(..., ge=0.0, le=100.0)
    uniqueness: float = Field(..., ge=0.0, le=100.0)
    rejections: List[QualityRejection] = Field(default_factory=list)


class LogoMeta(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    brand_name: str
    category: str
    generated_at: float
    salt: str
    hash_hex: str
    attempts: int = Field(1, ge=1)
    met_threshold: bool = True
    geometry: Dict[str, Any] = Field(default_factory=dict)
    colors: Dict[str, str] = Field(default_factory=dict)


class GeneratedLogo(BaseModel):
    """Immutable output unit: one scored SVG document plus provenance."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    hash: str
    algorithm: str
    variant: int = Field(..., ge=0)
    document: str
    view_box: str = VIEWBOX
    params: Dict[str, Any] = Field(default_factory=dict)
    quality: QualityMetrics
    meta: LogoMeta

    @model_validator(mode="after")
    def _check_document(self) -> "GeneratedLogo":
        if self.view_box != VIEWBOX:
            raise ValueError(f"view_box must be {VIEWBOX!r}")
        if "<path" not in self.document:
            raise ValueError("document must contain at least one path element")
        return self

    @property
    def score(self) -> int:
        return self.quality.score


__all__ = ["QualityRejection", "QualityMetrics", "LogoMeta", "GeneratedLogo"]

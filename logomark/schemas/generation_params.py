from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..colors import is_hex_color, normalize_hex
from ..constants import CATEGORIES, DEFAULT_CATEGORY, DEFAULT_VARIATIONS

# 101 is accepted as the one unreachable floor: every variation then degrades
# to its best candidate.
MAX_QUALITY_FLOOR = 101


class GenerationParams(BaseModel):
    """Request for one algorithm's batch of variations."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    brand_name: str
    tagline: Optional[str] = None
    category: str = DEFAULT_CATEGORY
    primary_color: str
    accent_color: Optional[str] = None
    variations: int = Field(DEFAULT_VARIATIONS, ge=1)
    min_quality_score: Optional[int] = Field(None, ge=0, le=MAX_QUALITY_FLOOR)
    seed: Optional[Union[str, int]] = None

    @field_validator("brand_name")
    @classmethod
    def _brand_not_blank(cls, value: str) -> str:
        text = (value or "").strip()
        if not text:
            raise ValueError("brand_name must be a non-empty string")
        return text

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        text = (value or DEFAULT_CATEGORY).strip().lower()
        if text not in CATEGORIES:
            raise ValueError(f"category must be one of {', '.join(CATEGORIES)}")
        return text

    @field_validator("primary_color")
    @classmethod
    def _primary_hex(cls, value: str) -> str:
        if not is_hex_color(value):
            raise ValueError(f"invalid color token {value!r}")
        return normalize_hex(value)

    @field_validator("accent_color")
    @classmethod
    def _accent_hex(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        if not is_hex_color(value):
            raise ValueError(f"invalid color token {value!r}")
        return normalize_hex(value)

    @field_validator("seed")
    @classmethod
    def _seed_text(cls, value: Optional[Union[str, int]]) -> Optional[str]:
        if value is None:
            return None
        return str(value)


__all__ = ["GenerationParams", "MAX_QUALITY_FLOOR"]

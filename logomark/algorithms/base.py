from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Protocol, runtime_checkable

from ..base_params import BaseParameters, generate_base_params
from ..colors import Palette
from ..constants import DEFAULT_CANDIDATE_BUDGET, DEFAULT_CATEGORY, VIEWBOX
from ..derive import HashDerivedParams, derive_params_from_hash
from ..quality import calculate_quality_score
from ..schemas import GeneratedLogo, GenerationParams, LogoMeta
from ..seed import HashParams, Rng, create_seeded_random, make_logo_hash
from ..svg import DocumentBuilder


@runtime_checkable
class LogoAlgorithm(Protocol):
    """Capability interface every generator module registers."""

    name: str
    family: str
    archetype: str
    default_category: str
    min_quality: int
    candidate_budget: int
    description: str

    def derive_params(
        self,
        derived: HashDerivedParams,
        base: BaseParameters,
        request: GenerationParams,
        variant: int = 0,
    ) -> BaseParameters:  # pragma: no cover - Protocol stub
        ...

    def build_geometry(
        self,
        params: BaseParameters,
        doc: DocumentBuilder,
        palette: Palette,
        rng: Rng,
    ) -> Dict[str, Any]:  # pragma: no cover - Protocol stub
        ...


@dataclass(frozen=True)
class StyleParams(BaseParameters):
    """Paint and variation fields every algorithm's parameters carry."""

    variant: int
    style_variant: int
    color_placement: int
    fill_mode: str
    gradient_type: str
    gradient_angle: float
    symmetric: bool
    organic: float


def style_fields(derived: HashDerivedParams, variant: int) -> Dict[str, Any]:
    return {
        "variant": int(variant),
        "style_variant": derived.style_variant,
        "color_placement": derived.color_placement,
        "fill_mode": derived.fill_mode,
        "gradient_type": derived.gradient_type,
        "gradient_angle": derived.gradient_angle,
        "symmetric": derived.is_rotationally_symmetric,
        "organic": derived.organic_amount,
    }


class Algorithm:
    """Convenience base: class attributes plus shared defaults.

    Subclasses set the attributes and implement ``derive_params`` and
    ``build_geometry``; nothing here is required by the protocol.
    """

    name: ClassVar[str] = ""
    family: ClassVar[str] = ""
    archetype: ClassVar[str] = "symbol"
    default_category: ClassVar[str] = DEFAULT_CATEGORY
    min_quality: ClassVar[int] = 85
    candidate_budget: ClassVar[int] = DEFAULT_CANDIDATE_BUDGET
    description: ClassVar[str] = ""

    def derive_params(self, derived, base, request, variant=0):  # pragma: no cover - abstract
        raise NotImplementedError

    def build_geometry(self, params, doc, palette, rng):  # pragma: no cover - abstract
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def run_candidate(
    algorithm: LogoAlgorithm,
    request: GenerationParams,
    hash_params: HashParams,
    variant: int,
) -> GeneratedLogo:
    """Build and score one candidate; a pure function of its inputs.

    Raises ArithmeticError/ValueError when construction degenerates; the
    controller counts those as failed attempts.
    """
    hash_hex = hash_params.hash_hex
    derived = derive_params_from_hash(hash_hex)
    rng = create_seeded_random(hash_hex)
    base = generate_base_params(rng)
    params = algorithm.derive_params(derived, base, request, variant)

    palette = Palette.from_request(request.primary_color, request.accent_color, hue_shift=derived.hue_shift)
    doc = DocumentBuilder(f"{algorithm.name}-{hash_hex[:8]}-{variant}")
    geometry = algorithm.build_geometry(params, doc, palette, rng) or {}
    if doc.path_count == 0:
        raise ValueError(f"{algorithm.name} produced an empty document")
    document = doc.tostring()

    quality = calculate_quality_score(document, derived)
    params_dict = params.as_dict()
    logo_hash = make_logo_hash(request.brand_name, algorithm.name, variant, params_dict)
    meta = LogoMeta(
        brand_name=request.brand_name,
        category=hash_params.category,
        generated_at=hash_params.timestamp,
        salt=hash_params.salt,
        hash_hex=hash_hex,
        geometry=dict(geometry, paths=doc.path_count, commands=doc.command_count),
        colors={"primary": palette.primary, "accent": palette.accent},
    )
    return GeneratedLogo(
        id=f"{algorithm.name}-{logo_hash}-{variant}",
        hash=logo_hash,
        algorithm=algorithm.name,
        variant=variant,
        document=document,
        view_box=VIEWBOX,
        params=params_dict,
        quality=quality,
        meta=meta,
    )


__all__ = ["LogoAlgorithm", "Algorithm", "StyleParams", "style_fields", "run_candidate"]

from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .algorithms.base import LogoAlgorithm, run_candidate
from .config import RuntimeSettings
from .constants import PREVIEW_SALT
from .errors import ExhaustedCandidates, InputError
from .schemas import GeneratedLogo, GenerationParams
from .seed import generate_hash_params_sync, make_salt
from .store import HashDedupStore, LogoHashRecord
from .telemetry import summarize_scores, timed

logger = logging.getLogger(__name__)

# Explicit values so the library never consults the environment on its own.
_DEFAULT_SETTINGS = RuntimeSettings(max_workers=1, candidate_budget=None, log_level="INFO")

# Raised by degenerate geometry; each one costs a single attempt, not the batch.
CANDIDATE_ERRORS = (ArithmeticError, ValueError, LookupError, TypeError)

RequestLike = Union[GenerationParams, Mapping[str, Any]]


def coerce_params(params: RequestLike) -> GenerationParams:
    """Validate a mapping (snake_case or camelCase keys) into GenerationParams."""
    if isinstance(params, GenerationParams):
        return params
    if not isinstance(params, Mapping):
        raise InputError("params must be a mapping or GenerationParams", field="params")
    try:
        return GenerationParams.model_validate(dict(params))
    except ValidationError as exc:
        err = exc.errors()[0]
        field = str(err["loc"][0]) if err.get("loc") else None
        raise InputError(f"{field}: {err['msg']}" if field else err["msg"], field=field) from exc


def _run_variation(
    algorithm: LogoAlgorithm,
    request: GenerationParams,
    variant: int,
    threshold: int,
    budget: int,
    store: Optional[HashDedupStore],
) -> GeneratedLogo:
    best: Optional[GeneratedLogo] = None
    last_error: Optional[BaseException] = None
    accepted = False
    attempts = 0
    for attempt in range(budget):
        attempts += 1
        salt = make_salt(algorithm.name, variant, attempt, request.seed)
        hash_params = generate_hash_params_sync(request.brand_name, request.category, salt)
        try:
            candidate = run_candidate(algorithm, request, hash_params, variant)
        except CANDIDATE_ERRORS as exc:
            last_error = exc
            logger.debug("candidate failed algorithm=%s variant=%s attempt=%s: %s", algorithm.name, variant, attempt, exc)
            continue
        duplicate = store is not None and store.contains(candidate.hash)
        if candidate.score >= threshold and not duplicate:
            best, accepted = candidate, True
            break
        if best is None or candidate.score > best.score:
            best = candidate

    if best is None:
        raise ExhaustedCandidates(algorithm.name, variant, attempts, last_error)

    meta = best.meta.model_copy(update={"attempts": attempts, "met_threshold": accepted})
    best = best.model_copy(update={"meta": meta})
    if accepted:
        logger.info("accepted algorithm=%s variant=%s score=%s attempts=%s", algorithm.name, variant, best.score, attempts)
    else:
        logger.info(
            "degraded algorithm=%s variant=%s best_score=%s threshold=%s attempts=%s",
            algorithm.name,
            variant,
            best.score,
            threshold,
            attempts,
        )
    if store is not None:
        store.record(
            LogoHashRecord(
                hash=best.hash,
                brand_name=request.brand_name,
                algorithm=algorithm.name,
                variant=variant,
                quality_score=best.score,
            )
        )
    return best


def generate_logos(
    algorithm: LogoAlgorithm,
    params: RequestLike,
    *,
    store: Optional[HashDedupStore] = None,
    settings: Optional[RuntimeSettings] = None,
) -> List[GeneratedLogo]:
    """Produce up to ``variations`` scored logos, best first.

    A variation whose every attempt failed is logged and skipped; a variation
    that never reached the quality floor still returns its best candidate.
    """
    request = coerce_params(params)
    settings = settings or _DEFAULT_SETTINGS
    threshold = request.min_quality_score if request.min_quality_score is not None else algorithm.min_quality
    budget = max(1, settings.candidate_budget or algorithm.candidate_budget)
    variants = list(range(request.variations))

    def _one(variant: int) -> Tuple[int, Optional[GeneratedLogo]]:
        try:
            return variant, _run_variation(algorithm, request, variant, threshold, budget, store)
        except ExhaustedCandidates as exc:
            logger.warning("exhausted algorithm=%s variant=%s: %s", exc.algorithm, exc.variant, exc)
            return variant, None

    results: List[GeneratedLogo] = []
    ctx = {"algorithm": algorithm.name, "variations": request.variations, "budget": budget}
    with timed("generate", ctx) as stats:
        if settings.max_workers > 1 and len(variants) > 1:
            with _fut.ThreadPoolExecutor(max_workers=settings.max_workers) as ex:
                futures = {ex.submit(_one, v): v for v in variants}
                for fut in _fut.as_completed(futures):
                    _, logo = fut.result()
                    if logo is not None:
                        results.append(logo)
        else:
            for variant in variants:
                _, logo = _one(variant)
                if logo is not None:
                    results.append(logo)
        stats["produced"] = len(results)

    results.sort(key=lambda logo: (-logo.score, logo.variant))
    logger.info("batch algorithm=%s scores=%s", algorithm.name, summarize_scores([r.score for r in results]))
    return results


def render_preview(
    algorithm: LogoAlgorithm,
    primary_color: str,
    accent_color: Optional[str] = None,
    seed: Union[str, int] = "preview",
) -> str:
    """Single unfiltered document for ``seed``; byte-identical per seed."""
    seed_text = str(seed)
    request = coerce_params(
        {
            "brand_name": seed_text,
            "primary_color": primary_color,
            "accent_color": accent_color,
            "category": algorithm.default_category,
            "variations": 1,
        }
    )
    hash_params = generate_hash_params_sync(seed_text, algorithm.default_category, PREVIEW_SALT)
    try:
        return run_candidate(algorithm, request, hash_params, 0).document
    except CANDIDATE_ERRORS as exc:
        raise ExhaustedCandidates(algorithm.name, 0, 1, exc) from exc


def entry_points(algorithm: LogoAlgorithm) -> Tuple[Callable[..., List[GeneratedLogo]], Callable[..., str]]:
    """Module-level ``generate_<name>`` and ``generate_single_<name>_preview``."""

    def generate(
        params: RequestLike,
        *,
        store: Optional[HashDedupStore] = None,
        settings: Optional[RuntimeSettings] = None,
    ) -> List[GeneratedLogo]:
        return generate_logos(algorithm, params, store=store, settings=settings)

    def preview(primary_color: str, accent_color: Optional[str] = None, seed: Union[str, int] = "preview") -> str:
        return render_preview(algorithm, primary_color, accent_color, seed)

    generate.__name__ = generate.__qualname__ = f"generate_{algorithm.name}"
    generate.__doc__ = f"Generate {algorithm.name} logos for a brand, best first."
    preview.__name__ = preview.__qualname__ = f"generate_single_{algorithm.name}_preview"
    preview.__doc__ = f"Render one {algorithm.name} preview document for a seed."
    return generate, preview


__all__ = ["coerce_params", "generate_logos", "render_preview", "entry_points"]

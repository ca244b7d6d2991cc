"""
Unified entry point over the algorithm registry.

``generate`` dispatches a request to one registered algorithm, picking one
from the brand's industry or aesthetic when the caller does not name it.
Selection is seeded, so the same brand always lands on the same algorithm.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

from .algorithms import ensure_algorithms_loaded
from .algorithms.registry import get_algorithm, list_registered_algorithms
from .config import RuntimeSettings
from .controller import RequestLike, coerce_params, generate_logos
from .errors import InputError
from .schemas import GeneratedLogo
from .seed import create_seeded_random
from .store import HashDedupStore

logger = logging.getLogger(__name__)

ARCHETYPES = ("symbol", "wordmark", "both")

INDUSTRY_ALGORITHMS: Dict[str, Tuple[str, ...]] = {
    "technology": (
        "starburst",
        "motion_lines",
        "depth_geometry",
        "isometric_cube",
        "sound_waves",
        "hexagon_tech",
        "infinity_loop",
        "cloud_soft",
    ),
    "finance": ("framed_letter", "perfect_triangle", "gradient_bars", "parallel_bars", "monogram_blend", "shield_badge", "diamond_gem"),
    "creative": (
        "starburst",
        "circle_overlap",
        "letter_swoosh",
        "flow_gradient",
        "orbital_rings",
        "heart_love",
        "infinity_loop",
        "letter_dna",
        "word_rhythm",
    ),
    "healthcare": ("circle_overlap", "starburst", "flow_gradient", "orbital_rings", "heart_love", "leaf_organic"),
    "sustainability": ("leaf_organic", "flow_gradient", "circle_overlap", "starburst", "wave_flow"),
}

AESTHETIC_ALGORITHMS: Dict[str, Tuple[str, ...]] = {
    "tech-minimal": ("motion_lines", "perfect_triangle", "gradient_bars", "parallel_bars", "hexagon_tech", "sound_waves"),
    "bold-geometric": ("depth_geometry", "isometric_cube", "framed_letter", "perfect_triangle", "shield_badge", "hexagon_tech"),
    "elegant-refined": ("monogram_blend", "framed_letter", "flow_gradient", "orbital_rings", "infinity_loop", "letter_gradient"),
    "friendly-rounded": ("starburst", "circle_overlap", "flow_gradient", "letter_swoosh", "cloud_soft"),
}

# Word-prefix keywords, checked in order
CATEGORY_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("ecommerce", "technology"),
    ("tech", "technology"),
    ("software", "technology"),
    ("saas", "technology"),
    ("ai", "technology"),
    ("app", "technology"),
    ("digital", "technology"),
    ("financ", "finance"),
    ("fintech", "finance"),
    ("bank", "finance"),
    ("money", "finance"),
    ("invest", "finance"),
    ("crypto", "finance"),
    ("health", "healthcare"),
    ("medical", "healthcare"),
    ("wellness", "healthcare"),
    ("pharma", "healthcare"),
    ("creative", "creative"),
    ("design", "creative"),
    ("art", "creative"),
    ("studio", "creative"),
    ("agency", "creative"),
    ("media", "creative"),
    ("eco", "sustainability"),
    ("green", "sustainability"),
    ("organic", "sustainability"),
    ("sustainab", "sustainability"),
    ("environment", "sustainability"),
    ("nature", "sustainability"),
)


def _catalogue() -> Dict[str, Dict[str, str]]:
    ensure_algorithms_loaded()
    info: Dict[str, Dict[str, str]] = {}
    for name in list_registered_algorithms():
        algo = get_algorithm(name)
        info[name] = {
            "name": algo.name,
            "family": algo.family,
            "archetype": algo.archetype,
            "category": algo.default_category,
            "description": algo.description,
        }
    return info


ALGORITHM_INFO: Dict[str, Dict[str, str]] = _catalogue()
ALL_ALGORITHMS: List[str] = sorted(ALGORITHM_INFO)
SYMBOL_ALGORITHMS: List[str] = [n for n in ALL_ALGORITHMS if ALGORITHM_INFO[n]["archetype"] == "symbol"]
WORDMARK_ALGORITHMS: List[str] = [n for n in ALL_ALGORITHMS if ALGORITHM_INFO[n]["archetype"] == "wordmark"]


def map_category_to_industry(category: Optional[str]) -> Optional[str]:
    """Industry for a free-text category, or None when no keyword matches."""
    if not category:
        return None
    words = re.findall(r"[a-z]+", category.lower())
    if not words:
        return None
    for keyword, industry in CATEGORY_KEYWORDS:
        if any(word.startswith(keyword) for word in words):
            return industry
    return None


def select_algorithm(
    brand_name: str,
    *,
    industry: Optional[str] = None,
    aesthetic: Optional[str] = None,
    archetype: Optional[str] = None,
    seed: Optional[str] = None,
) -> str:
    """Pick an algorithm name for a brand.

    Archetype narrows to symbol or wordmark algorithms; otherwise the industry
    table wins over the aesthetic table, and with neither every algorithm is a
    candidate. The draw is seeded by ``seed`` (default: the brand name).
    """
    if archetype is not None and archetype not in ARCHETYPES:
        raise InputError(f"archetype must be one of {', '.join(ARCHETYPES)}", field="archetype")
    rng = create_seeded_random(str(seed if seed is not None else brand_name))

    pool: Iterable[str]
    if archetype == "symbol":
        pool = SYMBOL_ALGORITHMS
    elif archetype == "wordmark":
        pool = WORDMARK_ALGORITHMS
    elif industry in INDUSTRY_ALGORITHMS:
        pool = INDUSTRY_ALGORITHMS[industry]
    elif aesthetic in AESTHETIC_ALGORITHMS:
        pool = AESTHETIC_ALGORITHMS[aesthetic]
    else:
        pool = ALL_ALGORITHMS
    options = list(pool)
    return options[int(rng() * len(options)) % len(options)]


def generate(
    params: RequestLike,
    algorithm: Optional[str] = None,
    *,
    store: Optional[HashDedupStore] = None,
    settings: Optional[RuntimeSettings] = None,
) -> List[GeneratedLogo]:
    """Generate with ``algorithm``, or with one selected for the brand."""
    request = coerce_params(params)
    if algorithm is None:
        algorithm = select_algorithm(
            request.brand_name,
            industry=map_category_to_industry(request.category),
            seed=request.seed,
        )
        logger.info("selected algorithm=%s brand=%s", algorithm, request.brand_name)
    return generate_logos(get_algorithm(algorithm), request, store=store, settings=settings)


def generate_all_algorithms(
    params: RequestLike,
    *,
    store: Optional[HashDedupStore] = None,
    settings: Optional[RuntimeSettings] = None,
) -> List[GeneratedLogo]:
    """Best logo from every registered algorithm, in catalogue order."""
    request = coerce_params(params)
    best: List[GeneratedLogo] = []
    for name in ALL_ALGORITHMS:
        logos = generate_logos(get_algorithm(name), request, store=store, settings=settings)
        if logos:
            best.append(logos[0])
        else:
            logger.warning("no logo produced algorithm=%s brand=%s", name, request.brand_name)
    return best


def get_unique_logos(logos: Iterable[GeneratedLogo]) -> List[GeneratedLogo]:
    """Drop repeated hashes, keeping first occurrences in order."""
    seen = set()
    unique: List[GeneratedLogo] = []
    for logo in logos:
        if logo.hash in seen:
            continue
        seen.add(logo.hash)
        unique.append(logo)
    return unique


__all__ = [
    "ALGORITHM_INFO",
    "ALL_ALGORITHMS",
    "SYMBOL_ALGORITHMS",
    "WORDMARK_ALGORITHMS",
    "INDUSTRY_ALGORITHMS",
    "AESTHETIC_ALGORITHMS",
    "map_category_to_industry",
    "select_algorithm",
    "generate",
    "generate_all_algorithms",
    "get_unique_logos",
]

from __future__ import annotations

import hashlib
import json
import math
import secrets
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple

import numpy as np

from .constants import DEFAULT_SALT, LOGO_HASH_VERSION

Rng = Callable[[], float]


@dataclass(frozen=True)
class HashParams:
    """Identity of one generation attempt.

    ``hash_hex`` covers brand, category and salt only; the timestamp is kept
    for provenance so repeated calls with the same triple stay stable.
    """

    brand_name: str
    category: str
    salt: str
    hash_hex: str
    timestamp: float = field(default_factory=time.time, compare=False)


def _canonical_identity(brand_name: str, category: str, salt: str) -> str:
    return "|".join([(brand_name or "").strip().lower(), (category or "").strip().lower(), salt])


def generate_hash_params_sync(brand_name: str, category: str, salt: Optional[str] = None) -> HashParams:
    """Hash ``brand|category|salt`` with SHA-256; same triple, same digest."""
    salt_value = DEFAULT_SALT if salt is None else str(salt)
    ident = _canonical_identity(brand_name, category, salt_value)
    digest = hashlib.sha256(ident.encode("utf-8")).hexdigest()
    return HashParams(
        brand_name=brand_name,
        category=category,
        salt=salt_value,
        hash_hex=digest,
    )


def make_salt(algorithm: str, variant: int, attempt: int, seed: Optional[str] = None) -> str:
    """Salt for one candidate attempt.

    Seeded requests get a reproducible salt per (algorithm, variant, attempt);
    unseeded ones draw fresh entropy so repeated calls explore new digests.
    """
    if seed is None:
        return f"{algorithm}-{variant}-{attempt}-{secrets.token_hex(8)}"
    material = f"{seed}|{algorithm}|{variant}|{attempt}"
    return f"{algorithm}-{variant}-{attempt}-{hashlib.sha256(material.encode('utf-8')).hexdigest()[:16]}"


def make_logo_hash(brand_name: str, algorithm: str, variant: int, params: Mapping[str, Any]) -> str:
    """Stable dedup key for an accepted logo (16 hex chars)."""
    payload = {
        "brand": (brand_name or "").strip().lower(),
        "algorithm": algorithm,
        "variant": int(variant),
        "params": params,
        "version": LOGO_HASH_VERSION,
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()[:16]


def _seed_int(seed_text: str) -> int:
    h = hashlib.sha256(seed_text.encode("utf-8")).hexdigest()
    return int(h[:16], 16)


def create_seeded_random(hash_hex: str) -> Rng:
    """Return a float generator in [0, 1) fully determined by ``hash_hex``."""
    gen = np.random.default_rng(_seed_int(str(hash_hex)))

    def _next() -> float:
        return float(gen.random())

    return _next


def random_pick(rng: Rng, items):
    if not items:
        raise ValueError("cannot pick from an empty sequence")
    return items[min(len(items) - 1, int(rng() * len(items)))]


def add_noise(value: float, amount: float, rng: Rng, range_: float = 1.0) -> float:
    """Offset ``value`` by up to ``range_ * amount`` in either direction."""
    return value + (rng() - 0.5) * 2.0 * range_ * amount


def jitter_point(x: float, y: float, amount: float, rng: Rng) -> Tuple[float, float]:
    return add_noise(x, amount, rng), add_noise(y, amount, rng)


# Lattice value noise. Deterministic per integer seed, no PRNG draws, so it can
# be sampled in any order without disturbing the candidate's rng stream.

def _lattice(ix: int, iy: int, seed: int) -> float:
    h = (ix * 374761393 + iy * 668265263 + seed * 2147483647) & 0xFFFFFFFF
    h = ((h ^ (h >> 13)) * 1274126177) & 0xFFFFFFFF
    h ^= h >> 16
    return (h & 0xFFFF) / 65535.0


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def value_noise_2d(x: float, y: float, seed: int = 0) -> float:
    """Smoothed lattice noise in [-1, 1]."""
    x0, y0 = math.floor(x), math.floor(y)
    fx, fy = _smooth(x - x0), _smooth(y - y0)
    a = _lattice(x0, y0, seed)
    b = _lattice(x0 + 1, y0, seed)
    c = _lattice(x0, y0 + 1, seed)
    d = _lattice(x0 + 1, y0 + 1, seed)
    top = a + (b - a) * fx
    bottom = c + (d - c) * fx
    return (top + (bottom - top) * fy) * 2.0 - 1.0


def fbm(x: float, y: float, octaves: int = 4, seed: int = 0, lacunarity: float = 2.0, gain: float = 0.5) -> float:
    """Fractal sum of ``value_noise_2d`` octaves, normalized to [-1, 1]."""
    total = 0.0
    amp = 1.0
    norm = 0.0
    freq = 1.0
    for octave in range(max(1, octaves)):
        total += amp * value_noise_2d(x * freq, y * freq, seed + octave)
        norm += amp
        amp *= gain
        freq *= lacunarity
    return total / norm


__all__ = [
    "HashParams",
    "Rng",
    "generate_hash_params_sync",
    "make_salt",
    "make_logo_hash",
    "create_seeded_random",
    "random_pick",
    "add_noise",
    "jitter_point",
    "value_noise_2d",
    "fbm",
]

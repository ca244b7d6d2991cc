from __future__ import annotations

from typing import Dict, List

from ..errors import InputError
from . import ensure_algorithms_loaded
from .base import LogoAlgorithm

__all__ = ["register_algorithm", "get_algorithm", "list_registered_algorithms", "normalize_name"]

_ALGORITHM_REGISTRY: Dict[str, LogoAlgorithm] = {}


def normalize_name(name: str) -> str:
    """Registry key: lowercase with dashes folded to underscores."""
    return (name or "").strip().lower().replace("-", "_")


def register_algorithm(algorithm: LogoAlgorithm) -> LogoAlgorithm:
    """Register a generator under its name.

    Generator modules call this at import time so new algorithms only need to add a module.
    """

    if not isinstance(algorithm, LogoAlgorithm):
        raise TypeError("algorithm must implement derive_params and build_geometry")

    key = normalize_name(algorithm.name)
    if not key:
        raise ValueError("Algorithm name must be non-empty")
    existing = _ALGORITHM_REGISTRY.get(key)
    if existing is not None and existing is not algorithm:
        raise ValueError(f"Algorithm '{key}' already registered to a different generator")
    _ALGORITHM_REGISTRY[key] = algorithm
    return algorithm


def get_algorithm(name: str) -> LogoAlgorithm:
    """Return the generator registered for ``name`` (dashes or underscores)."""

    ensure_algorithms_loaded()
    key = normalize_name(name)
    if not key:
        raise InputError("algorithm must be a non-empty string", field="algorithm")
    try:
        return _ALGORITHM_REGISTRY[key]
    except KeyError as exc:
        raise InputError(f"No generator registered for algorithm='{name}'", field="algorithm") from exc


def list_registered_algorithms() -> List[str]:
    """Return the registered algorithm names, sorted."""

    ensure_algorithms_loaded()
    return sorted(_ALGORITHM_REGISTRY.keys())

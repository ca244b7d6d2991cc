from __future__ import annotations

from typing import List, Tuple

from ..constants import PHI, PHI_INVERSE


def fibonacci(n: int) -> List[int]:
    """First ``n`` Fibonacci numbers starting 1, 1."""
    out: List[int] = []
    a, b = 1, 1
    for _ in range(max(0, n)):
        out.append(a)
        a, b = b, a + b
    return out


def golden_sections(length: float, depth: int = 3) -> List[float]:
    """Successive golden cuts of ``length``: L/phi, L/phi^2, ..."""
    out: List[float] = []
    current = length
    for _ in range(max(0, depth)):
        current *= PHI_INVERSE
        out.append(current)
    return out


def golden_split(length: float) -> Tuple[float, float]:
    major = length * PHI_INVERSE
    return major, length - major


def golden_spiral_radii(r0: float, n: int) -> List[float]:
    """Radii shrinking by 1/phi each step."""
    return [r0 * PHI_INVERSE ** i for i in range(max(0, n))]


def phi_deviation(value: float, target: float = PHI) -> float:
    """Relative distance of ``value`` from ``target`` (0 means exact)."""
    if target == 0:
        return abs(value)
    return abs(value / target - 1.0)


__all__ = ["PHI", "PHI_INVERSE", "fibonacci", "golden_sections", "golden_split", "golden_spiral_radii", "phi_deviation"]

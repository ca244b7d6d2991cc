"""
Automatic aesthetic scoring.

Sub-scores are 0-100 and independent. The total is a fixed weighted sum:

    score = round(0.20*smoothness + 0.25*balance + 0.20*complexity
                  + 0.15*golden + 0.20*uniqueness)

Each sub-score below its floor adds a rejection record; rejections are
informational, the controller decides acceptance from ``score`` alone.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from .constants import CANVAS_CENTER, PHI, PHI_INVERSE
from .derive import HashDerivedParams
from .geometry.golden import phi_deviation
from .schemas import QualityMetrics, QualityRejection

WEIGHTS: Dict[str, float] = {
    "path_smoothness": 0.20,
    "visual_balance": 0.25,
    "complexity": 0.20,
    "golden_ratio_adherence": 0.15,
    "uniqueness": 0.20,
}

SUB_THRESHOLDS: Dict[str, float] = {
    "path_smoothness": 40.0,
    "visual_balance": 50.0,
    "complexity": 50.0,
    "golden_ratio_adherence": 60.0,
    "uniqueness": 60.0,
}

# Optimal bands for the complexity sub-score (inclusive)
COMMAND_BAND: Tuple[int, int] = (10, 100)
PATH_BAND: Tuple[int, int] = (1, 20)
COMMAND_FALLOFF = 150.0
PATH_FALLOFF = 15.0

_PATH_D_RE = re.compile(r"<path\b[^>]*?\sd=\"([^\"]*)\"")
_PATH_TAG_RE = re.compile(r"<path\b")
_CMD_RE = re.compile(r"[MmLlHhVvCcSsQqTtAaZz]")
_NUM_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_CURVE_CMDS = frozenset("CcSsQqTtAa")
_LINE_CMDS = frozenset("LlHhVv")


@dataclass(frozen=True)
class DocumentStats:
    path_count: int
    command_count: int
    curve_count: int
    line_count: int
    coords: np.ndarray  # shape (n, 2)


def analyze_document(document: str) -> DocumentStats:
    """Count paths/commands and collect coordinate pairs from path data."""
    datas = _PATH_D_RE.findall(document or "")
    cmds: List[str] = []
    nums: List[float] = []
    for d in datas:
        cmds.extend(_CMD_RE.findall(d))
        pair_nums = [float(x) for x in _NUM_RE.findall(d)]
        if len(pair_nums) % 2:
            pair_nums = pair_nums[:-1]
        nums.extend(pair_nums)
    coords = np.asarray(nums, dtype=float).reshape(-1, 2) if nums else np.zeros((0, 2))
    return DocumentStats(
        path_count=len(_PATH_TAG_RE.findall(document or "")),
        command_count=len(cmds),
        curve_count=sum(1 for c in cmds if c in _CURVE_CMDS),
        line_count=sum(1 for c in cmds if c in _LINE_CMDS),
        coords=coords,
    )


def path_smoothness_score(stats: DocumentStats) -> float:
    drawn = stats.curve_count + stats.line_count
    if stats.command_count == 0 or drawn == 0:
        return 50.0
    score = stats.curve_count / drawn * 80.0
    if 4 <= stats.curve_count <= 50:
        score += 20.0
    elif stats.curve_count > 50:
        score += 10.0
    return min(100.0, score)


def visual_balance_score(stats: DocumentStats) -> float:
    if stats.coords.shape[0] < 3:
        return 70.0
    cx, cy = stats.coords.mean(axis=0)
    dist = float(np.hypot(cx - CANVAS_CENTER, cy - CANVAS_CENTER))
    return max(0.0, 100.0 - dist / 35.0 * 50.0)


def command_complexity(commands: int) -> float:
    lo, hi = COMMAND_BAND
    if commands < lo:
        return commands / lo * 80.0
    if commands <= hi:
        return 100.0
    return 100.0 / (1.0 + (commands - hi) / COMMAND_FALLOFF)


def path_complexity(paths: int) -> float:
    lo, hi = PATH_BAND
    if paths < lo:
        return 0.0
    if paths <= hi:
        return 100.0
    return 100.0 / (1.0 + (paths - hi) / PATH_FALLOFF)


def complexity_score(stats: DocumentStats) -> float:
    """Non-monotonic: rises into the optimal band, strictly falls past it."""
    return (command_complexity(stats.command_count) + path_complexity(stats.path_count)) / 2.0


def golden_ratio_score(derived: HashDerivedParams) -> float:
    score = 70.0
    for value, target in (
        (derived.taper_ratio, PHI_INVERSE),
        (derived.scale_factor, PHI),
        (derived.curve_tension, PHI_INVERSE),
    ):
        deviation = phi_deviation(value, target)
        if deviation < 0.1:
            score += 10.0
        elif deviation < 0.3:
            score += 5.0
    return min(100.0, score)


def uniqueness_score(derived: HashDerivedParams) -> float:
    """Distance of the parameter combination from the most typical defaults."""
    score = 80.0
    if derived.element_count == 8:
        score -= 5.0
    if derived.rotation_offset < 10.0 or derived.rotation_offset > 350.0:
        score -= 5.0
    if 0.4 <= derived.curve_tension <= 0.6:
        score -= 3.0
    if derived.spiral_amount > 0.2:
        score += 5.0
    if derived.organic_amount > 0.3:
        score += 5.0
    return max(60.0, min(100.0, score))


def combine(subscores: Dict[str, float]) -> int:
    return int(round(sum(WEIGHTS[k] * subscores[k] for k in WEIGHTS)))


def calculate_quality_score(document: str, derived: HashDerivedParams) -> QualityMetrics:
    stats = analyze_document(document)
    subs = {
        "path_smoothness": path_smoothness_score(stats),
        "visual_balance": visual_balance_score(stats),
        "complexity": complexity_score(stats),
        "golden_ratio_adherence": golden_ratio_score(derived),
        "uniqueness": uniqueness_score(derived),
    }
    rejections = [
        QualityRejection(reason=f"{name}_below_threshold", value=round(value, 2), threshold=SUB_THRESHOLDS[name])
        for name, value in subs.items()
        if value < SUB_THRESHOLDS[name]
    ]
    return QualityMetrics(
        score=combine(subs),
        rejections=rejections,
        **{k: round(v, 4) for k, v in subs.items()},
    )


__all__ = [
    "WEIGHTS",
    "SUB_THRESHOLDS",
    "COMMAND_BAND",
    "PATH_BAND",
    "DocumentStats",
    "analyze_document",
    "path_smoothness_score",
    "visual_balance_score",
    "command_complexity",
    "path_complexity",
    "complexity_score",
    "golden_ratio_score",
    "uniqueness_score",
    "combine",
    "calculate_quality_score",
]

from __future__ import annotations

from dataclasses import replace

import pytest

from logomark.constants import PHI, PHI_INVERSE

from logomark.derive import derive_params_from_hash
from logomark.geometry import bezier_circle
from logomark.quality import (
    COMMAND_BAND,
    PATH_BAND,
    WEIGHTS,
    analyze_document,
    calculate_quality_score,
    combine,
    command_complexity,
    golden_ratio_score,
    path_complexity,
    uniqueness_score,
)
from logomark.seed import generate_hash_params_sync
from logomark.svg import DocumentBuilder


def _derived(brand: str = "Acme"):
    return derive_params_from_hash(generate_hash_params_sync(brand, "general").hash_hex)


def _circles(count: int, cx: float = 50.0) -> str:
    doc = DocumentBuilder("q")
    for i in range(count):
        doc.add_path(bezier_circle(cx, 50, 5 + i % 10), fill="#000000")
    return doc.tostring()


def test_weights_sum_to_one():
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def test_complexity_strictly_decreases_past_band():
    hi = COMMAND_BAND[1]
    scores = [command_complexity(hi + step) for step in range(1, 400, 20)]
    assert all(a > b for a, b in zip(scores, scores[1:]))
    assert command_complexity(hi) == 100.0

    phi = PATH_BAND[1]
    path_scores = [path_complexity(phi + step) for step in range(1, 60)]
    assert all(a > b for a, b in zip(path_scores, path_scores[1:]))
    assert path_complexity(0) == 0.0


def test_complexity_rises_into_band():
    assert command_complexity(0) < command_complexity(5) < command_complexity(COMMAND_BAND[0])


def test_analyze_counts_paths_commands_and_coordinates():
    stats = analyze_document(_circles(2))
    assert stats.path_count == 2
    assert stats.command_count == 12
    assert stats.curve_count == 8
    assert stats.line_count == 0
    assert stats.coords.shape == (26, 2)


def test_centered_document_balances_better_than_offset():
    derived = _derived()
    centered = calculate_quality_score(_circles(3, 50.0), derived)
    offset = calculate_quality_score(_circles(3, 90.0), derived)
    assert centered.visual_balance > offset.visual_balance
    assert centered.visual_balance > 95.0


def test_score_is_pure_weighted_sum():
    derived = _derived("Pure")
    doc = _circles(4)
    a = calculate_quality_score(doc, derived)
    b = calculate_quality_score(doc, derived)
    assert a == b
    subs = {
        "path_smoothness": a.path_smoothness,
        "visual_balance": a.visual_balance,
        "complexity": a.complexity,
        "golden_ratio_adherence": a.golden_ratio_adherence,
        "uniqueness": a.uniqueness,
    }
    assert a.score == combine(subs)


def test_empty_document_defaults_and_rejections():
    metrics = calculate_quality_score("<svg></svg>", _derived())
    assert metrics.path_smoothness == 50.0
    assert metrics.visual_balance == 70.0
    reasons = {r.reason for r in metrics.rejections}
    assert "complexity_below_threshold" in reasons
    for rejection in metrics.rejections:
        assert rejection.value < rejection.threshold


def test_golden_and_uniqueness_bounds():
    for i in range(50):
        derived = _derived(f"bounds-{i}")
        assert 70.0 <= golden_ratio_score(derived) <= 100.0
        assert 60.0 <= uniqueness_score(derived) <= 100.0


def test_golden_score_rewards_exact_ratios():
    derived = replace(_derived(), taper_ratio=PHI_INVERSE, scale_factor=PHI, curve_tension=PHI_INVERSE)
    assert golden_ratio_score(derived) == 100.0
    near = replace(derived, taper_ratio=PHI_INVERSE * 1.2, scale_factor=0.5, curve_tension=0.1)
    assert golden_ratio_score(near) == 75.0

from __future__ import annotations

import math

import pytest

from logomark.geometry import (
    PathData,
    bezier_circle,
    bezier_circle_reversed,
    clamp,
    ellipse_ring,
    first_letter,
    fmt,
    golden_spiral_radii,
    golden_split,
    is_known_letter,
    letterform_path,
    regular_polygon_points,
    resample,
    resolve_letter,
    safe_div,
    signed_area,
    star_points,
    stroke_for_weight,
    tapered_ribbon,
    thick_segment,
)
from logomark.geometry.golden import PHI, fibonacci, phi_deviation



def _endpoints(path: PathData):
    """Segment end points of a single closed M/C/L contour."""
    pts = []
    for part in str(path).split(" Z")[0].split(" C ")[1:]:
        nums = [float(x) for x in part.split()]
        pts.append((nums[-2], nums[-1]))
    return pts


def test_clamp_and_safe_div():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert safe_div(1.0, 0.0, default=7.0) == 7.0
    assert safe_div(6.0, 3.0) == 2.0


def test_fmt_collapses_noise():
    assert fmt(1.005) in {"1", "1.01"}
    assert fmt(-0.0001) == "0"
    assert fmt(float("nan")) == "0"
    assert fmt(float("inf")) == "0"
    assert fmt(12.5) == "12.5"


def test_reversed_circle_winds_opposite():
    forward = _endpoints(bezier_circle(50, 50, 10))
    backward = _endpoints(bezier_circle_reversed(50, 50, 10))
    assert signed_area(forward) * signed_area(backward) < 0


def test_ellipse_ring_has_two_contours():
    ring = str(ellipse_ring(50, 50, 20, 12, 4))
    assert ring.count("M ") == 2
    assert ring.count("Z") == 2


def test_thick_segment_is_positively_wound_even_for_zero_length():
    quad = thick_segment((10, 10), (40, 30), 4)
    assert signed_area(quad) > 0
    degenerate = thick_segment((10, 10), (10, 10), 4)
    assert len(degenerate) == 4


def test_polygon_and_star_points():
    pts = regular_polygon_points(50, 50, 20, 6)
    assert len(pts) == 6
    for x, y in pts:
        assert math.isclose(math.hypot(x - 50, y - 50), 20, rel_tol=1e-9)
    star = star_points(50, 50, 30, 12, 5)
    assert len(star) == 10


def test_tapered_ribbon_is_closed_and_handles_degenerate_centerline():
    ribbon = tapered_ribbon([(50, 50), (60, 40), (80, 20)], 4, 1, bulge=0.3)
    text = str(ribbon)
    assert text.startswith("M ") and text.endswith("Z")
    # zero-length centerline collapses to a dot instead of failing
    dot = tapered_ribbon([(50, 50), (50, 50)], 3, 1)
    assert str(dot).endswith("Z")


def test_resample_even_spacing():
    pts = resample([(0, 0), (10, 0)], 5)
    assert [p[0] for p in pts] == [0, 2.5, 5, 7.5, 10]


def test_golden_helpers():
    assert fibonacci(7) == [1, 1, 2, 3, 5, 8, 13]
    major, minor = golden_split(100)
    assert math.isclose(major / minor, 1.618, rel_tol=1e-3)
    radii = golden_spiral_radii(30, 4)
    assert radii[0] == 30 and radii[-1] < radii[0]


def test_phi_deviation_is_relative():
    assert phi_deviation(PHI) == 0.0
    assert math.isclose(phi_deviation(PHI * 1.2), 0.2)
    assert math.isclose(phi_deviation(0.5, 1.0), 0.5)
    assert phi_deviation(3.0, 0.0) == 3.0


@pytest.mark.parametrize("text,expected", [("acme", "A"), ("  zeta", "Z"), ("7-Eleven", "O"), ("", "O"), ("Ñandu", "O")])
def test_first_letter_falls_back_to_default(text, expected):
    assert first_letter(text) == expected


def test_known_letters_cover_alphabet():
    assert all(is_known_letter(ch) for ch in "abcdefghijklmnopqrstuvwxyz")
    assert not is_known_letter("7")
    assert resolve_letter("#") == "O"


@pytest.mark.parametrize("char", list("ABCDEFGHIJKLMNOPQRSTUVWXYZ") + ["7", "", "@", "é"])
def test_letterform_never_raises_and_is_closed(char):
    path = letterform_path(char, 50, 50, 30, stroke_for_weight(600, 60))
    assert path
    assert str(path).endswith("Z")


def test_stroke_for_weight_clamps_weight():
    assert stroke_for_weight(50, 60) == stroke_for_weight(100, 60)
    assert stroke_for_weight(2000, 60) == stroke_for_weight(900, 60)
    assert stroke_for_weight(900, 60) == pytest.approx(9.0)

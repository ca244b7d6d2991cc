from __future__ import annotations

import importlib
import re

import pytest

from logomark.algorithms import loaded_modules
from logomark.algorithms.base import Algorithm, LogoAlgorithm
from logomark.algorithms.registry import get_algorithm, list_registered_algorithms, register_algorithm
from logomark.controller import render_preview
from logomark.errors import InputError

FAMILIES = {
    "radial": {"starburst", "motion_lines", "lightning_bolt", "flow_gradient", "circular_emblem"},
    "nested": {
        "hexagon_tech",
        "gear_cog",
        "shield_badge",
        "star_mark",
        "crown_mark",
        "diamond_gem",
        "perfect_triangle",
        "orbital_rings",
        "isometric_cube",
    },
    "overlap": {
        "circle_overlap",
        "gradient_bars",
        "parallel_bars",
        "wave_flow",
        "sound_waves",
        "depth_geometry",
        "infinity_loop",
        "leaf_organic",
        "heart_love",
        "cloud_soft",
    },
    "letter": {"framed_letter", "letter_dna", "word_rhythm", "monogram_blend", "letter_swoosh", "letter_gradient"},
}
ALL_NAMES = sorted(set().union(*FAMILIES.values()))
GRADIENT_RE = re.compile(r"<(linearGradient|radialGradient)\b")


def test_registry_holds_all_thirty():
    assert list_registered_algorithms() == ALL_NAMES
    assert len(ALL_NAMES) == 30


@pytest.mark.parametrize("family,names", sorted(FAMILIES.items()))
def test_family_membership(family, names):
    for name in names:
        assert get_algorithm(name).family == family


@pytest.mark.parametrize("name", ALL_NAMES)
def test_algorithm_satisfies_protocol(name):
    algo = get_algorithm(name)
    assert isinstance(algo, LogoAlgorithm)
    assert 80 <= algo.min_quality <= 85
    assert algo.archetype in {"symbol", "wordmark"}
    assert algo.description


@pytest.mark.parametrize("name", ALL_NAMES)
def test_module_exposes_entry_points(name):
    module = importlib.import_module(f"logomark.algorithms.{name}")
    gen = getattr(module, f"generate_{name}")
    preview = getattr(module, f"generate_single_{name}_preview")
    assert gen.__name__ == f"generate_{name}"
    assert preview.__name__ == f"generate_single_{name}_preview"


@pytest.mark.parametrize("name", ALL_NAMES)
@pytest.mark.parametrize("seed", ["preview", "Acme", "zz-9"])
def test_canvas_invariant(name, seed):
    doc = render_preview(get_algorithm(name), "#2563eb", seed=seed)
    assert doc.startswith("<svg")
    assert 'viewBox="0 0 100 100"' in doc
    assert GRADIENT_RE.search(doc)
    assert "<path" in doc
    # every paint reference resolves to a gradient defined in this document
    defined = set(re.findall(r'id="([^"]+)"', doc))
    for ref in re.findall(r"url\(#([^)]+)\)", doc):
        assert ref in defined


@pytest.mark.parametrize("name", ["letter_dna", "word_rhythm", "monogram_blend", "letter_gradient", "framed_letter"])
@pytest.mark.parametrize("brand", ["X", "Zzyzx Labs", "42", "Ölmühle", "a b c d e f g h"])
def test_letter_family_accepts_any_brand(name, brand):
    algo = get_algorithm(name)
    module = importlib.import_module(f"logomark.algorithms.{name}")
    gen = getattr(module, f"generate_{name}")
    results = gen({"brand_name": brand, "primary_color": "#10b981", "variations": 1, "seed": "any"})
    assert len(results) == 1
    assert results[0].algorithm == algo.name


def test_unknown_algorithm_is_input_error():
    with pytest.raises(InputError) as exc:
        get_algorithm("does-not-exist")
    assert exc.value.field == "algorithm"
    assert get_algorithm("Framed-Letter").name == "framed_letter"


def test_registry_rejects_conflicts_and_non_algorithms():
    class Impostor(Algorithm):
        name = "starburst"

        def derive_params(self, derived, base, request, variant=0):
            return base

        def build_geometry(self, params, doc, palette, rng):
            return {}

    with pytest.raises(ValueError):
        register_algorithm(Impostor())
    with pytest.raises(TypeError):
        register_algorithm(object())  # type: ignore[arg-type]
    same = get_algorithm("starburst")
    assert register_algorithm(same) is same


def test_autoloader_imports_every_generator_module():
    assert sorted(loaded_modules()) == ALL_NAMES


@pytest.mark.parametrize("seed", [f"bars-{i}" for i in range(12)])
def test_parallel_bars_stay_on_canvas_with_one_gradient_per_bar(seed):
    doc = render_preview(get_algorithm("parallel_bars"), "#635bff", "#00d4ff", seed=seed)
    paths = re.findall(r'<path[^>]* d="([^"]+)"', doc)
    assert 3 <= len(paths) <= 6
    assert len(re.findall(r"<linearGradient\b", doc)) == len(paths)
    for d in paths:
        values = [float(v) for v in re.findall(r"-?\d+(?:\.\d+)?", d)]
        assert all(0.0 <= v <= 100.0 for v in values)

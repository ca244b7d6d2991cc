from __future__ import annotations

import pytest

from logomark.algorithms.framed_letter import generate_framed_letter
from logomark.algorithms.registry import get_algorithm
from logomark.algorithms.starburst import generate_single_starburst_preview, generate_starburst
from logomark.config import RuntimeSettings
from logomark.controller import coerce_params, generate_logos, render_preview
from logomark.errors import ExhaustedCandidates, InputError
from logomark.schemas import GenerationParams
from logomark.store import HashDedupStore


def test_unreachable_floor_degrades_to_best_candidates():
    logos = generate_starburst(
        {"brand_name": "Acme", "primary_color": "#2563eb", "variations": 5, "min_quality_score": 101}
    )
    assert len(logos) == 5
    assert all(logo.score < 101 for logo in logos)
    assert all(logo.meta.met_threshold is False for logo in logos)
    assert all(logo.meta.attempts == get_algorithm("starburst").candidate_budget for logo in logos)
    assert sorted({logo.variant for logo in logos}) == [0, 1, 2, 3, 4]


def test_results_are_best_first(acme_request):
    logos = generate_starburst(dict(acme_request, variations=4))
    keys = [(-logo.score, logo.variant) for logo in logos]
    assert keys == sorted(keys)


def test_seeded_requests_are_reproducible(acme_request):
    a = generate_starburst(acme_request)
    b = generate_starburst(acme_request)
    assert [l.id for l in a] == [l.id for l in b]
    assert [l.document for l in a] == [l.document for l in b]


def test_thread_pool_matches_serial(acme_request):
    serial = generate_starburst(dict(acme_request, variations=4))
    threaded = generate_starburst(
        dict(acme_request, variations=4),
        settings=RuntimeSettings(max_workers=4, candidate_budget=None, log_level="INFO"),
    )
    assert [(l.id, l.score, l.document) for l in serial] == [(l.id, l.score, l.document) for l in threaded]


def test_store_records_accepted_and_rejects_duplicates(acme_request):
    store = HashDedupStore()
    request = dict(acme_request, min_quality_score=0)
    first = generate_starburst(request, store=store)
    assert len(store) == len(first)
    assert all(store.contains(l.hash) for l in first)

    second = generate_starburst(request, store=store)
    assert {l.hash for l in first}.isdisjoint({l.hash for l in second})
    assert all(l.meta.attempts >= 2 for l in second)
    assert len(store) == len(first) + len(second)


def test_candidate_budget_override():
    logos = generate_starburst(
        {"brand_name": "Acme", "primary_color": "#2563eb", "variations": 1, "min_quality_score": 101, "seed": 7},
        settings=RuntimeSettings(max_workers=1, candidate_budget=2, log_level="INFO"),
    )
    assert logos[0].meta.attempts == 2


def test_generated_logo_contract(acme_request):
    logo = generate_starburst(acme_request)[0]
    assert logo.view_box == "0 0 100 100"
    assert 'viewBox="0 0 100 100"' in logo.document
    assert "<path" in logo.document
    assert logo.id == f"starburst-{logo.hash}-{logo.variant}"
    assert logo.meta.brand_name == "Acme"
    assert logo.meta.colors["primary"] == "#2563eb"
    assert logo.params["arm_count"] == logo.meta.geometry["arm_count"]


def test_camel_case_keys_are_accepted():
    params = coerce_params({"brandName": "Acme", "primaryColor": "#FFF", "minQualityScore": 50})
    assert isinstance(params, GenerationParams)
    assert params.primary_color == "#ffffff"
    assert params.min_quality_score == 50
    assert coerce_params(params) is params


@pytest.mark.parametrize(
    "overrides,needle",
    [
        ({"brand_name": "   "}, "brand"),
        ({"primary_color": "bluish"}, "color"),
        ({"accent_color": "#12345"}, "color"),
        ({"variations": 0}, "variations"),
        ({"min_quality_score": 150}, "quality"),
        ({"min_quality_score": -1}, "quality"),
        ({"category": "sports"}, "category"),
        ({"unexpected": True}, "unexpected"),
    ],
)
def test_invalid_requests_raise_input_error(overrides, needle):
    request = dict({"brand_name": "Acme", "primary_color": "#2563eb"}, **overrides)
    with pytest.raises(InputError) as exc:
        generate_starburst(request)
    assert needle in str(exc.value).lower()


def test_non_mapping_params_rejected():
    with pytest.raises(InputError):
        coerce_params(["Acme"])  # type: ignore[arg-type]


def test_preview_is_byte_identical_per_seed():
    a = generate_single_starburst_preview("#2563eb", seed="abc")
    b = generate_single_starburst_preview("#2563eb", seed="abc")
    c = generate_single_starburst_preview("#2563eb", seed="abd")
    assert a == b
    assert a != c
    assert generate_single_starburst_preview("#2563eb", "#f59e0b", 42) == render_preview(
        get_algorithm("starburst"), "#2563eb", "#f59e0b", "42"
    )


def test_preview_validates_colors():
    with pytest.raises(InputError):
        generate_single_starburst_preview("not-a-color")


def test_unparseable_brand_initial_uses_default_letterform():
    logos = generate_framed_letter({"brand_name": "7-Eleven", "primary_color": "#00a651", "variations": 2, "seed": "s"})
    assert logos
    for logo in logos:
        assert logo.meta.geometry["letter"] == "O"
        assert logo.meta.geometry["letter_fallback"] is True


class _Broken:
    name = "broken"
    error = ZeroDivisionError
    family = "test"
    archetype = "symbol"
    default_category = "general"
    min_quality = 80
    candidate_budget = 3
    description = "always fails"

    def derive_params(self, derived, base, request, variant=0):
        return base

    def build_geometry(self, params, doc, palette, rng):
        raise self.error("degenerate")


def test_exhausted_variation_is_skipped_not_fatal(caplog):
    logos = generate_logos(_Broken(), {"brand_name": "Acme", "primary_color": "#2563eb", "variations": 2})
    assert logos == []
    assert "exhausted" in caplog.text


@pytest.mark.parametrize("error", [IndexError, KeyError, TypeError, OverflowError])
def test_any_geometry_error_only_costs_the_variation(error, caplog):
    broken = _Broken()
    broken.error = error
    logos = generate_logos(broken, {"brand_name": "Acme", "primary_color": "#2563eb", "variations": 2})
    assert logos == []
    assert "exhausted" in caplog.text
    with pytest.raises(ExhaustedCandidates) as exc:
        render_preview(broken, "#2563eb")
    assert isinstance(exc.value.last_error, error)


def test_preview_failure_raises_exhausted():
    with pytest.raises(ExhaustedCandidates) as exc:
        render_preview(_Broken(), "#2563eb")
    assert exc.value.algorithm == "broken"
    assert isinstance(exc.value.last_error, ZeroDivisionError)

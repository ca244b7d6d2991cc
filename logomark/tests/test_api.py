from __future__ import annotations

import pytest

from logomark.api import (
    AESTHETIC_ALGORITHMS,
    ALGORITHM_INFO,
    ALL_ALGORITHMS,
    INDUSTRY_ALGORITHMS,
    SYMBOL_ALGORITHMS,
    WORDMARK_ALGORITHMS,
    generate,
    generate_all_algorithms,
    get_unique_logos,
    map_category_to_industry,
    select_algorithm,
)
from logomark.config import RuntimeSettings
from logomark.errors import InputError

FAST = RuntimeSettings(max_workers=1, candidate_budget=1, log_level="INFO")


def test_catalogue_is_built_from_registry():
    assert len(ALGORITHM_INFO) == 30
    assert ALGORITHM_INFO["starburst"]["family"] == "radial"
    assert set(SYMBOL_ALGORITHMS) | set(WORDMARK_ALGORITHMS) == set(ALL_ALGORITHMS)
    assert "framed_letter" in WORDMARK_ALGORITHMS
    assert "gear_cog" in SYMBOL_ALGORITHMS


def test_selection_tables_name_registered_algorithms():
    for table in (INDUSTRY_ALGORITHMS, AESTHETIC_ALGORITHMS):
        for names in table.values():
            assert set(names) <= set(ALL_ALGORITHMS)


@pytest.mark.parametrize(
    "category,industry",
    [
        ("Fintech startup", "finance"),
        ("E-commerce", None),
        ("ecommerce", "technology"),
        ("Sustainability", "sustainability"),
        ("AI research", "technology"),
        ("Art gallery", "creative"),
        ("Health & wellness", "healthcare"),
        ("education", None),
        ("", None),
        (None, None),
    ],
)
def test_map_category_to_industry(category, industry):
    assert map_category_to_industry(category) == industry


def test_select_algorithm_is_seeded():
    assert select_algorithm("Acme") == select_algorithm("Acme")
    picks = {select_algorithm("Acme", seed=str(i)) for i in range(40)}
    assert len(picks) > 5


def test_select_algorithm_respects_pools():
    for i in range(20):
        assert select_algorithm(f"b{i}", archetype="symbol") in SYMBOL_ALGORITHMS
        assert select_algorithm(f"b{i}", archetype="wordmark") in WORDMARK_ALGORITHMS
        assert select_algorithm(f"b{i}", industry="finance") in INDUSTRY_ALGORITHMS["finance"]
        assert select_algorithm(f"b{i}", aesthetic="tech-minimal") in AESTHETIC_ALGORITHMS["tech-minimal"]
    # industry wins over aesthetic
    assert select_algorithm("x", industry="healthcare", aesthetic="tech-minimal") in INDUSTRY_ALGORITHMS["healthcare"]


def test_select_algorithm_rejects_unknown_archetype():
    with pytest.raises(InputError) as exc:
        select_algorithm("Acme", archetype="mascot")
    assert exc.value.field == "archetype"


def test_generate_dispatches_named_and_selected():
    request = {"brand_name": "Acme", "primary_color": "#2563eb", "category": "finance", "variations": 1, "seed": "s"}
    named = generate(request, "gear-cog", settings=FAST)
    assert named[0].algorithm == "gear_cog"
    selected = generate(request, settings=FAST)
    assert selected[0].algorithm in INDUSTRY_ALGORITHMS["finance"]
    with pytest.raises(InputError):
        generate(request, "nope")


def test_generate_all_algorithms_returns_one_per_algorithm():
    logos = generate_all_algorithms(
        {"brand_name": "Acme", "primary_color": "#2563eb", "variations": 1, "seed": "all"},
        settings=FAST,
    )
    assert [logo.algorithm for logo in logos] == ALL_ALGORITHMS


def test_get_unique_logos_keeps_first_occurrence():
    request = {"brand_name": "Acme", "primary_color": "#2563eb", "variations": 2, "seed": "u"}
    a, b = generate(request, "starburst", settings=FAST)
    assert get_unique_logos([a, b, a, b]) == [a, b]
    assert get_unique_logos([]) == []

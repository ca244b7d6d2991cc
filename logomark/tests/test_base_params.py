from __future__ import annotations

from dataclasses import fields

from logomark.base_params import BaseParameters, extend_base, generate_base_params
from logomark.seed import create_seeded_random


def _counting(values):
    calls = []

    def _rng() -> float:
        v = values[len(calls) % len(values)]
        calls.append(v)
        return v

    return _rng, calls


def test_one_draw_per_field_in_order():
    rng, calls = _counting([0.0])
    base = generate_base_params(rng)
    assert len(calls) == len(fields(BaseParameters)) == 25
    assert base.stroke_width == 2
    assert base.segment_count == 3
    assert base.layer_count == 1


def test_upper_edge_stays_in_documented_ranges():
    rng, _ = _counting([0.999999])
    base = generate_base_params(rng)
    assert 2 <= base.stroke_width < 6
    assert base.segment_count == 10
    assert base.layer_count == 5
    assert 0.7 <= base.base_opacity <= 1.0


def test_same_seed_same_bundle():
    a = generate_base_params(create_seeded_random("bundle"))
    b = generate_base_params(create_seeded_random("bundle"))
    assert a == b
    assert a.as_dict()["jitter_amount"] == a.jitter_amount


def test_extend_base_copies_shared_fields():
    from dataclasses import dataclass

    @dataclass(frozen=True)
    class Extra(BaseParameters):
        arm_count: int

    base = generate_base_params(create_seeded_random("extend"))
    ext = extend_base(Extra, base, arm_count=7)
    assert ext.arm_count == 7
    assert ext.stroke_width == base.stroke_width
    assert ext.as_dict()["arm_count"] == 7

from __future__ import annotations

import pytest

from logomark.colors import Palette, contrast_ratio, darken, hex_to_rgb, is_hex_color, lighten, mix, normalize_hex, rotate_hue
from logomark.errors import InputError


def test_normalize_hex_expands_and_lowercases():
    assert normalize_hex("#ABC") == "#aabbcc"
    assert normalize_hex("2563EB") == "#2563eb"


@pytest.mark.parametrize("token", ["", "#12", "blue", "#1234567", None, 123])
def test_invalid_tokens(token):
    assert not is_hex_color(token)


def test_normalize_hex_raises_input_error():
    with pytest.raises(InputError):
        normalize_hex("tomato")


def test_lighten_darken_move_luminance():
    base = "#2563eb"
    assert sum(hex_to_rgb(lighten(base, 0.2))) > sum(hex_to_rgb(base))
    assert sum(hex_to_rgb(darken(base, 0.2))) < sum(hex_to_rgb(base))
    assert is_hex_color(rotate_hue(base, 180))
    assert rotate_hue(base, 180) != base


def test_mix_endpoints_and_contrast():
    assert mix("#000000", "#ffffff", 0.0) == "#000000"
    assert mix("#000000", "#ffffff", 1.0) == "#ffffff"
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0, rel=1e-3)


def test_palette_accent_defaults_to_analogous_shade():
    implicit = Palette.from_request("#2563eb")
    assert not implicit.explicit_accent
    assert implicit.accent != implicit.primary
    explicit = Palette.from_request("#2563eb", "#F59E0B")
    assert explicit.explicit_accent and explicit.accent == "#f59e0b"
    ramp = explicit.ramp(3)
    assert ramp[0] == explicit.primary and ramp[-1] == explicit.accent

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from logomark.config import GenerationConfig, RuntimeSettings, load_generation_config, load_runtime_settings
from logomark.errors import InputError


def create_config(tmp_path: Path, payload: str, name: str = "gen.yaml") -> Path:
    path = tmp_path / name
    path.write_text(textwrap.dedent(payload))
    return path


def test_load_yaml_config_normalizes_algorithms(tmp_path):
    path = create_config(
        tmp_path,
        """
        brand_name: "Acme"
        primary_color: "#2563eb"
        category: technology
        algorithms: ["Starburst", "framed-letter", "starburst", ""]
        variations: 2
        seed: 1234
        """,
    )
    cfg = load_generation_config(path)
    assert isinstance(cfg, GenerationConfig)
    assert cfg.algorithms == ["starburst", "framed_letter"]
    assert cfg.seed == "1234"
    assert cfg.variations == 2


def test_load_json_config_and_request_fields(tmp_path):
    path = tmp_path / "gen.json"
    path.write_text(json.dumps({"brand_name": "Acme", "algorithms": "gear_cog", "out_dir": "x"}))
    cfg = load_generation_config(path)
    assert cfg.algorithms == ["gear_cog"]
    request = cfg.request()
    assert "algorithms" not in request and "out_dir" not in request
    assert request["brand_name"] == "Acme"


def test_env_seed_is_a_fallback_only(tmp_path, monkeypatch):
    monkeypatch.setenv("LOGOMARK_SEED", "from-env")
    unseeded = create_config(tmp_path, "brand_name: Acme\n", "a.yaml")
    seeded = create_config(tmp_path, "brand_name: Acme\nseed: from-file\n", "b.yaml")
    assert load_generation_config(unseeded).seed == "from-env"
    assert load_generation_config(seeded).seed == "from-file"


def test_runtime_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LOGOMARK_MAX_WORKERS", "4")
    monkeypatch.setenv("LOGOMARK_CANDIDATE_BUDGET", "9")
    monkeypatch.setenv("LOGOMARK_LOG_LEVEL", "debug")
    settings = load_runtime_settings()
    assert settings == RuntimeSettings(max_workers=4, candidate_budget=9, log_level="DEBUG")


def test_runtime_settings_defaults_and_non_positive_budget(monkeypatch):
    assert load_runtime_settings() == RuntimeSettings(max_workers=1, candidate_budget=None, log_level="INFO")
    monkeypatch.setenv("LOGOMARK_CANDIDATE_BUDGET", "0")
    assert load_runtime_settings().candidate_budget is None


def test_unknown_config_keys_fail(tmp_path):
    path = create_config(tmp_path, "brand_name: Acme\ncolour: red\n")
    with pytest.raises(InputError) as exc:
        load_generation_config(path)
    assert exc.value.field == "colour"


def test_malformed_config_is_an_input_error(tmp_path):
    listing = create_config(tmp_path, "- starburst\n- gear_cog\n")
    with pytest.raises(InputError) as exc:
        load_generation_config(listing)
    assert exc.value.field == "config"

    broken = tmp_path / "gen.json"
    broken.write_text("{\"brand_name\": ")
    with pytest.raises(InputError):
        load_generation_config(broken)


@pytest.mark.parametrize("key", ["LOGOMARK_MAX_WORKERS", "LOGOMARK_CANDIDATE_BUDGET"])
def test_non_integer_env_is_an_input_error(monkeypatch, key):
    monkeypatch.setenv(key, "four")
    with pytest.raises(InputError) as exc:
        load_runtime_settings()
    assert exc.value.field == key

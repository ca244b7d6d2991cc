from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from logomark.cli import app


runner = CliRunner()


def test_cli_generate_writes_svgs_and_summary(tmp_path: Path):
    out_dir = tmp_path / "out"
    result = runner.invoke(
        app,
        [
            "generate",
            "--brand",
            "Acme",
            "--color",
            "#2563eb",
            "--algorithm",
            "starburst",
            "--algorithm",
            "framed-letter",
            "--variations",
            "2",
            "--seed",
            "cli",
            "--out",
            str(out_dir),
        ],
    )
    assert result.exit_code == 0, result.output
    summary = json.loads((out_dir / "summary.json").read_text())
    assert summary["brand_name"] == "Acme"
    assert summary["count"] == 4
    algorithms = {logo["algorithm"] for logo in summary["logos"]}
    assert algorithms == {"starburst", "framed_letter"}
    for logo in summary["logos"]:
        assert "document" not in logo
        svg = (out_dir / f"{logo['id']}.svg").read_text()
        assert 'viewBox="0 0 100 100"' in svg


def test_cli_generate_from_config(tmp_path: Path):
    cfg = tmp_path / "gen.yaml"
    out_dir = tmp_path / "logos"
    cfg.write_text(
        "\n".join(
            [
                "brand_name: Configured",
                "primary_color: '#10b981'",
                "category: sustainability",
                "variations: 1",
                "seed: cfg",
                f"out_dir: '{out_dir}'",
            ]
        )
    )
    result = runner.invoke(app, ["generate", "--config", str(cfg)])
    assert result.exit_code == 0, result.output
    summary = json.loads((out_dir / "summary.json").read_text())
    assert summary["count"] == 1


def test_cli_generate_rejects_bad_input(tmp_path: Path):
    missing = runner.invoke(app, ["generate", "--out", str(tmp_path)])
    assert missing.exit_code == 1
    assert "brand_name" in missing.output

    bad_color = runner.invoke(app, ["generate", "--brand", "Acme", "--color", "nope", "--out", str(tmp_path)])
    assert bad_color.exit_code == 1
    assert "ERROR" in bad_color.output

    bad_algo = runner.invoke(app, ["generate", "--brand", "Acme", "--algorithm", "nope", "--out", str(tmp_path)])
    assert bad_algo.exit_code == 1
    assert not (tmp_path / "summary.json").exists()


def test_cli_reports_bad_config_and_environment(tmp_path: Path):
    config = tmp_path / "gen.yaml"
    config.write_text("brand_name: Acme\ncolour: red\n")
    bad_key = runner.invoke(app, ["generate", "--config", str(config), "--out", str(tmp_path)])
    assert bad_key.exit_code == 1
    assert "colour" in bad_key.output

    bad_env = runner.invoke(app, ["list"], env={"LOGOMARK_MAX_WORKERS": "many"})
    assert bad_env.exit_code == 1
    assert "LOGOMARK_MAX_WORKERS" in bad_env.output


def test_cli_preview_is_deterministic():
    a = runner.invoke(app, ["preview", "gear_cog", "--seed", "abc"])
    b = runner.invoke(app, ["preview", "gear_cog", "--seed", "abc"])
    assert a.exit_code == 0, a.output
    assert a.stdout == b.stdout
    assert a.stdout.startswith("<svg")


def test_cli_preview_selects_when_no_algorithm_given():
    result = runner.invoke(app, ["preview", "--seed", "auto", "--category", "finance"])
    assert result.exit_code == 0, result.output
    assert "<path" in result.stdout


def test_cli_preview_unknown_algorithm():
    result = runner.invoke(app, ["preview", "nope"])
    assert result.exit_code == 1


def test_cli_list_json():
    result = runner.invoke(app, ["list", "--json"])
    assert result.exit_code == 0, result.output
    catalogue = json.loads(result.stdout)
    assert len(catalogue) == 30
    assert catalogue["letter_dna"]["archetype"] == "wordmark"

    plain = runner.invoke(app, ["list"])
    assert plain.exit_code == 0
    assert "starburst" in plain.stdout

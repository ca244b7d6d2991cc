from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional
import json
import logging

import typer
from dotenv import load_dotenv

from .api import ALGORITHM_INFO, generate, select_algorithm, map_category_to_industry
from .algorithms.registry import get_algorithm, normalize_name
from .config import GenerationConfig, load_generation_config, load_runtime_settings
from .controller import render_preview
from .errors import InputError, LogomarkError
from .store import HashDedupStore


app = typer.Typer(help="Logomark: deterministic abstract logo generation")


@app.callback()
def _root_callback():
    """Logomark CLI root."""
    load_dotenv()
    try:
        settings = load_runtime_settings()
    except InputError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format="%(levelname)s %(name)s: %(message)s")


def _merge_config(
    config: Optional[Path],
    brand: Optional[str],
    color: Optional[str],
    accent: Optional[str],
    category: Optional[str],
    algorithm: Optional[List[str]],
    variations: Optional[int],
    min_quality: Optional[int],
    seed: Optional[str],
    out: Optional[Path],
) -> GenerationConfig:
    cfg = load_generation_config(config) if config else GenerationConfig()
    overrides = {
        "brand_name": brand,
        "primary_color": color,
        "accent_color": accent,
        "category": category,
        "variations": variations,
        "min_quality_score": min_quality,
        "seed": seed,
        "out_dir": str(out) if out else None,
    }
    cfg = replace(cfg, **{k: v for k, v in overrides.items() if v is not None})
    if algorithm:
        cfg.algorithms = [normalize_name(a) for a in algorithm if a and a.strip()] or None
    return cfg


@app.command("generate")
def cmd_generate(
    brand: Optional[str] = typer.Option(None, "--brand", "-b", help="Brand name (required unless set in --config)"),
    color: Optional[str] = typer.Option(None, "--color", "-c", help="Primary color as hex"),
    accent: Optional[str] = typer.Option(None, "--accent", help="Accent color as hex"),
    category: Optional[str] = typer.Option(None, help="Brand category (technology, finance, ...)"),
    algorithm: List[str] = typer.Option(None, "--algorithm", "-a", help="Algorithm to run (repeatable); default selects one"),
    variations: Optional[int] = typer.Option(None, help="Variations per algorithm"),
    min_quality: Optional[int] = typer.Option(None, help="Quality floor 0-101; default is each algorithm's own"),
    seed: Optional[str] = typer.Option(None, help="Seed for reproducible output"),
    out: Optional[Path] = typer.Option(None, help="Output directory for SVGs and summary.json"),
    config: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Generation config YAML/JSON"),
):
    """Generate logos, write one SVG per logo plus a JSON summary."""
    try:
        cfg = _merge_config(config, brand, color, accent, category, algorithm, variations, min_quality, seed, out)
        if not cfg.brand_name:
            raise InputError("brand_name is required (--brand or config)", field="brand_name")
        settings = load_runtime_settings()
        store = HashDedupStore()
        request = cfg.request()
        names = cfg.algorithms or [None]
        logos = []
        for name in names:
            logos.extend(generate(request, name, store=store, settings=settings))
    except InputError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(1)

    out_dir = Path(cfg.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    for logo in logos:
        (out_dir / f"{logo.id}.svg").write_text(logo.document)
    summary = {
        "brand_name": cfg.brand_name,
        "count": len(logos),
        "logos": [logo.model_dump(exclude={"document"}) for logo in logos],
    }
    (out_dir / "summary.json").write_text(json.dumps(summary, indent=2, default=str))
    typer.echo(
        json.dumps(
            [{"id": logo.id, "algorithm": logo.algorithm, "score": logo.score} for logo in logos],
            indent=2,
        )
    )


@app.command("preview")
def cmd_preview(
    algorithm: Optional[str] = typer.Argument(None, help="Algorithm name; default selects one for the seed"),
    color: str = typer.Option("#2563eb", "--color", "-c", help="Primary color as hex"),
    accent: Optional[str] = typer.Option(None, "--accent", help="Accent color as hex"),
    seed: str = typer.Option("preview", help="Preview seed"),
    category: Optional[str] = typer.Option(None, help="Category used when selecting an algorithm"),
):
    """Print one preview SVG document."""
    try:
        name = algorithm or select_algorithm(seed, industry=map_category_to_industry(category))
        document = render_preview(get_algorithm(name), color, accent, seed)
    except InputError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(1)
    except LogomarkError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(2)
    typer.echo(document)


@app.command("list")
def cmd_list(
    as_json: bool = typer.Option(False, "--json", help="Print the catalogue as JSON"),
):
    """List registered algorithms."""
    if as_json:
        typer.echo(json.dumps(ALGORITHM_INFO, indent=2))
        return
    for name, info in ALGORITHM_INFO.items():
        typer.echo(f"{name:<18} {info['family']:<8} {info['archetype']:<9} {info['description']}")


if __name__ == "__main__":  # pragma: no cover
    app()

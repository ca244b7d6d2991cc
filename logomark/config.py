from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import os
import json
import yaml

from .constants import DEFAULT_CATEGORY, DEFAULT_VARIATIONS
from .errors import InputError


@dataclass
class GenerationConfig:
    brand_name: Optional[str] = None
    primary_color: str = "#2563eb"
    accent_color: Optional[str] = None
    category: str = DEFAULT_CATEGORY
    tagline: Optional[str] = None
    algorithms: Optional[List[str]] = None  # None selects one per brand
    variations: int = DEFAULT_VARIATIONS
    min_quality_score: Optional[int] = None  # defaults to each algorithm's own floor
    seed: Optional[str] = None
    out_dir: str = "logos"

    def request(self) -> Dict[str, Any]:
        """Fields accepted by GenerationParams."""
        data = asdict(self)
        for key in ("algorithms", "out_dir"):
            data.pop(key)
        return data


@dataclass(frozen=True)
class RuntimeSettings:
    max_workers: int = field(default_factory=lambda: _env_int("LOGOMARK_MAX_WORKERS", 1))
    candidate_budget: Optional[int] = field(default_factory=lambda: _optional_int("LOGOMARK_CANDIDATE_BUDGET"))
    log_level: str = field(default_factory=lambda: os.getenv("LOGOMARK_LOG_LEVEL", "INFO").upper())


def load_generation_config(path: str | Path) -> GenerationConfig:
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text()) if p.suffix in {".yaml", ".yml"} else json.loads(p.read_text())
    except (yaml.YAMLError, ValueError) as exc:
        raise InputError(f"{p}: unreadable config: {exc}", field="config") from exc
    data = data or {}
    if not isinstance(data, dict):
        raise InputError(f"{p}: config must be a mapping", field="config")
    known = {f.name for f in fields(GenerationConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise InputError(f"{p}: unknown config key(s): {', '.join(unknown)}", field=unknown[0])
    cfg = GenerationConfig(**data)
    cfg.algorithms = _normalize_algorithms(cfg.algorithms)
    # Env fallback (config takes precedence)
    if cfg.seed is None and os.getenv("LOGOMARK_SEED"):
        cfg.seed = os.getenv("LOGOMARK_SEED")
    if cfg.seed is not None:
        cfg.seed = str(cfg.seed)
    return cfg


def load_runtime_settings() -> RuntimeSettings:
    """Return runtime execution settings (thread fan-out, candidate budget, log level)."""
    return RuntimeSettings()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InputError(f"{name} must be an integer, got {raw!r}", field=name) from exc


def _optional_int(name: str) -> Optional[int]:
    value = _env_int(name, 0)
    return value if value > 0 else None


def _normalize_algorithms(raw: Any) -> Optional[List[str]]:
    if raw is None:
        return None
    if isinstance(raw, str):
        values = [raw]
    elif isinstance(raw, (list, tuple, set)):
        values = list(raw)
    else:
        return None

    normalized: List[str] = []
    for item in values:
        if item is None:
            continue
        text = str(item).strip().lower().replace("-", "_")
        if not text or text in normalized:
            continue
        normalized.append(text)
    return normalized or None


__all__ = ["GenerationConfig", "RuntimeSettings", "load_generation_config", "load_runtime_settings"]

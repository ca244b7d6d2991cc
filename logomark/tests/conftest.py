from __future__ import annotations

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> None:
    """Keep a developer's LOGOMARK_* environment out of the tests."""
    for key in ("LOGOMARK_MAX_WORKERS", "LOGOMARK_CANDIDATE_BUDGET", "LOGOMARK_SEED", "LOGOMARK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def acme_request():
    return {
        "brand_name": "Acme",
        "primary_color": "#2563eb",
        "category": "technology",
        "variations": 2,
        "seed": "acme-seed",
    }

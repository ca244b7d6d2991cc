"""
Global constants for the canvas, hashing and scoring.

Kept in one place so generators and the evaluator agree on the frame.
"""
from __future__ import annotations

# Normalized canvas shared by every algorithm
CANVAS_SIZE: float = 100.0
CANVAS_CENTER: float = 50.0
VIEWBOX: str = "0 0 100 100"

# Hashing
DEFAULT_SALT: str = "logomark-v1"
PREVIEW_SALT: str = "logomark-preview-v1"
DEFAULT_CATEGORY: str = "general"
LOGO_HASH_VERSION: str = "v5"

CATEGORIES = (
    "technology",
    "finance",
    "healthcare",
    "creative",
    "ecommerce",
    "education",
    "sustainability",
    "general",
)

# Geometry
PHI: float = 1.618033988749895
PHI_INVERSE: float = 0.618033988749895
BEZIER_CIRCLE_K: float = 0.5522847498
# Ribbon centerline resampling: default density and hard ceiling per ribbon
RIBBON_SAMPLES: int = 6
RIBBON_MAX_SAMPLES: int = 24

# Controller defaults
DEFAULT_VARIATIONS: int = 3
DEFAULT_CANDIDATE_BUDGET: int = 5

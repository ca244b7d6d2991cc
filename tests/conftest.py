"""
Pytest configuration for the property suite.

Puts the repository root on sys.path and pins numpy's global seed so any
incidental global draws stay reproducible between runs.
"""
from pathlib import Path                                     # Path handling
import sys                                                   # Import path
import pytest                                                # Testing framework
import numpy as np                                           # Numerical operations


ROOT = Path(__file__).resolve().parents[1]                   # Repository root
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def deterministic_random():                                  # Ensure reproducible tests
    """Ensure deterministic randomness per test."""          # Fixture purpose
    np.random.seed(42)                                       # Set fixed seed
    yield                                                    # Run test
    np.random.seed(None)                                     # Reset after test

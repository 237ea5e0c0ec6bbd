"""
Pytest Configuration
====================

Puts src/ on sys.path so hex_torus imports without installation, and
provides the shared fixtures:
    rng       - seeded numpy Generator (seed 42)
    tp        - random toroidal coordinates spanning a bit more than one tile

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import numpy as np
import pytest

SRC_ROOT = Path(__file__).parent
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

SEED = 42


@pytest.fixture
def rng():
    return np.random.default_rng(SEED)


@pytest.fixture
def tp(rng):
    return rng.uniform(-4, 4, (64, 2))

"""
hex_torus Source Tree
=====================

Modules:
    hex_torus - Hexagonal tile -> cylinder -> torus morph engine
    tests     - Test suite

Requirements:
    Python >= 3.9
    numpy >= 1.20
    scipy >= 1.11
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"hex_torus requires Python >= 3.9, got {sys.version}")

# scipy version check (QhullError is imported from scipy.spatial)
import scipy
_scipy_version = tuple(int(p) for p in scipy.__version__.split('.')[:2] if p.isdigit())
if _scipy_version < (1, 11):
    raise ImportError(f"hex_torus requires scipy >= 1.11, got {scipy.__version__}")

# numpy version check
import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"hex_torus requires numpy >= 1.20, got {np.__version__}")

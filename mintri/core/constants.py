"""Central numerical tolerances for the enclosing-triangle sweep.

Every almost-equal comparison in the package defaults to ``EPSILON`` so the
tolerance can be tuned in one place (or per call via the config object).
"""
from __future__ import annotations

# Relative tolerance: |x - y| <= EPSILON * max(1, |x|, |y|)
EPSILON: float = 1e-5

# Unique hull vertices above which the 'auto' hull method switches to qhull
QHULL_MIN_POINTS: int = 256

# Loop guard: inner sweep loops stop after MAX_SWEEP_FACTOR * n advances per flush index
MAX_SWEEP_FACTOR: int = 2

# Bounding-box extent the hull is scaled to before a normalized sweep
NORMALIZED_EXTENT: float = 1000.0

__all__ = [
    'EPSILON',
    'QHULL_MIN_POINTS',
    'MAX_SWEEP_FACTOR',
    'NORMALIZED_EXTENT',
]

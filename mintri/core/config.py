"""Configuration object for the minimum enclosing triangle computation."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .constants import EPSILON, MAX_SWEEP_FACTOR

_HULL_METHODS = ('auto', 'monotone', 'qhull')


@dataclass(frozen=True)
class EnclosingTriangleConfig:
    """Tunable knobs of the rotating-support sweep.

    Attributes
    ----------
    epsilon : float
        Relative tolerance used by every almost-equal comparison.
    normalize : bool
        Sweep a translated copy of the hull scaled to NORMALIZED_EXTENT and map the result
        back. With ``False`` the raw coordinates are swept.
    merge_close_vertices : bool
        Drop hull vertices that are epsilon-equal to their predecessor.
    hull_method : str
        'auto', 'monotone' or 'qhull'; see ``convex_hull``.
    max_sweep_factor : int
        Inner advance loops stop after ``max_sweep_factor * n`` steps per
        flush index.
    """
    epsilon: float = EPSILON
    normalize: bool = True
    merge_close_vertices: bool = True
    hull_method: str = 'auto'
    max_sweep_factor: int = MAX_SWEEP_FACTOR

    def __post_init__(self):
        if not (self.epsilon > 0.0):
            raise ValueError(f"epsilon must be positive, got {self.epsilon!r}")
        if self.hull_method not in _HULL_METHODS:
            raise ValueError(f"unknown hull_method '{self.hull_method}'")
        if self.max_sweep_factor < 1:
            raise ValueError(f"max_sweep_factor must be >= 1, got {self.max_sweep_factor!r}")

    @classmethod
    def resolve(cls, config: Optional['EnclosingTriangleConfig'] = None,
                epsilon: Optional[float] = None) -> 'EnclosingTriangleConfig':
        cfg = config if config is not None else cls()
        if epsilon is not None:
            cfg = replace(cfg, epsilon=float(epsilon))
        return cfg


__all__ = ['EnclosingTriangleConfig']

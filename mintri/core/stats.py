"""Sweep statistics and presentation utilities."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

__all__ = ['SweepStats', 'format_stats_table']


@dataclass
class SweepStats:
    steps: int = 0
    candidates: int = 0
    parallel_rejects: int = 0
    validation_rejects: int = 0
    improvements: int = 0
    side_a_tangent: int = 0
    side_b_tangent: int = 0
    sides_flush: int = 0
    index_advances: int = 0
    loop_bound_hits: int = 0

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out['valid_rate'] = ((self.candidates - self.parallel_rejects - self.validation_rejects) / self.candidates) if self.candidates else 0.0
        out['improvement_rate'] = (self.improvements / self.candidates) if self.candidates else 0.0
        return out


def format_stats_table(stats) -> str:
    """Return a two-column text table for a SweepStats (or its to_dict())."""
    data = stats.to_dict() if isinstance(stats, SweepStats) else dict(stats or {})
    if not data:
        return "<no stats>"
    width = max(len(k) for k in data)
    rows = []
    for key, value in data.items():
        shown = f"{value:8.3f}" if isinstance(value, float) else f"{value:8d}"
        rows.append(f"{key.ljust(width)}  {shown}")
    return "\n".join(rows)

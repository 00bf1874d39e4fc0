"""Cyclic convex polygon used by the sweep.

Wraps a read-only (n, 2) float64 vertex array in counterclockwise order and
absorbs the modular index arithmetic (successor / predecessor / advance) and
the height of a vertex above the current flush side.
"""
from __future__ import annotations

from typing import List

import numpy as np

from .constants import EPSILON
from .geometry import are_equal_points, distance_from_point_to_line, polygon_area

__all__ = ['ConvexPolygon', 'distinct_vertex_indices']


class ConvexPolygon:
    """Convex polygon with cyclic accessors.

    Parameters
    ----------
    points : (n, 2) array-like
        Vertices in counterclockwise order, no repeats.
    eps : float
        Tolerance carried to every predicate evaluated on this polygon.
    """
    __slots__ = ('points', 'n', 'eps')

    def __init__(self, points, eps: float = EPSILON):
        pts = np.array(points, dtype=np.float64).reshape(-1, 2)
        pts.setflags(write=False)
        self.points = pts
        self.n = int(pts.shape[0])
        self.eps = float(eps)

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, index: int) -> np.ndarray:
        return self.points[index % self.n]

    def successor(self, index: int) -> int:
        return (index + 1) % self.n

    def predecessor(self, index: int) -> int:
        return (self.n - 1) if index == 0 else (index - 1)

    # advancing an index is moving it to its successor
    advance = successor

    def height(self, index: int, c: int) -> float:
        """Distance from vertex ``index`` to the line carrying flush side C."""
        return self.height_of_point(self.points[index], c)

    def height_of_point(self, point, c: int) -> float:
        return distance_from_point_to_line(point, self.points[c], self.points[self.predecessor(c)])

    def area(self) -> float:
        return polygon_area(self.points)

    def extent(self) -> float:
        """Longest side of the bounding box."""
        return float(np.max(self.points.max(axis=0) - self.points.min(axis=0)))

    def is_flat(self) -> bool:
        """True when the polygon is collinear up to the tolerance.

        The area of a convex polygon is at least half its width times its
        diameter, so area <= eps * extent**2 bounds the width by about
        2 * eps * extent. Heights that thin are epsilon-equal for the sweep.
        """
        extent = self.extent()
        return self.area() <= self.eps * extent * extent

    def __repr__(self) -> str:
        return f"ConvexPolygon(n={self.n}, eps={self.eps:g})"


def distinct_vertex_indices(points, eps: float = EPSILON) -> List[int]:
    """Indices of the vertices kept after dropping epsilon-equal neighbours.

    A vertex is dropped when it equals the previously kept one; the closing
    vertex is dropped when it equals the first. The first vertex is always kept.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if pts.shape[0] <= 1:
        return list(range(pts.shape[0]))
    kept = [0]
    for i in range(1, pts.shape[0]):
        if not are_equal_points(pts[i], pts[kept[-1]], eps):
            kept.append(i)
    if len(kept) > 1 and are_equal_points(pts[kept[-1]], pts[kept[0]], eps):
        kept.pop()
    return kept

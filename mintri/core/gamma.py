"""Support sides and the gamma construction.

gamma(p) is the point on side A lying at twice the height of vertex p above
flush side C, on the polygon's side of C. If vertex C of the enclosing
triangle sat at gamma(p), p would be the midpoint of the triangle side through
it, which is the midpoint-touch condition of a minimal triangle.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .errors import ERR_VERTEX_C_ON_SIDE_B, InternalInvariantError
from .geometry import (
    are_identical_lines, are_on_the_same_side_of_line, line_equation, line_intersection_coeffs,
)
from .polygon import ConvexPolygon

__all__ = [
    'Side', 'gamma_intersection_points', 'select_interior_candidate', 'gamma',
    'find_vertex_c_on_side_b',
]


@dataclass(frozen=True, eq=False)
class Side:
    """A triangle side given by two points on its supporting line."""
    start: np.ndarray
    end: np.ndarray

    @classmethod
    def from_edge(cls, polygon: ConvexPolygon, index: int) -> 'Side':
        """Side flush with polygon edge (P[index-1], P[index])."""
        return cls(polygon[polygon.predecessor(index)], polygon[index])

    def line_equation(self, eps: float) -> Tuple[float, float, float]:
        return line_equation(self.start, self.end, eps)


def gamma_intersection_points(polygon: ConvexPolygon, c: int, point_index: int,
                              side1_start, side1_end, side2_start, side2_end
                              ) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Intersect side 1 with both lines parallel to side 2 at 2 * height(point_index).

    Side 2 is displaced by +/- 2 * height * ||(a2, b2)|| in its normal form.
    Returns the two candidates (minus offset first), or None when side 1 is
    parallel to side 2. If side 1 coincides with a displaced line its own
    endpoints are returned as the witnesses.
    """
    eps = polygon.eps
    a1, b1, c1 = line_equation(side1_start, side1_end, eps)
    a2, b2, c2 = line_equation(side2_start, side2_end, eps)

    point_height = polygon.height(point_index, c)
    dist_formula_denom = math.sqrt((a2 * a2) + (b2 * b2))
    side_c_extra = 2 * point_height * dist_formula_denom

    first = line_intersection_coeffs(a1, b1, -c1, a2, b2, -c2 - side_c_extra, eps)
    second = line_intersection_coeffs(a1, b1, -c1, a2, b2, -c2 + side_c_extra, eps)
    if first is None or second is None:
        return None
    if (are_identical_lines(a1, b1, -c1, a2, b2, -c2 - side_c_extra, eps)
            or are_identical_lines(a1, b1, -c1, a2, b2, -c2 + side_c_extra, eps)):
        return np.asarray(side1_start, dtype=np.float64), np.asarray(side1_end, dtype=np.float64)
    return first, second


def select_interior_candidate(polygon: ConvexPolygon, c: int,
                              first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """Pick the candidate lying on the same side of flush side C as P[c+1]."""
    if are_on_the_same_side_of_line(first, polygon[polygon.successor(c)],
                                    polygon[c], polygon[polygon.predecessor(c)], polygon.eps):
        return first
    return second


def gamma(polygon: ConvexPolygon, point_index: int, a: int, c: int) -> Optional[np.ndarray]:
    """gamma(P[point_index]) on the side A flush with edge (P[a-1], P[a]); None if undefined."""
    candidates = gamma_intersection_points(
        polygon, c, point_index,
        polygon[a], polygon[polygon.predecessor(a)],
        polygon[c], polygon[polygon.predecessor(c)],
    )
    if candidates is None:
        return None
    return select_interior_candidate(polygon, c, *candidates)


def find_vertex_c_on_side_b(polygon: ConvexPolygon, a: int, c: int,
                            side_b: Side, side_c: Side) -> np.ndarray:
    """Point of side B at height 2 * height(a-1) above side C.

    Used when side A becomes tangent at P[a-1]: the new side A runs from
    P[a-1] to this point. Raises InternalInvariantError when side B is
    parallel to side C.
    """
    candidates = gamma_intersection_points(
        polygon, c, polygon.predecessor(a),
        side_b.start, side_b.end, side_c.start, side_c.end,
    )
    if candidates is None:
        raise InternalInvariantError(ERR_VERTEX_C_ON_SIDE_B)
    return select_interior_candidate(polygon, c, *candidates)

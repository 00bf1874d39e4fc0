"""Input coercion and convex hull reduction.

``convex_hull`` produces the counterclockwise polygon consumed by the sweep:
distinct vertices, collinear points removed, starting at the lexicographically
smallest (x, then y) vertex. Small inputs use Andrew's monotone chain; large
ones go through scipy's qhull, falling back to the monotone chain for the
degenerate (collinear) inputs qhull refuses.
"""
from __future__ import annotations

from typing import List

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .constants import QHULL_MIN_POINTS
from .errors import InvalidInputError
from .logging_utils import get_logger

logger = get_logger('mintri.hull')

__all__ = ['as_points_array', 'convex_hull']


def as_points_array(points) -> np.ndarray:
    """Coerce ``points`` to a float64 (N, 2) array.

    Accepts sequences of pairs, (N, 2) arrays and contour-shaped (N, 1, 2)
    arrays of integer or float dtype.
    """
    try:
        pts = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"points must be numeric (x, y) pairs: {exc}") from exc
    if pts.size == 0:
        raise InvalidInputError("point set is empty")
    if pts.ndim == 3 and pts.shape[1] == 1:
        pts = pts.reshape(-1, pts.shape[2])
    elif pts.ndim == 1 and pts.shape[0] == 2:
        pts = pts.reshape(1, 2)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidInputError(f"points must be (N, 2) or (N, 1, 2), got shape {np.shape(points)}")
    if not np.all(np.isfinite(pts)):
        raise InvalidInputError("point coordinates must be finite (NaN/Inf found)")
    return pts


def _cross(o, a, b) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _unique_sorted_indices(pts: np.ndarray) -> np.ndarray:
    """Indices of distinct points sorted by x, then y (first occurrence wins)."""
    order = np.lexsort((pts[:, 1], pts[:, 0]))
    if order.size <= 1:
        return order
    sorted_pts = pts[order]
    fresh = np.ones(order.size, dtype=bool)
    fresh[1:] = np.any(sorted_pts[1:] != sorted_pts[:-1], axis=1)
    return order[fresh]


def _monotone_chain(pts: np.ndarray, order: np.ndarray) -> List[int]:
    if order.size <= 2:
        return [int(i) for i in order]
    lower: List[int] = []
    for i in order:
        while len(lower) >= 2 and _cross(pts[lower[-2]], pts[lower[-1]], pts[i]) <= 0:
            lower.pop()
        lower.append(int(i))
    upper: List[int] = []
    for i in order[::-1]:
        while len(upper) >= 2 and _cross(pts[upper[-2]], pts[upper[-1]], pts[i]) <= 0:
            upper.pop()
        upper.append(int(i))
    # Last point of each chain is the first point of the other
    return lower[:-1] + upper[:-1]


def _qhull(pts: np.ndarray, order: np.ndarray) -> List[int]:
    hull = ConvexHull(pts[order])
    # 2-D qhull vertices are already counterclockwise
    vertices = [int(order[v]) for v in hull.vertices]
    start = min(range(len(vertices)), key=lambda k: (pts[vertices[k]][0], pts[vertices[k]][1]))
    return vertices[start:] + vertices[:start]


def convex_hull(points, clockwise: bool = False, return_points: bool = True, method: str = 'auto'):
    """Convex hull of a 2-D point set.

    Parameters
    ----------
    points : array-like
        See ``as_points_array``.
    clockwise : bool
        Return the hull clockwise instead of counterclockwise.
    return_points : bool
        Return an (h, 2) float64 array of vertices; otherwise an int array of
        indices into ``points``.
    method : {'auto', 'monotone', 'qhull'}

    Returns
    -------
    ndarray
        One vertex for a single distinct point, two for collinear inputs.
    """
    if method not in ('auto', 'monotone', 'qhull'):
        raise ValueError(f"unknown hull method '{method}'")
    pts = as_points_array(points)
    order = _unique_sorted_indices(pts)
    use_qhull = method == 'qhull' or (method == 'auto' and order.size > QHULL_MIN_POINTS)
    indices = None
    if use_qhull and order.size >= 3:
        try:
            indices = _qhull(pts, order)
        except QhullError as exc:
            logger.debug("qhull rejected %d points (%s); using monotone chain", order.size, exc)
    if indices is None:
        indices = _monotone_chain(pts, order)
    if clockwise and len(indices) > 2:
        indices = indices[:1] + indices[:0:-1]
    idx = np.asarray(indices, dtype=np.intp)
    if return_points:
        return pts[idx].copy()
    return idx

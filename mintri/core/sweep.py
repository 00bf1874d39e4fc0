"""Rotating-support sweep for the minimum-area enclosing triangle.

Implements the O(n) algorithm of O'Rourke, Aggarwal, Maddila and Baldwin
(1986), a refinement of Klee and Laskowski (1985). For every flush index c
the side C lies on polygon edge (P[c-1], P[c]); the indices a and b are
advanced around the polygon until sides A and B are flush or tangent, a
candidate triangle is built from the three sides and kept if its side
midpoints touch the polygon and its area beats the best so far. Indices only
move forward, so the whole sweep costs O(n).

Example
-------
    from mintri import min_enclosing_triangle
    triangle, area = min_enclosing_triangle([(0, 0), (1, 0), (1, 1), (0, 1)])
    # area == 2.0
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple

import numpy as np

from .classifier import intersects_above, intersects_below
from .config import EnclosingTriangleConfig
from .constants import MAX_SWEEP_FACTOR, NORMALIZED_EXTENT
from .errors import ERR_SIDE_B_GAMMA, InternalInvariantError
from .gamma import Side, find_vertex_c_on_side_b, gamma
from .geometry import (
    are_equal_points, greater_or_equal, is_point_on_segment, line_intersection, middle_point,
    triangle_area,
)
from .hull import convex_hull
from .logging_utils import get_logger
from .polygon import ConvexPolygon, distinct_vertex_indices
from .stats import SweepStats

logger = get_logger('mintri.sweep')

__all__ = [
    'ValidationFlag', 'SweepState', 'RotatingSweep', 'EnclosingTriangleResult',
    'find_min_enclosing_triangle', 'min_enclosing_triangle',
]


class ValidationFlag(Enum):
    """Which tangent/flush configuration produced the current candidate."""
    SIDE_A_TANGENT = 0
    SIDE_B_TANGENT = 1
    SIDES_FLUSH = 2


@dataclass
class SweepState:
    a: int = 1
    b: int = 2
    c: int = 0
    validation_flag: Optional[ValidationFlag] = None
    side_a: Optional[Side] = None
    side_b: Optional[Side] = None
    side_c: Optional[Side] = None


@dataclass
class EnclosingTriangleResult:
    """Outcome of ``find_min_enclosing_triangle``.

    Attributes
    ----------
    triangle : (3, 2) float64 array
        Vertices A, B, C (A opposite side A, and so on). For hulls of at most
        three vertices this is the hull itself, repeated cyclically; for a
        hull collinear within tolerance it is its spanning segment.
    area : float
    polygon : (h, 2) float64 array
        The counterclockwise hull that was swept, in input coordinates.
    stats : SweepStats
    degenerate : bool
        True when the small-input or flat-hull short-circuit produced the result.
    """
    triangle: np.ndarray
    area: float
    polygon: np.ndarray
    stats: SweepStats = field(default_factory=SweepStats)
    degenerate: bool = False


class RotatingSweep:
    """Three-pointer sweep over a counterclockwise convex polygon with n > 3."""

    def __init__(self, polygon: ConvexPolygon, max_sweep_factor: int = MAX_SWEEP_FACTOR):
        self.polygon = polygon
        self.state = SweepState()
        self.stats = SweepStats()
        self.best_triangle: Optional[np.ndarray] = None
        self.best_area: float = math.inf
        self._loop_bound = max_sweep_factor * polygon.n

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------
    def run(self) -> Tuple[Optional[np.ndarray], float]:
        P, s = self.polygon, self.state
        for c in range(P.n):
            s.c = c
            self.stats.steps += 1
            self.advance_b_to_right_chain()
            self.move_a_if_low_and_b_if_high()
            self.search_for_b_tangency()
            self.update_sides_ca()
            if self.is_not_b_tangency():
                self.update_sides_ba()
            else:
                self.update_side_b()
            candidate = self.local_minimal_triangle()
            if candidate is not None:
                self.update_minimum(*candidate)
        logger.debug("swept %d-gon: %d candidates, %d improvements, best area %.6g",
                     P.n, self.stats.candidates, self.stats.improvements, self.best_area)
        return self.best_triangle, self.best_area

    def _repeat(self, name: str, condition: Callable[[], bool], step: Callable[[], None]) -> None:
        steps = 0
        while condition():
            if steps >= self._loop_bound:
                self.stats.loop_bound_hits += 1
                logger.warning("%s did not settle within %d steps at c=%d", name, self._loop_bound, self.state.c)
                return
            step()
            steps += 1

    def _advance_a(self) -> None:
        self.state.a = self.polygon.advance(self.state.a)
        self.stats.index_advances += 1

    def _advance_b(self) -> None:
        self.state.b = self.polygon.advance(self.state.b)
        self.stats.index_advances += 1

    # ------------------------------------------------------------------
    # Index movement
    # ------------------------------------------------------------------
    def advance_b_to_right_chain(self) -> None:
        """Move b while the next vertex is at least as high above side C."""
        P, s = self.polygon, self.state
        self._repeat(
            'advance_b_to_right_chain',
            lambda: greater_or_equal(P.height(P.successor(s.b), s.c), P.height(s.b, s.c), P.eps),
            self._advance_b,
        )

    def move_a_if_low_and_b_if_high(self) -> None:
        """While b is higher than a: move b if the gamma(a) line cuts below b, else move a."""
        P, s = self.polygon, self.state

        def step():
            gamma_of_a = gamma(P, s.a, s.a, s.c)
            if gamma_of_a is not None and intersects_below(P, gamma_of_a, s.b, s.c):
                self._advance_b()
            else:
                self._advance_a()

        self._repeat('move_a_if_low_and_b_if_high',
                     lambda: P.height(s.b, s.c) > P.height(s.a, s.c), step)

    def search_for_b_tangency(self) -> None:
        P, s = self.polygon, self.state

        def condition():
            gamma_of_b = gamma(P, s.b, s.a, s.c)
            return (gamma_of_b is not None
                    and intersects_below(P, gamma_of_b, s.b, s.c)
                    and greater_or_equal(P.height(s.b, s.c), P.height(P.predecessor(s.a), s.c), P.eps))

        self._repeat('search_for_b_tangency', condition, self._advance_b)

    def is_not_b_tangency(self) -> bool:
        P, s = self.polygon, self.state
        gamma_of_b = gamma(P, s.b, s.a, s.c)
        if gamma_of_b is not None and intersects_above(P, gamma_of_b, s.b, s.c):
            return True
        return P.height(s.b, s.c) < P.height(P.predecessor(s.a), s.c)

    # ------------------------------------------------------------------
    # Sides
    # ------------------------------------------------------------------
    def update_sides_ca(self) -> None:
        s = self.state
        s.side_c = Side.from_edge(self.polygon, s.c)
        s.side_a = Side.from_edge(self.polygon, s.a)

    def update_sides_ba(self) -> None:
        """Side B flush with (P[b-1], P[b]); side A turns tangent at P[a-1] if B's midpoint is too low."""
        P, s = self.polygon, self.state
        s.side_b = Side.from_edge(P, s.b)
        mid_b = self.middle_point_of_side_b()
        a_pred = P.predecessor(s.a)
        if mid_b is not None and P.height_of_point(mid_b, s.c) < P.height(a_pred, s.c):
            vertex_c = find_vertex_c_on_side_b(P, s.a, s.c, s.side_b, s.side_c)
            s.side_a = Side(P[a_pred], vertex_c)
            s.validation_flag = ValidationFlag.SIDE_A_TANGENT
        else:
            s.validation_flag = ValidationFlag.SIDES_FLUSH

    def update_side_b(self) -> None:
        """Side B tangent at P[b], passing through gamma(b)."""
        P, s = self.polygon, self.state
        gamma_of_b = gamma(P, s.b, s.a, s.c)
        if gamma_of_b is None:
            raise InternalInvariantError(ERR_SIDE_B_GAMMA)
        s.side_b = Side(gamma_of_b, P[s.b])
        s.validation_flag = ValidationFlag.SIDE_B_TANGENT

    def middle_point_of_side_b(self) -> Optional[np.ndarray]:
        s, eps = self.state, self.polygon.eps
        vertex_a = line_intersection(s.side_b.start, s.side_b.end, s.side_c.start, s.side_c.end, eps)
        vertex_c = line_intersection(s.side_b.start, s.side_b.end, s.side_a.start, s.side_a.end, eps)
        if vertex_a is None or vertex_c is None:
            return None
        return middle_point(vertex_a, vertex_c)

    # ------------------------------------------------------------------
    # Candidates
    # ------------------------------------------------------------------
    def local_minimal_triangle(self) -> Optional[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
        """Vertices (A, B, C) of the current candidate, or None if rejected."""
        s, eps = self.state, self.polygon.eps
        self.stats.candidates += 1
        if s.validation_flag is ValidationFlag.SIDE_A_TANGENT:
            self.stats.side_a_tangent += 1
        elif s.validation_flag is ValidationFlag.SIDE_B_TANGENT:
            self.stats.side_b_tangent += 1
        else:
            self.stats.sides_flush += 1

        vertex_c = line_intersection(s.side_a.start, s.side_a.end, s.side_b.start, s.side_b.end, eps)
        vertex_b = line_intersection(s.side_a.start, s.side_a.end, s.side_c.start, s.side_c.end, eps)
        vertex_a = line_intersection(s.side_b.start, s.side_b.end, s.side_c.start, s.side_c.end, eps)
        if vertex_a is None or vertex_b is None or vertex_c is None:
            self.stats.parallel_rejects += 1
            return None
        if not self.is_valid_minimal_triangle(vertex_a, vertex_b, vertex_c):
            self.stats.validation_rejects += 1
            return None
        return vertex_a, vertex_b, vertex_c

    def is_valid_minimal_triangle(self, vertex_a, vertex_b, vertex_c) -> bool:
        """Midpoint-touch test for the three sides, according to the validation flag.

        A tangent side must have its midpoint on the touching vertex; a flush
        side must have it on the polygon edge. Side C is not checked when all
        sides are flush.
        """
        P, s = self.polygon, self.state
        eps = P.eps
        midpoint_a = middle_point(vertex_b, vertex_c)
        midpoint_b = middle_point(vertex_a, vertex_c)
        midpoint_c = middle_point(vertex_a, vertex_b)

        if s.validation_flag is ValidationFlag.SIDE_A_TANGENT:
            side_a_valid = are_equal_points(midpoint_a, P[P.predecessor(s.a)], eps)
        else:
            side_a_valid = is_point_on_segment(midpoint_a, s.side_a.start, s.side_a.end, eps)

        if s.validation_flag is ValidationFlag.SIDE_B_TANGENT:
            side_b_valid = are_equal_points(midpoint_b, P[s.b], eps)
        else:
            side_b_valid = is_point_on_segment(midpoint_b, s.side_b.start, s.side_b.end, eps)

        side_c_valid = (s.validation_flag is ValidationFlag.SIDES_FLUSH
                        or is_point_on_segment(midpoint_c, s.side_c.start, s.side_c.end, eps))
        return side_a_valid and side_b_valid and side_c_valid

    def update_minimum(self, vertex_a, vertex_b, vertex_c) -> None:
        area = triangle_area(vertex_a, vertex_b, vertex_c)
        if area < self.best_area:
            self.best_triangle = np.vstack([vertex_a, vertex_b, vertex_c]).astype(np.float64)
            self.best_area = area
            self.stats.improvements += 1
            logger.debug("c=%d a=%d b=%d flag=%s: new best area %.6g",
                         self.state.c, self.state.a, self.state.b,
                         self.state.validation_flag.name, area)


def _small_polygon_triangle(hull: np.ndarray) -> Tuple[np.ndarray, float]:
    """The hull itself (repeated cyclically) when it has at most three vertices."""
    n = hull.shape[0]
    triangle = np.vstack([hull[i % n] for i in range(3)]).astype(np.float64)
    return triangle, triangle_area(triangle[0], triangle[1], triangle[2])


def _segment_triangle(hull: np.ndarray) -> np.ndarray:
    """Zero-area triangle spanning the extreme hull vertices along the longer bounding-box axis."""
    k = int(np.argmax(hull.max(axis=0) - hull.min(axis=0)))
    p = hull[int(np.argmin(hull[:, k]))]
    q = hull[int(np.argmax(hull[:, k]))]
    return np.vstack([p, q, p]).astype(np.float64)


def _normalization(hull: np.ndarray, cfg: EnclosingTriangleConfig) -> Tuple[np.ndarray, float]:
    """Offset and scale mapping the hull's bounding box to [0, NORMALIZED_EXTENT]."""
    if not cfg.normalize:
        return np.zeros(2, dtype=np.float64), 1.0
    offset = hull.min(axis=0)
    extent = float(np.max(hull.max(axis=0) - offset))
    if extent == 0.0:
        return offset, 1.0
    return offset, NORMALIZED_EXTENT / extent


def find_min_enclosing_triangle(points, config: Optional[EnclosingTriangleConfig] = None
                                ) -> EnclosingTriangleResult:
    """Minimum-area triangle enclosing ``points``, with the swept hull and statistics.

    A hull whose area is at most ``epsilon * extent**2`` in swept coordinates
    is treated as collinear: its heights are epsilon-equal, so the sweep
    cannot rank them. Such input collapses to the segment between its extreme
    points (``degenerate=True``, area 0). Noisy near-collinear input that is
    thicker than that but still close to the tolerance can leave every
    candidate invalid and raise ``InternalInvariantError``.

    Raises
    ------
    InvalidInputError
        Empty input, wrong shape or non-finite coordinates.
    InternalInvariantError
        The sweep met geometry a convex polygon cannot produce.
    """
    cfg = EnclosingTriangleConfig.resolve(config)
    hull = convex_hull(points, method=cfg.hull_method)
    offset, scale = _normalization(hull, cfg)
    swept = (hull - offset) * scale
    if cfg.merge_close_vertices:
        kept = distinct_vertex_indices(swept, cfg.epsilon)
        hull, swept = hull[kept], swept[kept]

    if hull.shape[0] <= 3:
        triangle, area = _small_polygon_triangle(hull)
        return EnclosingTriangleResult(triangle, area, hull, SweepStats(), degenerate=True)

    polygon = ConvexPolygon(swept, cfg.epsilon)
    if polygon.is_flat():
        logger.debug("%d-gon is collinear within tolerance; returning its spanning segment", hull.shape[0])
        triangle = _segment_triangle(hull)
        return EnclosingTriangleResult(triangle, 0.0, hull, SweepStats(), degenerate=True)

    sweep = RotatingSweep(polygon, max_sweep_factor=cfg.max_sweep_factor)
    best, _ = sweep.run()
    if best is None:
        raise InternalInvariantError(f"no locally minimal triangle found for a {hull.shape[0]}-gon")
    triangle = best / scale + offset
    area = triangle_area(triangle[0], triangle[1], triangle[2])
    return EnclosingTriangleResult(triangle, area, hull, sweep.stats, degenerate=False)


def min_enclosing_triangle(points, *, epsilon: Optional[float] = None,
                           config: Optional[EnclosingTriangleConfig] = None) -> Tuple[np.ndarray, float]:
    """Return ``(triangle, area)`` of the minimum-area triangle enclosing ``points``.

    ``triangle`` is a (3, 2) float64 array; ``area`` is 0 iff the points are
    collinear (or coincide). ``epsilon`` overrides the tolerance of ``config``.
    """
    result = find_min_enclosing_triangle(points, EnclosingTriangleConfig.resolve(config, epsilon))
    return result.triangle, result.area

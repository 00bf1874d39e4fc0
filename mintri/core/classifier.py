"""Where a line through a polygon vertex cuts the polygon, relative to side C."""
from __future__ import annotations

from enum import Enum

from .angles import is_angle_between_non_reflex, normalize_flush_angle
from .geometry import almost_equal, angle_of_line
from .polygon import ConvexPolygon

__all__ = ['Intersection', 'intersects', 'intersects_above_or_below', 'intersects_below', 'intersects_above']


class Intersection(Enum):
    BELOW = 'below'
    ABOVE = 'above'
    CRITICAL = 'critical'


def intersects_above_or_below(polygon: ConvexPolygon, neighbour_index: int, point_index: int,
                              c: int) -> Intersection:
    """ABOVE when the neighbour the line cuts towards is higher than the vertex itself."""
    if polygon.height(neighbour_index, c) > polygon.height(point_index, c):
        return Intersection.ABOVE
    return Intersection.BELOW


def intersects(polygon: ConvexPolygon, angle_line: float, point_index: int, c: int) -> Intersection:
    """Classify the line through P[point_index] with direction ``angle_line``.

    Angles of the edges are taken pointing into the vertex (pred->P[i] and
    succ->P[i]). When the flush direction (or its opposite) falls between
    them, the line is classified by the edge it cuts on its way to the
    flush direction; otherwise the line cuts below whenever it points into
    the arc between the two edges.
    """
    eps = polygon.eps
    pred = polygon.predecessor(point_index)
    succ = polygon.successor(point_index)
    angle_pred = angle_of_line(polygon[pred], polygon[point_index])
    angle_succ = angle_of_line(polygon[succ], polygon[point_index])
    angle_flush = angle_of_line(polygon[polygon.predecessor(c)], polygon[c])

    facing_flush = normalize_flush_angle(angle_flush, angle_pred, angle_succ, eps)
    if facing_flush is not None:
        if (is_angle_between_non_reflex(angle_line, angle_pred, facing_flush, eps)
                or almost_equal(angle_line, angle_pred, eps)):
            return intersects_above_or_below(polygon, pred, point_index, c)
        if (is_angle_between_non_reflex(angle_line, angle_succ, facing_flush, eps)
                or almost_equal(angle_line, angle_succ, eps)):
            return intersects_above_or_below(polygon, succ, point_index, c)
    elif (is_angle_between_non_reflex(angle_line, angle_pred, angle_succ, eps)
            or (almost_equal(angle_line, angle_pred, eps) and not almost_equal(angle_line, angle_flush, eps))
            or (almost_equal(angle_line, angle_succ, eps) and not almost_equal(angle_line, angle_flush, eps))):
        return Intersection.BELOW
    return Intersection.CRITICAL


def intersects_below(polygon: ConvexPolygon, gamma_point, point_index: int, c: int) -> bool:
    """Does the line (P[point_index] -> gamma) cut the polygon below the vertex?"""
    angle = angle_of_line(polygon[point_index], gamma_point)
    return intersects(polygon, angle, point_index, c) is Intersection.BELOW


def intersects_above(polygon: ConvexPolygon, gamma_point, point_index: int, c: int) -> bool:
    """Does the line (gamma -> P[point_index]) cut the polygon above the vertex?"""
    angle = angle_of_line(gamma_point, polygon[point_index])
    return intersects(polygon, angle, point_index, c) is Intersection.ABOVE

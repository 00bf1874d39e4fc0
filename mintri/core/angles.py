"""Angular predicates on directions expressed in degrees.

Angles come from ``geometry.angle_of_line`` and therefore lie in [0, 360];
360 can appear through ``opposite_angle`` (180 maps to 360, not 0) and is
kept as-is.
"""
from __future__ import annotations

import math
from typing import Optional

from .constants import EPSILON
from .geometry import less_or_equal

__all__ = [
    'opposite_angle', 'is_angle_between', 'is_angle_between_non_reflex',
    'is_opposite_angle_between_non_reflex', 'normalize_flush_angle',
]


def opposite_angle(angle: float) -> float:
    return (angle - 180.0) if angle > 180.0 else (angle + 180.0)


def is_angle_between(angle1: float, angle2: float, angle3: float) -> bool:
    """Open-interval test of angle1 between angle2 and angle3 (no wrap-around).

    The arc direction is chosen from the integer part of (angle2 - angle3)
    modulo 180, truncated toward zero; sub-degree differences therefore pick
    the (angle2, angle3) ordering.
    """
    if math.fmod(math.trunc(angle2 - angle3), 180) > 0:
        return (angle3 < angle1) and (angle1 < angle2)
    return (angle2 < angle1) and (angle1 < angle3)


def is_angle_between_non_reflex(angle1: float, angle2: float, angle3: float,
                                eps: float = EPSILON) -> bool:
    """True if angle1 lies strictly inside the non-reflex arc bounded by angle2 and angle3."""
    if abs(angle2 - angle3) > 180.0:
        # The non-reflex arc crosses the 0/360 seam
        high, low = (angle2, angle3) if angle2 > angle3 else (angle3, angle2)
        return (((high < angle1) and less_or_equal(angle1, 360.0, eps))
                or (less_or_equal(0.0, angle1, eps) and (angle1 < low)))
    return is_angle_between(angle1, angle2, angle3)


def is_opposite_angle_between_non_reflex(angle1: float, angle2: float, angle3: float,
                                         eps: float = EPSILON) -> bool:
    return is_angle_between_non_reflex(opposite_angle(angle1), angle2, angle3, eps)


def normalize_flush_angle(angle_flush: float, angle_pred: float, angle_succ: float,
                          eps: float = EPSILON) -> Optional[float]:
    """Return the flush-edge direction facing the vertex, or None.

    If the flush angle lies in the non-reflex arc between the predecessor and
    successor angles it is returned unchanged; if its opposite does, the
    opposite is returned. Otherwise the line parallel to the flush edge does
    not cut the polygon at that vertex and None is returned.
    """
    if is_angle_between_non_reflex(angle_flush, angle_pred, angle_succ, eps):
        return angle_flush
    if is_opposite_angle_between_non_reflex(angle_flush, angle_pred, angle_succ, eps):
        return opposite_angle(angle_flush)
    return None

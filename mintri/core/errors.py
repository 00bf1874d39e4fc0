"""Exception types raised by the enclosing-triangle core."""
from __future__ import annotations

ERR_SIDE_B_GAMMA = "side B gamma undefined"
ERR_VERTEX_C_ON_SIDE_B = "vertex C on side B undefined"


class InvalidInputError(ValueError):
    """Point set rejected before the sweep runs (empty, wrong shape, NaN/Inf)."""


class InternalInvariantError(RuntimeError):
    """Geometry that cannot occur on a valid counterclockwise convex polygon.

    Raised when gamma(b) is undefined at the B-tangent branch or when vertex C
    cannot be placed on side B. Not recoverable.
    """


__all__ = [
    'InvalidInputError', 'InternalInvariantError',
    'ERR_SIDE_B_GAMMA', 'ERR_VERTEX_C_ON_SIDE_B',
]

"""Geometry primitives with fixed-epsilon comparisons.

Points are any indexable (x, y) pair; constructed points are returned as
float64 numpy arrays of shape (2,). Line coefficients use two conventions:

- ``line_equation`` returns (a, b, c) with a*x + b*y + c = 0
- the ``*_coeffs`` helpers take (A, B, C) with A*x + B*y = C
"""
from __future__ import annotations
import math
from typing import Optional, Tuple

import numpy as np

from .constants import EPSILON

__all__ = [
	'almost_equal','greater_or_equal','less_or_equal','sign','are_equal_points',
	'middle_point','distance','distance_from_point_to_line','triangle_area','polygon_area',
	'line_equation','line_intersection_coeffs','line_intersection',
	'are_identical_lines','are_on_the_same_side_of_line','is_point_on_segment',
	'angle_of_line',
]

# ============================================================================
# SCALAR COMPARISONS
# ============================================================================

def almost_equal(x, y, eps=EPSILON):
	"""|x - y| <= eps * max(1, |x|, |y|)."""
	return abs(x - y) <= eps * max(1.0, abs(x), abs(y))

def greater_or_equal(x, y, eps=EPSILON):
	return (x > y) or almost_equal(x, y, eps)

def less_or_equal(x, y, eps=EPSILON):
	return (x < y) or almost_equal(x, y, eps)

def sign(value):
	return 1 if value > 0 else (-1 if value < 0 else 0)

def are_equal_points(p, q, eps=EPSILON):
	return almost_equal(p[0], q[0], eps) and almost_equal(p[1], q[1], eps)

# ============================================================================
# POINTS AND DISTANCES
# ============================================================================

def middle_point(a, b):
	return np.array([(a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0], dtype=np.float64)

def distance(a, b):
	dx = a[0] - b[0]
	dy = a[1] - b[1]
	return math.sqrt((dx * dx) + (dy * dy))

def distance_from_point_to_line(p, line_b, line_c):
	"""Distance from point p to the line through line_b and line_c.

	          |(xc - xb) * (yb - yp) - (xb - xp) * (yc - yb)|
	      d = -----------------------------------------------
	                sqrt((xc - xb)^2 + (yc - yb)^2)

	Returns 0 when the two line points coincide exactly.
	"""
	term1 = line_c[0] - line_b[0]
	term2 = line_b[1] - p[1]
	term3 = line_b[0] - p[0]
	term4 = line_c[1] - line_b[1]
	numerator = abs((term1 * term2) - (term3 * term4))
	denominator = math.sqrt((term1 * term1) + (term4 * term4))
	return (numerator / denominator) if denominator != 0 else 0.0

def triangle_area(a, b, c):
	"""Unsigned area from the expanded determinant."""
	pos_term = (a[0] * b[1]) + (a[1] * c[0]) + (b[0] * c[1])
	neg_term = (b[1] * c[0]) + (a[0] * c[1]) + (a[1] * b[0])
	return abs(pos_term - neg_term) / 2.0

def polygon_area(points):
	"""Shoelace area of a simple polygon (unsigned); 0 for fewer than three vertices."""
	pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
	if pts.shape[0] < 3:
		return 0.0
	x = pts[:, 0]; y = pts[:, 1]
	return 0.5 * float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))

# ============================================================================
# LINES
# ============================================================================

def line_equation(p, q, eps=EPSILON) -> Tuple[float, float, float]:
	"""Return (a, b, c) with a*x + b*y + c = 0 for the line through p and q.

	a = q.y - p.y, b = p.x - q.x, c = -p.x*a - p.y*b
	"""
	if are_equal_points(p, q, eps):
		raise ValueError(f"line through coincident points {tuple(p)} and {tuple(q)} is undefined")
	a = q[1] - p[1]
	b = p[0] - q[0]
	c = ((-p[1]) * b) - (p[0] * a)
	return float(a), float(b), float(c)

def line_intersection_coeffs(a1, b1, c1, a2, b2, c2, eps=EPSILON) -> Optional[np.ndarray]:
	"""Intersect A1*x + B1*y = C1 with A2*x + B2*y = C2.

	Returns None when the determinant is almost zero (parallel or coincident
	lines); callers decide coincidence with ``are_identical_lines``.
	"""
	det = (a1 * b2) - (a2 * b1)
	if almost_equal(det, 0.0, eps):
		return None
	x = ((c1 * b2) - (c2 * b1)) / det
	y = ((c2 * a1) - (c1 * a2)) / det
	return np.array([x, y], dtype=np.float64)

def line_intersection(p1, q1, p2, q2, eps=EPSILON) -> Optional[np.ndarray]:
	"""Intersect the line through p1, q1 with the line through p2, q2."""
	a1 = q1[1] - p1[1]
	b1 = p1[0] - q1[0]
	c1 = (p1[0] * a1) + (p1[1] * b1)
	a2 = q2[1] - p2[1]
	b2 = p2[0] - q2[0]
	c2 = (p2[0] * a2) + (p2[1] * b2)
	return line_intersection_coeffs(a1, b1, c1, a2, b2, c2, eps)

def are_identical_lines(a1, b1, c1, a2, b2, c2, eps=EPSILON):
	"""True when the coefficient triples are proportional (same line)."""
	return (almost_equal(a1 * b2, a2 * b1, eps)
			and almost_equal(b1 * c2, b2 * c1, eps)
			and almost_equal(a1 * c2, a2 * c1, eps))

def are_on_the_same_side_of_line(p1, p2, a, b, eps=EPSILON):
	"""True when p1 and p2 lie on the same side of the line through a and b.

	A point on the line has sign 0 and only matches another point on the line.
	"""
	la, lb, lc = line_equation(a, b, eps)
	p1_on_line = (la * p1[0]) + (lb * p1[1]) + lc
	p2_on_line = (la * p2[0]) + (lb * p2[1]) + lc
	return sign(p1_on_line) == sign(p2_on_line)

def is_point_on_segment(p, start, end, eps=EPSILON):
	"""|p start| + |p end| ~= |start end|."""
	d1 = distance(p, start)
	d2 = distance(p, end)
	return almost_equal(d1 + d2, distance(start, end), eps)

def angle_of_line(a, b):
	"""Angle of the directed segment a->b w.r.t. the +x axis, degrees in [0, 360)."""
	angle = math.degrees(math.atan2(b[1] - a[1], b[0] - a[0]))
	return (angle + 360.0) if angle < 0 else angle

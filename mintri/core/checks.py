"""Containment, midpoint-touch and support-triangle checks for enclosing triangles."""
from __future__ import annotations
import math
import numpy as np
from .constants import EPSILON
from .geometry import polygon_area
from .hull import as_points_array

__all__ = [
	'polygon_area','side_midpoints','contains_points','count_midpoints_touching',
	'outward_normal_angles','support_triangle'
]

def _triangle_array(triangle):
	tri = np.asarray(triangle, dtype=np.float64)
	if tri.shape != (3, 2):
		raise ValueError(f"triangle must have shape (3, 2), got {tri.shape}")
	return tri

def _signed_area2(tri):
	a, b, c = tri
	return float((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))

def _point_segment_distances(pts, start, end):
	"""Distances from every row of pts to the segment start-end."""
	d = end - start
	dd = float(np.dot(d, d))
	rel = pts - start
	if dd == 0.0:
		return np.hypot(rel[:, 0], rel[:, 1])
	t = np.clip((rel @ d) / dd, 0.0, 1.0)
	proj = start + t[:, None] * d
	diff = pts - proj
	return np.hypot(diff[:, 0], diff[:, 1])

def side_midpoints(triangle):
	"""Midpoints of sides A=(B,C), B=(A,C) and C=(A,B), as a (3, 2) array."""
	a, b, c = _triangle_array(triangle)
	return np.vstack([(b + c) / 2.0, (a + c) / 2.0, (a + b) / 2.0])

def contains_points(triangle, points, tol=None):
	"""True when every point lies inside or on the boundary of the triangle.

	Each point may sit at most ``tol`` outside any edge line; the default is
	EPSILON * max(1, extent) over the triangle and the points. A zero-area
	triangle contains the points within ``tol`` of its edges.
	"""
	tri = _triangle_array(triangle)
	pts = as_points_array(points)
	if tol is None:
		both = np.vstack([tri, pts])
		extent = float(np.max(both.max(axis=0) - both.min(axis=0)))
		tol = EPSILON * max(1.0, extent)
	orient = _signed_area2(tri)
	edges = ((tri[0], tri[1]), (tri[1], tri[2]), (tri[2], tri[0]))
	if orient == 0.0:
		dist = np.min(np.vstack([_point_segment_distances(pts, s, e) for s, e in edges]), axis=0)
		return bool(np.all(dist <= tol))
	sgn = 1.0 if orient > 0 else -1.0
	for start, end in edges:
		d = end - start
		length = math.hypot(d[0], d[1])
		if length == 0.0:
			continue
		cross = d[0] * (pts[:, 1] - start[1]) - d[1] * (pts[:, 0] - start[0])
		# signed distance, positive inside
		if np.any(sgn * cross / length < -tol):
			return False
	return True

def count_midpoints_touching(triangle, polygon, eps=EPSILON):
	"""Number of side midpoints within eps * max(1, side length) of the polygon boundary."""
	tri = _triangle_array(triangle)
	poly = as_points_array(polygon)
	mids = side_midpoints(tri)
	lengths = np.array([
		np.linalg.norm(tri[1] - tri[2]),
		np.linalg.norm(tri[0] - tri[2]),
		np.linalg.norm(tri[0] - tri[1]),
	])
	n = poly.shape[0]
	dist = np.min(np.vstack([
		_point_segment_distances(mids, poly[i], poly[(i + 1) % n]) for i in range(n)
	]), axis=0)
	return int(np.count_nonzero(dist <= eps * np.maximum(1.0, lengths)))

def outward_normal_angles(triangle):
	"""Outward normal angles in [0, 2*pi) of sides A=(B,C), B=(C,A), C=(A,B)."""
	tri = _triangle_array(triangle)
	orient = _signed_area2(tri)
	if orient == 0.0:
		raise ValueError("a degenerate triangle has no outward normals")
	sgn = 1.0 if orient > 0 else -1.0
	angles = []
	for start, end in ((tri[1], tri[2]), (tri[2], tri[0]), (tri[0], tri[1])):
		d = end - start
		# (dy, -dx) points outwards for a counterclockwise triangle
		angles.append(math.atan2(-sgn * d[0], sgn * d[1]) % (2.0 * math.pi))
	return np.array(angles, dtype=np.float64)

def support_triangle(polygon, normal_angles):
	"""Triangle bounded by the polygon's support lines with the given outward normals.

	Side i lies on the line n_i . x = max_p n_i . p. Vertex A is the
	intersection of sides B and C, and so on. The result encloses the
	polygon whenever the three normals are not contained in a half-plane.
	Raises ValueError when two of the normals are parallel.
	"""
	pts = as_points_array(polygon)
	theta = np.asarray(normal_angles, dtype=np.float64).reshape(3)
	normals = np.column_stack([np.cos(theta), np.sin(theta)])
	offsets = np.max(pts @ normals.T, axis=0)
	vertices = []
	for j, k in ((1, 2), (0, 2), (0, 1)):
		try:
			vertices.append(np.linalg.solve(normals[[j, k]], offsets[[j, k]]))
		except np.linalg.LinAlgError as exc:
			raise ValueError(f"support lines {j} and {k} are parallel") from exc
	return np.vstack(vertices)

"""Diagnostic checks used to validate enclosing triangles."""
import math

import numpy as np
import pytest

from mintri.core.checks import (
    contains_points, count_midpoints_touching, outward_normal_angles, polygon_area, side_midpoints,
    support_triangle,
)

TRIANGLE = np.array([[0.0, 0.0], [4.0, 0.0], [0.0, 4.0]])
SQUARE2 = [(0, 0), (2, 0), (2, 2), (0, 2)]


class TestContainment:

    def test_inside_boundary_and_outside(self):
        assert contains_points(TRIANGLE, [(1, 1), (2, 2), (0, 0)])
        assert not contains_points(TRIANGLE, [(1, 1), (3, 3)])

    def test_orientation_does_not_matter(self):
        assert contains_points(TRIANGLE[::-1], [(1, 1), (2, 2)])
        assert not contains_points(TRIANGLE[::-1], [(-0.5, 1)])

    def test_tolerance(self):
        assert not contains_points(TRIANGLE, [(2.01, 2.0)])
        assert contains_points(TRIANGLE, [(2.01, 2.0)], tol=0.01)

    def test_degenerate_triangle(self):
        segment = [(0, 0), (2, 2), (0, 0)]
        assert contains_points(segment, [(1, 1)])
        assert not contains_points(segment, [(1, 0)])

    def test_triangle_shape_checked(self):
        with pytest.raises(ValueError, match="shape"):
            contains_points([(0, 0), (1, 1)], [(0, 0)])


def test_side_midpoints_order():
    mids = side_midpoints(TRIANGLE)
    assert np.allclose(mids, [[2, 2], [0, 2], [2, 0]])


def test_count_midpoints_touching():
    assert count_midpoints_touching(TRIANGLE, SQUARE2) == 3
    # shrink the square away from the hypotenuse
    assert count_midpoints_touching(TRIANGLE, [(0, 0), (2, 0), (1.5, 1.5), (0, 2)]) == 2


def test_outward_normals_of_both_orientations():
    expected = [math.pi / 4, math.pi, 1.5 * math.pi]
    assert np.allclose(outward_normal_angles(TRIANGLE), expected)
    cw = TRIANGLE[[0, 2, 1]]
    # same sides, relabelled: side A is now (C, B)
    assert np.allclose(outward_normal_angles(cw), [math.pi / 4, 1.5 * math.pi, math.pi])


def test_outward_normals_reject_degenerate():
    with pytest.raises(ValueError):
        outward_normal_angles([(0, 0), (1, 1), (2, 2)])


def test_support_triangle_reproduces_touching_triangle():
    tri = support_triangle(SQUARE2, outward_normal_angles(TRIANGLE))
    assert np.allclose(tri, TRIANGLE, atol=1e-12)


def test_support_triangle_parallel_normals():
    with pytest.raises(ValueError, match="parallel"):
        support_triangle(SQUARE2, [0.0, 0.0, math.pi / 2])


def test_polygon_area():
    assert polygon_area(SQUARE2) == pytest.approx(4.0)
    assert polygon_area(SQUARE2[::-1]) == pytest.approx(4.0)
    assert polygon_area([(0, 0), (1, 1)]) == 0.0

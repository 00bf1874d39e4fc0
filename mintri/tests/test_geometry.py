"""Unit tests for the tolerance-aware geometry primitives."""
import math

import numpy as np
import pytest

from mintri.core.constants import EPSILON
from mintri.core.geometry import (
    almost_equal, angle_of_line, are_equal_points, are_identical_lines, are_on_the_same_side_of_line,
    distance_from_point_to_line, greater_or_equal, is_point_on_segment, less_or_equal, line_equation,
    line_intersection, middle_point, triangle_area,
)


class TestComparisons:

    def test_almost_equal_is_relative_above_one(self):
        assert almost_equal(1.0, 1.0 + EPSILON / 2)
        assert not almost_equal(1.0, 1.0 + 2 * EPSILON)
        # 1e6 * EPSILON == 10
        assert almost_equal(1e6, 1e6 + 5.0)
        assert not almost_equal(1e6, 1e6 + 20.0)

    def test_almost_equal_is_absolute_below_one(self):
        assert almost_equal(0.0, EPSILON / 2)
        assert not almost_equal(0.0, 2 * EPSILON)

    def test_greater_and_less_or_equal_absorb_tolerance(self):
        assert greater_or_equal(1.0, 1.0 + EPSILON / 2)
        assert not greater_or_equal(1.0, 1.1)
        assert less_or_equal(1.0 + EPSILON / 2, 1.0)
        assert less_or_equal(0.5, 1.0)

    def test_are_equal_points(self):
        assert are_equal_points((1.0, 2.0), (1.0 + EPSILON / 4, 2.0))
        assert not are_equal_points((1.0, 2.0), (1.0, 2.1))


class TestLines:

    def test_line_equation_coefficients(self):
        a, b, c = line_equation((1.0, 2.0), (3.0, 5.0))
        assert (a, b) == (3.0, -2.0)
        # both points satisfy a*x + b*y + c = 0
        assert a * 1.0 + b * 2.0 + c == pytest.approx(0.0, abs=1e-12)
        assert a * 3.0 + b * 5.0 + c == pytest.approx(0.0, abs=1e-12)

    def test_line_equation_rejects_coincident_points(self):
        with pytest.raises(ValueError, match="undefined"):
            line_equation((1.0, 1.0), (1.0, 1.0 + EPSILON / 10))

    def test_line_intersection_crossing(self):
        p = line_intersection((0, 0), (1, 1), (0, 1), (1, 0))
        assert np.allclose(p, [0.5, 0.5])

    def test_line_intersection_parallel_is_none(self):
        assert line_intersection((0, 0), (1, 0), (0, 1), (1, 1)) is None
        # coincident lines are parallel too
        assert line_intersection((0, 0), (1, 0), (2, 0), (3, 0)) is None

    def test_are_identical_lines_on_proportional_coefficients(self):
        assert are_identical_lines(1.0, 2.0, 3.0, 2.0, 4.0, 6.0)
        assert not are_identical_lines(1.0, 2.0, 3.0, 2.0, 4.0, 7.0)

    def test_same_side_of_line(self):
        assert are_on_the_same_side_of_line((0, 1), (5, 2), (0, 0), (1, 0))
        assert not are_on_the_same_side_of_line((0, 1), (0, -1), (0, 0), (1, 0))
        # a point on the line only matches another point on the line
        assert not are_on_the_same_side_of_line((3, 0), (0, 1), (0, 0), (1, 0))
        assert are_on_the_same_side_of_line((3, 0), (-2, 0), (0, 0), (1, 0))


class TestMeasures:

    def test_distance_from_point_to_line(self):
        assert distance_from_point_to_line((0, 3), (0, 0), (5, 0)) == pytest.approx(3.0)
        assert distance_from_point_to_line((1, 1), (0, 0), (0, 0)) == 0.0

    def test_triangle_area_is_unsigned(self):
        assert triangle_area((0, 0), (2, 0), (0, 2)) == pytest.approx(2.0)
        assert triangle_area((0, 0), (0, 2), (2, 0)) == pytest.approx(2.0)
        assert triangle_area((0, 0), (1, 1), (2, 2)) == 0.0

    def test_middle_point(self):
        assert np.allclose(middle_point((0, 0), (2, 4)), [1.0, 2.0])

    def test_is_point_on_segment(self):
        assert is_point_on_segment((0.5, 0.0), (0, 0), (1, 0))
        assert is_point_on_segment((1.0, 0.0), (0, 0), (1, 0))
        assert not is_point_on_segment((0.5, 0.1), (0, 0), (1, 0))
        assert not is_point_on_segment((1.5, 0.0), (0, 0), (1, 0))

    @pytest.mark.parametrize('end, expected', [
        ((1, 0), 0.0), ((1, 1), 45.0), ((0, 1), 90.0), ((-1, 0), 180.0), ((0, -1), 270.0),
    ])
    def test_angle_of_line_range(self, end, expected):
        assert angle_of_line((0, 0), end) == pytest.approx(expected)

    def test_angle_of_line_never_negative(self):
        angle = angle_of_line((0, 0), (math.cos(-0.1), math.sin(-0.1)))
        assert 0.0 <= angle < 360.0

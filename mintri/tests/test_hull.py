"""Input coercion and convex hull reduction, cross-checked with scipy's qhull."""
import numpy as np
import pytest
from scipy.spatial import ConvexHull

from mintri.core.errors import InvalidInputError
from mintri.core.hull import as_points_array, convex_hull


NOISY_SQUARE = [(1, 1), (0, 0), (1, 0), (0.5, 0), (0, 1), (0.5, 0.5), (0, 0)]


class TestAsPointsArray:

    def test_list_of_pairs(self):
        pts = as_points_array([(1, 2), (3, 4)])
        assert pts.dtype == np.float64 and pts.shape == (2, 2)

    def test_contour_shape(self):
        contour = np.array([[[1, 2]], [[3, 4]], [[5, 7]]], dtype=np.int32)
        pts = as_points_array(contour)
        assert pts.shape == (3, 2)
        assert np.array_equal(pts[2], [5.0, 7.0])

    def test_single_pair(self):
        assert as_points_array((5, 5)).shape == (1, 2)

    @pytest.mark.parametrize('bad', [
        [],
        [(0.0, 0.0), (float('nan'), 1.0)],
        [(0.0, float('inf'))],
        np.zeros((3, 3)),
        [('a', 'b')],
    ])
    def test_rejects_invalid(self, bad):
        with pytest.raises(InvalidInputError):
            as_points_array(bad)

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError, match="empty"):
            as_points_array(np.empty((0, 2)))


class TestConvexHull:

    def test_counterclockwise_from_lowest_vertex(self):
        hull = convex_hull(NOISY_SQUARE)
        assert np.array_equal(hull, [[0, 0], [1, 0], [1, 1], [0, 1]])

    def test_clockwise(self):
        hull = convex_hull(NOISY_SQUARE, clockwise=True)
        assert np.array_equal(hull, [[0, 0], [0, 1], [1, 1], [1, 0]])

    def test_indices_refer_to_first_occurrence(self):
        idx = convex_hull(NOISY_SQUARE, return_points=False)
        assert idx.tolist() == [1, 2, 0, 4]

    def test_collinear_and_single_point(self):
        assert np.array_equal(convex_hull([(0, 0), (1, 1), (2, 2)]), [[0, 0], [2, 2]])
        assert np.array_equal(convex_hull([(5, 5), (5, 5)]), [[5, 5]])

    def test_qhull_falls_back_on_collinear_input(self):
        hull = convex_hull([(0, 0), (1, 1), (2, 2), (3, 3)], method='qhull')
        assert np.array_equal(hull, [[0, 0], [3, 3]])

    @pytest.mark.parametrize('seed, n', [(0, 20), (1, 100), (2, 600)])
    def test_methods_agree_with_scipy(self, seed, n):
        rng = np.random.default_rng(seed)
        pts = rng.uniform(-50.0, 50.0, size=(n, 2))
        mono = convex_hull(pts, method='monotone')
        qh = convex_hull(pts, method='qhull')
        auto = convex_hull(pts)
        assert np.array_equal(mono, qh)
        assert np.array_equal(mono, auto)
        expected = set(map(tuple, pts[ConvexHull(pts).vertices]))
        assert set(map(tuple, mono)) == expected

    def test_hull_is_strictly_convex(self):
        rng = np.random.default_rng(7)
        hull = convex_hull(rng.normal(size=(200, 2)))
        e1 = np.roll(hull, -1, axis=0) - hull
        e2 = np.roll(hull, -2, axis=0) - np.roll(hull, -1, axis=0)
        cross = e1[:, 0] * e2[:, 1] - e1[:, 1] * e2[:, 0]
        assert np.all(cross > 0)

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="unknown hull method"):
            convex_hull(NOISY_SQUARE, method='graham')

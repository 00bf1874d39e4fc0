"""Angular predicates, including the truncating arc-direction rule."""
import pytest

from mintri.core.angles import (
    is_angle_between, is_angle_between_non_reflex, is_opposite_angle_between_non_reflex,
    normalize_flush_angle, opposite_angle,
)


@pytest.mark.parametrize('angle, expected', [(90.0, 270.0), (270.0, 90.0), (180.0, 360.0), (0.0, 180.0)])
def test_opposite_angle(angle, expected):
    assert opposite_angle(angle) == expected


def test_is_angle_between_either_order():
    assert is_angle_between(45.0, 90.0, 0.0)
    assert is_angle_between(45.0, 0.0, 90.0)
    assert not is_angle_between(135.0, 0.0, 90.0)
    # open interval
    assert not is_angle_between(90.0, 0.0, 90.0)


def test_is_angle_between_truncates_sub_degree_difference():
    # int(10.5 - 10.0) == 0, so the (angle2, angle3) ordering is used
    assert not is_angle_between(10.25, 10.5, 10.0)
    assert is_angle_between(10.25, 10.0, 10.5)


def test_non_reflex_arc_across_seam():
    assert is_angle_between_non_reflex(5.0, 350.0, 20.0)
    assert is_angle_between_non_reflex(355.0, 20.0, 350.0)
    assert not is_angle_between_non_reflex(180.0, 350.0, 20.0)


def test_non_reflex_arc_without_wrap():
    assert is_angle_between_non_reflex(100.0, 80.0, 120.0)
    assert not is_angle_between_non_reflex(200.0, 80.0, 120.0)


def test_opposite_angle_between_non_reflex():
    assert is_opposite_angle_between_non_reflex(280.0, 80.0, 120.0)
    assert not is_opposite_angle_between_non_reflex(100.0, 80.0, 120.0)


class TestNormalizeFlushAngle:

    def test_flush_angle_inside_arc_is_kept(self):
        assert normalize_flush_angle(45.0, 0.0, 90.0) == 45.0

    def test_opposite_inside_arc_is_returned(self):
        assert normalize_flush_angle(225.0, 0.0, 90.0) == 45.0

    def test_neither_direction_inside_arc(self):
        assert normalize_flush_angle(135.0, 0.0, 90.0) is None

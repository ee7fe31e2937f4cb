import numpy as np
import pytest
from waypoint_smoother.boundary import extrapolate_boundaries, phantom_points
from waypoint_smoother.errors import InsufficientPoints, NonFiniteInput, NumericOverflow
from waypoint_smoother.path import Path, Point


def test_phantom_points_are_collinear_reflections():
    path = Path([(10, 7), (15, 10), (20, 13), (25, 12)])
    control = extrapolate_boundaries(path)
    assert len(control) == len(path) + 2
    assert control.get_point(0) == Point(5.0, 4.0)
    assert control.get_point(-1) == Point(30.0, 11.0)
    assert list(control)[1:-1] == list(path)


def test_two_points_extend_both_ways():
    start, end = phantom_points(np.array([[0.0, 0.0], [1.0, 2.0]]))
    assert np.allclose(start, [-1.0, -2.0])
    assert np.allclose(end, [2.0, 4.0])


def test_input_path_is_not_mutated():
    path = Path([(0, 0), (1, 1), (2, 0)])
    before = path.copy()
    extrapolate_boundaries(path)
    assert path == before


@pytest.mark.parametrize("pts", [[], [(1, 1)]])
def test_fewer_than_two_points_raise(pts):
    with pytest.raises(InsufficientPoints):
        extrapolate_boundaries(Path(pts))


def test_phantom_point_overflow_raises():
    with pytest.raises(NumericOverflow):
        extrapolate_boundaries(Path([(-1e308, 0), (1e308, 0)]))


def test_non_finite_waypoint_raises():
    with pytest.raises(NonFiniteInput):
        phantom_points(np.array([[0.0, 0.0], [np.inf, 1.0], [2.0, 0.0]]))

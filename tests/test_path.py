import numpy as np
import pytest
from waypoint_smoother.path import Path, Point


def test_push_front_and_add_point_keep_order():
    p = Path([(1, 1), (2, 2)])
    p.push_front((0, 0))
    p.add_point((3, 3))
    assert [tuple(q) for q in p] == [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]
    assert p.get_point(0) == Point(0.0, 0.0)
    assert p.get_point(-1) == Point(3.0, 3.0)
    assert len(p) == 4


def test_get_point_out_of_range_raises():
    p = Path([(0, 0)])
    with pytest.raises(IndexError):
        p.get_point(1)


def test_copy_is_independent():
    p = Path([(0, 0), (1, 0)])
    q = p.copy()
    q.push_front((-1, 0))
    assert len(p) == 2
    assert len(q) == 3


def test_array_conversion():
    arr = np.array([[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]])
    p = Path.from_array(arr)
    assert p.get_point(1) == Point(2.0, 3.0)
    assert np.array_equal(p.to_array(), arr)
    assert Path().to_array().shape == (0, 2)


def test_from_array_rejects_bad_shape():
    with pytest.raises(ValueError):
        Path.from_array(np.zeros((4, 3)))


def test_point_is_immutable_value():
    pt = Point(1.0, 2.0)
    assert pt == Point(1.0, 2.0)
    assert np.array_equal(pt.as_array(), [1.0, 2.0])
    with pytest.raises(AttributeError):
        pt.x = 5.0


def test_slicing_returns_path():
    p = Path([(0, 0), (1, 1), (2, 2), (3, 3)])
    sub = p[1:3]
    assert isinstance(sub, Path)
    assert sub == Path([(1, 1), (2, 2)])
    assert p[::-1].get_point(0) == Point(3.0, 3.0)
    assert p[1] == Point(1.0, 1.0)

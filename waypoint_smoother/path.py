from __future__ import annotations
from collections import deque
from typing import Iterable, Iterator, NamedTuple

import numpy as np


class Point(NamedTuple):
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


def _as_point(p) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


class Path:
    """
    Ordered sequence of 2-D points (traversal order of the curve).
    Backed by a deque so both add_point and push_front are O(1).
    """

    def __init__(self, points: Iterable = ()):
        self.points: deque[Point] = deque(_as_point(p) for p in points)

    @classmethod
    def from_points(cls, points: Iterable) -> "Path":
        return cls(points)

    @classmethod
    def from_array(cls, points_xy: np.ndarray) -> "Path":
        """
        points_xy: (N,2)
        """
        arr = np.asarray(points_xy, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError("points_xy must be (N,2)")
        return cls(map(tuple, arr))

    def add_point(self, point) -> None:
        self.points.append(_as_point(point))

    def push_front(self, point) -> None:
        self.points.appendleft(_as_point(point))

    def get_point(self, i: int) -> Point:
        # deque raises IndexError on out-of-range, negative indices allowed
        return self.points[i]

    def copy(self) -> "Path":
        return Path(self.points)

    def to_array(self) -> np.ndarray:
        if not self.points:
            return np.zeros((0, 2), dtype=float)
        return np.array(self.points, dtype=float)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return Path(list(self.points)[i])
        return self.points[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.points == other.points

    def __repr__(self) -> str:
        return f"Path({list(self.points)!r})"

from __future__ import annotations
import numpy as np

from waypoint_smoother.errors import InsufficientPoints, NonFiniteInput, NumericOverflow
from waypoint_smoother.path import Path


def phantom_points(points_xy: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Phantom control points collinear with the two nearest waypoints:
      start = P[0] - (P[1] - P[0])
      end   = P[-1] + (P[-1] - P[-2])
    points_xy: (N,2), N >= 2
    """
    pts = np.asarray(points_xy, dtype=float)
    if pts.shape[0] < 2:
        raise InsufficientPoints(pts.shape[0])
    bad = np.flatnonzero(~np.isfinite(pts).all(axis=1))
    if bad.size:
        raise NonFiniteInput(int(bad[0]))
    with np.errstate(over="ignore", invalid="ignore"):
        start = pts[0] - (pts[1] - pts[0])
        end = pts[-1] + (pts[-1] - pts[-2])
    if not (np.isfinite(start).all() and np.isfinite(end).all()):
        raise NumericOverflow("phantom control point")
    return start, end


def extrapolate_boundaries(path: Path) -> Path:
    """
    Control sequence of N+2 points: phantom start, the N waypoints, phantom end.
    The caller's path is left untouched.
    """
    if len(path) < 2:
        raise InsufficientPoints(len(path))

    start, end = phantom_points(path.to_array())
    control = path.copy()
    control.push_front(tuple(start))
    control.add_point(tuple(end))
    return control

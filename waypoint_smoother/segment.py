from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from waypoint_smoother.errors import DegenerateSpacing, NonFiniteInput, NumericOverflow
from waypoint_smoother.vector2 import distance


@dataclass(frozen=True, eq=False)
class Segment:
    """
    One cubic piece of the spline, P(t) = a t^3 + b t^2 + c t + d, t in [0,1].
    t=0 gives the segment's start waypoint, t=1 its end waypoint.
    a, b, c, d: (2,) float
    """
    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    d: np.ndarray

    def eval(self, t):
        """
        t: scalar -> (2,), or 1-D array (K,) -> (K,2)
        """
        t_arr = np.asarray(t, dtype=float)
        if t_arr.ndim == 0:
            tt = float(t_arr)
            return ((self.a * tt + self.b) * tt + self.c) * tt + self.d
        tt = t_arr[:, None]
        return ((self.a * tt + self.b) * tt + self.c) * tt + self.d


def calc_coefficients(
    alpha: float,
    tension: float,
    p0,
    p1,
    p2,
    p3,
    legacy_distance: bool = False,
) -> Segment:
    """
    Centripetal Catmull-Rom coefficients for the segment between p1 and p2.
    Knot spacing is distance**alpha; tangents are scaled by (1 - tension).
    Raises DegenerateSpacing if any two consecutive points coincide,
    NonFiniteInput for NaN/inf points and NumericOverflow if the
    coefficients do not fit in a float.
    """
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in (p0, p1, p2, p3))
    for k, p in enumerate((p0, p1, p2, p3)):
        if not np.isfinite(p).all():
            raise NonFiniteInput(k)

    with np.errstate(over="ignore"):
        t01 = distance(p0, p1, legacy=legacy_distance) ** alpha
        t12 = distance(p1, p2, legacy=legacy_distance) ** alpha
        t23 = distance(p2, p3, legacy=legacy_distance) ** alpha
    if t01 == 0.0 or t12 == 0.0 or t23 == 0.0:
        raise DegenerateSpacing()

    scale = 1.0 - tension
    with np.errstate(over="ignore", invalid="ignore"):
        m1 = scale * (p2 - p1 + t12 * ((p1 - p0) / t01 - (p2 - p0) / (t01 + t12)))
        m2 = scale * (p2 - p1 + t12 * ((p3 - p2) / t23 - (p3 - p1) / (t12 + t23)))

        a = 2.0 * (p1 - p2) + m1 + m2
        b = -3.0 * (p1 - p2) - 2.0 * m1 - m2
    if not (np.isfinite(a).all() and np.isfinite(b).all() and np.isfinite(m1).all()):
        raise NumericOverflow("segment coefficients")
    c = m1
    d = p1.copy()
    return Segment(a=a, b=b, c=c, d=d)

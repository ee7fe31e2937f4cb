from __future__ import annotations
import numpy as np


def magnitude(p) -> float:
    # sqrt(x^2 + y^2); NaN propagates
    p = np.asarray(p, dtype=float)
    return float(np.hypot(p[0], p[1]))


def distance(p0, p1, legacy: bool = False) -> float:
    """
    Euclidean distance between two 2-D points.
    legacy=True reproduces the old waypoint tool, whose y displacement was
    always zero, so the result degrades to |p1.x - p0.x|.
    """
    p0 = np.asarray(p0, dtype=float)
    p1 = np.asarray(p1, dtype=float)
    if legacy:
        return magnitude((p1[0] - p0[0], 0.0))
    return magnitude(p1 - p0)

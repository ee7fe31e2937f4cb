from __future__ import annotations
import logging
from typing import List, Optional

import numpy as np

from waypoint_smoother.boundary import extrapolate_boundaries
from waypoint_smoother.config import SplineConfig
from waypoint_smoother.errors import DegenerateSpacing, InsufficientPoints, NonFiniteInput, NumericOverflow
from waypoint_smoother.path import Path
from waypoint_smoother.segment import Segment, calc_coefficients

logger = logging.getLogger(__name__)


def validate_waypoints(path: Path) -> None:
    if len(path) < 2:
        raise InsufficientPoints(len(path))
    pts = path.to_array()
    bad = np.flatnonzero(~np.isfinite(pts).all(axis=1))
    if bad.size:
        raise NonFiniteInput(int(bad[0]))


def build_segments(control: Path, config: SplineConfig) -> List[Segment]:
    """
    One segment per sliding 4-point window over the control sequence.
    N+2 control points -> N-1 segments.
    """
    segments = []
    for i in range(len(control) - 3):
        try:
            seg = calc_coefficients(
                config.alpha,
                config.tension,
                control.get_point(i),
                control.get_point(i + 1),
                control.get_point(i + 2),
                control.get_point(i + 3),
                legacy_distance=config.legacy_distance,
            )
        except DegenerateSpacing:
            raise DegenerateSpacing(window=i) from None
        except NumericOverflow as e:
            raise NumericOverflow(e.what, window=i) from None
        segments.append(seg)
    return segments


def sample_parameters(samples_per_segment: int) -> np.ndarray:
    # t = k/S for k = 1..S; integer count so t=1.0 is hit exactly once
    S = int(samples_per_segment)
    return np.arange(1, S + 1, dtype=float) / S


def generate_smooth_path(path: Path, config: Optional[SplineConfig] = None) -> Path:
    """
    Densify waypoints with a centripetal Catmull-Rom spline.
    Output: first waypoint, then samples_per_segment points per segment,
    i.e. 1 + S*(N-1) points. Every waypoint is reproduced at t=1 of its segment.
    """
    if config is None:
        config = SplineConfig()

    validate_waypoints(path)
    control = extrapolate_boundaries(path)

    # all segments first: a bad window anywhere means no output at all
    segments = build_segments(control, config)
    ts = sample_parameters(config.samples_per_segment)

    smoothed = Path()
    smoothed.add_point(tuple(segments[0].d))
    for i, seg in enumerate(segments):
        with np.errstate(over="ignore", invalid="ignore"):
            samples = seg.eval(ts)
        if not np.isfinite(samples).all():
            raise NumericOverflow("sampled points", window=i)
        for x, y in samples:
            smoothed.add_point((x, y))

    logger.debug(
        "smoothed %d waypoints into %d points (%d segments, alpha=%g, tension=%g)",
        len(path), len(smoothed), len(segments), config.alpha, config.tension,
    )
    return smoothed


def smooth_waypoints(points_xy, config: Optional[SplineConfig] = None) -> np.ndarray:
    """
    Array front-end for generate_smooth_path.
    points_xy: (N,2) -> returns (1 + S*(N-1), 2)
    """
    return generate_smooth_path(Path.from_array(points_xy), config).to_array()

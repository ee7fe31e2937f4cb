from __future__ import annotations
import warnings
from typing import List

import numpy as np

from waypoint_smoother.path import Path

# waypoints the old console tool shipped with
DEMO_WAYPOINTS = (
    (10.0, 7.0),
    (15.0, 10.0),
    (20.0, 13.0),
    (25.0, 12.0),
    (30.0, 7.0),
    (35.0, 8.0),
    (40.0, 10.0),
)


def demo_path() -> Path:
    return Path.from_points(DEMO_WAYPOINTS)


def load_waypoints(path: str) -> Path:
    """
    Read "x, y" lines (one waypoint per line, '#' comments allowed).
    """
    with warnings.catch_warnings():
        # empty files are reported below
        warnings.simplefilter("ignore", UserWarning)
        data = np.loadtxt(path, delimiter=",", comments="#", dtype=float, ndmin=2)
    if data.size == 0:
        raise ValueError(f"no waypoints in {path}")
    if data.shape[1] != 2:
        raise ValueError(f"expected 2 columns (x, y) in {path}, got {data.shape[1]}")
    return Path.from_array(data)


def format_point(x: float, y: float) -> str:
    return f"{x:.6g}, {y:.6g}"


def format_points(path: Path) -> List[str]:
    # "<x>, <y>" per point, same shape as the old console output
    return [format_point(p.x, p.y) for p in path]


def save_points(path: Path, out_file: str) -> None:
    with open(out_file, "w", encoding="utf-8") as f:
        for line in format_points(path):
            f.write(line + "\n")

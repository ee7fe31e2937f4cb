from __future__ import annotations
import argparse
import logging
import os
import sys

import matplotlib.pyplot as plt

from waypoint_smoother.boundary import extrapolate_boundaries
from waypoint_smoother.config import SplineConfig, DEFAULT_ALPHA, DEFAULT_TENSION, DEFAULT_SAMPLES_PER_SEGMENT
from waypoint_smoother.errors import SmoothingError
from waypoint_smoother.io_utils import demo_path, load_waypoints, format_points, save_points
from waypoint_smoother.path import Path
from waypoint_smoother.sampler import generate_smooth_path

logger = logging.getLogger("smooth_waypoints")


def plot_smoothing(waypoints: Path, smoothed: Path, out: str) -> None:
    wp = waypoints.to_array()
    ctrl = extrapolate_boundaries(waypoints).to_array()
    curve = smoothed.to_array()

    output_dir = os.path.dirname(out)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    plt.figure(figsize=(8, 4))
    plt.plot(wp[:, 0], wp[:, 1], linewidth=1, alpha=0.4, label="waypoint polyline")
    plt.plot(curve[:, 0], curve[:, 1], linewidth=2.0, label="Catmull-Rom spline")
    plt.scatter(curve[:, 0], curve[:, 1], s=6)
    plt.scatter(wp[:, 0], wp[:, 1], s=40, zorder=3, label="waypoints")
    plt.scatter(ctrl[[0, -1], 0], ctrl[[0, -1], 1], marker="x", s=60, label="phantom control points")
    plt.axis("equal")
    plt.title("Centripetal Catmull-Rom waypoint smoothing")
    plt.legend(loc="best")
    plt.tight_layout()
    plt.savefig(out, dpi=150)
    plt.close()


def main(argv=None):
    ap = argparse.ArgumentParser(description="Densify 2-D waypoints with a centripetal Catmull-Rom spline.")
    ap.add_argument("--in", dest="inp", type=str, default=None, help="waypoint file, one 'x, y' per line")
    ap.add_argument("--alpha", type=float, default=DEFAULT_ALPHA)
    ap.add_argument("--tension", type=float, default=DEFAULT_TENSION)
    ap.add_argument("--samples", type=int, default=DEFAULT_SAMPLES_PER_SEGMENT)
    ap.add_argument("--legacy_distance", action="store_true")
    ap.add_argument("--out", type=str, default=None, help="write points here instead of stdout")
    ap.add_argument("--plot", type=str, default=None, help="save a PNG of the smoothed path")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = SplineConfig(
            alpha=args.alpha,
            tension=args.tension,
            samples_per_segment=args.samples,
            legacy_distance=args.legacy_distance,
        )
    except ValueError as e:
        raise SystemExit(f"Invalid spline settings: {e}")

    if args.inp is None:
        waypoints = demo_path()
    else:
        try:
            waypoints = load_waypoints(args.inp)
        except (OSError, ValueError) as e:
            raise SystemExit(f"Could not read waypoints: {args.inp} ({e})")

    if args.legacy_distance:
        logger.warning("legacy distance enabled: knot spacing ignores y displacement")

    try:
        smoothed = generate_smooth_path(waypoints, config)
    except SmoothingError as e:
        raise SystemExit(f"Could not smooth path: {e}")

    logger.info("waypoints=%d  smoothed=%d", len(waypoints), len(smoothed))

    if args.out:
        save_points(smoothed, args.out)
        logger.info("wrote %s", args.out)
    else:
        for line in format_points(smoothed):
            print(line)

    if args.plot:
        plot_smoothing(waypoints, smoothed, args.plot)
        logger.info("saved plot to %s", args.plot)

    return smoothed


if __name__ == "__main__":
    main()

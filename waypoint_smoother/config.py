from __future__ import annotations

from dataclasses import dataclass
import math
import numbers

DEFAULT_ALPHA = 0.75
DEFAULT_TENSION = 0.0
DEFAULT_SAMPLES_PER_SEGMENT = 10


@dataclass(frozen=True)
class SplineConfig:
    alpha: float = DEFAULT_ALPHA                # centripetal exponent, (0, 1]
    tension: float = DEFAULT_TENSION            # 0 = standard Catmull-Rom, 1 = straight chords
    samples_per_segment: int = DEFAULT_SAMPLES_PER_SEGMENT
    legacy_distance: bool = False               # x-only distance of the old waypoint tool

    def __post_init__(self):
        alpha = float(self.alpha)
        if not (0.0 < alpha <= 1.0):
            raise ValueError("alpha must be in (0, 1]")
        if not math.isfinite(float(self.tension)):
            raise ValueError("tension must be finite")
        if isinstance(self.samples_per_segment, bool) or not isinstance(self.samples_per_segment, numbers.Integral):
            raise ValueError("samples_per_segment must be an integer")
        if self.samples_per_segment < 1:
            raise ValueError("samples_per_segment must be >= 1")

from __future__ import annotations
from typing import Optional


class SmoothingError(ValueError):
    """Base class for bad input to the smoothing pipeline."""


class InsufficientPoints(SmoothingError):
    def __init__(self, n: int, required: int = 2):
        super().__init__(f"need at least {required} points, got {n}")
        self.n = n
        self.required = required


class DegenerateSpacing(SmoothingError):
    """
    Two consecutive control points coincide, so a knot interval is zero.
    window: index of the 4-point window in the control sequence (if known)
    """

    def __init__(self, window: Optional[int] = None):
        msg = "consecutive control points coincide (zero knot interval)"
        if window is not None:
            msg += f" in window {window}"
        super().__init__(msg)
        self.window = window


class NonFiniteInput(SmoothingError):
    def __init__(self, index: int):
        super().__init__(f"point {index} has a NaN or infinite coordinate")
        self.index = index


class NumericOverflow(SmoothingError):
    """
    Finite input whose phantom points, coefficients or samples overflow.
    what: which quantity went non-finite
    """

    def __init__(self, what: str, window: Optional[int] = None):
        msg = f"{what} overflowed to a non-finite value"
        if window is not None:
            msg += f" in window {window}"
        super().__init__(msg)
        self.what = what
        self.window = window

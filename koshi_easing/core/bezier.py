"""CSS-style cubic bezier easing with a Newton-Raphson solver."""

import logging
import math
from functools import lru_cache
from typing import Tuple

import numpy as np

from .errors import InvalidControlPoints

logger = logging.getLogger("koshi.easing.bezier")

# Solver settings
NEWTON_ITERATIONS = 4
NEWTON_MIN_SLOPE = 0.001
NEWTON_TOLERANCE = 1e-6
SUBDIVISION_PRECISION = 1e-7
SUBDIVISION_MAX_ITERATIONS = 10
SPLINE_TABLE_SIZE = 11
SAMPLE_STEP = 1.0 / (SPLINE_TABLE_SIZE - 1)


def cubic_bezier_point(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    """Calculate point on cubic bezier curve at parameter t."""
    mt = 1 - t
    return mt*mt*mt*p0 + 3*mt*mt*t*p1 + 3*mt*t*t*p2 + t*t*t*p3


def _coefficients(a1: float, a2: float) -> Tuple[float, float, float]:
    """Polynomial coefficients of one axis with endpoints pinned at 0 and 1."""
    return 1.0 - 3.0 * a2 + 3.0 * a1, 3.0 * a2 - 6.0 * a1, 3.0 * a1


class BezierCurve:
    """
    Cubic bezier pinned at (0, 0) and (1, 1).

    Control x-coordinates outside [0, 1] are accepted; X(t) may then fold
    back on itself, and the solver returns a best-effort root.

    Args:
        x1, y1: First control point
        x2, y2: Second control point

    Raises:
        InvalidControlPoints: if any coordinate is NaN or infinite
    """

    __slots__ = ("_points", "_ax", "_bx", "_cx", "_ay", "_by", "_cy", "_samples", "_linear")

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        points = (float(x1), float(y1), float(x2), float(y2))
        if not all(math.isfinite(p) for p in points):
            raise InvalidControlPoints(x1, y1, x2, y2)
        if not (0.0 <= points[0] <= 1.0 and 0.0 <= points[2] <= 1.0):
            logger.warning(
                "Bezier x-coordinates outside [0, 1] (%s, %s); solving best-effort",
                points[0], points[2],
            )

        self._points = points
        self._ax, self._bx, self._cx = _coefficients(points[0], points[2])
        self._ay, self._by, self._cy = _coefficients(points[1], points[3])
        self._linear = points[0] == points[1] and points[2] == points[3]

        t = np.linspace(0.0, 1.0, SPLINE_TABLE_SIZE)
        self._samples = ((self._ax * t + self._bx) * t + self._cx) * t

    @property
    def control_points(self) -> Tuple[float, float, float, float]:
        return self._points

    def __repr__(self) -> str:
        return "BezierCurve(%g, %g, %g, %g)" % self._points

    def x_at(self, t: float) -> float:
        return ((self._ax * t + self._bx) * t + self._cx) * t

    def y_at(self, t: float) -> float:
        return ((self._ay * t + self._by) * t + self._cy) * t

    def slope_x(self, t: float) -> float:
        """dX/dt at t."""
        return 3.0 * self._ax * t * t + 2.0 * self._bx * t + self._cx

    def evaluate_parametric(self, t: float) -> Tuple[float, float]:
        """Point (X(t), Y(t)) on the curve at parameter t in [0, 1]."""
        x1, y1, x2, y2 = self._points
        return cubic_bezier_point(t, 0.0, x1, x2, 1.0), cubic_bezier_point(t, 0.0, y1, y2, 1.0)

    def solve_t(self, x: float) -> float:
        """Find the curve parameter t where X(t) == x."""
        # Bracket x using the precomputed sample table
        interval = int(np.searchsorted(self._samples[1:-1], x, side="right"))
        interval_start = interval * SAMPLE_STEP
        lo = float(self._samples[interval])
        hi = float(self._samples[interval + 1])
        span = hi - lo
        dist = (x - lo) / span if span != 0 else 0.0
        guess = interval_start + dist * SAMPLE_STEP

        slope = self.slope_x(guess)
        if slope == 0.0:
            return guess
        if slope >= NEWTON_MIN_SLOPE:
            t = self._newton_raphson(x, guess)
            if t is not None:
                return t
        return self._binary_subdivide(x, interval_start, interval_start + SAMPLE_STEP)

    def _newton_raphson(self, x: float, guess: float):
        """Refine guess; None when the iteration does not converge."""
        t = guess
        for _ in range(NEWTON_ITERATIONS):
            slope = self.slope_x(t)
            if abs(slope) < NEWTON_MIN_SLOPE:
                return None
            t -= (self.x_at(t) - x) / slope
        if not 0.0 <= t <= 1.0 or abs(self.x_at(t) - x) > NEWTON_TOLERANCE:
            return None
        return t

    def _binary_subdivide(self, x: float, a: float, b: float) -> float:
        t = a + (b - a) / 2.0
        for _ in range(SUBDIVISION_MAX_ITERATIONS):
            current = self.x_at(t) - x
            if abs(current) <= SUBDIVISION_PRECISION:
                break
            if current > 0.0:
                b = t
            else:
                a = t
            t = a + (b - a) / 2.0
        return t

    def evaluate(self, x: float) -> float:
        """Eased progress for progress x."""
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        if self._linear:
            return float(x)
        return float(self.y_at(self.solve_t(x)))

    __call__ = evaluate


@lru_cache(maxsize=64)
def _cached_curve(x1: float, y1: float, x2: float, y2: float) -> BezierCurve:
    return BezierCurve(x1, y1, x2, y2)


def bezier_easing(x1: float, y1: float, x2: float, y2: float, t: float) -> float:
    """CSS-style cubic bezier easing."""
    return _cached_curve(x1, y1, x2, y2).evaluate(t)


__all__ = [
    "BezierCurve",
    "bezier_easing",
    "cubic_bezier_point",
    "NEWTON_ITERATIONS",
    "NEWTON_MIN_SLOPE",
    "SUBDIVISION_PRECISION",
    "SUBDIVISION_MAX_ITERATIONS",
    "SPLINE_TABLE_SIZE",
]

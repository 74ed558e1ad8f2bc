"""
Curve registry: name -> easing function.

Registered functions take progress 0-1 and return eased progress.
A family generated from one base curve adds <name>In, <name>Out and
<name>InOut entries. Registration is first-wins and append-only.
"""

import logging
import threading
from typing import Callable, Dict, Iterator, List, Tuple

from .bezier import BezierCurve
from .errors import InvalidEasingName
from .formulas import BASE_IN, BASE_OUT

logger = logging.getLogger("koshi.easing.registry")

EasingFunction = Callable[[float], float]

IN = "In"
OUT = "Out"
IN_OUT = "InOut"
LINEAR = "linear"

BEZIER_PRESETS: Dict[str, Tuple[float, float, float, float]] = {
    # Standard CSS
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
    # Back (overshoot)
    "back-in": (0.48, -0.45, 0.99, 0.79),
    "back-out": (0.11, 0.7, 0.6, 1.31),
}


def linear(progress: float) -> float:
    return progress


def reverse_easing(progress: float, method: EasingFunction) -> float:
    """Flip an easeIn into an easeOut (and back)."""
    return 1 - method(1 - progress)


def mirror_easing(progress: float, method: EasingFunction) -> float:
    """Play method over the first half and its reflection over the second."""
    if progress <= 0.5:
        return method(2 * progress) / 2
    return (2 - method(2 * (1 - progress))) / 2


def _reversed(method: EasingFunction) -> EasingFunction:
    def reversed_easing(progress: float) -> float:
        return reverse_easing(progress, method)
    return reversed_easing


def _mirrored(method: EasingFunction) -> EasingFunction:
    def mirrored_easing(progress: float) -> float:
        return mirror_easing(progress, method)
    return mirrored_easing


class CurveRegistry:
    """Append-only table of named easing functions."""

    def __init__(self):
        self._curves: Dict[str, EasingFunction] = {}
        self._lock = threading.Lock()

    def __contains__(self, name: str) -> bool:
        return name in self._curves

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> List[str]:
        """Sorted list of registered curve names."""
        return sorted(self._curves)

    def _insert(self, name: str, method: EasingFunction) -> bool:
        # Caller holds the lock
        if name in self._curves:
            logger.debug("Easing %r already registered, keeping existing curve", name)
            return False
        self._curves[name] = method
        return True

    def register(self, name: str, method: EasingFunction) -> bool:
        """Register method under name. Returns False if name was taken."""
        with self._lock:
            return self._insert(name, method)

    def register_bezier(self, name: str, x1: float, y1: float, x2: float, y2: float) -> bool:
        """
        Register a cubic bezier curve under name.

        Existing names are left untouched and no curve is built for them.

        Raises:
            InvalidControlPoints: if any coordinate is not finite
        """
        with self._lock:
            if name in self._curves:
                logger.debug("Bezier %r already registered, ignoring new control points", name)
                return False
            curve = BezierCurve(x1, y1, x2, y2)
            self._curves[name] = curve.evaluate
            logger.debug("Registered bezier %r: %r", name, curve)
            return True

    def generate_family(self, name: str, method: EasingFunction, is_base_in: bool = False) -> None:
        """
        Generate <name>In, <name>Out and <name>InOut from one base curve.

        Args:
            name: Family base name, e.g. "cubic"
            method: The base curve
            is_base_in: True if method is the easeIn member, False for easeOut
        """
        base_name = name + (IN if is_base_in else OUT)
        reverse_name = name + (OUT if is_base_in else IN)

        with self._lock:
            self._insert(base_name, method)
            # Derive from whatever is stored under the base name
            base = self._curves[base_name]
            self._insert(reverse_name, _reversed(base))
            self._insert(name + IN_OUT, _mirrored(base))

        logger.debug("Generated easing family %r from %s", name, base_name)

    def get(self, name: str) -> EasingFunction:
        """
        Get the named easing function.

        Raises:
            InvalidEasingName: if name is not registered
        """
        try:
            return self._curves[name]
        except KeyError:
            raise InvalidEasingName(name) from None


def build_default_registry() -> CurveRegistry:
    """Registry holding linear, the bezier presets and every catalog family."""
    registry = CurveRegistry()
    registry.register(LINEAR, linear)

    for name, points in BEZIER_PRESETS.items():
        registry.register_bezier(name, *points)

    for name, method in BASE_IN.items():
        registry.generate_family(name, method, is_base_in=True)

    for name, method in BASE_OUT.items():
        registry.generate_family(name, method, is_base_in=False)

    return registry


easing = build_default_registry()


__all__ = [
    "CurveRegistry",
    "BEZIER_PRESETS",
    "LINEAR",
    "build_default_registry",
    "easing",
    "linear",
    "mirror_easing",
    "reverse_easing",
]

"""
Koshi Easing
Easing curves for animation timing: cubic bezier solver, Penner-style curve
families, range easing with overshoot and value limiting.
"""

from .core import (
    BezierCurve,
    CurveRegistry,
    EasingError,
    InvalidControlPoints,
    InvalidEasingName,
    easing,
    list_easings,
    sample_easing,
    within_range,
)
from .values import (
    ActionRecord,
    ValueDefinition,
    create_value_container,
    limit,
)


def get_easing(name: str):
    """Get a registered easing function by name. Raises InvalidEasingName."""
    return easing.get(name)


def register_bezier(name: str, x1: float, y1: float, x2: float, y2: float) -> bool:
    """Register a cubic bezier curve. First registration of a name wins."""
    return easing.register_bezier(name, x1, y1, x2, y2)


__all__ = [
    "get_easing",
    "register_bezier",
    "within_range",
    "create_value_container",
    "list_easings",
    "sample_easing",
    "limit",
    "easing",
    "ActionRecord",
    "ValueDefinition",
    "BezierCurve",
    "CurveRegistry",
    "EasingError",
    "InvalidEasingName",
    "InvalidControlPoints",
]

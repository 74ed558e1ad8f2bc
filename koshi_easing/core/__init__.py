"""Core easing utilities: bezier solver, formula catalog, curve registry."""

from .errors import (
    EasingError,
    InvalidEasingName,
    InvalidControlPoints,
)
from .bezier import (
    BezierCurve,
    bezier_easing,
    cubic_bezier_point,
)
from .formulas import (
    BASE_IN,
    BASE_OUT,
    make_back,
    make_swing,
)
from .registry import (
    CurveRegistry,
    BEZIER_PRESETS,
    build_default_registry,
    easing,
    mirror_easing,
    reverse_easing,
)
from .range_easing import within_range
from .sampling import list_easings, sample_easing

__all__ = [
    # Errors
    "EasingError",
    "InvalidEasingName",
    "InvalidControlPoints",
    # Bezier
    "BezierCurve",
    "bezier_easing",
    "cubic_bezier_point",
    # Formulas
    "BASE_IN",
    "BASE_OUT",
    "make_back",
    "make_swing",
    # Registry
    "CurveRegistry",
    "BEZIER_PRESETS",
    "build_default_registry",
    "easing",
    "mirror_easing",
    "reverse_easing",
    # Range easing
    "within_range",
    # Sampling
    "list_easings",
    "sample_easing",
]

"""Ease values within ranged parameters, with overshoot outside [0, 1]."""

from typing import Optional

from .calc import escaped, is_in_range, restricted, value_eased
from .registry import LINEAR, CurveRegistry, easing


def within_range(
    progress: float,
    from_val: float,
    to_val: float,
    ease: str = LINEAR,
    escape_amp: float = 0.0,
    registry: Optional[CurveRegistry] = None
) -> float:
    """
    Ease progress into the [from_val, to_val] range.

    Inside [0, 1] the named curve is used. Outside it, progress is clamped,
    the excess is scaled by escape_amp and the result is extrapolated
    linearly, since a curve has no shape beyond its own domain.

    Args:
        progress: Progress, nominally 0-1
        from_val: Value at progress 0
        to_val: Value at progress 1
        ease: Registered easing name
        escape_amp: Scale applied to progress beyond [0, 1]
        registry: Curve registry, defaults to the shared one

    Returns:
        Value of eased progress in range

    Raises:
        InvalidEasingName: if ease is not registered
    """
    if registry is None:
        registry = easing
    method = registry.get(ease)

    new_progress = restricted(progress, 0.0, 1.0)
    if not is_in_range(progress, 0.0, 1.0):
        method = registry.get(LINEAR)
        new_progress = escaped(new_progress, progress, escape_amp)

    return value_eased(new_progress, from_val, to_val, method)


__all__ = ["within_range"]

"""Scalar helpers shared by range easing and value limiting."""

from typing import Callable, Optional


def restricted(value: float, min_val: Optional[float], max_val: Optional[float]) -> float:
    """Clamp value into [min_val, max_val]. None leaves that side unbounded."""
    if min_val is not None and value < min_val:
        return min_val
    if max_val is not None and value > max_val:
        return max_val
    return value


def is_in_range(value: float, min_val: float, max_val: float) -> bool:
    """True when min_val <= value <= max_val."""
    return min_val <= value <= max_val


def difference(a: float, b: float) -> float:
    """Signed distance from a to b."""
    return b - a


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values."""
    return a + (b - a) * t


def value_eased(
    progress: float,
    from_val: float,
    to_val: float,
    easing: Callable[[float], float]
) -> float:
    """Map eased progress onto the [from_val, to_val] range."""
    return lerp(from_val, to_val, easing(progress))


def escaped(restricted_val: float, original: float, escape_amp: float) -> float:
    """
    Push a clamped value back toward the original by escape_amp.

    0 keeps the hard clamp, 1 restores the original value, anything in
    between gives a rubber-band overshoot past the bound.
    """
    return restricted_val + difference(restricted_val, original) * escape_amp


__all__ = [
    "restricted",
    "is_in_range",
    "difference",
    "lerp",
    "value_eased",
    "escaped",
]

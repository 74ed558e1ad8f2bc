"""Sample registered curves over an evenly spaced progress grid."""

from typing import List, Optional

import numpy as np

from .registry import CurveRegistry, easing


def list_easings(registry: Optional[CurveRegistry] = None) -> List[str]:
    """Get list of available easing names."""
    if registry is None:
        registry = easing
    return registry.names()


def sample_easing(
    name: str,
    steps: int = 100,
    registry: Optional[CurveRegistry] = None
) -> np.ndarray:
    """
    Evaluate a named curve at steps + 1 evenly spaced points in [0, 1].

    Args:
        name: Registered easing name
        steps: Number of intervals, at least 1
        registry: Curve registry, defaults to the shared one

    Returns:
        Array of eased values, first at progress 0 and last at progress 1
    """
    if registry is None:
        registry = easing
    method = registry.get(name)
    steps = max(1, int(steps))
    grid = np.linspace(0.0, 1.0, steps + 1)
    return np.fromiter((method(float(p)) for p in grid), dtype=np.float64, count=grid.size)


__all__ = ["list_easings", "sample_easing"]

"""Exceptions raised by the easing core."""


class EasingError(ValueError):
    """Base class for easing errors."""


class InvalidEasingName(EasingError):
    """Raised when a curve name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid easing name: {name!r}")


class InvalidControlPoints(EasingError):
    """Raised when bezier control points cannot describe a curve."""

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        self.control_points = (x1, y1, x2, y2)
        super().__init__(
            f"Bezier control points must be finite, got ({x1}, {y1}, {x2}, {y2})"
        )


__all__ = [
    "EasingError",
    "InvalidEasingName",
    "InvalidControlPoints",
]

"""
Closed-form easing formulas (Robert Penner style).

BASE_IN formulas are easeIn curves, BASE_OUT formulas are easeOut curves.
The registry derives the remaining members of each family by reversal and
mirroring, so only one member is written out here.
"""

import math
from typing import Callable, Dict

BACK_STRENGTH = 1.5
SWING_STRENGTH = 1.70158
SPRING_FREQUENCY = 4.5 * math.pi
SPRING_DECAY = 6.0

EasingFunction = Callable[[float], float]


def ease(progress: float) -> float:
    return progress ** 2


def cubic(progress: float) -> float:
    return progress ** 3


def quart(progress: float) -> float:
    return progress ** 4


def quint(progress: float) -> float:
    return progress ** 5


def circ(progress: float) -> float:
    return 1 - math.sin(math.acos(progress))


def make_back(strength: float = BACK_STRENGTH) -> EasingFunction:
    """Back easeIn that dips below zero by an amount set by strength."""
    def back(progress: float) -> float:
        return (progress * progress) * ((strength + 1) * progress - strength)
    return back


def bounce(progress: float) -> float:
    """Four decaying parabolic hops."""
    if progress < 1 / 2.75:
        return 7.5625 * progress * progress
    elif progress < 2 / 2.75:
        progress -= 1.5 / 2.75
        return 7.5625 * progress * progress + 0.75
    elif progress < 2.5 / 2.75:
        progress -= 2.25 / 2.75
        return 7.5625 * progress * progress + 0.9375
    progress -= 2.625 / 2.75
    return 7.5625 * progress * progress + 0.984375


def make_swing(strength: float = SWING_STRENGTH) -> EasingFunction:
    """Swing easeOut that overshoots one by an amount set by strength."""
    def swing(progress: float) -> float:
        progress -= 1
        return progress * progress * ((strength + 1) * progress + strength) + 1
    return swing


def spring(progress: float) -> float:
    return 1 - math.cos(progress * SPRING_FREQUENCY) * math.exp(-progress * SPRING_DECAY)


back = make_back()
swing = make_swing()

BASE_IN: Dict[str, EasingFunction] = {
    "ease": ease,
    "cubic": cubic,
    "quart": quart,
    "quint": quint,
    "circ": circ,
    "back": back,
}

BASE_OUT: Dict[str, EasingFunction] = {
    "bounce": bounce,
    "swing": swing,
    "spring": spring,
}


__all__ = [
    "BASE_IN",
    "BASE_OUT",
    "BACK_STRENGTH",
    "SWING_STRENGTH",
    "make_back",
    "make_swing",
    "ease",
    "cubic",
    "quart",
    "quint",
    "circ",
    "back",
    "bounce",
    "swing",
    "spring",
]

"""
Easing curves that remap normalized time before a curve is sampled.

Every curve maps [0, 1] onto [0, 1], is monotonic and keeps both end points.
"""

from enum import Enum
from typing import Union

import hexapod.constants as constants


class Easing(Enum):
    LINEAR = 'linear'
    EASE = 'ease'
    EASE_IN = 'ease-in'
    EASE_OUT = 'ease-out'
    EASE_IN_OUT = 'ease-in-out'
    EASE_IN_OUT_CUBIC = 'ease-in-out-cubic'


def clamp_t(t: float) -> float:
    if t > 1:
        return 1.0
    if t < 0:
        return 0.0
    return t


def _cubic(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    return (1 - t) ** 3 * p0 + 3 * (1 - t) ** 2 * t * p1 + 3 * (1 - t) * t**2 * p2 + t**3 * p3


def _cubic_derivative(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    return 3 * (1 - t) ** 2 * (p1 - p0) + 6 * (1 - t) * t * (p2 - p1) + 3 * t**2 * (p3 - p2)


def cubic_bezier(t: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """
    CSS style timing function through (0, 0), (x1, y1), (x2, y2), (1, 1).

    The curve parameter whose x equals ``t`` is found with a few Newton steps,
    its y is the eased value.
    """
    t = clamp_t(t)

    s = t
    for _ in range(constants.CUBIC_BEZIER_ITERATIONS):
        x_estimate = _cubic(s, 0.0, x1, x2, 1.0)
        if abs(x_estimate - t) < constants.CUBIC_BEZIER_PRECISION:
            break
        dx = _cubic_derivative(s, 0.0, x1, x2, 1.0)
        if dx == 0:
            break
        s -= (x_estimate - t) / dx

    return _cubic(clamp_t(s), 0.0, y1, y2, 1.0)


def ease(t: float, easing: Union[Easing, str] = Easing.LINEAR) -> float:
    easing = Easing(easing)

    if easing is Easing.LINEAR:
        return t
    if easing is Easing.EASE:
        # y-only cubic with both inner control points at 0.25
        return 3 * (1 - t) ** 2 * t * 0.25 + 3 * (1 - t) * t**2 * 0.25 + t**3
    if easing is Easing.EASE_IN:
        return t * t
    if easing is Easing.EASE_OUT:
        return t * (2 - t)
    if easing is Easing.EASE_IN_OUT:
        return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t
    return cubic_bezier(t, 0.17, 0.67, 0.83, 0.67)

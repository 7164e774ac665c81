"""
Global Bezier curves over an ordered list of keypoints.

The curve starts on the first keypoint and ends on the last one; inner
keypoints pull the curve without it passing through them.
"""

from math import comb
from typing import List, Sequence, Union

import numpy as np

from hexapod.models import Point

ControlPoint = Union[float, Point]


class Bezier:
    """Degree n Bezier curve, B(t) = sum C(n, i) (1 - t)^(n - i) t^i P_i."""

    def __init__(self, points: Union[ControlPoint, Sequence[ControlPoint], None] = None):
        self._points: List[ControlPoint] = []

        if points is not None:
            if isinstance(points, (list, tuple)):
                self._points = list(points)
            else:
                self._points.append(points)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def control_points(self) -> List[ControlPoint]:
        return list(self._points)

    def add_control_points(self, *points: ControlPoint) -> None:
        self._points.extend(points)

    def set_control_points(self, points: Sequence[ControlPoint]) -> None:
        self._points = list(points)

    def basis(self, t: float) -> np.ndarray:
        """Bernstein weights of every control point at ``t``."""
        n = len(self._points) - 1
        return np.array([comb(n, i) * (1 - t) ** (n - i) * t**i for i in range(n + 1)])

    def at(self, t: float = 0.0) -> ControlPoint:
        if not self._points:
            raise ValueError("Bezier curve has no control points")

        weights = self.basis(t)

        if isinstance(self._points[0], Point):
            stacked = np.array([p.to_array() for p in self._points])
            return Point.from_array(weights @ stacked)

        return float(weights @ np.asarray(self._points, dtype=float))

    def get_points(self, n: int = 2) -> List[ControlPoint]:
        """Sample the curve at ``n`` evenly spaced values of t, end points included."""
        return [self.at(float(t)) for t in np.linspace(0.0, 1.0, n)]


def bezier_points(points: Sequence[ControlPoint], n: int) -> List[ControlPoint]:
    """Shorthand for sampling ``n`` values of the curve over ``points``."""
    return Bezier(list(points)).get_points(n)

from math import cos, pi, sin, tan
from typing import List, Tuple

from hexapod.models import Point

DEFAULT_STRIDE = 1.47


class EndpointInterpolator:
    """
    Tripod stride generator.

    Every leg slides its foot along a straight stride line, expressed relative
    to leg 0 like all endpoints. Lines of opposite tripods run in opposite
    directions, so sweeping the phase from 0 to 1 moves one tripod forward
    while the other one pushes back.
    """

    def __init__(self, stride: float = DEFAULT_STRIDE):
        self._half_step = 0.0
        self.stride = stride

    @property
    def stride(self) -> float:
        return self._half_step * 2

    @stride.setter
    def stride(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"Stride must be positive: {value}")
        self._half_step = value / 2

    @property
    def half_step(self) -> float:
        return self._half_step

    @property
    def span(self) -> float:
        """Distance of the stride lines from the leg, in the leg's forward direction."""
        return self.stride / tan(pi / 3)

    def stride_lines(self) -> List[Tuple[Point, Point]]:
        """Start and end of every leg's stride line, indexed by leg."""
        span = self.span
        near_x = span * sin(pi / 6)
        near_y = span * cos(pi / 6)
        far_x = span / cos(pi / 3)

        return [
            (Point(span, -self._half_step), Point(span, self._half_step)),
            (Point(near_x, -near_y), Point(far_x, 0.0)),
            (Point(near_x, near_y), Point(far_x, 0.0)),
            (Point(span, self._half_step), Point(span, -self._half_step)),
            (Point(far_x, 0.0), Point(near_x, -near_y)),
            (Point(far_x, 0.0), Point(near_x, near_y)),
        ]

    @staticmethod
    def phase(t: float) -> float:
        # t in [0, 1] maps onto the middle half of each line, traversed backwards
        return (1 - t + 0.5) / 2

    def endpoints(self, t: float = 0.0, z: float = 0.0) -> List[Point]:
        ratio = self.phase(t)
        positions = []
        for start, end in self.stride_lines():
            point = start.lerp(end, ratio)
            point.z = z
            positions.append(point)
        return positions

    def keyframes(self, count: int = 2, z: float = 0.0) -> List[List[Point]]:
        """Endpoint keyframes for ``count`` evenly spaced phases, ready for an ``endpoints`` animation."""
        if count < 2:
            raise ValueError(f"At least two keyframes are needed, got {count}")
        return [self.endpoints(i / (count - 1), z) for i in range(count)]

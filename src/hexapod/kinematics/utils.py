"""Trig-in-degrees helpers and circle sampling."""

import math
from typing import List

from hexapod.models import Point


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad2deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def sin_deg(degrees: float) -> float:
    return math.sin(deg2rad(degrees))


def cos_deg(degrees: float) -> float:
    return math.cos(deg2rad(degrees))


def acos_deg(value: float) -> float:
    """acos in degrees. NaN outside [-1, 1] instead of raising."""
    if value < -1.0 or value > 1.0 or math.isnan(value):
        return math.nan
    return rad2deg(math.acos(value))


def atan2_deg(y: float, x: float) -> float:
    return rad2deg(math.atan2(y, x))


def sample_circle(radius: float, interval: float, offset: float = 0.0, z: float = 0.0) -> List[Point]:
    """
    Points on a horizontal circle every ``interval`` degrees, starting at ``offset``.

    Sampling covers [0, 360) so a 60 degree interval yields the six leg origins.
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")

    points = []
    count = int(math.ceil(360.0 / interval - 1e-9))
    for i in range(count):
        theta = offset + i * interval
        points.append(Point(radius * cos_deg(theta), radius * sin_deg(theta), z))
    return points

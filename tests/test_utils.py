import math

import pytest

from hexapod.kinematics.utils import acos_deg, atan2_deg, cos_deg, deg2rad, rad2deg, sample_circle, sin_deg
from hexapod.models import Point


def test_degree_conversions():
    assert deg2rad(180) == pytest.approx(math.pi)
    assert rad2deg(math.pi / 2) == pytest.approx(90)
    assert rad2deg(deg2rad(37.5)) == pytest.approx(37.5)


def test_trig_in_degrees():
    assert sin_deg(30) == pytest.approx(0.5)
    assert cos_deg(60) == pytest.approx(0.5)
    assert acos_deg(0.5) == pytest.approx(60)
    assert atan2_deg(1, 1) == pytest.approx(45)


def test_acos_deg_outside_domain_is_nan():
    assert math.isnan(acos_deg(1.5))
    assert math.isnan(acos_deg(-2))


def test_sample_circle_gives_leg_origins():
    points = sample_circle(0.5, 60)

    assert len(points) == 6
    assert points[0].is_close(Point(0.5, 0.0, 0.0), 1e-12)
    assert points[1].x == pytest.approx(0.25)
    assert points[1].y == pytest.approx(0.5 * math.sqrt(3) / 2)
    for point in points:
        assert point.length() == pytest.approx(0.5)


def test_sample_circle_offset_and_height():
    points = sample_circle(1.0, 90, offset=45, z=2.0)

    assert len(points) == 4
    assert points[0].x == pytest.approx(math.sqrt(2) / 2)
    assert all(point.z == 2.0 for point in points)


def test_sample_circle_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        sample_circle(1.0, 0)

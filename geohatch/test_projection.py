"""
Tests for the rotated equirectangular frame.
"""

import numpy as np
import pytest

from geohatch.base import GeoPoint
from geohatch.constants import EARTH_RADIUS, ROUND_TRIP_TOLERANCE
from geohatch.projection import PlanarFrame, normalize_longitude, to_geographic, to_planar

RING = [GeoPoint(10.0, 40.0), GeoPoint(10.5, 40.2), GeoPoint(10.3, 41.0), GeoPoint(9.8, 40.6)]


def test_origin_latitude_is_mean_latitude():
    origin, planar = to_planar(RING, 30.0)
    assert origin == pytest.approx((40.0 + 40.2 + 41.0 + 40.6) / 4)
    assert planar.shape == (4, 2)


@pytest.mark.parametrize("bearing", [0.0, 17.5, 45.0, 90.0, 135.0, 200.0, 359.0])
def test_round_trip(bearing):
    origin, planar = to_planar(RING, bearing)
    for point, xy in zip(RING, planar):
        back = to_geographic(xy, origin, bearing)
        assert abs(back.lon - point.lon) < ROUND_TRIP_TOLERANCE, f"lon drift at bearing {bearing}"
        assert abs(back.lat - point.lat) < ROUND_TRIP_TOLERANCE, f"lat drift at bearing {bearing}"


@pytest.mark.parametrize("point", [
    GeoPoint(179.9, -60.0),
    GeoPoint(-179.5, 85.0),
    GeoPoint(0.0, -89.0),
])
def test_round_trip_extremes(point):
    frame = PlanarFrame(origin_latitude=point.lat, bearing=73.0)
    back = frame.unproject(frame.project_point(point))
    assert back.lon == pytest.approx(point.lon, abs=ROUND_TRIP_TOLERANCE)
    assert back.lat == pytest.approx(point.lat, abs=ROUND_TRIP_TOLERANCE)


def test_unrotated_frame_matches_equirectangular():
    frame = PlanarFrame(origin_latitude=60.0, bearing=0.0)
    x, y = frame.project_point(GeoPoint(1.0, 60.0))
    assert x == pytest.approx(EARTH_RADIUS * np.radians(1.0) * 0.5)
    assert y == pytest.approx(EARTH_RADIUS * np.radians(60.0))


@pytest.mark.parametrize("bearing", [0.0, 30.0, 90.0, 225.0])
def test_line_direction_maps_to_positive_y(bearing):
    """Moving along the bearing keeps x fixed and increases y."""
    frame = PlanarFrame(origin_latitude=0.0, bearing=bearing)
    theta = np.radians(bearing)
    step = 0.01
    start = GeoPoint(0.0, 0.0)
    ahead = GeoPoint(step * np.sin(theta), step * np.cos(theta))

    x0, y0 = frame.project_point(start)
    x1, y1 = frame.project_point(ahead)
    assert x1 - x0 == pytest.approx(0.0, abs=1e-6)
    assert y1 - y0 == pytest.approx(EARTH_RADIUS * np.radians(step), rel=1e-9)


def test_bearing_90_sweeps_southwards():
    """At bearing 90 the lines run east and the sweep axis points south."""
    frame = PlanarFrame(origin_latitude=0.0, bearing=90.0)
    north_x, _ = frame.project_point(GeoPoint(0.0, 1.0))
    south_x, _ = frame.project_point(GeoPoint(0.0, -1.0))
    assert south_x > north_x


def test_normalize_longitude():
    assert normalize_longitude(10.0) == 10.0
    assert normalize_longitude(180.0) == 180.0
    assert normalize_longitude(-180.0) == 180.0
    assert normalize_longitude(190.0) == pytest.approx(-170.0)
    assert normalize_longitude(-190.0) == pytest.approx(170.0)
    assert normalize_longitude(540.0) == pytest.approx(180.0)

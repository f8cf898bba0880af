"""
Tests for the ellipsoidal geodesic helper.
"""

import math

import pytest

from geohatch.base import GeoPoint, HatchConfigurationError
from geohatch.geodesy import GeodesicMath

WGS84_A = 6378137.0
EQUATOR_DEGREE = WGS84_A * math.pi / 180  # ~111319.49 m


def test_equator_degree_distance():
    geodesic = GeodesicMath()
    distance = geodesic.distance(GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0))
    assert distance == pytest.approx(EQUATOR_DEGREE, rel=1e-9)


def test_destination_along_equator():
    geodesic = GeodesicMath()
    point = geodesic.destination(GeoPoint(0.0, 0.0), 90.0, EQUATOR_DEGREE)
    assert point.lon == pytest.approx(1.0, abs=1e-9)
    assert point.lat == pytest.approx(0.0, abs=1e-9)


def test_destination_inverts_distance_and_bearing():
    geodesic = GeodesicMath()
    origin = GeoPoint(12.5, 47.3)
    target = geodesic.destination(origin, 33.0, 25000.0)

    assert geodesic.distance(origin, target) == pytest.approx(25000.0, rel=1e-9)
    assert geodesic.bearing(origin, target) == pytest.approx(33.0, abs=1e-9)
    assert geodesic.geodesic_distance(origin, target) == geodesic.distance(origin, target)


def test_bearing_range():
    geodesic = GeodesicMath()
    west = geodesic.bearing(GeoPoint(1.0, 0.0), GeoPoint(0.0, 0.0))
    assert west == pytest.approx(270.0)
    assert 0.0 <= west < 360.0


def test_meridian_degree_is_shorter_than_equator_degree():
    """Flattening makes a degree of latitude at the equator about 110.57 km."""
    geodesic = GeodesicMath()
    meridian = geodesic.distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0))
    assert meridian == pytest.approx(110574.0, abs=5.0)
    assert meridian < EQUATOR_DEGREE


def test_custom_sphere():
    sphere = GeodesicMath(a=6371000.0, f=0.0)
    assert sphere.semi_major_axis == 6371000.0
    assert sphere.flattening == 0.0
    distance = sphere.distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0))
    assert distance == pytest.approx(6371000.0 * math.pi / 180, rel=1e-9)


def test_destination_crossing_antimeridian_is_normalized():
    geodesic = GeodesicMath()
    point = geodesic.destination(GeoPoint(179.9, 0.0), 90.0, 50000.0)
    assert -180.0 < point.lon <= 180.0
    assert point.lon < 0, "Travelling east past 180 should wrap to negative longitudes"


def test_unknown_ellipsoid():
    with pytest.raises(HatchConfigurationError):
        GeodesicMath(ellps="not-an-ellipsoid")

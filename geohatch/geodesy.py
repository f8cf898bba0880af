"""
Ellipsoidal geodesic math backed by pyproj.
"""

import logging
from typing import Optional

from pyproj import Geod
from pyproj.exceptions import GeodError

from .base import GeoPoint, HatchConfigurationError
from .constants import DEFAULT_ELLIPSOID
from .projection import normalize_longitude

logger = logging.getLogger(__name__)


class GeodesicMath:
    """
    Forward and inverse geodesics on a reference ellipsoid.

    This is the ellipsoid provider consumed by the engine in geodesic
    fidelity. Any object with the same ``destination`` and ``distance``
    methods can stand in for it.
    """

    def __init__(
        self,
        ellps: Optional[str] = DEFAULT_ELLIPSOID,
        a: Optional[float] = None,
        f: Optional[float] = None
    ):
        """
        Initialize the geodesic helper.

        Args:
            ellps: Named ellipsoid understood by PROJ (ignored when a is given)
            a: Semi-major axis in meters
            f: Flattening
        """
        try:
            if a is not None:
                self._geod = Geod(a=a, f=0.0 if f is None else f)
            else:
                self._geod = Geod(ellps=ellps)
        except (KeyError, ValueError, GeodError) as exc:
            raise HatchConfigurationError(f"Invalid ellipsoid: {exc}") from exc

        self._a = self._geod.a
        self._f = self._geod.f
        logger.debug("Geodesic ellipsoid a=%.3f f=%.10f", self._a, self._f)

    @property
    def semi_major_axis(self) -> float:
        return self._a

    @property
    def flattening(self) -> float:
        return self._f

    def destination(self, origin: GeoPoint, bearing: float, distance: float) -> GeoPoint:
        """
        Point reached by travelling a distance along a geodesic.

        Args:
            origin: Starting point
            bearing: Initial azimuth in degrees, clockwise from north
            distance: Distance in meters

        Returns:
            Destination point
        """
        lon, lat, _ = self._geod.fwd(origin.lon, origin.lat, bearing, distance)
        return GeoPoint(normalize_longitude(float(lon)), float(lat))

    def distance(self, a: GeoPoint, b: GeoPoint) -> float:
        """Geodesic distance between two points in meters."""
        _, _, dist = self._geod.inv(a.lon, a.lat, b.lon, b.lat)
        return float(dist)

    geodesic_distance = distance

    def bearing(self, a: GeoPoint, b: GeoPoint) -> float:
        """Initial azimuth from a to b in degrees, [0, 360)."""
        az12, _, _ = self._geod.inv(a.lon, a.lat, b.lon, b.lat)
        return float(az12) % 360.0

    def __repr__(self) -> str:
        return f"GeodesicMath(a={self._a!r}, f={self._f!r})"

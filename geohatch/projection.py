"""
Local planar frame for the sweep.

A ring is projected once per call with an equirectangular approximation
centred on its mean latitude, then rotated so that lines at the requested
bearing run parallel to the y axis. Scan lines are therefore the vertical
lines x = const, and the sweep advances along x.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from .base import GeoPoint
from .constants import EARTH_RADIUS


def normalize_longitude(lon: float) -> float:
    """Fold a longitude into (-180, 180]."""
    if -180.0 < lon <= 180.0:
        return lon
    lon = (lon + 180.0) % 360.0 - 180.0
    return 180.0 if lon == -180.0 else lon


@dataclass(frozen=True)
class PlanarFrame:
    """
    Equirectangular tangent frame rotated by a bearing.

    The cosine/sine pair is computed once and shared by the forward and the
    inverse transform.

    Attributes:
        origin_latitude: Reference latitude in degrees
        bearing: Line bearing in degrees, clockwise from north
        radius: Sphere radius in meters used for the metric scale
    """
    origin_latitude: float
    bearing: float
    radius: float = EARTH_RADIUS

    def __post_init__(self):
        theta = np.radians(self.bearing)
        object.__setattr__(self, "_cos", float(np.cos(theta)))
        object.__setattr__(self, "_sin", float(np.sin(theta)))
        object.__setattr__(self, "_cos_origin", float(np.cos(np.radians(self.origin_latitude))))

    @classmethod
    def for_ring(cls, ring: Sequence[GeoPoint], bearing: float) -> "PlanarFrame":
        """Frame whose origin latitude is the mean latitude of the ring."""
        origin = float(np.mean([p.lat for p in ring]))
        return cls(origin_latitude=origin, bearing=bearing)

    def project(self, points: Iterable[GeoPoint]) -> np.ndarray:
        """
        Project geographic points into the rotated frame.

        Returns:
            (N, 2) array of (x, y) in meters
        """
        lonlat = np.array([(p.lon, p.lat) for p in points], dtype=float).reshape(-1, 2)
        x = self.radius * np.radians(lonlat[:, 0]) * self._cos_origin
        y = self.radius * np.radians(lonlat[:, 1])

        # Rotate counter-clockwise by the bearing so the line direction,
        # (sin b, cos b) in east/north terms, maps onto +y.
        rx = self._cos * x - self._sin * y
        ry = self._sin * x + self._cos * y
        return np.column_stack((rx, ry))

    def project_point(self, point: GeoPoint) -> Tuple[float, float]:
        x, y = self.project([point])[0]
        return (float(x), float(y))

    def unproject(self, xy: Sequence[float]) -> GeoPoint:
        """Inverse of project for a single (x, y) point."""
        rx, ry = float(xy[0]), float(xy[1])
        x = self._cos * rx + self._sin * ry
        y = -self._sin * rx + self._cos * ry

        lon = float(np.degrees(x / (self.radius * self._cos_origin)))
        lat = float(np.degrees(y / self.radius))
        return GeoPoint(normalize_longitude(lon), lat)


def to_planar(ring: Sequence[GeoPoint], bearing: float) -> Tuple[float, np.ndarray]:
    """
    Project a ring into the rotated planar frame.

    Args:
        ring: Ring points
        bearing: Line bearing in degrees

    Returns:
        Tuple of (origin latitude, (N, 2) array of planar points)
    """
    frame = PlanarFrame.for_ring(ring, bearing)
    return frame.origin_latitude, frame.project(ring)


def to_geographic(point: Sequence[float], origin_latitude: float, bearing: float) -> GeoPoint:
    """Inverse of to_planar for one planar point."""
    return PlanarFrame(origin_latitude=origin_latitude, bearing=bearing).unproject(point)

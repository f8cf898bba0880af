"""
Utility functions for getting rings in and segments out.
"""

from typing import Any, List, Mapping, Sequence, Tuple

from shapely.geometry import LinearRing, LineString, MultiLineString, MultiPolygon, Polygon, shape
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

from .base import GeoPoint, HatchInputError, Segment


def coerce_ring(geometry: Any) -> Tuple[GeoPoint, ...]:
    """
    Extract the boundary ring of a polygon from several input forms.

    Accepts a sequence of (lon, lat) pairs or GeoPoints, a shapely Polygon,
    MultiPolygon, LinearRing or LineString, or a GeoJSON-like mapping
    (geometry, Feature or FeatureCollection). Only the first ring is used:
    holes and further polygons are ignored.

    Args:
        geometry: Polygon input

    Returns:
        Tuple of GeoPoints, closing point included if the input had one

    Raises:
        HatchInputError: If the input cannot be read as a ring
    """
    if isinstance(geometry, Mapping):
        geometry = _geometry_from_mapping(geometry)

    if isinstance(geometry, BaseGeometry):
        coords = _exterior_coords(geometry)
    else:
        coords = geometry

    if coords is None:
        raise HatchInputError("No polygon given")

    ring = []
    for item in coords:
        if isinstance(item, GeoPoint):
            point = item
        else:
            try:
                lon, lat = item[0], item[1]
                point = GeoPoint(float(lon), float(lat))
            except (TypeError, ValueError, IndexError) as exc:
                raise HatchInputError(f"Invalid coordinate: {item!r}") from exc
        ring.append(point.validate())

    return tuple(ring)


def _geometry_from_mapping(data: Mapping[str, Any]) -> BaseGeometry:
    kind = data.get("type")
    if kind == "FeatureCollection":
        features = data.get("features") or []
        if not features:
            raise HatchInputError("FeatureCollection has no features")
        return _geometry_from_mapping(features[0])
    if kind == "Feature":
        if not data.get("geometry"):
            raise HatchInputError("Feature has no geometry")
        return _geometry_from_mapping(data["geometry"])

    try:
        return shape(data)
    except (KeyError, TypeError, ValueError, AttributeError, ShapelyError) as exc:
        raise HatchInputError(f"Unsupported geometry mapping: {kind!r}") from exc


def _exterior_coords(geometry: BaseGeometry):
    if isinstance(geometry, (MultiPolygon, Polygon, LinearRing, LineString)) and geometry.is_empty:
        return []
    if isinstance(geometry, MultiPolygon):
        geometry = geometry.geoms[0]
    if isinstance(geometry, Polygon):
        return list(geometry.exterior.coords)
    if isinstance(geometry, (LinearRing, LineString)):
        return list(geometry.coords)
    raise HatchInputError(f"Unsupported geometry type: {geometry.geom_type}")


def open_ring(ring: Sequence[GeoPoint]) -> List[GeoPoint]:
    """
    Drop the repeated closing point of a ring, if present.

    The closing edge is implicit from here on, so a repeated point would only
    add a zero-length edge and bias the mean latitude.
    """
    points = list(ring)
    if len(points) > 1 and points[0] == points[-1]:
        points.pop()
    return points


def is_simple_ring(ring: Sequence[GeoPoint]) -> bool:
    """Check that a ring does not intersect itself."""
    points = open_ring(ring)
    if len(points) < 3:
        return False
    return LinearRing([p.as_tuple() for p in points]).is_simple


def segments_to_multilinestring(segments: Sequence[Segment]) -> MultiLineString:
    """Convert segments to a shapely MultiLineString in (lon, lat) order."""
    return MultiLineString([segment.as_tuple() for segment in segments])

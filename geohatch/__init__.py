"""
Parallel hatching of geographic polygons.

Fills a polygon given in longitude/latitude with evenly spaced straight lines
at a bearing, each line extended past the boundary by an offset.

Usage:
    from geohatch import ParallelHatcher, HatchParameters, Fidelity

    ring = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
    params = HatchParameters(spacing=5000, bearing=45, offset=50)
    segments = ParallelHatcher().generate_hatching(ring, params)

    for segment in segments:
        print(segment.start.lon, segment.start.lat, segment.end.lon, segment.end.lat)

    # Same call with ellipsoidal distances and offsets
    params = HatchParameters(spacing=5000, bearing=45, fidelity=Fidelity.GEODESIC)
    segments = ParallelHatcher().generate_hatching(ring, params)
"""

from .base import (
    Fidelity,
    GeoPoint,
    HatchConfigurationError,
    HatchingError,
    HatchInputError,
    HatchParameters,
    Segment,
)
from .engine import ParallelHatcher, create_parallel_hatching, hatch_scan_line
from .geodesy import GeodesicMath
from .projection import PlanarFrame, to_geographic, to_planar
from .results import SegmentSequence

__all__ = [
    'Fidelity',
    'GeoPoint',
    'HatchConfigurationError',
    'HatchingError',
    'HatchInputError',
    'HatchParameters',
    'Segment',
    'ParallelHatcher',
    'create_parallel_hatching',
    'hatch_scan_line',
    'GeodesicMath',
    'PlanarFrame',
    'to_geographic',
    'to_planar',
    'SegmentSequence',
]

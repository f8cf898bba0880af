"""
Parallel hatching engine.

Fills a geographic polygon with evenly spaced straight lines at a bearing,
each line piece extended past the polygon boundary by an offset.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .base import Fidelity, GeoPoint, HatchConfigurationError, HatchParameters, Segment
from .bounds import compute_sweep_range, geodesic_scan_positions, scan_positions
from .constants import MIN_RING_POINTS
from .geodesy import GeodesicMath
from .kernel import edge_crossings
from .projection import PlanarFrame
from .results import SegmentSequence, assemble
from .utils import coerce_ring, is_simple_ring, open_ring

logger = logging.getLogger(__name__)


class ParallelHatcher:
    """
    Parallel line hatching for geographic polygons.

    The ring is projected once into a rotated planar frame where every scan
    line is vertical. Each scan line is intersected with all ring edges, the
    hits are sorted along the line and paired into inside spans, and each
    span is extended by the offset and converted back to longitude/latitude.

    The hatcher holds no state between calls beyond its ellipsoid provider,
    so the same instance can serve any number of calls.
    """

    def __init__(self, geodesic=None):
        """
        Initialize the hatcher.

        Args:
            geodesic: Ellipsoid provider with destination and distance
                      methods, used in geodesic fidelity. Defaults to WGS84.
        """
        self._name = "Parallel Hatching"
        self._description = "Evenly spaced lines at a bearing, clipped to a polygon"
        self._geodesic = geodesic

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def generate_hatching(
        self,
        ring: Any,
        parameters: Optional[HatchParameters] = None
    ) -> SegmentSequence:
        """
        Generate hatch segments for a polygon.

        Args:
            ring: Polygon boundary; see utils.coerce_ring for accepted forms
            parameters: Hatching parameters (defaults when omitted)

        Returns:
            SegmentSequence in scan order; empty for rings under four points

        Raises:
            HatchConfigurationError: If the parameters are invalid
            HatchInputError: If the ring coordinates are malformed
        """
        if parameters is None:
            parameters = HatchParameters()
        parameters.validate()

        points = coerce_ring(ring)
        if len(points) < MIN_RING_POINTS:
            logger.debug("Ring has %d points, nothing to hatch", len(points))
            return SegmentSequence()

        vertices = open_ring(points)
        if len(set(vertices)) < 3:
            logger.debug("Ring has fewer than 3 distinct vertices, nothing to hatch")
            return SegmentSequence()
        if not is_simple_ring(vertices):
            logger.warning("Ring intersects itself, hatching may be incomplete")

        bearing = parameters.normalized_bearing
        frame = PlanarFrame.for_ring(vertices, bearing)
        planar = frame.project(vertices)

        geodesic = None
        if parameters.fidelity is Fidelity.GEODESIC:
            geodesic = self._geodesic if self._geodesic is not None else GeodesicMath()
            positions = geodesic_scan_positions(
                frame, planar, parameters.offset, parameters.spacing, geodesic,
                limit=parameters.max_lines
            )
        else:
            lo, hi = compute_sweep_range(planar, parameters.offset)
            positions = scan_positions(lo, hi, parameters.spacing, limit=parameters.max_lines)

        logger.debug(
            "Hatching %d vertices: %d scan lines, spacing=%.3f m, bearing=%.3f, offset=%.3f m, %s",
            len(vertices), len(positions), parameters.spacing, bearing,
            parameters.offset, parameters.fidelity.value
        )

        result = assemble(
            hatch_scan_line(planar, x0, frame, parameters.offset, geodesic)
            for x0 in positions
        )

        logger.debug("Generated %d segments", len(result))
        return result


def hatch_scan_line(
    planar: np.ndarray,
    x0: float,
    frame: PlanarFrame,
    offset: float,
    geodesic=None
) -> List[Segment]:
    """
    Segments produced by one scan line.

    Each scan line depends only on the projected ring and its own position,
    so lines can be computed independently and reassembled by scan index.

    Args:
        planar: (N, 2) projected ring without a repeated closing point
        x0: Scan line position on the sweep axis
        frame: Frame the ring was projected with
        offset: Extension at both ends in meters
        geodesic: Ellipsoid provider for geodesic fidelity, or None for planar

    Returns:
        Segments ordered along the line direction
    """
    hits = edge_crossings(planar, float(x0))
    if len(hits) % 2:
        logger.debug("Dropping unpaired hit on scan line x=%.3f", x0)
    if len(hits) < 2:
        return []

    if geodesic is None:
        return _planar_spans(np.sort(hits, kind="stable"), float(x0), frame, offset)
    return _geodesic_spans(hits, float(x0), frame, offset, geodesic, float(planar[:, 1].min()))


def pair_hits(hits: Sequence) -> List[Tuple[Any, Any]]:
    """
    Pair sorted hits into inside spans: (hit[0], hit[1]), (hit[2], hit[3]), ...

    A trailing unpaired hit only occurs for degenerate or self-intersecting
    input and is dropped.
    """
    return [(hits[k], hits[k + 1]) for k in range(0, len(hits) - 1, 2)]


def _planar_spans(ys: np.ndarray, x0: float, frame: PlanarFrame, offset: float) -> List[Segment]:
    return [
        Segment(frame.unproject((x0, y1 - offset)), frame.unproject((x0, y2 + offset)))
        for y1, y2 in pair_hits(ys)
    ]


def _geodesic_spans(
    ys: np.ndarray,
    x0: float,
    frame: PlanarFrame,
    offset: float,
    geodesic,
    y_reference: float
) -> List[Segment]:
    # Order hits by ground distance from the rear end of the line
    reference = frame.unproject((x0, y_reference))
    points: List[GeoPoint] = sorted(
        (frame.unproject((x0, y)) for y in ys),
        key=lambda p: geodesic.distance(reference, p)
    )

    forward = frame.bearing % 360.0
    backward = (frame.bearing + 180.0) % 360.0

    segments = []
    for start, end in pair_hits(points):
        if offset > 0:
            start = geodesic.destination(start, backward, offset)
            end = geodesic.destination(end, forward, offset)
        segments.append(Segment(start, end))
    return segments


def create_parallel_hatching(
    ring: Any,
    parameters: Optional[HatchParameters] = None,
    geodesic=None,
    **options
) -> SegmentSequence:
    """
    Hatch a polygon in one call.

    Parameters come either as a HatchParameters record or as keyword
    options (spacing or step, bearing, offset, fidelity, max_lines).

    Example:
        segments = create_parallel_hatching(coords, spacing=200, bearing=45)
    """
    if options:
        if parameters is not None:
            raise HatchConfigurationError("Pass either a parameters record or keyword options")
        parameters = HatchParameters.from_mapping(options)
    return ParallelHatcher(geodesic=geodesic).generate_hatching(ring, parameters)

"""
Sweep sizing: the range covered by scan lines and where each line sits.
"""

import logging
import math
from typing import Tuple

import numpy as np

from .base import HatchConfigurationError
from .constants import MAX_SCAN_LINES

logger = logging.getLogger(__name__)


def compute_sweep_range(points: np.ndarray, offset: float) -> Tuple[float, float]:
    """
    Range of the sweep axis covered by the ring, extended by the offset.

    Args:
        points: (N, 2) planar points
        offset: Extension on both sides in meters

    Returns:
        Tuple of (min, max)
    """
    xs = np.asarray(points, dtype=float)[:, 0]
    return (float(xs.min()) - offset, float(xs.max()) + offset)


def count_scan_lines(lo: float, hi: float, spacing: float, limit: int = MAX_SCAN_LINES) -> int:
    """
    Number of scan lines needed to cover [lo, hi].

    Raises:
        HatchConfigurationError: If spacing is not positive or the count
                                 exceeds the limit
    """
    if spacing <= 0:
        raise HatchConfigurationError(f"Spacing must be positive, got {spacing}")

    count = math.ceil((hi - lo) / spacing) + 1
    if count > limit:
        raise HatchConfigurationError(
            f"Spacing {spacing} m needs {count} scan lines, more than the limit of {limit}"
        )
    return count


def scan_positions(
    lo: float,
    hi: float,
    spacing: float,
    limit: int = MAX_SCAN_LINES
) -> np.ndarray:
    """
    Positions of the scan lines along the sweep axis.

    Lines are spacing apart. Their span, (count - 1) * spacing, is never
    shorter than hi - lo; the overshoot is split between both ends so the
    line set is centred on the range.

    Returns:
        Ascending array of x positions
    """
    count = count_scan_lines(lo, hi, spacing, limit)
    slack = (count - 1) * spacing - (hi - lo)
    return lo - slack / 2 + spacing * np.arange(count)


def geodesic_scan_positions(
    frame,
    points: np.ndarray,
    offset: float,
    spacing: float,
    geodesic,
    limit: int = MAX_SCAN_LINES
) -> np.ndarray:
    """
    Scan line positions with offset and spacing measured on the ellipsoid.

    The extreme ring extents along the sweep axis are moved outwards by
    offset meters along the geodesic perpendicular to the bearing. The
    distance between the two extended points sets the line count, and the
    lines are placed by stepping spacing meters along the same geodesic
    direction, then projected back onto the sweep axis.

    Args:
        frame: PlanarFrame the points were projected with
        points: (N, 2) planar points
        offset: Offset in meters
        spacing: Spacing in meters
        geodesic: Ellipsoid provider with destination and distance
        limit: Maximum number of scan lines

    Returns:
        Ascending array of x positions
    """
    pts = np.asarray(points, dtype=float)
    xs, ys = pts[:, 0], pts[:, 1]
    y_mid = (float(ys.min()) + float(ys.max())) / 2

    forward = (frame.bearing + 90.0) % 360.0  # Direction of increasing x
    backward = (frame.bearing + 270.0) % 360.0

    start = frame.unproject((float(xs.min()), y_mid))
    end = frame.unproject((float(xs.max()), y_mid))
    if offset > 0:
        start = geodesic.destination(start, backward, offset)
        end = geodesic.destination(end, forward, offset)

    width = geodesic.distance(start, end)
    count = count_scan_lines(0.0, width, spacing, limit)
    slack = (count - 1) * spacing - width
    origin = geodesic.destination(start, backward, slack / 2) if slack > 0 else start

    logger.debug("Geodesic sweep width %.3f m, %d lines", width, count)

    positions = [
        frame.project_point(geodesic.destination(origin, forward, i * spacing))[0]
        for i in range(count)
    ]
    return np.sort(np.asarray(positions, dtype=float))

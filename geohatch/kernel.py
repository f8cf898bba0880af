"""
Planar vector primitives used by the sweep.

Everything here works on plain (x, y) pairs or numpy rows and knows nothing
about geographic coordinates.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from .constants import INTERSECTION_TOLERANCE

Point = Sequence[float]


def dot(u: Point, v: Point) -> float:
    """Dot product of two 2-D vectors."""
    return u[0] * v[0] + u[1] * v[1]


def cross(u: Point, v: Point) -> float:
    """Z component of the cross product of two 2-D vectors."""
    return u[0] * v[1] - u[1] * v[0]


def lerp(a: Point, b: Point, t: float) -> Tuple[float, float]:
    """Point at parameter t on the line through a and b."""
    return (a[0] + t * (b[0] - a[0]), a[1] + t * (b[1] - a[1]))


def point_on_segment(
    point: Point,
    a: Point,
    b: Point,
    tolerance: float = INTERSECTION_TOLERANCE
) -> bool:
    """
    Check whether a point lies on the segment a-b.

    The point must be collinear with the segment (cross product near zero)
    and its scalar projection must fall within [0, squared length]. Both
    checks are scaled by the squared segment length, so the tolerance is
    relative and the test behaves the same in degrees or in meters.

    Args:
        point: Point to test (x, y)
        a, b: Segment endpoints
        tolerance: Relative tolerance

    Returns:
        True if the point lies on the segment
    """
    segment = (b[0] - a[0], b[1] - a[1])
    offset = (point[0] - a[0], point[1] - a[1])
    squared_length = dot(segment, segment)
    slack = tolerance * max(squared_length, 1.0)

    if abs(cross(segment, offset)) > slack:
        return False

    projection = dot(segment, offset)
    return -slack <= projection <= squared_length + slack


def intersect_segments(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point
) -> Optional[Tuple[float, float]]:
    """
    Find the intersection point of two line segments.

    Both lines are written in general form a*x + b*y = c and the 2x2 system
    is solved directly.

    Args:
        p1, p2: First segment endpoints
        p3, p4: Second segment endpoints

    Returns:
        Intersection point (x, y), or None for parallel lines or a crossing
        outside either segment
    """
    a1 = p2[1] - p1[1]
    b1 = p1[0] - p2[0]
    c1 = a1 * p1[0] + b1 * p1[1]

    a2 = p4[1] - p3[1]
    b2 = p3[0] - p4[0]
    c2 = a2 * p3[0] + b2 * p3[1]

    determinant = a1 * b2 - a2 * b1
    if abs(determinant) < INTERSECTION_TOLERANCE:
        return None  # Parallel or coincident

    x = (b2 * c1 - b1 * c2) / determinant
    y = (a1 * c2 - a2 * c1) / determinant

    if point_on_segment((x, y), p1, p2) and point_on_segment((x, y), p3, p4):
        return (x, y)
    return None


def crossing_at(a: Point, b: Point, x0: float) -> Optional[float]:
    """
    Y coordinate where the vertical scan line x = x0 crosses edge a-b.

    An edge with a.x == b.x cannot be crossed by a single x value and is
    skipped. The straddle test is half-open, min(x) <= x0 < max(x), so a scan
    line through a vertex shared by two edges counts that vertex once.

    Args:
        a, b: Edge endpoints in the rotated frame
        x0: Scan line position

    Returns:
        The crossing's y coordinate, or None if the edge is not crossed
    """
    ax, bx = a[0], b[0]
    if ax == bx:
        return None
    if not min(ax, bx) <= x0 < max(ax, bx):
        return None

    t = (x0 - ax) / (bx - ax)
    return lerp(a, b, t)[1]


def edge_crossings(points: np.ndarray, x0: float) -> np.ndarray:
    """
    Crossings of the scan line x = x0 with every edge of a closed ring.

    Args:
        points: (N, 2) array of ring vertices without a repeated closing point;
                the edge from the last vertex back to the first is included
        x0: Scan line position

    Returns:
        Array of y coordinates in edge traversal order
    """
    hits = []
    count = len(points)
    for i in range(count):
        y = crossing_at(points[i], points[(i + 1) % count], x0)
        if y is not None:
            hits.append(y)
    return np.asarray(hits, dtype=float)

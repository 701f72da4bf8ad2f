"""Polygon measurements over sampled outlines.

This module provides the numeric building blocks for metrics:
- Signed area calculation (shoelace formula)
- Polyline length

All functions are pure, stateless, and treat their input as an ordered
sequence of vertices.
"""

import math
from collections.abc import Sequence

from superellipse.domain import Point


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The polygon is closed implicitly (last vertex connects to the first).
    A repeated closing vertex contributes a zero-length edge and does not
    change the result.

    In a y-up frame a positive area means counter-clockwise winding; in
    the engine's y-down screen frame the sign is mirrored.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])
        1.0
        >>> signed_area([p1, p4, p3, p2])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def polyline_length(points: Sequence[Point]) -> float:
    """Sum the Euclidean lengths of consecutive segments.

    A closed outline must repeat its first vertex at the end for the
    closing edge to be counted.

    Args:
        points: Ordered vertices

    Returns:
        Total length, 0.0 for fewer than two points
    """
    n = len(points)
    if n < 2:
        return 0.0

    length = 0.0
    for i in range(1, n):
        length += math.hypot(points[i].x - points[i - 1].x, points[i].y - points[i - 1].y)

    return length

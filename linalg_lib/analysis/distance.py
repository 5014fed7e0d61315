"""Distance queries between points and lines.

The main entry point is :func:`point_on_line_with_distance`, which finds the
point on a segment that lies at an exact distance from a query point. The
remaining functions are squared-distance helpers that stay in exact integer
arithmetic.

Example usage:
    Find where a circle of radius 5 around p first hits a segment::

        from linalg_lib.domain import Point
        from linalg_lib.analysis.distance import point_on_line_with_distance

        found, r = point_on_line_with_distance(
            Point(5, 3), Point(0, 0), Point(10, 0), 5)
        # found is True, r == Point(1, 0)
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..domain.geometry import Point, round_div, round_sqrt


def point_on_line_with_distance(
    p: Point, a: Point, b: Point, dist: int
) -> Tuple[bool, Optional[Point]]:
    """Find a point ``r`` on segment ``a-b`` with ``|p - r| == dist``.

    Projects ``p`` onto the line through ``a`` and ``b`` (foot ``x``) and
    walks ``sqrt(dist^2 - |px|^2)`` along the line from ``x``. When both
    directions land on the segment, the solution closer to ``a`` wins::

              result
              v
        b<----r---a.......x
               '-.        :
                   '-.    :
                       '-.p

    Positions along the line are kept as multiples of ``1 / |ab|^2`` so the
    search never divides by a rounded length. Only the square root and the
    final coordinates are rounded, each to the nearest integer.

    Args:
        p: Query point.
        a: Segment start.
        b: Segment end.
        dist: Required distance from ``p``.

    Returns:
        Tuple ``(found, result)``. ``result`` is the point on the segment, or
        None when no point of the segment lies at ``dist`` from ``p``.
        ``result`` is within ``sqrt(2) / 2`` of the segment and ``|p - result|``
        is within ``1 / (2 * |ab|) + sqrt(2) / 2`` of ``dist``. That is less than
        one unit for any segment at least two units long. A degenerate segment
        (``a == b``) yields ``a`` when ``|p - a|`` rounds to ``dist``.
    """
    ab = b - a
    ap = p - a
    ab_size2 = ab.size2()
    if ab_size2 == 0:
        if round_sqrt(ap.size2()) == dist:
            return True, a
        return False, None

    # ax = along / |ab| and px = offset / |ab|
    along = ab.dot(ap)
    offset = ab.cross(ap)
    reach2 = dist * dist * ab_size2 - offset * offset
    if reach2 < 0:
        # p is further than dist from the whole line
        return False, None
    # xr = reach / |ab|
    reach = round_sqrt(reach2)

    if along <= 0:
        # x lies before a: only the forward solution can be on the segment
        ar = along + reach
        if ar < 0 or ar > ab_size2:
            return False, None
    elif along >= ab_size2:
        # x lies beyond b: only the backward solution can be on the segment
        ar = along - reach
        if ar < 0 or ar > ab_size2:
            return False, None
    else:
        # x lies on the segment, try the side nearer to a first
        ar = along - reach
        if ar < 0:
            ar = along + reach
            if ar >= ab_size2:
                return False, None
    return True, a + Point(round_div(ab.x * ar, ab_size2), round_div(ab.y * ar, ab_size2))


def dist2_from_line(p: Point, a: Point, b: Point) -> int:
    """Squared perpendicular distance from ``p`` to the infinite line ``a-b``.

    Rounded down. For a degenerate line (``a == b``) this is the squared
    distance from ``p`` to ``a``.
    """
    ab = b - a
    ap = p - a
    ab_size2 = ab.size2()
    if ab_size2 == 0:
        return ap.size2()
    area2 = ab.cross(ap)
    return area2 * area2 // ab_size2


def closest_on_line_segment(p: Point, a: Point, b: Point) -> Point:
    """Point of segment ``a-b`` closest to ``p``.

    The perpendicular foot is clamped to the segment endpoints.
    """
    ab = b - a
    ab_size2 = ab.size2()
    if ab_size2 == 0:
        return a
    projected = ab.dot(p - a)
    if projected <= 0:
        return a
    if projected >= ab_size2:
        return b
    return a + ab * projected / ab_size2


def dist2_from_line_segment(p: Point, a: Point, b: Point) -> int:
    """Squared distance from ``p`` to the nearest point of segment ``a-b``."""
    return (p - closest_on_line_segment(p, a, b)).size2()

"""Segment crossing and intersection.

The module provides the following functions:
    segments_collide: Crossing test for segments in a frame where the first
        segment lies along the positive X axis.
    segments_cross: Crossing test for arbitrary segments.
    intersect: Intersection of the lines through two segments, with a
        centroid fallback for parallel lines.
    line_line_intersection: Like intersect, but reports parallel lines
        instead of falling back.

Example usage:
    Two crossing segments::

        from linalg_lib.domain import LineSegment, Point
        from linalg_lib.analysis.intersection import intersect, segments_cross

        a = LineSegment(Point(0, 0), Point(10, 0))
        b = LineSegment(Point(5, -5), Point(5, 5))
        segments_cross(a, b)  # True
        intersect(a, b)       # Point(x=5, y=0)
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config import AXIS_ALIGNMENT_SLACK
from ..domain.geometry import LineSegment, Point, PointMatrix, trunc_div

logger = logging.getLogger(__name__)


def segments_collide(a_from: Point, a_to: Point, b_from: Point, b_to: Point) -> bool:
    """Whether segment ``b`` crosses segment ``a`` in a pre-transformed frame.

    The caller must have rotated the coordinates so that ``a`` is horizontal
    and points in the positive X direction. This is only checked by
    assertions, which ``python -O`` removes.

    Touching counts: ``b`` passing through an endpoint of ``a``, or ending
    exactly on ``a``, collides.

    Args:
        a_from: Start of the reference segment.
        a_to: End of the reference segment, ``a_to.x >= a_from.x``.
        b_from: Start of the tested segment.
        b_to: End of the tested segment.

    Returns:
        True if the segments share at least one point.
    """
    assert abs(a_from.y - a_to.y) < AXIS_ALIGNMENT_SLACK, \
        "line a is supposed to be transformed to be aligned with the X axis"
    assert a_from.x - AXIS_ALIGNMENT_SLACK <= a_to.x, \
        "line a is supposed to be aligned with the X axis in positive direction"

    y = a_from.y
    straddles = (b_from.y >= y and b_to.y <= y) or (b_to.y >= y and b_from.y <= y)
    if not straddles:
        return False

    if b_to.y == b_from.y:
        # b lies on a's line; compare x ranges
        b_min_x, b_max_x = sorted((b_from.x, b_to.x))
        return b_min_x <= a_to.x and b_max_x >= a_from.x

    x = b_from.x + trunc_div((b_to.x - b_from.x) * (y - b_from.y), b_to.y - b_from.y)
    return a_from.x <= x <= a_to.x


def segments_cross(a: LineSegment, b: LineSegment) -> bool:
    """Whether two arbitrary segments share a point.

    Rotates both segments so ``a`` lies along the positive X axis, then
    applies :func:`segments_collide`. Rotation rounds to the integer grid, so
    segments that pass within about two units of an endpoint of the other
    may be classified either way.

    A zero-length ``a`` has no direction and never crosses anything.
    """
    if a.length2 == 0:
        return False
    matrix = PointMatrix.from_direction(a.vector)
    return segments_collide(
        matrix.apply(a.start), matrix.apply(a.end),
        matrix.apply(b.start), matrix.apply(b.end),
    )


def _line_params(a: LineSegment, b: LineSegment) -> Tuple[int, int]:
    # Position of the intersection along b as the ratio numerator / denominator
    a_vec = a.vector
    b_vec = b.vector
    numerator = (b.start - a.start).cross(a_vec)
    denominator = a_vec.cross(b_vec)
    return numerator, denominator


def intersect(a: LineSegment, b: LineSegment) -> Point:
    """Intersection point of the infinite lines through ``a`` and ``b``.

    Coordinates are truncated toward zero, so the result can be a unit off
    the exact intersection.

    Parallel or collinear lines have no (single) intersection. In that case
    the centroid of the four endpoints is returned instead. That point is not
    an intersection; callers that need to tell the cases apart should use
    :func:`line_line_intersection`.

    Args:
        a: First segment.
        b: Second segment.

    Returns:
        The intersection point, or the truncated centroid of
        ``a.start, a.end, b.start, b.end`` for parallel lines.
    """
    numerator, denominator = _line_params(a, b)
    if denominator == 0:
        logger.debug("intersect() on parallel lines %s and %s, using centroid", a, b)
        return (a.start + a.end + b.start + b.end) / 4
    return b.start + b.vector * numerator / denominator


def line_line_intersection(a: LineSegment, b: LineSegment) -> Tuple[bool, Optional[Point]]:
    """Intersection of the lines through ``a`` and ``b``, if there is one.

    Returns:
        Tuple ``(found, result)``. ``found`` is False and ``result`` None when
        the lines are parallel or collinear (or a segment has zero length).
    """
    numerator, denominator = _line_params(a, b)
    if denominator == 0:
        return False, None
    return True, b.start + b.vector * numerator / denominator

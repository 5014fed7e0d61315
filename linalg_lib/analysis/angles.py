"""Angle and area primitives.

This module provides the turn-angle and area calculations on integer points.
Determinants and dot products are exact; only the final ``atan2`` is
floating point.

The module provides the following functions:
    angle_left: Angle at a vertex turning left from one ray to another.
    triangle_area: Area of the triangle spanned by two vectors.
    point_is_left_of_line: Signed side-of-line test.
    corner_angles: angle_left at every interior vertex of a polyline.

Example usage:
    Corner angle of a right turn::

        from linalg_lib.domain import Point
        from linalg_lib.analysis.angles import angle_left

        angle_left(Point(1, 0), Point(0, 0), Point(0, 1))  # 3*pi/2
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..domain.geometry import Point
from ..utils.arrays import points_to_array


def angle_left(a: Point, b: Point, c: Point) -> float:
    """Angle at ``b`` from ray ``b->a`` turning left to ray ``b->c``.

    Args:
        a: Point on the first ray.
        b: The vertex.
        c: Point on the second ray.

    Returns:
        Angle in radians in ``[0, 2*pi)``. Collinear points give 0 when ``a``
        and ``c`` lie on the same side of ``b`` and pi when they lie on
        opposite sides.

    Note:
        ``a`` or ``c`` coinciding with ``b`` leaves the angle undefined; the
        result is then whatever ``atan2`` makes of a zero vector.
    """
    ba = a - b
    bc = c - b
    dott = ba.dot(bc)
    det = ba.cross(bc)
    angle = -math.atan2(det, dott)  # from -pi to pi
    if angle >= 0:
        return angle
    return math.pi * 2 + angle


def triangle_area(a: Point, b: Point) -> int:
    """Area of the triangle with vertices at the origin, ``a`` and ``b``.

    Half the absolute cross product, rounded down. Always non-negative.
    """
    return abs(a.cross(b)) // 2


def point_is_left_of_line(p: Point, a: Point, b: Point) -> int:
    """Signed side of ``p`` relative to the directed line ``a->b``.

    Returns:
        The cross product ``(b - a) x (p - a)``: positive when ``p`` is left
        of the line, negative when right, zero when on it. Its magnitude is
        twice the area of triangle ``a, b, p``.
    """
    return (b - a).cross(p - a)


def corner_angles(points: Sequence[Point]) -> np.ndarray:
    """Evaluate :func:`angle_left` at every interior vertex of a polyline.

    Args:
        points: Polyline vertices in order.

    Returns:
        Float array of length ``len(points) - 2``; element ``i`` is the angle
        at ``points[i + 1]``. Empty for polylines with fewer than 3 points.
    """
    if len(points) < 3:
        return np.empty(0, dtype=np.float64)

    # Float products: exact up to 2**53, and atan2 is floating point anyway
    pts = points_to_array(points).astype(np.float64)
    ba = pts[:-2] - pts[1:-1]
    bc = pts[2:] - pts[1:-1]
    dott = ba[:, 0] * bc[:, 0] + ba[:, 1] * bc[:, 1]
    det = ba[:, 0] * bc[:, 1] - ba[:, 1] * bc[:, 0]
    angles = -np.arctan2(det, dott)
    return np.where(angles < 0, angles + 2 * np.pi, angles)

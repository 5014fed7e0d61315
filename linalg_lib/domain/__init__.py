"""Domain objects for fixed-point geometry.

This module provides the value objects every kernel function works on. They
are immutable and hold integer coordinates only.

The module exports the following:

Geometry classes:
    Point: Immutable integer 2D point with vector operations.
    LineSegment: Directed segment between two Points.
    PointMatrix: Rotation aligning a direction with the X axis.

Vector primitives:
    dot, cross, vsize, vsize2, normal, trunc_div, round_div, round_sqrt

Example usage:
    Working with geometry::

        from linalg_lib.domain import Point, LineSegment, normal

        ab = LineSegment(Point(0, 0), Point(30, 40))
        print(ab.length)              # 50
        print(normal(ab.vector, 10))  # Point(x=6, y=8)
"""

from .geometry import (
    LineSegment,
    Point,
    PointMatrix,
    coord_t,
    cross,
    dot,
    normal,
    round_div,
    round_sqrt,
    trunc_div,
    vsize,
    vsize2,
)

__all__ = [
    'Point', 'LineSegment', 'PointMatrix', 'coord_t',
    'dot', 'cross', 'vsize', 'vsize2', 'normal', 'trunc_div', 'round_div', 'round_sqrt',
]

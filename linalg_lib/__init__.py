"""Fixed-point 2D geometry kernel.

A library of pure geometric predicates and constructors over integer points
and line segments, meant for path and shape processing that must not drift
the way floating-point coordinates do.

The package is organized into the following modules:
    domain: Value objects (Point, LineSegment, PointMatrix) and vector
        primitives (dot, cross, normal, ...).
    analysis: The kernel functions: angles and areas, point-at-distance,
        segment crossing and intersection, parallel/collinear tests and
        projections.
    utils: numpy array conversions and logging setup.
    config: Numeric thresholds used by the kernel.

Example usage:
    Basic queries::

        from linalg_lib import LineSegment, Point, intersect, angle_left

        a = LineSegment(Point(0, 0), Point(10, 0))
        b = LineSegment(Point(5, -5), Point(5, 5))
        print(intersect(a, b))  # Point(x=5, y=0)

        angle_left(Point(1, 0), Point(0, 0), Point(-1, 0))  # pi

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import (
    angle_left,
    are_collinear,
    are_parallel,
    closest_on_line_segment,
    corner_angles,
    dist2_from_line,
    dist2_from_line_segment,
    intersect,
    line_line_intersection,
    point_is_left_of_line,
    point_on_line_with_distance,
    project,
    project_point,
    project_segment,
    projected_length,
    segments_collide,
    segments_cross,
    triangle_area,
)
from .domain import LineSegment, Point, PointMatrix, coord_t, cross, dot, normal, vsize, vsize2

__all__ = [
    # Domain objects
    'Point', 'LineSegment', 'PointMatrix', 'coord_t',
    'dot', 'cross', 'vsize', 'vsize2', 'normal',
    # Angles and areas
    'angle_left', 'triangle_area', 'point_is_left_of_line', 'corner_angles',
    # Distances
    'point_on_line_with_distance', 'dist2_from_line',
    'closest_on_line_segment', 'dist2_from_line_segment',
    # Crossing and intersection
    'segments_collide', 'segments_cross', 'intersect', 'line_line_intersection',
    # Parallel / collinear
    'are_parallel', 'are_collinear',
    # Projection
    'projected_length', 'project', 'project_point', 'project_segment',
]

__version__ = '1.0.0'

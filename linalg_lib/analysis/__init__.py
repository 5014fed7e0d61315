"""Geometric predicates and constructors.

This module holds the kernel functions proper. They are pure, work on the
integer value objects from :mod:`linalg_lib.domain`, and never keep state.

Submodules:
    angles: angle_left, triangle_area, point_is_left_of_line, corner_angles
    distance: point_on_line_with_distance and squared-distance helpers
    intersection: segments_collide, segments_cross, intersect,
        line_line_intersection
    parallel: are_parallel, are_collinear
    projection: projected_length, project, project_point, project_segment

Example usage:
    Check whether two segments lie on one line::

        from linalg_lib.domain import LineSegment, Point
        from linalg_lib.analysis import are_collinear

        a = LineSegment(Point(0, 0), Point(5, 0))
        b = LineSegment(Point(5, 0), Point(10, 0))
        are_collinear(a, b, 0)  # True
"""

from .angles import angle_left, corner_angles, point_is_left_of_line, triangle_area
from .distance import (
    closest_on_line_segment,
    dist2_from_line,
    dist2_from_line_segment,
    point_on_line_with_distance,
)
from .intersection import intersect, line_line_intersection, segments_collide, segments_cross
from .parallel import are_collinear, are_parallel
from .projection import project, project_point, project_segment, projected_length

__all__ = [
    'angle_left', 'triangle_area', 'point_is_left_of_line', 'corner_angles',
    'point_on_line_with_distance', 'dist2_from_line',
    'closest_on_line_segment', 'dist2_from_line_segment',
    'segments_collide', 'segments_cross', 'intersect', 'line_line_intersection',
    'are_parallel', 'are_collinear',
    'projected_length', 'project', 'project_point', 'project_segment',
]

"""Projections onto the line through a segment.

Every function here needs a reference segment ``onto`` of non-zero length.
That is a caller contract checked by assertions only.
"""

from __future__ import annotations

from typing import Union

from ..domain.geometry import LineSegment, Point, normal, trunc_div


def projected_length(to_project: LineSegment, onto: LineSegment) -> int:
    """Signed length of ``to_project`` measured along the direction of ``onto``.

    Negative when ``to_project`` points against ``onto``. Truncated toward
    zero.
    """
    a = to_project.start
    b = to_project.end
    c = onto.start
    cd = onto.vector
    cd_size = cd.size()
    assert cd_size > 0, "cannot project onto a zero-length segment"
    a_projected = (a - c).dot(cd)
    b_projected = (b - c).dot(cd)
    return trunc_div(b_projected - a_projected, cd_size)


def project_point(p: Point, onto: LineSegment) -> Point:
    """Foot of the perpendicular from ``p`` to the line through ``onto``."""
    ab = onto.vector
    ab_size = ab.size()
    assert ab_size > 0, "cannot project onto a zero-length segment"
    projected = trunc_div(ab.dot(p - onto.start), ab_size)
    return onto.start + normal(ab, projected)


def project_segment(segment: LineSegment, onto: LineSegment) -> LineSegment:
    """Project both endpoints of ``segment`` onto the line through ``onto``."""
    return LineSegment(project_point(segment.start, onto), project_point(segment.end, onto))


def project(item: Union[Point, LineSegment], onto: LineSegment) -> Union[Point, LineSegment]:
    """Project a point or a segment onto the line through ``onto``.

    Raises:
        TypeError: If item is neither a Point nor a LineSegment.
    """
    if isinstance(item, Point):
        return project_point(item, onto)
    if isinstance(item, LineSegment):
        return project_segment(item, onto)
    raise TypeError(f"can only project a Point or LineSegment, got {type(item).__name__}")

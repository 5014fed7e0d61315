"""Parallel and collinear tests with a length-scaled tolerance."""

from __future__ import annotations

import math

from ..domain.geometry import LineSegment


def are_parallel(a: LineSegment, b: LineSegment, allowed_error: int) -> bool:
    """Whether two segments point along the same (or opposite) direction.

    For parallel vectors ``|a . b| == |a| * |b|``. The segments count as
    parallel when the two sides differ by at most
    ``allowed_error * sqrt(|a . b|)``, so the allowed deviation grows with
    the segment lengths. With ``allowed_error == 0`` only exactly parallel
    segments pass.

    Args:
        a: First segment.
        b: Second segment.
        allowed_error: Tolerance in coordinate units.

    Returns:
        True if parallel within tolerance. A zero-length segment has no
        direction and is parallel to anything.
    """
    a_vec = a.vector
    b_vec = b.vector
    a_size2 = a_vec.size2()
    b_size2 = b_vec.size2()
    if a_size2 == 0 or b_size2 == 0:
        return True
    dot_size = abs(a_vec.dot(b_vec))
    # |a| * |b| as one root, exact when the vectors are parallel
    sizes_product = math.isqrt(a_size2 * b_size2)
    dot_diff = abs(dot_size - sizes_product)
    allowed_dot_error = allowed_error * math.sqrt(dot_size)
    return dot_diff <= allowed_dot_error


def are_collinear(a: LineSegment, b: LineSegment, allowed_error: int) -> bool:
    """Whether two segments lie on the same line.

    Requires ``a`` parallel to ``b``, and both segments from ``a.start`` to
    ``b``'s endpoints parallel to ``b``, all with the same tolerance.
    """
    lines_are_parallel = are_parallel(a, b, allowed_error)
    to_b_start_is_on_line = are_parallel(LineSegment(a.start, b.start), b, allowed_error)
    to_b_end_is_on_line = are_parallel(LineSegment(a.start, b.end), b, allowed_error)
    return lines_are_parallel and to_b_start_is_on_line and to_b_end_is_on_line

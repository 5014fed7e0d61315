"""Conversions between value objects and numpy arrays.

Polylines coming from numpy-based pipelines are Nx2 integer arrays. These
helpers convert them to and from Points and LineSegments so the kernel
functions can be applied to them.

Example usage:
    From an array to segments::

        import numpy as np
        from linalg_lib.utils.arrays import array_to_points, polyline_segments

        arr = np.array([[0, 0], [10, 0], [10, 10]])
        segments = polyline_segments(array_to_points(arr))
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..domain.geometry import LineSegment, Point


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into an ``(N, 2)`` int64 array.

    Args:
        points: Sequence of Points.

    Returns:
        Array with one ``[x, y]`` row per point. An empty input gives an
        array of shape ``(0, 2)``.
    """
    if len(points) == 0:
        return np.empty((0, 2), dtype=np.int64)
    return np.array([[p.x, p.y] for p in points], dtype=np.int64)


def array_to_points(array: np.ndarray) -> List[Point]:
    """Convert an ``(N, 2)`` integer array into Points.

    Raises:
        ValueError: If the array is not ``(N, 2)`` or holds non-integer values.
    """
    array = np.asarray(array)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"points must be an Nx2 array, got shape {array.shape}")
    if array.size and not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"points must have an integer dtype, got {array.dtype}")
    return [Point(int(x), int(y)) for x, y in array]


def polyline_segments(points: Sequence[Point]) -> List[LineSegment]:
    """Segments joining consecutive polyline vertices.

    Returns:
        ``len(points) - 1`` segments, or an empty list for fewer than two
        points.
    """
    return [LineSegment(points[i - 1], points[i]) for i in range(1, len(points))]

"""Utility functions around the geometry kernel.

Array utilities:
    points_to_array: Stack Points into an Nx2 int64 numpy array.
    array_to_points: Convert an Nx2 integer array back into Points.
    polyline_segments: Segments joining consecutive polyline vertices.

Logging:
    configure_kernel_logging: Route the kernel's DEBUG records to a stream.

Example usage:
    Run the kernel over a numpy polyline::

        import numpy as np
        from linalg_lib.utils import array_to_points, polyline_segments

        points = array_to_points(np.array([[0, 0], [10, 0], [10, 10]]))
        segments = polyline_segments(points)
"""

from .arrays import array_to_points, points_to_array, polyline_segments
from .log_config import configure_kernel_logging

__all__ = [
    'points_to_array', 'array_to_points', 'polyline_segments',
    'configure_kernel_logging',
]

"""Shared pytest fixtures for the linalg_lib test suite.

Fixtures:
    x_axis_segment: Segment (0,0)-(10,0) along the positive X axis
    diagonal_segment: Segment (0,0)-(30,40) of length 50
    short_segment: Segment (0,0)-(20,0) of length 20
    square_polyline: Closed counter-clockwise unit square scaled by 10

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from linalg_lib.domain import LineSegment, Point  # noqa: E402


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


# -----------------------------------------------------------------------------
# Segment Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def x_axis_segment():
    """Return the segment (0,0)-(10,0)."""
    return LineSegment(Point(0, 0), Point(10, 0))


@pytest.fixture
def diagonal_segment():
    """Return a 3-4-5 segment scaled to length 50."""
    return LineSegment(Point(0, 0), Point(30, 40))


@pytest.fixture
def short_segment():
    """Return the segment (0,0)-(20,0)."""
    return LineSegment(Point(0, 0), Point(20, 0))


# -----------------------------------------------------------------------------
# Polyline Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def square_polyline():
    """Return the corners of a 10x10 square, closed back onto the first point.

    Returns:
        list[Point]: 5 points, first and last equal.
    """
    return [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)]

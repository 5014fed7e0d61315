"""Unit tests for angle and area primitives.

Tests the functions in linalg_lib.analysis.angles:
    - angle_left: Left-turn angle at a vertex
    - triangle_area: Area spanned by two vectors
    - point_is_left_of_line: Signed side-of-line test
    - corner_angles: Vectorised angle_left over a polyline
"""

import math
import unittest

import numpy as np

from linalg_lib.analysis.angles import (
    angle_left,
    corner_angles,
    point_is_left_of_line,
    triangle_area,
)
from linalg_lib.domain.geometry import Point

# Non-degenerate, non-collinear vertex triples (a, b, c)
TRIPLES = [
    (Point(1, 0), Point(0, 0), Point(0, 1)),
    (Point(10, 3), Point(-2, 5), Point(7, -8)),
    (Point(100, 100), Point(0, 0), Point(-50, 1)),
    (Point(-3, -4), Point(2, 2), Point(9, 1)),
    (Point(0, 1000), Point(1, 1), Point(1000, 0)),
]


class TestAngleLeft(unittest.TestCase):
    """Tests for angle_left function."""

    def test_quarter_turns(self):
        """Swapping the rays turns pi/2 into 3*pi/2."""
        a, b, c = Point(1, 0), Point(0, 0), Point(0, 1)
        self.assertAlmostEqual(angle_left(a, b, c), 3 * math.pi / 2, places=6)
        self.assertAlmostEqual(angle_left(c, b, a), math.pi / 2, places=6)

    def test_same_direction_is_zero(self):
        """c on the ray b->a gives no turn."""
        self.assertAlmostEqual(angle_left(Point(2, 0), Point(0, 0), Point(5, 0)), 0.0, places=10)

    def test_opposite_direction_is_pi(self):
        """c opposite a gives a straight angle."""
        self.assertAlmostEqual(angle_left(Point(2, 0), Point(0, 0), Point(-5, 0)), math.pi, places=10)

    def test_range(self):
        """Angles fall in [0, 2*pi)."""
        for a, b, c in TRIPLES:
            for angle in (angle_left(a, b, c), angle_left(c, b, a)):
                self.assertGreaterEqual(angle, 0.0)
                self.assertLess(angle, 2 * math.pi)

    def test_both_directions_sum_to_full_turn(self):
        for a, b, c in TRIPLES:
            total = angle_left(a, b, c) + angle_left(c, b, a)
            self.assertAlmostEqual(total, 2 * math.pi, places=9)

    def test_translation_invariant(self):
        a, b, c = TRIPLES[1]
        shift = Point(1000, -700)
        self.assertAlmostEqual(
            angle_left(a, b, c), angle_left(a + shift, b + shift, c + shift), places=12
        )


class TestTriangleArea(unittest.TestCase):
    """Tests for triangle_area function."""

    def test_degenerate_with_origin(self):
        """A zero vector spans no area."""
        self.assertEqual(triangle_area(Point(0, 0), Point(6, 4)), 0)

    def test_right_triangle(self):
        self.assertEqual(triangle_area(Point(4, 0), Point(0, 3)), 6)

    def test_order_independent(self):
        self.assertEqual(triangle_area(Point(0, 3), Point(4, 0)), 6)

    def test_matches_half_cross(self):
        for a, b in [(Point(3, 1), Point(1, 2)), (Point(-7, 5), Point(2, 9)), (Point(6, 4), Point(3, 2))]:
            self.assertEqual(triangle_area(a, b), abs(a.cross(b)) // 2)
            self.assertGreaterEqual(triangle_area(a, b), 0)

    def test_odd_cross_rounds_down(self):
        """Cross product 5 gives area 2."""
        self.assertEqual(triangle_area(Point(3, 1), Point(1, 2)), 2)


class TestPointIsLeftOfLine(unittest.TestCase):
    """Tests for point_is_left_of_line function."""

    def test_left_right_on(self):
        a, b = Point(0, 0), Point(10, 0)
        self.assertGreater(point_is_left_of_line(Point(0, 5), a, b), 0)
        self.assertLess(point_is_left_of_line(Point(0, -5), a, b), 0)
        self.assertEqual(point_is_left_of_line(Point(20, 0), a, b), 0)

    def test_magnitude_is_twice_area(self):
        self.assertEqual(point_is_left_of_line(Point(0, 5), Point(0, 0), Point(10, 0)), 50)


class TestCornerAngles:
    """Tests for corner_angles function."""

    def test_square_corners(self, square_polyline):
        angles = corner_angles(square_polyline)
        assert angles.shape == (3,)
        np.testing.assert_allclose(angles, [math.pi / 2] * 3)

    def test_reversed_square_turns_the_other_way(self, square_polyline):
        angles = corner_angles(square_polyline[::-1])
        np.testing.assert_allclose(angles, [3 * math.pi / 2] * 3)

    def test_matches_scalar_version(self):
        polyline = [Point(0, 0), Point(10, 3), Point(-2, 5), Point(7, -8), Point(7, 20)]
        expected = [
            angle_left(polyline[i - 1], polyline[i], polyline[i + 1])
            for i in range(1, len(polyline) - 1)
        ]
        np.testing.assert_allclose(corner_angles(polyline), expected, rtol=1e-12)

    def test_straight_line(self):
        angles = corner_angles([Point(0, 0), Point(5, 0), Point(10, 0)])
        np.testing.assert_allclose(angles, [math.pi])

    def test_too_short(self):
        assert corner_angles([Point(0, 0), Point(1, 1)]).shape == (0,)
        assert corner_angles([]).shape == (0,)


if __name__ == '__main__':
    unittest.main()

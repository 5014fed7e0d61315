"""Fixed-point geometric value objects.

All coordinates are integers. Python integers never overflow, so products of
coordinates (dot products, determinants, squared lengths) are always exact.
Integer divisions truncate toward zero, which keeps results symmetric around
the origin. The distance solver rounds to the nearest integer instead.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Tuple

import numpy as np

logger = logging.getLogger(__name__)

# Integer coordinate / distance unit.
coord_t = int


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors, which differs from truncation for negative
    quotients: ``trunc_div(-7, 2) == -3`` whereas ``-7 // 2 == -4``.

    Args:
        numerator: Dividend.
        denominator: Divisor, must be non-zero.

    Returns:
        The quotient truncated toward zero.

    Raises:
        ZeroDivisionError: If denominator is zero.
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def round_div(numerator: int, denominator: int) -> int:
    """Integer division rounding to the nearest integer, halves away from zero.

    ``round_div(7, 2) == 4`` and ``round_div(-7, 2) == -4``.

    Raises:
        ZeroDivisionError: If denominator is zero.
    """
    quotient = (2 * abs(numerator) + abs(denominator)) // (2 * abs(denominator))
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def round_sqrt(value: int) -> int:
    """Square root of a non-negative integer, rounded to the nearest integer."""
    root = math.isqrt(value)
    # sqrt(value) >= root + 0.5  <=>  value > root * root + root
    if value - root * root > root:
        return root + 1
    return root


def _as_coord(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer coordinate, got {type(value).__name__}")
    return int(value)


@dataclass(frozen=True)
class Point:
    """Immutable 2D point (or vector) with integer coordinates."""
    x: int
    y: int

    def __post_init__(self):
        # Normalise numpy integers to Python ints so later products stay exact
        object.__setattr__(self, 'x', _as_coord(self.x, 'x'))
        object.__setattr__(self, 'y', _as_coord(self.y, 'y'))

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, scalar: int) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: int) -> Point:
        """Divide both coordinates, truncating toward zero."""
        return Point(trunc_div(self.x, scalar), trunc_div(self.y, scalar))

    def dot(self, other: Point) -> int:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> int:
        """2D cross product (determinant), positive for a left turn."""
        return self.x * other.y - self.y * other.x

    def size2(self) -> int:
        """Squared length when treated as a vector from origin."""
        return self.x * self.x + self.y * self.y

    def size(self) -> int:
        """Length when treated as a vector from origin, rounded down."""
        return math.isqrt(self.size2())

    def normal(self, length: int) -> Point:
        """This direction scaled to ``length``. See :func:`normal`."""
        return normal(self, length)

    def to_tuple(self) -> Tuple[int, int]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[int, int]) -> Point:
        """Create from tuple."""
        return cls(t[0], t[1])


@dataclass(frozen=True)
class LineSegment:
    """A directed segment from ``start`` to ``end``."""
    start: Point
    end: Point

    @property
    def vector(self) -> Point:
        """Direction vector ``end - start``."""
        return self.end - self.start

    @property
    def length2(self) -> int:
        return self.vector.size2()

    @property
    def length(self) -> int:
        return self.vector.size()

    def reversed(self) -> LineSegment:
        """Return segment pointing the other way."""
        return LineSegment(self.end, self.start)

    def to_tuple(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (self.start.to_tuple(), self.end.to_tuple())

    @classmethod
    def from_tuples(cls, start: Tuple[int, int], end: Tuple[int, int]) -> LineSegment:
        """Create from two ``(x, y)`` tuples."""
        return cls(Point.from_tuple(start), Point.from_tuple(end))


def dot(a: Point, b: Point) -> int:
    return a.dot(b)


def cross(a: Point, b: Point) -> int:
    return a.cross(b)


def vsize2(p: Point) -> int:
    return p.size2()


def vsize(p: Point) -> int:
    return p.size()


def normal(p: Point, length: int) -> Point:
    """Scale a vector to the given length without a unit-vector round trip.

    Computes ``p * length / |p|`` in integers, multiplying first so no
    precision is lost before the division.

    Args:
        p: Direction vector.
        length: Target length, may be negative to flip the direction.

    Returns:
        Vector along ``p`` with (truncated) length ``length``. A zero vector
        has no direction, so ``Point(length, 0)`` is returned instead.
    """
    p_size = p.size()
    if p_size < 1:
        logger.debug("normal() of zero-length vector, falling back to x axis")
        return Point(length, 0)
    return p * length / p_size


class PointMatrix:
    """Rotation that maps a direction vector onto the positive X axis.

    The rotation is held as a read-only 2x2 numpy array. Applying it to
    integer points rounds the result back to the integer grid, so rotated
    coordinates can be off by one unit from the exact value.

    Example:
        >>> m = PointMatrix.from_direction(Point(0, 10))
        >>> m.apply(Point(0, 10))
        Point(x=10, y=0)
    """

    def __init__(self, matrix: np.ndarray):
        matrix = np.array(matrix, dtype=np.float64)
        if matrix.shape != (2, 2):
            raise ValueError(f"matrix must be 2x2, got shape {matrix.shape}")
        matrix.flags.writeable = False
        self.matrix = matrix

    @classmethod
    def from_direction(cls, direction: Point) -> PointMatrix:
        """Build the rotation taking ``direction`` to ``(|direction|, 0)``.

        Raises:
            ValueError: If direction is the zero vector.
        """
        length = math.hypot(direction.x, direction.y)
        if length == 0:
            raise ValueError("cannot build a rotation from a zero-length direction")
        cos_a = direction.x / length
        sin_a = direction.y / length
        return cls(np.array([[cos_a, sin_a], [-sin_a, cos_a]]))

    def apply(self, p: Point) -> Point:
        x, y = np.rint(self.matrix @ np.array([p.x, p.y], dtype=np.float64))
        return Point(int(x), int(y))

    def unapply(self, p: Point) -> Point:
        """Inverse rotation (the transpose, since the matrix is orthonormal)."""
        x, y = np.rint(self.matrix.T @ np.array([p.x, p.y], dtype=np.float64))
        return Point(int(x), int(y))

    def __repr__(self) -> str:
        return f"PointMatrix({self.matrix.tolist()!r})"

"""Two-dimensional vectors and the angle constants used with them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Protocol

PI = math.pi
EPSILON = 0.000001
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI


class _RectLike(Protocol):
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector with arithmetic and geometric helpers."""

    x: float = 0.0
    y: float = 0.0

    def mag(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def mag2(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def norm(self) -> Vec2:
        """Unit vector in the same direction; raises ZeroDivisionError for a zero vector."""
        r = 1 / self.mag()
        return Vec2(self.x * r, self.y * r)

    def perp(self) -> Vec2:
        """The vector rotated a quarter turn counter-clockwise."""
        return Vec2(-self.y, self.x)

    def floor(self) -> Vec2:
        return Vec2(math.floor(self.x), math.floor(self.y))

    def ceil(self) -> Vec2:
        return Vec2(math.ceil(self.x), math.ceil(self.y))

    def clamp(self, rect: _RectLike) -> Vec2:
        """Clamp each component into the bounds of a rectangle."""
        return Vec2(
            min(max(self.x, rect.x), rect.x + rect.width),
            min(max(self.y, rect.y), rect.y + rect.height),
        )

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def reflect_on(self, normal: Vec2) -> Vec2:
        """Reflect this vector about a surface with the given normal."""
        d = self.dot(normal)
        return Vec2(self.x - 2.0 * normal.x * d, self.y - 2.0 * normal.y * d)

    def angle(self) -> float:
        """Angle of the vector in radians, as given by atan2."""
        return math.atan2(self.y, self.x)

    def rotated(self, radians: float) -> Vec2:
        """A copy of the vector rotated by the given angle."""
        a = self.angle() + radians
        length = self.mag()
        return Vec2(math.cos(a) * length, math.sin(a) * length)

    def max(self, other: Vec2) -> Vec2:
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def min(self, other: Vec2) -> Vec2:
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def cart(self) -> Vec2:
        """Treat (x, y) as (radius, angle) and convert to cartesian."""
        return Vec2(math.cos(self.y) * self.x, math.sin(self.y) * self.x)

    def polar(self) -> Vec2:
        """Convert to (radius, angle)."""
        return Vec2(self.mag(), math.atan2(self.y, self.x))

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        return self.x * other.y - self.y * other.x

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vec2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            return Vec2(other / self.x, other / self.y)
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __pos__(self) -> Vec2:
        return Vec2(+self.x, +self.y)

    def __lt__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.y < other.y or (self.y == other.y and self.x < other.x)

    def __gt__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.y > other.y or (self.y == other.y and self.x > other.x)

    def __str__(self) -> str:
        return f"({self.x:.2f},{self.y:.2f})"
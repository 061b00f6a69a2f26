"""Axis-aligned rectangles described by position and size."""

from __future__ import annotations

from dataclasses import dataclass

from .vectors import Vec2


@dataclass
class Rect:
    """A rectangle with its top-left corner at (x, y)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_vectors(cls, pos: Vec2, size: Vec2) -> Rect:
        return cls(pos.x, pos.y, size.x, size.y)

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside the rectangle or on its edge."""
        return not (
            point.x < self.x
            or point.y < self.y
            or point.x > self.x + self.width
            or point.y > self.y + self.height
        )
"""A point quadtree with rectangular and circular range queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol

from .rectangles import Rect


@dataclass
class QtPoint:
    """A point stored in the tree, optionally carrying an entity."""

    x: float
    y: float
    entity: Any = None


@dataclass
class AABB:
    """An axis-aligned box given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, point: QtPoint) -> bool:
        """True if the point lies inside the box or on its edge."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def intersects_aabb(self, other: AABB) -> bool:
        """True if the boxes overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def to_rect(self) -> Rect:
        return Rect(self.left, self.top, self.width, self.height)


@dataclass
class AABBCircle:
    """A circle used as a query range."""

    x: float
    y: float
    r: float

    def contains_point(self, point: QtPoint) -> bool:
        d = (point.x - self.x) ** 2 + (point.y - self.y) ** 2
        return d <= self.r * self.r

    def intersects_aabb(self, other: AABB) -> bool:
        half_w = other.width / 2.0
        half_h = other.height / 2.0
        dx = abs(self.x - (other.x + half_w))
        dy = abs(self.y - (other.y + half_h))

        if dx > half_w + self.r or dy > half_h + self.r:
            return False
        if dx <= half_w or dy <= half_h:
            return True

        corner_distance_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
        return corner_distance_sq <= self.r * self.r


class _Area(Protocol):
    def contains_point(self, point: QtPoint) -> bool: ...

    def intersects_aabb(self, other: AABB) -> bool: ...


@dataclass
class QuadTree:
    """A region quadtree holding at most ``capacity`` points per leaf."""

    boundary: Rect
    capacity: int = 3
    points: list[QtPoint] = field(default_factory=list, init=False)
    north_west: QuadTree | None = field(default=None, init=False)
    north_east: QuadTree | None = field(default=None, init=False)
    south_west: QuadTree | None = field(default=None, init=False)
    south_east: QuadTree | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        b = self.boundary
        self._box = AABB(b.x, b.y, b.width, b.height)

    @property
    def box(self) -> AABB:
        return self._box

    @property
    def divided(self) -> bool:
        return self.north_west is not None

    def _children(self) -> tuple[QuadTree, QuadTree, QuadTree, QuadTree]:
        return (self.north_west, self.north_east, self.south_west, self.south_east)  # type: ignore[return-value]

    def subdivide(self) -> None:
        """Split this node into four equally sized children."""
        b = self._box
        hw, hh = b.width / 2.0, b.height / 2.0
        self.north_west = QuadTree(Rect(b.x, b.y, hw, hh), self.capacity)
        self.north_east = QuadTree(Rect(b.x + hw, b.y, hw, hh), self.capacity)
        self.south_west = QuadTree(Rect(b.x, b.y + hh, hw, hh), self.capacity)
        self.south_east = QuadTree(Rect(b.x + hw, b.y + hh, hw, hh), self.capacity)

    def insert(self, point: QtPoint) -> bool:
        """Add a point; returns False if it lies outside the boundary."""
        if not self._box.contains_point(point):
            return False

        if not self.divided and len(self.points) < self.capacity:
            self.points.append(point)
            return True

        if not self.divided:
            self.subdivide()

        return any(
            child.insert(point)
            for child in (self.north_west, self.north_east, self.south_east, self.south_west)
        )

    def _query(self, area: _Area) -> Iterator[Any]:
        if not area.intersects_aabb(self._box):
            return
        yield from (p.entity for p in self.points if area.contains_point(p))
        if self.divided:
            for child in self._children():
                yield from child._query(area)

    def query(self, area: _Area) -> list[Any]:
        """Entities of all points inside ``area`` (an AABB or AABBCircle)."""
        return list(self._query(area))

    def reset(self) -> None:
        """Remove every point and all children."""
        if self.divided:
            for child in self._children():
                child.reset()
        self.north_west = self.north_east = self.south_west = self.south_east = None
        self.points.clear()
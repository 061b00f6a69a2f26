"""Assorted numeric, geometric, random and text helpers."""

from __future__ import annotations

import os
import random

from .rectangles import Rect
from .vectors import Vec2

MAX_TEXT_BUFFER_LENGTH = 1024

Line = tuple[Vec2, Vec2]


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Clamp ``value`` into ``[minimum, maximum]``; the maximum wins if they cross."""
    lower_bounded = minimum if value < minimum else value
    return maximum if lower_bounded > maximum else lower_bounded


def map_values(x: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``x`` from one range onto another."""
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def difficulty_modifier(mod: float) -> float:
    """A multiplier that grows quadratically with the difficulty level."""
    scaled = mod / 10.0
    return 1.0 + (scaled * scaled / 1.9)


def lines_from_rectangle(rect: Rect) -> list[Line]:
    """The four edges of a rectangle: top, right, bottom and left, in that order."""
    top_left = Vec2(rect.x, rect.y)
    top_right = Vec2(rect.x + rect.width, rect.y)
    bottom_left = Vec2(rect.x, rect.y + rect.height)
    bottom_right = Vec2(rect.x + rect.width, rect.y + rect.height)
    return [
        (top_left, top_right),
        (top_right, bottom_right),
        (bottom_right, bottom_left),
        (bottom_left, top_left),
    ]


def _orientation(p: Vec2, q: Vec2, r: Vec2) -> int:
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def _on_segment(p: Vec2, q: Vec2, r: Vec2) -> bool:
    return min(p.x, r.x) <= q.x <= max(p.x, r.x) and min(p.y, r.y) <= q.y <= max(p.y, r.y)


def _segments_intersect(p1: Vec2, q1: Vec2, p2: Vec2, q2: Vec2) -> bool:
    o1 = _orientation(p1, q1, p2)
    o2 = _orientation(p1, q1, q2)
    o3 = _orientation(p2, q2, p1)
    o4 = _orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True

    return (
        (o1 == 0 and _on_segment(p1, p2, q1))
        or (o2 == 0 and _on_segment(p1, q2, q1))
        or (o3 == 0 and _on_segment(p2, p1, q2))
        or (o4 == 0 and _on_segment(p2, q1, q2))
    )


def line_intersects_rectangle(line_start: Vec2, line_end: Vec2, rect: Rect) -> bool:
    """True if the segment crosses or touches any edge of the rectangle.

    A segment lying wholly inside the rectangle touches no edge and gives False.
    """
    return any(
        _segments_intersect(edge_start, edge_end, line_start, line_end)
        for edge_start, edge_end in lines_from_rectangle(rect)
    )


def random_chance(required: float) -> bool:
    """Roll a uniform number in [0, 1); True if it exceeds ``required`` percent."""
    return random.random() > required / 100.0


def random_value(minimum: int, maximum: int) -> int:
    """A uniformly chosen integer between ``minimum`` and ``maximum`` inclusive."""
    return random.randint(minimum, maximum)


def text_format(fmt: str, *args: object) -> str:
    """printf-style formatting, cut to fit the fixed text buffer length."""
    text = fmt % args if args else fmt % ()
    return text[: MAX_TEXT_BUFFER_LENGTH - 1]


def total_system_memory() -> int:
    """Total physical memory in bytes, or 0 when it cannot be determined."""
    try:
        page_size = os.sysconf("SC_PAGE_SIZE")
        pages = os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        return 0
    if page_size <= 0 or pages <= 0:
        return 0
    return page_size * pages
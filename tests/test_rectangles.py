from luminoveau.rectangles import Rect
from luminoveau.vectors import Vec2


def test_from_vectors_round_trip():
    pos = Vec2(1.0, 2.0)
    size = Vec2(30.0, 40.0)
    rect = Rect.from_vectors(pos, size)
    assert rect.pos == pos
    assert rect.size == size
    assert rect == Rect(1.0, 2.0, 30.0, 40.0)


def test_contains_interior_point():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert rect.contains(Vec2(5.0, 5.0))


def test_contains_edges_and_corners_inclusive():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert rect.contains(Vec2(0.0, 0.0))
    assert rect.contains(Vec2(10.0, 10.0))
    assert rect.contains(Vec2(10.0, 0.0))


def test_does_not_contain_outside_points():
    rect = Rect(2.0, 3.0, 4.0, 5.0)
    assert not rect.contains(Vec2(1.9, 4.0))
    assert not rect.contains(Vec2(3.0, 2.9))
    assert not rect.contains(Vec2(6.1, 4.0))
    assert not rect.contains(Vec2(3.0, 8.1))


def test_clamped_point_is_contained():
    rect = Rect(-5.0, -5.0, 10.0, 3.0)
    for p in (Vec2(100.0, 100.0), Vec2(-100.0, 0.0), Vec2(0.0, -100.0)):
        assert rect.contains(p.clamp(rect))
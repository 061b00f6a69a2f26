import pytest

from luminoveau.quadtree import AABB, AABBCircle, QtPoint, QuadTree
from luminoveau.rectangles import Rect


@pytest.fixture
def tree():
    return QuadTree(Rect(0.0, 0.0, 100.0, 100.0))


def test_aabb_edges():
    box = AABB(10.0, 20.0, 30.0, 40.0)
    assert (box.left, box.top) == (10.0, 20.0)
    assert box.right == box.left + box.width
    assert box.bottom == box.top + box.height


def test_aabb_contains_point_inclusive_edges():
    box = AABB(0.0, 0.0, 10.0, 10.0)
    assert box.contains_point(QtPoint(0.0, 0.0))
    assert box.contains_point(QtPoint(10.0, 10.0))
    assert not box.contains_point(QtPoint(10.5, 5.0))


def test_aabb_intersection_excludes_touching():
    a = AABB(0.0, 0.0, 10.0, 10.0)
    assert a.intersects_aabb(AABB(5.0, 5.0, 10.0, 10.0))
    assert not a.intersects_aabb(AABB(10.0, 0.0, 10.0, 10.0))


def test_aabb_to_rect_round_trip():
    box = AABB(1.0, 2.0, 3.0, 4.0)
    r = box.to_rect()
    assert AABB(r.x, r.y, r.width, r.height) == box


def test_circle_contains_point():
    c = AABBCircle(0.0, 0.0, 5.0)
    assert c.contains_point(QtPoint(3.0, 4.0))
    assert not c.contains_point(QtPoint(4.0, 4.0))


def test_circle_intersects_box_cases():
    box = AABB(0.0, 0.0, 10.0, 10.0)
    assert AABBCircle(5.0, 5.0, 1.0).intersects_aabb(box)
    assert AABBCircle(12.0, 5.0, 3.0).intersects_aabb(box)
    assert not AABBCircle(20.0, 20.0, 3.0).intersects_aabb(box)
    # Near a corner: within the bounding slab but outside the radius.
    assert not AABBCircle(12.0, 12.0, 2.5).intersects_aabb(box)
    assert AABBCircle(12.0, 12.0, 3.0).intersects_aabb(box)


def test_insert_outside_rejected(tree):
    assert tree.insert(QtPoint(150.0, 50.0)) is False
    assert tree.points == []


def test_insert_within_capacity_does_not_subdivide(tree):
    for i in range(3):
        assert tree.insert(QtPoint(10.0 + i, 10.0, i))
    assert not tree.divided
    assert len(tree.points) == 3


def test_insert_beyond_capacity_subdivides(tree):
    for i in range(4):
        assert tree.insert(QtPoint(10.0 + i, 10.0, i))
    assert tree.divided
    assert len(tree.points) == 3
    assert tree.north_west.points[0].entity == 3


def test_subdivide_quadrant_layout(tree):
    tree.subdivide()
    assert tree.north_east.boundary.x == tree.north_west.boundary.width
    assert tree.south_west.boundary.y == tree.north_west.boundary.height
    assert tree.south_east.boundary.pos == tree.north_west.boundary.size


def test_query_rectangle_finds_all_inside(tree):
    coords = [(5.0, 5.0), (60.0, 5.0), (5.0, 60.0), (60.0, 60.0), (90.0, 90.0), (20.0, 20.0)]
    for i, (x, y) in enumerate(coords):
        tree.insert(QtPoint(x, y, i))
    everything = tree.query(AABB(-1.0, -1.0, 102.0, 102.0))
    assert sorted(everything) == list(range(len(coords)))
    found = tree.query(AABB(50.0, 50.0, 50.0, 50.0))
    assert sorted(found) == [3, 4]


def test_query_circle(tree):
    for i, (x, y) in enumerate([(50.0, 50.0), (52.0, 50.0), (80.0, 80.0), (10.0, 10.0)]):
        tree.insert(QtPoint(x, y, i))
    found = tree.query(AABBCircle(50.0, 50.0, 5.0))
    assert sorted(found) == [0, 1]


def test_query_outside_returns_nothing(tree):
    tree.insert(QtPoint(10.0, 10.0, "a"))
    assert tree.query(AABB(200.0, 200.0, 10.0, 10.0)) == []


def test_reset_clears_tree(tree):
    for i in range(10):
        tree.insert(QtPoint(float(i * 9), float(i * 9), i))
    tree.reset()
    assert not tree.divided
    assert tree.query(AABB(-1.0, -1.0, 102.0, 102.0)) == []
    assert tree.insert(QtPoint(1.0, 1.0, "x"))
    assert tree.query(AABB(0.0, 0.0, 2.0, 2.0)) == ["x"]
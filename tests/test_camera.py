import pytest

from luminoveau.camera import Camera, CameraLockedError
from luminoveau.vectors import Vec2

SCREEN = Vec2(800.0, 600.0)


def test_target_maps_to_screen_centre():
    cam = Camera()
    cam.target = Vec2(37.0, -12.0)
    cam.scale = 2.5
    assert cam.to_screen_space(cam.target, SCREEN) == SCREEN / 2.0


def test_screen_world_round_trip():
    cam = Camera()
    cam.target = Vec2(10.0, 20.0)
    cam.scale = 3.0
    world = Vec2(-4.5, 17.25)
    back = cam.to_world_space(cam.to_screen_space(world, SCREEN), SCREEN)
    assert back.x == pytest.approx(world.x)
    assert back.y == pytest.approx(world.y)


def test_scale_stretches_offsets():
    cam = Camera()
    offset = Vec2(5.0, 5.0)
    base = cam.to_screen_space(offset, SCREEN) - SCREEN / 2.0
    cam.scale = 2.0
    scaled = cam.to_screen_space(offset, SCREEN) - SCREEN / 2.0
    assert scaled == base * 2.0


def test_default_state():
    cam = Camera()
    assert cam.target == Vec2(0.0, 0.0)
    assert cam.scale == 1.0
    assert not cam.locked and not cam.moved and not cam.active


def test_setting_target_marks_moved():
    cam = Camera()
    cam.target = Vec2(1.0, 2.0)
    assert cam.moved
    assert cam.target == Vec2(1.0, 2.0)


def test_locked_camera_rejects_target():
    cam = Camera()
    cam.target = Vec2(3.0, 4.0)
    cam.scale = 2.0
    cam.lock()
    assert cam.locked
    assert cam.lock_target == Vec2(3.0, 4.0)
    assert cam.lock_scale == 2.0
    with pytest.raises(CameraLockedError):
        cam.target = Vec2(9.0, 9.0)
    assert cam.target == Vec2(3.0, 4.0)


def test_unlock_clears_moved_and_allows_target():
    cam = Camera()
    cam.target = Vec2(1.0, 1.0)
    cam.lock()
    cam.unlock()
    assert not cam.locked
    assert not cam.moved
    cam.target = Vec2(2.0, 2.0)
    assert cam.target == Vec2(2.0, 2.0)


def test_activate_and_deactivate():
    cam = Camera()
    cam.activate()
    assert cam.active
    cam.deactivate()
    assert not cam.active
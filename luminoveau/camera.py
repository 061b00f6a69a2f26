"""A 2D camera converting between world and screen coordinates."""

from __future__ import annotations

from .vectors import Vec2


class CameraLockedError(RuntimeError):
    """Raised when the target of a locked camera is changed."""


class Camera:
    """Tracks a target position and zoom scale centred on the screen."""

    def __init__(self, target: Vec2 = Vec2(0.0, 0.0), scale: float = 1.0) -> None:
        self._target = target
        self.scale = scale
        self._locked = False
        self.lock_target = target
        self.lock_scale = scale
        self._moved = False
        self._active = False

    def to_screen_space(self, world: Vec2, screen_size: Vec2) -> Vec2:
        """Convert a world position to screen space for a screen of the given size."""
        return (world - self._target) * self.scale + screen_size / 2.0

    def to_world_space(self, screen: Vec2, screen_size: Vec2) -> Vec2:
        """Convert a screen position to world space for a screen of the given size."""
        return (screen - screen_size / 2.0) / self.scale + self._target

    def lock(self) -> None:
        """Freeze the target, remembering the current target and scale."""
        self._locked = True
        self.lock_target = self._target
        self.lock_scale = self.scale

    def unlock(self) -> None:
        self._locked = False
        self._moved = False

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    @property
    def target(self) -> Vec2:
        return self._target

    @target.setter
    def target(self, new_target: Vec2) -> None:
        if self._locked:
            raise CameraLockedError("Attempt to update camera target while locked.")
        self._target = new_target
        self._moved = True

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def moved(self) -> bool:
        return self._moved

    @property
    def active(self) -> bool:
        return self._active
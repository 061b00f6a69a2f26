"""Named interpolation animators advanced by frame time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .easings import ease_linear_none

EasingFunction = Callable[[float, float, float, float], float]


@dataclass
class LerpAnimator:
    """Interpolates from ``start_value`` by ``change`` over ``duration``."""

    name: str
    start_value: float
    change: float
    duration: float
    time: float = 0.0
    started: bool = True
    can_delete: bool = False
    should_delete: bool = False
    callback: EasingFunction = field(default=ease_linear_none)

    def is_finished(self) -> bool:
        return self.time >= self.duration

    def value(self) -> float:
        """The current value, clamped between the start and end values."""
        result = self.callback(self.time, self.start_value, self.change, self.duration)
        end = self.start_value + self.change
        low, high = min(self.start_value, end), max(self.start_value, end)
        return min(max(result, low), high)


class Lerp:
    """A registry of animators looked up by name."""

    def __init__(self) -> None:
        self._animators: dict[str, LerpAnimator] = {}

    def get_lerp(self, name: str, start_value: float, change: float, duration: float) -> LerpAnimator:
        """Return the animator called ``name``, creating it if it does not exist yet."""
        animator = self._animators.get(name)
        if animator is None:
            animator = LerpAnimator(name, start_value, change, duration)
            self._animators[name] = animator
        return animator

    def find(self, name: str) -> LerpAnimator | None:
        return self._animators.get(name)

    def reset_time(self, name: str) -> None:
        animator = self._animators.get(name)
        if animator is not None:
            animator.time = 0.0

    def update(self, frame_time: float) -> None:
        """Advance every started animator; finished ones are marked deletable."""
        for animator in self._animators.values():
            if not animator.started:
                continue
            if animator.is_finished():
                animator.can_delete = True
            else:
                animator.time += frame_time
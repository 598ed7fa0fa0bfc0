"""Orbiting camera steered by mouse drags and the scroll wheel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from jumpin.geometry import Matrix, Vector3

DEFAULT_CAMERA_DISTANCE = 5.0


@dataclass(frozen=True)
class MouseState:
    """Snapshot of the mouse."""

    x: int = 0
    y: int = 0
    left_button: bool = False
    scroll_wheel_value: int = 0
    relative: bool = False


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


class DebugCamera:
    """Camera orbiting the origin; dragging rotates it, scrolling down zooms out."""

    def __init__(
        self,
        width: int,
        height: int,
        reset_scroll_wheel: Callable[[], None] | None = None,
    ) -> None:
        self._y_angle = 0.0
        self._y_tmp = 0.0
        self._x_angle = 0.0
        self._x_tmp = 0.0
        self._drag_x = 0
        self._drag_y = 0
        self._scroll_wheel_value = 0
        self._screen = (width, height)
        self._was_left_down = False
        self._reset_scroll_wheel = reset_scroll_wheel
        self.view = Matrix.identity()
        self.eye = Vector3()
        self.target = Vector3()
        self.set_window_size(width, height)
        if reset_scroll_wheel is not None:
            reset_scroll_wheel()

    @property
    def window_size(self) -> tuple[int, int]:
        """Window size given at construction."""
        return self._screen

    def set_window_size(self, width: int, height: int) -> None:
        """Scale drag distances relative to the window size."""
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self._sx = 1.0 / float(width)
        self._sy = 1.0 / float(height)

    def update(self, state: MouseState) -> None:
        """Apply a mouse state and rebuild the view matrix."""
        if state.relative:
            return

        pressed = state.left_button and not self._was_left_down
        released = not state.left_button and self._was_left_down
        self._was_left_down = state.left_button

        if pressed:
            self._drag_x, self._drag_y = state.x, state.y
        elif released:
            self._x_angle = self._x_tmp
            self._y_angle = self._y_tmp
        if state.left_button:
            self._motion(state.x, state.y)

        self._scroll_wheel_value = state.scroll_wheel_value
        if self._scroll_wheel_value > 0:
            self._scroll_wheel_value = 0
            if self._reset_scroll_wheel is not None:
                self._reset_scroll_wheel()

        rotation = Matrix.rotation_y(self._y_tmp) @ Matrix.rotation_x(self._x_tmp)
        inverse = rotation.invert()
        distance = DEFAULT_CAMERA_DISTANCE - _truncating_div(
            self._scroll_wheel_value, 100
        )
        eye = Vector3(0.0, 1.0, 1.0).transform(inverse) * distance
        up = Vector3(0.0, 1.0, 0.0).transform(inverse)
        target = Vector3()

        self.eye = eye
        self.target = target
        self.view = Matrix.look_at(eye, target, up)

    def _motion(self, x: int, y: int) -> None:
        dx = (x - self._drag_x) * self._sx
        dy = (y - self._drag_y) * self._sy
        if dx != 0.0 or dy != 0.0:
            self._x_tmp = self._x_angle + dy * math.pi
            self._y_tmp = self._y_angle + dx * math.pi
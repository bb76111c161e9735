from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


@dataclass
class CameraState:
    position: np.ndarray
    target: np.ndarray


class Camera:
    """Eased camera whose top-left corner never leaves the world."""

    def __init__(
        self,
        view_size: tuple[int, int],
        world_size: tuple[float, float],
    ) -> None:
        if view_size[0] > world_size[0] or view_size[1] > world_size[1]:
            raise ValueError("Camera view must fit inside the world")
        self._view_size = view_size
        self._world_size = world_size
        self._state = CameraState(
            position=np.array([0.0, 0.0], dtype=float),
            target=np.array([0.0, 0.0], dtype=float),
        )

    @property
    def view_size(self) -> tuple[int, int]:
        return self._view_size

    @property
    def world_size(self) -> tuple[float, float]:
        return self._world_size

    @property
    def max_position(self) -> tuple[float, float]:
        return (
            self._world_size[0] - self._view_size[0],
            self._world_size[1] - self._view_size[1],
        )

    @property
    def position(self) -> np.ndarray:
        return self._state.position

    @property
    def target(self) -> np.ndarray:
        return self._state.target

    @property
    def x(self) -> float:
        return float(self._state.position[0])

    @property
    def y(self) -> float:
        return float(self._state.position[1])

    def clamp_point(self, x: float, y: float) -> tuple[float, float]:
        max_x, max_y = self.max_position
        return _clamp(x, 0.0, max_x), _clamp(y, 0.0, max_y)

    def set_position(self, position: tuple[float, float]) -> None:
        clamped = self.clamp_point(*position)
        self._state.position[:] = clamped
        self._state.target[:] = clamped

    def set_target(self, position: tuple[float, float]) -> None:
        self._state.target[:] = self.clamp_point(*position)

    def follow(self, center: tuple[float, float], drift: tuple[float, float] = (0.0, 0.0)) -> None:
        """Aim the camera so *center* sits mid-view, offset by *drift*."""

        width, height = self._view_size
        self.set_target(
            (
                center[0] - width / 2.0 + drift[0],
                center[1] - height / 2.0 + drift[1],
            )
        )

    def update(self, smoothing: float = 0.06) -> None:
        state = self._state
        state.position += (state.target - state.position) * smoothing
        state.position[:] = self.clamp_point(*state.position)

    def world_to_screen(self, x: float, y: float) -> tuple[int, int]:
        return int(round(x - self._state.position[0])), int(round(y - self._state.position[1]))

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        return sx + float(self._state.position[0]), sy + float(self._state.position[1])

    def view_rect(self, padding: float = 0.0) -> tuple[float, float, float, float]:
        x0, y0 = self._state.position
        width, height = self._view_size
        return (
            float(x0) - padding,
            float(y0) - padding,
            float(x0) + width + padding,
            float(y0) + height + padding,
        )

    def sees(self, x: float, y: float, padding: float = 0.0) -> bool:
        left, top, right, bottom = self.view_rect(padding)
        return left < x < right and top < y < bottom


__all__ = ["Camera", "CameraState"]

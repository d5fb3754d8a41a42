"""2D cameras and a stack of active camera transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Camera2D:
    """A camera: ``target`` in the world appears at ``offset`` on screen."""

    offset: tuple = (0.0, 0.0)
    target: tuple = (0.0, 0.0)
    rotation: float = 0.0
    zoom: float = 1.0


def to_world_coords(camera: Camera2D, x: float, y: float) -> tuple[float, float]:
    """Map a screen point to world space through ``camera``."""
    angle = math.radians(-camera.rotation)
    c, s = math.cos(angle), math.sin(angle)
    xx = (x - camera.offset[0]) / camera.zoom
    yy = (y - camera.offset[1]) / camera.zoom
    return (c * xx - s * yy + camera.target[0], s * xx + c * yy + camera.target[1])


def to_camera_coords(camera: Camera2D, x: float, y: float) -> tuple[float, float]:
    """Map a world point to screen space through ``camera``."""
    angle = math.radians(camera.rotation)
    c, s = math.cos(angle), math.sin(angle)
    xx = x - camera.target[0]
    yy = y - camera.target[1]
    xi = c * xx - s * yy
    yi = s * xx + c * yy
    return (xi * camera.zoom + camera.offset[0], yi * camera.zoom + camera.offset[1])


class TransformationStack:
    """Nested cameras; coordinate conversion uses the bottom one."""

    def __init__(self) -> None:
        self._cameras: list[Camera2D] = []

    def __len__(self) -> int:
        return len(self._cameras)

    @property
    def active(self) -> bool:
        """True while any camera is pushed."""
        return bool(self._cameras)

    @property
    def cameras(self) -> tuple[Camera2D, ...]:
        return tuple(self._cameras)

    def push(self, camera: Camera2D) -> None:
        """Push a camera on top of the stack."""
        self._cameras.append(camera)

    def pop(self) -> Camera2D:
        """Remove and return the top camera."""
        if not self._cameras:
            raise IndexError("transformation stack is empty")
        return self._cameras.pop()

    def _base(self) -> Camera2D:
        if not self._cameras:
            raise IndexError("transformation stack is empty")
        return self._cameras[0]

    def to_world_coords(self, x: float, y: float) -> tuple[float, float]:
        """Screen to world through the bottom camera."""
        return to_world_coords(self._base(), x, y)

    def to_camera_coords(self, x: float, y: float) -> tuple[float, float]:
        """World to screen through the bottom camera."""
        return to_camera_coords(self._base(), x, y)
"""Eight-way facing directions and their sprite-sheet rows."""

from __future__ import annotations

import math
from enum import Enum, auto


class Direction(Enum):
    """Compass direction in screen space (y grows downwards)."""

    NORTH = auto()
    NORTH_EAST = auto()
    EAST = auto()
    SOUTH_EAST = auto()
    SOUTH = auto()
    SOUTH_WEST = auto()
    WEST = auto()
    NORTH_WEST = auto()


_ROWS = {
    Direction.NORTH: 3,
    Direction.NORTH_EAST: 7,
    Direction.EAST: 2,
    Direction.SOUTH_EAST: 6,
    Direction.SOUTH: 0,
    Direction.SOUTH_WEST: 4,
    Direction.WEST: 1,
    Direction.NORTH_WEST: 5,
}


def get_direction(dx: float, dy: float) -> Direction:
    """Snap a screen-space vector to the nearest of eight directions."""
    angle = math.atan2(-dy, dx)
    p = math.pi
    if -p / 8 <= angle < p / 8:
        return Direction.EAST
    if p / 8 <= angle < 3 * p / 8:
        return Direction.NORTH_EAST
    if 3 * p / 8 <= angle < 5 * p / 8:
        return Direction.NORTH
    if 5 * p / 8 <= angle < 7 * p / 8:
        return Direction.NORTH_WEST
    if angle >= 7 * p / 8 or angle < -7 * p / 8:
        return Direction.WEST
    if -7 * p / 8 <= angle < -5 * p / 8:
        return Direction.SOUTH_WEST
    if -5 * p / 8 <= angle < -3 * p / 8:
        return Direction.SOUTH
    if -3 * p / 8 <= angle < -p / 8:
        return Direction.SOUTH_EAST
    return Direction.NORTH


def direction_rows() -> dict[Direction, int]:
    """Sprite-sheet row for each direction."""
    return dict(_ROWS)


def direction_row(direction: Direction) -> int:
    """Sprite-sheet row for one direction."""
    return _ROWS[direction]
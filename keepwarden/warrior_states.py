"""Idle, running and attacking states of a warrior, with their animations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from keepwarden.animation import Animation
from keepwarden.directions import Direction, direction_row
from keepwarden.sprites import DrawCommand, Rect, SpriteHolder
from keepwarden.state_machine import State
from keepwarden.warrior_types import WarriorType, warrior_size, warrior_sprite_ids

# Positions in the list returned by warrior_sprite_ids.
IDLE_SHEET = 0
ATTACK_SHEET = 1
RUN_SHEET = 3

ATTACK_SECONDS_PER_FRAME = 0.12

_EASTWARD = frozenset({Direction.NORTH_EAST, Direction.EAST, Direction.SOUTH_EAST})


@dataclass
class WarriorStateParams:
    """What a warrior state needs: the warrior, its kind and where to draw."""

    warrior: Any
    warrior_type: WarriorType
    sprites: Optional[SpriteHolder] = None


class _WarriorState(State):
    sheet = IDLE_SHEET

    def __init__(self) -> None:
        self.params: Optional[WarriorStateParams] = None
        self.animation: Optional[Animation] = None

    def _make_animation(self, params: WarriorStateParams) -> Animation:
        raise NotImplementedError

    def _flipped(self) -> bool:
        return False

    def _require_animation(self) -> Animation:
        if self.animation is None or self.params is None:
            raise RuntimeError("state has not been entered")
        return self.animation

    def enter(self, params: WarriorStateParams) -> None:
        """Start the animation for the warrior's current facing."""
        self.params = params
        self.animation = self._make_animation(params)

    def exit(self) -> None:
        """Drop the animation."""
        self.animation = None

    def update(self, dt: float) -> None:
        """Advance the animation."""
        self._require_animation().update(dt)

    def draw(self) -> Optional[DrawCommand]:
        """Draw the current frame centred on the warrior."""
        animation = self._require_animation()
        params = self.params
        if params.sprites is None:
            raise RuntimeError("no sprite holder to draw with")
        sprite_ids = warrior_sprite_ids(params.warrior_type)
        if not sprite_ids:
            raise ValueError(f"no sprites for {params.warrior_type.name}")
        size = 2 * warrior_size(params.warrior_type)
        warrior = params.warrior
        dest = Rect(warrior.x - size, warrior.y - size, 2 * size, 2 * size)
        return params.sprites.draw_sprite(
            sprite_ids[self.sheet],
            animation.current_frame(),
            dest,
            flipped=self._flipped(),
        )


class IdleWarrior(_WarriorState):
    """Three looping frames from the row of the facing direction."""

    sheet = IDLE_SHEET

    def _make_animation(self, params: WarriorStateParams) -> Animation:
        start = direction_row(params.warrior.direction_facing) * 3
        return Animation([start, start + 1, start + 2], True)

    def enter(self, params: WarriorStateParams) -> None:
        super().enter(params)

    def exit(self) -> None:
        super().exit()

    def update(self, dt: float) -> None:
        super().update(dt)

    def draw(self) -> Optional[DrawCommand]:
        return super().draw()


class RunningWarrior(_WarriorState):
    """Eight looping frames from the row of the facing direction."""

    sheet = RUN_SHEET

    def _make_animation(self, params: WarriorStateParams) -> Animation:
        start = direction_row(params.warrior.direction_facing) * 8
        return Animation([start + i for i in range(8)], True)

    def enter(self, params: WarriorStateParams) -> None:
        super().enter(params)

    def exit(self) -> None:
        super().exit()

    def update(self, dt: float) -> None:
        super().update(dt)

    def draw(self) -> Optional[DrawCommand]:
        return super().draw()


class AttackingWarrior(_WarriorState):
    """A quick three-frame swing; the warrior stops attacking when it ends.

    Spearmen have a single attack row, mirrored when facing east.
    """

    sheet = ATTACK_SHEET

    def _is_spearman(self) -> bool:
        return self.params is not None and self.params.warrior_type is WarriorType.SPEARMAN

    def _make_animation(self, params: WarriorStateParams) -> Animation:
        if params.warrior_type is WarriorType.SPEARMAN:
            start = 0
        else:
            start = direction_row(params.warrior.direction_facing) * 3
        return Animation([start, start + 1, start + 2], False, ATTACK_SECONDS_PER_FRAME)

    def _flipped(self) -> bool:
        return self._is_spearman() and self.params.warrior.direction_facing in _EASTWARD

    def enter(self, params: WarriorStateParams) -> None:
        super().enter(params)

    def exit(self) -> None:
        super().exit()

    def update(self, dt: float) -> None:
        animation = self._require_animation()
        animation.update(dt)
        if animation.is_finished():
            self.params.warrior.is_attacking = False

    def draw(self) -> Optional[DrawCommand]:
        return super().draw()
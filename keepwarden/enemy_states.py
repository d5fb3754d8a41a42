"""Running and attacking states of an enemy, with their animations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from keepwarden.animation import Animation
from keepwarden.directions import Direction, direction_row
from keepwarden.sprites import DrawCommand, Rect, SpriteHolder
from keepwarden.state_machine import State

# Positions in an enemy's list of sprite sheets.
ATTACK_SHEET = 0
RUN_SHEET = 2

ATTACK_SECONDS_PER_FRAME = 0.12

_EASTWARD = frozenset({Direction.NORTH_EAST, Direction.EAST, Direction.SOUTH_EAST})


@dataclass
class EnemyStateParams:
    """What an enemy state needs.

    ``enemy`` has ``x``, ``y``, ``direction_facing`` and ``is_attacking``;
    ``sprite_ids`` lists the enemy's sheets and ``size`` is its body radius.
    """

    enemy: Any
    sprite_ids: Sequence[str]
    size: float
    sprites: Optional[SpriteHolder] = None
    enemy_type: Any = None


class _EnemyState(State):
    sheet = RUN_SHEET

    def __init__(self) -> None:
        self.params: Optional[EnemyStateParams] = None
        self.animation: Optional[Animation] = None

    def _make_animation(self, params: EnemyStateParams) -> Animation:
        raise NotImplementedError

    def _flipped(self) -> bool:
        return False

    def _require_animation(self) -> Animation:
        if self.animation is None or self.params is None:
            raise RuntimeError("state has not been entered")
        return self.animation

    def enter(self, params: EnemyStateParams) -> None:
        self.params = params
        self.animation = self._make_animation(params)

    def exit(self) -> None:
        self.animation = None

    def update(self, dt: float) -> None:
        self._require_animation().update(dt)

    def draw(self) -> Optional[DrawCommand]:
        animation = self._require_animation()
        params = self.params
        if params.sprites is None:
            raise RuntimeError("no sprite holder to draw with")
        if len(params.sprite_ids) <= self.sheet:
            raise ValueError("enemy has no sprite sheet for this state")
        size = 2 * params.size
        enemy = params.enemy
        dest = Rect(enemy.x - size, enemy.y - size, 2 * size, 2 * size)
        return params.sprites.draw_sprite(
            params.sprite_ids[self.sheet],
            animation.current_frame(),
            dest,
            flipped=self._flipped(),
        )


class RunningEnemy(_EnemyState):
    """Eight looping frames from the row of the facing direction."""

    sheet = RUN_SHEET

    def _make_animation(self, params: EnemyStateParams) -> Animation:
        start = direction_row(params.enemy.direction_facing) * 8
        return Animation([start + i for i in range(8)], True)

    def enter(self, params: EnemyStateParams) -> None:
        """Start running in the enemy's current facing."""
        super().enter(params)

    def exit(self) -> None:
        """Drop the animation."""
        super().exit()

    def update(self, dt: float) -> None:
        """Advance the animation."""
        super().update(dt)

    def draw(self) -> Optional[DrawCommand]:
        """Draw the current frame centred on the enemy."""
        return super().draw()


class AttackingEnemy(_EnemyState):
    """A quick three-frame swing from a single row, mirrored when facing east.

    The enemy stops attacking when the swing ends.
    """

    sheet = ATTACK_SHEET

    def _make_animation(self, params: EnemyStateParams) -> Animation:
        return Animation([0, 1, 2], False, ATTACK_SECONDS_PER_FRAME)

    def _flipped(self) -> bool:
        return self.params.enemy.direction_facing in _EASTWARD

    def enter(self, params: EnemyStateParams) -> None:
        """Start the swing."""
        super().enter(params)

    def exit(self) -> None:
        """Drop the animation."""
        super().exit()

    def update(self, dt: float) -> None:
        """Advance the swing and end the attack once it has played."""
        animation = self._require_animation()
        animation.update(dt)
        if animation.is_finished():
            self.params.enemy.is_attacking = False

    def draw(self) -> Optional[DrawCommand]:
        """Draw the current frame centred on the enemy."""
        return super().draw()
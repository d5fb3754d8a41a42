"""Idle and shooting states of an archer standing on a defense tower."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from keepwarden.animation import Animation
from keepwarden.directions import direction_row, get_direction
from keepwarden.sprites import DrawCommand, Rect, SpriteHolder
from keepwarden.state_machine import State

ARCHER_IDLE_SPRITE_ID = "archer_idle"
ARCHER_ATTACKS_SPRITE_ID = "archer_attacks"
TOWER_SPRITE_ID = "tower"

DEFAULT_TOWER_RADIUS = 40.0
# Height of the tower's base above the archer, in tower-sprite pixels.
TOWER_BASE_OFFSET = 260.0
IDLE_SCALE = 1.3

ArrowLauncher = Callable[[float, float, float, float], Any]


@dataclass
class ArcherStateParams:
    """Shared by both archer states.

    ``archer`` has ``x``, ``y``, ``direction_attacking``, ``attack_range``,
    ``tower`` (whose ``enemies`` is a deque of targets) and
    ``change_state(name, params)``. ``launch_arrow(x, y, dx, dy)`` fires an
    arrow from ``(x, y)`` along ``(dx, dy)``.
    """

    archer: Any
    sprites: SpriteHolder
    launch_arrow: ArrowLauncher
    tower_radius: float = DEFAULT_TOWER_RADIUS
    enemy: Any = None
    enemy_x: float = 0.0
    enemy_y: float = 0.0


def _dest(archer: Any, cr: float) -> Rect:
    return Rect(archer.x - cr, archer.y - 2 * cr + 0.2 * cr, 2 * cr, 2 * cr)


class _ArcherState(State):
    sprite_id = ARCHER_IDLE_SPRITE_ID
    scale = 1.0

    def __init__(self) -> None:
        self.params: Optional[ArcherStateParams] = None
        self.animation: Optional[Animation] = None

    def _require_animation(self) -> Animation:
        if self.animation is None or self.params is None:
            raise RuntimeError("state has not been entered")
        return self.animation

    def draw(self) -> Optional[DrawCommand]:
        animation = self._require_animation()
        cr = self.scale * self.params.tower_radius
        return self.params.sprites.draw_sprite(
            self.sprite_id, animation.current_frame(), _dest(self.params.archer, cr)
        )


class IdleArcher(_ArcherState):
    """Waits on the tower and picks the first queued enemy in range."""

    sprite_id = ARCHER_IDLE_SPRITE_ID
    scale = IDLE_SCALE

    def __init__(self, attack_cooldown: float = 1.0) -> None:
        super().__init__()
        self.can_attack = True
        self.attack_cooldown = attack_cooldown
        self.attack_cooldown_tracker = 0.0

    def enter(self, params: ArcherStateParams) -> None:
        """Loop three frames facing the last direction of attack."""
        self.params = params
        start = direction_row(params.archer.direction_attacking) * 3
        self.animation = Animation([start, start + 1, start + 2], True)

    def exit(self) -> None:
        """Drop the animation."""
        self.animation = None

    def _range_origin(self) -> tuple[float, float]:
        params = self.params
        tower_width, _ = params.sprites.sprite_size(TOWER_SPRITE_ID)
        kr = 2.0 * params.tower_radius / tower_width
        return params.archer.x, params.archer.y + TOWER_BASE_OFFSET * kr

    def update(self, dt: float) -> None:
        """Animate, and start shooting at the first live enemy in range.

        Dead and out-of-range enemies are dropped from the tower's queue.
        """
        self._require_animation().update(dt)
        if not self.can_attack:
            self.attack_cooldown_tracker += dt
            if self.attack_cooldown_tracker >= self.attack_cooldown:
                self.can_attack = True

        params = self.params
        archer = params.archer
        enemies = archer.tower.enemies
        if not (enemies and self.can_attack):
            return
        origin = self._range_origin()
        while enemies:
            enemy = enemies[0]
            if not enemy.is_alive():
                enemies.popleft()
                continue
            if math.dist(origin, (enemy.x, enemy.y)) >= archer.attack_range:
                enemies.popleft()
                continue
            params.enemy_x = enemy.x
            params.enemy_y = enemy.y
            params.enemy = enemy
            archer.change_state("PlayAnimation", params)
            break

    def draw(self) -> Optional[DrawCommand]:
        """Draw the archer at rest on the tower."""
        return super().draw()


class PlayAnimation(_ArcherState):
    """Turns to the target, plays one draw of the bow, then fires on leaving."""

    sprite_id = ARCHER_ATTACKS_SPRITE_ID
    scale = 1.0

    def enter(self, params: ArcherStateParams) -> None:
        """Face the target and start the shot."""
        self.params = params
        archer = params.archer
        archer.direction_attacking = get_direction(
            params.enemy_x - archer.x, params.enemy_y - archer.y
        )
        start = direction_row(archer.direction_attacking) * 3
        self.animation = Animation([start, start + 1, start + 2], False)

    def update(self, dt: float) -> None:
        """Advance the shot; return to idle when it has played."""
        animation = self._require_animation()
        animation.update(dt)
        if animation.is_finished():
            self.params.archer.change_state("Idle", self.params)

    def exit(self) -> None:
        """Fire the arrow at the target, or where it was if it has died."""
        self.animation = None
        params = self.params
        if params is None:
            return
        archer = params.archer
        enemy = params.enemy
        if enemy is not None and enemy.is_alive():
            tx, ty = enemy.x, enemy.y
        else:
            tx, ty = params.enemy_x, params.enemy_y
        params.enemy = None
        params.launch_arrow(archer.x, archer.y, tx - archer.x, ty - archer.y)

    def draw(self) -> Optional[DrawCommand]:
        """Draw the shot in progress."""
        return super().draw()
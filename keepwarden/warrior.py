"""Castle warriors: health, attacks with cooldown, and animation states."""

from __future__ import annotations

from typing import Any, Optional

from keepwarden.directions import Direction
from keepwarden.state_machine import StateMachine
from keepwarden.timer import Timer
from keepwarden.warrior_states import (
    AttackingWarrior,
    IdleWarrior,
    RunningWarrior,
    WarriorStateParams,
)
from keepwarden.warrior_types import WarriorType, warrior_size


class Warrior:
    """A warrior kept in formation around a castle.

    ``world`` provides the game services a warrior uses:
    ``sprites`` (a SpriteHolder), ``create_collider(warrior, radius)``,
    ``move_collider(collider, x, y)``, ``release_collider(collider)``,
    ``add_formation_fixture(radius, rel_x, rel_y)``,
    ``remove_formation_fixture(fixture)``, ``add_corpse(x, y, warrior_type)``
    and ``emit_blood(x, y, count)``.
    """

    WARRIOR_TYPE: Optional[WarriorType] = None
    DAMAGE = 0.0
    ATTACK_DELAY = 0.3
    BLOOD_PARTICLES = 10

    def __init__(
        self,
        rel_x: float,
        rel_y: float,
        world: Any,
        *,
        hp: float = 100.0,
        attack_cooldown: float = 1.0,
    ) -> None:
        if self.WARRIOR_TYPE is None:
            raise TypeError("Warrior must be specialised with a WARRIOR_TYPE")
        self.warrior_type = self.WARRIOR_TYPE
        self.size = warrior_size(self.warrior_type)
        self.rel_x = rel_x
        self.rel_y = rel_y
        self.x = rel_x
        self.y = rel_y
        self.world = world
        self.hp = hp
        self.damage = 0.0
        self.alive = True
        self.can_attack = True
        self.attack_cooldown = attack_cooldown
        self.attack_cooldown_tracker = 0.0
        self.is_attacking = False
        self.is_idle = True
        self.direction_facing = Direction.SOUTH
        self.previous_direction_facing = Direction.SOUTH
        self.timer = Timer()
        self.state_machine: Optional[StateMachine] = None
        self.collider: Any = None
        self.fixture: Any = None
        self.graphics_types: list[str] = []

    def _params(self) -> WarriorStateParams:
        return WarriorStateParams(self, self.warrior_type, getattr(self.world, "sprites", None))

    def _machine(self) -> StateMachine:
        if self.state_machine is None:
            raise RuntimeError("warrior has not been initialised")
        return self.state_machine

    def is_alive(self) -> bool:
        return self.alive

    def init(self) -> None:
        """Create the physics body and formation slot and start idling."""
        self.collider = self.world.create_collider(self, self.size)
        self.fixture = self.world.add_formation_fixture(self.size, self.rel_x, self.rel_y)
        self.state_machine = StateMachine(
            {
                "Idle": IdleWarrior(),
                "Running": RunningWarrior(),
                "Attacking": AttackingWarrior(),
            }
        )
        self.state_machine.change_state("Idle", self._params())
        self.damage = self.DAMAGE

    def state_update(self) -> None:
        """Switch animation state to match what the warrior is doing."""
        machine = self._machine()
        current = machine.current_state_name
        if self.is_attacking:
            if current != "Attacking":
                machine.change_state("Attacking", self._params())
        elif self.is_idle:
            if current != "Idle":
                machine.change_state("Idle", self._params())
        elif current != "Running" or self.previous_direction_facing != self.direction_facing:
            machine.change_state("Running", self._params())
        self.previous_direction_facing = self.direction_facing

    def update(self, dt: float) -> None:
        """Advance timers, animation, cooldown and state by ``dt`` seconds."""
        if not self.alive:
            if self.collider is not None:
                self.world.release_collider(self.collider)
                self.collider = None
            return
        machine = self._machine()
        self.timer.update(dt)
        machine.update(dt)
        self.world.move_collider(self.collider, self.x, self.y)
        if self.hp <= 0:
            self.die()
        if not self.can_attack:
            self.attack_cooldown_tracker += dt
            if self.attack_cooldown_tracker >= self.attack_cooldown:
                self.can_attack = True
        self.state_update()

    def draw(self) -> None:
        """Draw the current animation frame."""
        self._machine().draw()

    def die(self) -> None:
        """Leave the formation and leave a corpse behind."""
        self.world.remove_formation_fixture(self.fixture)
        self.alive = False
        self.world.add_corpse(self.x, self.y, self.warrior_type)

    def take_attack(self, damage: float) -> None:
        """Lose ``damage`` health and bleed."""
        self.hp -= damage
        self.world.emit_blood(self.x, self.y, self.BLOOD_PARTICLES)

    def try_attack(self, target: Any) -> None:
        """Swing at ``target``; the blow lands shortly after if the target still lives."""
        if not self.can_attack:
            return
        self.is_attacking = True

        def strike(dt: float) -> None:
            if not target.is_alive():
                return
            target.take_attack(self.damage)
            self.can_attack = False
            self.attack_cooldown_tracker = 0.0

        self.timer.after(self.ATTACK_DELAY, strike)


class ShieldBearer(Warrior):
    """Sturdy footman."""

    WARRIOR_TYPE = WarriorType.SHIELD_BEARER
    DAMAGE = 60.0

    def init(self) -> None:
        self.graphics_types.append("warrior")
        super().init()


class Spearman(Warrior):
    """Spear-armed footman."""

    WARRIOR_TYPE = WarriorType.SPEARMAN
    DAMAGE = 60.0


class Swordsman(Warrior):
    """Heavy-hitting knight."""

    WARRIOR_TYPE = WarriorType.SWORDSMAN
    DAMAGE = 100.0


_CLASSES = {
    WarriorType.SHIELD_BEARER: ShieldBearer,
    WarriorType.SWORDSMAN: Swordsman,
    WarriorType.SPEARMAN: Spearman,
}


def create_warrior(
    warrior_type: WarriorType, rel_x: float, rel_y: float, world: Any
) -> Warrior:
    """Build a warrior of the given kind; kinds without their own class get a shield bearer."""
    return _CLASSES.get(warrior_type, ShieldBearer)(rel_x, rel_y, world)
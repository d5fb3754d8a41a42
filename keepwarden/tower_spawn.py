"""Places where towers may be built, and the periodic offer of new ones."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from keepwarden.rules import random_float_in_range, random_int_in_range
from keepwarden.timer import Timer

AddTowerFactory = Callable[[float, float, "TowerSpawnRing"], Any]


@dataclass
class TowerSpawnLocation:
    """A build site, relative to the spawn centre."""

    x: float
    y: float
    occupied: bool = False
    tower: Any = None
    add_tower: Any = None

    @property
    def available(self) -> bool:
        return not self.occupied and self.add_tower is None


class TowerSpawnRing:
    """Build sites at one distance from the castle."""

    def __init__(
        self,
        locations: Iterable[tuple[float, float]],
        add_tower_factory: AddTowerFactory,
        center: tuple[float, float] = (0.0, 0.0),
        rng: Optional[random.Random] = None,
    ) -> None:
        self.locations = [TowerSpawnLocation(x, y) for x, y in locations]
        self.center = center
        self._factory = add_tower_factory
        self._rng = rng

    def _world(self, location: TowerSpawnLocation) -> tuple[float, float]:
        return self.center[0] + location.x, self.center[1] + location.y

    def has_empty(self) -> bool:
        """True if any site has no tower."""
        return any(not loc.occupied for loc in self.locations)

    def update(self, dt: float) -> None:
        """Forget offers and towers that are gone."""
        for loc in self.locations:
            if loc.add_tower is not None and not loc.add_tower.is_alive():
                loc.add_tower = None
            if loc.tower is not None and not loc.tower.is_alive():
                loc.tower = None
                loc.occupied = False

    def assign_tower(self, tower: Any) -> bool:
        """Mark the site at the tower's position as occupied by it."""
        assigned = False
        for loc in self.locations:
            if self._world(loc) == (tower.x, tower.y):
                loc.tower = tower
                loc.occupied = True
                assigned = True
        return assigned

    def spawn_add_tower(self) -> Any:
        """Offer a tower at a free site chosen at random; None if no site is free."""
        if not any(loc.available for loc in self.locations):
            return None
        for loc in itertools.cycle(self.locations):
            if loc.available and random_int_in_range(1, 20, self._rng) < 6:
                offer = self._factory(*self._world(loc), self)
                loc.add_tower = offer
                return offer
        return None


class TowerSpawn:
    """Two rings of build sites and a timer that offers towers in the inner free ring."""

    def __init__(
        self,
        add_tower_factory: AddTowerFactory,
        center: tuple[float, float] = (0.0, 0.0),
        base_distance: float = 150.0,
        unit_distance: float = 60.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        tb, tu = base_distance, unit_distance
        ss = tb + tu
        inner = [
            (ss, ss), (0, ss), (-ss, ss), (-ss, 0),
            (-ss, -ss), (0, -ss), (ss, -ss), (ss, 0),
        ]
        ss += tu
        outer = [
            (ss, ss), (ss - tu, ss), (0, ss), (tu - ss, ss),
            (-ss, ss), (-ss, ss - tu), (-ss, 0), (-ss, tu - ss),
            (-ss, -ss), (-ss + tu, -ss), (0, -ss), (ss - tu, -ss),
            (ss, -ss), (ss, -ss + tu), (ss, 0), (ss, ss - tu),
        ]
        self.rings = [
            TowerSpawnRing(inner, add_tower_factory, center, rng),
            TowerSpawnRing(outer, add_tower_factory, center, rng),
        ]
        self.timer = Timer()
        self.interval = random_float_in_range(4.0, 6.0, rng)
        self.timer.every(self.interval, self._offer)

    def _offer(self, dt: float) -> None:
        for ring in self.rings:
            if ring.has_empty():
                ring.spawn_add_tower()
                break

    def update(self, dt: float) -> None:
        """Advance the offer timer and tidy every ring."""
        self.timer.update(dt)
        for ring in self.rings:
            ring.update(dt)
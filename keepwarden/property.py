"""Land plots laid out in square rings around a castle, and what they produce."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Union

from keepwarden.timer import Timer


class PropertyType(Enum):
    """What a plot of land is used for."""

    GOLD_MINE = "GOLD_MINE"
    FOREST = "FOREST"
    STONE_QUARRY = "STONE_QUARRY"
    FARM = "FARM"
    PASTURE = "PASTURE"
    RESIDENTIAL = "RESIDENTIAL"
    MILITARY = "MILITARY"
    BARREN = "BARREN"


DEFAULT_PROPERTY_CHANCES = {
    "GOLD_MINE": 1,
    "FOREST": 2,
    "STONE_QUARRY": 1,
    "FARM": 3,
    "RESIDENTIAL": 1,
    "BARREN": 6,
}

# resource -> (seconds per cycle, amount per cycle)
PRODUCTION: dict[str, tuple[float, float]] = {
    "gold": (5.0, 10.0),
    "wood": (4.0, 10.0),
    "stone": (6.0, 10.0),
    "food": (3.0, 10.0),
}

# Forests also yield stone and food, and quarries also yield food.
_PRODUCES: dict[PropertyType, tuple[str, ...]] = {
    PropertyType.GOLD_MINE: ("gold",),
    PropertyType.FOREST: ("wood", "stone", "food"),
    PropertyType.STONE_QUARRY: ("stone", "food"),
    PropertyType.FARM: ("food",),
}


@dataclass(frozen=True)
class RingLayout:
    """Sizes that fix where the plots of each ring lie."""

    castle_width: float = 200.0
    road_width: float = 20.0
    property_width: float = 40.0
    property_height: float = 40.0

    def diagonal_offset(self, ring_no: int) -> float:
        """Distance from the centre to the corner plots of ring ``ring_no``."""
        return (
            self.castle_width / 2
            + (ring_no + 1) * self.road_width
            + (ring_no + 1) * self.property_height
            - self.property_height / 2
        )


class ChanceList:
    """Weighted draws without replacement from a bag that refills when empty."""

    def __init__(
        self,
        weights: Union[Mapping[str, int], Iterable[tuple[str, int]]],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.weights = dict(weights)
        if any(w < 0 for w in self.weights.values()):
            raise ValueError("weights must not be negative")
        if sum(self.weights.values()) <= 0:
            raise ValueError("a chance list needs at least one positive weight")
        self._rng = rng or random.Random()
        self._bag: list[str] = []

    def next(self) -> str:
        """Draw the next item."""
        if not self._bag:
            self._bag = [name for name, w in self.weights.items() for _ in range(w)]
        return self._bag.pop(self._rng.randrange(len(self._bag)))


class Property:
    """One plot; productive plots add resources to their ring's region over time."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        property_type: PropertyType,
        ring: Any,
        production: Optional[Mapping[str, tuple[float, float]]] = None,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.property_type = property_type
        self.ring = ring
        self.timer = Timer()
        rates = production or PRODUCTION
        for resource in _PRODUCES.get(property_type, ()):
            cycle, amount = rates[resource]
            self.timer.every(cycle, self._producer(resource, amount))

    def _producer(self, resource: str, amount: float):
        def produce(dt: float) -> None:
            getattr(self.ring.region, f"add_{resource}")(amount)

        return produce

    @property
    def produces(self) -> tuple[str, ...]:
        """Resources this plot yields."""
        return _PRODUCES.get(self.property_type, ())

    def update(self, dt: float) -> None:
        """Advance production by ``dt`` seconds."""
        self.timer.update(dt)


def properties_for_ring(
    ring_no: int,
    x: float,
    y: float,
    ring: Any = None,
    layout: Optional[RingLayout] = None,
    chances: Optional[ChanceList] = None,
) -> list[Property]:
    """Lay out the plots of ring ``ring_no`` around ``(x, y)``.

    Plots run clockwise: top row left to right, right column downwards,
    bottom row right to left, left column upwards.
    """
    if ring_no < 0:
        raise ValueError("ring number must not be negative")
    layout = layout or RingLayout()
    chances = chances or ChanceList(DEFAULT_PROPERTY_CHANCES)
    d = layout.diagonal_offset(ring_no)
    pw, ph, rw = layout.property_width, layout.property_height, layout.road_width
    side = (ring_no + 1) * 2
    step_x, step_y = pw + rw, ph + rw

    positions = [(x - d + i * step_x, y - d) for i in range(side + 2)]
    positions += [(x + d, y - d + ph + rw + i * step_y) for i in range(side)]
    positions += [(x + d - i * step_x, y + d) for i in range(side + 2)]
    positions += [(x - d, y + d - ph - rw - i * step_y) for i in range(side)]

    return [
        Property(px, py, pw, ph, PropertyType(chances.next()), ring)
        for px, py in positions
    ]


class PropertyRing:
    """All plots at one distance from the castle."""

    def __init__(
        self,
        ring_no: int,
        center: tuple[float, float],
        region: Any,
        layout: Optional[RingLayout] = None,
        chances: Optional[ChanceList] = None,
    ) -> None:
        self.ring_no = ring_no
        self.region = region
        self.properties = properties_for_ring(
            ring_no, center[0], center[1], self, layout, chances
        )

    def update(self, dt: float) -> None:
        """Advance every plot in the ring."""
        for prop in self.properties:
            prop.update(dt)
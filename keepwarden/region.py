"""A castle region with its resource stock and rings of property."""

from __future__ import annotations

from typing import Optional

from keepwarden.property import (
    DEFAULT_PROPERTY_CHANCES,
    ChanceList,
    PropertyRing,
    RingLayout,
)

DEFAULT_PROPERTY_RINGS = 2


class Region:
    """The land around a castle; shrinks with the castle's health."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        gold: float = 0.0,
        wood: float = 0.0,
        stone: float = 0.0,
        food: float = 0.0,
        *,
        ring_count: int = DEFAULT_PROPERTY_RINGS,
        layout: Optional[RingLayout] = None,
        chances: Optional[ChanceList] = None,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.current_width = width
        self.current_height = height
        self.gold = gold
        self.wood = wood
        self.stone = stone
        self.food = food
        self.alive = True
        chances = chances or ChanceList(DEFAULT_PROPERTY_CHANCES)
        self.property_rings = [
            PropertyRing(i, (x, y), self, layout, chances) for i in range(ring_count)
        ]

    def is_alive(self) -> bool:
        return self.alive

    def update(self, dt: float) -> None:
        """Advance production in every ring."""
        for ring in self.property_rings:
            ring.update(dt)

    def die(self) -> None:
        self.alive = False

    def add_gold(self, amount: float) -> None:
        self.gold += amount

    def add_wood(self, amount: float) -> None:
        self.wood += amount

    def add_stone(self, amount: float) -> None:
        self.stone += amount

    def add_food(self, amount: float) -> None:
        self.food += amount

    def set_health_fraction(self, fraction: float) -> None:
        """Scale the visible extent of the region by the castle's health fraction."""
        self.current_width = self.width * fraction
        self.current_height = self.height * fraction
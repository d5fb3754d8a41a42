"""Warrior kinds, their body sizes and their sprite sheets."""

from __future__ import annotations

from enum import Enum, auto


class WarriorType(Enum):
    """Every kind of warrior the castle can field."""

    SWORDSMAN = auto()
    SPEARMAN = auto()
    ARCHER = auto()
    JAVELINER = auto()
    PIKEMAN = auto()
    CAVALRY = auto()
    SHIELD_BEARER = auto()
    BERSERKER = auto()
    WIZARD = auto()
    PRIEST = auto()
    WAR_ELEPHANT = auto()
    WAR_HORSE = auto()
    CHARIOT = auto()
    GIANT = auto()
    CAVALRY_ARCHER = auto()
    LIGHT_CAVALRY = auto()


KNIGHT_IDLE_SPRITE_ID = "knight_idle"
KNIGHT_ATTACKS_SPRITE_ID = "knight_attacks"
KNIGHT_DEAD_SPRITE_ID = "knight_dead"
KNIGHT_RUN_SPRITE_ID = "knight_run"
SPEARMAN_IDLE_SPRITE_ID = "spearman_idle"
SPEARMAN_ATTACKS_SPRITE_ID = "spearman_attacks"
SPEARMAN_DEAD_SPRITE_ID = "spearman_dead"
SPEARMAN_RUN_SPRITE_ID = "spearman_run"
FOOTMAN_IDLE_SPRITE_ID = "footman_idle"
FOOTMAN_ATTACKS_SPRITE_ID = "footman_attacks"
FOOTMAN_DEAD_SPRITE_ID = "footman_dead"
FOOTMAN_RUN_SPRITE_ID = "footman_run"

_SIZES = {
    WarriorType.SWORDSMAN: 15,
    WarriorType.SPEARMAN: 12,
    WarriorType.ARCHER: 10,
    WarriorType.JAVELINER: 15,
    WarriorType.PIKEMAN: 17,
    WarriorType.CAVALRY: 20,
    WarriorType.SHIELD_BEARER: 12,
    WarriorType.BERSERKER: 15,
    WarriorType.WIZARD: 10,
    WarriorType.PRIEST: 10,
    WarriorType.WAR_ELEPHANT: 30,
    WarriorType.WAR_HORSE: 20,
    WarriorType.CHARIOT: 35,
    WarriorType.GIANT: 40,
    WarriorType.CAVALRY_ARCHER: 20,
    WarriorType.LIGHT_CAVALRY: 20,
}

# Sheets in the order idle, attacks, dead, run.
_SPRITE_IDS = {
    WarriorType.SWORDSMAN: (
        KNIGHT_IDLE_SPRITE_ID,
        KNIGHT_ATTACKS_SPRITE_ID,
        KNIGHT_DEAD_SPRITE_ID,
        KNIGHT_RUN_SPRITE_ID,
    ),
    WarriorType.SPEARMAN: (
        SPEARMAN_IDLE_SPRITE_ID,
        SPEARMAN_ATTACKS_SPRITE_ID,
        SPEARMAN_DEAD_SPRITE_ID,
        SPEARMAN_RUN_SPRITE_ID,
    ),
    WarriorType.SHIELD_BEARER: (
        FOOTMAN_IDLE_SPRITE_ID,
        FOOTMAN_ATTACKS_SPRITE_ID,
        FOOTMAN_DEAD_SPRITE_ID,
        FOOTMAN_RUN_SPRITE_ID,
    ),
}


def warrior_size(warrior_type: WarriorType) -> int:
    """Body radius of a warrior kind in pixels."""
    return _SIZES[warrior_type]


def warrior_sprite_ids(warrior_type: WarriorType) -> list[str]:
    """Sprite ids ``[idle, attacks, dead, run]``; empty for kinds without art."""
    return list(_SPRITE_IDS.get(warrior_type, ()))
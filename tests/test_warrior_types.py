import pytest

from keepwarden.warrior_types import (
    FOOTMAN_ATTACKS_SPRITE_ID,
    KNIGHT_IDLE_SPRITE_ID,
    KNIGHT_RUN_SPRITE_ID,
    SPEARMAN_DEAD_SPRITE_ID,
    WarriorType,
    warrior_size,
    warrior_sprite_ids,
)


@pytest.mark.parametrize("warrior_type", list(WarriorType))
def test_every_type_has_positive_size(warrior_type):
    assert warrior_size(warrior_type) > 0


def test_pinned_sizes():
    assert warrior_size(WarriorType.GIANT) == 40
    assert warrior_size(WarriorType.SHIELD_BEARER) == 12


def test_relative_sizes():
    assert warrior_size(WarriorType.SWORDSMAN) == warrior_size(WarriorType.JAVELINER)
    assert warrior_size(WarriorType.SPEARMAN) == warrior_size(WarriorType.SHIELD_BEARER)
    assert warrior_size(WarriorType.CHARIOT) > warrior_size(WarriorType.WAR_ELEPHANT)


def test_swordsman_sprite_order():
    ids = warrior_sprite_ids(WarriorType.SWORDSMAN)
    assert ids[0] == KNIGHT_IDLE_SPRITE_ID
    assert ids[3] == KNIGHT_RUN_SPRITE_ID
    assert len(ids) == len(set(ids))


def test_spearman_and_footman_sprites():
    assert warrior_sprite_ids(WarriorType.SPEARMAN)[2] == SPEARMAN_DEAD_SPRITE_ID
    assert warrior_sprite_ids(WarriorType.SHIELD_BEARER)[1] == FOOTMAN_ATTACKS_SPRITE_ID


def test_types_with_art_have_disjoint_sheets():
    sets = [
        set(warrior_sprite_ids(t))
        for t in (WarriorType.SWORDSMAN, WarriorType.SPEARMAN, WarriorType.SHIELD_BEARER)
    ]
    assert sets[0].isdisjoint(sets[1])
    assert sets[1].isdisjoint(sets[2])


def test_types_without_art_have_no_sprites():
    assert warrior_sprite_ids(WarriorType.ARCHER) == []
    assert warrior_sprite_ids(WarriorType.GIANT) == []


def test_returned_list_is_a_copy():
    ids = warrior_sprite_ids(WarriorType.SWORDSMAN)
    ids.clear()
    assert warrior_sprite_ids(WarriorType.SWORDSMAN)[0] == KNIGHT_IDLE_SPRITE_ID
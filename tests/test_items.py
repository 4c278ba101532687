import dataclasses

import pytest

from lobiu_sala.entities import Enemy
from lobiu_sala.items import PLACEABLE_ITEMS, EffectKind, bread, shield, treasure, water


def test_canonical_items():
    assert (water().name, water().effect.kind, water().effect.amount) == ("Vanduo", EffectKind.HEAL, 10)
    assert (bread().name, bread().effect.amount) == ("Duona", 20)
    assert shield().effect.kind is EffectKind.GRANT_SHIELD
    assert treasure().consumable is False
    assert treasure().is_treasure and not water().is_treasure
    assert [f().name for f in PLACEABLE_ITEMS] == ["Vanduo", "Skydas", "Duona"]


def test_items_and_enemies_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        water().name = "Vynas"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        Enemy("SARGYBINIS", 15, 1, 2).damage = 0  # type: ignore[misc]


def test_enemy_damage_must_be_non_negative():
    with pytest.raises(ValueError):
        Enemy("X", -1, 0, 0)

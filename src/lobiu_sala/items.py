from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WATER_NAME = "Vanduo"
BREAD_NAME = "Duona"
SHIELD_NAME = "Skydas"
TREASURE_NAME = "DIDYSIS LOBIS"


class EffectKind(Enum):
    HEAL = "heal"
    GRANT_SHIELD = "grant_shield"
    MARK_TREASURE = "mark_treasure"


@dataclass(frozen=True)
class Effect:
    """What using an item does to the player.

    ``amount`` is the HP restored for ``HEAL`` and the number of shields for
    ``GRANT_SHIELD``; it is ignored for ``MARK_TREASURE``.
    """

    kind: EffectKind
    amount: int = 0


@dataclass(frozen=True)
class Item:
    """Immutable item descriptor.

    Ownership is tracked by the holder (a grid cell or the player inventory);
    the same instance may be referenced by a consumed cell for display after
    it has been collected.
    """

    name: str
    description: str
    consumable: bool
    effect: Effect
    # Shown after use; may reference {gained} for the HP or shields actually granted.
    use_text: str = ""

    @property
    def is_treasure(self) -> bool:
        return self.effect.kind is EffectKind.MARK_TREASURE


def water() -> Item:
    return Item(
        WATER_NAME,
        "Prideda +10 HP",
        True,
        Effect(EffectKind.HEAL, 10),
        "Išgėrei Vandenį (+{gained} HP).",
    )


def bread() -> Item:
    return Item(
        BREAD_NAME,
        "Prideda +20 HP",
        True,
        Effect(EffectKind.HEAL, 20),
        "Suvalgei Duoną (+{gained} HP).",
    )


def shield() -> Item:
    return Item(
        SHIELD_NAME,
        "Apgina nuo vieno sargybinio smūgio",
        True,
        Effect(EffectKind.GRANT_SHIELD, 1),
        "Gavai skydą! (Apgina nuo vieno smūgio)",
    )


def treasure() -> Item:
    return Item(
        TREASURE_NAME,
        "Grąžinkite į startą, kad laimėtumėte!",
        False,
        Effect(EffectKind.MARK_TREASURE),
        "Negalite naudoti šio lobio.",
    )


# Order matters: grid placement maps a roll of 0..2 onto this tuple.
PLACEABLE_ITEMS = (water, shield, bread)

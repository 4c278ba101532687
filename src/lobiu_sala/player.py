from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Tuple

from .events import EventKind, GameEvent
from .items import Effect, EffectKind, Item

logger = logging.getLogger(__name__)

MAX_HP = 100


@dataclass(frozen=True)
class InventoryLine:
    """One row of the grouped inventory listing."""

    name: str
    description: str
    count: int


@dataclass
class Player:
    """Mutable player state.

    Mutators never call back into the game; they return the list of
    :class:`GameEvent` they produced and the caller decides where the text
    goes (normally the message log).
    """

    x: int = 0
    y: int = 0
    hp: int = MAX_HP
    shields: int = 0
    inventory: List[Item] = field(default_factory=list)
    has_treasure: bool = False

    def __post_init__(self) -> None:
        self.hp = _clamp_hp(self.hp)
        if self.shields < 0:
            raise ValueError("shields must be non-negative")

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def is_alive(self) -> bool:
        return self.hp > 0

    # --- Movement ---
    def move_by(self, dx: int, dy: int, max_cols: int, max_rows: int) -> bool:
        """Move by ``(dx, dy)``; each axis is applied only if it stays in bounds.

        Returns True when the position changed.
        """
        old = self.position
        nx = self.x + dx
        ny = self.y + dy
        if 0 <= nx < max_cols:
            self.x = nx
        if 0 <= ny < max_rows:
            self.y = ny
        moved = self.position != old
        if moved:
            logger.debug("Player moved %s -> %s", old, self.position)
        return moved

    # --- HP / shields ---
    def set_hp(self, value: int) -> int:
        self.hp = _clamp_hp(value)
        return self.hp

    def add_shields(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("Shield count must be non-negative")
        self.shields += count

    def take_damage(self, amount: int) -> List[GameEvent]:
        """Apply an enemy hit. A held shield absorbs the whole hit and breaks."""
        if amount < 0:
            raise ValueError("Damage amount must be non-negative")
        if self.shields > 0:
            self.shields -= 1
            logger.info("Shield absorbed %d damage; %d shields left", amount, self.shields)
            return [
                GameEvent(
                    EventKind.SHIELD_BROKE,
                    "Skydas atmušė smūgį! Skydas sudužo.",
                    {"blocked": amount, "shields": self.shields},
                )
            ]
        self.set_hp(self.hp - amount)
        logger.info("Player took %d damage; hp=%d", amount, self.hp)
        return [
            GameEvent(
                EventKind.DAMAGE,
                f"-{amount} HP! Liko HP: {self.hp}",
                {"amount": amount, "hp": self.hp},
            )
        ]

    # --- Inventory ---
    def collect_item(self, item: Item) -> List[GameEvent]:
        self.inventory.append(item)
        if item.is_treasure:
            self.has_treasure = True
        logger.info("Collected %s (inventory size=%d)", item.name, len(self.inventory))
        return [GameEvent(EventKind.ITEM_COLLECTED, f"Gavai: {item.name}", {"item": item.name})]

    def find_item(self, name: str) -> Item | None:
        wanted = name.strip().casefold()
        for item in self.inventory:
            if item.name.casefold() == wanted:
                return item
        return None

    def use_item(self, name: str) -> Tuple[bool, List[GameEvent]]:
        """Use the first held item whose name matches ``name`` (case-insensitive).

        Blank names, items not held and the treasure are rejected with a
        message and leave the player untouched. Returns ``(consumed, events)``;
        ``consumed`` is True only when the item was removed from the inventory.
        """
        if not name or not name.strip():
            return False, [_rejected("Įveskite daikto pavadinimą.")]

        wanted = name.strip()
        item = self.find_item(wanted)
        if item is None:
            return False, [_rejected(f"Neturite {wanted}")]
        if item.is_treasure:
            return False, [_rejected("Negalite panaudoti DIDŽIOJO LOBIO.")]

        events = self.apply_effect(item.effect, item)
        if item.consumable:
            self.inventory.remove(item)
            logger.info("Used and consumed %s", item.name)
        return item.consumable, events

    def apply_effect(self, effect: Effect, source: Item | None = None) -> List[GameEvent]:
        text = source.use_text if source is not None else ""
        if effect.kind is EffectKind.HEAL:
            before = self.hp
            self.set_hp(before + effect.amount)
            gained = self.hp - before
            message = text.format(gained=gained) if text else f"+{gained} HP"
            return [GameEvent(EventKind.HEALED, message, {"gained": gained, "hp": self.hp})]
        if effect.kind is EffectKind.GRANT_SHIELD:
            self.add_shields(effect.amount)
            message = text.format(gained=effect.amount) if text else f"+{effect.amount} skydas"
            return [GameEvent(EventKind.SHIELD_GAINED, message, {"shields": self.shields})]
        # MARK_TREASURE has no effect when used directly.
        return [_rejected(text or "Negalite naudoti šio lobio.")]

    def inventory_summary(self) -> List[InventoryLine]:
        """Held items grouped by name, sorted by name."""
        counts = Counter(item.name for item in self.inventory)
        first = {}
        for item in self.inventory:
            first.setdefault(item.name, item)
        return [
            InventoryLine(name=name, description=first[name].description, count=counts[name])
            for name in sorted(counts)
        ]


def _clamp_hp(value: int) -> int:
    return max(0, min(MAX_HP, int(value)))


def _rejected(message: str) -> GameEvent:
    return GameEvent(EventKind.USE_REJECTED, message)

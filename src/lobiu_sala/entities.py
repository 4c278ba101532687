from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_ENEMY_NAME = "SARGYBINIS"
DEFAULT_ENEMY_DAMAGE = 15

PLAYER_SYMBOL = "P"
ENEMY_SYMBOL = "E"


@dataclass(frozen=True)
class Enemy:
    """Static single-encounter enemy bound to the cell it was placed on."""

    name: str
    damage: int
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.damage < 0:
            raise ValueError("Enemy damage must be non-negative")

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class EntityMarker:
    """A glyph drawn over the tile layer at a grid position."""

    symbol: str
    x: int
    y: int

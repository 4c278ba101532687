from __future__ import annotations

import logging
from typing import List

from .events import EventKind, GameEvent
from .grid import CellType, Grid
from .player import Player

logger = logging.getLogger(__name__)


class TileResolver:
    """Applies the effect of the cell the player just stepped onto.

    Each cell fires at most once: a consumed cell is a no-op. An enemy cell is
    only consumed if the player survives the hit; a lethal encounter ends the
    game before that matters.
    """

    def resolve(self, grid: Grid, player: Player, x: int, y: int) -> List[GameEvent]:
        cell = grid.cell(x, y)
        if cell.consumed:
            return []

        events: List[GameEvent] = []
        if cell.type is CellType.TREASURE:
            if cell.item is not None:
                events += player.collect_item(cell.item)
                events.append(
                    GameEvent(
                        EventKind.TREASURE_FOUND,
                        "Radote DIDĮJĮ LOBĮ! Grąžinkite jį į startą!",
                        {"x": x, "y": y},
                    )
                )
                logger.info("Treasure found at (%d, %d)", x, y)
            cell.consume()
        elif cell.type is CellType.ITEM:
            if cell.item is not None:
                events += player.collect_item(cell.item)
            cell.consume()
        elif cell.type is CellType.ENEMY:
            if cell.enemy is not None:
                enemy = cell.enemy
                events.append(
                    GameEvent(
                        EventKind.ENCOUNTER,
                        f"Sutikote priešą: {enemy.name}!",
                        {"enemy": enemy.name, "damage": enemy.damage},
                    )
                )
                logger.info("Encounter with %s at (%d, %d)", enemy.name, x, y)
                events += player.take_damage(enemy.damage)
                if not player.is_alive():
                    return events
            cell.consume()
        return events

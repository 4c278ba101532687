from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .entities import DEFAULT_ENEMY_DAMAGE, DEFAULT_ENEMY_NAME, Enemy
from .errors import GridConfigError
from .items import PLACEABLE_ITEMS, Item, treasure
from .rng import RNG

logger = logging.getLogger(__name__)

WALL_GLYPH = "#"

DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_ITEM_COUNT = 5
DEFAULT_ENEMY_COUNT = 8


class CellType(Enum):
    EMPTY = "empty"
    ITEM = "item"
    ENEMY = "enemy"
    TREASURE = "treasure"


@dataclass
class Cell:
    """Contents of one grid position.

    ``item``/``enemy`` are assigned while the grid is built and left in place
    afterwards for display; ``consumed`` marks that the cell already fired.
    """

    type: CellType = CellType.EMPTY
    item: Optional[Item] = None
    enemy: Optional[Enemy] = None
    consumed: bool = False
    glyph: str = WALL_GLYPH

    def consume(self) -> None:
        self.consumed = True


class Grid:
    """Rectangular board of cells with randomized, seed-reproducible contents.

    Placement order is fixed: the treasure, then ``item_count`` items, then
    ``enemy_count`` enemies. Every placement samples a row and a column and
    retries until it hits an empty non-start cell, so the same
    ``(rows, cols, start, seed)`` always yields the same board.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        start: Tuple[int, int] = (0, 0),
        seed: Optional[int] = None,
        item_count: int = DEFAULT_ITEM_COUNT,
        enemy_count: int = DEFAULT_ENEMY_COUNT,
        enemy_name: str = DEFAULT_ENEMY_NAME,
        enemy_damage: int = DEFAULT_ENEMY_DAMAGE,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("Invalid grid size")
        if item_count < 0 or enemy_count < 0:
            raise ValueError("Placement counts must be non-negative")
        self.rows = rows
        self.cols = cols
        self.start = start
        if not self.in_bounds(*start):
            raise ValueError(f"Start position {start} is outside the grid")

        free = rows * cols - 1
        needed = 1 + item_count + enemy_count
        if needed > free:
            raise GridConfigError(
                f"{rows}x{cols} grid has {free} free cells but {needed} placements were requested"
            )

        self.cells: List[List[Cell]] = [[Cell() for _ in range(cols)] for _ in range(rows)]
        self._rng = RNG(seed)
        self._place(item_count, enemy_count, enemy_name, enemy_damage)
        logger.info(
            "Grid %dx%d built (seed=%s): %d items, %d enemies",
            rows,
            cols,
            seed,
            item_count,
            enemy_count,
        )

    # --- Accessors ---
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Position ({x}, {y}) out of bounds")
        return self.cells[y][x]

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` row by row."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                yield x, y, cell

    def cells_of(self, cell_type: CellType) -> List[Tuple[int, int]]:
        return [(x, y) for x, y, cell in self.iter_cells() if cell.type is cell_type]

    def enemies(self) -> List[Enemy]:
        return [cell.enemy for _, _, cell in self.iter_cells() if cell.enemy is not None]

    def glyph_rows(self) -> List[str]:
        return ["".join(cell.glyph for cell in row) for row in self.cells]

    # --- Placement ---
    def _is_start(self, x: int, y: int) -> bool:
        return (x, y) == self.start

    def _sample_free(self) -> Tuple[int, int]:
        # Unbounded rejection sampling; the constructor guarantees a free cell exists.
        while True:
            y = self._rng.below(self.rows)
            x = self._rng.below(self.cols)
            if not self._is_start(x, y) and self.cells[y][x].type is CellType.EMPTY:
                return x, y

    def _place(self, item_count: int, enemy_count: int, enemy_name: str, enemy_damage: int) -> None:
        x, y = self._sample_free()
        cell = self.cells[y][x]
        cell.type = CellType.TREASURE
        cell.item = treasure()
        logger.debug("Placed treasure at (%d, %d)", x, y)

        for _ in range(item_count):
            x, y = self._sample_free()
            cell = self.cells[y][x]
            cell.type = CellType.ITEM
            cell.item = self._rng.choice(PLACEABLE_ITEMS)()
            logger.debug("Placed %s at (%d, %d)", cell.item.name, x, y)

        for _ in range(enemy_count):
            x, y = self._sample_free()
            cell = self.cells[y][x]
            cell.type = CellType.ENEMY
            cell.enemy = Enemy(enemy_name, enemy_damage, x, y)
            logger.debug("Placed enemy %s at (%d, %d)", enemy_name, x, y)

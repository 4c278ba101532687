"""Game state and the turn loop.

The loop never draws or reads keys itself. It hands a :class:`Snapshot` to a
:class:`RenderSink` and pulls :class:`Command` values from an
:class:`InputSource`, so the same rules drive the terminal and the arcade
front ends as well as scripted tests.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from .entities import ENEMY_SYMBOL, PLAYER_SYMBOL, EntityMarker
from .grid import CellType, Grid
from .message_log import MessageLog
from .player import InventoryLine, Player
from .resolver import TileResolver

logger = logging.getLogger(__name__)


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    USE_ITEM = "use_item"
    QUIT = "quit"
    NONE = "none"


DIRECTIONS: Dict[Command, Tuple[int, int]] = {
    Command.UP: (0, -1),
    Command.DOWN: (0, 1),
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
}


class Outcome(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.PLAYING


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of everything a front end needs to draw one frame."""

    rows: int
    cols: int
    tiles: Tuple[str, ...]
    overlays: Tuple[EntityMarker, ...]
    hp: int
    shields: int
    has_treasure: bool
    start: Tuple[int, int]
    inventory: Tuple[InventoryLine, ...]
    messages: Tuple[str, ...]
    outcome: Outcome
    turns: int

    def composed_rows(self) -> List[str]:
        """Tile rows with overlays drawn on top (later overlays win)."""
        grid = [list(row) for row in self.tiles]
        for marker in self.overlays:
            grid[marker.y][marker.x] = marker.symbol
        return ["".join(row) for row in grid]


class RenderSink(Protocol):
    def render(self, snapshot: Snapshot) -> None:  # pragma: no cover - protocol method
        ...


class InputSource(Protocol):
    def read_command(self) -> Command:  # pragma: no cover - protocol method
        ...

    def read_item_name(self) -> str:  # pragma: no cover - protocol method
        ...


@dataclass
class GameState:
    grid: Grid
    player: Player
    start: Tuple[int, int]
    messages: MessageLog = field(default_factory=MessageLog)

    @classmethod
    def new(
        cls,
        rows: int = 10,
        cols: int = 10,
        start: Tuple[int, int] = (0, 0),
        seed: Optional[int] = None,
        item_count: int = 5,
        enemy_count: int = 8,
        messages: Optional[MessageLog] = None,
    ) -> "GameState":
        grid = Grid(rows, cols, start, seed=seed, item_count=item_count, enemy_count=enemy_count)
        player = Player(x=start[0], y=start[1])
        if messages is None:
            messages = MessageLog()
        return cls(grid=grid, player=player, start=start, messages=messages)


class GameLoop:
    """Sequences turns until the game is won, lost or quit.

    Event-driven front ends call :meth:`begin_turn` before drawing and
    :meth:`apply` for every command; :meth:`run` does both in a blocking loop.
    Using an item is a free action: it neither counts as a turn nor resolves
    the current tile.
    """

    def __init__(
        self,
        state: GameState,
        resolver: Optional[TileResolver] = None,
        reveal_enemies: bool = False,
    ) -> None:
        self.state = state
        self.resolver = resolver or TileResolver()
        self.reveal_enemies = reveal_enemies
        self.outcome = Outcome.PLAYING
        self.turns = 0

    @classmethod
    def from_settings(cls, settings, clock: Callable[[], float] = time.monotonic) -> "GameLoop":
        g = settings.grid
        messages = MessageLog(
            capacity=settings.messages.capacity,
            lifetime=settings.messages.lifetime,
            clock=clock,
        )
        state = GameState.new(
            rows=g.rows,
            cols=g.cols,
            start=(g.start_x, g.start_y),
            seed=g.seed,
            item_count=g.item_count,
            enemy_count=g.enemy_count,
            messages=messages,
        )
        return cls(state, reveal_enemies=settings.display.reveal_enemies)

    # --- Turn primitives ---
    def check_win(self) -> bool:
        player = self.state.player
        if self.outcome is Outcome.PLAYING and player.has_treasure and player.position == self.state.start:
            self.outcome = Outcome.WON
            logger.info("Treasure returned to start after %d turns: game won", self.turns)
        return self.outcome is Outcome.WON

    def begin_turn(self) -> Snapshot:
        """Prune expired messages, run the win check and return the frame to draw."""
        self.state.messages.prune()
        self.check_win()
        return self.snapshot()

    def apply(self, command: Command, item_name: Optional[str] = None) -> Outcome:
        """Apply one input command and return the resulting outcome."""
        if self.outcome.is_terminal:
            logger.debug("Ignoring %s: game already %s", command, self.outcome.value)
            return self.outcome

        if command is Command.QUIT:
            self.outcome = Outcome.QUIT
            logger.info("Player quit after %d turns", self.turns)
        elif command is Command.USE_ITEM:
            self._use_item(item_name)
        elif command in DIRECTIONS:
            self._move(*DIRECTIONS[command])
        return self.outcome

    def run(self, render: RenderSink, source: InputSource) -> Outcome:
        """Blocking loop: render, check for a win, read a command, apply it."""
        logger.info("Game started at %s", self.state.start)
        while True:
            render.render(self.begin_turn())
            if self.outcome.is_terminal:
                return self.outcome

            command = source.read_command()
            item_name = source.read_item_name() if command is Command.USE_ITEM else None
            if self.apply(command, item_name).is_terminal:
                return self.outcome

    def snapshot(self) -> Snapshot:
        state = self.state
        player = state.player
        overlays: List[EntityMarker] = []
        if self.reveal_enemies:
            for x, y, cell in state.grid.iter_cells():
                if cell.type is CellType.ENEMY and not cell.consumed:
                    overlays.append(EntityMarker(ENEMY_SYMBOL, x, y))
        overlays.append(EntityMarker(PLAYER_SYMBOL, player.x, player.y))
        return Snapshot(
            rows=state.grid.rows,
            cols=state.grid.cols,
            tiles=tuple(state.grid.glyph_rows()),
            overlays=tuple(overlays),
            hp=player.hp,
            shields=player.shields,
            has_treasure=player.has_treasure,
            start=state.start,
            inventory=tuple(player.inventory_summary()),
            messages=tuple(state.messages.texts()),
            outcome=self.outcome,
            turns=self.turns,
        )

    # --- Internals ---
    def _use_item(self, item_name: Optional[str]) -> None:
        name = (item_name or "").strip()
        if not name:
            logger.debug("Item use cancelled")
            return
        _, events = self.state.player.use_item(name)
        self.state.messages.extend(events)

    def _move(self, dx: int, dy: int) -> None:
        state = self.state
        player = state.player
        self.turns += 1
        if player.move_by(dx, dy, state.grid.cols, state.grid.rows):
            events = self.resolver.resolve(state.grid, player, player.x, player.y)
            state.messages.extend(events)
        if not player.is_alive():
            self.outcome = Outcome.LOST
            logger.info("Player died at %s after %d turns", player.position, self.turns)

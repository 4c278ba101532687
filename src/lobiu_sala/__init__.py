"""
Lobių sala: a turn-based treasure hunt on a small tile grid.

The package holds the headless game rules:
- Items, enemies and the seeded grid they are placed on
- Player state and the tile resolver that fires each cell once
- The time-windowed message log and the turn loop

Front ends (terminal, arcade) live in :mod:`lobiu_sala.frontends` and only
consume snapshots and produce commands.
"""
from .errors import GridConfigError, KeyMapError, LobiuSalaError, SettingsError
from .events import EventKind, GameEvent
from .game import Command, GameLoop, GameState, Outcome, Snapshot
from .grid import Cell, CellType, Grid
from .items import Effect, EffectKind, Item
from .message_log import Message, MessageLog
from .player import Player
from .resolver import TileResolver

__all__ = [
    "Cell",
    "CellType",
    "Command",
    "Effect",
    "EffectKind",
    "EventKind",
    "GameEvent",
    "GameLoop",
    "GameState",
    "Grid",
    "GridConfigError",
    "Item",
    "KeyMapError",
    "LobiuSalaError",
    "Message",
    "MessageLog",
    "Outcome",
    "Player",
    "SettingsError",
    "Snapshot",
    "TileResolver",
]

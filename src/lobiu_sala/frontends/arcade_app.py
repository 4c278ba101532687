from __future__ import annotations

import logging
from typing import Dict, Optional

import arcade

from ..game import Command, GameLoop, Outcome, Snapshot
from ..input import KeyMap
from .console import ITEM_PROMPT, OUTCOME_TEXT

logger = logging.getLogger(__name__)

PANEL_WIDTH = 440
MIN_HEIGHT = 520
LINE_HEIGHT = 22

GLYPH_COLORS = {
    "#": arcade.color.DARK_SLATE_GRAY,
    "P": arcade.color.GOLD,
    "E": arcade.color.RED_DEVIL,
}


def key_code_names(keymap: KeyMap) -> Dict[int, str]:
    """Map arcade key codes to the key names used in the key map."""
    codes: Dict[int, str] = {}
    for name in keymap.bound_keys:
        code = getattr(arcade.key, name, None)
        if code is None:
            logger.warning("Key %s has no arcade key code; binding ignored", name)
            continue
        codes[code] = name
    return codes


class GameWindow(arcade.Window):
    """
    Arcade front end for the game loop.

    Arcade is event driven, so instead of :meth:`GameLoop.run` the window
    calls :meth:`GameLoop.begin_turn` on every draw and :meth:`GameLoop.apply`
    on every mapped key press. The use-item command opens an inline text
    entry that is submitted with Enter and cancelled with Escape.
    """

    def __init__(self, loop: GameLoop, keymap: KeyMap, tile_size: int = 48) -> None:
        self.loop = loop
        self.keymap = keymap
        self.tile_size = tile_size
        grid = loop.state.grid
        super().__init__(
            width=grid.cols * tile_size + PANEL_WIDTH,
            height=max(grid.rows * tile_size, MIN_HEIGHT),
            title="Lobių sala",
        )
        arcade.set_background_color(arcade.color.BLACK)
        self._codes = key_code_names(keymap)
        self._entry: Optional[str] = None
        # The key press that opens the entry is followed by its own on_text event.
        self._swallow_next_text = False
        logger.info("GameWindow initialized: %dx%d", self.width, self.height)

    # Arcade lifecycle
    def on_draw(self):  # noqa: N802 (arcade API)
        self.clear()
        snapshot = self.loop.begin_turn()
        self._draw_board(snapshot)
        self._draw_panel(snapshot)

    def on_key_press(self, key: int, modifiers: int):  # noqa: N802 (arcade API)
        if self.loop.outcome.is_terminal:
            self.close()
            return
        if self._entry is not None:
            self._edit_entry(key)
            return

        command = self.keymap.command_for(self._codes.get(key, ""))
        if command is Command.USE_ITEM:
            self._entry = ""
            self._swallow_next_text = True
            return
        if self.loop.apply(command) is Outcome.QUIT:
            self.close()

    def on_text(self, text: str):  # noqa: N802 (pyglet API)
        if self._swallow_next_text:
            self._swallow_next_text = False
            return
        if self._entry is not None and text.isprintable():
            self._entry += text

    def run(self) -> Outcome:
        logger.info("Starting arcade loop")
        arcade.run()
        return self.loop.outcome

    # Helpers
    def _edit_entry(self, key: int) -> None:
        if key in (arcade.key.ENTER, arcade.key.RETURN):
            name, self._entry = self._entry, None
            self.loop.apply(Command.USE_ITEM, name)
        elif key == arcade.key.ESCAPE:
            self._entry = None
        elif key == arcade.key.BACKSPACE:
            self._entry = self._entry[:-1]

    def _draw_board(self, snapshot: Snapshot) -> None:
        size = self.tile_size
        top = self.height
        for y, row in enumerate(snapshot.composed_rows()):
            for x, glyph in enumerate(row):
                left = x * size
                bottom = top - (y + 1) * size
                color = GLYPH_COLORS.get(glyph, arcade.color.DARK_SLATE_GRAY)
                arcade.draw_lrbt_rectangle_filled(left + 1, left + size - 1, bottom + 1, bottom + size - 1, color)
                if (x, y) == snapshot.start:
                    arcade.draw_lrbt_rectangle_outline(left + 2, left + size - 2, bottom + 2, bottom + size - 2,
                                                       arcade.color.LIGHT_GREEN, 2)
                arcade.draw_text(glyph, left + size / 3, bottom + size / 3, arcade.color.WHITE, size // 3)

    def _draw_panel(self, snapshot: Snapshot) -> None:
        x = snapshot.cols * self.tile_size + 16
        y = self.height - 30

        def line(text: str, color=arcade.color.WHITE) -> None:
            nonlocal y
            arcade.draw_text(text, x, y, color, 13)
            y -= LINE_HEIGHT

        line(f"HP: {snapshot.hp}   Skydai: {snapshot.shields}")
        treasure = "TURITE" if snapshot.has_treasure else "neturite"
        line(f"Pradžios taškas: {snapshot.start}  Lobis: {treasure}")
        line("")
        if snapshot.inventory:
            for entry in snapshot.inventory:
                line(f"x{entry.count} - {entry.name}", arcade.color.LIGHT_GRAY)
        else:
            line("Inventorius tuščias.", arcade.color.LIGHT_GRAY)
        line("")
        line("---- Įvykiai ----")
        for text in snapshot.messages:
            line(text, arcade.color.YELLOW)
        line("")
        if self._entry is not None:
            line(ITEM_PROMPT + self._entry + "_", arcade.color.LIGHT_BLUE)
        if snapshot.outcome.is_terminal:
            line(OUTCOME_TEXT[snapshot.outcome], arcade.color.ORANGE)
            line("Bet kuris klavišas...")

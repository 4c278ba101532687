from __future__ import annotations

import logging
import shutil
import sys
from typing import Callable, Optional, TextIO

from ..game import Command, Outcome, Snapshot
from ..input import KeyMap

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"
CONTROLS_HINT = "Judėjimas: WASD | U - naudoti daiktą | Q - išeiti (patvirtinkite Enter)"
ITEM_PROMPT = "Ką naudoti? (duona, vanduo, skydas): "

OUTCOME_TEXT = {
    Outcome.WON: "Grąžinote LOBĮ į startą — JŪS LAIMĖJOTE!",
    Outcome.LOST: "Mirtinas smūgis. Žaidimas baigtas.",
    Outcome.QUIT: "Žaidimas nutrauktas.",
}


def format_snapshot(snapshot: Snapshot) -> str:
    """Render a snapshot as the text screen shown in the terminal."""
    lines = [" ".join(row) for row in snapshot.composed_rows()]
    lines.append("")
    lines.append(f"HP: {snapshot.hp}   Skydai: {snapshot.shields}")
    sx, sy = snapshot.start
    treasure = "TURITE" if snapshot.has_treasure else "neturite"
    lines.append(f"Pradžios taškas: ({sx},{sy})  Lobis: {treasure}")
    if snapshot.inventory:
        for entry in snapshot.inventory:
            lines.append(f"x{entry.count} - {entry.name} - {entry.description}")
    else:
        lines.append("Inventorius tuščias.")
    lines.append("")
    lines.append("---- Įvykiai ----")
    lines.extend(snapshot.messages)
    lines.append("")
    lines.append(CONTROLS_HINT)
    return "\n".join(lines)


def center(text: str, width: Optional[int] = None) -> str:
    if width is None:
        width = shutil.get_terminal_size().columns
    pad = max(0, (width - len(text)) // 2)
    return " " * pad + text


class ConsoleRenderer:
    """Redraws the whole screen for every snapshot."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear

    def render(self, snapshot: Snapshot) -> None:
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(format_snapshot(snapshot) + "\n")
        self.stream.flush()

    def show_outcome(self, outcome: Outcome) -> None:
        text = OUTCOME_TEXT.get(outcome)
        if text:
            self.stream.write("\n" + center(text) + "\n")
            self.stream.flush()


class ConsoleInput:
    """Blocking line-based input: each line is one key name (``w``, ``up``, ``q``).

    End of input is treated as quitting.
    """

    def __init__(self, keymap: KeyMap, reader: Optional[Callable[[str], str]] = None) -> None:
        self.keymap = keymap
        self._reader = reader if reader is not None else input

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._reader(prompt)
        except EOFError:
            logger.info("Input closed")
            return None

    def read_command(self) -> Command:
        line = self._read("> ")
        if line is None:
            return Command.QUIT
        words = line.split()
        if not words:
            return Command.NONE
        return self.keymap.command_for(words[0])

    def read_item_name(self) -> str:
        line = self._read(ITEM_PROMPT)
        return "" if line is None else line.strip()

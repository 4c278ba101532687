import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from lobiu_sala.game import Command  # noqa: E402


class FakeClock:
    """Manually advanced clock for message expiry tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedInput:
    """Input source that replays a fixed list of commands and item names."""

    def __init__(self, commands, item_names=()):
        self.commands = list(commands)
        self.item_names = list(item_names)
        self.reads = 0

    def read_command(self) -> Command:
        self.reads += 1
        if not self.commands:
            return Command.QUIT
        return self.commands.pop(0)

    def read_item_name(self) -> str:
        return self.item_names.pop(0) if self.item_names else ""


class RecordingRenderer:
    def __init__(self) -> None:
        self.snapshots = []

    def render(self, snapshot) -> None:
        self.snapshots.append(snapshot)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def scripted():
    """Factory fixture: ``scripted([Command.UP, ...], ["vanduo"])``."""
    return ScriptedInput

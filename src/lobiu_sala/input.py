from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .errors import KeyMapError
from .game import Command

logger = logging.getLogger(__name__)


def default_mapping() -> Dict[str, Iterable[str]]:
    return {
        "up": ["W", "UP"],
        "down": ["S", "DOWN"],
        "left": ["A", "LEFT"],
        "right": ["D", "RIGHT"],
        "use_item": ["U"],
        "quit": ["Q", "ESCAPE"],
    }


def _normalize_key_name(name: str) -> str:
    return name.strip().upper()


class KeyMap:
    """
    Translates key names into game commands.

    - Mapping is configured as command name -> key names (``"up": ["W", "UP"]``)
    - Key names are case-insensitive; single characters and named keys both work
    - Unmapped keys translate to :attr:`Command.NONE`, which the loop ignores
    """

    def __init__(self, mapping: Optional[Dict[str, Iterable[str]]] = None) -> None:
        if not mapping:
            mapping = default_mapping()
        self._keys: Dict[str, Command] = {}
        for command_name, key_names in mapping.items():
            self.bind(command_name, key_names)
        logger.debug("Key map initialized: %s", self._keys)

    def bind(self, command_name: str, key_names: Iterable[str]) -> None:
        try:
            command = Command(command_name)
        except ValueError as e:
            raise KeyMapError(f"Unknown command in key mapping: {command_name}") from e
        for name in key_names:
            self._keys[_normalize_key_name(name)] = command

    def command_for(self, key_name: str) -> Command:
        command = self._keys.get(_normalize_key_name(key_name), Command.NONE)
        if command is Command.NONE:
            logger.debug("Unmapped key: %s", key_name)
        return command

    def keys_for(self, command: Command) -> list[str]:
        return sorted(k for k, c in self._keys.items() if c is command)

    @property
    def bound_keys(self) -> list[str]:
        return sorted(self._keys)

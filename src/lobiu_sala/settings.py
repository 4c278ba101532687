from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from platformdirs import user_config_dir, user_log_dir

from .errors import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "lobiu-sala"
SETTINGS_FILENAME = "settings.yaml"


@dataclass
class GridSettings:
    rows: int = 10
    cols: int = 10
    start_x: int = 0
    start_y: int = 0
    seed: Optional[int] = None
    item_count: int = 5
    enemy_count: int = 8


@dataclass
class MessageSettings:
    capacity: int = 6
    lifetime: float = 2.5


@dataclass
class DisplaySettings:
    reveal_enemies: bool = False
    tile_size: int = 48


@dataclass
class ControlsSettings:
    mapping: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class Settings:
    grid: GridSettings = field(default_factory=GridSettings)
    messages: MessageSettings = field(default_factory=MessageSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    controls: ControlsSettings = field(default_factory=ControlsSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise SettingsError(f"Could not parse settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping at the top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        try:
            grid = GridSettings(**data.get("grid", {}))
            messages = MessageSettings(**data.get("messages", {}))
            display = DisplaySettings(**data.get("display", {}))
            mapping = data.get("controls", {}).get("mapping") or {}
            controls = ControlsSettings(mapping={k: [str(key) for key in v] for k, v in mapping.items()})
        except (TypeError, AttributeError) as e:
            raise SettingsError(f"Invalid settings: {e}") from e
        return Settings(grid=grid, messages=messages, display=display, controls=controls)

    @staticmethod
    def _load_defaults() -> Dict[str, Any]:
        try:
            resource = resources.files("lobiu_sala.config").joinpath("default_settings.yaml")
            with resource.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            return dataclasses.asdict(Settings())

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load the packaged defaults and overlay a user settings file.

        Without ``user_path`` the per-user file under the platform config
        directory is used when it exists. An explicit path that does not exist
        is reported and ignored.
        """
        default_data = cls._load_defaults()

        user_data: dict = {}
        path = user_path if user_path is not None else default_settings_path()
        if path.exists():
            user_data = cls._load_yaml(path)
            logger.info("Loaded user settings from %s", path)
        elif user_path is not None:
            logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        data = {
            "grid": dataclasses.asdict(self.grid),
            "messages": dataclasses.asdict(self.messages),
            "display": dataclasses.asdict(self.display),
            "controls": {"mapping": {k: list(v) for k, v in self.controls.mapping.items()}},
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
        logger.info("Saved settings to %s", path)


def default_settings_path() -> Path:
    return Path(user_config_dir(appname=APP_NAME, appauthor=False)) / SETTINGS_FILENAME


def default_log_path() -> Path:
    return Path(user_log_dir(appname=APP_NAME, appauthor=False)) / "lobiu-sala.log"

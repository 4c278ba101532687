import argparse
import logging
from pathlib import Path

from .game import GameLoop, Outcome
from .input import KeyMap
from .logging_config import configure_logging
from .settings import Settings, default_log_path

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="lobiu-sala",
        description="Lobių sala - find the treasure and bring it back to the start.",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible item and enemy placement.")
    parser.add_argument("--rows", type=int, default=None, help="Grid height.")
    parser.add_argument("--cols", type=int, default=None, help="Grid width.")
    parser.add_argument(
        "--reveal-enemies",
        action="store_true",
        default=None,
        help="Draw enemies that have not been met yet.",
    )
    parser.add_argument(
        "--frontend",
        choices=("console", "arcade"),
        default="console",
        help="Terminal text screen or an arcade window.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Where to write logs (defaults to the user log directory).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args) -> Settings:
    if args.seed is not None:
        settings.grid.seed = args.seed
    if args.rows is not None:
        settings.grid.rows = args.rows
    if args.cols is not None:
        settings.grid.cols = args.cols
    if args.reveal_enemies is not None:
        settings.display.reveal_enemies = args.reveal_enemies
    return settings


def run_console(loop: GameLoop, keymap: KeyMap, reader=None) -> Outcome:
    from .frontends.console import ConsoleInput, ConsoleRenderer

    renderer = ConsoleRenderer()
    outcome = loop.run(renderer, ConsoleInput(keymap, reader=reader))
    renderer.show_outcome(outcome)
    return outcome


def run_arcade(loop: GameLoop, keymap: KeyMap, tile_size: int) -> Outcome:
    from .frontends.arcade_app import GameWindow

    return GameWindow(loop, keymap, tile_size=tile_size).run()


def main(argv=None) -> int:
    args = parse_args(argv)
    log_file = args.log_file if args.log_file is not None else default_log_path()
    configure_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=log_file)

    settings = apply_overrides(Settings.load(user_path=args.settings_path), args)
    loop = GameLoop.from_settings(settings)
    keymap = KeyMap(settings.controls.mapping)

    if args.frontend == "arcade":
        outcome = run_arcade(loop, keymap, settings.display.tile_size)
    else:
        outcome = run_console(loop, keymap)
    logger.info("Game finished: %s", outcome.value)
    return 0

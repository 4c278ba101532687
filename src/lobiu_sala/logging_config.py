import logging
import os
from pathlib import Path
from typing import Optional

ENV_LOG_LEVEL = "LOBIU_SALA_LOG_LEVEL"


def configure_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """Configure the root logger with one handler.

    Logs go to ``log_file`` when given (the terminal front end owns stdout),
    otherwise to stderr. ``LOBIU_SALA_LOG_LEVEL`` overrides ``level``.
    """
    level_name = os.getenv(ENV_LOG_LEVEL)
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)

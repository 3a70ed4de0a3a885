from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Union

from infra.paths import LOG_DIR

# Centralized logging setup shared by the board engine and the API.
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","line":%(lineno)d,"msg":"%(message)s"}'
)
LEVEL_ENV_VAR = "BOARD_LOG_LEVEL"


def configure_logging(
    level: Union[str, int, None] = None,
    *,
    json: bool = False,
    logfile: str | Path | None = LOG_DIR / "board.log",
    levels: Mapping[str, Union[str, int]] | None = None,
) -> None:
    """
    Configure the root logger with stdout + optional file handler.

    Args:
        level: Logging level name or int; falls back to $BOARD_LOG_LEVEL, then INFO.
        json: Emit JSON lines when True; otherwise a human-friendly format.
        logfile: File path to append logs; set to None to disable file output.
        levels: Per-logger overrides, e.g. {"board.mechanics.placement": "DEBUG"}.
    """
    if level is None:
        level = os.getenv(LEVEL_ENV_VAR, "INFO").upper()

    formatter = logging.Formatter(JSON_FORMAT if json else DEFAULT_FORMAT)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    handlers.append(console)

    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)

    for name, override in (levels or {}).items():
        logging.getLogger(name).setLevel(override)

    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger; configure_logging() should be called once on startup."""
    return logging.getLogger(name)

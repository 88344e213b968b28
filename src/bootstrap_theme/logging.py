from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from platformdirs import user_log_dir

APP_NAME = "bootstrap-theme"
APP_AUTHOR = "BootstrapTheme"
LOG_DIR = Path(os.getenv("BOOTSTRAP_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR))
LOG_LEVEL = os.getenv("BOOTSTRAP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handlers: list[logging.Handler] = []


def resolve_level(level: Optional[str]) -> int:
    return getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)


def configure_logging(level: Optional[str] = None, *, log_path: Optional[Path] = None) -> None:
    """Attach the bootstrap-theme console and rotating file handlers to the root logger.

    Handlers are attached once per process. Later calls only change the level
    when one is given, so a command line override still applies after an
    import-time setup.
    """

    root = logging.getLogger()
    if _handlers:
        if level is not None:
            root.setLevel(resolve_level(level))
            logging.getLogger(__name__).debug("Log level changed to %s", level.upper())
        return

    log_file = log_path or LOG_DIR / "bootstrap-theme.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    console_handler = logging.StreamHandler()
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _handlers.append(handler)

    root.setLevel(resolve_level(level))
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)


__all__ = ["configure_logging", "resolve_level"]

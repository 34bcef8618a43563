"""Logging configuration for straitjacket."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from straitjacket.core.config import Settings, get_settings
from straitjacket.core.constants import LOGGER_NAME

DEFAULT_MAX_BYTES = 5_242_880
DEFAULT_BACKUP_COUNT = 3


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    max_bytes: Optional[int] = None,
    backup_count: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> logging.Logger:
    """Configure the straitjacket logger with console and optional file handlers.

    Arguments left as None come from the ``logging`` section of ``settings``
    (keys ``level``, ``file``, ``max_bytes``, ``backup_count``), which
    defaults to the process-wide settings.
    """
    log_cfg = (settings or get_settings()).logging
    level = level or log_cfg.get("level", "INFO")
    log_file = log_file or log_cfg.get("file")
    if max_bytes is None:
        max_bytes = log_cfg.get("max_bytes", DEFAULT_MAX_BYTES)
    if backup_count is None:
        backup_count = log_cfg.get("backup_count", DEFAULT_BACKUP_COUNT)

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Clear existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug(f"Logging configured at {logging.getLevelName(root_logger.level)}")
    return root_logger

#!/usr/bin/env python3
"""
logger - File logging for gitctrl sessions.

Actions go to <log_dir>/gitctrl.log and failures additionally to
<log_dir>/gitctrl_errors.log. The terminal is left to the menu.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

LOGGER_NAME = "gitctrl"


def resolve_log_dir(configured: Optional[str] = None) -> Path:
    """Configured directory, else /var/log if writable, else the temp dir."""
    if configured:
        return Path(configured).expanduser()

    log_dir = Path("/var/log")
    if not log_dir.exists() or not os.access(log_dir, os.W_OK):
        log_dir = Path(tempfile.gettempdir())
    return log_dir


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Attach file handlers to the package logger (once)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        return logger

    directory = resolve_log_dir(log_dir)
    formatter = logging.Formatter('%(asctime)s - %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')
    try:
        directory.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(directory / f"{LOGGER_NAME}.log", encoding='utf-8')
        fh.setLevel(level)

        eh = logging.FileHandler(directory / f"{LOGGER_NAME}_errors.log", encoding='utf-8')
        eh.setLevel(logging.ERROR)

        fh.setFormatter(formatter)
        eh.setFormatter(formatter)

        logger.addHandler(fh)
        logger.addHandler(eh)
    except OSError:
        # If logging setup fails, continue without file logging
        logger.addHandler(logging.NullHandler())

    return logger

"""Terminal and rolling-file log output for the ``riesel_llr`` package.

Levels (as on the command line)::

    0 = none, 1 = WARNING, 2 = INFO, 3 = DEBUG

DEBUG traces every Jacobi symbol and ladder step and slows the test down
noticeably.
"""

from __future__ import annotations

import datetime
import logging
import os
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = "riesel_llr"

LOG_LEVELS = {
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}

TERMINAL_FORMAT = "[%(funcName)s] %(asctime)s.%(msecs)03d %(levelname).4s -> %(message)s"
FILE_FORMAT = "[%(process)d - %(funcName)s] %(asctime)s.%(msecs)03d %(levelname).4s -> %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Handlers added by configure_logging, removed again on the next call.
_installed: list[logging.Handler] = []


def configure_logging(
    terminal_level: int = 0,
    file_level: int = 0,
    log_dir: str = ".logs",
) -> logging.Logger:
    """Attach the requested handlers to the package logger and return it.

    Replaces handlers installed by an earlier call; the root logger is left
    alone.
    """
    for level in (terminal_level, file_level):
        if level not in (0, *LOG_LEVELS):
            raise ValueError(f"log level must be between 0 and 3, got {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()

    levels = []
    if terminal_level:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(TERMINAL_FORMAT, DATE_FORMAT))
        handler.setLevel(LOG_LEVELS[terminal_level])
        logger.addHandler(handler)
        _installed.append(handler)
        levels.append(LOG_LEVELS[terminal_level])

    if file_level:
        os.makedirs(log_dir, exist_ok=True)
        filename = os.path.join(log_dir, f"logFile.{datetime.date.today():%Y%m%d}.log")
        handler = RotatingFileHandler(filename, maxBytes=100 * 1024 * 1024, backupCount=2)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        handler.setLevel(LOG_LEVELS[file_level])
        logger.addHandler(handler)
        _installed.append(handler)
        levels.append(LOG_LEVELS[file_level])

    logger.propagate = False
    logger.setLevel(min(levels) if levels else logging.CRITICAL + 1)
    return logger

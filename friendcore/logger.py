"""A daily log file in the working directory."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

LOGGER_NAME = "friendcore"
_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def log_file_name(day: date) -> str:
    """Return the log file name for ``day``, with unpadded month and day."""
    return f"logs-{day.year}.{day.month}.{day.day}.txt"


def setup_logger(directory: str | Path | None = None) -> logging.Logger:
    """Point the application logger at today's log file, appending to it."""
    path = Path(directory or ".") / log_file_name(date.today())
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from . import settings

LevelType = Optional[int | str]


def _to_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logger(
    name: Optional[str] = None, log_level: LevelType = None, console_level: LevelType = None
) -> logging.Logger:
    """
    Attaches the menu-friendly console handler and the rotating log file.

    The file receives everything at `log_level` (settings.LOG_LEVEL by default).
    The console has its own threshold (settings.CONSOLE_LOG_LEVEL) so load/save
    chatter can be kept off the menu screen while still landing in the file.
    Calling it twice for the same logger is a no-op.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    file_level = _to_level(log_level if log_level is not None else settings.LOG_LEVEL)
    screen_level = _to_level(console_level if console_level is not None else settings.CONSOLE_LOG_LEVEL)
    logger.setLevel(min(file_level, screen_level))

    # Console: bare messages, they sit between menu screens
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(screen_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    # File: timestamped audit trail of loads, saves and skipped rows
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.LOG_DIR / settings.LOG_FILENAME,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    return logger

"""Logging configuration for the AI news bot."""

import logging
import sys
from datetime import datetime
from pathlib import Path

from config import LOG_DIR, LOG_LEVEL

LOG_NAME = "ai_news_bot"


def resolve_level(name: str) -> int:
    """Map a level name like "debug" to its logging constant, INFO if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_dir: Path = LOG_DIR, level: str = LOG_LEVEL) -> logging.Logger:
    """Log to a dated file in `log_dir`, and to the console when attached to a TTY."""
    logger = logging.getLogger(LOG_NAME)
    log_level = resolve_level(level)
    logger.setLevel(log_level)

    # Calling again (tests, reconfiguration) replaces handlers instead of stacking them
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    log_file = Path(log_dir) / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    if sys.stdout is not None and sys.stdout.isatty():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

    if log_level == logging.INFO and level.strip().upper() != "INFO":
        logger.warning(f"Unknown LOG_LEVEL {level!r}, using INFO")

    return logger


# Global logger instance
logger = setup_logging()

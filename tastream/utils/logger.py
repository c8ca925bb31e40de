"""
Logging system for the indicator library.
Provides human-readable logs with console and optional file output.

The library itself only ever attaches a NullHandler; nothing is printed
until an application calls setup_logger() (or configures the "tastream"
logger some other way).
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "tastream"


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Color a copy so file handlers sharing the record stay plain
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.getMessage()}{Colors.RESET}"
        record.args = None
        return super().format(record)


def _install_null_handler() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger in the library namespace.

    Args:
        name: Dotted suffix under "tastream" (None for the root library logger)
    """
    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logger(
    log_level: Optional[str] = None,
    log_dir: Optional[str] = None,
    colored: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure the library logger with console and optional file output.

    Arguments left as None are taken from the environment configuration
    (see tastream.config). Calling this again replaces previous handlers.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_dir: Directory for a daily "tastream_YYYYMMDD.log" file
        colored: Use ANSI colors on the console handler

    Returns:
        The configured "tastream" logger
    """
    from ..config import get_config

    log_config = get_config().log
    level = (log_level or log_config.level).upper()
    log_dir = log_dir if log_dir is not None else log_config.log_dir
    colored = log_config.colored if colored is None else colored

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    formatter_cls = ColoredFormatter if colored else logging.Formatter
    console_handler.setFormatter(formatter_cls(
        "%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S"
    ))
    logger.addHandler(console_handler)

    # File handler (plain text, no colors)
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        log_file = path / f"{LOGGER_NAME}_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    logger.debug("Logger configured: level=%s log_dir=%s", level, log_dir)
    return logger


_install_null_handler()

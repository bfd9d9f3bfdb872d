"""
==============================================
Centralized logging configuration for codegen.
==============================================

Every module logs through the standard library; this module decides where
those records go. Console records are written to stderr, never stdout,
because generated code can be written to stdout with --out stdout.

Features:
- Colored console output with emoji level markers
- Optional plain-text log file
- Default console logging installed on first import

Example:
    >>> from core.logger import get_logger, setup_logging
    >>>
    >>> # Once, at startup
    >>> setup_logging(log_level='DEBUG', log_file='logs/codegen.log')
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("📋 Reading catalog")
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(emoji)s %(asctime)s - %(name)s - %(levelname)s - %(message)s'

RESET = '\033[0m'

# level name -> (ANSI color, emoji)
LEVEL_STYLES = {
    'DEBUG': ('\033[36m', '🔍'),
    'INFO': ('\033[32m', 'ℹ️ '),
    'WARNING': ('\033[33m', '⚠️ '),
    'ERROR': ('\033[31m', '❌'),
    'CRITICAL': ('\033[35m', '🔥'),
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name and sets %(emoji)s."""

    def format(self, record):
        # Work on a copy; a file handler formats the same record afterwards
        record = logging.makeLogRecord(record.__dict__)
        color, emoji = LEVEL_STYLES.get(record.levelname, ('', ''))
        record.emoji = emoji
        if color:
            record.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(record)


def _level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def _console_handler(level: int, use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if use_colors:
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a module logger, optionally with its own level.

    Args:
        name: Logger name, normally the caller's __name__
        level: Level name overriding the root level for this logger

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(_level(level))
    return logger


def set_log_level(log_level: str) -> None:
    """Change the level of the root logger and its handlers.

    Raises:
        ValueError: If log_level is not a known level name
    """
    level = _level(log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def setup_logging(
    log_level: str = 'INFO',
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
    use_colors: bool = True
) -> None:
    """Replace the root logger's handlers.

    Args:
        log_level: Level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Path of a log file to append to; parent directories
            are created
        console_output: Log to stderr
        use_colors: Color the console output

    Raises:
        ValueError: If log_level is not a known level name
    """
    level = _level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if console_output:
        root_logger.addHandler(_console_handler(level, use_colors))
    if log_file:
        root_logger.addHandler(_file_handler(Path(log_file), level))


def _init_default_logging():
    """Install console logging unless something configured logging already."""
    if not logging.getLogger().handlers:
        setup_logging()


# Auto-initialize on import
_init_default_logging()

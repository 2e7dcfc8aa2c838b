"""
Centralized logging infrastructure for the Breakout court.

Usage:
    from brickcourt.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Scene changed")
    logger.debug("Brick hit")

Configuration:
    Set LOG_LEVEL in config.py (or --log-level on the command line):
    - DEBUG: Every brick hit and intent
    - INFO: Scene changes, lost balls, level clears (default)
    - WARNING: Warnings and errors only
    - ERROR: Errors only
"""

import copy
import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class LogLevel(Enum):
    """Log levels for configuration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


ROOT_LOGGER_NAME = 'brickcourt'

# Module-level state
_initialized = False
# Set when get_logger() configured defaults before setup_logging() was called
_implicit = False
_log_dir: Optional[Path] = None
_file_handler: Optional[logging.FileHandler] = None


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, fmt: str, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors:
            # Other handlers share the record, so only the copy gets colored
            record = copy.copy(record)
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            record.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


def setup_logging(
    log_dir: str = 'logs',
    level: LogLevel = LogLevel.INFO,
    console_output: bool = True,
    file_output: bool = True,
    log_filename: Optional[str] = None,
) -> None:
    """
    Initialize the logging system.

    Args:
        log_dir: Directory for log files
        level: Minimum log level to capture
        console_output: Whether to output to console
        file_output: Whether to output to file
        log_filename: Custom log filename (default: breakout_YYYYMMDD_HHMMSS.log)
    """
    global _initialized, _implicit, _log_dir, _file_handler

    # An explicit call replaces the defaults installed by get_logger()
    if _initialized and not _implicit:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    # The file handler keeps DEBUG records; the console handler filters to `level`
    root_logger.setLevel(logging.DEBUG if file_output else level.value)
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    _file_handler = None

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_fmt = ColoredFormatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            use_colors=True
        )
        console_handler.setFormatter(console_fmt)
        root_logger.addHandler(console_handler)

    if file_output:
        _log_dir = Path(log_dir)
        _log_dir.mkdir(parents=True, exist_ok=True)
        if log_filename is None:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            log_filename = f'breakout_{timestamp}.log'

        log_path = _log_dir / log_filename
        _file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        _file_handler.setLevel(logging.DEBUG)  # Capture everything in file
        file_fmt = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
        )
        _file_handler.setFormatter(file_fmt)
        root_logger.addHandler(_file_handler)

    _initialized = True
    _implicit = False
    root_logger.info(f"Logging initialized (level={level.name}, file={file_output})")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the 'brickcourt' namespace

    Example:
        logger = get_logger(__name__)
        logger.info("Message")
    """
    global _implicit

    # Implicit initialization never writes files; main.py opts into that
    if not _initialized:
        setup_logging(file_output=False)
        _implicit = True

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def get_log_path() -> Optional[Path]:
    """Get the current log file path."""
    if _file_handler is not None:
        return Path(_file_handler.baseFilename)
    return None


def log_match_event(event: str, **kwargs) -> None:
    """
    Log a match state transition in a consistent format.

    Args:
        event: Event type ('ball_lost', 'level_cleared', 'switch', 'game_over')
        **kwargs: Additional context (e.g., player, score)
    """
    logger = get_logger('match')

    extra = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    if extra:
        logger.info(f"{event.upper()} | {extra}")
    else:
        logger.info(event.upper())

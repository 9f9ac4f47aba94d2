"""
Logging Setup.

All scorecard modules log under the "scramble" namespace. The console
handler colours the level name with colorama; an optional rotating log
file keeps plain records so an event's processing can be audited later.

    from scramble.utils.logger import setup_logger_from_config, get_logger

    setup_logger_from_config()          # once, at startup
    logger = get_logger(__name__)       # in every module
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

import colorama
from colorama import Fore, Style

colorama.init()

APP_LOGGER_NAME = "scramble"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name of console records."""

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        plain = record.levelname
        color = self.LEVEL_COLORS.get(record.levelno)
        if color:
            record.levelname = f"{color}{plain}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def _to_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return logging.getLevelName(level.upper())


def _console_handler(stream: TextIO, log_format: str, date_format: str, colorize: bool) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    formatter_cls = ColoredFormatter if colorize else logging.Formatter
    handler.setFormatter(formatter_cls(log_format, datefmt=date_format))
    return handler


def _file_handler(
    log_file: Union[str, Path],
    log_format: str,
    date_format: str,
    max_bytes: int,
    backup_count: int
) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
    )
    handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    return handler


def setup_logger(
    level: Union[str, int] = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    log_file: Optional[str] = None,
    max_bytes: int = 10485760,
    backup_count: int = 5,
    colorize: bool = True,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the "scramble" logger.

    Calling it again replaces the previous handlers, so a CLI run and a
    test session can each set up logging without duplicated output.

    Args:
        level: Level name or number.
        log_format: Record format, shared by console and file.
        date_format: Timestamp format.
        log_file: Rotating log file path; None disables file logging.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files kept.
        colorize: Colour level names on the console.
        stream: Console stream, stdout by default.

    Returns:
        The configured application logger.
    """
    log_format = log_format or DEFAULT_FORMAT
    date_format = date_format or DEFAULT_DATE_FORMAT

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.handlers.clear()
    app_logger.propagate = False
    set_level(level)

    app_logger.addHandler(
        _console_handler(stream or sys.stdout, log_format, date_format, colorize)
    )
    if log_file:
        app_logger.addHandler(
            _file_handler(log_file, log_format, date_format, max_bytes, backup_count)
        )

    app_logger.debug(f"Logging configured (level {logging.getLevelName(app_logger.level)})")
    return app_logger


def set_level(level: Union[str, int]) -> None:
    """Change the level of the application logger and its handlers."""
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(_to_level(level))
    for handler in app_logger.handlers:
        handler.setLevel(_to_level(level))


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, placed under the application namespace.

    Example:
        >>> get_logger("scramble.scoring.engine").name
        'scramble.scoring.engine'
        >>> get_logger("main").name
        'scramble.main'
    """
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def setup_logger_from_config() -> logging.Logger:
    """Set up logging from the ``logging`` section of the configuration."""
    from config import get_config

    log_file = None
    if get_config("logging.file.enabled", False):
        log_file = get_config("logging.file.path")

    return setup_logger(
        level=get_config("logging.level", "INFO"),
        log_format=get_config("logging.format"),
        date_format=get_config("logging.date_format"),
        log_file=log_file,
        max_bytes=get_config("logging.file.max_bytes", 10485760),
        backup_count=get_config("logging.file.backup_count", 5),
        colorize=get_config("logging.console.colorize", True) and sys.stdout.isatty()
    )

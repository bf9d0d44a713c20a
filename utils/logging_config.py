"""
Logging configuration for the subtitle markup decoder.

This module provides centralized logging setup with colored console output
and optional file output.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from .constants import DEFAULT_LOG_FORMAT, DEFAULT_LOG_DATE_FORMAT, DEFAULT_LOGGER_NAME


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record with colors.

        The record is copied so other handlers keep the plain level name.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with colors
        """
        colored = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(colored.levelname, self.RESET)
        colored.levelname = f"{log_color}{colored.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    use_colors: bool = True,
    logger_name: str = DEFAULT_LOGGER_NAME
) -> logging.Logger:
    """
    Set up logging with appropriate level and formatting.

    Module loggers are created with ``get_logger(__name__)``; they propagate
    to the root logger, so handlers are attached there while ``logger_name``
    names the application logger that is returned.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        log_file: Optional path to log file for file output
        use_colors: Whether to use colored output for console
        logger_name: Name for the application logger

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging(logging.DEBUG, Path("subsdec.log"))
        >>> logger.info("Decoder started")
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if use_colors and sys.stderr.isatty():
        console_formatter = ColoredFormatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT)
    else:
        console_formatter = logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT)

    console_handler.setFormatter(console_formatter)
    root.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT))
        root.addHandler(file_handler)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_log_level(logger: logging.Logger, level: int) -> None:
    """
    Set the log level for a logger and all its handlers.

    Args:
        logger: Logger instance to modify
        level: New logging level
    """
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)

"""Logging infrastructure for kraftpack.

Provides centralized logging configuration with support for both
file and console output, log rotation, and ISO 8601 timestamps.
Adds a TRACE level below DEBUG for per-backend fan-out events.
"""

import logging
import logging.handlers
import os
from typing import Dict, Optional

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_LEVELS: Dict[str, int] = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_level(level: str) -> int:
    """Convert a level name to its numeric value.

    Args:
        level: Level name, case-insensitive (TRACE, DEBUG, INFO, ...)

    Returns:
        Numeric logging level

    Raises:
        ValueError: If the level name is unknown
    """
    level_upper = level.upper()
    if level_upper not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: {', '.join(LOG_LEVELS)}"
        )
    return LOG_LEVELS[level_upper]


def setup_logger(
    name: str,
    log_dir: str = "/var/log/kraftpack",
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    file_logging: bool = True,
    console_logging: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Set up a logger with file and console handlers.

    Args:
        name: Logger name (typically module or component name)
        log_dir: Directory for log files
        level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string
        date_format: Custom date format string (ISO 8601 by default)
        file_logging: Enable file logging
        console_logging: Enable console logging
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(parse_level(level))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if log_format is None:
        log_format = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
    if date_format is None:
        date_format = "%Y-%m-%dT%H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"{name}.log")
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get an existing logger by name.

    Loggers are namespaced under ``kraftpack`` so a single
    ``setup_logger("kraftpack")`` call configures every module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name == "kraftpack" or name.startswith("kraftpack."):
        return logging.getLogger(name)
    return logging.getLogger(f"kraftpack.{name}")

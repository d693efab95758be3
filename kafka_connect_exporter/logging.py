"""
Logging configuration for the exporter.

Console output goes to stdout; a log file can be added on top of it.
"""

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "kafka_connect_exporter"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    return LEVELS.get(level_str.lower(), logging.INFO)


def setup_logging(level: str = "info", log_file: str | None = None) -> None:
    """
    Configure the package logger.

    Args:
        level: Log level name (debug, info, warning, error, critical)
        log_file: Optional path of a file to log to in addition to stdout
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(get_log_level(level))
    root_logger.handlers.clear()
    root_logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Reduce noise from external libraries
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name.startswith(ROOT_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")

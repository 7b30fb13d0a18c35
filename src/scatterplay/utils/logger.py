"""
File: src/scatterplay/utils/logger.py
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import time

LOG_DIR = Path("logs")

APP_LOGGER_NAME = 'Scatterplay'

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}


class LogFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


def resolve_level(level) -> int:
    """Map a level name or number to a logging level, defaulting to INFO."""
    if isinstance(level, int):
        return level
    return LEVELS.get(str(level).upper(), logging.INFO)


def setup_logging(level="INFO", log_to_file=False, log_dir=None,
                  max_bytes=1_000_000, backup_count=3):
    """Set up logging configuration.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant.
            Unknown names fall back to INFO.
        log_to_file: Also write to a rotating log file
        log_dir: Directory for log files, LOG_DIR by default
        max_bytes: Size at which the log file is rotated
        backup_count: Number of rotated files kept

    Returns:
        logging.Logger: The application logger
    """
    log_level = resolve_level(level)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(LogFormatter())
    root_logger.addHandler(console_handler)

    if log_to_file:
        directory = Path(log_dir) if log_dir is not None else Path(LOG_DIR)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            log_file = directory / \
                f"scatterplay_{time.strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = RotatingFileHandler(
                log_file, maxBytes=max_bytes, backupCount=backup_count,
                encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(LogFormatter())
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.error(f"Could not create log file in {directory}: {e}")

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(log_level)

    logger.info("=== Starting Scatterplay ===")
    logger.debug("Debug logging enabled")

    return logger


def shutdown_logging():
    """Flush and close all root handlers."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        try:
            handler.flush()
            handler.close()
        except Exception:
            pass  # Ignore errors during shutdown
        root_logger.removeHandler(handler)

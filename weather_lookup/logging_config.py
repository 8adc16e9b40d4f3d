"""Structured logging for the Weather Lookup backend.

The root logger gets two handlers: JSON lines to a rotating file under the
configured log directory, and plain text to stdout for local runs.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

DEFAULT_LOG_FILE = "weather_lookup.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

# Loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "uvicorn.access")


def _json_file_handler(log_path: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    # The file keeps everything; the level filter applies to the console only
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", "%H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(
    log_level: str,
    log_dir: Path,
    log_file: str = DEFAULT_LOG_FILE,
) -> logging.Logger:
    """Install the file and console handlers on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        log_level: Console level name, already validated by Settings
        log_dir: Directory for the JSON log file; created if missing
        log_file: File name inside ``log_dir``

    Returns:
        The root logger
    """
    level = logging.getLevelName(log_level.upper())
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_json_file_handler(log_dir / log_file))
    root_logger.addHandler(_console_handler(level))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log ``message`` with ``extra_fields`` attached as JSON keys.

    Field names must not clash with ``LogRecord`` attributes such as
    ``name``, ``message`` or ``args``.
    """
    getattr(logger, level.lower())(message, extra=extra_fields)

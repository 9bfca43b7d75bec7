"""Logging setup for randstat.

randstat is silent by default: the package logger only carries a
NullHandler. The sampler attaches structured fields to its records under
the ``randstat`` attribute (the overflowing entry and cursor position, or
the slot counts of a new table). Both formatters here write those fields
out, as ``key=value`` pairs or as a nested JSON object.

Example usage:
    import randstat

    randstat.enable_console_logging(level="DEBUG")
    randstat.enable_file_logging("logs/randstat.jsonl", as_json=True)
    randstat.configure_from_env()

Environment variables:
    RANDSTAT_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RANDSTAT_LOG_FILE: Path to log file (enables rotating file logging)
    RANDSTAT_LOG_JSON: Set to "1" for JSON output
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "set_level",
]

LOGGER_NAME = "randstat"

# Record attribute holding the sampler's structured fields.
FIELDS_ATTR = "randstat"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 1024 * 1024  # 1 MB
DEFAULT_BACKUP_COUNT = 3

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Structured fields the sampler attached to ``record``, or ``{}``."""
    return getattr(record, FIELDS_ATTR, None) or {}


class KeyValueFormatter(logging.Formatter):
    """Plain text formatter that appends sampler fields as ``key=value``.

    Example output:
        2026-10-18 09:12:03 - randstat.sampler - WARNING - RandStat overflow
        [event=overflow entry=1 percentage=20 value=2 cursor=90 slots=100]
    """

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        fields = record_fields(record)
        if not fields:
            return text
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{text} [{pairs}]"


class JsonFormatter(logging.Formatter):
    """Formats records as one JSON object per line, sampler fields nested.

    Example output:
        {"timestamp": "...", "level": "WARNING", "logger": "randstat.sampler",
         "message": "RandStat overflow", "randstat": {"event": "overflow",
         "entry": 1, "percentage": 20, "value": 2, "cursor": 90, "slots": 100}}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields = record_fields(record)
        if fields:
            log_data[FIELDS_ATTR] = fields
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def _get_level(level: str | int) -> int:
    """Convert a level name or int to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _attach(handler: logging.Handler, level: LogLevel | int, as_json: bool) -> None:
    if as_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(KeyValueFormatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    handler.setLevel(_get_level(level))

    logger = _get_logger()
    logger.setLevel(_get_level(level))
    logger.addHandler(handler)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    as_json: bool = False,
) -> logging.StreamHandler:
    """Log randstat records to stderr.

    Args:
        level: Log level name or int.
        as_json: Emit JSON lines instead of text.

    Returns:
        The created StreamHandler.
    """
    handler = logging.StreamHandler()
    _attach(handler, level, as_json)
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    as_json: bool = False,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Log randstat records to a rotating file.

    Args:
        path: Log file. Parent directories are created automatically.
        level: Log level name or int.
        as_json: Emit JSON lines instead of text.
        max_bytes: Size at which the file rolls over.
        backup_count: Number of rolled-over files to keep.

    Returns:
        The created RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    _attach(handler, level, as_json)
    return handler


def configure_from_env() -> None:
    """Configure logging from RANDSTAT_* environment variables.

    Does nothing when neither RANDSTAT_LOGGING nor RANDSTAT_LOG_FILE is set.
    A log file without a level logs at INFO.
    """
    level = os.environ.get("RANDSTAT_LOGGING", "").upper()
    log_file = os.environ.get("RANDSTAT_LOG_FILE", "")
    as_json = os.environ.get("RANDSTAT_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"
    if log_file:
        enable_file_logging(log_file, level=level, as_json=as_json)
    else:
        enable_console_logging(level=level, as_json=as_json)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the randstat package logger."""
    _get_logger().setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence randstat completely."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)

"""Structured logging for sqlcomponents.

Log records go to stderr, formatted as JSON by default. Structured fields are
passed through the ``extra_fields`` key of ``extra``::

    logger.debug("table registered", extra={"extra_fields": {"table": "users"}})

The library never configures logging on import; hosts call :func:`init_logging`
once, typically from their own entry point.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

LOG_LEVEL_ENV_VAR = "SQLCOMPONENTS_LOG_LEVEL"

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if present
        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _resolve_level(level: Optional[str]) -> int:
    """Turn a level name into a numeric logging level, defaulting to INFO."""
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO")

    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    return numeric_level


def init_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Initialize stderr logging for the ``sqlcomponents`` logger hierarchy.

    Args:
        level: Log level name. Falls back to ``SQLCOMPONENTS_LOG_LEVEL``, then INFO.
        log_format: ``"json"`` (default) or ``"text"``.
    """
    numeric_level = _resolve_level(level)

    package_logger = logging.getLogger("sqlcomponents")
    package_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates on re-initialization
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(numeric_level)
    if (log_format or "json").lower() == "text":
        stderr_handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        stderr_handler.setFormatter(JSONFormatter())

    package_logger.addHandler(stderr_handler)

    package_logger.debug("sqlcomponents logging initialized", extra={
        "extra_fields": {
            "log_level": logging.getLevelName(numeric_level),
            "handler": "stderr",
            "format": (log_format or "json").lower(),
        }
    })


def get_logger(name: str) -> logging.Logger:
    """Get a logger within the sqlcomponents hierarchy.

    Args:
        name: Logger name, normally the calling module's ``__name__``.

    Returns:
        The logger instance
    """
    return logging.getLogger(name)

"""Core sqlcomponents components.

- Error handling and exceptions
- Logging setup

Configuration lives in :mod:`sqlcomponents.core.config`, which depends on the
dialect and template packages and is therefore not imported here.
"""

from .error import (
    SqlComponentsError,
    ConfigError,
    ModelError,
    TableNotFoundError,
    UnsupportedDialectError,
    TemplateResolutionError,
)
from .logging import init_logging, get_logger, JSONFormatter

__all__ = [
    # Error handling
    "SqlComponentsError",
    "ConfigError",
    "ModelError",
    "TableNotFoundError",
    "UnsupportedDialectError",
    "TemplateResolutionError",
    # Logging
    "init_logging",
    "get_logger",
    "JSONFormatter",
]

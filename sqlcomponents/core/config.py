"""Configuration management for sqlcomponents.

Settings select the identifier-quoting dialect, where custom type templates
live, and how logging is set up. They can be built directly, from a dict, or
from ``SQLCOMPONENTS_*`` environment variables (optionally read from a
``.env`` file).
"""

import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..dialects import DatabaseType, Dialect, get_dialect_for_database_type
from ..templates import (
    DEFAULT_TEMPLATE_EXTENSION,
    DirectoryTemplateResolver,
    NullTemplateResolver,
    TypeTemplateResolver,
)
from .error import ConfigError

ENV_PREFIX = "SQLCOMPONENTS_"


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Config(BaseModel):
    """Settings shared by the model and its host generator."""

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    # Identifier escaping
    dialect: DatabaseType = Field(default=DatabaseType.POSTGRES, description="SQL dialect used for escaping")
    always_quote: bool = Field(default=False, description="Quote every identifier, not only when necessary")

    # Custom type templates
    templates_dir: Optional[str] = Field(default=None, description="Directory holding custom type templates")
    template_extension: str = Field(default=DEFAULT_TEMPLATE_EXTENSION, description="Template file extension")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Validate and normalize log level."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log format must be 'json' or 'text'")
        return v

    @field_validator("dialect", mode="before")
    @classmethod
    def validate_dialect(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("template_extension")
    @classmethod
    def validate_template_extension(cls, v):
        if v and not v.startswith("."):
            return "." + v
        return v

    @classmethod
    def from_env(
        cls,
        dotenv_path: Optional[str] = None,
        load_dotenv_file: bool = True,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        """Create configuration from environment variables.

        Values from the ``.env`` file are read without touching ``os.environ``;
        variables already present in the environment take precedence.

        Args:
            dotenv_path: Explicit ``.env`` file; searched from the working directory if omitted
            load_dotenv_file: Whether to read a ``.env`` file at all
            environ: Mapping to read instead of ``os.environ``

        Returns:
            The configuration

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        source: Dict[str, str] = {}
        if load_dotenv_file:
            path = dotenv_path or find_dotenv(usecwd=True)
            if path:
                source.update(
                    (key, value)
                    for key, value in dotenv_values(path).items()
                    if value is not None
                )
        source.update(os.environ if environ is None else environ)

        data: Dict[str, Any] = {}
        for field_name in cls.model_fields:
            value = source.get(ENV_PREFIX + field_name.upper())
            if value is not None:
                data[field_name] = value

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary.

        Raises:
            ConfigError: If the dictionary holds invalid values
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError.invalid_config(
                ", ".join(str(err["loc"][0]) for err in e.errors()), e
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(mode="json")

    def create_dialect(self) -> Dialect:
        """Build the identifier-quoting dialect these settings select."""
        return get_dialect_for_database_type(self.dialect, always_quote=self.always_quote)

    def create_template_resolver(self) -> TypeTemplateResolver:
        """Build the type-template resolver these settings select."""
        if self.templates_dir is None:
            return NullTemplateResolver()
        return DirectoryTemplateResolver(self.templates_dir, self.template_extension)


"""Error handling for sqlcomponents.

The metadata model itself is total: derived queries over a table never raise.
Errors are raised only at the edges of the model, when configuration is
loaded, when a dialect is requested that does not exist, or when a table is
looked up by a name the database does not own.
"""

from typing import Optional


class SqlComponentsError(Exception):
    """Base exception for all sqlcomponents errors.

    Carries an optional underlying cause so that errors raised while loading
    configuration or probing templates keep their origin.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __repr__(self) -> str:
        if self.cause:
            return f"{self.__class__.__name__}('{self.message}', cause={self.cause!r})"
        return f"{self.__class__.__name__}('{self.message}')"


class ConfigError(SqlComponentsError):
    """Error that occurs due to configuration issues.

    Raised when configuration validation fails, a required configuration
    value is missing, or environment values cannot be parsed.

    Examples:
        ```python
        try:
            config = Config.from_env()
        except ConfigError as e:
            logger.error("bad configuration", extra={"extra_fields": {"error": str(e)}})
        ```
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"configuration error: {message}", cause)

    @classmethod
    def missing_env_var(cls, var_name: str) -> "ConfigError":
        """Create a ConfigError for a missing environment variable."""
        return cls(f"missing environment variable: {var_name}")

    @classmethod
    def invalid_config(cls, message: str, cause: Optional[Exception] = None) -> "ConfigError":
        """Create a ConfigError for invalid configuration."""
        return cls(f"invalid configuration: {message}", cause)


class ModelError(SqlComponentsError):
    """Error in assembling the metadata object graph."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"model error: {message}", cause)


class TableNotFoundError(ModelError):
    """A table was looked up by a name the database does not own."""

    def __init__(self, table_name: str) -> None:
        super().__init__(f"table not found: {table_name}")
        self.table_name = table_name


class UnsupportedDialectError(SqlComponentsError):
    """No identifier-quoting dialect exists for the requested database type."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"unsupported dialect: {message}", cause)


class TemplateResolutionError(SqlComponentsError):
    """A template resolver could not be constructed.

    Probing for a template that does not exist is never an error; this is
    raised only for an unusable resolver setup, such as a templates path that
    points at a regular file.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"template resolution error: {message}", cause)

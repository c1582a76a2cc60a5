"""sqlcomponents: relational schema metadata for code generation.

Introspection fills a :class:`Database` with :class:`Table` objects and their
columns, indices and unique constraints. The code generator then reads the
derived facts off each table: whether it has a (generated) primary key, its
unique-constraint groups, and which column types need custom templates.
"""

from .core import (
    SqlComponentsError,
    ConfigError,
    ModelError,
    TableNotFoundError,
    UnsupportedDialectError,
    TemplateResolutionError,
    init_logging,
    get_logger,
)
from .dialects import (
    DatabaseType,
    Dialect,
    PostgresDialect,
    MySqlDialect,
    SqliteDialect,
    get_dialect_for_database_type,
)
from .templates import (
    TypeTemplateResolver,
    NullTemplateResolver,
    StaticTemplateResolver,
    DirectoryTemplateResolver,
)
from .model.relational import (
    Flag,
    TableType,
    Column,
    Index,
    UniqueConstraint,
    Table,
    Database,
)
from .core.config import Config, LogLevel

__version__ = "0.1.0"

__all__ = [
    # Errors
    "SqlComponentsError",
    "ConfigError",
    "ModelError",
    "TableNotFoundError",
    "UnsupportedDialectError",
    "TemplateResolutionError",
    # Logging and configuration
    "init_logging",
    "get_logger",
    "Config",
    "LogLevel",
    # Dialects
    "DatabaseType",
    "Dialect",
    "PostgresDialect",
    "MySqlDialect",
    "SqliteDialect",
    "get_dialect_for_database_type",
    # Template resolution
    "TypeTemplateResolver",
    "NullTemplateResolver",
    "StaticTemplateResolver",
    "DirectoryTemplateResolver",
    # Model
    "Flag",
    "TableType",
    "Column",
    "Index",
    "UniqueConstraint",
    "Table",
    "Database",
]

"""Identifier-quoting dialects backing ``Database.escaped_name``."""

from typing import Union

from ..core.error import UnsupportedDialectError
from .base import DatabaseType, Dialect
from .mysql import MySqlDialect
from .postgres import PostgresDialect
from .sqlite import SqliteDialect


def get_dialect_for_database_type(
    db_type: Union[DatabaseType, str],
    always_quote: bool = False,
) -> Dialect:
    """Get the identifier-quoting dialect for a database type.

    Args:
        db_type: The database type, as enum member or its string value
        always_quote: Quote every identifier instead of only when necessary

    Returns:
        A Dialect implementation for the database type

    Raises:
        UnsupportedDialectError: If no dialect exists for the database type
    """
    try:
        db_type = DatabaseType(db_type)
    except ValueError as e:
        raise UnsupportedDialectError(str(db_type), e) from e

    if db_type == DatabaseType.SQLITE:
        return SqliteDialect(always_quote)
    elif db_type == DatabaseType.POSTGRES:
        return PostgresDialect(always_quote)
    elif db_type == DatabaseType.MYSQL:
        return MySqlDialect(always_quote)
    else:
        raise UnsupportedDialectError(str(db_type))


__all__ = [
    "DatabaseType",
    "Dialect",
    "SqliteDialect",
    "PostgresDialect",
    "MySqlDialect",
    "get_dialect_for_database_type",
]

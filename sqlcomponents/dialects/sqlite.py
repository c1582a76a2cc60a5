"""SQLite identifier-quoting dialect."""

from typing import FrozenSet

from .base import COMMON_RESERVED_WORDS, DatabaseType, Dialect


class SqliteDialect(Dialect):
    """SQLite accepts the standard double-quoted identifier form."""

    RESERVED_WORDS = COMMON_RESERVED_WORDS | frozenset({
        "abort", "autoincrement", "conflict", "database", "deferrable",
        "detach", "escape", "except", "exclusive", "glob", "ignore",
        "indexed", "instead", "intersect", "isnull", "notnull", "offset",
        "pragma", "raise", "regexp", "reindex", "rename", "replace",
        "rowid", "temp", "temporary", "transaction", "trigger", "vacuum",
        "virtual",
    })

    @property
    def database_type(self) -> DatabaseType:
        return DatabaseType.SQLITE

    @property
    def quote_char(self) -> str:
        return '"'

    @property
    def reserved_words(self) -> FrozenSet[str]:
        return self.RESERVED_WORDS

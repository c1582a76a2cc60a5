"""MySQL identifier-quoting dialect."""

from typing import FrozenSet

from .base import COMMON_RESERVED_WORDS, DatabaseType, Dialect


class MySqlDialect(Dialect):
    """MySQL quotes identifiers with backticks."""

    RESERVED_WORDS = COMMON_RESERVED_WORDS | frozenset({
        "accessible", "change", "condition", "database", "databases", "dual",
        "explain", "fulltext", "interval", "keys", "kill", "lock", "match",
        "mod", "option", "range", "read", "regexp", "rename", "repeat",
        "replace", "require", "rlike", "schema", "schemas", "show", "spatial",
        "sql", "ssl", "starting", "straight_join", "terminated", "trigger",
        "unsigned", "usage", "write", "xor", "zerofill",
    })

    @property
    def database_type(self) -> DatabaseType:
        return DatabaseType.MYSQL

    @property
    def quote_char(self) -> str:
        return "`"

    @property
    def reserved_words(self) -> FrozenSet[str]:
        return self.RESERVED_WORDS

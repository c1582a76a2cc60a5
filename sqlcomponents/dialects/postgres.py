"""PostgreSQL identifier-quoting dialect."""

from typing import FrozenSet

from .base import COMMON_RESERVED_WORDS, DatabaseType, Dialect


class PostgresDialect(Dialect):
    """PostgreSQL quotes identifiers with double quotes and folds bare names to lower case."""

    RESERVED_WORDS = COMMON_RESERVED_WORDS | frozenset({
        "analyse", "analyze", "array", "asymmetric", "both", "cast", "collate",
        "current_date", "current_role", "current_time", "current_timestamp",
        "current_user", "deferrable", "do", "except", "false", "fetch", "for",
        "grant", "initially", "intersect", "lateral", "leading", "localtime",
        "localtimestamp", "offset", "only", "placing", "returning",
        "session_user", "some", "symmetric", "trailing", "true", "variadic",
        "window",
    })

    @property
    def database_type(self) -> DatabaseType:
        return DatabaseType.POSTGRES

    @property
    def quote_char(self) -> str:
        return '"'

    @property
    def reserved_words(self) -> FrozenSet[str]:
        return self.RESERVED_WORDS

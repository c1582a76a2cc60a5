"""Base identifier-quoting dialect."""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet, Optional

# Identifiers made only of these characters, not starting with a digit,
# can be emitted bare in every supported dialect.
_PLAIN_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")

COMMON_RESERVED_WORDS = frozenset({
    "add", "all", "alter", "and", "as", "asc", "between", "by", "case",
    "check", "column", "constraint", "create", "cross", "default", "delete",
    "desc", "distinct", "drop", "else", "end", "exists", "foreign", "from",
    "full", "group", "having", "in", "index", "inner", "insert", "into", "is",
    "join", "key", "left", "like", "limit", "not", "null", "on", "or",
    "order", "outer", "primary", "references", "right", "select", "set",
    "table", "then", "union", "unique", "update", "user", "using", "values",
    "view", "when", "where", "with",
})


class DatabaseType(str, Enum):
    """Database engines with a known identifier-quoting dialect."""
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"


class Dialect(ABC):
    """Identifier-quoting rule for one SQL dialect.

    Identifiers are quoted only when they would not survive unquoted: reserved
    words, mixed or upper case, characters outside ``[a-z0-9_]`` or a leading
    digit. With ``always_quote`` every identifier is quoted.
    """

    def __init__(self, always_quote: bool = False) -> None:
        self.always_quote = always_quote

    @property
    @abstractmethod
    def database_type(self) -> DatabaseType:
        """The database engine this dialect belongs to."""

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Character used on both sides of a quoted identifier."""

    @property
    def reserved_words(self) -> FrozenSet[str]:
        """Lowercased reserved words that must always be quoted."""
        return COMMON_RESERVED_WORDS

    def quote_identifier(self, identifier: str) -> str:
        """Quote an identifier (table name, column name, etc.).

        Embedded quote characters are doubled.

        Args:
            identifier: The identifier to quote

        Returns:
            Quoted identifier
        """
        q = self.quote_char
        return f"{q}{identifier.replace(q, q + q)}{q}"

    def is_reserved_word(self, identifier: str) -> bool:
        return identifier.lower() in self.reserved_words

    def needs_quoting(self, identifier: Optional[str]) -> bool:
        """Check whether an identifier must be quoted to be used verbatim.

        Empty or ``None`` identifiers never need quoting.
        """
        if not identifier:
            return False
        if self.always_quote:
            return True
        if not _PLAIN_IDENTIFIER.match(identifier):
            return True
        return self.is_reserved_word(identifier)

    def escaped_name(self, identifier: Optional[str]) -> Optional[str]:
        """Return the identifier, quoted if necessary."""
        if self.needs_quoting(identifier):
            return self.quote_identifier(identifier)
        return identifier

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(always_quote={self.always_quote})"

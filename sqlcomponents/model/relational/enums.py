"""Enumerations for introspected relational metadata."""

from enum import Enum
from typing import Any, Optional


class TableType(str, Enum):
    """Table types as reported by database metadata (JDBC ``TABLE_TYPE``)."""
    TABLE = "TABLE"
    VIEW = "VIEW"
    SYSTEM_TABLE = "SYSTEM TABLE"
    GLOBAL_TEMPORARY = "GLOBAL TEMPORARY"
    LOCAL_TEMPORARY = "LOCAL TEMPORARY"
    ALIAS = "ALIAS"
    SYNONYM = "SYNONYM"
    OTHER = "OTHER"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["TableType"]:
        """Map a database-reported table type onto a member.

        Matching ignores case and treats ``_`` like a space, so both
        ``"SYSTEM TABLE"`` and ``"system_table"`` resolve. Unmapped values
        become :attr:`OTHER`.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value

        normalized = " ".join(str(value).replace("_", " ").upper().split())
        for member in cls:
            if member.value == normalized:
                return member
        return cls.OTHER


class Flag(str, Enum):
    """Tri-state flag for metadata the database may not report."""
    YES = "YES"
    NO = "NO"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Any) -> "Flag":
        """Map a reported value (``"YES"``/``"NO"``/``""``, bool or None) onto a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.YES if value else cls.NO
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized == "YES":
                return cls.YES
            if normalized == "NO":
                return cls.NO
        return cls.UNKNOWN

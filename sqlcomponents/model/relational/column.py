"""Column metadata."""

from dataclasses import dataclass
from typing import Optional

from .enums import Flag


@dataclass
class Column:
    """A single introspected table column.

    ``primary_key_index`` is meaningful only when ``is_primary_key`` is set.
    Columns in the same unique constraint share ``unique_constraint_name``
    and are expected to be stored next to each other.
    """
    column_name: Optional[str] = None
    type_name: Optional[str] = None
    table_name: Optional[str] = None
    size: Optional[int] = None
    decimal_digits: Optional[int] = None
    nullable: Flag = Flag.UNKNOWN
    remarks: Optional[str] = None
    default_value: Optional[str] = None
    ordinal_position: int = 0
    auto_increment: Flag = Flag.UNKNOWN
    generated_column: Flag = Flag.UNKNOWN
    is_primary_key: bool = False
    primary_key_index: int = 0
    unique_constraint_name: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.column_name}::{self.type_name}"

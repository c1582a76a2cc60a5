"""Relational metadata model: databases, tables, columns, indices and unique constraints."""

from .enums import Flag, TableType
from .column import Column
from .index import Index
from .unique_constraint import UniqueConstraint
from .table import Table
from .database import Database

__all__ = [
    "Flag",
    "TableType",
    "Column",
    "Index",
    "UniqueConstraint",
    "Table",
    "Database",
]

"""Table metadata and the derived facts the code generator decides on."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Set

from ...core.logging import get_logger
from .column import Column
from .enums import Flag, TableType
from .index import Index
from .unique_constraint import UniqueConstraint

if TYPE_CHECKING:
    from .database import Database

logger = get_logger(__name__)


@dataclass(eq=False)
class Table:
    """A table (or view, synonym, ...) of a database.

    Attributes are filled in while the schema is introspected and are not
    validated here. Once generation starts the table is treated as a
    read-only snapshot; every derived property is recomputed from
    ``columns`` on access.

    ``columns`` keeps introspection order, which the derived queries rely
    on. It may be left unset until the table is populated, in which case
    every derived query returns its empty result.

    The owning database is held as a plain back-reference and is used only
    for identifier escaping and custom type-template lookups.
    """
    database: "Database" = field(repr=False)
    table_name: Optional[str] = None
    sequence_name: Optional[str] = None
    category_name: Optional[str] = None
    schema_name: Optional[str] = None
    table_type: Optional[TableType] = None
    remarks: Optional[str] = None
    category_type: Optional[str] = None
    schema_type: Optional[str] = None
    name_type: Optional[str] = None
    self_referencing_column_name: Optional[str] = None
    reference_generation: Optional[str] = None
    columns: Optional[List[Column]] = None
    indices: Optional[List[Index]] = None
    unique_columns: Optional[List[UniqueConstraint]] = None
    _warned_unique_groups: Set[str] = field(default_factory=set, init=False, repr=False)

    def __str__(self) -> str:
        return f"{self.table_name}::{self.table_type}"

    def _columns(self) -> List[Column]:
        return self.columns or []

    @property
    def escaped_name(self) -> Optional[str]:
        """Table name escaped by the owning database's quoting rule."""
        return self.database.escaped_name(self.table_name)

    @property
    def has_primary_key(self) -> bool:
        """Whether any column is part of the primary key."""
        return any(column.is_primary_key for column in self._columns())

    @property
    def has_auto_generated_primary_key(self) -> bool:
        """Whether any primary key column is auto-incremented.

        A composite key with a single auto-incremented column qualifies.
        """
        return any(
            column.is_primary_key and column.auto_increment == Flag.YES
            for column in self._columns()
        )

    @property
    def highest_pk_index(self) -> int:
        """Highest ``primary_key_index`` among the primary key columns.

        Returns 0 when the table has no primary key. A single primary key
        column at index 0 also yields 0, so use :attr:`has_primary_key` to
        tell the two apart.
        """
        return max(
            (column.primary_key_index for column in self._columns() if column.is_primary_key),
            default=0,
        )

    @property
    def unique_constraint_group_names(self) -> List[str]:
        """Unique-constraint group names in column order.

        A name is emitted each time it differs from the last emitted one, so
        columns of one constraint must be contiguous. A name that shows up
        again after another group is emitted a second time. Columns without a
        group do not end a run.
        Such a reappearance is logged as a warning once per table and group.
        """
        group_names: List[str] = []
        previous: Optional[str] = None
        for column in self._columns():
            group_name = column.unique_constraint_name
            if group_name is not None and group_name != previous:
                if group_name in group_names and group_name not in self._warned_unique_groups:
                    self._warned_unique_groups.add(group_name)
                    logger.warning("unique constraint columns are not contiguous", extra={
                        "extra_fields": {
                            "table": self.table_name,
                            "unique_constraint": group_name,
                        }
                    })
                group_names.append(group_name)
                previous = group_name
        return group_names

    @property
    def distinct_column_type_names(self) -> List[str]:
        """Sorted, de-duplicated column type names."""
        return sorted({column.type_name for column in self._columns()})

    @property
    def distinct_custom_column_type_names(self) -> List[str]:
        """Sorted, de-duplicated column type names that have a custom template.

        The database's type-template resolver is asked with the lowercased
        type name; the original spelling is returned.
        """
        resolver = self.database.type_template_resolver
        return [
            type_name
            for type_name in self.distinct_column_type_names
            if resolver.has_custom_template(type_name.lower())
        ]

"""Database metadata: the root of the relational object graph."""

from typing import Iterable, Iterator, List, Optional

from ...core.error import ModelError, TableNotFoundError
from ...core.logging import get_logger
from ...dialects import Dialect, PostgresDialect
from ...templates import NullTemplateResolver, TypeTemplateResolver
from .table import Table

logger = get_logger(__name__)


class Database:
    """A database and the tables introspected from it.

    The database owns its tables and supplies the two services they delegate
    to: identifier escaping (through its dialect) and custom type-template
    lookups (through the injected resolver).
    """

    def __init__(
        self,
        database_name: Optional[str] = None,
        catalog: Optional[str] = None,
        dialect: Optional[Dialect] = None,
        type_template_resolver: Optional[TypeTemplateResolver] = None,
    ) -> None:
        """Initialize the database.

        Args:
            database_name: Database name
            catalog: Catalog the tables were introspected from
            dialect: Identifier-quoting rule, PostgreSQL if omitted
            type_template_resolver: Custom template lookup, none found if omitted
        """
        self.database_name = database_name
        self.catalog = catalog
        self.dialect = dialect if dialect is not None else PostgresDialect()
        self.type_template_resolver = (
            type_template_resolver
            if type_template_resolver is not None
            else NullTemplateResolver()
        )
        self._tables: List[Table] = []

    def escaped_name(self, identifier: Optional[str]) -> Optional[str]:
        """Escape an identifier with this database's quoting rule."""
        return self.dialect.escaped_name(identifier)

    def create_table(self, table_name: str, **attributes) -> Table:
        """Create a table bound to this database and register it.

        Args:
            table_name: Table name
            **attributes: Further :class:`Table` attributes

        Returns:
            The new table
        """
        table = Table(self, table_name=table_name, **attributes)
        self.add_table(table)
        return table

    def add_table(self, table: Table) -> None:
        """Register a table with this database.

        Raises:
            ModelError: If the table is bound to a different database
        """
        if table.database is not self:
            raise ModelError(f"table {table.table_name} belongs to another database")

        self._tables.append(table)
        logger.debug("table registered", extra={
            "extra_fields": {
                "database": self.database_name,
                "table": table.table_name,
                "table_type": str(table.table_type),
            }
        })

    def add_tables(self, tables: Iterable[Table]) -> None:
        for table in tables:
            self.add_table(table)

    @property
    def tables(self) -> List[Table]:
        """Tables in registration order."""
        return list(self._tables)

    def find_table(self, table_name: str) -> Optional[Table]:
        """Get a table by name, or None if this database does not own it."""
        for table in self._tables:
            if table.table_name == table_name:
                return table
        return None

    def get_table(self, table_name: str) -> Table:
        """Get a table by name.

        Raises:
            TableNotFoundError: If this database does not own the table
        """
        table = self.find_table(table_name)
        if table is None:
            raise TableNotFoundError(table_name)
        return table

    def __iter__(self) -> Iterator[Table]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return (
            f"Database(database_name={self.database_name!r}, catalog={self.catalog!r}, "
            f"dialect={self.dialect!r}, tables={len(self._tables)})"
        )

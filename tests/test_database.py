"""Tests for the Database root object."""

import pytest

from sqlcomponents import (
    Database,
    ModelError,
    MySqlDialect,
    NullTemplateResolver,
    PostgresDialect,
    Table,
    TableNotFoundError,
    TableType,
)


class TestDatabaseDefaults:
    """Test construction defaults."""

    def test_defaults(self):
        """Test the dialect and resolver used when none are injected."""
        database = Database("inventory", catalog="main")
        assert database.database_name == "inventory"
        assert database.catalog == "main"
        assert isinstance(database.dialect, PostgresDialect)
        assert isinstance(database.type_template_resolver, NullTemplateResolver)
        assert database.tables == []
        assert len(database) == 0

    def test_escaped_name_uses_dialect(self):
        """Test escaping through an injected dialect."""
        database = Database(dialect=MySqlDialect())
        assert database.escaped_name("Orders") == "`Orders`"
        assert database.escaped_name("orders") == "orders"

    def test_repr(self):
        """Test the diagnostic representation."""
        assert "tables=0" in repr(Database("inventory"))


class TestDatabaseTables:
    """Test table registration and lookup."""

    def test_create_table_registers(self, database):
        """Test that created tables are bound and registered."""
        table = database.create_table("orders", table_type=TableType.TABLE)

        assert table.database is database
        assert table.table_type is TableType.TABLE
        assert database.tables == [table]
        assert database.get_table("orders") is table

    def test_registration_order_is_kept(self, database):
        """Test that tables come back in the order they were added."""
        names = ["zeta", "alpha", "mid"]
        database.add_tables(Table(database, table_name=name) for name in names)

        assert [table.table_name for table in database] == names
        assert len(database) == 3

    def test_tables_returns_a_copy(self, database):
        """Test that callers cannot mutate the owned list."""
        database.create_table("orders")
        database.tables.clear()
        assert len(database) == 1

    def test_add_foreign_table_rejected(self, database):
        """Test that a table bound to another database is refused."""
        other = Database("other")
        with pytest.raises(ModelError) as exc_info:
            database.add_table(Table(other, table_name="orders"))
        assert "belongs to another database" in str(exc_info.value)
        assert database.tables == []

    def test_find_table_missing(self, database):
        """Test the non-raising lookup."""
        assert database.find_table("missing") is None

    def test_get_table_missing(self, database):
        """Test the raising lookup."""
        with pytest.raises(TableNotFoundError) as exc_info:
            database.get_table("missing")
        assert exc_info.value.table_name == "missing"
        assert isinstance(exc_info.value, ModelError)
        assert str(exc_info.value) == "model error: table not found: missing"

"""Tests for identifier-quoting dialects."""

import pytest

from sqlcomponents import (
    DatabaseType,
    MySqlDialect,
    PostgresDialect,
    SqliteDialect,
    UnsupportedDialectError,
    get_dialect_for_database_type,
)


class TestQuoting:
    """Test when and how identifiers are quoted."""

    @pytest.mark.parametrize("identifier", ["orders", "order_items", "_tmp", "t1"])
    def test_plain_identifiers_left_bare(self, identifier):
        """Test identifiers that survive unquoted."""
        assert PostgresDialect().escaped_name(identifier) == identifier

    @pytest.mark.parametrize("identifier,expected", [
        ("Orders", '"Orders"'),
        ("order items", '"order items"'),
        ("1st", '"1st"'),
        ("select", '"select"'),
        ("SELECT", '"SELECT"'),
    ])
    def test_quoted_when_necessary(self, identifier, expected):
        """Test mixed case, spaces, leading digits and reserved words."""
        assert PostgresDialect().escaped_name(identifier) == expected

    def test_embedded_quote_doubled(self):
        """Test that the quote character is escaped inside identifiers."""
        assert PostgresDialect().quote_identifier('we"ird') == '"we""ird"'
        assert MySqlDialect().quote_identifier("we`ird") == "`we``ird`"

    def test_always_quote(self):
        """Test quoting every identifier."""
        assert PostgresDialect(always_quote=True).escaped_name("orders") == '"orders"'

    @pytest.mark.parametrize("identifier", [None, ""])
    def test_empty_identifiers_untouched(self, identifier):
        """Test that missing identifiers pass through."""
        assert PostgresDialect(always_quote=True).escaped_name(identifier) == identifier

    def test_mysql_uses_backticks(self):
        """Test the MySQL quote character."""
        assert MySqlDialect().escaped_name("Orders") == "`Orders`"

    def test_dialect_specific_reserved_words(self):
        """Test words reserved in one dialect only."""
        assert PostgresDialect().escaped_name("returning") == '"returning"'
        assert MySqlDialect().escaped_name("returning") == "returning"
        assert SqliteDialect().escaped_name("pragma") == '"pragma"'
        assert MySqlDialect().escaped_name("schema") == "`schema`"


class TestDialectLookup:
    """Test resolving dialects from database types."""

    @pytest.mark.parametrize("db_type,dialect_class", [
        (DatabaseType.POSTGRES, PostgresDialect),
        (DatabaseType.MYSQL, MySqlDialect),
        (DatabaseType.SQLITE, SqliteDialect),
        ("sqlite", SqliteDialect),
    ])
    def test_known_types(self, db_type, dialect_class):
        """Test every supported database type."""
        dialect = get_dialect_for_database_type(db_type)
        assert isinstance(dialect, dialect_class)
        assert dialect.database_type == DatabaseType(db_type)

    def test_always_quote_passed_through(self):
        """Test that the quoting option reaches the dialect."""
        assert get_dialect_for_database_type("mysql", always_quote=True).always_quote is True

    def test_unknown_type(self):
        """Test an unsupported database type."""
        with pytest.raises(UnsupportedDialectError) as exc_info:
            get_dialect_for_database_type("oracle")
        assert "unsupported dialect: oracle" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, ValueError)

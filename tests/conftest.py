"""Shared fixtures for the sqlcomponents test suite."""

import logging

import pytest

from sqlcomponents import Column, Database, Flag, StaticTemplateResolver, Table


@pytest.fixture
def database():
    """A PostgreSQL-dialect database knowing a custom template for ``uuid`` only."""
    return Database(
        database_name="inventory",
        type_template_resolver=StaticTemplateResolver(["uuid"]),
    )


@pytest.fixture
def make_table(database):
    """Build a table from a list of column keyword dicts."""
    def _make_table(*column_specs, table_name="items"):
        columns = [Column(**spec) for spec in column_specs]
        return Table(database, table_name=table_name, columns=columns)
    return _make_table


@pytest.fixture
def pk():
    """Shorthand for primary key column specs."""
    def _pk(index, auto=Flag.NO, type_name="int4"):
        return {
            "type_name": type_name,
            "is_primary_key": True,
            "primary_key_index": index,
            "auto_increment": auto,
        }
    return _pk


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo init_logging() between tests."""
    yield
    package_logger = logging.getLogger("sqlcomponents")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)

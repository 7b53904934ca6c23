"""Tests for sqlforge.dialects: get_dialect_for_scheme and supported schemes."""

import pytest

from sqlforge.dialects import (
    MysqlDialect,
    PostgresDialect,
    SqliteDialect,
    get_dialect_for_scheme,
)


def test_get_dialect_for_scheme_sqlite():
    assert isinstance(get_dialect_for_scheme("sqlite"), SqliteDialect)


def test_get_dialect_for_scheme_normalizes_and_lowercases():
    assert isinstance(get_dialect_for_scheme("SQLITE"), SqliteDialect)
    assert isinstance(get_dialect_for_scheme("postgresql+psycopg2"), PostgresDialect)


def test_get_dialect_for_scheme_mysql_and_mariadb():
    assert isinstance(get_dialect_for_scheme("mysql"), MysqlDialect)
    assert isinstance(get_dialect_for_scheme("mariadb"), MysqlDialect)


def test_get_dialect_for_scheme_postgres_aliases():
    assert isinstance(get_dialect_for_scheme("postgres"), PostgresDialect)
    assert isinstance(get_dialect_for_scheme("postgresql"), PostgresDialect)


def test_get_dialect_for_scheme_returns_fresh_instances():
    first = get_dialect_for_scheme("sqlite")
    first.supports_returning = False
    assert get_dialect_for_scheme("sqlite").supports_returning is True


def test_get_dialect_for_scheme_unsupported_raises():
    with pytest.raises(ValueError, match="Unsupported database scheme"):
        get_dialect_for_scheme("oracle")
    with pytest.raises(ValueError, match="Unsupported database scheme"):
        get_dialect_for_scheme("mssql")


def test_get_dialect_for_scheme_empty_raises():
    with pytest.raises(ValueError, match="Unsupported database scheme"):
        get_dialect_for_scheme("")


def test_get_dialect_for_scheme_none_raises():
    with pytest.raises(ValueError, match="Unsupported database scheme"):
        get_dialect_for_scheme(None)

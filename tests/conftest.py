import logging
from typing import Any, Optional

import pytest
from pydantic import Field as PydanticField

from sqlforge.capabilities import (
    AlterTableSyntax,
    EnumSyntax,
    TriggerSyntax,
    UnionFeatures,
    UpsertSyntax,
)
from sqlforge.database import Database
from sqlforge.dialects import MysqlDialect, PostgresDialect, SqliteDialect
from sqlforge.dialects.base import Dialect
from sqlforge.expressions import (
    DataType,
    Expression,
    GroupExpression,
    ListExpression,
    LiteralExpression,
    RawExpression,
)


class GenericDialect(Dialect):
    """Test dialect: ``&N`` placeholders, double-quoted identifiers, every capability switchable."""

    name: str = "generic"
    enum_syntax: EnumSyntax = EnumSyntax.TYPE_NAME
    supports_drop_behavior: bool = True
    supports_returning: bool = True
    upsert_syntax: UpsertSyntax = UpsertSyntax.STANDARD
    union_features: UnionFeatures = UnionFeatures.none()
    trigger_syntax: TriggerSyntax = PydanticField(default_factory=TriggerSyntax)
    alter_table_syntax: AlterTableSyntax = PydanticField(
        default_factory=lambda: AlterTableSyntax(alter_column_definition_clause=RawExpression("MODIFY"))
    )
    shared_select_lock_expression: Optional[Expression] = PydanticField(default_factory=lambda: RawExpression("FOR SHARE"))
    exclusive_select_lock_expression: Optional[Expression] = PydanticField(
        default_factory=lambda: RawExpression("FOR UPDATE")
    )

    def bind_placeholder(self, position: int) -> RawExpression:
        return RawExpression(f"&{position}")

    def literal_boolean(self, value: bool) -> RawExpression:
        return RawExpression("true" if value else "false")

    def custom_data_type(self, data_type: Any) -> Optional[Expression]:
        if isinstance(data_type, DataType) and data_type.is_custom("STANDARD"):
            return RawExpression("CUSTOM")
        return None

    def nested_subpath_expression(self, column: Any, path: list[str]) -> Optional[Expression]:
        descender = ListExpression(
            items=[column, *(LiteralExpression.string(step) for step in path[:-1])],
            separator="->",
        )
        return GroupExpression(expression=ListExpression(
            items=[descender, LiteralExpression.string(path[-1])],
            separator="->>",
        ))


class RecordingDatabase(Database):
    """Database that records every executed statement and answers with canned rows."""

    def __init__(self, dialect: Dialect, rows: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(dialect, logger=logging.getLogger("sqlforge.tests"))
        self.rows = rows or []
        self.executed: list[tuple[str, list[Any]]] = []

    def execute(self, sql, binds):
        self.executed.append((sql, binds))
        return list(self.rows)


@pytest.fixture(scope="function")
def dialect():
    """A fresh generic dialect per test, so capability changes never leak."""
    return GenericDialect()


@pytest.fixture(scope="function")
def db(dialect):
    return RecordingDatabase(dialect)


@pytest.fixture(scope="function")
def sqlite_dialect():
    return SqliteDialect()


@pytest.fixture(scope="function")
def mysql_dialect():
    return MysqlDialect()


@pytest.fixture(scope="function")
def postgres_dialect():
    return PostgresDialect()


@pytest.fixture(scope="function")
def make_db(dialect):
    """Factory for a recording database answering every statement with ``rows``."""
    def make(rows=None):
        return RecordingDatabase(dialect, rows=rows)
    return make

"""Execution boundary: where rendered SQL meets an actual database driver."""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional

from .builders import (
    AlterEnumBuilder,
    AlterTableBuilder,
    CreateEnumBuilder,
    CreateIndexBuilder,
    CreateTableBuilder,
    CreateTriggerBuilder,
    DeleteBuilder,
    DropEnumBuilder,
    DropIndexBuilder,
    DropTableBuilder,
    DropTriggerBuilder,
    InsertBuilder,
    QueryBuilder,
    RawBuilder,
    SelectBuilder,
    UnionBuilder,
    UpdateBuilder,
)
from .dialects.base import Dialect
from .serializer import serialize


class Database(ABC):
    """A database as seen by the builders: a dialect, a logger and a way to execute SQL.

    Subclasses wrap a driver and implement ``execute``. Everything else
    (rendering, builder factories) is provided here.
    """

    def __init__(self, dialect: Dialect, logger: Optional[logging.Logger] = None) -> None:
        self.dialect = dialect
        self.logger = logger or logging.getLogger("sqlforge")

    def serialize(self, expression: Any) -> tuple[str, list[Any]]:
        """Render an expression (or a builder's statement) for this database's dialect."""
        if isinstance(expression, QueryBuilder):
            expression = expression.query
        return serialize(self.dialect, expression, logger=self.logger)

    @abstractmethod
    def execute(self, sql: str, binds: list[Any]) -> Iterable[Mapping[str, Any]]:
        """Run ``sql`` with ``binds`` and return the resulting rows (possibly none)."""
        ...  # pylint: disable=unnecessary-ellipsis

    def run(self, expression: Any) -> list[Mapping[str, Any]]:
        """Render and execute ``expression``; returns its rows as a list."""
        sql, binds = self.serialize(expression)
        return list(self.execute(sql, binds))

    # --- builder factories ---

    def select(self) -> SelectBuilder:
        return SelectBuilder(database=self)

    def insert(self, table: Any) -> InsertBuilder:
        return InsertBuilder.of(table, database=self)

    def update(self, table: Any) -> UpdateBuilder:
        return UpdateBuilder.of(table, database=self)

    def delete(self, table: Any) -> DeleteBuilder:
        return DeleteBuilder.of(table, database=self)

    def union(self, initial: Any) -> UnionBuilder:
        return UnionBuilder.starting_with(initial, database=self)

    def create_table(self, table: Any) -> CreateTableBuilder:
        return CreateTableBuilder.of(table, database=self)

    def alter_table(self, table: Any) -> AlterTableBuilder:
        return AlterTableBuilder.of(table, database=self)

    def drop_table(self, *tables: Any) -> DropTableBuilder:
        return DropTableBuilder.of(*tables, database=self)

    def create_index(self, name: Any) -> CreateIndexBuilder:
        return CreateIndexBuilder.of(name, database=self)

    def drop_index(self, name: Any) -> DropIndexBuilder:
        return DropIndexBuilder.of(name, database=self)

    def create_trigger(self, name: Any, table: Any, when: Any, event: Any) -> CreateTriggerBuilder:
        return CreateTriggerBuilder.of(name, table, when, event, database=self)

    def drop_trigger(self, name: Any) -> DropTriggerBuilder:
        return DropTriggerBuilder.of(name, database=self)

    def create_enum(self, name: Any, *values: Any) -> CreateEnumBuilder:
        return CreateEnumBuilder.of(name, *values, database=self)

    def alter_enum(self, name: Any) -> AlterEnumBuilder:
        return AlterEnumBuilder.of(name, database=self)

    def drop_enum(self, name: Any) -> DropEnumBuilder:
        return DropEnumBuilder.of(name, database=self)

    def raw(self, *fragments: Any) -> RawBuilder:
        return RawBuilder.of(*fragments, database=self)

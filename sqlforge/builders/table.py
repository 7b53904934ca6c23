"""Builders for CREATE TABLE, ALTER TABLE and DROP TABLE."""

from __future__ import annotations
from typing import Any, Optional

from ..clauses.column_definition import AlterColumnDefinitionType, ColumnDefinition
from ..clauses.constraints import (
    ConstraintClause,
    DropBehavior,
    ForeignKeyClause,
    TableConstraintAlgorithm,
)
from ..expressions._bases import to_identifier, to_identifiers
from ..expressions.data_type import DataType
from ..expressions.raw import RawExpression
from ..expressions.sequence import ListExpression
from ..queries.table import AlterTableQuery, CreateTableQuery, DropTableQuery
from ._bases import QueryBuilder, unwrap


def _data_type(data_type: Any) -> Any:
    if isinstance(data_type, str):
        return DataType.of(data_type)
    return data_type


def _named(algorithm: Any, name: Optional[Any]) -> Any:
    if name is None:
        return algorithm
    return ConstraintClause(algorithm=algorithm, name=to_identifier(name))


class ColumnDefinitionsMixin:
    """Column and table-constraint helpers shared by CREATE TABLE and ALTER TABLE."""

    def _column_definition(self, column: Any, data_type: Any, constraints: tuple) -> ColumnDefinition:
        return ColumnDefinition.of(column, _data_type(data_type), *constraints)

    def _primary_key(self, columns: tuple, name: Optional[Any]) -> Any:
        return _named(TableConstraintAlgorithm.primary_key(*columns), name)

    def _unique(self, columns: tuple, name: Optional[Any]) -> Any:
        return _named(TableConstraintAlgorithm.unique(*columns), name)

    def _check(self, expression: Any, name: Optional[Any]) -> Any:
        return _named(TableConstraintAlgorithm.check(expression), name)

    def _foreign_key(
        self,
        columns: list[Any],
        table: Any,
        references: list[Any],
        on_delete: Any,
        on_update: Any,
        name: Optional[Any],
    ) -> Any:
        clause = ForeignKeyClause.of(table, *references, on_delete=on_delete, on_update=on_update)
        return _named(TableConstraintAlgorithm.foreign_key(columns, clause), name)


class CreateTableBuilder(ColumnDefinitionsMixin, QueryBuilder):
    """Fluent CREATE TABLE.

    Example:
        db.create_table("planets")
          .column("id", DataType.bigint(), ColumnConstraintAlgorithm.primary_key())
          .column("name", "TEXT", ColumnConstraintAlgorithm.not_null())
          .run()
    """

    query: CreateTableQuery

    @classmethod
    def of(cls, table: Any, database: Any = None) -> CreateTableBuilder:
        return cls(query=CreateTableQuery(table=to_identifier(table)), database=database)

    def column(self, column: Any, data_type: Any, *constraints: Any) -> CreateTableBuilder:
        """Add a column; ``data_type`` may be a ``DataType`` or raw type text."""
        self.query.columns.append(self._column_definition(column, data_type, constraints))
        return self

    def temporary(self) -> CreateTableBuilder:
        self.query.temporary = True
        return self

    def if_not_exists(self) -> CreateTableBuilder:
        self.query.if_not_exists = True
        return self

    def primary_key(self, *columns: Any, name: Optional[Any] = None) -> CreateTableBuilder:
        self.query.table_constraints.append(self._primary_key(columns, name))
        return self

    def unique(self, *columns: Any, name: Optional[Any] = None) -> CreateTableBuilder:
        self.query.table_constraints.append(self._unique(columns, name))
        return self

    def check(self, expression: Any, name: Optional[Any] = None) -> CreateTableBuilder:
        self.query.table_constraints.append(self._check(expression, name))
        return self

    def foreign_key(
        self,
        columns: list[Any],
        references: Any,
        referenced_columns: list[Any],
        on_delete: Any = None,
        on_update: Any = None,
        name: Optional[Any] = None,
    ) -> CreateTableBuilder:
        self.query.table_constraints.append(
            self._foreign_key(columns, references, referenced_columns, on_delete, on_update, name)
        )
        return self

    def select(self, query: Any) -> CreateTableBuilder:
        """Create the table from the result of a query (``CREATE TABLE ... AS SELECT ...``)."""
        self.query.as_query = unwrap(query)
        return self


class AlterTableBuilder(ColumnDefinitionsMixin, QueryBuilder):
    """Fluent ALTER TABLE.

    Example:
        db.alter_table("planets").add_column("size", DataType.real()).drop_column("mass").run()
    """

    query: AlterTableQuery

    @classmethod
    def of(cls, table: Any, database: Any = None) -> AlterTableBuilder:
        return cls(query=AlterTableQuery(name=to_identifier(table)), database=database)

    def rename(self, to: Any) -> AlterTableBuilder:
        self.query.rename_to = to_identifier(to)
        return self

    def add_column(self, column: Any, data_type: Any, *constraints: Any) -> AlterTableBuilder:
        self.query.add_columns.append(self._column_definition(column, data_type, constraints))
        return self

    def modify_column(self, column: Any, data_type: Any) -> AlterTableBuilder:
        """Change a column's type, using the dialect's column modification syntax."""
        self.query.modify_columns.append(
            AlterColumnDefinitionType(column=to_identifier(column), data_type=_data_type(data_type))
        )
        return self

    def drop_column(self, *columns: Any) -> AlterTableBuilder:
        self.query.drop_columns.extend(to_identifiers(columns))
        return self

    def add_primary_key(self, *columns: Any, name: Optional[Any] = None) -> AlterTableBuilder:
        self.query.add_table_constraints.append(self._primary_key(columns, name))
        return self

    def add_unique(self, *columns: Any, name: Optional[Any] = None) -> AlterTableBuilder:
        self.query.add_table_constraints.append(self._unique(columns, name))
        return self

    def add_foreign_key(
        self,
        columns: list[Any],
        references: Any,
        referenced_columns: list[Any],
        on_delete: Any = None,
        on_update: Any = None,
        name: Optional[Any] = None,
    ) -> AlterTableBuilder:
        self.query.add_table_constraints.append(
            self._foreign_key(columns, references, referenced_columns, on_delete, on_update, name)
        )
        return self

    def drop_constraint(self, name: Any) -> AlterTableBuilder:
        """``DROP CONSTRAINT name``."""
        self.query.drop_table_constraints.append(
            ListExpression.of(RawExpression("CONSTRAINT"), to_identifier(name), separator=" ")
        )
        return self


class DropTableBuilder(QueryBuilder):
    """Fluent DROP TABLE: ``db.drop_table("planets").if_exists().run()``."""

    query: DropTableQuery

    @classmethod
    def of(cls, *tables: Any, database: Any = None) -> DropTableBuilder:
        return cls(query=DropTableQuery(tables=to_identifiers(tables)), database=database)

    def if_exists(self) -> DropTableBuilder:
        self.query.if_exists = True
        return self

    def temporary(self) -> DropTableBuilder:
        self.query.temporary = True
        return self

    def cascade(self) -> DropTableBuilder:
        self.query.behavior = DropBehavior.CASCADE
        return self

    def restrict(self) -> DropTableBuilder:
        self.query.behavior = DropBehavior.RESTRICT
        return self

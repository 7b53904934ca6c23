"""Column and table constraints, foreign keys and drop behavior."""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import Field as PydanticField

from ..expressions._bases import Expression, KeywordEnum, is_renderable, to_identifier, to_identifiers
from ..expressions.literal import LiteralExpression
from ..expressions.sequence import GroupExpression, ListExpression


class DropBehavior(KeywordEnum):
    """What happens to dependent objects when dropping one."""

    RESTRICT = "RESTRICT"
    CASCADE = "CASCADE"


class ForeignKeyAction(KeywordEnum):
    NO_ACTION = "NO ACTION"
    RESTRICT = "RESTRICT"
    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"


class ForeignKeyClause(Expression):
    """``REFERENCES table (columns) [ON DELETE action] [ON UPDATE action]``."""

    table: Any
    columns: list[Any] = PydanticField(default_factory=list)
    on_delete: Optional[Any] = None
    on_update: Optional[Any] = None

    @classmethod
    def of(cls, table: Any, *columns: Any, on_delete: Any = None, on_update: Any = None) -> ForeignKeyClause:
        return cls(table=to_identifier(table), columns=to_identifiers(columns), on_delete=on_delete, on_update=on_update)

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append("REFERENCES", self.table, GroupExpression(expression=ListExpression(items=self.columns)))
            if self.on_delete is not None:
                statement.append("ON DELETE", self.on_delete)
            if self.on_update is not None:
                statement.append("ON UPDATE", self.on_update)


def _default_value(value: Any) -> Expression:
    """Literal for a DEFAULT clause: strings are quoted, numbers and booleans are inlined."""
    if is_renderable(value):
        return value
    if value is None:
        return LiteralExpression.null()
    if isinstance(value, bool):
        return LiteralExpression.boolean(value)
    if isinstance(value, (int, float)):
        return LiteralExpression.numeric(value)
    if isinstance(value, str):
        return LiteralExpression.string(value)
    raise TypeError(f"Unsupported default value type: {type(value).__name__}")


class ColumnConstraintKind(Enum):
    PRIMARY_KEY = "primary_key"
    NOT_NULL = "not_null"
    UNIQUE = "unique"
    CHECK = "check"
    COLLATE = "collate"
    DEFAULT = "default"
    FOREIGN_KEY = "foreign_key"
    GENERATED = "generated"
    CUSTOM = "custom"


class ColumnConstraintAlgorithm(Expression):
    """A constraint attached to a single column definition."""

    kind: ColumnConstraintKind
    expression: Optional[Any] = None
    auto_increment: bool = False

    @classmethod
    def primary_key(cls, auto_increment: bool = True) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.PRIMARY_KEY, auto_increment=auto_increment)

    @classmethod
    def not_null(cls) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.NOT_NULL)

    @classmethod
    def unique(cls) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.UNIQUE)

    @classmethod
    def check(cls, expression: Any) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.CHECK, expression=expression)

    @classmethod
    def collate(cls, name: Any) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.COLLATE, expression=to_identifier(name))

    @classmethod
    def default(cls, value: Any) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.DEFAULT, expression=_default_value(value))

    @classmethod
    def references(
        cls, table: Any, column: Any, on_delete: Any = None, on_update: Any = None
    ) -> ColumnConstraintAlgorithm:
        return cls.foreign_key(ForeignKeyClause.of(table, column, on_delete=on_delete, on_update=on_update))

    @classmethod
    def foreign_key(cls, references: ForeignKeyClause) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.FOREIGN_KEY, expression=references)

    @classmethod
    def generated(cls, expression: Any) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.GENERATED, expression=expression)

    @classmethod
    def custom(cls, expression: Any) -> ColumnConstraintAlgorithm:
        return cls(kind=ColumnConstraintKind.CUSTOM, expression=expression)

    def _serialize_primary_key(self, serializer) -> None:
        dialect = serializer.dialect
        if not self.auto_increment:
            serializer.write("PRIMARY KEY")
        elif not dialect.supports_auto_increment:
            serializer.logger.warning("%s does not support auto-increment; writing a plain PRIMARY KEY.", dialect.name)
            serializer.write("PRIMARY KEY")
        elif dialect.auto_increment_function is not None:
            dialect.literal_default.serialize(serializer)
            serializer.write(" ")
            dialect.auto_increment_function.serialize(serializer)
            serializer.write(" PRIMARY KEY")
        else:
            serializer.write("PRIMARY KEY ")
            dialect.auto_increment_clause.serialize(serializer)

    def serialize(self, serializer) -> None:
        kind = self.kind
        if kind is ColumnConstraintKind.PRIMARY_KEY:
            self._serialize_primary_key(serializer)
        elif kind is ColumnConstraintKind.NOT_NULL:
            serializer.write("NOT NULL")
        elif kind is ColumnConstraintKind.UNIQUE:
            serializer.write("UNIQUE")
        elif kind is ColumnConstraintKind.CHECK:
            serializer.write("CHECK ")
            GroupExpression(expression=self.expression).serialize(serializer)
        elif kind is ColumnConstraintKind.COLLATE:
            serializer.write("COLLATE ")
            self.expression.serialize(serializer)
        elif kind is ColumnConstraintKind.DEFAULT:
            serializer.write("DEFAULT ")
            self.expression.serialize(serializer)
        elif kind is ColumnConstraintKind.GENERATED:
            serializer.write("GENERATED ALWAYS AS ")
            GroupExpression(expression=self.expression).serialize(serializer)
            serializer.write(" STORED")
        else:
            self.expression.serialize(serializer)


class TableConstraintKind(Enum):
    PRIMARY_KEY = "primary_key"
    UNIQUE = "unique"
    CHECK = "check"
    FOREIGN_KEY = "foreign_key"


class TableConstraintAlgorithm(Expression):
    """A constraint spanning one or more columns of a table."""

    kind: TableConstraintKind
    columns: list[Any] = PydanticField(default_factory=list)
    expression: Optional[Any] = None
    """CHECK condition, or the REFERENCES clause of a foreign key."""

    @classmethod
    def primary_key(cls, *columns: Any) -> TableConstraintAlgorithm:
        return cls(kind=TableConstraintKind.PRIMARY_KEY, columns=to_identifiers(columns))

    @classmethod
    def unique(cls, *columns: Any) -> TableConstraintAlgorithm:
        return cls(kind=TableConstraintKind.UNIQUE, columns=to_identifiers(columns))

    @classmethod
    def check(cls, expression: Any) -> TableConstraintAlgorithm:
        return cls(kind=TableConstraintKind.CHECK, expression=expression)

    @classmethod
    def foreign_key(cls, columns: list[Any], references: ForeignKeyClause) -> TableConstraintAlgorithm:
        return cls(kind=TableConstraintKind.FOREIGN_KEY, columns=to_identifiers(columns), expression=references)

    def serialize(self, serializer) -> None:
        columns = GroupExpression(expression=ListExpression(items=self.columns))
        with serializer.statement() as statement:
            if self.kind is TableConstraintKind.PRIMARY_KEY:
                statement.append("PRIMARY KEY", columns)
            elif self.kind is TableConstraintKind.UNIQUE:
                statement.append("UNIQUE", columns)
            elif self.kind is TableConstraintKind.CHECK:
                statement.append("CHECK", GroupExpression(expression=self.expression))
            else:
                statement.append("FOREIGN KEY", columns, self.expression)


class ConstraintClause(Expression):
    """``[CONSTRAINT name] algorithm``; the dialect may rewrite the name (length limits and such)."""

    algorithm: Any
    name: Optional[Any] = None

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            if self.name is not None:
                statement.append("CONSTRAINT", serializer.dialect.normalize_sql_constraint(self.name))
            statement.append(self.algorithm)

"""Column definitions for CREATE TABLE and ALTER TABLE."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ..expressions._bases import Expression, to_identifier
from ..expressions.sequence import ListExpression


class ColumnDefinition(Expression):
    """``column type [constraint ...]``."""

    column: Any
    data_type: Any
    constraints: list[Any] = PydanticField(default_factory=list)

    @classmethod
    def of(cls, column: Any, data_type: Any, *constraints: Any) -> ColumnDefinition:
        return cls(column=to_identifier(column), data_type=data_type, constraints=list(constraints))

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append(self.column, self.data_type)
            if self.constraints:
                statement.append(ListExpression(items=self.constraints, separator=" "))


class AlterColumnDefinitionType(Expression):
    """A column's new type inside ALTER TABLE: ``column [keyword] type``."""

    column: Any
    data_type: Any

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append(self.column, serializer.dialect.alter_table_syntax.alter_column_definition_type_keyword)
            statement.append(self.data_type)

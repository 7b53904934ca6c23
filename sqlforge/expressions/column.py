"""Column and qualified table references."""

from __future__ import annotations
from typing import Any, Optional

from ._bases import Expression, to_identifier


class ColumnExpression(Expression):
    """A column, optionally qualified by its table: ``"planets"."name"``."""

    name: Any
    table: Optional[Any] = None

    @classmethod
    def of(cls, name: Any, table: Any = None) -> ColumnExpression:
        """Build from names or expressions; plain strings become identifiers."""
        return cls(
            name=to_identifier(name),
            table=None if table is None else to_identifier(table),
        )

    def serialize(self, serializer) -> None:
        if self.table is not None:
            self.table.serialize(serializer)
            serializer.write(".")
        self.name.serialize(serializer)


class QualifiedTableExpression(Expression):
    """A table inside a schema or database: ``"space"."table"``."""

    table: Any
    space: Optional[Any] = None

    @classmethod
    def of(cls, table: Any, space: Any = None) -> QualifiedTableExpression:
        return cls(
            table=to_identifier(table),
            space=None if space is None else to_identifier(space),
        )

    def serialize(self, serializer) -> None:
        if self.space is not None:
            self.space.serialize(serializer)
            serializer.write(".")
        self.table.serialize(serializer)

"""CREATE INDEX and DROP INDEX."""

from typing import Any, Optional

from pydantic import Field as PydanticField

from ..expressions._bases import Expression
from ..expressions.sequence import GroupExpression, ListExpression


class CreateIndexQuery(Expression):
    """``CREATE [modifier] INDEX name ON table (columns) [WHERE predicate]``."""

    name: Any
    table: Optional[Any] = None
    columns: list[Any] = PydanticField(default_factory=list)
    modifier: Optional[Any] = None
    """E.g. ``UNIQUE``."""
    predicate: Optional[Any] = None
    """Partial index condition."""

    def serialize(self, serializer) -> None:
        with serializer.statement(query=True) as statement:
            statement.append("CREATE", self.modifier, "INDEX", self.name)
            if self.table is not None:
                statement.append("ON", self.table)
            statement.append(GroupExpression(expression=ListExpression(items=self.columns)))
            if self.predicate is not None:
                statement.append("WHERE", self.predicate)


class DropIndexQuery(Expression):
    """``DROP INDEX [IF EXISTS] name [ON owner] [RESTRICT|CASCADE]``."""

    name: Any
    if_exists: bool = False
    owning_object: Optional[Any] = None
    """Table owning the index, for engines that scope index names per table."""
    behavior: Optional[Any] = None
    """``RESTRICT`` or ``CASCADE``; written only when set and supported by the dialect."""

    def serialize(self, serializer) -> None:
        dialect = serializer.dialect
        with serializer.statement(query=True) as statement:
            statement.append("DROP INDEX")
            if self.if_exists and dialect.supports_if_exists:
                statement.append("IF EXISTS")
            statement.append(self.name)
            if self.owning_object is not None:
                statement.append("ON", self.owning_object)
            if self.behavior is not None and dialect.supports_drop_behavior:
                statement.append(self.behavior)

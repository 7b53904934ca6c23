"""UPDATE statement."""

from typing import Any, Optional

from pydantic import Field as PydanticField

from ..expressions._bases import Expression
from ..expressions.sequence import ListExpression


class UpdateQuery(Expression):
    """``UPDATE table SET assignments [WHERE predicate] [RETURNING ...]``."""

    table: Any
    values: list[Any] = PydanticField(default_factory=list)
    """Column assignments."""
    predicate: Optional[Any] = None
    returning: Optional[Any] = None
    table_expression_group: Optional[Any] = None

    def serialize(self, serializer) -> None:
        with serializer.statement(query=True) as statement:
            statement.append(self.table_expression_group)
            statement.append("UPDATE", self.table, "SET", ListExpression(items=self.values))
            if self.predicate is not None:
                statement.append("WHERE", self.predicate)
            statement.append(self.returning)

"""DELETE statement."""

from typing import Any, Optional

from ..expressions._bases import Expression


class DeleteQuery(Expression):
    """``DELETE FROM table [WHERE predicate] [RETURNING ...]``."""

    table: Any
    predicate: Optional[Any] = None
    returning: Optional[Any] = None
    table_expression_group: Optional[Any] = None

    def serialize(self, serializer) -> None:
        with serializer.statement(query=True) as statement:
            statement.append(self.table_expression_group)
            statement.append("DELETE FROM", self.table)
            if self.predicate is not None:
                statement.append("WHERE", self.predicate)
            statement.append(self.returning)

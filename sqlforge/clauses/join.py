"""JOIN clause."""

from typing import Any

from ..expressions._bases import Expression, KeywordEnum


class JoinMethod(KeywordEnum):
    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL OUTER"


class JoinClause(Expression):
    """``method JOIN table ON expression``."""

    method: Any = JoinMethod.INNER
    table: Any
    expression: Any

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append(self.method, "JOIN", self.table, "ON", self.expression)

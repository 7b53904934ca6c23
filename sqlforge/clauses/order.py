"""ORDER BY terms."""

from typing import Any

from ..expressions._bases import Expression, KeywordEnum


class Direction(KeywordEnum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"
    NULL = "NULL"
    NOT_NULL = "NOT NULL"


class OrderByClause(Expression):
    """One ORDER BY term: ``expression direction``."""

    expression: Any
    direction: Any = Direction.ASCENDING

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append(self.expression, self.direction)

"""SELECT statement."""

from typing import Any, Optional

from pydantic import Field as PydanticField

from ..expressions._bases import Expression
from ..expressions.literal import LiteralExpression
from ..expressions.sequence import ListExpression


class SelectQuery(Expression):
    """A SELECT statement.

    Clauses render in SQL grammar order: WITH, SELECT [DISTINCT] columns,
    FROM tables, joins, WHERE, GROUP BY, HAVING, ORDER BY, LIMIT, OFFSET and
    finally the row locking clause. Empty or unset clauses are left out.
    """

    columns: list[Any] = PydanticField(default_factory=list)
    tables: list[Any] = PydanticField(default_factory=list)
    is_distinct: bool = False
    joins: list[Any] = PydanticField(default_factory=list)
    predicate: Optional[Any] = None
    group_by: list[Any] = PydanticField(default_factory=list)
    having: Optional[Any] = None
    """Secondary predicate, applied after grouping."""
    order_by: list[Any] = PydanticField(default_factory=list)
    limit: Optional[int] = None
    offset: Optional[int] = None
    locking_clause: Optional[Any] = None
    table_expression_group: Optional[Any] = None
    """``WITH`` clause (a ``CommonTableExpressionGroup``)."""

    def serialize(self, serializer) -> None:
        with serializer.statement(query=True) as statement:
            statement.append(self.table_expression_group)
            statement.append("SELECT")
            if self.is_distinct:
                statement.append("DISTINCT")
            statement.append(ListExpression(items=self.columns))
            if self.tables:
                statement.append("FROM", ListExpression(items=self.tables))
            if self.joins:
                statement.append(ListExpression(items=self.joins, separator=" "))
            if self.predicate is not None:
                statement.append("WHERE", self.predicate)
            if self.group_by:
                statement.append("GROUP BY", ListExpression(items=self.group_by))
            if self.having is not None:
                statement.append("HAVING", self.having)
            if self.order_by:
                statement.append("ORDER BY", ListExpression(items=self.order_by))
            if self.limit is not None:
                statement.append("LIMIT", LiteralExpression.numeric(self.limit))
            if self.offset is not None:
                statement.append("OFFSET", LiteralExpression.numeric(self.offset))
            statement.append(self.locking_clause)

"""Common table expressions (``WITH`` clauses)."""

from typing import Any

from pydantic import Field as PydanticField

from ..expressions._bases import Expression
from ..expressions.sequence import GroupExpression, ListExpression
from .subquery import SubqueryClause


class CommonTableExpression(Expression):
    """``name [(columns)] AS (query)``."""

    name: Any
    columns: list[Any] = PydanticField(default_factory=list)
    query: Any
    recursive: bool = False
    """A recursive table expression turns the whole ``WITH`` into ``WITH RECURSIVE``."""

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append(self.name)
            if self.columns:
                statement.append(GroupExpression(expression=ListExpression(items=self.columns)))
            if isinstance(self.query, (SubqueryClause, GroupExpression)):
                statement.append("AS", self.query)
            else:
                statement.append("AS", GroupExpression(expression=self.query))


class CommonTableExpressionGroup(Expression):
    """``WITH [RECURSIVE] cte, cte ...``; renders nothing when empty."""

    expressions: list[Any] = PydanticField(default_factory=list)

    def serialize(self, serializer) -> None:
        if not self.expressions:
            return
        with serializer.statement() as statement:
            statement.append("WITH")
            if any(getattr(expression, "recursive", False) for expression in self.expressions):
                statement.append("RECURSIVE")
            statement.append(ListExpression(items=self.expressions))

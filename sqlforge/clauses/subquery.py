"""Parenthesized subquery."""

from typing import Any

from ..expressions._bases import Expression


class SubqueryClause(Expression):
    """A query used as an expression: ``(SELECT ...)``."""

    query: Any

    def serialize(self, serializer) -> None:
        serializer.write("(")
        self.query.serialize(serializer)
        serializer.write(")")

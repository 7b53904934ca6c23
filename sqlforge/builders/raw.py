"""Builder for hand-written SQL with bound values."""

from __future__ import annotations
from typing import Any

from ..expressions.query_string import QueryStringExpression
from ._bases import QueryBuilder


class RawBuilder(QueryBuilder):
    """Runs a ``QueryStringExpression``.

    Example:
        db.raw("SELECT * FROM planets WHERE id = ").bind(1).all()
    """

    query: QueryStringExpression

    @classmethod
    def of(cls, *fragments: Any, database: Any = None) -> RawBuilder:
        return cls(query=QueryStringExpression.of(*fragments), database=database)

    def bind(self, value: Any) -> RawBuilder:
        self.query.bind(value)
        return self

    def sql(self, sql: str) -> RawBuilder:
        self.query.raw(sql)
        return self

    def identifier(self, name: str) -> RawBuilder:
        self.query.identifier(name)
        return self

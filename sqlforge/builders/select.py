"""Builder for SELECT statements."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ..clauses.locking import LockingClause
from ..clauses.order import Direction
from ..clauses.subquery import SubqueryClause
from ..expressions._bases import to_columns, to_identifier
from ..queries.select import SelectQuery
from ._bases import CommonTableExpressionMixin, HavingMixin, JoinMixin, PredicateMixin, QueryBuilder, to_order
from .union import UnionBuilder, UnionMixin


class SelectBuilder(
    PredicateMixin, HavingMixin, JoinMixin, CommonTableExpressionMixin, UnionMixin, QueryBuilder
):
    """Fluent SELECT.

    Example:
        db.select().columns("id", "name").from_("planets").where(name="Earth").order_by("name").all()
    """

    query: SelectQuery = PydanticField(default_factory=SelectQuery)

    def column(self, *columns: Any) -> SelectBuilder:
        """Add result columns: ``"*"``, ``"name"``, ``"table.name"`` or expressions."""
        self.query.columns.extend(to_columns(columns))
        return self

    columns = column

    def distinct(self) -> SelectBuilder:
        self.query.is_distinct = True
        return self

    def from_(self, *tables: Any) -> SelectBuilder:
        for table in tables:
            if isinstance(table, QueryBuilder):
                table = SubqueryClause(query=table.query)
            self.query.tables.append(to_identifier(table))
        return self

    def group_by(self, *columns: Any) -> SelectBuilder:
        self.query.group_by.extend(to_columns(columns))
        return self

    def order_by(self, *orders: Any, direction: Any = Direction.ASCENDING) -> SelectBuilder:
        """Add ORDER BY terms; columns sort by ``direction`` unless given as ``OrderByClause`` (e.g. ``column.desc``)."""
        self.query.order_by.extend(to_order(order, direction) for order in orders)
        return self

    def limit(self, limit: int) -> SelectBuilder:
        self.query.limit = limit
        return self

    def offset(self, offset: int) -> SelectBuilder:
        self.query.offset = offset
        return self

    def for_update(self) -> SelectBuilder:
        self.query.locking_clause = LockingClause.UPDATE
        return self

    def for_share(self) -> SelectBuilder:
        self.query.locking_clause = LockingClause.SHARE
        return self

    def _union(self, kind, other: Any) -> UnionBuilder:
        return UnionBuilder.starting_with(self.query, database=self.database)._union(kind, other)

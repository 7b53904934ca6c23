"""Builder for set operations (UNION, INTERSECT, EXCEPT) between SELECTs."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from ..clauses.order import Direction
from ..queries.union import UnionQuery, UnionType
from ._bases import CommonTableExpressionMixin, QueryBuilder, to_order, unwrap


class UnionMixin(ABC):
    """Set-operation methods; on a SELECT builder they start a ``UnionBuilder``."""

    @abstractmethod
    def _union(self, kind: UnionType, other: Any) -> UnionBuilder:
        """Combine with ``other`` using ``kind``; returns the builder collecting the branches."""
        ...  # pylint: disable=unnecessary-ellipsis

    def union(self, other: Any) -> UnionBuilder:
        return self._union(UnionType.UNION, other)

    def union_all(self, other: Any) -> UnionBuilder:
        return self._union(UnionType.UNION_ALL, other)

    def intersect(self, other: Any) -> UnionBuilder:
        return self._union(UnionType.INTERSECT, other)

    def intersect_all(self, other: Any) -> UnionBuilder:
        return self._union(UnionType.INTERSECT_ALL, other)

    def except_(self, other: Any) -> UnionBuilder:
        return self._union(UnionType.EXCEPT, other)

    def except_all(self, other: Any) -> UnionBuilder:
        return self._union(UnionType.EXCEPT_ALL, other)


class UnionBuilder(UnionMixin, CommonTableExpressionMixin, QueryBuilder):
    """Chains SELECT statements; ordering and limits apply to the combined result."""

    @classmethod
    def starting_with(cls, initial: Any, database: Any = None) -> UnionBuilder:
        return cls(query=UnionQuery(initial_query=unwrap(initial)), database=database)

    def _union(self, kind: UnionType, other: Any) -> UnionBuilder:
        self.query.add(kind, unwrap(other))
        return self

    def order_by(self, *orders: Any, direction: Any = Direction.ASCENDING) -> UnionBuilder:
        self.query.order_by.extend(to_order(order, direction) for order in orders)
        return self

    def limit(self, limit: int) -> UnionBuilder:
        self.query.limit = limit
        return self

    def offset(self, offset: int) -> UnionBuilder:
        self.query.offset = offset
        return self

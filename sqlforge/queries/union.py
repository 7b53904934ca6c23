"""Set operations between SELECT statements (UNION, INTERSECT, EXCEPT)."""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import Field as PydanticField

from ..capabilities import UnionFeatures
from ..expressions._bases import Expression
from ..expressions.literal import LiteralExpression
from ..expressions.sequence import GroupExpression, ListExpression


class UnionType(Enum):
    UNION = "union"
    UNION_ALL = "union_all"
    INTERSECT = "intersect"
    INTERSECT_ALL = "intersect_all"
    EXCEPT = "except"
    EXCEPT_ALL = "except_all"


# keyword, required dialect feature, whether duplicates are removed
_JOINER_SYNTAX: dict[UnionType, tuple[str, UnionFeatures, bool]] = {
    UnionType.UNION: ("UNION", UnionFeatures.UNION, True),
    UnionType.UNION_ALL: ("UNION", UnionFeatures.UNION_ALL, False),
    UnionType.INTERSECT: ("INTERSECT", UnionFeatures.INTERSECT, True),
    UnionType.INTERSECT_ALL: ("INTERSECT", UnionFeatures.INTERSECT_ALL, False),
    UnionType.EXCEPT: ("EXCEPT", UnionFeatures.EXCEPT, True),
    UnionType.EXCEPT_ALL: ("EXCEPT", UnionFeatures.EXCEPT_ALL, False),
}


class UnionJoiner(Expression):
    """The keyword between two branches of a set operation.

    Renders nothing when the dialect lacks the matching feature; the branches
    are then simply written one after the other. ``ALL`` variants always say
    ``ALL``; the others say ``DISTINCT`` only where the dialect asks for it.
    """

    type: UnionType

    def serialize(self, serializer) -> None:
        keyword, feature, distinct = _JOINER_SYNTAX[self.type]
        features = serializer.dialect.union_features
        if not features & feature:
            serializer.logger.debug(
                "The %s dialect does not support %s%s.", serializer.dialect.name, keyword, "" if distinct else " ALL"
            )
            return
        with serializer.statement() as statement:
            statement.append(keyword)
            if not distinct:
                statement.append("ALL")
            elif features & UnionFeatures.EXPLICIT_DISTINCT:
                statement.append("DISTINCT")


class UnionQuery(Expression):
    """``initial joiner query joiner query ... [ORDER BY] [LIMIT] [OFFSET]``."""

    initial_query: Any
    unions: list[tuple[UnionJoiner, Any]] = PydanticField(default_factory=list)
    order_by: list[Any] = PydanticField(default_factory=list)
    limit: Optional[int] = None
    offset: Optional[int] = None
    table_expression_group: Optional[Any] = None

    def add(self, kind: UnionType, query: Any) -> UnionQuery:
        self.unions.append((UnionJoiner(type=kind), query))
        return self

    def serialize(self, serializer) -> None:
        with serializer.statement(query=True) as statement:
            statement.append(self.table_expression_group)
            if not self.unions:
                statement.append(self.initial_query)
                return
            parenthesize = bool(serializer.dialect.union_features & UnionFeatures.PARENTHESIZED_SUBQUERIES)

            def branch(query: Any) -> Any:
                return GroupExpression(expression=query) if parenthesize else query

            statement.append(branch(self.initial_query))
            for joiner, query in self.unions:
                statement.append(joiner, branch(query))
            if self.order_by:
                statement.append("ORDER BY", ListExpression(items=self.order_by))
            if self.limit is not None:
                statement.append("LIMIT", LiteralExpression.numeric(self.limit))
            if self.offset is not None:
                statement.append("OFFSET", LiteralExpression.numeric(self.offset))

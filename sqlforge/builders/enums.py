"""Builders for named enumeration types."""

from __future__ import annotations
from typing import Any

from ..clauses.constraints import DropBehavior
from ..expressions._bases import is_renderable, to_identifier
from ..expressions.literal import LiteralExpression
from ..queries.enums import AlterEnumQuery, CreateEnumQuery, DropEnumQuery
from ._bases import QueryBuilder


def _case(value: Any) -> Any:
    return value if is_renderable(value) else LiteralExpression.string(value)


class CreateEnumBuilder(QueryBuilder):
    """Fluent ``CREATE TYPE name AS ENUM (...)``: ``db.create_enum("planet_type", "rocky", "gas").run()``."""

    query: CreateEnumQuery

    @classmethod
    def of(cls, name: Any, *values: Any, database: Any = None) -> CreateEnumBuilder:
        query = CreateEnumQuery(name=to_identifier(name), values=[_case(value) for value in values])
        return cls(query=query, database=database)

    def value(self, value: Any) -> CreateEnumBuilder:
        self.query.values.append(_case(value))
        return self


class AlterEnumBuilder(QueryBuilder):
    query: AlterEnumQuery

    @classmethod
    def of(cls, name: Any, database: Any = None) -> AlterEnumBuilder:
        return cls(query=AlterEnumQuery(name=to_identifier(name)), database=database)

    def add(self, value: Any) -> AlterEnumBuilder:
        self.query.value = _case(value)
        return self


class DropEnumBuilder(QueryBuilder):
    query: DropEnumQuery

    @classmethod
    def of(cls, name: Any, database: Any = None) -> DropEnumBuilder:
        return cls(query=DropEnumQuery(name=to_identifier(name)), database=database)

    def if_exists(self) -> DropEnumBuilder:
        self.query.if_exists = True
        return self

    def cascade(self) -> DropEnumBuilder:
        self.query.behavior = DropBehavior.CASCADE
        return self

    def restrict(self) -> DropEnumBuilder:
        self.query.behavior = DropBehavior.RESTRICT
        return self

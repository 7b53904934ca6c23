"""Builders for CREATE INDEX and DROP INDEX."""

from __future__ import annotations
from typing import Any

from ..clauses.constraints import DropBehavior
from ..expressions._bases import to_identifier, to_identifiers
from ..expressions.raw import RawExpression
from ..queries.index import CreateIndexQuery, DropIndexQuery
from ._bases import PredicateMixin, QueryBuilder


class CreateIndexBuilder(PredicateMixin, QueryBuilder):
    """Fluent CREATE INDEX: ``db.create_index("idx_name").on("planets").column("name").unique().run()``.

    ``where(...)`` makes a partial index.
    """

    query: CreateIndexQuery

    @classmethod
    def of(cls, name: Any, database: Any = None) -> CreateIndexBuilder:
        return cls(query=CreateIndexQuery(name=to_identifier(name)), database=database)

    def on(self, table: Any) -> CreateIndexBuilder:
        self.query.table = to_identifier(table)
        return self

    def column(self, *columns: Any) -> CreateIndexBuilder:
        self.query.columns.extend(to_identifiers(columns))
        return self

    def unique(self) -> CreateIndexBuilder:
        self.query.modifier = RawExpression("UNIQUE")
        return self


class DropIndexBuilder(QueryBuilder):
    query: DropIndexQuery

    @classmethod
    def of(cls, name: Any, database: Any = None) -> DropIndexBuilder:
        return cls(query=DropIndexQuery(name=to_identifier(name)), database=database)

    def if_exists(self) -> DropIndexBuilder:
        self.query.if_exists = True
        return self

    def on(self, owner: Any) -> DropIndexBuilder:
        """Name the table owning the index, for engines that scope index names per table."""
        self.query.owning_object = to_identifier(owner)
        return self

    def cascade(self) -> DropIndexBuilder:
        self.query.behavior = DropBehavior.CASCADE
        return self

    def restrict(self) -> DropIndexBuilder:
        self.query.behavior = DropBehavior.RESTRICT
        return self

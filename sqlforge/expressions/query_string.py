"""Interpolated SQL: a sequence of raw text and expression fragments."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ._bases import Expression, is_renderable, to_bind, to_identifier
from .literal import LiteralExpression
from .raw import RawExpression
from .sequence import ListExpression


class QueryStringExpression(Expression):
    """Fragments rendered back to back with nothing in between.

    Built fluently, the way a query would be written by hand::

        QueryStringExpression().raw("SELECT * FROM ").identifier("planets").raw(" WHERE id = ").bind(3)
    """

    fragments: list[Any] = PydanticField(default_factory=list)

    @classmethod
    def of(cls, *fragments: Any) -> QueryStringExpression:
        """Plain strings are raw text; everything else must be an expression."""
        query = cls()
        for fragment in fragments:
            if isinstance(fragment, str) and not is_renderable(fragment):
                query.raw(fragment)
            else:
                query.fragments.append(fragment)
        return query

    def raw(self, sql: str) -> QueryStringExpression:
        self.fragments.append(RawExpression(sql))
        return self

    def bind(self, value: Any) -> QueryStringExpression:
        self.fragments.append(to_bind(value))
        return self

    def binds(self, values: list[Any]) -> QueryStringExpression:
        """Comma-separated placeholders, one per value."""
        self.fragments.append(ListExpression(items=[to_bind(value) for value in values]))
        return self

    def literal(self, value: Any) -> QueryStringExpression:
        """Inline literal: strings are quoted, booleans use the dialect, ``None`` is NULL, numbers are verbatim."""
        if value is None:
            self.fragments.append(LiteralExpression.null())
        elif isinstance(value, bool):
            self.fragments.append(LiteralExpression.boolean(value))
        elif isinstance(value, str):
            self.fragments.append(LiteralExpression.string(value))
        else:
            self.fragments.append(LiteralExpression.numeric(value))
        return self

    def identifier(self, name: str) -> QueryStringExpression:
        self.fragments.append(to_identifier(name))
        return self

    def expression(self, expression: Any) -> QueryStringExpression:
        self.fragments.append(expression)
        return self

    def __add__(self, other: Any) -> QueryStringExpression:
        if isinstance(other, QueryStringExpression):
            return QueryStringExpression(fragments=[*self.fragments, *other.fragments])
        return QueryStringExpression.of(*self.fragments, other)

    def serialize(self, serializer) -> None:
        for fragment in self.fragments:
            fragment.serialize(serializer)

"""DISTINCT over a set of columns."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ._bases import Expression, to_identifiers
from .literal import LiteralExpression
from .sequence import ListExpression


class DistinctExpression(Expression):
    """``DISTINCT a, b`` (e.g. inside ``COUNT(...)``); renders nothing without arguments."""

    arguments: list[Any] = PydanticField(default_factory=list)

    @classmethod
    def of(cls, *arguments: Any) -> DistinctExpression:
        """Plain strings name columns."""
        return cls(arguments=to_identifiers(arguments))

    @classmethod
    def all(cls) -> DistinctExpression:
        """``DISTINCT *``."""
        return cls(arguments=[LiteralExpression.all()])

    def serialize(self, serializer) -> None:
        if not self.arguments:
            return
        with serializer.statement() as statement:
            statement.append("DISTINCT", ListExpression(items=self.arguments))

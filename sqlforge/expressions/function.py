"""SQL function call expression."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ._bases import Expression, to_bind
from .sequence import GroupExpression, ListExpression


class FunctionExpression(Expression):
    """SQL function call: ``name(args...)`` (e.g. ``LOWER("name")``, ``COUNT(*)``)."""

    name: str = PydanticField(min_length=1)
    arguments: list[Any] = PydanticField(default_factory=list)

    @classmethod
    def call(cls, name: str, *arguments: Any) -> FunctionExpression:
        """Build a call; non-expression arguments are bound."""
        return cls(name=name, arguments=[to_bind(argument) for argument in arguments])

    def serialize(self, serializer) -> None:
        serializer.write(self.name)
        GroupExpression(expression=ListExpression(items=self.arguments)).serialize(serializer)

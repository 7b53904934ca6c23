"""Aliased expression."""

from typing import Any

from ._bases import Expression


class AliasExpression(Expression):
    """``expression AS name``."""

    expression: Any
    name: Any

    def serialize(self, serializer) -> None:
        self.expression.serialize(serializer)
        serializer.write(" AS ")
        self.name.serialize(serializer)

"""Bound parameter expression."""

from typing import Any

from ._bases import Expression


class BindExpression(Expression):
    """A value sent out-of-band; renders the dialect's placeholder for its position."""

    value: Any = None

    def serialize(self, serializer) -> None:
        serializer.write_bind(self.value)

"""Separated lists and parenthesized groups of expressions."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ._bases import Expression


class ListExpression(Expression):
    """Items joined by a separator (``", "`` by default).

    An empty list renders nothing. Items that render no text are skipped
    together with their separator.
    """

    items: list[Any] = PydanticField(default_factory=list)
    separator: Any = ", "
    """Plain text or an expression written between items."""

    @classmethod
    def of(cls, *items: Any, separator: Any = ", ") -> ListExpression:
        return cls(items=list(items), separator=separator)

    def serialize(self, serializer) -> None:
        wrote_any = False
        for item in self.items:
            mark = len(serializer.sql)
            if wrote_any:
                if isinstance(self.separator, str):
                    serializer.write(self.separator)
                else:
                    self.separator.serialize(serializer)
            start = len(serializer.sql)
            item.serialize(serializer)
            if len(serializer.sql) == start:
                serializer.truncate(mark)
            else:
                wrote_any = True


class GroupExpression(Expression):
    """``(expression)``; a sequence of items is rendered as a comma-separated list."""

    expression: Any

    @classmethod
    def of(cls, *items: Any) -> GroupExpression:
        return cls(expression=ListExpression(items=list(items)))

    def serialize(self, serializer) -> None:
        serializer.write("(")
        self.expression.serialize(serializer)
        serializer.write(")")

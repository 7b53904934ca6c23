"""SQL literal expressions: ``*``, ``DEFAULT``, ``NULL``, booleans, numbers and strings."""

from __future__ import annotations
from enum import Enum
from typing import Any

from ._bases import Expression


class LiteralKind(Enum):
    ALL = "all"
    DEFAULT = "default"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    STRING = "string"


class LiteralExpression(Expression):
    """A literal written directly into the SQL text (never bound).

    Build one with the class methods: ``LiteralExpression.string("x")``,
    ``LiteralExpression.numeric(10)``, ``LiteralExpression.null()``...
    """

    kind: LiteralKind
    value: Any = None

    @classmethod
    def all(cls) -> LiteralExpression:
        return cls(kind=LiteralKind.ALL)

    @classmethod
    def default(cls) -> LiteralExpression:
        return cls(kind=LiteralKind.DEFAULT)

    @classmethod
    def null(cls) -> LiteralExpression:
        return cls(kind=LiteralKind.NULL)

    @classmethod
    def boolean(cls, value: bool) -> LiteralExpression:
        return cls(kind=LiteralKind.BOOLEAN, value=bool(value))

    @classmethod
    def numeric(cls, value: Any) -> LiteralExpression:
        """Numeric literal; ``value`` is written verbatim via ``str()``."""
        return cls(kind=LiteralKind.NUMERIC, value=str(value))

    @classmethod
    def string(cls, value: str) -> LiteralExpression:
        return cls(kind=LiteralKind.STRING, value=value)

    def serialize(self, serializer) -> None:
        dialect = serializer.dialect
        if self.kind is LiteralKind.ALL:
            serializer.write("*")
        elif self.kind is LiteralKind.DEFAULT:
            dialect.literal_default.serialize(serializer)
        elif self.kind is LiteralKind.NULL:
            serializer.write("NULL")
        elif self.kind is LiteralKind.BOOLEAN:
            dialect.literal_boolean(self.value).serialize(serializer)
        elif self.kind is LiteralKind.NUMERIC:
            serializer.write(self.value)
        else:
            serializer.write(dialect.quote_string(self.value))

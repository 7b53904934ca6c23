"""Column data types, including enumerations."""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import Field as PydanticField

from ..capabilities import EnumSyntax
from ._bases import Expression
from .identifier import IdentifierExpression
from .literal import LiteralExpression
from .raw import RawExpression
from .sequence import GroupExpression, ListExpression


class DataTypeKind(Enum):
    SMALLINT = "SMALLINT"
    INT = "INTEGER"
    BIGINT = "BIGINT"
    TEXT = "TEXT"
    REAL = "REAL"
    BLOB = "BLOB"
    TIMESTAMP = "TIMESTAMP"
    CUSTOM = "custom"


class DataType(Expression):
    """A portable column type; the dialect may substitute its own spelling via ``custom_data_type``."""

    kind: DataTypeKind
    custom: Optional[Any] = None
    """The type expression when ``kind`` is CUSTOM."""

    @classmethod
    def smallint(cls) -> DataType:
        return cls(kind=DataTypeKind.SMALLINT)

    @classmethod
    def int(cls) -> DataType:
        return cls(kind=DataTypeKind.INT)

    @classmethod
    def bigint(cls) -> DataType:
        return cls(kind=DataTypeKind.BIGINT)

    @classmethod
    def text(cls) -> DataType:
        return cls(kind=DataTypeKind.TEXT)

    @classmethod
    def real(cls) -> DataType:
        return cls(kind=DataTypeKind.REAL)

    @classmethod
    def blob(cls) -> DataType:
        return cls(kind=DataTypeKind.BLOB)

    @classmethod
    def timestamp(cls) -> DataType:
        return cls(kind=DataTypeKind.TIMESTAMP)

    @classmethod
    def of(cls, custom: Any) -> DataType:
        """A type the portable kinds do not cover; a string is written verbatim."""
        if isinstance(custom, str):
            custom = RawExpression(custom)
        return cls(kind=DataTypeKind.CUSTOM, custom=custom)

    @classmethod
    def enum(cls, *cases: Any, name: Any = None) -> DataType:
        """An enumerated type; string cases become string literals.

        ``name`` is the named type (see ``CreateEnumQuery``) the column refers to
        on dialects that name their enum types.
        """
        return cls.of(EnumDataType.of(*cases, name=name))

    def is_custom(self, sql: str) -> bool:
        """True if this is a custom type written as the raw text ``sql``."""
        return (
            self.kind is DataTypeKind.CUSTOM
            and isinstance(self.custom, RawExpression)
            and self.custom.sql == sql
        )

    def serialize(self, serializer) -> None:
        override = serializer.dialect.custom_data_type(self)
        if override is not None:
            override.serialize(serializer)
        elif self.kind is DataTypeKind.CUSTOM:
            self.custom.serialize(serializer)
        else:
            serializer.write(self.kind.value)


class EnumDataType(Expression):
    """An enumeration column type, spelled per the dialect's enum syntax.

    ``ENUM ('a', 'b')`` inline, a reference to the named type ``name`` where
    enum types are named, and ``TEXT`` everywhere else.
    """

    cases: list[Any] = PydanticField(default_factory=list)
    name: Optional[Any] = None

    @classmethod
    def of(cls, *cases: Any, name: Any = None) -> EnumDataType:
        return cls(
            cases=[LiteralExpression.string(case) if isinstance(case, str) else case for case in cases],
            name=IdentifierExpression(string=name) if isinstance(name, str) else name,
        )

    def serialize(self, serializer) -> None:
        syntax = serializer.dialect.enum_syntax
        if syntax is EnumSyntax.INLINE:
            with serializer.statement() as statement:
                statement.append("ENUM", GroupExpression(expression=ListExpression(items=self.cases)))
            return
        if syntax is EnumSyntax.TYPE_NAME and self.name is not None:
            self.name.serialize(serializer)
            return
        if syntax is EnumSyntax.TYPE_NAME:
            serializer.logger.warning(
                "Inline enum types are not meant for %s, which names its enum types; using TEXT.",
                serializer.dialect.name,
            )
        DataType.text().serialize(serializer)

"""Named enumeration types: CREATE TYPE, ALTER TYPE and DROP TYPE.

Only dialects that name their enum types (``EnumSyntax.TYPE_NAME``) have these
statements; elsewhere they render nothing and log a warning.
"""

from typing import Any, Optional

from pydantic import Field as PydanticField

from ..capabilities import EnumSyntax
from ..clauses.constraints import DropBehavior
from ..expressions._bases import Expression
from ..expressions.sequence import GroupExpression, ListExpression


def _supports_named_enums(serializer, action: str) -> bool:
    dialect = serializer.dialect
    if dialect.enum_syntax is EnumSyntax.TYPE_NAME:
        return True
    serializer.logger.warning("%s does not support named enum types; skipping %s.", dialect.name, action)
    return False


class CreateEnumQuery(Expression):
    """``CREATE TYPE name AS ENUM (values)``."""

    name: Any
    values: list[Any] = PydanticField(default_factory=list)

    def serialize(self, serializer) -> None:
        if not _supports_named_enums(serializer, "CREATE TYPE"):
            return
        with serializer.statement(query=True) as statement:
            statement.append("CREATE TYPE", self.name, "AS ENUM", GroupExpression(expression=ListExpression(items=self.values)))


class AlterEnumQuery(Expression):
    """``ALTER TYPE name ADD VALUE value``."""

    name: Any
    value: Optional[Any] = None

    def serialize(self, serializer) -> None:
        if not _supports_named_enums(serializer, "ALTER TYPE"):
            return
        with serializer.statement(query=True) as statement:
            statement.append("ALTER TYPE", self.name)
            if self.value is not None:
                statement.append("ADD VALUE", self.value)


class DropEnumQuery(Expression):
    """``DROP TYPE [IF EXISTS] name [RESTRICT|CASCADE]``."""

    name: Any
    if_exists: bool = False
    behavior: Any = DropBehavior.RESTRICT

    def serialize(self, serializer) -> None:
        if not _supports_named_enums(serializer, "DROP TYPE"):
            return
        dialect = serializer.dialect
        with serializer.statement(query=True) as statement:
            statement.append("DROP TYPE")
            if self.if_exists and dialect.supports_if_exists:
                statement.append("IF EXISTS")
            statement.append(self.name)
            if dialect.supports_drop_behavior:
                statement.append(self.behavior)

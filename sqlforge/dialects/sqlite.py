"""SQLite dialect."""

from typing import Any, Callable, ClassVar

from pydantic import Field as PydanticField

from ..capabilities import (
    AlterTableSyntax,
    EnumSyntax,
    TriggerCreateFeatures,
    TriggerSyntax,
    UnionFeatures,
    UpsertSyntax,
)
from ..expressions import (
    FunctionExpression,
    GroupExpression,
    ListExpression,
    LiteralExpression,
    RawExpression,
    to_bind,
)
from .base import Dialect


class SqliteDialect(Dialect):
    """Dialect for SQLite (scheme sqlite)."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    F: ClassVar[dict[str, Callable[..., Any]]] = {
        "concat": lambda *args: GroupExpression(
            expression=ListExpression(items=[to_bind(arg) for arg in args], separator=" || ")
        ),
        "escape_for_like": lambda s: s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_"),
    }

    name: str = "sqlite"
    supports_returning: bool = True
    upsert_syntax: UpsertSyntax = UpsertSyntax.STANDARD
    enum_syntax: EnumSyntax = EnumSyntax.UNSUPPORTED
    union_features: UnionFeatures = (
        UnionFeatures.UNION | UnionFeatures.UNION_ALL | UnionFeatures.INTERSECT | UnionFeatures.EXCEPT
    )
    trigger_syntax: TriggerSyntax = PydanticField(
        default_factory=lambda: TriggerSyntax(
            create=TriggerCreateFeatures.SUPPORTS_BODY | TriggerCreateFeatures.SUPPORTS_CONDITION
        )
    )
    alter_table_syntax: AlterTableSyntax = PydanticField(
        default_factory=lambda: AlterTableSyntax(allows_batch=False)
    )

    def bind_placeholder(self, position: int) -> RawExpression:
        return RawExpression("?")

    def literal_boolean(self, value: bool) -> RawExpression:
        return RawExpression("TRUE" if value else "FALSE")

    def nested_subpath_expression(self, column: Any, path: list[str]) -> FunctionExpression:
        if not path:
            raise ValueError("A nested subpath needs at least one path component")
        return FunctionExpression(
            name="json_extract",
            arguments=[column, LiteralExpression.string("$." + ".".join(path))],
        )

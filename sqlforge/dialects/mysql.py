"""MySQL dialect (also used for MariaDB)."""

import hashlib
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
    IdentifierExpression,
    ListExpression,
    LiteralExpression,
    RawExpression,
    to_bind,
)
from .base import Dialect

MAX_IDENTIFIER_LENGTH = 64


class MysqlDialect(Dialect):
    """Dialect for MySQL and MariaDB (schemes mysql, mariadb)."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mysql", "mariadb")

    F: ClassVar[dict[str, Callable[..., Any]]] = {
        "concat": lambda *args: FunctionExpression(name="CONCAT", arguments=[to_bind(arg) for arg in args]),
        "escape_for_like": lambda s: s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_"),
    }

    name: str = "mysql"
    identifier_quote: str = "`"
    auto_increment_clause: RawExpression = PydanticField(default_factory=lambda: RawExpression("AUTO_INCREMENT"))
    enum_syntax: EnumSyntax = EnumSyntax.INLINE
    upsert_syntax: UpsertSyntax = UpsertSyntax.MYSQL_LIKE
    supports_drop_behavior: bool = True
    union_features: UnionFeatures = (
        UnionFeatures.UNION | UnionFeatures.UNION_ALL
        | UnionFeatures.INTERSECT | UnionFeatures.INTERSECT_ALL
        | UnionFeatures.EXCEPT | UnionFeatures.EXCEPT_ALL
        | UnionFeatures.EXPLICIT_DISTINCT | UnionFeatures.PARENTHESIZED_SUBQUERIES
    )
    trigger_syntax: TriggerSyntax = PydanticField(
        default_factory=lambda: TriggerSyntax(
            create=(
                TriggerCreateFeatures.SUPPORTS_BODY | TriggerCreateFeatures.SUPPORTS_ORDER
                | TriggerCreateFeatures.SUPPORTS_DEFINER | TriggerCreateFeatures.REQUIRES_FOR_EACH_ROW
            )
        )
    )
    alter_table_syntax: AlterTableSyntax = PydanticField(
        default_factory=lambda: AlterTableSyntax(alter_column_definition_clause=RawExpression("MODIFY COLUMN"))
    )
    shared_select_lock_expression: RawExpression = PydanticField(
        default_factory=lambda: RawExpression("LOCK IN SHARE MODE")
    )
    exclusive_select_lock_expression: RawExpression = PydanticField(
        default_factory=lambda: RawExpression("FOR UPDATE")
    )

    def bind_placeholder(self, position: int) -> RawExpression:
        return RawExpression("?")

    def literal_boolean(self, value: bool) -> RawExpression:
        return RawExpression("true" if value else "false")

    def normalize_sql_constraint(self, identifier: Any) -> Any:
        """Constraint names longer than MySQL allows are replaced by a stable digest."""
        if isinstance(identifier, IdentifierExpression) and len(identifier.string) > MAX_IDENTIFIER_LENGTH:
            return IdentifierExpression(string=hashlib.sha1(identifier.string.encode("utf-8")).hexdigest())
        return identifier

    def nested_subpath_expression(self, column: Any, path: list[str]) -> GroupExpression:
        if not path:
            raise ValueError("A nested subpath needs at least one path component")
        return GroupExpression(expression=ListExpression(
            items=[column, LiteralExpression.string("$." + ".".join(path))],
            separator="->>",
        ))

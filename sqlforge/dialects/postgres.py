"""PostgreSQL dialect."""

import hashlib
from typing import Any, Callable, ClassVar, Optional

from pydantic import Field as PydanticField

from ..capabilities import (
    AlterTableSyntax,
    EnumSyntax,
    TriggerCreateFeatures,
    TriggerDropFeatures,
    TriggerSyntax,
    UnionFeatures,
    UpsertSyntax,
)
from ..expressions import (
    DataTypeKind,
    Expression,
    GroupExpression,
    IdentifierExpression,
    ListExpression,
    LiteralExpression,
    RawExpression,
    to_bind,
)
from .base import Dialect

MAX_IDENTIFIER_LENGTH = 63


class PostgresDialect(Dialect):
    """Dialect for PostgreSQL (schemes postgres, postgresql)."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("postgres", "postgresql")

    F: ClassVar[dict[str, Callable[..., Any]]] = {
        "concat": lambda *args: GroupExpression(
            expression=ListExpression(items=[to_bind(arg) for arg in args], separator=" || ")
        ),
        "escape_for_like": lambda s: s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_"),
    }

    name: str = "postgresql"
    auto_increment_clause: RawExpression = PydanticField(
        default_factory=lambda: RawExpression("GENERATED BY DEFAULT AS IDENTITY")
    )
    enum_syntax: EnumSyntax = EnumSyntax.TYPE_NAME
    supports_drop_behavior: bool = True
    supports_returning: bool = True
    upsert_syntax: UpsertSyntax = UpsertSyntax.STANDARD
    union_features: UnionFeatures = (
        UnionFeatures.UNION | UnionFeatures.UNION_ALL
        | UnionFeatures.INTERSECT | UnionFeatures.INTERSECT_ALL
        | UnionFeatures.EXCEPT | UnionFeatures.EXCEPT_ALL
        | UnionFeatures.EXPLICIT_DISTINCT | UnionFeatures.PARENTHESIZED_SUBQUERIES
    )
    trigger_syntax: TriggerSyntax = PydanticField(
        default_factory=lambda: TriggerSyntax(
            create=(
                TriggerCreateFeatures.SUPPORTS_FOR_EACH | TriggerCreateFeatures.POSTGRESQL_CHECKS
                | TriggerCreateFeatures.SUPPORTS_CONDITION | TriggerCreateFeatures.CONDITION_REQUIRES_PARENTHESES
                | TriggerCreateFeatures.SUPPORTS_CONSTRAINTS | TriggerCreateFeatures.SUPPORTS_UPDATE_COLUMNS
                | TriggerCreateFeatures.SUPPORTS_OR_REPLACE
            ),
            drop=TriggerDropFeatures.SUPPORTS_TABLE_NAME | TriggerDropFeatures.SUPPORTS_CASCADE,
        )
    )
    alter_table_syntax: AlterTableSyntax = PydanticField(
        default_factory=lambda: AlterTableSyntax(
            alter_column_definition_clause=RawExpression("ALTER COLUMN"),
            alter_column_definition_type_keyword=RawExpression("SET DATA TYPE"),
        )
    )
    shared_select_lock_expression: RawExpression = PydanticField(default_factory=lambda: RawExpression("FOR SHARE"))
    exclusive_select_lock_expression: RawExpression = PydanticField(default_factory=lambda: RawExpression("FOR UPDATE"))

    def bind_placeholder(self, position: int) -> RawExpression:
        return RawExpression(f"${position}")

    def literal_boolean(self, value: bool) -> RawExpression:
        return RawExpression("true" if value else "false")

    def custom_data_type(self, data_type: Any) -> Optional[Expression]:
        kind = getattr(data_type, "kind", None)
        if kind is DataTypeKind.BLOB:
            return RawExpression("BYTEA")
        if kind is DataTypeKind.TIMESTAMP:
            return RawExpression("TIMESTAMPTZ")
        return None

    def normalize_sql_constraint(self, identifier: Any) -> Any:
        """Constraint names longer than PostgreSQL allows are replaced by a stable digest."""
        if isinstance(identifier, IdentifierExpression) and len(identifier.string.encode("utf-8")) > MAX_IDENTIFIER_LENGTH:
            return IdentifierExpression(string=hashlib.sha1(identifier.string.encode("utf-8")).hexdigest())
        return identifier

    def nested_subpath_expression(self, column: Any, path: list[str]) -> GroupExpression:
        """``(column->'a'->'b'->>'c')``: descend with ``->``, extract the last step as text."""
        if not path:
            raise ValueError("A nested subpath needs at least one path component")
        descender = ListExpression(
            items=[column, *(LiteralExpression.string(step) for step in path[:-1])],
            separator="->",
        )
        return GroupExpression(expression=ListExpression(
            items=[descender, LiteralExpression.string(path[-1])],
            separator="->>",
        ))

"""Base Dialect type: the capability descriptor every engine fills in."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, Field as PydanticField

from ..capabilities import (
    AlterTableSyntax,
    EnumSyntax,
    TriggerSyntax,
    UnionFeatures,
    UpsertSyntax,
)
from ..expressions import Expression, RawExpression


class _DialectF:
    """Helper for dialect.f: __getattr__ returns the callable from the dialect's F config."""

    __slots__ = ("_dialect",)

    def __init__(self, dialect: "Dialect") -> None:
        self._dialect = dialect

    def __getattr__(self, name: str) -> Callable[..., Any]:
        F = type(self._dialect).F  # pylint: disable=invalid-name
        if name in F:
            return F[name]
        raise AttributeError(name)


class Dialect(BaseModel, ABC):
    """What a SQL engine supports, and how it spells things.

    Pure configuration: answering a capability question never touches a
    connection. Fields are ordinary pydantic fields, so an instance can be
    tuned after construction (``dialect.supports_returning = False``); build a
    fresh instance rather than sharing one between independent renders.
    """

    model_config = {"arbitrary_types_allowed": True}

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """URL schemes this dialect handles (e.g. ('postgres', 'postgresql'))."""

    F: ClassVar[dict[str, Callable[..., Any]]] = {}
    """Dialect-specific SQL helpers (e.g. concat). Access via dialect.f.concat(a, b, c)."""

    name: str
    identifier_quote: str = '"'
    literal_string_quote: str = "'"
    supports_auto_increment: bool = True
    auto_increment_clause: Expression = PydanticField(default_factory=lambda: RawExpression("AUTOINCREMENT"))
    """Written after ``PRIMARY KEY`` for auto-incremented keys."""
    auto_increment_function: Optional[Expression] = None
    """If set, auto-incremented keys render ``DEFAULT <function> PRIMARY KEY`` instead."""
    literal_default: Expression = PydanticField(default_factory=lambda: RawExpression("DEFAULT"))
    supports_if_exists: bool = True
    enum_syntax: EnumSyntax = EnumSyntax.UNSUPPORTED
    supports_drop_behavior: bool = False
    supports_returning: bool = False
    trigger_syntax: TriggerSyntax = PydanticField(default_factory=TriggerSyntax)
    alter_table_syntax: AlterTableSyntax = PydanticField(default_factory=AlterTableSyntax)
    upsert_syntax: UpsertSyntax = UpsertSyntax.UNSUPPORTED
    union_features: UnionFeatures = UnionFeatures.UNION | UnionFeatures.UNION_ALL
    shared_select_lock_expression: Optional[Expression] = None
    exclusive_select_lock_expression: Optional[Expression] = None

    @property
    def f(self) -> _DialectF:
        """Access dialect-specific helpers by name (e.g. self.f.concat(a, b, c))."""
        return _DialectF(self)

    @abstractmethod
    def bind_placeholder(self, position: int) -> Expression:
        """Placeholder for the bind at 1-based ``position`` (``?``, ``$1``...)."""
        ...  # pylint: disable=unnecessary-ellipsis

    @abstractmethod
    def literal_boolean(self, value: bool) -> Expression:
        """Inline spelling of a boolean literal."""
        ...  # pylint: disable=unnecessary-ellipsis

    def quote_identifier(self, name: str) -> str:
        """Quote ``name``, doubling any quote character it contains."""
        quote = self.identifier_quote
        if len(quote) == 1:
            name = name.replace(quote, quote * 2)
        return f"{quote}{name}{quote}"

    def quote_string(self, value: str) -> str:
        """Quote a string literal, doubling any quote character it contains."""
        quote = self.literal_string_quote
        return f"{quote}{value.replace(quote, quote * 2)}{quote}"

    def custom_data_type(self, data_type: Any) -> Optional[Expression]:
        """Engine-specific spelling of a portable data type, or None to use the default."""
        return None

    def normalize_sql_constraint(self, identifier: Any) -> Any:
        """Rewrite a constraint name (some engines limit identifier length)."""
        return identifier

    def nested_subpath_expression(self, column: Any, path: list[str]) -> Optional[Expression]:
        """Expression reaching ``path`` inside a structured column, or None if unsupported."""
        return None

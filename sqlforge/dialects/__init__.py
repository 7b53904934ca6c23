"""Database dialects: one capability descriptor per engine (SQLite, MySQL, PostgreSQL)."""

from ..capabilities import (
    AlterTableSyntax,
    EnumSyntax,
    TriggerCreateFeatures,
    TriggerDropFeatures,
    TriggerSyntax,
    UnionFeatures,
    UpsertSyntax,
)
from .base import Dialect
from .mysql import MysqlDialect
from .postgres import PostgresDialect
from .sqlite import SqliteDialect

_DIALECT_CLASSES: tuple[type[Dialect], ...] = (
    SqliteDialect,
    MysqlDialect,
    PostgresDialect,
)


def get_dialect_for_scheme(scheme: str) -> Dialect:
    """Return a fresh Dialect instance for the given URL scheme (e.g. 'sqlite', 'postgresql+asyncpg')."""
    normalized = (scheme or "").split("+")[0].lower()
    for dialect_cls in _DIALECT_CLASSES:
        if normalized in dialect_cls.SUPPORTED_SCHEMA:
            return dialect_cls()
    raise ValueError(f"Unsupported database scheme: {scheme}")


__all__ = [
    "AlterTableSyntax",
    "Dialect",
    "EnumSyntax",
    "TriggerCreateFeatures",
    "TriggerDropFeatures",
    "TriggerSyntax",
    "UnionFeatures",
    "UpsertSyntax",
    "SqliteDialect",
    "MysqlDialect",
    "PostgresDialect",
    "get_dialect_for_scheme",
]

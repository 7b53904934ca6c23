"""Capability types describing what a SQL engine supports.

These are plain data: enumerations and flag sets consulted by expressions while
they render. They hold no connection or I/O handle.
"""

from __future__ import annotations
from enum import Enum, Flag, auto
from typing import Any, Optional

from pydantic import BaseModel, Field as PydanticField


class EnumSyntax(Enum):
    """How (and whether) the engine spells enumerated column types."""

    INLINE = "inline"
    """``ENUM('a', 'b')`` directly in the column type (MySQL)."""
    TYPE_NAME = "type_name"
    """A separate named type created with ``CREATE TYPE ... AS ENUM`` (PostgreSQL)."""
    UNSUPPORTED = "unsupported"
    """No enum support; enum columns fall back to ``TEXT``."""


class UpsertSyntax(Enum):
    """Which conflict-resolution grammar the engine accepts on INSERT."""

    STANDARD = "standard"
    """``ON CONFLICT ... DO NOTHING / DO UPDATE SET ...``."""
    MYSQL_LIKE = "mysql_like"
    """``INSERT IGNORE`` and ``ON DUPLICATE KEY UPDATE ...``."""
    UNSUPPORTED = "unsupported"


class UnionFeatures(Flag):
    """Set operations the engine supports between SELECT statements."""

    UNION = auto()
    UNION_ALL = auto()
    INTERSECT = auto()
    INTERSECT_ALL = auto()
    EXCEPT = auto()
    EXCEPT_ALL = auto()
    EXPLICIT_DISTINCT = auto()
    """Write ``UNION DISTINCT`` instead of relying on the implicit default."""
    PARENTHESIZED_SUBQUERIES = auto()
    """Wrap every branch of a set operation in parentheses."""

    @classmethod
    def none(cls) -> UnionFeatures:
        return cls(0)


class TriggerCreateFeatures(Flag):
    """Clauses the engine accepts in ``CREATE TRIGGER``."""

    REQUIRES_FOR_EACH_ROW = auto()
    SUPPORTS_BODY = auto()
    SUPPORTS_CONDITION = auto()
    SUPPORTS_DEFINER = auto()
    SUPPORTS_FOR_EACH = auto()
    SUPPORTS_ORDER = auto()
    SUPPORTS_UPDATE_COLUMNS = auto()
    SUPPORTS_CONSTRAINTS = auto()
    POSTGRESQL_CHECKS = auto()
    CONDITION_REQUIRES_PARENTHESES = auto()
    SUPPORTS_OR_REPLACE = auto()

    @classmethod
    def none(cls) -> TriggerCreateFeatures:
        return cls(0)


class TriggerDropFeatures(Flag):
    """Clauses the engine accepts in ``DROP TRIGGER``."""

    SUPPORTS_TABLE_NAME = auto()
    SUPPORTS_CASCADE = auto()

    @classmethod
    def none(cls) -> TriggerDropFeatures:
        return cls(0)


class TriggerSyntax(BaseModel):
    """Creation-time and drop-time trigger capabilities, set independently."""

    create: TriggerCreateFeatures = PydanticField(default_factory=TriggerCreateFeatures.none)
    drop: TriggerDropFeatures = PydanticField(default_factory=TriggerDropFeatures.none)


class AlterTableSyntax(BaseModel):
    """How the engine spells column changes inside ``ALTER TABLE``."""

    model_config = {"arbitrary_types_allowed": True}

    alter_column_definition_clause: Optional[Any] = None
    """Expression introducing a column modification (e.g. ``MODIFY``, ``ALTER COLUMN``); None if unsupported."""
    alter_column_definition_type_keyword: Optional[Any] = None
    """Expression written between the column and its new type (e.g. ``SET DATA TYPE``)."""
    allows_batch: bool = True
    """Whether several alterations may share one statement."""

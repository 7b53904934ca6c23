"""Fluent builders: mutable wrappers around statement nodes whose setters return the builder."""

from ._bases import (
    CommonTableExpressionMixin,
    HavingMixin,
    JoinMixin,
    PredicateGroup,
    PredicateMixin,
    QueryBuilder,
    ReturningMixin,
)
from .delete import DeleteBuilder
from .enums import AlterEnumBuilder, CreateEnumBuilder, DropEnumBuilder
from .index import CreateIndexBuilder, DropIndexBuilder
from .insert import InsertBuilder
from .raw import RawBuilder
from .select import SelectBuilder
from .table import AlterTableBuilder, CreateTableBuilder, DropTableBuilder
from .trigger import CreateTriggerBuilder, DropTriggerBuilder
from .union import UnionBuilder, UnionMixin
from .update import UpdateBuilder

__all__ = [
    "AlterEnumBuilder",
    "AlterTableBuilder",
    "CommonTableExpressionMixin",
    "CreateEnumBuilder",
    "CreateIndexBuilder",
    "CreateTableBuilder",
    "CreateTriggerBuilder",
    "DeleteBuilder",
    "DropEnumBuilder",
    "DropIndexBuilder",
    "DropTableBuilder",
    "DropTriggerBuilder",
    "HavingMixin",
    "InsertBuilder",
    "JoinMixin",
    "PredicateGroup",
    "PredicateMixin",
    "QueryBuilder",
    "RawBuilder",
    "ReturningMixin",
    "SelectBuilder",
    "UnionBuilder",
    "UnionMixin",
    "UpdateBuilder",
]

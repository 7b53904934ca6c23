"""Composite statements: queries and schema changes."""

from .delete import DeleteQuery
from .enums import AlterEnumQuery, CreateEnumQuery, DropEnumQuery
from .index import CreateIndexQuery, DropIndexQuery
from .insert import InsertQuery
from .select import SelectQuery
from .table import AlterTableQuery, CreateTableQuery, DropTableQuery
from .trigger import (
    CreateTriggerQuery,
    DropTriggerQuery,
    TriggerEach,
    TriggerEvent,
    TriggerOrder,
    TriggerTiming,
    TriggerWhen,
)
from .union import UnionJoiner, UnionQuery, UnionType
from .update import UpdateQuery

__all__ = [
    "AlterEnumQuery",
    "AlterTableQuery",
    "CreateEnumQuery",
    "CreateIndexQuery",
    "CreateTableQuery",
    "CreateTriggerQuery",
    "DeleteQuery",
    "DropEnumQuery",
    "DropIndexQuery",
    "DropTableQuery",
    "DropTriggerQuery",
    "InsertQuery",
    "SelectQuery",
    "TriggerEach",
    "TriggerEvent",
    "TriggerOrder",
    "TriggerTiming",
    "TriggerWhen",
    "UnionJoiner",
    "UnionQuery",
    "UnionType",
    "UpdateQuery",
]

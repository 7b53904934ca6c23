"""Clauses shared by several statements: joins, ordering, conflicts, constraints and table expressions."""

from .column_definition import AlterColumnDefinitionType, ColumnDefinition
from .conflict import (
    ColumnAssignment,
    ConflictAction,
    ConflictActionKind,
    ConflictResolutionStrategy,
    ExcludedColumn,
)
from .constraints import (
    ColumnConstraintAlgorithm,
    ColumnConstraintKind,
    ConstraintClause,
    DropBehavior,
    ForeignKeyAction,
    ForeignKeyClause,
    TableConstraintAlgorithm,
    TableConstraintKind,
)
from .cte import CommonTableExpression, CommonTableExpressionGroup
from .join import JoinClause, JoinMethod
from .locking import LockingClause
from .order import Direction, OrderByClause
from .returning import ReturningClause
from .subquery import SubqueryClause

__all__ = [
    "AlterColumnDefinitionType",
    "ColumnAssignment",
    "ColumnConstraintAlgorithm",
    "ColumnConstraintKind",
    "ColumnDefinition",
    "CommonTableExpression",
    "CommonTableExpressionGroup",
    "ConflictAction",
    "ConflictActionKind",
    "ConflictResolutionStrategy",
    "ConstraintClause",
    "Direction",
    "DropBehavior",
    "ExcludedColumn",
    "ForeignKeyAction",
    "ForeignKeyClause",
    "JoinClause",
    "JoinMethod",
    "LockingClause",
    "OrderByClause",
    "ReturningClause",
    "SubqueryClause",
    "TableConstraintAlgorithm",
    "TableConstraintKind",
]

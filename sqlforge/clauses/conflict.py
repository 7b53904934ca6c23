"""Upsert support: conflict resolution strategies and their building blocks."""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field as PydanticField

from ..capabilities import UpsertSyntax
from ..expressions._bases import Expression, to_bind, to_identifier
from ..expressions.function import FunctionExpression
from ..expressions.raw import RawExpression
from ..expressions.sequence import GroupExpression, ListExpression


class ColumnAssignment(Expression):
    """``column = value``, as used by UPDATE and conflict updates."""

    column: Any
    value: Any

    @classmethod
    def of(cls, column: Any, value: Any) -> ColumnAssignment:
        """Plain strings name the column; non-expression values are bound."""
        return cls(column=to_identifier(column), value=to_bind(value))

    @classmethod
    def excluded(cls, column: Any) -> ColumnAssignment:
        """Assign the value the conflicting INSERT tried to write to the same column."""
        column = to_identifier(column)
        return cls(column=column, value=ExcludedColumn(name=column))

    def serialize(self, serializer) -> None:
        self.column.serialize(serializer)
        serializer.write(" = ")
        self.value.serialize(serializer)


class ExcludedColumn(Expression):
    """The value an INSERT would have written to ``name``, inside a conflict update.

    ``EXCLUDED."name"`` for standard upserts, ``VALUES("name")`` for MySQL-like
    ones, nothing where upserts are unsupported.
    """

    name: Any

    def serialize(self, serializer) -> None:
        syntax = serializer.dialect.upsert_syntax
        if syntax is UpsertSyntax.STANDARD:
            serializer.write("EXCLUDED.")
            self.name.serialize(serializer)
        elif syntax is UpsertSyntax.MYSQL_LIKE:
            FunctionExpression(name="VALUES", arguments=[self.name]).serialize(serializer)


class ConflictActionKind(Enum):
    NO_ACTION = "no_action"
    UPDATE = "update"


class ConflictAction(BaseModel):
    """What to do with a row whose insertion conflicts: ignore it, or update the existing row."""

    model_config = {"arbitrary_types_allowed": True}

    kind: ConflictActionKind = ConflictActionKind.NO_ACTION
    assignments: list[Any] = PydanticField(default_factory=list)
    predicate: Optional[Any] = None

    @classmethod
    def no_action(cls) -> ConflictAction:
        return cls(kind=ConflictActionKind.NO_ACTION)

    @classmethod
    def update(cls, assignments: list[Any], predicate: Any = None) -> ConflictAction:
        if not assignments:
            raise ValueError("A conflict update needs at least one assignment; use no_action() to ignore conflicts")
        return cls(kind=ConflictActionKind.UPDATE, assignments=list(assignments), predicate=predicate)


class ConflictResolutionStrategy(Expression):
    """How an INSERT reacts to unique-key conflicts on ``targets``.

    The same strategy renders differently per dialect: ``ON CONFLICT`` for
    standard syntax, ``INSERT IGNORE`` / ``ON DUPLICATE KEY UPDATE`` for
    MySQL-like syntax, and nothing at all where upserts are unsupported.
    """

    targets: list[Any] = PydanticField(default_factory=list)
    action: ConflictAction = PydanticField(default_factory=ConflictAction.no_action)

    def query_modifier(self, dialect) -> Optional[Expression]:
        """Keyword written between INSERT and INTO, if any."""
        if dialect.upsert_syntax is UpsertSyntax.MYSQL_LIKE and self.action.kind is ConflictActionKind.NO_ACTION:
            return RawExpression("IGNORE")
        return None

    def serialize(self, serializer) -> None:
        syntax = serializer.dialect.upsert_syntax
        action = self.action
        if syntax is UpsertSyntax.UNSUPPORTED:
            serializer.logger.debug("%s does not support upserts; conflict clause omitted.", serializer.dialect.name)
            return
        with serializer.statement() as statement:
            if syntax is UpsertSyntax.STANDARD:
                statement.append("ON CONFLICT")
                if self.targets:
                    statement.append(GroupExpression(expression=ListExpression(items=self.targets)))
                if action.kind is ConflictActionKind.NO_ACTION:
                    statement.append("DO NOTHING")
                else:
                    statement.append("DO UPDATE SET", ListExpression(items=action.assignments))
                    if action.predicate is not None:
                        statement.append("WHERE", action.predicate)
            elif action.kind is ConflictActionKind.UPDATE:
                statement.append("ON DUPLICATE KEY UPDATE", ListExpression(items=action.assignments))

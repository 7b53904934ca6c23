"""Builders for CREATE TRIGGER and DROP TRIGGER."""

from __future__ import annotations
from typing import Any, Iterable

from ..clauses.constraints import DropBehavior
from ..expressions._bases import is_renderable, to_identifier, to_identifiers
from ..expressions.literal import LiteralExpression
from ..expressions.raw import RawExpression
from ..queries.trigger import CreateTriggerQuery, DropTriggerQuery, TriggerEach, TriggerOrder
from ._bases import QueryBuilder


class CreateTriggerBuilder(QueryBuilder):
    """Fluent CREATE TRIGGER.

    Which of the optional clauses actually render is up to the dialect's
    trigger syntax; setting an unsupported one is harmless.

    Example:
        db.create_trigger("audit", "planets", TriggerWhen.AFTER, TriggerEvent.INSERT)
          .each(TriggerEach.ROW).procedure("log_planet").run()
    """

    query: CreateTriggerQuery

    @classmethod
    def of(cls, name: Any, table: Any, when: Any, event: Any, database: Any = None) -> CreateTriggerBuilder:
        query = CreateTriggerQuery(name=to_identifier(name), table=to_identifier(table), when=when, event=event)
        return cls(query=query, database=database)

    def columns(self, *columns: Any) -> CreateTriggerBuilder:
        """Fire only when these columns are updated (``UPDATE OF ...``)."""
        self.query.columns.extend(to_identifiers(columns))
        return self

    def constraint(self, timing: Any = None) -> CreateTriggerBuilder:
        """Make this a constraint trigger, optionally deferrable."""
        self.query.is_constraint = True
        self.query.timing = timing
        return self

    def referenced_table(self, table: Any) -> CreateTriggerBuilder:
        self.query.referenced_table = to_identifier(table)
        return self

    def each(self, each: TriggerEach = TriggerEach.ROW) -> CreateTriggerBuilder:
        self.query.each = each
        return self

    def condition(self, condition: Any) -> CreateTriggerBuilder:
        self.query.condition = condition
        return self

    def procedure(self, name: Any) -> CreateTriggerBuilder:
        self.query.procedure = to_identifier(name)
        return self

    def definer(self, user: Any) -> CreateTriggerBuilder:
        """``DEFINER = 'user'``; a string is written as a quoted string literal."""
        self.query.definer = user if is_renderable(user) else LiteralExpression.string(user)
        return self

    def body(self, statements: Iterable[Any]) -> CreateTriggerBuilder:
        """Trigger body statements; strings are written verbatim."""
        self.query.body = [statement if is_renderable(statement) else RawExpression(statement) for statement in statements]
        return self

    def order(self, order: TriggerOrder, other_trigger: Any) -> CreateTriggerBuilder:
        self.query.order = order
        self.query.order_trigger_name = to_identifier(other_trigger)
        return self

    def or_replace(self) -> CreateTriggerBuilder:
        self.query.or_replace = True
        return self


class DropTriggerBuilder(QueryBuilder):
    query: DropTriggerQuery

    @classmethod
    def of(cls, name: Any, database: Any = None) -> DropTriggerBuilder:
        return cls(query=DropTriggerQuery(name=to_identifier(name)), database=database)

    def table(self, table: Any) -> DropTriggerBuilder:
        self.query.table = to_identifier(table)
        return self

    def if_exists(self) -> DropTriggerBuilder:
        self.query.if_exists = True
        return self

    def cascade(self) -> DropTriggerBuilder:
        self.query.behavior = DropBehavior.CASCADE
        return self

    def restrict(self) -> DropTriggerBuilder:
        self.query.behavior = DropBehavior.RESTRICT
        return self

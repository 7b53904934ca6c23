"""CREATE TRIGGER and DROP TRIGGER.

Which clauses appear is decided entirely by the dialect's trigger syntax
flags, so one trigger description serves MySQL-, SQLite- and PostgreSQL-style
engines alike.
"""

from typing import Any, Optional

from pydantic import Field as PydanticField

from ..capabilities import TriggerCreateFeatures, TriggerDropFeatures
from ..expressions._bases import Expression, KeywordEnum
from ..expressions.sequence import GroupExpression, ListExpression


class TriggerWhen(KeywordEnum):
    BEFORE = "BEFORE"
    AFTER = "AFTER"
    INSTEAD = "INSTEAD OF"


class TriggerEvent(KeywordEnum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    TRUNCATE = "TRUNCATE"


class TriggerTiming(KeywordEnum):
    """Deferrability of a constraint trigger."""

    DEFERRABLE = "DEFERRABLE INITIALLY IMMEDIATE"
    DEFERRED_BY_DEFAULT = "DEFERRABLE INITIALLY DEFERRED"
    NOT_DEFERRABLE = "NOT DEFERRABLE"


class TriggerEach(KeywordEnum):
    ROW = "FOR EACH ROW"
    STATEMENT = "FOR EACH STATEMENT"


class TriggerOrder(KeywordEnum):
    """Position relative to another trigger on the same table and event."""

    FOLLOWS = "FOLLOWS"
    PRECEDES = "PRECEDES"


class CreateTriggerQuery(Expression):
    """A ``CREATE TRIGGER`` statement."""

    name: Any
    table: Any
    when: Any
    event: Any
    columns: list[Any] = PydanticField(default_factory=list)
    """Columns whose update fires the trigger (``UPDATE OF ...``)."""
    is_constraint: bool = False
    timing: Optional[Any] = None
    referenced_table: Optional[Any] = None
    each: Optional[Any] = None
    condition: Optional[Any] = None
    procedure: Optional[Any] = None
    definer: Optional[Any] = None
    body: Optional[list[Any]] = None
    order: Optional[Any] = None
    order_trigger_name: Optional[Any] = None
    or_replace: bool = False

    def _check(self, serializer) -> None:
        """Log combinations the engine will reject; the statement is still rendered as asked."""
        syntax = serializer.dialect.trigger_syntax.create
        problems = []
        if syntax & TriggerCreateFeatures.POSTGRESQL_CHECKS:
            instead = self.when is TriggerWhen.INSTEAD
            if instead and self.event is TriggerEvent.UPDATE and self.columns:
                problems.append("INSTEAD OF UPDATE events do not support lists of columns")
            if instead and self.each is not TriggerEach.ROW:
                problems.append("INSTEAD OF triggers must be FOR EACH ROW")
            if syntax & TriggerCreateFeatures.SUPPORTS_UPDATE_COLUMNS and self.columns and self.event is not TriggerEvent.UPDATE:
                problems.append("only UPDATE triggers may specify a list of columns")
            if syntax & TriggerCreateFeatures.SUPPORTS_CONDITION and instead and self.condition is not None:
                problems.append("INSTEAD OF triggers do not support WHEN conditions")
            if syntax & TriggerCreateFeatures.SUPPORTS_CONSTRAINTS:
                if self.is_constraint and self.when is not TriggerWhen.AFTER:
                    problems.append("CONSTRAINT triggers may only be AFTER")
                if self.is_constraint and self.each is not TriggerEach.ROW:
                    problems.append("CONSTRAINT triggers may only be FOR EACH ROW")
                if not self.is_constraint and self.timing is not None:
                    problems.append("timing may only be specified on CONSTRAINT triggers")
        if self.definer is not None and not syntax & TriggerCreateFeatures.SUPPORTS_DEFINER:
            problems.append("a definer was given but the dialect does not support one")
        if syntax & TriggerCreateFeatures.SUPPORTS_BODY and self.body is None:
            problems.append("a trigger body is required")
        if not syntax & TriggerCreateFeatures.SUPPORTS_BODY and self.procedure is None:
            problems.append("a trigger procedure is required")
        for problem in problems:
            serializer.logger.warning("Invalid trigger for %s: %s.", serializer.dialect.name, problem)

    def serialize(self, serializer) -> None:
        self._check(serializer)
        syntax = serializer.dialect.trigger_syntax.create
        constraints = bool(syntax & TriggerCreateFeatures.SUPPORTS_CONSTRAINTS)
        with serializer.statement(query=True) as statement:
            statement.append("CREATE")
            if self.or_replace and syntax & TriggerCreateFeatures.SUPPORTS_OR_REPLACE:
                statement.append("OR REPLACE")
            if self.definer is not None and syntax & TriggerCreateFeatures.SUPPORTS_DEFINER:
                statement.append("DEFINER =", self.definer)
            if constraints and self.is_constraint:
                statement.append("CONSTRAINT")
            statement.append("TRIGGER", self.name, self.when, self.event)
            if self.columns and syntax & TriggerCreateFeatures.SUPPORTS_UPDATE_COLUMNS:
                statement.append("OF", ListExpression(items=self.columns))
            statement.append("ON", self.table)
            if self.referenced_table is not None and constraints:
                statement.append("FROM", self.referenced_table)
            if self.timing is not None and constraints:
                statement.append(self.timing)
            supports_for_each = bool(syntax & TriggerCreateFeatures.SUPPORTS_FOR_EACH)
            if syntax & TriggerCreateFeatures.REQUIRES_FOR_EACH_ROW or (supports_for_each and constraints and self.is_constraint):
                statement.append(TriggerEach.ROW)
            elif supports_for_each and self.each is not None:
                statement.append(self.each)
            if self.condition is not None and syntax & TriggerCreateFeatures.SUPPORTS_CONDITION:
                if syntax & TriggerCreateFeatures.CONDITION_REQUIRES_PARENTHESES:
                    statement.append("WHEN", GroupExpression(expression=self.condition))
                else:
                    statement.append("WHEN", self.condition)
            if self.order is not None and self.order_trigger_name is not None and syntax & TriggerCreateFeatures.SUPPORTS_ORDER:
                statement.append(self.order, self.order_trigger_name)
            if syntax & TriggerCreateFeatures.SUPPORTS_BODY and self.body is not None:
                statement.append("BEGIN", ListExpression(items=self.body, separator=" "), "END;")
            elif self.procedure is not None:
                statement.append("EXECUTE PROCEDURE", self.procedure)


class DropTriggerQuery(Expression):
    """``DROP TRIGGER [IF EXISTS] name [ON table] [RESTRICT|CASCADE]``.

    The table and the drop behavior each appear only when the dialect's drop
    syntax accepts them, and the behavior only when one was requested.
    """

    name: Any
    table: Optional[Any] = None
    if_exists: bool = False
    behavior: Optional[Any] = None

    def serialize(self, serializer) -> None:
        dialect = serializer.dialect
        syntax = dialect.trigger_syntax.drop
        with serializer.statement(query=True) as statement:
            statement.append("DROP TRIGGER")
            if self.if_exists and dialect.supports_if_exists:
                statement.append("IF EXISTS")
            statement.append(self.name)
            if self.table is not None and syntax & TriggerDropFeatures.SUPPORTS_TABLE_NAME:
                statement.append("ON", self.table)
            if self.behavior is not None and syntax & TriggerDropFeatures.SUPPORTS_CASCADE:
                statement.append(self.behavior)

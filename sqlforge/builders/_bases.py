"""Base type for fluent builders and the mixins they share."""

from __future__ import annotations
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, Field as PydanticField

from ..clauses.cte import CommonTableExpression, CommonTableExpressionGroup
from ..clauses.join import JoinClause, JoinMethod
from ..clauses.order import Direction, OrderByClause
from ..clauses.returning import ReturningClause
from ..clauses.subquery import SubqueryClause
from ..expressions._bases import Expression, is_renderable, to_column, to_columns, to_identifier, to_identifiers
from ..expressions.sequence import GroupExpression

# Django-style lookup -> Expression method for where(**kwargs).
_WHERE_LOOKUP_MAP: dict[str, str] = {
    "exact": "__eq__",
    "ne": "__ne__",
    "lt": "__lt__",
    "lte": "__le__",
    "gt": "__gt__",
    "gte": "__ge__",
    "in": "in_",
    "not_in": "not_in",
    "like": "like",
    "not_like": "not_like",
    "range": "between",
}


def unwrap(value: Any) -> Any:
    """The statement node behind ``value`` if it is a builder, else ``value`` itself."""
    if isinstance(value, QueryBuilder):
        return value.query
    return value


def to_order(order: Any, direction: Any = Direction.ASCENDING) -> OrderByClause:
    """Coerce an ORDER BY term; columns and expressions get ``direction``."""
    if isinstance(order, OrderByClause):
        return order
    return OrderByClause(expression=to_column(order), direction=direction)


def lookups_to_expressions(lookups: Mapping[str, Any]) -> list[Expression]:
    """Turn ``where(name="x", age__gte=18, planet__isnull=True)`` keywords into predicates."""
    result = []
    for key, value in lookups.items():
        parts = key.split("__")
        if len(parts) > 1 and (parts[-1] in _WHERE_LOOKUP_MAP or parts[-1] == "isnull"):
            lookup = parts[-1]
            path = ".".join(parts[:-1])
        else:
            lookup = "exact"
            path = ".".join(parts)
        if not path.strip("."):
            raise ValueError(f"where kwargs key {key!r} must name a column (e.g. name__like or name)")
        column = to_column(path)
        if lookup == "isnull":
            result.append(column.is_null() if value else column.is_not_null())
        elif lookup == "range":
            low, high = value
            result.append(column.between(low, high))
        else:
            result.append(getattr(column, _WHERE_LOOKUP_MAP[lookup])(value))
    return result


class QueryBuilder(BaseModel):
    """Fluent wrapper around one statement node.

    Every setter mutates the wrapped node and returns the builder, so calls
    chain. A builder obtained from a ``Database`` can also run itself.
    """

    model_config = {"arbitrary_types_allowed": True}

    query: Any
    """The statement node being built."""
    database: Optional[Any] = PydanticField(default=None, exclude=True)
    """The ``Database`` this builder runs against, if any."""

    def _require_database(self):
        if self.database is None:
            raise ValueError(f"{type(self).__name__} is not attached to a database")
        return self.database

    def serialize(self, dialect: Any = None) -> tuple[str, list[Any]]:
        """Return ``(sql, binds)`` for the given dialect, or for the attached database's dialect."""
        if dialect is None:
            return self._require_database().serialize(self.query)
        from ..serializer import serialize
        return serialize(dialect, self.query)

    def run(self) -> None:
        """Execute the statement, discarding any rows."""
        self._require_database().run(self.query)

    def all(self, model_type: Optional[type[BaseModel]] = None, prefix: str = "") -> list[Any]:
        """Execute and return every row, decoded into ``model_type`` when given."""
        rows = self._require_database().run(self.query)
        if model_type is None:
            return rows
        from ..rows import decode_row
        return [decode_row(row, model_type, prefix=prefix) for row in rows]

    def first(self, model_type: Optional[type[BaseModel]] = None, prefix: str = "") -> Optional[Any]:
        """Execute and return the first row (or None); statements that accept a LIMIT are limited to one row."""
        if hasattr(self.query, "limit"):
            self.query.limit = 1
        rows = self.all(model_type, prefix=prefix)
        return rows[0] if rows else None


class PredicateMixin:
    """``where`` / ``or_where`` and their grouped forms, combining into the statement's predicate."""

    def _combine(self, predicates: list[Any], conjunction: str, field: str = "predicate"):
        for predicate in predicates:
            current = getattr(self.query, field)
            if current is None:
                combined = predicate
            elif conjunction == "and":
                combined = current & predicate
            else:
                combined = current | predicate
            setattr(self.query, field, combined)
        return self

    def where(self, *predicates: Any, **lookups: Any):
        """AND predicates into the current one.

        Examples:
            where(ColumnExpression.of("id") == 12)
            where(name__like="%a%", age__gte=18)
        """
        return self._combine([*predicates, *lookups_to_expressions(lookups)], "and")

    def or_where(self, *predicates: Any, **lookups: Any):
        """OR predicates into the current one."""
        return self._combine([*predicates, *lookups_to_expressions(lookups)], "or")

    def where_group(self, build: Callable[[PredicateGroup], Any]):
        """AND a parenthesized group built by ``build`` (e.g. ``lambda g: g.where(a).or_where(b)``)."""
        return self._combine_group(build, "and")

    def or_where_group(self, build: Callable[[PredicateGroup], Any]):
        """OR a parenthesized group built by ``build``."""
        return self._combine_group(build, "or")

    def _combine_group(self, build: Callable[[PredicateGroup], Any], conjunction: str, field: str = "predicate"):
        group = PredicateGroup()
        build(group)
        if group.predicate is None:
            return self
        return self._combine([GroupExpression(expression=group.predicate)], conjunction, field)


class PredicateGroup(PredicateMixin):
    """Scratch target collecting the predicates of one parenthesized group."""

    def __init__(self) -> None:
        self.predicate = None

    @property
    def query(self) -> PredicateGroup:
        return self


class HavingMixin:
    """The ``where`` API for the secondary (HAVING) predicate; needs ``PredicateMixin`` alongside."""

    def having(self, *predicates: Any, **lookups: Any):
        return self._combine([*predicates, *lookups_to_expressions(lookups)], "and", "having")

    def or_having(self, *predicates: Any, **lookups: Any):
        return self._combine([*predicates, *lookups_to_expressions(lookups)], "or", "having")

    def having_group(self, build: Callable[[PredicateGroup], Any]):
        return self._combine_group(build, "and", "having")


class ReturningMixin:
    def returning(self, *columns: Any):
        """Ask for ``RETURNING columns``; ignored by dialects without RETURNING."""
        self.query.returning = ReturningClause(columns=to_columns(columns or ("*",)))
        return self


class CommonTableExpressionMixin:
    def _add_table_expression(self, recursive: bool, name: Any, query: Any, columns: tuple) -> Any:
        group = self.query.table_expression_group
        if group is None:
            group = self.query.table_expression_group = CommonTableExpressionGroup()
        group.expressions.append(CommonTableExpression(
            name=to_identifier(name),
            columns=to_identifiers(columns),
            query=unwrap(query),
            recursive=recursive,
        ))
        return self

    def with_(self, name: Any, query: Any, columns: tuple = ()):
        """Add ``name [(columns)] AS (query)`` to the statement's WITH clause."""
        return self._add_table_expression(False, name, query, columns)

    def with_recursive(self, name: Any, query: Any, columns: tuple = ()):
        """Like ``with_``, and turns the clause into ``WITH RECURSIVE``."""
        return self._add_table_expression(True, name, query, columns)


class JoinMixin:
    def join(self, table: Any, on: Any, method: Any = JoinMethod.INNER):
        """Add ``method JOIN table ON on``."""
        if isinstance(table, QueryBuilder):
            table = SubqueryClause(query=table.query)
        elif isinstance(table, str):
            table = to_identifier(table)
        if not is_renderable(on):
            raise TypeError(f"join condition must be an expression, got {type(on).__name__}")
        self.query.joins.append(JoinClause(method=method, table=table, expression=on))
        return self

"""Builder for INSERT statements, including upserts."""

from __future__ import annotations
from typing import Any, Callable, Iterable, Mapping, Optional

from pydantic import BaseModel, Field as PydanticField

from ..clauses.conflict import ColumnAssignment, ConflictAction, ConflictResolutionStrategy
from ..expressions._bases import to_bind, to_identifier, to_identifiers
from ..queries.insert import InsertQuery
from ..rows import encode_model
from ._bases import CommonTableExpressionMixin, PredicateGroup, QueryBuilder, ReturningMixin, unwrap


class InsertBuilder(ReturningMixin, CommonTableExpressionMixin, QueryBuilder):
    """Fluent INSERT.

    Example:
        db.insert("planets").columns("id", "name").values(1, "Earth").values(2, "Mars").run()

    Every row must carry as many values as there are columns; a mismatch
    raises ValueError from the call that introduces it.
    """

    query: InsertQuery

    @classmethod
    def of(cls, table: Any, database: Any = None) -> InsertBuilder:
        return cls(query=InsertQuery(table=to_identifier(table)), database=database)

    def columns(self, *columns: Any) -> InsertBuilder:
        previous = self.query.columns
        self.query.columns = to_identifiers(columns)
        try:
            self.query.check_arity()
        except ValueError:
            self.query.columns = previous
            raise
        return self

    def values(self, *values: Any) -> InsertBuilder:
        """Add one row; non-expression values are bound."""
        return self.rows([values])

    def rows(self, rows: Iterable[Iterable[Any]]) -> InsertBuilder:
        """Add several rows at once."""
        new_rows = [[to_bind(value) for value in row] for row in rows]
        self.query.check_arity(new_rows)
        self.query.values.extend(new_rows)
        return self

    def model(
        self,
        model: BaseModel,
        prefix: str = "",
        key_transform: Optional[Callable[[str], str]] = None,
        omit_none: bool = False,
    ) -> InsertBuilder:
        """Add one row from a pydantic model; its fields become the columns if none were set."""
        return self.models([model], prefix=prefix, key_transform=key_transform, omit_none=omit_none)

    def models(
        self,
        models: Iterable[BaseModel],
        prefix: str = "",
        key_transform: Optional[Callable[[str], str]] = None,
        omit_none: bool = False,
    ) -> InsertBuilder:
        """Add one row per model.

        Every model must encode to the same column names, in the same order,
        as the columns already set (or, if none were, as the first model).
        Nothing is added when any model disagrees.
        """
        expected = [getattr(column, "string", column) for column in self.query.columns]
        rows = []
        for model in models:
            pairs = encode_model(model, prefix=prefix, key_transform=key_transform, omit_none=omit_none)
            names = [column for column, _ in pairs]
            if not expected:
                expected = names
            elif names != expected:
                raise ValueError(f"{type(model).__name__} encodes columns {names}, expected {expected}")
            rows.append([value for _, value in pairs])
        if rows and not self.query.columns:
            self.columns(*expected)
        return self.rows(rows)

    def select(self, query: Any) -> InsertBuilder:
        """Insert the rows produced by a SELECT instead of literal values."""
        self.query.value_query = unwrap(query)
        return self

    def ignoring_conflicts(self, *targets: Any) -> InsertBuilder:
        """Skip rows that conflict on ``targets`` (any unique key when empty)."""
        self.query.conflict_strategy = ConflictResolutionStrategy(
            targets=to_identifiers(targets), action=ConflictAction.no_action()
        )
        return self

    def on_conflict(
        self,
        *targets: Any,
        set: Optional[Mapping[str, Any]] = None,  # pylint: disable=redefined-builtin
        set_excluded: Iterable[Any] = (),
        where: Optional[Callable[[PredicateGroup], Any]] = None,
    ) -> InsertBuilder:
        """Update the conflicting row instead of failing.

        ``set`` assigns explicit values; ``set_excluded`` copies the values the
        insert tried to write. Without either, conflicts are ignored.
        """
        assignments = [ColumnAssignment.of(column, value) for column, value in (set or {}).items()]
        assignments += [ColumnAssignment.excluded(column) for column in set_excluded]
        if not assignments:
            return self.ignoring_conflicts(*targets)
        predicate = None
        if where is not None:
            group = PredicateGroup()
            where(group)
            predicate = group.predicate
        self.query.conflict_strategy = ConflictResolutionStrategy(
            targets=to_identifiers(targets), action=ConflictAction.update(assignments, predicate)
        )
        return self

"""INSERT statement, with optional upsert behavior."""

from __future__ import annotations
from typing import Any, Optional

from pydantic import Field as PydanticField, model_validator

from ..expressions._bases import Expression
from ..expressions.sequence import GroupExpression, ListExpression


class InsertQuery(Expression):
    """``INSERT INTO table (columns) VALUES (...), (...)`` or ``INSERT INTO table (columns) SELECT ...``.

    Without explicit columns, the width of the first row decides how many
    values every row must carry. Mismatched rows are rejected when the query
    is built, not when it renders.
    """

    table: Any
    columns: list[Any] = PydanticField(default_factory=list)
    values: list[list[Any]] = PydanticField(default_factory=list)
    value_query: Optional[Any] = None
    """A SELECT providing the rows, used when ``values`` is empty."""
    conflict_strategy: Optional[Any] = None
    returning: Optional[Any] = None
    table_expression_group: Optional[Any] = None

    @model_validator(mode="after")
    def _validate_rows(self) -> InsertQuery:
        self.check_arity()
        return self

    def check_arity(self, rows: Optional[list[list[Any]]] = None) -> None:
        """Raise ValueError unless every row (``rows``, or the stored ones) matches the expected width."""
        rows = self.values if rows is None else rows
        if self.columns:
            expected = len(self.columns)
        elif self.values:
            expected = len(self.values[0])
        elif rows:
            expected = len(rows[0])
        else:
            return
        for index, row in enumerate(rows):
            if len(row) != expected:
                raise ValueError(f"Row {index} has {len(row)} values, expected {expected}")

    def serialize(self, serializer) -> None:
        with serializer.statement(query=True) as statement:
            statement.append(self.table_expression_group)
            statement.append("INSERT")
            if self.conflict_strategy is not None:
                statement.append(self.conflict_strategy.query_modifier(serializer.dialect))
            statement.append("INTO", self.table)
            if self.columns:
                statement.append(GroupExpression(expression=ListExpression(items=self.columns)))
            if self.values:
                rows = [GroupExpression(expression=ListExpression(items=row)) for row in self.values]
                statement.append("VALUES", ListExpression(items=rows))
            elif self.value_query is not None:
                statement.append(self.value_query)
            statement.append(self.conflict_strategy)
            statement.append(self.returning)

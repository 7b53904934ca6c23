"""Builder for UPDATE statements."""

from __future__ import annotations
from typing import Any, Callable, Optional

from pydantic import BaseModel

from ..clauses.conflict import ColumnAssignment
from ..expressions._bases import to_identifier
from ..queries.update import UpdateQuery
from ..rows import encode_model
from ._bases import CommonTableExpressionMixin, PredicateMixin, QueryBuilder, ReturningMixin


class UpdateBuilder(PredicateMixin, ReturningMixin, CommonTableExpressionMixin, QueryBuilder):
    """Fluent UPDATE.

    Example:
        db.update("planets").set("name", "Earth").where(id=1).run()
    """

    query: UpdateQuery

    @classmethod
    def of(cls, table: Any, database: Any = None) -> UpdateBuilder:
        return cls(query=UpdateQuery(table=to_identifier(table)), database=database)

    def set(self, column: Any, value: Any) -> UpdateBuilder:
        self.query.values.append(ColumnAssignment.of(column, value))
        return self

    def set_values(self, **values: Any) -> UpdateBuilder:
        for column, value in values.items():
            self.set(column, value)
        return self

    def model(
        self,
        model: BaseModel,
        prefix: str = "",
        key_transform: Optional[Callable[[str], str]] = None,
        omit_none: bool = False,
    ) -> UpdateBuilder:
        """Assign every field of a pydantic model."""
        for column, value in encode_model(model, prefix=prefix, key_transform=key_transform, omit_none=omit_none):
            self.set(column, value)
        return self

"""Builder for DELETE statements."""

from __future__ import annotations
from typing import Any

from ..expressions._bases import to_identifier
from ..queries.delete import DeleteQuery
from ._bases import CommonTableExpressionMixin, PredicateMixin, QueryBuilder, ReturningMixin


class DeleteBuilder(PredicateMixin, ReturningMixin, CommonTableExpressionMixin, QueryBuilder):
    """Fluent DELETE: ``db.delete("planets").where(name="Pluto").run()``."""

    query: DeleteQuery

    @classmethod
    def of(cls, table: Any, database: Any = None) -> DeleteBuilder:
        return cls(query=DeleteQuery(table=to_identifier(table)), database=database)

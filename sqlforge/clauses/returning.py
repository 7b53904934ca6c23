"""RETURNING clause."""

from typing import Any

from pydantic import Field as PydanticField

from ..expressions._bases import Expression
from ..expressions.sequence import ListExpression


class ReturningClause(Expression):
    """``RETURNING columns``; omitted where the dialect has no RETURNING or no columns were asked for."""

    columns: list[Any] = PydanticField(default_factory=list)

    def serialize(self, serializer) -> None:
        if not serializer.dialect.supports_returning:
            serializer.logger.debug("%s does not support RETURNING; clause omitted.", serializer.dialect.name)
            return
        if not self.columns:
            return
        with serializer.statement() as statement:
            statement.append("RETURNING", ListExpression(items=self.columns))

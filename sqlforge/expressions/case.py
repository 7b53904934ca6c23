"""CASE expression."""

from __future__ import annotations
from typing import Any, Optional

from pydantic import Field as PydanticField

from ._bases import Expression, to_bind


class CaseExpression(Expression):
    """``CASE [operand] WHEN condition THEN result ... [ELSE alternative] END``."""

    operand: Optional[Any] = None
    cases: list[tuple[Any, Any]] = PydanticField(default_factory=list)
    alternative: Optional[Any] = None

    def when(self, condition: Any, result: Any) -> CaseExpression:
        """Add a branch; non-expression values are bound."""
        self.cases.append((to_bind(condition), to_bind(result)))
        return self

    def else_(self, alternative: Any) -> CaseExpression:
        self.alternative = to_bind(alternative)
        return self

    def serialize(self, serializer) -> None:
        serializer.write("CASE")
        if self.operand is not None:
            serializer.write(" ")
            self.operand.serialize(serializer)
        for condition, result in self.cases:
            serializer.write(" WHEN ")
            condition.serialize(serializer)
            serializer.write(" THEN ")
            result.serialize(serializer)
        if self.alternative is not None:
            serializer.write(" ELSE ")
            self.alternative.serialize(serializer)
        serializer.write(" END")

"""Access to a value nested inside a structured (JSON) column."""

from typing import Any

from pydantic import Field as PydanticField, field_validator

from ._bases import Expression


class NestedSubpathExpression(Expression):
    """``column`` descended along ``path``, spelled by the dialect.

    Renders nothing when the dialect has no nested-path syntax.
    """

    column: Any
    path: list[str] = PydanticField(default_factory=list)

    @field_validator("path")
    @classmethod
    def _check_path(cls, path: list[str]) -> list[str]:
        if not path:
            raise ValueError("A nested subpath needs at least one path component")
        return path

    def serialize(self, serializer) -> None:
        expression = serializer.dialect.nested_subpath_expression(self.column, self.path)
        if expression is not None:
            expression.serialize(serializer)

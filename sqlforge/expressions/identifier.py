"""Quoted identifier expression."""

from ._bases import Expression


class IdentifierExpression(Expression):
    """A table, column, index or other object name, quoted for the active dialect."""

    string: str

    def serialize(self, serializer) -> None:
        serializer.write(serializer.dialect.quote_identifier(self.string))

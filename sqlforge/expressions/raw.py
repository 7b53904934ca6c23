"""Raw SQL fragments, written verbatim."""

from ._bases import Expression


class RawExpression(Expression):
    """Literal SQL text with no quoting and no binds.

    This is the escape hatch for syntax the expression tree does not model;
    the text is not checked in any way.
    """

    sql: str

    def __init__(self, sql: str = "", **data) -> None:
        super().__init__(sql=sql, **data)

    def serialize(self, serializer) -> None:
        serializer.write(self.sql)


class UnsafeRawExpression(RawExpression):
    """Same as ``RawExpression``; the name flags text built from untrusted input at call sites."""

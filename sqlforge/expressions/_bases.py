"""Base expression type for SQL expression trees."""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

from pydantic import BaseModel

if TYPE_CHECKING:
    from ..serializer import Serializer


class Expression(BaseModel):
    """Base type for all SQL expression nodes.

    Subclasses implement ``serialize``, writing their text (and binding their
    values) through the given serializer. The active dialect is reached through
    ``serializer.dialect``; a node never returns text itself.

    Comparison and arithmetic operators build ``BinaryExpression`` nodes, the
    way ``User.name == "John"`` would read in a query. Non-expression operands
    become bound values.
    """

    model_config = {"arbitrary_types_allowed": True}

    def serialize(self, serializer: Serializer) -> None:
        """Write this expression into ``serializer``."""
        raise NotImplementedError("Subclasses must implement `serialize`")

    def _binary(self, operator: Any, other: Any):
        from .binary import BinaryExpression
        return BinaryExpression(left=self, operator=operator, right=to_bind(other))

    def in_(self, other: Any):
        """Build an IN expression (e.g. ``column.in_([1, 2, 3])``); a plain iterable becomes a group of binds."""
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.IN, to_bind_group(other))

    def not_in(self, other: Any):
        """Build a NOT IN expression."""
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.NOT_IN, to_bind_group(other))

    def is_(self, other: Any):
        """Build an IS expression (``None`` renders as ``NULL``)."""
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.IS, to_value(other))

    def is_not(self, other: Any):
        """Build an IS NOT expression (``None`` renders as ``NULL``)."""
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.IS_NOT, to_value(other))

    def is_null(self):
        return self.is_(None)

    def is_not_null(self):
        return self.is_not(None)

    def like(self, pattern: Any):
        """Build a LIKE expression; the pattern is bound as-is."""
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.LIKE, pattern)

    def not_like(self, pattern: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.NOT_LIKE, pattern)

    def between(self, low: Any, high: Any):
        """Inclusive range: ``expr BETWEEN low AND high``."""
        from .binary import BetweenExpression
        return BetweenExpression(operand=self, lower=to_bind(low), upper=to_bind(high))

    def alias(self, name: str | Expression):
        """Build ``expr AS name``."""
        from .alias import AliasExpression
        return AliasExpression(expression=self, name=to_identifier(name))

    @property
    def asc(self):
        """``expr ASC`` for ORDER BY."""
        from ..clauses.order import Direction, OrderByClause
        return OrderByClause(expression=self, direction=Direction.ASCENDING)

    @property
    def desc(self):
        """``expr DESC`` for ORDER BY."""
        from ..clauses.order import Direction, OrderByClause
        return OrderByClause(expression=self, direction=Direction.DESCENDING)

    def __and__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.AND, other)

    def __or__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.OR, other)

    def __add__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.ADD, other)

    def __sub__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.SUBTRACT, other)

    def __mul__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.MULTIPLY, other)

    def __truediv__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.DIVIDE, other)

    def __mod__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.MODULO, other)

    def __eq__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.EQUAL, other)

    def __ne__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.NOT_EQUAL, other)

    def __lt__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.LESS_THAN, other)

    def __le__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.LESS_THAN_OR_EQUAL, other)

    def __gt__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.GREATER_THAN, other)

    def __ge__(self, other: Any):
        from .binary import BinaryOperator
        return self._binary(BinaryOperator.GREATER_THAN_OR_EQUAL, other)


class KeywordEnum(str, Enum):
    """Base for enumerations that render as a fixed SQL keyword.

    Members can be placed anywhere an expression is expected.
    """

    def serialize(self, serializer: Serializer) -> None:
        serializer.write(self.value)


def is_renderable(value: Any) -> bool:
    """True for values that can be written into a serializer directly."""
    return isinstance(value, (Expression, KeywordEnum))


def to_identifier(value: Any) -> Expression:
    """Coerce a name into an expression: strings become quoted identifiers."""
    if is_renderable(value):
        return value
    if isinstance(value, str):
        from .identifier import IdentifierExpression
        return IdentifierExpression(string=value)
    raise TypeError(f"Expected a name or an expression, got {type(value).__name__}")


def to_identifiers(values: Iterable[Any]) -> list[Expression]:
    return [to_identifier(value) for value in values]


def to_column(value: Any) -> Expression:
    """Coerce a column reference: ``"*"`` selects everything, ``"table.column"`` is qualified."""
    if is_renderable(value):
        return value
    if isinstance(value, str):
        from .column import ColumnExpression
        from .literal import LiteralExpression
        if value == "*":
            return LiteralExpression.all()
        table, separator, name = value.rpartition(".")
        if separator and table:
            return ColumnExpression.of(name, table=table)
        return ColumnExpression.of(value)
    raise TypeError(f"Expected a column name or an expression, got {type(value).__name__}")


def to_columns(values: Iterable[Any]) -> list[Expression]:
    return [to_column(value) for value in values]


def to_bind(value: Any) -> Expression:
    """Coerce a value: expressions pass through, anything else becomes a bound parameter."""
    if is_renderable(value):
        return value
    from .bind import BindExpression
    return BindExpression(value=value)


def to_value(value: Any) -> Expression:
    """Like ``to_bind``, except ``None`` renders as the ``NULL`` literal."""
    if value is None:
        from .literal import LiteralExpression
        return LiteralExpression.null()
    return to_bind(value)


def to_bind_group(value: Any) -> Expression:
    """Coerce the right-hand side of IN: a plain iterable becomes ``(?, ?, ...)``."""
    if is_renderable(value):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        from .sequence import GroupExpression
        return GroupExpression.of(*[to_bind(item) for item in value])
    return to_bind(value)

"""SQL expression types.

Every node is a pydantic model with a ``serialize(serializer)`` method that
writes its SQL (and binds its values) through a ``Serializer``. Leaf nodes
(identifiers, literals, raw text, binds) and composite nodes (lists, groups,
function calls, binary expressions...) nest freely into trees. Combine them with
operators (``==``, ``<``, ``.in_(...)``) and logic (``&``, ``|``).
"""

from ._bases import (
    Expression,
    KeywordEnum,
    is_renderable,
    to_bind,
    to_bind_group,
    to_column,
    to_columns,
    to_identifier,
    to_identifiers,
    to_value,
)
from .alias import AliasExpression
from .binary import BetweenExpression, BinaryExpression, BinaryOperator
from .bind import BindExpression
from .case import CaseExpression
from .column import ColumnExpression, QualifiedTableExpression
from .data_type import DataType, DataTypeKind, EnumDataType
from .distinct import DistinctExpression
from .function import FunctionExpression
from .identifier import IdentifierExpression
from .literal import LiteralExpression, LiteralKind
from .nested_subpath import NestedSubpathExpression
from .query_string import QueryStringExpression
from .raw import RawExpression, UnsafeRawExpression
from .sequence import GroupExpression, ListExpression

__all__ = [
    "AliasExpression",
    "BetweenExpression",
    "BinaryExpression",
    "BinaryOperator",
    "BindExpression",
    "CaseExpression",
    "ColumnExpression",
    "DataType",
    "DataTypeKind",
    "DistinctExpression",
    "EnumDataType",
    "Expression",
    "FunctionExpression",
    "GroupExpression",
    "IdentifierExpression",
    "KeywordEnum",
    "ListExpression",
    "LiteralExpression",
    "LiteralKind",
    "NestedSubpathExpression",
    "QualifiedTableExpression",
    "QueryStringExpression",
    "RawExpression",
    "UnsafeRawExpression",
    "is_renderable",
    "to_bind",
    "to_bind_group",
    "to_column",
    "to_columns",
    "to_identifier",
    "to_identifiers",
    "to_value",
]

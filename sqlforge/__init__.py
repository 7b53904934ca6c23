"""sqlforge: dialect-aware SQL statements built from pydantic expression trees."""

from .database import Database
from .dialects import Dialect, MysqlDialect, PostgresDialect, SqliteDialect, get_dialect_for_scheme
from .expressions import (
    ColumnExpression,
    Expression,
    FunctionExpression,
    IdentifierExpression,
    LiteralExpression,
    QueryStringExpression,
    RawExpression,
)
from .rows import RowDecodingError, decode_row, encode_model
from .serializer import Serializer, serialize

"""Rendering of expression trees into SQL text plus ordered bind values."""

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator, Optional

from .expressions.raw import RawExpression

if TYPE_CHECKING:
    from .dialects.base import Dialect


class Serializer:
    """Accumulates SQL text and bound values while an expression tree renders.

    One serializer serves one render: the bind list only ever grows, so every
    placeholder, however deeply nested its statement, is numbered against the
    same running count.
    """

    def __init__(self, dialect: Dialect, logger: Optional[logging.Logger] = None) -> None:
        self.dialect = dialect
        self.logger = logger or logging.getLogger("sqlforge")
        self.sql = ""
        self.binds: list[Any] = []
        self._query_depth = 0

    def write(self, text: str) -> None:
        """Append literal text."""
        self.sql += text

    def write_bind(self, value: Any) -> None:
        """Record ``value`` and write the dialect's placeholder for its (1-based) position."""
        self.binds.append(value)
        self.dialect.bind_placeholder(len(self.binds)).serialize(self)

    def truncate(self, length: int) -> None:
        """Drop text written after ``length``; used to retract separators before empty parts."""
        self.sql = self.sql[:length]

    @property
    def is_top_level(self) -> bool:
        """True unless a query is being rendered inside another query (subquery, CTE body, union branch)."""
        return self._query_depth <= 1

    @contextmanager
    def top_level(self) -> Iterator[Serializer]:
        """Render the enclosed statement as a fresh outermost statement.

        Only the nesting depth is reset; text and binds keep accumulating.
        """
        depth, self._query_depth = self._query_depth, 0
        try:
            yield self
        finally:
            self._query_depth = depth

    @contextmanager
    def statement(self, query: bool = False) -> Iterator[Statement]:
        """Collect parts inside the block, then write them separated by single spaces.

        ::

            with serializer.statement() as statement:
                statement.append("DROP TABLE", self.table)

        Pass ``query=True`` when the parts form a whole query; this scopes
        ``is_top_level`` for everything rendered inside it.
        """
        statement = Statement(self.dialect, self.logger)
        yield statement
        if not query:
            statement.serialize(self)
            return
        self._query_depth += 1
        try:
            statement.serialize(self)
        finally:
            self._query_depth -= 1


class Statement:
    """Ordered parts of one statement or clause, joined by single spaces.

    ``None`` parts are ignored and strings are raw text. A part that renders
    no text leaves no separator behind.
    """

    def __init__(self, dialect: Dialect, logger: logging.Logger) -> None:
        self.dialect = dialect
        self.logger = logger
        self.parts: list[Any] = []

    def append(self, *parts: Any) -> Statement:
        for part in parts:
            if part is None:
                continue
            if isinstance(part, str) and not hasattr(part, "serialize"):
                part = RawExpression(part)
            self.parts.append(part)
        return self

    def serialize(self, serializer: Serializer) -> None:
        wrote_any = False
        for part in self.parts:
            mark = len(serializer.sql)
            if wrote_any:
                serializer.write(" ")
            start = len(serializer.sql)
            part.serialize(serializer)
            if len(serializer.sql) == start:
                serializer.truncate(mark)
            else:
                wrote_any = True


def serialize(dialect: Dialect, expression: Any, logger: Optional[logging.Logger] = None) -> tuple[str, list[Any]]:
    """Render ``expression`` for ``dialect``; returns the SQL text and its bound values in order."""
    serializer = Serializer(dialect, logger=logger)
    with serializer.top_level():
        expression.serialize(serializer)
    serializer.logger.debug("Rendered %s with %d bind(s)", serializer.sql, len(serializer.binds))
    return serializer.sql, serializer.binds

"""Tests for sqlforge.serializer: text accumulation, bind numbering, statement scoping and logging."""

import logging
from typing import Any

from pydantic import Field as PydanticField

from sqlforge.clauses import SubqueryClause
from sqlforge.expressions import ColumnExpression, Expression, IdentifierExpression, RawExpression
from sqlforge.queries import SelectQuery
from sqlforge.serializer import Serializer, serialize


class TopLevelMarker(Expression):
    """Records what ``is_top_level`` says each time it renders."""

    seen: list[Any] = PydanticField(default_factory=list)

    def serialize(self, serializer) -> None:
        self.seen.append(serializer.is_top_level)
        serializer.write("marker")


def test_write_appends_text(dialect):
    serializer = Serializer(dialect)
    serializer.write("SELECT")
    serializer.write(" 1")
    assert serializer.sql == "SELECT 1"
    assert serializer.binds == []


def test_write_bind_records_value_and_placeholder_together(dialect):
    serializer = Serializer(dialect)
    serializer.write_bind("Earth")
    serializer.write(", ")
    serializer.write_bind(42)
    assert serializer.sql == "&1, &2"
    assert serializer.binds == ["Earth", 42]


def test_serialize_returns_text_and_binds(dialect):
    query = SelectQuery(
        columns=[RawExpression("*")],
        tables=[IdentifierExpression(string="planets")],
        predicate=ColumnExpression.of("name") == "Earth",
    )
    assert serialize(dialect, query) == ('SELECT * FROM "planets" WHERE "name" = &1', ["Earth"])


def test_bind_numbering_continues_into_subqueries(dialect):
    inner = SelectQuery(
        columns=[ColumnExpression.of("planet_id")],
        tables=[IdentifierExpression(string="moons")],
        predicate=ColumnExpression.of("radius") > 100,
    )
    outer = SelectQuery(
        columns=[RawExpression("*")],
        tables=[IdentifierExpression(string="planets")],
        predicate=(ColumnExpression.of("name") == "Earth")
        & ColumnExpression.of("id").in_(SubqueryClause(query=inner))
        & (ColumnExpression.of("mass") < 5),
    )
    sql, binds = serialize(dialect, outer)
    assert sql == (
        'SELECT * FROM "planets" WHERE "name" = &1 AND "id" IN '
        '(SELECT "planet_id" FROM "moons" WHERE "radius" > &2) AND "mass" < &3'
    )
    assert binds == ["Earth", 100, 5]


def test_placeholder_count_matches_binds_with_repeated_token(sqlite_dialect):
    query = SelectQuery(
        columns=[RawExpression("*")],
        tables=[IdentifierExpression(string="planets")],
        predicate=ColumnExpression.of("id").in_([1, 2, 3]),
    )
    sql, binds = serialize(sqlite_dialect, query)
    assert sql == 'SELECT * FROM "planets" WHERE "id" IN (?, ?, ?)'
    assert sql.count("?") == len(binds) == 3


def test_rendering_is_deterministic(dialect):
    query = SelectQuery(
        columns=[RawExpression("*")],
        tables=[IdentifierExpression(string="planets")],
        predicate=ColumnExpression.of("name") == "Earth",
    )
    assert serialize(dialect, query) == serialize(dialect, query)


def test_is_top_level_is_false_inside_nested_queries(dialect):
    outer_marker = TopLevelMarker()
    inner_marker = TopLevelMarker()
    inner = SelectQuery(columns=[inner_marker])
    outer = SelectQuery(columns=[outer_marker, SubqueryClause(query=inner)])
    sql, _ = serialize(dialect, outer)
    assert sql == "SELECT marker, (SELECT marker)"
    assert outer_marker.seen == [True]
    assert inner_marker.seen == [False]


class FreshStatement(Expression):
    """Renders ``inner`` as a new outermost statement."""

    inner: Any

    def serialize(self, serializer) -> None:
        with serializer.top_level():
            self.inner.serialize(serializer)


def test_top_level_resets_nesting_but_keeps_numbering(dialect):
    fresh_marker = TopLevelMarker()
    after_marker = TopLevelMarker()
    inner = SelectQuery(columns=[FreshStatement(inner=fresh_marker), after_marker], predicate=ColumnExpression.of("b") == 2)
    outer = SelectQuery(columns=[SubqueryClause(query=inner)], predicate=ColumnExpression.of("a") == 1)
    sql, binds = serialize(dialect, outer)
    assert sql == 'SELECT (SELECT marker, marker WHERE "b" = &1) WHERE "a" = &2'
    assert binds == [2, 1]
    assert fresh_marker.seen == [True]
    assert after_marker.seen == [False]


def test_statement_joins_parts_with_single_spaces(dialect):
    serializer = Serializer(dialect)
    with serializer.statement() as statement:
        statement.append("DROP TABLE", IdentifierExpression(string="planets"))
    assert serializer.sql == 'DROP TABLE "planets"'


def test_statement_skips_none_and_empty_parts(dialect):
    serializer = Serializer(dialect)
    with serializer.statement() as statement:
        statement.append("A", None, RawExpression(""), "B", RawExpression(""))
    assert serializer.sql == "A B"


def test_statement_with_only_empty_parts_writes_nothing(dialect):
    serializer = Serializer(dialect)
    serializer.write("x")
    with serializer.statement() as statement:
        statement.append(RawExpression(""), RawExpression(""))
    assert serializer.sql == "x"


def test_finished_statement_is_logged_once_at_debug(dialect, caplog):
    caplog.set_level(logging.DEBUG, logger="sqlforge")
    inner = SelectQuery(columns=[RawExpression("1")])
    outer = SelectQuery(columns=[SubqueryClause(query=inner)], predicate=ColumnExpression.of("a") == 1)
    serialize(dialect, outer)
    rendered = [record for record in caplog.records if record.getMessage().startswith("Rendered")]
    assert len(rendered) == 1
    assert rendered[0].levelno == logging.DEBUG
    assert rendered[0].getMessage() == 'Rendered SELECT (SELECT 1) WHERE "a" = &1 with 1 bind(s)'


def test_fresh_statement_inside_a_query_is_not_logged_as_finished(dialect, caplog):
    caplog.set_level(logging.DEBUG, logger="sqlforge")
    nested = FreshStatement(inner=SelectQuery(columns=[RawExpression("1")]))
    outer = SelectQuery(columns=[SubqueryClause(query=SelectQuery(columns=[nested]))])
    assert serialize(dialect, outer)[0] == "SELECT (SELECT SELECT 1)"
    rendered = [record.getMessage() for record in caplog.records if record.getMessage().startswith("Rendered")]
    assert rendered == ["Rendered SELECT (SELECT SELECT 1) with 0 bind(s)"]


def test_custom_logger_receives_records(dialect, caplog):
    logger = logging.getLogger("sqlforge.custom")
    caplog.set_level(logging.DEBUG, logger="sqlforge.custom")
    serialize(dialect, SelectQuery(columns=[RawExpression("1")]), logger=logger)
    assert [record.name for record in caplog.records] == ["sqlforge.custom"]

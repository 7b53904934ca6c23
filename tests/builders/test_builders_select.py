"""Tests for sqlforge.builders: SelectBuilder and the predicate/join/order mixins."""

import pytest

from sqlforge.builders import SelectBuilder
from sqlforge.builders._bases import lookups_to_expressions
from sqlforge.clauses import JoinMethod
from sqlforge.expressions import ColumnExpression


class TestWhereLookups:
    """Django-style ``where(field__lookup=value)`` keywords."""

    @pytest.mark.parametrize(
        "lookups, sql, binds",
        [
            ({"name": "Earth"}, '"name" = &1', ["Earth"]),
            ({"name__exact": "Earth"}, '"name" = &1', ["Earth"]),
            ({"name__ne": "Earth"}, '"name" <> &1', ["Earth"]),
            ({"mass__lt": 1}, '"mass" < &1', [1]),
            ({"mass__lte": 1}, '"mass" <= &1', [1]),
            ({"mass__gt": 1}, '"mass" > &1', [1]),
            ({"mass__gte": 1}, '"mass" >= &1', [1]),
            ({"id__in": [1, 2]}, '"id" IN (&1, &2)', [1, 2]),
            ({"id__not_in": [3]}, '"id" NOT IN (&1)', [3]),
            ({"name__like": "E%"}, '"name" LIKE &1', ["E%"]),
            ({"name__not_like": "E%"}, '"name" NOT LIKE &1', ["E%"]),
            ({"mass__range": (1, 5)}, '"mass" BETWEEN &1 AND &2', [1, 5]),
            ({"moon__isnull": True}, '"moon" IS NULL', []),
            ({"moon__isnull": False}, '"moon" IS NOT NULL', []),
        ],
    )
    def test_lookup(self, dialect, lookups, sql, binds):
        query = SelectBuilder().columns("*").from_("planets").where(**lookups)
        assert query.serialize(dialect) == (f'SELECT * FROM "planets" WHERE {sql}', binds)

    def test_qualified_lookup(self, dialect):
        query = SelectBuilder().columns("*").from_("planets").where(planets__name="Earth")
        assert query.serialize(dialect)[0] == 'SELECT * FROM "planets" WHERE "planets"."name" = &1'

    def test_unknown_suffix_is_part_of_the_column(self, dialect):
        (predicate,) = lookups_to_expressions({"planets__size": 3})
        assert SelectBuilder().columns("*").where(predicate).serialize(dialect)[0] == 'SELECT * WHERE "planets"."size" = &1'

    def test_lookup_without_column_is_rejected(self):
        with pytest.raises(ValueError, match="must name a column"):
            lookups_to_expressions({"__gt": 1})


class TestPredicates:
    def test_where_calls_are_anded(self, dialect):
        query = SelectBuilder().columns("*").from_("p").where(a=1).where(ColumnExpression.of("b") > 2)
        assert query.serialize(dialect) == ('SELECT * FROM "p" WHERE "a" = &1 AND "b" > &2', [1, 2])

    def test_or_where(self, dialect):
        query = SelectBuilder().columns("*").from_("p").where(a=1).or_where(b=2)
        assert query.serialize(dialect)[0] == 'SELECT * FROM "p" WHERE "a" = &1 OR "b" = &2'

    def test_where_group(self, dialect):
        query = (
            SelectBuilder().columns("*").from_("p")
            .where(a=1)
            .where_group(lambda group: group.where(b=2).or_where(c=3))
        )
        assert query.serialize(dialect) == (
            'SELECT * FROM "p" WHERE "a" = &1 AND ("b" = &2 OR "c" = &3)',
            [1, 2, 3],
        )

    def test_having(self, dialect):
        query = (
            SelectBuilder().columns("galaxy_id").from_("p").group_by("galaxy_id")
            .having(galaxy_id__gt=1).or_having(galaxy_id=0)
        )
        assert query.serialize(dialect)[0] == (
            'SELECT "galaxy_id" FROM "p" GROUP BY "galaxy_id" HAVING "galaxy_id" > &1 OR "galaxy_id" = &2'
        )

    def test_having_group(self, dialect):
        query = SelectBuilder().columns("x").from_("p").group_by("x").having(x=1).having_group(
            lambda group: group.where(x=2).or_where(x=3)
        )
        assert query.serialize(dialect)[0] == (
            'SELECT "x" FROM "p" GROUP BY "x" HAVING "x" = &1 AND ("x" = &2 OR "x" = &3)'
        )


class TestJoins:
    def test_join_methods(self, dialect):
        on = ColumnExpression.of("galaxy_id", table="planets") == ColumnExpression.of("id", table="galaxies")
        query = SelectBuilder().columns("*").from_("planets").join("galaxies", on, method=JoinMethod.LEFT)
        assert query.serialize(dialect)[0] == (
            'SELECT * FROM "planets" LEFT JOIN "galaxies" ON "planets"."galaxy_id" = "galaxies"."id"'
        )

    def test_join_subquery(self, dialect):
        moons = SelectBuilder().columns("planet_id").from_("moons").where(size__gt=1)
        on = ColumnExpression.of("id") == ColumnExpression.of("planet_id")
        query = SelectBuilder().columns("*").from_("planets").join(moons, on).where(name="Earth")
        assert query.serialize(dialect) == (
            'SELECT * FROM "planets" INNER JOIN (SELECT "planet_id" FROM "moons" WHERE "size" > &1) '
            'ON "id" = "planet_id" WHERE "name" = &2',
            [1, "Earth"],
        )

    def test_join_condition_must_be_an_expression(self):
        with pytest.raises(TypeError, match="join condition must be an expression"):
            SelectBuilder().join("galaxies", "planets.galaxy_id = galaxies.id")


class TestOrdering:
    def test_order_by_defaults_to_ascending(self, dialect):
        query = SelectBuilder().columns("*").from_("p").order_by("name", "mass")
        assert query.serialize(dialect)[0] == 'SELECT * FROM "p" ORDER BY "name" ASC, "mass" ASC'

    def test_order_by_explicit_directions(self, dialect):
        query = SelectBuilder().columns("*").from_("p").order_by(ColumnExpression.of("mass").desc).order_by("name")
        assert query.serialize(dialect)[0] == 'SELECT * FROM "p" ORDER BY "mass" DESC, "name" ASC'

    def test_limit_offset(self, dialect):
        assert SelectBuilder().columns("*").from_("p").limit(5).offset(10).serialize(dialect)[0] == (
            'SELECT * FROM "p" LIMIT 5 OFFSET 10'
        )


def test_builder_setters_mutate_and_return_the_builder():
    builder = SelectBuilder()
    assert builder.columns("a") is builder
    assert builder.where(a=1) is builder
    assert builder.query.predicate is not None

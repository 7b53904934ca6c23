"""Tests for sqlforge.dialects.postgres: PostgresDialect spelling and capabilities."""

import hashlib
import logging

from sqlforge.builders import (
    AlterTableBuilder,
    CreateEnumBuilder,
    CreateTableBuilder,
    CreateTriggerBuilder,
    DropTriggerBuilder,
    InsertBuilder,
    SelectBuilder,
)
from sqlforge.capabilities import EnumSyntax, TriggerCreateFeatures, TriggerDropFeatures
from sqlforge.clauses import ColumnConstraintAlgorithm
from sqlforge.expressions import ColumnExpression, DataType
from sqlforge.queries import TriggerEach, TriggerEvent, TriggerTiming, TriggerWhen
from sqlforge.serializer import serialize


def test_postgres_capabilities(postgres_dialect):
    assert postgres_dialect.SUPPORTED_SCHEMA == ("postgres", "postgresql")
    assert postgres_dialect.enum_syntax is EnumSyntax.TYPE_NAME
    assert postgres_dialect.trigger_syntax.create & TriggerCreateFeatures.SUPPORTS_CONSTRAINTS
    assert postgres_dialect.trigger_syntax.drop == TriggerDropFeatures.SUPPORTS_TABLE_NAME | TriggerDropFeatures.SUPPORTS_CASCADE


def test_postgres_numbers_placeholders(postgres_dialect):
    query = SelectBuilder().columns("*").from_("planets").where(name="Earth").or_where(id__in=[1, 2])
    assert query.serialize(postgres_dialect) == (
        'SELECT * FROM "planets" WHERE "name" = $1 OR "id" IN ($2, $3)',
        ["Earth", 1, 2],
    )


def test_postgres_concat(postgres_dialect):
    expression = postgres_dialect.f.concat(ColumnExpression.of("a"), "b")
    assert serialize(postgres_dialect, expression) == ('("a" || $1)', ["b"])


def test_postgres_identity_columns(postgres_dialect):
    query = CreateTableBuilder.of("planets").column("id", DataType.bigint(), ColumnConstraintAlgorithm.primary_key())
    assert query.serialize(postgres_dialect)[0] == (
        'CREATE TABLE "planets" ("id" BIGINT PRIMARY KEY GENERATED BY DEFAULT AS IDENTITY)'
    )


def test_postgres_long_constraint_names_are_hashed(postgres_dialect):
    name = "fk_" + "é" * 31
    digest = hashlib.sha1(name.encode("utf-8")).hexdigest()
    query = CreateTableBuilder.of("moons").column("planet_id", "BIGINT").foreign_key(
        ["planet_id"], "planets", ["id"], name=name
    )
    assert query.serialize(postgres_dialect)[0] == (
        f'CREATE TABLE "moons" ("planet_id" BIGINT, CONSTRAINT "{digest}" '
        'FOREIGN KEY ("planet_id") REFERENCES "planets" ("id"))'
    )


def test_postgres_nested_subpath(postgres_dialect):
    expression = postgres_dialect.nested_subpath_expression(ColumnExpression.of("data"), ["a", "b", "c"])
    assert serialize(postgres_dialect, expression)[0] == "(\"data\"->'a'->'b'->>'c')"


def test_postgres_modify_column_uses_set_data_type(postgres_dialect):
    query = AlterTableBuilder.of("planets").modify_column("name", DataType.text())
    assert query.serialize(postgres_dialect)[0] == 'ALTER TABLE "planets" ALTER COLUMN "name" SET DATA TYPE TEXT'


def test_postgres_named_enums(postgres_dialect):
    create = CreateEnumBuilder.of("planet_type", "rocky", "gas")
    assert create.serialize(postgres_dialect)[0] == "CREATE TYPE \"planet_type\" AS ENUM ('rocky', 'gas')"
    table = CreateTableBuilder.of("planets").column("kind", DataType.enum("rocky", "gas", name="planet_type"))
    assert table.serialize(postgres_dialect)[0] == 'CREATE TABLE "planets" ("kind" "planet_type")'


def test_postgres_upsert_with_condition(postgres_dialect):
    unlocked = ColumnExpression.of("locked", table="planets") == False  # pylint: disable=singleton-comparison
    query = (
        InsertBuilder.of("planets")
        .columns("id", "name")
        .values(1, "Earth")
        .on_conflict("id", set={"name": "Terra"}, where=lambda group: group.where(unlocked))
        .returning("id")
    )
    assert query.serialize(postgres_dialect) == (
        'INSERT INTO "planets" ("id", "name") VALUES ($1, $2) ON CONFLICT ("id") DO UPDATE SET "name" = $3 '
        'WHERE "planets"."locked" = $4 RETURNING "id"',
        [1, "Earth", "Terra", False],
    )


def test_postgres_constraint_trigger(postgres_dialect, caplog):
    query = (
        CreateTriggerBuilder.of("foo", "planet", TriggerWhen.AFTER, TriggerEvent.INSERT)
        .constraint(TriggerTiming.DEFERRED_BY_DEFAULT)
        .referenced_table("galaxies")
        .each(TriggerEach.ROW)
        .condition(ColumnExpression.of("foo") == ColumnExpression.of("bar"))
        .procedure("qwer")
    )
    with caplog.at_level(logging.WARNING, logger="sqlforge"):
        sql, _ = query.serialize(postgres_dialect)
    assert sql == (
        'CREATE CONSTRAINT TRIGGER "foo" AFTER INSERT ON "planet" FROM "galaxies" '
        'DEFERRABLE INITIALLY DEFERRED FOR EACH ROW WHEN ("foo" = "bar") EXECUTE PROCEDURE "qwer"'
    )
    assert caplog.text == ""


def test_postgres_update_columns_and_or_replace(postgres_dialect):
    query = (
        CreateTriggerBuilder.of("foo", "planet", TriggerWhen.AFTER, TriggerEvent.UPDATE)
        .or_replace()
        .columns("foo")
        .each(TriggerEach.STATEMENT)
        .procedure("qwer")
    )
    assert query.serialize(postgres_dialect)[0] == (
        'CREATE OR REPLACE TRIGGER "foo" AFTER UPDATE OF "foo" ON "planet" FOR EACH STATEMENT EXECUTE PROCEDURE "qwer"'
    )


def test_postgres_invalid_trigger_is_rendered_with_warnings(postgres_dialect, caplog):
    query = (
        CreateTriggerBuilder.of("foo", "planet", TriggerWhen.BEFORE, TriggerEvent.INSERT)
        .constraint()
        .columns("foo")
        .procedure("qwer")
    )
    with caplog.at_level(logging.WARNING, logger="sqlforge"):
        sql, _ = query.serialize(postgres_dialect)
    assert sql.startswith('CREATE CONSTRAINT TRIGGER "foo" BEFORE INSERT OF "foo" ON "planet"')
    assert "CONSTRAINT triggers may only be AFTER" in caplog.text
    assert "only UPDATE triggers may specify a list of columns" in caplog.text


def test_postgres_drop_trigger_names_the_table(postgres_dialect):
    query = DropTriggerBuilder.of("foo").table("planets").if_exists().cascade()
    assert query.serialize(postgres_dialect)[0] == 'DROP TRIGGER IF EXISTS "foo" ON "planets" CASCADE'

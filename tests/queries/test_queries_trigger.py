"""Tests for sqlforge.queries.trigger: clause selection driven by trigger syntax flags."""

import logging

from sqlforge.builders import CreateTriggerBuilder, DropTriggerBuilder
from sqlforge.capabilities import TriggerCreateFeatures, TriggerDropFeatures, TriggerSyntax
from sqlforge.expressions import ColumnExpression
from sqlforge.queries import TriggerEach, TriggerEvent, TriggerOrder, TriggerWhen

Create = TriggerCreateFeatures
Drop = TriggerDropFeatures


def _trigger(when="AFTER", event="INSERT"):
    return CreateTriggerBuilder.of("foo", "planets", TriggerWhen[when], TriggerEvent[event])


def test_drop_trigger_with_table_and_cascade_flags(dialect):
    dialect.trigger_syntax = TriggerSyntax(drop=Drop.SUPPORTS_CASCADE | Drop.SUPPORTS_TABLE_NAME)
    assert DropTriggerBuilder.of("foo").table("planets").serialize(dialect) == ('DROP TRIGGER "foo" ON "planets"', [])
    assert DropTriggerBuilder.of("foo").table("planets").cascade().serialize(dialect)[0] == (
        'DROP TRIGGER "foo" ON "planets" CASCADE'
    )


def test_drop_trigger_without_flags_ignores_table_and_behavior(dialect):
    query = DropTriggerBuilder.of("foo").table("planets").cascade()
    assert query.serialize(dialect) == ('DROP TRIGGER "foo"', [])


def test_drop_trigger_if_exists(dialect):
    assert DropTriggerBuilder.of("foo").if_exists().serialize(dialect)[0] == 'DROP TRIGGER IF EXISTS "foo"'


def test_procedure_trigger_without_flags(dialect):
    query = _trigger().each().procedure("log_planet")
    assert query.serialize(dialect) == ('CREATE TRIGGER "foo" AFTER INSERT ON "planets" EXECUTE PROCEDURE "log_planet"', [])


def test_for_each_and_parenthesized_condition(dialect):
    dialect.trigger_syntax = TriggerSyntax(
        create=Create.SUPPORTS_FOR_EACH | Create.SUPPORTS_CONDITION | Create.CONDITION_REQUIRES_PARENTHESES
    )
    query = _trigger().each(TriggerEach.STATEMENT).condition(ColumnExpression.of("mass") > 1).procedure("p")
    assert query.serialize(dialect) == (
        'CREATE TRIGGER "foo" AFTER INSERT ON "planets" FOR EACH STATEMENT WHEN ("mass" > &1) EXECUTE PROCEDURE "p"',
        [1],
    )


def test_requires_for_each_row(dialect):
    dialect.trigger_syntax = TriggerSyntax(create=Create.REQUIRES_FOR_EACH_ROW)
    assert _trigger().procedure("p").serialize(dialect)[0] == (
        'CREATE TRIGGER "foo" AFTER INSERT ON "planets" FOR EACH ROW EXECUTE PROCEDURE "p"'
    )


def test_update_columns(dialect):
    dialect.trigger_syntax = TriggerSyntax(create=Create.SUPPORTS_UPDATE_COLUMNS)
    query = _trigger(event="UPDATE").columns("name", "mass").procedure("p")
    assert query.serialize(dialect)[0] == (
        'CREATE TRIGGER "foo" AFTER UPDATE OF "name", "mass" ON "planets" EXECUTE PROCEDURE "p"'
    )


def test_update_columns_ignored_when_unsupported(dialect):
    query = _trigger(event="UPDATE").columns("name").procedure("p")
    assert query.serialize(dialect)[0] == 'CREATE TRIGGER "foo" AFTER UPDATE ON "planets" EXECUTE PROCEDURE "p"'


def test_body_replaces_procedure_when_supported(dialect):
    dialect.trigger_syntax = TriggerSyntax(create=Create.SUPPORTS_BODY)
    query = _trigger(when="BEFORE").body(["SELECT 1;", "SELECT 2;"]).procedure("ignored")
    assert query.serialize(dialect)[0] == (
        'CREATE TRIGGER "foo" BEFORE INSERT ON "planets" BEGIN SELECT 1; SELECT 2; END;'
    )


def test_definer_and_order(dialect):
    dialect.trigger_syntax = TriggerSyntax(create=Create.SUPPORTS_DEFINER | Create.SUPPORTS_ORDER)
    query = _trigger().definer("root@localhost").order(TriggerOrder.FOLLOWS, "first").procedure("p")
    assert query.serialize(dialect)[0] == (
        "CREATE DEFINER = 'root@localhost' TRIGGER \"foo\" AFTER INSERT ON \"planets\" "
        'FOLLOWS "first" EXECUTE PROCEDURE "p"'
    )


def test_or_replace_only_when_supported(dialect):
    assert _trigger().or_replace().procedure("p").serialize(dialect)[0].startswith('CREATE TRIGGER "foo"')
    dialect.trigger_syntax = TriggerSyntax(create=Create.SUPPORTS_OR_REPLACE)
    assert _trigger().or_replace().procedure("p").serialize(dialect)[0].startswith('CREATE OR REPLACE TRIGGER "foo"')


def test_unsupported_definer_is_dropped_with_warning(dialect, caplog):
    with caplog.at_level(logging.WARNING, logger="sqlforge"):
        sql, _ = _trigger().definer("root").procedure("p").serialize(dialect)
    assert "DEFINER" not in sql
    assert "does not support one" in caplog.text


def test_missing_procedure_warns_but_renders(dialect, caplog):
    with caplog.at_level(logging.WARNING, logger="sqlforge"):
        sql, _ = _trigger().serialize(dialect)
    assert sql == 'CREATE TRIGGER "foo" AFTER INSERT ON "planets"'
    assert "a trigger procedure is required" in caplog.text


def test_missing_body_warns(dialect, caplog):
    dialect.trigger_syntax = TriggerSyntax(create=Create.SUPPORTS_BODY)
    with caplog.at_level(logging.WARNING, logger="sqlforge"):
        _trigger().serialize(dialect)
    assert "a trigger body is required" in caplog.text

"""Tests for sqlforge.dialects.base: Dialect defaults, quoting and the F helper table."""

import pytest

from sqlforge.capabilities import EnumSyntax, TriggerCreateFeatures, UnionFeatures, UpsertSyntax
from sqlforge.dialects.base import Dialect, _DialectF
from sqlforge.expressions import IdentifierExpression, RawExpression


class MinimalDialect(Dialect):
    SUPPORTED_SCHEMA = ("minimal",)
    F = {"concat": lambda *a: ("concat", a)}

    name: str = "minimal"

    def bind_placeholder(self, position):
        return RawExpression("?")

    def literal_boolean(self, value):
        return RawExpression("1" if value else "0")


def test_dialect_is_abstract():
    with pytest.raises(TypeError):
        Dialect(name="abstract")  # pylint: disable=abstract-class-instantiated


def test_dialect_defaults_are_conservative():
    d = MinimalDialect()
    assert d.identifier_quote == '"'
    assert d.literal_string_quote == "'"
    assert d.supports_if_exists is True
    assert d.supports_auto_increment is True
    assert d.supports_drop_behavior is False
    assert d.supports_returning is False
    assert d.enum_syntax is EnumSyntax.UNSUPPORTED
    assert d.upsert_syntax is UpsertSyntax.UNSUPPORTED
    assert d.union_features == UnionFeatures.UNION | UnionFeatures.UNION_ALL
    assert d.shared_select_lock_expression is None
    assert d.exclusive_select_lock_expression is None
    assert d.alter_table_syntax.allows_batch is True
    assert d.alter_table_syntax.alter_column_definition_clause is None


def test_dialect_f_getattr_returns_callable():
    d = MinimalDialect()
    assert isinstance(d.f, _DialectF)
    assert d.f.concat("a", "b") == ("concat", ("a", "b"))


def test_dialect_f_getattr_unknown_raises():
    with pytest.raises(AttributeError, match="nosuch"):
        MinimalDialect().f.nosuch  # pylint: disable=expression-not-assigned


def test_quote_identifier_doubles_the_quote():
    assert MinimalDialect().quote_identifier('a"b') == '"a""b"'


def test_quote_string_doubles_the_quote():
    assert MinimalDialect().quote_string("it's") == "'it''s'"


def test_hooks_default_to_no_override():
    d = MinimalDialect()
    identifier = IdentifierExpression(string="constraint_name")
    assert d.custom_data_type(RawExpression("TEXT")) is None
    assert d.normalize_sql_constraint(identifier) is identifier
    assert d.nested_subpath_expression(identifier, ["a"]) is None


def test_instances_are_independent():
    first, second = MinimalDialect(), MinimalDialect()
    first.supports_returning = True
    first.trigger_syntax.create |= TriggerCreateFeatures.SUPPORTS_BODY
    assert second.supports_returning is False
    assert not second.trigger_syntax.create

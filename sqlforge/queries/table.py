"""CREATE TABLE, ALTER TABLE and DROP TABLE."""

from typing import Any, Optional

from pydantic import Field as PydanticField

from ..expressions._bases import Expression
from ..expressions.raw import UnsafeRawExpression
from ..expressions.sequence import GroupExpression, ListExpression


class CreateTableQuery(Expression):
    """``CREATE [TEMPORARY] TABLE [IF NOT EXISTS] name (definitions) [AS query]``.

    A table created purely from a query has no definition list at all.
    """

    table: Any
    columns: list[Any] = PydanticField(default_factory=list)
    table_constraints: list[Any] = PydanticField(default_factory=list)
    temporary: bool = False
    if_not_exists: bool = False
    as_query: Optional[Any] = None

    def serialize(self, serializer) -> None:
        dialect = serializer.dialect
        with serializer.statement(query=True) as statement:
            statement.append("CREATE")
            if self.temporary:
                statement.append("TEMPORARY")
            statement.append("TABLE")
            if self.if_not_exists:
                if dialect.supports_if_exists:
                    statement.append("IF NOT EXISTS")
                else:
                    serializer.logger.warning("%s does not support IF NOT EXISTS", dialect.name)
            statement.append(self.table)
            definitions = [*self.columns, *self.table_constraints]
            if definitions:
                statement.append(GroupExpression(expression=ListExpression(items=definitions)))
            if self.as_query is not None:
                statement.append("AS", self.as_query)


class AlterTableQuery(Expression):
    """``ALTER TABLE name [RENAME TO new] alteration, alteration ...``.

    Alterations render additions first, then removals, then column
    modifications, each introduced by its verb (``ADD``, ``DROP`` or the
    dialect's modification clause).
    """

    name: Any
    rename_to: Optional[Any] = None
    add_columns: list[Any] = PydanticField(default_factory=list)
    modify_columns: list[Any] = PydanticField(default_factory=list)
    drop_columns: list[Any] = PydanticField(default_factory=list)
    add_table_constraints: list[Any] = PydanticField(default_factory=list)
    drop_table_constraints: list[Any] = PydanticField(default_factory=list)

    def serialize(self, serializer) -> None:
        syntax = serializer.dialect.alter_table_syntax
        count = sum(map(len, (
            self.add_columns, self.modify_columns, self.drop_columns,
            self.add_table_constraints, self.drop_table_constraints,
        )))
        if not syntax.allows_batch and count > 1:
            # rendered as a single statement regardless
            serializer.logger.debug(
                "%s does not support several alterations per statement; run one query per alteration instead.",
                serializer.dialect.name,
            )
        modify_verb = syntax.alter_column_definition_clause
        if modify_verb is None and self.modify_columns:
            serializer.logger.debug("%s does not support column modifications.", serializer.dialect.name)
            modify_verb = UnsafeRawExpression("__INVALID__")

        alterations = [
            *(("ADD", definition) for definition in [*self.add_columns, *self.add_table_constraints]),
            *(("DROP", definition) for definition in [*self.drop_columns, *self.drop_table_constraints]),
            *((modify_verb, definition) for definition in self.modify_columns),
        ]
        with serializer.statement(query=True) as statement:
            statement.append("ALTER TABLE", self.name)
            if self.rename_to is not None:
                statement.append("RENAME TO", self.rename_to)
            for index, (verb, definition) in enumerate(alterations):
                if index:
                    statement.append(",")
                statement.append(verb, definition)


class DropTableQuery(Expression):
    """``DROP [TEMPORARY] TABLE [IF EXISTS] tables [RESTRICT|CASCADE]``."""

    tables: list[Any] = PydanticField(default_factory=list)
    if_exists: bool = False
    temporary: bool = False
    behavior: Optional[Any] = None
    """``RESTRICT`` or ``CASCADE``; written only when set and supported by the dialect."""

    def serialize(self, serializer) -> None:
        dialect = serializer.dialect
        with serializer.statement(query=True) as statement:
            statement.append("DROP")
            if self.temporary:
                statement.append("TEMPORARY")
            statement.append("TABLE")
            if self.if_exists and dialect.supports_if_exists:
                statement.append("IF EXISTS")
            statement.append(ListExpression(items=self.tables))
            if self.behavior is not None and dialect.supports_drop_behavior:
                statement.append(self.behavior)

"""Binary operators and the BETWEEN expression."""

from typing import Any

from ._bases import Expression, KeywordEnum


class BinaryOperator(KeywordEnum):
    """Infix operators, rendered as their SQL spelling."""

    EQUAL = "="
    NOT_EQUAL = "<>"
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN_OR_EQUAL = "<="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    IN = "IN"
    NOT_IN = "NOT IN"
    AND = "AND"
    OR = "OR"
    CONCATENATE = "||"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    ADD = "+"
    SUBTRACT = "-"
    IS = "IS"
    IS_NOT = "IS NOT"

    def serialize(self, serializer) -> None:
        if self is BinaryOperator.CONCATENATE:
            # engines disagree on concatenation; callers should use a function such as CONCAT()
            serializer.logger.warning("The concatenate operator has no portable spelling and is omitted.")
            return
        serializer.write(self.value)


class BinaryExpression(Expression):
    """``left operator right``, separated by single spaces."""

    left: Any
    operator: Any
    right: Any

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append(self.left, self.operator, self.right)


class BetweenExpression(Expression):
    """``operand BETWEEN lower AND upper``."""

    operand: Any
    lower: Any
    upper: Any

    def serialize(self, serializer) -> None:
        with serializer.statement() as statement:
            statement.append(self.operand, "BETWEEN", self.lower, "AND", self.upper)

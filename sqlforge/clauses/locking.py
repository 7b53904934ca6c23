"""Row locking clause of SELECT."""

from ..expressions._bases import KeywordEnum


class LockingClause(KeywordEnum):
    """Row lock requested by a SELECT; each dialect supplies (or omits) the actual text."""

    SHARE = "share"
    UPDATE = "update"

    def serialize(self, serializer) -> None:
        dialect = serializer.dialect
        if self is LockingClause.SHARE:
            expression = dialect.shared_select_lock_expression
        else:
            expression = dialect.exclusive_select_lock_expression
        if expression is None:
            serializer.logger.debug("%s has no %s lock clause; omitted.", dialect.name, self.value)
            return
        expression.serialize(serializer)

"""Mapping between pydantic models and database rows.

Encoding turns a model into ordered ``(column, value)`` pairs for INSERT and
UPDATE; decoding validates a row mapping back into a model.
"""

from typing import Any, Callable, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


class RowDecodingError(ValueError):
    """A row could not be validated into a model; ``path`` locates the offending field."""

    def __init__(self, message: str, path: list[str]) -> None:
        super().__init__(message)
        self.path = path


def encode_model(
    model: BaseModel,
    prefix: str = "",
    key_transform: Optional[Callable[[str], str]] = None,
    omit_none: bool = False,
) -> list[tuple[str, Any]]:
    """Return the model's fields as ``(column, value)`` pairs, in field order.

    Args:
        model: The pydantic model instance to encode.
        prefix: Prepended to every column name.
        key_transform: Applied to each field name before prefixing (e.g. camelCase to snake_case).
        omit_none: If True, fields whose value is None are left out.
    """
    pairs = []
    for key, value in model.model_dump().items():
        if omit_none and value is None:
            continue
        if key_transform is not None:
            key = key_transform(key)
        pairs.append((prefix + key, value))
    return pairs


def decode_row(
    row: Mapping[str, Any],
    model_type: type[M],
    prefix: str = "",
    key_transform: Optional[Callable[[str], str]] = None,
) -> M:
    """Validate a row mapping into ``model_type``.

    With a ``prefix``, only columns starting with it are considered, and the
    prefix is stripped before ``key_transform`` maps the column to a field name.

    Raises:
        RowDecodingError: If validation fails; ``path`` is the location of the first error.
    """
    data = {}
    for key, value in row.items():
        if prefix:
            if not key.startswith(prefix):
                continue
            key = key[len(prefix):]
        if key_transform is not None:
            key = key_transform(key)
        data[key] = value
    try:
        return model_type.model_validate(data)
    except ValidationError as error:
        first = error.errors()[0]
        path = [str(location) for location in first["loc"]]
        raise RowDecodingError(
            f"Cannot decode row into {model_type.__name__} at {'.'.join(path) or '<root>'}: {first['msg']}",
            path=path,
        ) from error

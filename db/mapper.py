"""
db/mapper.py
------------
Projects decoded rows onto dataclass instances by matching column names
to field names. The field table of each type is built once and reused.
"""

import dataclasses
from functools import lru_cache
from typing import Any, TypeVar

from db.errors import MappingError

T = TypeVar("T")


@lru_cache(maxsize=None)
def field_table(cls: type) -> dict[str, bool]:
    """
    Return ``{field_name: required}`` for a dataclass.

    Raises:
        MappingError: If ``cls`` is not a dataclass.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise MappingError(f"{cls!r} is not a dataclass and cannot be a row target")
    return {
        f.name: f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        for f in dataclasses.fields(cls)
        if f.init
    }


def map_row(row: dict[str, Any], cls: type[T]) -> T:
    """
    Build a ``cls`` instance from a row.

    Raises:
        MappingError: On a column with no matching field, a missing
            required field, or a constructor rejecting the values.
    """
    table = field_table(cls)
    unknown = [name for name in row if name not in table]
    if unknown:
        raise MappingError(f"Column(s) {unknown} have no matching field on {cls.__name__}")
    missing = [name for name, required in table.items() if required and name not in row]
    if missing:
        raise MappingError(f"Row lacks required field(s) {missing} of {cls.__name__}")
    try:
        return cls(**row)
    except (TypeError, ValueError) as e:
        raise MappingError(f"Cannot build {cls.__name__} from row: {e}") from e

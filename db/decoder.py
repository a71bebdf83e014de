"""
db/decoder.py
-------------
Turns an executed query's cursor into the shape the caller asked for.
"""

from datetime import date, datetime, time
from typing import Any, Optional

from db.mapper import map_row
from db.shapes import Row, Rows, Scalar, ScalarKind, TypedRows


def row_to_dict(cursor, row: tuple) -> dict[str, Any]:
    """
    Convert one result row into a column -> value dict in column order.

    Duplicate column names keep the last value.
    """
    result = {}
    for column, value in zip(cursor.description, row):
        result[column[0]] = value
    return result


def _to_boolean(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in ("1", "t", "true", "y", "yes")
    return bool(value)


def _to_string(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _to_integer(value: Any) -> int:
    return 0 if value is None else int(value)


def _to_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return datetime.fromisoformat(str(value))


_SCALAR_CONVERTERS = {
    ScalarKind.BOOLEAN: _to_boolean,
    ScalarKind.STRING: _to_string,
    ScalarKind.INTEGER: _to_integer,
    ScalarKind.TIMESTAMP: _to_timestamp,
}


def decode(cursor, shape):
    """
    Decode the rows of an executed query.

    Scalar and row shapes read one row and return None when there is none;
    the caller is expected to only ask them of queries that yield a row.

    Raises:
        MappingError: If a typed row cannot be mapped.
        ValueError: If ``shape`` is not a query shape.
    """
    if isinstance(shape, Scalar):
        row = cursor.fetchone()
        if row is None:
            return None
        return _SCALAR_CONVERTERS[shape.kind](row[0])

    if isinstance(shape, Row):
        row = cursor.fetchone()
        return None if row is None else row_to_dict(cursor, row)

    if isinstance(shape, Rows):
        return [row_to_dict(cursor, r) for r in cursor.fetchall()]

    if isinstance(shape, TypedRows):
        return [map_row(row_to_dict(cursor, r), shape.cls) for r in cursor.fetchall()]

    raise ValueError(f"{shape!r} is not a query result shape")

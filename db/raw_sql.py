"""
db/raw_sql.py
-------------
Renders a statement with its parameters inlined, for logging only.

The output is NOT safe to execute: it is not a prepared statement and
literal rendering does not cover every representation edge case.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Sequence

from db.binder import placeholder_positions


def format_raw_sql_param(value: Any) -> str:
    """Render a single parameter as a SQL literal."""
    if value is None:
        return "NULL"
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return str(value).upper()
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (str, datetime, date)):
        return "'" + str(value).replace("'", "''") + "'"
    return "'" + str(value) + "'"


def raw_sql(sql: str, params: Sequence[Any]) -> str:
    """
    Replace each placeholder of ``sql``, in order, with its rendered parameter.

    Surplus parameters are ignored and surplus placeholders are left as ``?``.
    """
    positions = placeholder_positions(sql)
    pieces = []
    last = 0
    for pos, value in zip(positions, params):
        pieces.append(sql[last:pos])
        pieces.append(format_raw_sql_param(value))
        last = pos + 1
    pieces.append(sql[last:])
    return "".join(pieces)

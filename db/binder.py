"""
db/binder.py
------------
Applies an ordered parameter list to a statement's ``?`` placeholders.

Callers write ``?`` placeholders; psycopg2 expects ``%s``. The binder
rewrites the statement, doubles literal ``%`` signs and checks that every
value can be adapted by the driver before anything reaches the server.
"""

from dataclasses import dataclass
from typing import Any, Sequence

import psycopg2
from psycopg2.extensions import adapt

from db.errors import BindingError


@dataclass(frozen=True)
class BoundStatement:
    """A statement in driver syntax plus the parameters in placeholder order."""
    sql: str
    params: tuple


def placeholder_positions(sql: str) -> list[int]:
    """
    Return the index of every ``?`` placeholder in ``sql``.

    A ``?`` inside a single-quoted literal, a double-quoted identifier,
    a ``--`` line comment or a ``/* */`` block comment is not a placeholder.
    """
    positions = []
    i, n = 0, len(sql)
    while i < n:
        ch = sql[i]
        if ch in ("'", '"'):
            end = sql.find(ch, i + 1)
            i = n if end == -1 else end + 1
        elif sql.startswith("--", i):
            end = sql.find("\n", i + 2)
            i = n if end == -1 else end + 1
        elif sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            i = n if end == -1 else end + 2
        else:
            if ch == "?":
                positions.append(i)
            i += 1
    return positions


def bind(sql: str, params: Sequence[Any]) -> BoundStatement:
    """
    Bind ``params`` to the placeholders of ``sql`` (1-indexed, in list order).

    Supported kinds are None, bool, numbers, str and date/datetime; anything
    else is handed to the driver as is.

    Raises:
        BindingError: On a placeholder/parameter count mismatch or a value
            the driver cannot adapt.
    """
    params = tuple(params)
    positions = placeholder_positions(sql)
    if len(positions) != len(params):
        raise BindingError(
            f"Statement has {len(positions)} placeholder(s) but {len(params)} parameter(s) were given"
        )

    for index, value in enumerate(params, start=1):
        try:
            adapt(value)
        except psycopg2.ProgrammingError as e:
            raise BindingError(f"Parameter {index}: {e}") from e

    marks = set(positions)
    parts = []
    for i, ch in enumerate(sql):
        if i in marks:
            parts.append("%s")
        elif ch == "%":
            parts.append("%%")
        else:
            parts.append(ch)
    return BoundStatement(sql="".join(parts), params=params)

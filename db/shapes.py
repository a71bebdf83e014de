"""
db/shapes.py
------------
Result shapes a caller can ask the SQL helper for.

The caller picks the shape at the call site; the decoder never infers it
from the data. Shapes form a closed set:

    Scalar(kind)     first column of the first row, converted to ``kind``
    ROW              first row as a column -> value dict
    ROWS             every row as a list of dicts
    TypedRows(cls)   every row mapped onto a dataclass ``cls``
    GENERATED_ID     key produced by an INSERT
    AFFECTED_ROWS    row count of a mutating statement
"""

from dataclasses import dataclass
from enum import Enum


class ScalarKind(Enum):
    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class Scalar:
    kind: ScalarKind


@dataclass(frozen=True)
class Row:
    pass


@dataclass(frozen=True)
class Rows:
    pass


@dataclass(frozen=True)
class TypedRows:
    cls: type


@dataclass(frozen=True)
class GeneratedId:
    pass


@dataclass(frozen=True)
class AffectedRows:
    pass


BOOLEAN = Scalar(ScalarKind.BOOLEAN)
STRING = Scalar(ScalarKind.STRING)
INTEGER = Scalar(ScalarKind.INTEGER)
TIMESTAMP = Scalar(ScalarKind.TIMESTAMP)
ROW = Row()
ROWS = Rows()
GENERATED_ID = GeneratedId()
AFFECTED_ROWS = AffectedRows()

QUERY_SHAPES = (Scalar, Row, Rows, TypedRows)

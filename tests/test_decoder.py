from datetime import date, datetime

import pytest

from db.decoder import decode
from db.errors import MappingError
from db.shapes import BOOLEAN, GENERATED_ID, INTEGER, ROW, ROWS, STRING, TIMESTAMP, TypedRows
from fakes import FakeConnection
from models.wise_saying import WiseSaying


def cursor_for(columns, rows):
    conn = FakeConnection().script("SELECT", columns=columns, rows=rows)
    cur = conn.cursor()
    cur.execute("SELECT")
    return cur


def test_row_keys_follow_column_order():
    cur = cursor_for(["id", "name", "value"], [(1, "hello", 42)])

    row = decode(cur, ROW)

    assert row == {"id": 1, "name": "hello", "value": 42}
    assert list(row) == ["id", "name", "value"]


def test_row_of_empty_result_is_none():
    assert decode(cursor_for(["id"], []), ROW) is None


def test_duplicate_column_keeps_last_value():
    cur = cursor_for(["id", "id"], [(1, 2)])

    assert decode(cur, ROW) == {"id": 2}


def test_rows_keep_result_order():
    cur = cursor_for(["id"], [(3,), (1,), (2,)])

    assert decode(cur, ROWS) == [{"id": 3}, {"id": 1}, {"id": 2}]


def test_rows_of_empty_result_is_empty_list():
    assert decode(cursor_for(["id"], []), ROWS) == []


def test_typed_rows():
    cur = cursor_for(["id", "content", "author"], [(2, "Know thyself", "Socrates")])

    assert decode(cur, TypedRows(WiseSaying)) == [WiseSaying(id=2, content="Know thyself", author="Socrates")]


def test_typed_rows_with_unknown_column_fails():
    cur = cursor_for(["id", "content", "author", "likes"], [(2, "c", "a", 5)])

    with pytest.raises(MappingError, match="likes"):
        decode(cur, TypedRows(WiseSaying))


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), (False, False), (1, True), (0, False), ("true", True), ("0", False), (None, False)],
)
def test_boolean_scalar(value, expected):
    assert decode(cursor_for(["b"], [(value,)]), BOOLEAN) is expected


def test_string_scalar():
    assert decode(cursor_for(["s"], [("abc",)]), STRING) == "abc"
    assert decode(cursor_for(["s"], [(12,)]), STRING) == "12"
    assert decode(cursor_for(["s"], [(None,)]), STRING) is None


def test_integer_scalar():
    assert decode(cursor_for(["count"], [(3,)]), INTEGER) == 3
    assert decode(cursor_for(["count"], [(None,)]), INTEGER) == 0


def test_timestamp_scalar():
    stamp = datetime(2024, 5, 1, 12, 30)

    assert decode(cursor_for(["t"], [(stamp,)]), TIMESTAMP) == stamp
    assert decode(cursor_for(["t"], [(date(2024, 5, 1),)]), TIMESTAMP) == datetime(2024, 5, 1)
    assert decode(cursor_for(["t"], [("2024-05-01 12:30:00",)]), TIMESTAMP) == stamp


def test_scalar_reads_only_the_first_row():
    assert decode(cursor_for(["n"], [(1,), (2,)]), INTEGER) == 1


def test_scalar_of_empty_result_is_none():
    assert decode(cursor_for(["n"], []), INTEGER) is None


def test_non_query_shape_is_rejected():
    with pytest.raises(ValueError):
        decode(cursor_for(["n"], [(1,)]), GENERATED_ID)

from datetime import datetime
from decimal import Decimal

import pytest

from db.binder import bind, placeholder_positions
from db.errors import BindingError


def test_placeholders_are_rewritten_in_order():
    bound = bind("SELECT * FROM t WHERE id = ? AND name = ?", [1, "hello"])

    assert bound.sql == "SELECT * FROM t WHERE id = %s AND name = %s"
    assert bound.params == (1, "hello")


def test_percent_signs_are_doubled():
    bound = bind("SELECT * FROM t WHERE rate = '100%' AND id = ?", [3])

    assert bound.sql == "SELECT * FROM t WHERE rate = '100%%' AND id = %s"


def test_question_mark_inside_literal_is_not_a_placeholder():
    sql = "SELECT * FROM t WHERE content = 'why?' AND id = ?"

    assert placeholder_positions(sql) == [sql.rindex("?")]
    assert bind(sql, [1]).sql.endswith("'why?' AND id = %s")


def test_statement_without_placeholders_binds_empty_list():
    bound = bind("DELETE FROM t", [])

    assert bound.sql == "DELETE FROM t"
    assert bound.params == ()


@pytest.mark.parametrize("params", [[], [1, 2]])
def test_count_mismatch_fails(params):
    with pytest.raises(BindingError, match="placeholder"):
        bind("SELECT * FROM t WHERE id = ?", params)


def test_supported_kinds_bind():
    params = [None, True, 42, 1.5, Decimal("9.99"), "text", datetime(2024, 1, 2, 3, 4, 5)]

    bound = bind("INSERT INTO t VALUES (?, ?, ?, ?, ?, ?, ?)", params)

    assert bound.params == tuple(params)


def test_value_the_driver_cannot_adapt_fails():
    with pytest.raises(BindingError, match="Parameter 2"):
        bind("INSERT INTO t VALUES (?, ?)", [1, {"not": "adaptable"}])


@pytest.mark.parametrize(
    "sql",
    [
        "UPDATE t SET v = 1 -- why?",
        "UPDATE t SET v = 1 /* why? */",
        'UPDATE t SET "why?" = 1',
        "UPDATE t SET v = 'it''s?'",
    ],
)
def test_question_marks_in_comments_and_identifiers_are_not_placeholders(sql):
    assert placeholder_positions(sql) == []
    assert bind(sql, []).params == ()


def test_placeholder_after_line_comment_is_found():
    sql = "SELECT * FROM t -- who?\nWHERE id = ?"

    assert bind(sql, [1]).sql == "SELECT * FROM t -- who?\nWHERE id = %s"

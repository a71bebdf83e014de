from datetime import datetime
from decimal import Decimal

from db.raw_sql import format_raw_sql_param, raw_sql


def test_numbers_render_unquoted():
    assert format_raw_sql_param(42) == "42"
    assert format_raw_sql_param(1.5) == "1.5"
    assert format_raw_sql_param(Decimal("9.99")) == "9.99"


def test_booleans_render_uppercase():
    assert format_raw_sql_param(True) == "TRUE"
    assert format_raw_sql_param(False) == "FALSE"


def test_null():
    assert format_raw_sql_param(None) == "NULL"


def test_strings_are_quoted_with_quotes_doubled():
    assert format_raw_sql_param("O'Brien") == "'O''Brien'"


def test_timestamps_are_quoted():
    assert format_raw_sql_param(datetime(2024, 1, 2, 3, 4, 5)) == "'2024-01-02 03:04:05'"


def test_placeholders_replaced_in_order():
    sql = "UPDATE t SET name = ?, active = ? WHERE id = ?"

    assert raw_sql(sql, ["it's", True, 7]) == "UPDATE t SET name = 'it''s', active = TRUE WHERE id = 7"


def test_question_mark_in_rendered_value_is_not_replaced_again():
    assert raw_sql("SELECT ?, ?", ["a?", 1]) == "SELECT 'a?', 1"


def test_count_mismatch_does_not_raise():
    assert raw_sql("SELECT ? , ?", [1]) == "SELECT 1 , ?"
    assert raw_sql("SELECT ?", [1, 2]) == "SELECT 1"


def test_comments_and_quoted_identifiers_are_left_alone():
    sql = 'UPDATE t /* really? */ SET "a?" = ? -- why?'

    assert raw_sql(sql, [1]) == 'UPDATE t /* really? */ SET "a?" = 1 -- why?'

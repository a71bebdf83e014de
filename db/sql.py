"""
db/sql.py
---------
Query builder that accumulates SQL fragments with their parameters
and hands the result to the ``SimpleDb`` that created it.

    sql = db.gen_sql()
    sql.append("SELECT * FROM wise_saying").append("WHERE author = ?", "Yoda")
    rows = sql.select_rows()
"""

from typing import Any, Sequence


class Sql:
    """Mutable SQL text plus ordered parameters."""

    def __init__(self, simple_db):
        self._db = simple_db
        self._fragments: list[str] = []
        self._params: list[Any] = []

    def append(self, fragment: str, *params) -> "Sql":
        self._fragments.append(fragment)
        self._params.extend(params)
        return self

    def append_in(self, fragment: str, values: Sequence[Any]) -> "Sql":
        """
        Append a fragment whose single ``?`` expands to one placeholder per value.

            sql.append_in("WHERE id IN (?)", [1, 2, 3])   # WHERE id IN (?, ?, ?)
        """
        values = list(values)
        if not values:
            raise ValueError("append_in needs at least one value")
        self._fragments.append(fragment.replace("?", ", ".join("?" * len(values)), 1))
        self._params.extend(values)
        return self

    def build(self) -> tuple[str, list[Any]]:
        """Return the SQL text and a copy of its parameters without running anything."""
        return " ".join(self._fragments), list(self._params)

    def __str__(self) -> str:
        return self.build()[0]

    def insert(self) -> int:
        return self._db.insert(*self.build())

    def update(self) -> int:
        return self._db.update(*self.build())

    def delete(self) -> int:
        return self._db.delete(*self.build())

    def select_row(self, cls=None):
        sql, params = self.build()
        return self._db.select_row(sql, params, cls)

    def select_rows(self, cls=None) -> list:
        sql, params = self.build()
        return self._db.select_rows(sql, params, cls)

    def select_long(self):
        return self._db.select_long(*self.build())

    def select_longs(self) -> list:
        return self._db.select_longs(*self.build())

    def select_string(self):
        return self._db.select_string(*self.build())

    def select_boolean(self):
        return self._db.select_boolean(*self.build())

    def select_datetime(self):
        return self._db.select_datetime(*self.build())

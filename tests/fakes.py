"""Hand-written stand-ins for psycopg2 connections and cursors."""

from __future__ import annotations


class Script:
    def __init__(self, match, columns=None, rows=(), rowcount=-1, error=None):
        self.match = match
        self.description = [(name,) for name in columns] if columns is not None else None
        self.rows = list(rows)
        self.rowcount = rowcount
        self.error = error


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self.description = None
        self.rowcount = -1
        self._rows: list[tuple] = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        script = self.conn.find_script(sql)
        if script is None:
            self.description, self._rows, self.rowcount = None, [], 0
            return
        if script.error is not None:
            raise script.error
        self.description = script.description
        self._rows = list(script.rows)
        self.rowcount = script.rowcount if script.rowcount >= 0 else len(script.rows)

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows


class FakeConnection:
    """
    Answers each statement from the most recently added script whose
    ``match`` text occurs in the SQL; unmatched statements affect 0 rows.
    """

    def __init__(self):
        self.autocommit = False
        self.closed = False
        self.commits = 0
        self.rollbacks = 0
        self.executed: list[tuple] = []
        self._scripts: list[Script] = []

    def script(self, match, columns=None, rows=(), rowcount=-1, error=None) -> "FakeConnection":
        self._scripts.append(Script(match, columns, rows, rowcount, error))
        return self

    def find_script(self, sql):
        for script in reversed(self._scripts):
            if script.match in sql:
                return script
        return None

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True

    @property
    def statements(self) -> list[str]:
        return [sql for sql, _ in self.executed]

"""
db/simple_db.py
---------------
A small SQL runner on top of psycopg2.

Each worker thread gets its own connection (see ``ConnectionRegistry``).
Statements use ``?`` placeholders and a positional parameter list; the
caller picks the result shape up front.

Dispatch is a literal, case-sensitive prefix check on the stripped SQL:
``SELECT`` statements are decoded, ``INSERT`` asking for ``GENERATED_ID``
returns the new key, and everything else returns the affected-row count.
Lowercase SQL or statements starting with ``WITH`` or a comment are
therefore treated as mutating statements.
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Optional, Sequence

import psycopg2

from db.binder import bind
from db.connection import ConnectionRegistry, current_worker
from db.decoder import decode
from db.errors import NoGeneratedKeyError, SqlExecutionError, TransactionError
from db.raw_sql import raw_sql
from db.shapes import (
    AFFECTED_ROWS,
    BOOLEAN,
    GENERATED_ID,
    INTEGER,
    QUERY_SHAPES,
    ROW,
    ROWS,
    STRING,
    TIMESTAMP,
    GeneratedId,
    TypedRows,
)
from db.sql import Sql
from utils.logger import get_logger

logger = get_logger(__name__)

_KEY_SAVEPOINT = "simple_db_generated_key"


class SimpleDb:
    """
    Executes SQL against PostgreSQL with one connection per worker thread.

    Args:
        host: Database host.
        user: Database user.
        password: Password of ``user``.
        db_name: Database (schema) name.
        port: Server port.
        dev_mode: When True every statement is logged with its
            parameters inlined before it runs.
        connect: Optional connection factory, defaults to ``psycopg2.connect``.
    """

    def __init__(self, host: str, user: str, password: str, db_name: str,
                 port: int = 5432, dev_mode: bool = False, connect=None):
        self.dev_mode = dev_mode
        self.registry = ConnectionRegistry(
            {"host": host, "port": port, "user": user, "password": password, "dbname": db_name},
            connect=connect,
        )

    def _current_connection(self):
        return self.registry.connection_for(current_worker())

    # ── EXECUTION ─────────────────────────────────────────

    def execute(self, sql: str, params: Sequence[Any] = (), shape=AFFECTED_ROWS):
        """
        Run one statement on the calling worker's connection.

        Args:
            sql: Statement with ``?`` placeholders.
            params: One value per placeholder, in order.
            shape: Result shape (see ``db.shapes``).

        Returns:
            The decoded query result, the generated key, or the affected-row count.

        Raises:
            DbConnectionError: If the worker's connection cannot be opened.
            BindingError: If the parameters do not fit the placeholders.
            SqlExecutionError: On any driver failure during execution.
            NoGeneratedKeyError: If an INSERT produced no key.
            MappingError: If a typed row cannot be mapped.
        """
        params = list(params)
        text = sql.strip()
        is_query = text.startswith("SELECT")
        if is_query and not isinstance(shape, QUERY_SHAPES):
            raise ValueError(f"{shape!r} cannot decode a SELECT result")

        if self.dev_mode:
            logger.info(f"sql : {raw_sql(sql, params)}")

        statement = bind(sql, params)
        conn = self._current_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(statement.sql, statement.params)
                if is_query:
                    return decode(cur, shape)
                if text.startswith("INSERT") and isinstance(shape, GeneratedId):
                    return self._generated_key(conn, cur)
                return cur.rowcount
        except psycopg2.Error as e:
            message = str(e).strip()
            logger.error(f"SQL execution failed: {message}")
            raise SqlExecutionError(f"SQL execution failed: {message}") from e

    @staticmethod
    def _generated_key(conn, cur) -> int:
        # INSERT ... RETURNING hands the key back directly.
        if cur.description is not None:
            row = cur.fetchone()
            if row is None or row[0] is None:
                raise NoGeneratedKeyError("INSERT ... RETURNING produced no key")
            return int(row[0])

        in_transaction = not conn.autocommit
        if in_transaction:
            cur.execute(f"SAVEPOINT {_KEY_SAVEPOINT}")
        try:
            cur.execute("SELECT lastval()")
        except psycopg2.Error as e:
            if in_transaction:
                cur.execute(f"ROLLBACK TO SAVEPOINT {_KEY_SAVEPOINT}")
            raise NoGeneratedKeyError(f"INSERT produced no generated key: {str(e).strip()}") from e
        row = cur.fetchone()
        if in_transaction:
            cur.execute(f"RELEASE SAVEPOINT {_KEY_SAVEPOINT}")
        if row is None or row[0] is None:
            raise NoGeneratedKeyError("INSERT produced no generated key")
        return int(row[0])

    # ── MUTATIONS ─────────────────────────────────────────

    def insert(self, sql: str, params: Sequence[Any] = ()) -> int:
        """
        Run an INSERT and return the generated key.

        Add ``RETURNING id`` for a reliable key: without it the key comes from
        ``lastval()``, which reports the session's latest sequence value and
        can be stale for a table without a sequence.
        """
        return self.execute(sql, params, GENERATED_ID)

    def update(self, sql: str, params: Sequence[Any] = ()) -> int:
        return self.execute(sql, params, AFFECTED_ROWS)

    def delete(self, sql: str, params: Sequence[Any] = ()) -> int:
        return self.execute(sql, params, AFFECTED_ROWS)

    def run(self, sql: str, *params) -> int:
        """Shortcut taking parameters as varargs; returns the affected-row count."""
        return self.execute(sql, params, AFFECTED_ROWS)

    # ── QUERIES ───────────────────────────────────────────

    def select_row(self, sql: str, params: Sequence[Any] = (), cls: Optional[type] = None):
        """
        Return the first row as a dict, or as ``cls`` when given.
        None when the query yields no row.
        """
        if cls is None:
            return self.execute(sql, params, ROW)
        rows = self.select_rows(sql, params, cls)
        return rows[0] if rows else None

    def select_rows(self, sql: str, params: Sequence[Any] = (), cls: Optional[type] = None) -> list:
        """Return every row as a dict, or as ``cls`` instances when given."""
        if cls is None:
            return self.execute(sql, params, ROWS)
        return self.execute(sql, params, TypedRows(cls))

    def select_string(self, sql: str, params: Sequence[Any] = ()) -> Optional[str]:
        return self.execute(sql, params, STRING)

    def select_long(self, sql: str, params: Sequence[Any] = ()) -> Optional[int]:
        return self.execute(sql, params, INTEGER)

    def select_boolean(self, sql: str, params: Sequence[Any] = ()) -> Optional[bool]:
        return self.execute(sql, params, BOOLEAN)

    def select_datetime(self, sql: str, params: Sequence[Any] = ()) -> Optional[datetime]:
        return self.execute(sql, params, TIMESTAMP)

    def select_longs(self, sql: str, params: Sequence[Any] = ()) -> list[Optional[int]]:
        """Return the first column of every row as an int (None for NULL)."""
        values = [next(iter(row.values())) for row in self.select_rows(sql, params)]
        return [None if value is None else int(value) for value in values]

    def gen_sql(self) -> Sql:
        """Start a query builder bound to this runner."""
        return Sql(self)

    # ── TRANSACTIONS ──────────────────────────────────────

    def start_transaction(self) -> None:
        """Turn auto-commit off on the calling worker's connection."""
        conn = self._current_connection()
        try:
            conn.autocommit = False
        except psycopg2.Error as e:
            raise TransactionError(f"Failed to start transaction: {str(e).strip()}") from e
        logger.debug(f"Transaction started for worker {current_worker()}.")

    def commit(self) -> None:
        """Commit the calling worker's transaction and restore auto-commit."""
        conn = self._current_connection()
        try:
            conn.commit()
            conn.autocommit = True
        except psycopg2.Error as e:
            raise TransactionError(f"Failed to commit: {str(e).strip()}") from e
        logger.debug(f"Transaction committed for worker {current_worker()}.")

    def rollback(self) -> None:
        """Roll back the calling worker's transaction and restore auto-commit."""
        conn = self._current_connection()
        try:
            conn.rollback()
            conn.autocommit = True
        except psycopg2.Error as e:
            raise TransactionError(f"Failed to roll back: {str(e).strip()}") from e
        logger.debug(f"Transaction rolled back for worker {current_worker()}.")

    @contextmanager
    def transaction(self):
        """
        Run a block in one transaction on the calling worker's connection.

        Usage:
            with db.transaction():
                db.insert(...)
                db.update(...)
        """
        self.start_transaction()
        try:
            yield self
        except Exception:
            self.rollback()
            raise
        try:
            self.commit()
        except TransactionError:
            self.rollback()
            raise

    # ── LIFECYCLE ─────────────────────────────────────────

    def close(self) -> None:
        """Close the calling worker's connection."""
        self.registry.release(current_worker())

    def close_all(self) -> None:
        """Close every worker's connection."""
        self.registry.close_all()

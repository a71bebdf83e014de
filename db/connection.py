"""
db/connection.py
----------------
Keeps one PostgreSQL connection per worker thread.

A connection is opened lazily the first time a worker asks for it and is
reused for every later call from that worker until it is released.
This is deliberately not a pool: there is no maximum, no idle timeout
and no health check.
"""

import threading
from typing import Any, Callable, Hashable, Optional

import psycopg2

from db.errors import DbConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)


def current_worker() -> int:
    """Identity of the calling worker (the current thread)."""
    return threading.get_ident()


class ConnectionRegistry:
    """
    Maps a worker identity to its live connection.

    Args:
        connect_kwargs: Keyword arguments for ``psycopg2.connect``
            (host, port, user, password, dbname).
        connect: Factory used to open a connection; defaults to ``psycopg2.connect``.
    """

    def __init__(self, connect_kwargs: dict, connect: Optional[Callable[..., Any]] = None):
        self._connect_kwargs = dict(connect_kwargs)
        self._connect = connect or psycopg2.connect
        self._connections: dict[Hashable, Any] = {}
        # Guards both dicts; never held while a connection is being opened.
        self._lock = threading.Lock()
        # Serializes lookup-then-create for a single worker id.
        self._worker_locks: dict[Hashable, threading.Lock] = {}

    def connection_for(self, worker_id: Hashable):
        """
        Return the connection bound to ``worker_id``, opening it on first use.

        Only callers asking for the same ``worker_id`` wait on each other
        while a connection is being opened.

        Raises:
            DbConnectionError: If the database is unreachable or rejects the credentials.
        """
        with self._lock:
            conn = self._connections.get(worker_id)
            if conn is not None:
                return conn
            worker_lock = self._worker_locks.setdefault(worker_id, threading.Lock())

        with worker_lock:
            with self._lock:
                conn = self._connections.get(worker_id)
            if conn is not None:
                return conn
            try:
                conn = self._connect(**self._connect_kwargs)
                conn.autocommit = True
            except psycopg2.Error as e:
                logger.error(f"Failed to open connection for worker {worker_id}: {e}")
                raise DbConnectionError(str(e)) from e
            with self._lock:
                self._connections[worker_id] = conn
            logger.info(f"Opened connection for worker {worker_id}.")
            return conn

    def release(self, worker_id: Hashable) -> None:
        """Close the connection of ``worker_id`` and forget it. Unknown workers are ignored."""
        with self._lock:
            conn = self._connections.pop(worker_id, None)
        if conn is None:
            return
        try:
            conn.close()
        except psycopg2.Error as e:
            logger.error(f"Failed to close connection for worker {worker_id}: {e}")
            raise DbConnectionError(str(e)) from e
        logger.info(f"Closed connection for worker {worker_id}.")

    def close_all(self) -> None:
        """Release every worker's connection."""
        with self._lock:
            workers = list(self._connections)
        for worker_id in workers:
            self.release(worker_id)

    def __contains__(self, worker_id: Hashable) -> bool:
        with self._lock:
            return worker_id in self._connections

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from threading import Lock
from typing import Iterator, Optional

from hanzi_ruby_lens.db.errors import StorageUnavailable


class AppState:
    """Owns the process-wide connection and serializes access to it.

    Exactly one operation holds the connection at a time, reads included:
    every ``session()`` takes the same lock for its whole duration.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_initialized(self) -> bool:
        return self._conn is not None

    def install(self, conn: sqlite3.Connection) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
            self._conn = conn

    @contextmanager
    def session(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            if self._conn is None:
                raise StorageUnavailable("Database not initialized")
            yield self._conn

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

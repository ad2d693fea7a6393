from __future__ import annotations

import sqlite3
from pathlib import Path


def connect(db_path: str | Path, *, timeout_s: float = 30) -> sqlite3.Connection:
    """Create a SQLite connection with the PRAGMAs the store relies on.

    Notes
    -----
    - WAL lets an external reader (e.g. the sqlite3 shell) open the file while
      the application writes to it.
    - journal_mode is the first statement that reads the file header, so a
      file that is not a database fails here with ``sqlite3.DatabaseError``.
      In-memory databases report ``memory`` and are left as they are.
    """

    # Callers share one connection across threads behind AppState's lock.
    conn = sqlite3.connect(str(db_path), timeout=timeout_s, check_same_thread=False)
    conn.row_factory = sqlite3.Row

    try:
        conn.execute("PRAGMA busy_timeout = 5000;")
        conn.execute("PRAGMA journal_mode = WAL;").fetchone()
        # NORMAL is a reasonable tradeoff for WAL.
        conn.execute("PRAGMA synchronous = NORMAL;")
    except sqlite3.Error:
        conn.close()
        raise

    return conn


def journal_mode(conn: sqlite3.Connection) -> str:
    return str(conn.execute("PRAGMA journal_mode;").fetchone()[0]).lower()

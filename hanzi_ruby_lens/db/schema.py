from __future__ import annotations

import sqlite3

from hanzi_ruby_lens.db.errors import StorageUnavailable

SCHEMA_VERSION = 1

TEXTS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS texts (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    raw_input TEXT NOT NULL DEFAULT '',
    segments TEXT NOT NULL DEFAULT '[]'
);
"""


def schema_version(conn: sqlite3.Connection) -> int:
    return int(conn.execute("PRAGMA user_version;").fetchone()[0])


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create (if needed) the single-row ``texts`` table.

    Idempotent (CREATE TABLE IF NOT EXISTS), so it's safe to call at every
    program start. The schema version lives in ``PRAGMA user_version`` rather
    than in a table of its own; a file stamped by a newer release is refused.
    """

    version = schema_version(conn)
    if version > SCHEMA_VERSION:
        raise StorageUnavailable(
            f"Database schema version {version} is newer than supported "
            f"version {SCHEMA_VERSION}"
        )

    conn.execute(TEXTS_TABLE_DDL)
    if version < SCHEMA_VERSION:
        conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION};")
    conn.commit()

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from hanzi_ruby_lens.db.codec import (
    column_text,
    decode_segments,
    encode_segments,
    ensure_storable_text,
)
from hanzi_ruby_lens.db.connection import connect
from hanzi_ruby_lens.db.errors import (
    DecodingFailure,
    StorageError,
    StorageUnavailable,
    TransactionFailure,
)
from hanzi_ruby_lens.db.schema import ensure_schema
from hanzi_ruby_lens.domain.models import Text

SINGLETON_ID = 1

# Columns are read as raw bytes so that invalid UTF-8 written by an external
# tool surfaces as a decoding error rather than a driver error.
_SELECT_TEXT = """
SELECT
    typeof(raw_input) AS raw_input_type,
    CAST(raw_input AS BLOB) AS raw_input,
    typeof(segments) AS segments_type,
    CAST(segments AS BLOB) AS segments
FROM texts
WHERE id = ?
"""


def initialize(db_path: str | Path) -> sqlite3.Connection:
    """Open (or create) the database at ``db_path`` and ensure the schema.

    A path that cannot be opened, or a file that is not a SQLite database,
    raises :class:`StorageUnavailable`; nothing is recreated in its place.
    """

    try:
        conn = connect(db_path)
    except (sqlite3.Error, OSError) as e:
        raise StorageUnavailable(f"Could not open database at {db_path}: {e}") from e

    try:
        ensure_schema(conn)
    except StorageError:
        conn.close()
        raise
    except sqlite3.Error as e:
        conn.close()
        raise StorageUnavailable(
            f"Could not initialize schema at {db_path}: {e}"
        ) from e

    return conn


def save_text(conn: sqlite3.Connection, text: Text) -> None:
    """Make ``text`` the only stored document.

    Both columns are encoded before anything is touched; the delete and the
    insert then run in one transaction, so a failure leaves the previous row
    in place.
    """

    raw_input = ensure_storable_text(text.raw_input, "raw_input")
    segments_json = encode_segments(text.segments)

    try:
        with conn:
            conn.execute("DELETE FROM texts")
            conn.execute(
                "INSERT INTO texts (id, raw_input, segments) VALUES (?, ?, ?)",
                (SINGLETON_ID, raw_input, segments_json),
            )
    except sqlite3.Error as e:
        raise TransactionFailure(f"Could not save text: {e}") from e


def load_text(conn: sqlite3.Connection) -> Optional[Text]:
    """Return the stored document, or ``None`` if nothing has been saved yet.

    A stored row that does not decode raises :class:`DecodingFailure`; it is
    never reported as an absent document.
    """

    try:
        row = conn.execute(_SELECT_TEXT, (SINGLETON_ID,)).fetchone()
    except sqlite3.Error as e:
        raise StorageUnavailable(f"Could not read text: {e}") from e

    if row is None:
        return None

    raw_input = column_text(row["raw_input_type"], row["raw_input"], "raw_input")
    segments = decode_segments(
        column_text(row["segments_type"], row["segments"], "segments")
    )

    try:
        return Text(raw_input=raw_input, segments=segments)
    except ValidationError as e:
        raise DecodingFailure(f"Stored text is malformed: {e}") from e

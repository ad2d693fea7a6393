"""JSON encoding of the segment list stored in ``texts.segments``.

The blob is a JSON array of tagged objects::

    [{"type": "word", "word": {"characters": "你好", "pinyin": "nǐhǎo"}},
     {"type": "plain", "text": "，"}]

Non-ASCII text is written literally (UTF-8), never ``\\u`` escaped, so the
column stays readable from any SQLite browser.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from hanzi_ruby_lens.db.errors import DecodingFailure, EncodingFailure
from hanzi_ruby_lens.domain.models import TextSegment

_SEGMENTS_ADAPTER: TypeAdapter[List[TextSegment]] = TypeAdapter(List[TextSegment])


def encode_segments(segments: Sequence[TextSegment]) -> str:
    try:
        # warnings="error": a value of the wrong type must not be coerced
        # into some other JSON shape.
        raw = _SEGMENTS_ADAPTER.dump_json(list(segments), warnings="error")
    except (ValueError, TypeError) as e:
        raise EncodingFailure(f"Could not encode segments: {e}") from e
    return raw.decode("utf-8")


def ensure_storable_text(value: str, column: str) -> str:
    """Reject strings SQLite cannot store as UTF-8 (e.g. lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingFailure(f"{column} is not valid UTF-8 text: {e}") from e
    return value


def column_text(storage_class: str, raw: Optional[bytes], column: str) -> str:
    """Turn a column read as ``typeof(col)`` plus ``CAST(col AS BLOB)`` into text.

    Only TEXT values holding valid UTF-8 are accepted.
    """
    if storage_class != "text" or raw is None:
        raise DecodingFailure(f"Stored {column} must be text, got {storage_class}")
    try:
        return bytes(raw).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingFailure(f"Stored {column} is not valid UTF-8: {e}") from e


def decode_segments(blob: str) -> List[TextSegment]:
    if not isinstance(blob, str):
        raise DecodingFailure(
            f"Stored segments must be text, got {type(blob).__name__}"
        )
    try:
        return _SEGMENTS_ADAPTER.validate_json(blob)
    except ValidationError as e:
        raise DecodingFailure(f"Stored segments are malformed: {e}") from e

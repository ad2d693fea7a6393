"""The two commands the GUI shell invokes, plus its startup hook.

Payloads use the caller-facing shape ``{"rawInput": ..., "segments": [...]}``.
Storage errors propagate unchanged; the shell turns them into messages.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import ValidationError

from hanzi_ruby_lens.config import database_path
from hanzi_ruby_lens.db import persistence
from hanzi_ruby_lens.db.errors import EncodingFailure, StorageError, StorageUnavailable
from hanzi_ruby_lens.domain.models import Text
from hanzi_ruby_lens.domain.sample import sample_text
from hanzi_ruby_lens.state import AppState

TextPayload = Dict[str, Any]


def setup(state: AppState, app_data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Open the store under the application data directory and install it.

    Raises StorageUnavailable when the database cannot be used; the host is
    expected to abort startup in that case.
    """
    try:
        db_path = database_path(app_data_dir)
    except OSError as e:
        raise StorageUnavailable(
            f"Could not create data directory {app_data_dir}: {e}"
        ) from e

    state.install(persistence.initialize(db_path))
    logger.info(f"Text store ready at {db_path}")
    return db_path


def _coerce_text(text: Union[Text, TextPayload]) -> Text:
    if isinstance(text, Text):
        return text
    try:
        return Text.from_payload(text)
    except ValidationError as e:
        raise EncodingFailure(f"Invalid text payload: {e}") from e


def save_text(state: AppState, text: Union[Text, TextPayload]) -> None:
    document = _coerce_text(text)
    try:
        with state.session() as conn:
            persistence.save_text(conn, document)
    except StorageError as e:
        logger.warning(f"save_text failed ({e.code}): {e}")
        raise

    logger.debug(f"Saved text with {len(document.segments)} segments")


def load_text(state: AppState) -> Optional[TextPayload]:
    try:
        with state.session() as conn:
            document = persistence.load_text(conn)
    except StorageError as e:
        logger.warning(f"load_text failed ({e.code}): {e}")
        raise

    if document is None:
        logger.debug("No stored text")
        return None
    logger.debug(f"Loaded text with {len(document.segments)} segments")
    return document.to_payload()


def load_text_or_sample(state: AppState) -> TextPayload:
    """Like :func:`load_text`, but falls back to the bundled sample text."""
    payload = load_text(state)
    if payload is None:
        return sample_text().to_payload()
    return payload

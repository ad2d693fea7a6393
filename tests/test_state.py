import sqlite3
import threading

import pytest

from hanzi_ruby_lens.db.errors import StorageUnavailable
from hanzi_ruby_lens.db.persistence import initialize
from hanzi_ruby_lens.state import AppState


def test_session_without_connection_raises():
    state = AppState()
    assert not state.is_initialized
    with pytest.raises(StorageUnavailable):
        with state.session():
            pass


def test_install_replaces_and_closes_previous_connection(tmp_path):
    state = AppState()
    first = initialize(tmp_path / "a.db")
    second = initialize(tmp_path / "b.db")

    state.install(first)
    state.install(second)

    with pytest.raises(sqlite3.ProgrammingError):
        first.execute("SELECT 1")
    with state.session() as conn:
        assert conn is second

    state.close()
    assert not state.is_initialized


def test_second_session_waits_for_the_first(tmp_path):
    state = AppState()
    state.install(initialize(tmp_path / "a.db"))
    entered = threading.Event()

    def other_caller():
        with state.session():
            entered.set()

    try:
        with state.session():
            worker = threading.Thread(target=other_caller)
            worker.start()
            assert not entered.wait(timeout=0.2)

        worker.join(timeout=5)
        assert entered.is_set()
    finally:
        state.close()

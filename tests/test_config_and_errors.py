import sqlite3

from hanzi_ruby_lens.config import (
    APP_NAME,
    DATA_DIR_ENV_VAR,
    DATABASE_FILENAME,
    database_path,
    resolve_app_data_dir,
)
from hanzi_ruby_lens.db.errors import StorageError, TransactionFailure


def test_data_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path / "from-env"))
    assert resolve_app_data_dir() == tmp_path / "from-env"

    path = database_path()
    assert path == tmp_path / "from-env" / DATABASE_FILENAME
    assert path.parent.is_dir()


def test_data_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_app_data_dir() == tmp_path / ".local" / "share" / APP_NAME


def test_error_details_name_the_underlying_exception():
    try:
        try:
            raise sqlite3.OperationalError("disk I/O error")
        except sqlite3.Error as e:
            raise TransactionFailure(f"Could not save text: {e}") from e
    except StorageError as err:
        details = err.to_details_dict()

    assert details == {
        "reason": "Could not save text: disk I/O error",
        "reason_code": "transaction_failure",
        "exception_type": "OperationalError",
    }

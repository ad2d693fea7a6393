import os
from pathlib import Path
from typing import Optional, Union

APP_NAME = "hanzi-ruby-lens"
DATABASE_FILENAME = f"{APP_NAME}.db"

# Set by the host application to its per-user data directory.
DATA_DIR_ENV_VAR = "HANZI_RUBY_LENS_DATA_DIR"


def resolve_app_data_dir() -> Path:
    configured = os.getenv(DATA_DIR_ENV_VAR)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".local" / "share" / APP_NAME


def database_path(app_data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the database file path, creating its directory if needed."""
    data_dir = Path(app_data_dir) if app_data_dir is not None else resolve_app_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DATABASE_FILENAME

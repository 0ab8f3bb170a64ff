# infra/path.py
from __future__ import annotations
import os
from pathlib import Path

DEFAULT_DATA_DIR = "data"
DB_FILENAME = "bhima_cashflow.db"


def data_dir() -> Path:
    """
    Server data directory: BHIMA_DATA_DIR, or ./data under the working directory.
    Holds the default SQLite file and the logs/ folder.
    """
    raw = (os.getenv("BHIMA_DATA_DIR") or "").strip() or DEFAULT_DATA_DIR
    path = Path(raw).expanduser().resolve()
    path.mkdir(parents=True, exist_ok=True)
    return path


def log_dir() -> Path:
    return data_dir() / "logs"


def default_db_path() -> Path:
    return data_dir() / DB_FILENAME


def database_url() -> str:
    override = (os.getenv("BHIMA_DATABASE_URL") or "").strip()
    if override:
        return override
    return f"sqlite:///{default_db_path().as_posix()}"
